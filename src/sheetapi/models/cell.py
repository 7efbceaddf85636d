"""
Definição das estruturas de uma célula.

Uma célula é a interseção de uma linha com uma coluna. Além do valor escalar
(`value`), pode carregar um valor estruturado (`object_value`, usado por
colunas de múltipla seleção e de contatos), um hyperlink e campos que só
existem na resposta da API (`display_value`, `formula`, ...) ou só na
requisição (`strict`, `override_validation`).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import ValueTypeMismatch
from .value import CellValue


class ObjectType(str, Enum):
    """Valores aceitos no campo `objectType` de um `objectValue`."""
    ABSTRACT_DATETIME = "ABSTRACT_DATETIME"
    CONTACT = "CONTACT"
    DATE = "DATE"
    DATETIME = "DATETIME"
    DURATION = "DURATION"
    MULTI_CONTACT = "MULTI_CONTACT"
    MULTI_PICKLIST = "MULTI_PICKLIST"
    PREDECESSOR_LIST = "PREDECESSOR_LIST"

    def __str__(self) -> str:
        return self.value


class LightPicker(str, Enum):
    """Opções de uma coluna de símbolo do tipo semáforo."""
    RED = "Red"
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"
    GRAY = "Gray"

    def __str__(self) -> str:
        return self.value


class Decision(str, Enum):
    """Opções de uma coluna de símbolo do tipo decisão."""
    YES = "Yes"
    HOLD = "Hold"
    NO = "No"

    def __str__(self) -> str:
        return self.value


@dataclass
class Hyperlink:
    """
    Link de uma célula para uma URL, relatório, planilha ou dashboard.

    Por convenção apenas um dos destinos é definido. Quando o link aponta para
    um relatório, planilha ou dashboard, `url` contém o permalink do recurso.

    Attributes:
        url (str): URL do link.
        report_id (int | None): ID do relatório de destino.
        sheet_id (int | None): ID da planilha de destino.
        sight_id (int | None): ID do dashboard de destino.
    """
    url: str = ""
    report_id: int | None = None
    sheet_id: int | None = None
    sight_id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.url:
            data["url"] = self.url
        if self.report_id is not None:
            data["reportId"] = self.report_id
        if self.sheet_id is not None:
            data["sheetId"] = self.sheet_id
        if self.sight_id is not None:
            data["sightId"] = self.sight_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Hyperlink":
        return cls(
            url=data.get("url", ""),
            report_id=data.get("reportId"),
            sheet_id=data.get("sheetId"),
            sight_id=data.get("sightId"),
        )


@dataclass(frozen=True)
class Contact:
    """
    Contato usado em colunas CONTACT_LIST e MULTI_CONTACT_LIST.

    Attributes:
        email (str): Endereço de e-mail (obrigatório).
        name (str | None): Nome de exibição.
    """
    email: str
    name: str | None = None

    @property
    def addr(self) -> str:
        """Endereço no formato 'Nome <email>', ou apenas o e-mail se não houver nome."""
        if self.name:
            return f"{self.name} <{self.email}>"
        return self.email

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"objectType": ObjectType.CONTACT.value, "email": self.email}
        if self.name is not None:
            data["name"] = self.name
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        return cls(email=data.get("email", ""), name=data.get("name"))


@dataclass(frozen=True)
class Image:
    """Imagem inserida em uma célula (somente leitura)."""
    id: str
    alt_text: str = ""
    height: int = 0
    width: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Image":
        return cls(
            id=data.get("id", ""),
            alt_text=data.get("altText", ""),
            height=data.get("height", 0),
            width=data.get("width", 0),
        )


@dataclass
class Cell:
    """
    Uma célula de uma linha.

    Campos de resposta (`display_value`, `column_type`, `conditional_format`,
    `formula`, `format`, `image`) nunca são enviados em requisições de escrita.
    Campos de requisição (`strict`, `override_validation`) nunca são lidos de
    respostas.

    Attributes:
        column_id (int): ID da coluna onde a célula está.
        value (CellValue | None): Valor bruto editável. Células vazias não têm valor.
        display_value (str | None): Valor formatado para exibição, calculado pelo servidor.
        object_value (Any): Representação estruturada do valor (múltipla seleção, contatos).
        hyperlink (Hyperlink | None): Link da célula.
        column_type (str | None): Tipo da coluna, se solicitado via include=columnType.
        conditional_format (str | None): Descritor de formatação condicional.
        format (str | None): Descritor de formatação.
        formula (str | None): Fórmula da célula, ex: "=COUNTM([Assigned To]3)".
        image (Image | None): Imagem da célula.
        strict (bool | None): False habilita parsing leniente na escrita.
        override_validation (bool | None): (Admin) permite valor fora da validação.
    """
    column_id: int
    value: CellValue | None = None
    display_value: str | None = None
    object_value: Any = None
    hyperlink: Hyperlink | None = None
    column_type: str | None = None
    conditional_format: str | None = None
    format: str | None = None
    formula: str | None = None
    image: Image | None = None
    strict: bool | None = None
    override_validation: bool | None = None

    def with_strict(self, strict: bool) -> "Cell":
        """Define `strict` e retorna a própria célula."""
        self.strict = strict
        return self

    def with_override_validation(self, override: bool) -> "Cell":
        """Define `override_validation` e retorna a própria célula."""
        self.override_validation = override
        return self

    def _require_value(self, expected: str) -> CellValue:
        if self.value is None:
            raise ValueTypeMismatch(expected, "None", f"A célula da coluna {self.column_id} está vazia.")
        return self.value

    def value_as_text(self) -> str:
        return self._require_value("Text").as_text()

    def value_as_text_safe(self) -> str | None:
        return self.value.as_text_safe() if self.value is not None else None

    def value_as_number(self) -> int | float:
        return self._require_value("Numeric").as_number()

    def value_as_bool(self) -> bool:
        return self._require_value("Boolean").as_bool()

    def value_as_int(self) -> int:
        return self._require_value("Numeric").as_int()

    def value_as_float(self) -> float:
        return self._require_value("Numeric").as_float()

    def display_value_as_text(self) -> str:
        """
        Retorna o valor de exibição.

        Raises:
            ValueTypeMismatch: Se o servidor não retornou valor de exibição.
        """
        if self.display_value is None:
            raise ValueTypeMismatch("Text", "None", f"A célula da coluna {self.column_id} não tem valor de exibição.")
        return self.display_value

    def link_url(self) -> str:
        """Retorna a URL do hyperlink, ou levanta ValueTypeMismatch se não houver link."""
        if self.hyperlink is None:
            raise ValueTypeMismatch("Hyperlink", "None", f"A célula da coluna {self.column_id} não tem hyperlink.")
        return self.hyperlink.url

    def link_url_safe(self) -> str | None:
        return self.hyperlink.url if self.hyperlink is not None else None

    def values(self) -> list[Any]:
        """
        Retorna a lista `values` do `object_value`.

        Assume que o `objectType` é MULTI_PICKLIST ou MULTI_CONTACT.

        Raises:
            ValueTypeMismatch: Se não houver `object_value` com uma lista `values`.
        """
        if isinstance(self.object_value, dict):
            values = self.object_value.get("values")
            if isinstance(values, list):
                return values
        raise ValueTypeMismatch(
            "ObjectValue",
            type(self.object_value).__name__ if self.object_value is not None else "None",
            f"A célula da coluna {self.column_id} não contém uma lista de valores.",
        )

    def contacts(self) -> list[Contact]:
        """Retorna os contatos de uma célula MULTI_CONTACT."""
        return [Contact.from_dict(item) for item in self.values()]

    def to_dict(self) -> dict[str, Any]:
        """
        Serializa a célula para o corpo de uma requisição de escrita.

        Returns:
            dict[str, Any]: `columnId` mais os campos graváveis definidos.
        """
        data: dict[str, Any] = {"columnId": self.column_id}
        if self.value is not None:
            data["value"] = self.value.encode()
        if self.object_value is not None:
            data["objectValue"] = self.object_value
        if self.hyperlink is not None:
            data["hyperlink"] = self.hyperlink.to_dict()
        if self.strict is not None:
            data["strict"] = self.strict
        if self.override_validation is not None:
            data["overrideValidation"] = self.override_validation
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Cell":
        """Reconstrói uma célula a partir da resposta da API."""
        value = data.get("value")
        hyperlink = data.get("hyperlink")
        image = data.get("image")
        return cls(
            column_id=data["columnId"],
            value=CellValue.decode(value) if value is not None else None,
            display_value=data.get("displayValue"),
            object_value=data.get("objectValue"),
            hyperlink=Hyperlink.from_dict(hyperlink) if hyperlink is not None else None,
            column_type=data.get("columnType"),
            conditional_format=data.get("conditionalFormat"),
            format=data.get("format"),
            formula=data.get("formula"),
            image=Image.from_dict(image) if image is not None else None,
        )
