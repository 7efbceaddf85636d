"""
Exceções da biblioteca.

Todas as falhas recuperáveis derivam de SheetApiError e carregam o identificador
que causou o erro (nome da coluna, ID da coluna, ID da linha) como atributo.

A exceção MissingColumnDataError fica de fora dessa hierarquia de propósito:
indica erro de programação (o chamador esqueceu de solicitar os dados das
colunas) e não deve ser tratada junto com as falhas recuperáveis.
"""
from dataclasses import dataclass
from typing import Any


class SheetApiError(Exception):
    """Classe base para erros recuperáveis da biblioteca."""


class ColumnNotFound(SheetApiError, LookupError):
    """
    Nome de coluna inexistente no mapeamento de colunas da planilha.

    Attributes:
        column_name (str): Nome (título) da coluna procurada.
    """

    def __init__(self, column_name: str):
        self.column_name = column_name
        super().__init__(f"A coluna '{column_name}' não existe na planilha.")


class SheetNotFound(SheetApiError, LookupError):
    """
    Nenhuma planilha acessível com o nome informado.

    Attributes:
        sheet_name (str): Nome da planilha procurada.
    """

    def __init__(self, sheet_name: str):
        self.sheet_name = sheet_name
        super().__init__(f"Nenhuma planilha encontrada com o nome '{sheet_name}'.")


class CellNotFound(SheetApiError, LookupError):
    """
    A linha não possui célula para uma coluna válida.

    A API omite células vazias, então uma célula ausente não é o mesmo que
    uma célula sem valor.

    Attributes:
        column_id (int): ID da coluna procurada.
        row_id (int): ID da linha onde a busca foi feita.
        column_name (str | None): Nome da coluna, quando a busca foi por nome.
    """

    def __init__(self, column_id: int, row_id: int, column_name: str | None = None):
        self.column_id = column_id
        self.row_id = row_id
        self.column_name = column_name
        label = f"'{column_name}' (ID {column_id})" if column_name else f"ID {column_id}"
        super().__init__(f"Nenhuma célula encontrada para a coluna {label} na linha {row_id}.")


class ValueTypeMismatch(SheetApiError, TypeError):
    """
    Acesso tipado a um valor de célula cujo tipo ativo é outro.

    Attributes:
        expected (str): Tipo solicitado (ex: "Boolean").
        actual (str): Tipo do valor presente, ou "None" se a célula não tem valor.
    """

    def __init__(self, expected: str, actual: str, detail: str = ""):
        self.expected = expected
        self.actual = actual
        message = f"Valor da célula é do tipo {actual}, esperado {expected}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class NoMatchingRow(SheetApiError, LookupError):
    """
    Nenhuma linha satisfaz a condição de busca.

    Attributes:
        column_id (int): ID da coluna usada na condição.
        comparison (str): Operador de comparação ("EQ" ou "NE").
        value (Any): Valor comparado.
    """

    def __init__(self, column_id: int, comparison: str, value: Any):
        self.column_id = column_id
        self.comparison = comparison
        self.value = value
        super().__init__(
            f"Nenhuma linha encontrada onde a coluna {column_id} {comparison} {value!r}."
        )


class CellValueDecodeError(SheetApiError, ValueError):
    """Valor recebido da API não é um primitivo aceito (texto, booleano ou número)."""

    def __init__(self, wire_value: Any):
        self.wire_value = wire_value
        super().__init__(
            f"Valor de célula inválido: esperado texto, booleano ou número, "
            f"recebido {type(wire_value).__name__}."
        )


class RowLocationError(SheetApiError, ValueError):
    """
    Mais de um especificador de posição foi definido na mesma linha.

    Attributes:
        row_id (int): ID da linha (0 para linhas novas).
        specifiers (list[str]): Especificadores ativos.
    """

    def __init__(self, row_id: int, specifiers: list[str]):
        self.row_id = row_id
        self.specifiers = specifiers
        super().__init__(
            f"A linha {row_id} define mais de um especificador de posição: "
            f"{', '.join(specifiers)}."
        )


class RequestError(SheetApiError):
    """
    A API respondeu com status de erro (4xx ou 5xx).

    Os campos `error` e `message` são mutuamente exclusivos: se o corpo da
    resposta não puder ser lido como um objeto de erro da API, `message`
    recebe o conteúdo bruto.

    Attributes:
        status (int): Código HTTP da resposta.
        reason (str): Motivo HTTP da resposta.
        message (str | None): Corpo bruto da resposta, quando não decodificável.
        error (ApiErrorDetail | None): Objeto de erro retornado pela API.
    """

    def __init__(
        self,
        status: int,
        reason: str,
        message: str | None = None,
        error: "ApiErrorDetail | None" = None,
    ):
        self.status = status
        self.reason = reason
        self.message = message
        self.error = error
        detail = error.message if error else message
        super().__init__(f"{status} {reason}: {detail}" if detail else f"{status} {reason}")


@dataclass(frozen=True)
class ApiErrorDetail:
    """Objeto de erro da API (message, errorCode, refId)."""
    message: str
    error_code: int
    ref_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ApiErrorDetail":
        return cls(
            message=data["message"],
            error_code=data["errorCode"],
            ref_id=data.get("refId"),
        )


class MissingColumnDataError(RuntimeError):
    """
    Lista de colunas vazia ao construir o mapeamento de colunas.

    Erro de programação: nenhuma busca posterior poderia ter sucesso.
    """

    def __init__(self):
        super().__init__(
            "Nenhum dado de coluna disponível. Certifique-se de buscar a linha com "
            "get_row_with_column_data() ou de passar include='columns' na requisição."
        )
