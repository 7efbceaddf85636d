from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ContactOption:
    """Opção de contato pré-definida de uma coluna CONTACT_LIST."""
    email: str
    name: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContactOption":
        return cls(email=data.get("email", ""), name=data.get("name"))


@dataclass(frozen=True)
class Column:
    """
    Definição de uma coluna da planilha.

    Colunas são criadas e identificadas pelo servidor; esta biblioteca apenas
    as consome.

    Attributes:
        id (int): ID da coluna, único na planilha e imutável.
        index (int): Posição da coluna (0-based).
        title (str): Título da coluna.
        type (str): Tipo da coluna (TEXT_NUMBER, PICKLIST, CONTACT_LIST, ...).
    """
    id: int
    index: int
    title: str
    type: str = "TEXT_NUMBER"
    locked: bool | None = None
    locked_for_user: bool | None = None
    validation: bool = False
    version: int = 0
    width: int = 0
    description: str | None = None
    options: list[str] | None = None
    hidden: bool | None = None
    symbol: str | None = None
    tags: list[str] | None = None
    primary: bool | None = None
    format: str | None = None
    formula: str | None = None
    contact_options: list[ContactOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Column":
        """Reconstrói uma coluna a partir da resposta da API."""
        return cls(
            id=data["id"],
            index=data.get("index", 0),
            title=data.get("title", ""),
            type=data.get("type", "TEXT_NUMBER"),
            locked=data.get("locked"),
            locked_for_user=data.get("lockedForUser"),
            validation=data.get("validation", False),
            version=data.get("version", 0),
            width=data.get("width", 0),
            description=data.get("description"),
            options=data.get("options"),
            hidden=data.get("hidden"),
            symbol=data.get("symbol"),
            tags=data.get("tags"),
            primary=data.get("primary"),
            format=data.get("format"),
            formula=data.get("formula"),
            contact_options=[
                ContactOption.from_dict(option) for option in data.get("contactOptions") or []
            ],
        )
