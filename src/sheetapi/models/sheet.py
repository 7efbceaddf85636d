"""
Definição da planilha e dos envelopes de resposta da API.
"""
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ..errors import ColumnNotFound
from .column import Column
from .row import Row

ItemType = TypeVar("ItemType")


@dataclass
class Sheet:
    """
    Planilha: colunas, linhas e metadados.

    Attributes:
        id (int): ID da planilha.
        name (str): Nome da planilha.
        columns (list[Column]): Colunas da planilha.
        rows (list[Row]): Linhas da planilha.
        total_row_count (int): Total de linhas na planilha.
    """
    id: int
    name: str
    columns: list[Column] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)
    owner: str | None = None
    owner_id: int | None = None
    total_row_count: int = 0
    access_level: str = ""
    created_at: str = ""
    modified_at: str = ""
    permalink: str = ""
    version: int | None = None
    favorite: bool | None = None
    read_only: bool | None = None
    dependencies_enabled: bool | None = None
    gantt_enabled: bool | None = None
    is_multi_picklist_enabled: bool | None = None

    def get_row_by_id(self, row_id: int) -> Row | None:
        """Retorna a linha com o ID informado, ou None se não existir."""
        for row in self.rows:
            if row.id == row_id:
                return row
        return None

    def get_column_by_title(self, title: str) -> Column:
        """
        Retorna a coluna com o título informado.

        Raises:
            ColumnNotFound: Se nenhuma coluna tiver esse título.
        """
        for column in self.columns:
            if column.title == title:
                return column
        raise ColumnNotFound(title)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Sheet":
        """Reconstrói uma planilha a partir da resposta da API."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            columns=[Column.from_dict(column) for column in data.get("columns") or []],
            rows=[Row.from_dict(row) for row in data.get("rows") or []],
            owner=data.get("owner"),
            owner_id=data.get("ownerId"),
            total_row_count=data.get("totalRowCount", 0),
            access_level=data.get("accessLevel", ""),
            created_at=str(data.get("createdAt", "")),
            modified_at=str(data.get("modifiedAt", "")),
            permalink=data.get("permalink", ""),
            version=data.get("version"),
            favorite=data.get("favorite"),
            read_only=data.get("readOnly"),
            dependencies_enabled=data.get("dependenciesEnabled"),
            gantt_enabled=data.get("ganttEnabled"),
            is_multi_picklist_enabled=data.get("isMultiPicklistEnabled"),
        )


@dataclass
class IndexResult(Generic[ItemType]):
    """
    Envelope paginado de listagens (sheets, columns, ...).

    Apenas a página retornada é lida; percorrer as demais páginas fica a cargo
    do chamador.
    """
    page_number: int = 1
    page_size: int | None = None
    total_pages: int = 0
    total_count: int = 0
    data: list[ItemType] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls,
        payload: dict[str, Any],
        item_factory: Callable[[dict[str, Any]], ItemType],
    ) -> "IndexResult[ItemType]":
        return cls(
            page_number=payload.get("pageNumber", 1),
            page_size=payload.get("pageSize"),
            total_pages=payload.get("totalPages", 0),
            total_count=payload.get("totalCount", 0),
            data=[item_factory(item) for item in payload.get("data") or []],
        )


@dataclass
class SheetSummary:
    """Item de listagem de planilhas (sem colunas nem linhas)."""
    id: int
    name: str
    access_level: str = ""
    permalink: str = ""
    created_at: str = ""
    modified_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SheetSummary":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            access_level=data.get("accessLevel", ""),
            permalink=data.get("permalink", ""),
            created_at=str(data.get("createdAt", "")),
            modified_at=str(data.get("modifiedAt", "")),
        )


@dataclass
class RowResult:
    """Resposta de operações de escrita em linhas (adicionar, atualizar)."""
    message: str = ""
    result_code: int = 0
    result: list[Row] = field(default_factory=list)
    version: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RowResult":
        return cls(
            message=data.get("message", ""),
            result_code=data.get("resultCode", 0),
            result=[Row.from_dict(row) for row in data.get("result") or []],
            version=data.get("version"),
        )
