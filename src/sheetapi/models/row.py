"""
Definição da estrutura de uma linha.

Uma linha é uma sequência de células mais metadados. Os mesmos objetos servem
para leitura (resposta da API) e escrita (corpo de requisição):

- Linhas novas usam `id = 0`, e o ID é omitido do corpo da requisição.
- Metadados somente leitura (`row_number`, `created_at`, `permalink`, ...) nunca
  são enviados.
- Especificadores de posição (`to_top`, `to_bottom`, `parent_id`, `sibling_id`,
  `indent`, `outdent`) são instruções de escrita e nunca são lidos da resposta.
  Uma linha obtida da API pode ser reposicionada sem conflito com a posição atual.
"""
import logging
from dataclasses import dataclass, field
from typing import Any

from ..errors import CellNotFound, RowLocationError
from .cell import Cell
from .column import Column

logger = logging.getLogger(__name__)

# Combinações de especificadores aceitas pela API além de um único especificador
_ALLOWED_LOCATION_PAIRS = (
    {"parentId", "toTop"},
    {"parentId", "toBottom"},
)


@dataclass(frozen=True)
class User:
    """Usuário que criou ou modificou uma linha."""
    email: str
    name: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(email=data.get("email", ""), name=data.get("name"))


@dataclass
class Row:
    """
    Uma linha da planilha.

    Attributes:
        id (int): ID da linha. 0 indica uma linha nova, ainda sem ID.
        cells (list[Cell]): Células da linha. Células vazias podem ser omitidas pela API.
        row_number (int): Número da linha na planilha (somente leitura).
        sheet_id (int | None): ID da planilha (somente leitura).
        columns (list[Column]): Colunas, retornadas apenas com include=columns.
        sibling_id (int | None): Especificador de posição: logo abaixo da linha irmã.
        parent_id (int | None): Especificador de posição: linha pai.
        to_top (bool | None): Especificador de posição: topo da planilha (ou do pai).
        to_bottom (bool | None): Especificador de posição: fim da planilha (ou do pai).
        indent (bool): Especificador de posição: indentar a linha um nível.
        outdent (bool): Especificador de posição: remover um nível de indentação.
    """
    id: int = 0
    cells: list[Cell] = field(default_factory=list)
    row_number: int = 0
    sheet_id: int | None = None
    access_level: str | None = None
    attachments: list[dict[str, Any]] | None = None
    columns: list[Column] = field(default_factory=list)
    conditional_format: str | None = None
    created_at: str = ""
    created_by: User | None = None
    discussions: list[dict[str, Any]] | None = None
    expanded: bool | None = None
    filtered_out: bool | None = None
    format: str | None = None
    in_critical_path: bool | None = None
    locked: bool | None = None
    locked_for_user: bool | None = None
    modified_at: str = ""
    modified_by: User | None = None
    permalink: str | None = None
    version: int | None = None
    sibling_id: int | None = None
    parent_id: int | None = None
    to_top: bool | None = None
    to_bottom: bool | None = None
    indent: bool = False
    outdent: bool = False

    def get_cell_by_id(self, column_id: int) -> Cell:
        """
        Retorna a célula da linha para uma coluna.

        Args:
            column_id (int): ID da coluna.

        Returns:
            Cell: A célula encontrada.

        Raises:
            CellNotFound: Se a linha não tiver célula para a coluna.
        """
        for cell in self.cells:
            if cell.column_id == column_id:
                return cell
        raise CellNotFound(column_id, self.id)

    # Especificadores de posição (encadeáveis)

    def with_to_top(self) -> "Row":
        self.to_top = True
        return self

    def with_to_bottom(self) -> "Row":
        self.to_bottom = True
        return self

    def with_parent(self, parent_id: int) -> "Row":
        self.parent_id = parent_id
        return self

    def with_sibling(self, sibling_id: int) -> "Row":
        self.sibling_id = sibling_id
        return self

    def with_indent(self) -> "Row":
        self.indent = True
        return self

    def with_outdent(self) -> "Row":
        self.outdent = True
        return self

    def location_specifiers(self) -> list[str]:
        """Retorna os nomes (no formato da API) dos especificadores de posição ativos."""
        active = {
            "siblingId": self.sibling_id is not None,
            "parentId": self.parent_id is not None,
            "toTop": bool(self.to_top),
            "toBottom": bool(self.to_bottom),
            "indent": self.indent,
            "outdent": self.outdent,
        }
        return [name for name, enabled in active.items() if enabled]

    def validate_location(self) -> None:
        """
        Garante que no máximo um especificador de posição esteja ativo.

        `parentId` pode ser combinado com `toTop` ou `toBottom`.

        Raises:
            RowLocationError: Se houver especificadores conflitantes.
        """
        specifiers = self.location_specifiers()
        if len(specifiers) <= 1 or set(specifiers) in _ALLOWED_LOCATION_PAIRS:
            return
        logger.debug("Especificadores conflitantes na linha %d: %s", self.id, specifiers)
        raise RowLocationError(self.id, specifiers)

    def to_dict(self) -> dict[str, Any]:
        """
        Serializa a linha para o corpo de uma requisição de escrita.

        Raises:
            RowLocationError: Se houver especificadores de posição conflitantes.
        """
        self.validate_location()

        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["cells"] = [cell.to_dict() for cell in self.cells]

        optional = {
            "expanded": self.expanded,
            "format": self.format,
            "locked": self.locked,
            "siblingId": self.sibling_id,
            "parentId": self.parent_id,
            "toTop": self.to_top,
            "toBottom": self.to_bottom,
        }
        data.update({key: value for key, value in optional.items() if value is not None})

        # indent/outdent só aceitam o valor numérico 1
        if self.indent:
            data["indent"] = 1
        if self.outdent:
            data["outdent"] = 1
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Row":
        """Reconstrói uma linha a partir da resposta da API."""
        created_by = data.get("createdBy")
        modified_by = data.get("modifiedBy")
        return cls(
            id=data.get("id", 0),
            cells=[Cell.from_dict(cell) for cell in data.get("cells") or []],
            row_number=data.get("rowNumber", 0),
            sheet_id=data.get("sheetId"),
            access_level=data.get("accessLevel"),
            attachments=data.get("attachments"),
            columns=[Column.from_dict(column) for column in data.get("columns") or []],
            conditional_format=data.get("conditionalFormat"),
            created_at=str(data.get("createdAt", "")),
            created_by=User.from_dict(created_by) if created_by else None,
            discussions=data.get("discussions"),
            expanded=data.get("expanded"),
            filtered_out=data.get("filteredOut"),
            format=data.get("format"),
            in_critical_path=data.get("inCriticalPath"),
            locked=data.get("locked"),
            locked_for_user=data.get("lockedForUser"),
            modified_at=str(data.get("modifiedAt", "")),
            modified_by=User.from_dict(modified_by) if modified_by else None,
            permalink=data.get("permalink"),
            version=data.get("version"),
        )
