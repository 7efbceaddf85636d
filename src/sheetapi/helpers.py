"""
Utilitários de navegação sobre dados já obtidos da API.

- ColumnMapper: mapeamentos nome <-> ID das colunas de uma planilha
- CellGetter: busca de células em uma linha por nome ou ID de coluna
- RowGetter / RowFinder: busca de linhas por condição de igualdade ou desigualdade

Nenhuma operação aqui faz I/O ou altera os dados recebidos.
"""
import logging
from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import Any

from .errors import CellNotFound, ColumnNotFound, MissingColumnDataError, NoMatchingRow
from .models.cell import Cell
from .models.column import Column
from .models.row import Row
from .models.value import CellValue

logger = logging.getLogger(__name__)


class ColumnMapper:
    """
    Mapeamentos *nome da coluna* <-> *ID da coluna* de uma planilha.

    Os mapeamentos guardam cópias dos títulos e IDs, então não dependem da
    lista de colunas original depois de construídos.

    Attributes:
        name_to_id (Mapping[str, int]): Título -> ID (somente leitura).
        id_to_name (Mapping[int, str]): ID -> título (somente leitura).
    """

    def __init__(self, columns: Sequence[Column]):
        """
        Constrói os mapeamentos em uma única passada pelas colunas.

        Args:
            columns (Sequence[Column]): Colunas da planilha ou da linha.

        Raises:
            MissingColumnDataError: Se a lista de colunas estiver vazia.
        """
        if not columns:
            raise MissingColumnDataError()

        name_to_id: dict[str, int] = {}
        id_to_name: dict[int, str] = {}

        for column in columns:
            if column.title in name_to_id:
                logger.warning(
                    "Título de coluna duplicado: '%s' (IDs %d e %d). Usando o último.",
                    column.title,
                    name_to_id[column.title],
                    column.id,
                )
            name_to_id[column.title] = column.id
            id_to_name[column.id] = column.title

        self.name_to_id: Mapping[str, int] = MappingProxyType(name_to_id)
        self.id_to_name: Mapping[int, str] = MappingProxyType(id_to_name)

        logger.debug("Mapeamento de colunas criado: %s", name_to_id)

    def __len__(self) -> int:
        return len(self.id_to_name)

    def __contains__(self, column_name: object) -> bool:
        return column_name in self.name_to_id

    def column_id(self, column_name: str) -> int:
        """
        Resolve o ID de uma coluna pelo nome.

        Raises:
            ColumnNotFound: Se o nome não existir no mapeamento.
        """
        try:
            return self.name_to_id[column_name]
        except KeyError:
            raise ColumnNotFound(column_name) from None

    def column_name(self, column_id: int) -> str | None:
        """Resolve o nome de uma coluna pelo ID, ou None se o ID for desconhecido."""
        return self.id_to_name.get(column_id)


class CellGetter:
    """Busca células em uma linha pelo *nome* ou *ID* da coluna."""

    def __init__(self, columns: ColumnMapper):
        self.columns = columns

    @classmethod
    def from_mapper(cls, columns: ColumnMapper) -> "CellGetter":
        return cls(columns)

    def by_name(self, row: Row, column_name: str) -> Cell:
        """
        Retorna a célula de uma linha pelo nome da coluna.

        Args:
            row (Row): Linha onde a célula será buscada.
            column_name (str): Título da coluna.

        Returns:
            Cell: A célula encontrada.

        Raises:
            ColumnNotFound: Se o nome não existir na planilha.
            CellNotFound: Se a linha não tiver célula para a coluna.
        """
        column_id = self.columns.column_id(column_name)
        try:
            return row.get_cell_by_id(column_id)
        except CellNotFound:
            raise CellNotFound(column_id, row.id, column_name) from None

    def by_id(self, row: Row, column_id: int) -> Cell:
        """
        Retorna a célula de uma linha pelo ID da coluna.

        Raises:
            CellNotFound: Se a linha não tiver célula para a coluna.
        """
        return row.get_cell_by_id(column_id)

    def name_to_cell(self, row: Row) -> dict[str, Cell]:
        """
        Retorna um mapeamento *nome da coluna* -> célula para a linha inteira.

        Mais eficiente que chamadas repetidas a `by_name` quando várias células
        da mesma linha serão lidas. Células de colunas desconhecidas são ignoradas.
        """
        result: dict[str, Cell] = {}
        for cell in row.cells:
            column_name = self.columns.column_name(cell.column_id)
            if column_name is not None:
                result[column_name] = cell
        return result


class Comparison(Enum):
    """Operador de comparação entre o valor buscado e o valor da célula."""
    EQ = "EQ"
    NE = "NE"

    def matches(self, bound: CellValue, actual: CellValue) -> bool:
        """Compara dois valores de célula (mesma variante e mesmo conteúdo para EQ)."""
        if self is Comparison.EQ:
            return bound == actual
        return bound != actual


class RowFinder:
    """
    Busca linhas que satisfazem uma condição sobre a célula de uma coluna.

    Uma linha só é considerada quando a célula existe e possui `value`. Uma
    célula ausente ou sem valor nunca satisfaz a condição, nem para EQ nem
    para NE: "sem valor" não é tratado como "diferente de X".

    Prefira criar instâncias via RowGetter.
    """

    def __init__(self, rows: Sequence[Row], column_id: int, value: Any, comparison: Comparison):
        self.rows = rows
        self.column_id = column_id
        self.value: CellValue = CellValue.from_value(value)
        self.comparison = comparison

    def _matches(self, row: Row) -> bool:
        try:
            cell = row.get_cell_by_id(self.column_id)
        except CellNotFound:
            return False
        if cell.value is None:
            return False
        return self.comparison.matches(self.value, cell.value)

    def _iter_matches(self) -> Iterator[Row]:
        return (row for row in self.rows if self._matches(row))

    def first(self) -> Row:
        """
        Retorna a primeira linha (na ordem original) que satisfaz a condição.

        Raises:
            NoMatchingRow: Se nenhuma linha satisfizer a condição.
        """
        logger.debug(
            "Buscando primeira linha onde coluna %d %s %r em %d linhas.",
            self.column_id,
            self.comparison.value,
            self.value,
            len(self.rows),
        )
        row = next(self._iter_matches(), None)
        if row is None:
            raise NoMatchingRow(self.column_id, self.comparison.value, self.value.encode())
        return row

    def find_all(self) -> list[Row]:
        """
        Retorna todas as linhas que satisfazem a condição, preservando a ordem.

        Uma lista vazia é um resultado válido.
        """
        rows = list(self._iter_matches())
        logger.debug(
            "%d linhas encontradas onde coluna %d %s %r.",
            len(rows),
            self.column_id,
            self.comparison.value,
            self.value,
        )
        return rows


class RowGetter:
    """
    Ponto de entrada para buscar linhas por condição.

    Exemplo:
        >>> get_row = RowGetter(sheet.rows, ColumnMapper(sheet.columns))
        >>> row = get_row.where_eq("Status", "Done").first()
    """

    def __init__(self, rows: Sequence[Row], columns: ColumnMapper):
        self.rows = rows
        self.columns = columns

    def where_eq(self, column_name: str, value: Any) -> RowFinder:
        """
        Condição de igualdade sobre a coluna `column_name`.

        Raises:
            ColumnNotFound: Se o nome não existir na planilha.
        """
        return RowFinder(self.rows, self.columns.column_id(column_name), value, Comparison.EQ)

    def where_eq_by_id(self, column_id: int, value: Any) -> RowFinder:
        return RowFinder(self.rows, column_id, value, Comparison.EQ)

    def where_ne(self, column_name: str, value: Any) -> RowFinder:
        """
        Condição de desigualdade sobre a coluna `column_name`.

        Linhas sem valor na coluna não são retornadas.

        Raises:
            ColumnNotFound: Se o nome não existir na planilha.
        """
        return RowFinder(self.rows, self.columns.column_id(column_name), value, Comparison.NE)

    def where_ne_by_id(self, column_id: int, value: Any) -> RowFinder:
        return RowFinder(self.rows, column_id, value, Comparison.NE)
