"""Testes unitários para ColumnMapper, CellGetter e RowGetter."""
import pytest

from sheetapi.errors import CellNotFound, ColumnNotFound, MissingColumnDataError, NoMatchingRow, SheetApiError
from sheetapi.helpers import CellGetter, ColumnMapper, Comparison, RowFinder, RowGetter
from sheetapi.models import Boolean, Cell, Column, Decision, Numeric, Row, Text


class TestColumnMapper:
    """Testes para ColumnMapper."""

    def test_mappings(self, mapper):
        """Deve mapear nome -> ID e ID -> nome."""
        assert dict(mapper.name_to_id) == {"Name": 1, "Score": 2}
        assert dict(mapper.id_to_name) == {1: "Name", 2: "Score"}
        assert len(mapper) == 2
        assert "Score" in mapper

    def test_mapping_is_bijective(self, columns, mapper):
        """id_to_name[name_to_id[título]] deve retornar o próprio título."""
        for column in columns:
            assert mapper.id_to_name[mapper.name_to_id[column.title]] == column.title

    def test_mappings_are_read_only(self, mapper):
        """Os mapeamentos expostos não devem aceitar escrita."""
        with pytest.raises(TypeError):
            mapper.name_to_id["Other"] = 3

    def test_empty_columns_is_fatal(self):
        """Lista vazia deve levantar MissingColumnDataError, fora da hierarquia recuperável."""
        with pytest.raises(MissingColumnDataError, match="Nenhum dado de coluna"):
            ColumnMapper([])

        assert not issubclass(MissingColumnDataError, SheetApiError)

    def test_column_id_unknown_name(self, mapper):
        """Deve lançar ColumnNotFound com o nome procurado."""
        with pytest.raises(ColumnNotFound) as excinfo:
            mapper.column_id("Nope")

        assert excinfo.value.column_name == "Nope"

    def test_duplicate_titles_keep_last(self):
        """Títulos duplicados usam o último ID encontrado."""
        mapper = ColumnMapper([
            Column(id=1, index=0, title="A"),
            Column(id=2, index=1, title="A"),
        ])

        assert mapper.name_to_id["A"] == 2
        assert mapper.id_to_name == {1: "A", 2: "A"}


class TestCellGetter:
    """Testes para CellGetter."""

    def test_by_name(self, mapper, rows):
        """Deve retornar a célula pelo nome da coluna."""
        get_cell = CellGetter(mapper)

        assert get_cell.by_name(rows[1], "Name").value == Text("Bob")

    def test_by_name_unknown_column(self, mapper, rows):
        """Nome desconhecido deve falhar com ColumnNotFound, independente da linha."""
        get_cell = CellGetter.from_mapper(mapper)

        with pytest.raises(ColumnNotFound, match="NoSuchColumn"):
            get_cell.by_name(rows[0], "NoSuchColumn")
        with pytest.raises(ColumnNotFound):
            get_cell.by_name(Row(id=1), "NoSuchColumn")

    def test_by_name_absent_cell(self, mapper):
        """Coluna válida sem célula na linha deve falhar com CellNotFound."""
        row = Row(id=12, cells=[Cell(column_id=1, value=Text("Carol"))])

        with pytest.raises(CellNotFound, match="'Score'") as excinfo:
            CellGetter(mapper).by_name(row, "Score")

        assert excinfo.value.column_id == 2
        assert excinfo.value.column_name == "Score"
        assert excinfo.value.row_id == 12

    def test_by_id_absent_cell(self, mapper):
        """by_id deve falhar com CellNotFound, não retornar célula padrão."""
        row = Row(id=12, cells=[Cell(column_id=1, value=Text("Carol"))])

        with pytest.raises(CellNotFound):
            CellGetter(mapper).by_id(row, 2)

    def test_name_to_cell(self, mapper, rows):
        """Deve mapear todas as células da linha pelo nome da coluna."""
        cells = CellGetter(mapper).name_to_cell(rows[0])

        assert set(cells) == {"Name", "Score"}
        assert cells["Score"].value == Numeric(90)

    def test_name_to_cell_skips_unknown_columns(self, mapper):
        """Células de colunas fora do mapeamento devem ser ignoradas."""
        row = Row(id=1, cells=[Cell(column_id=1, value=Text("A")), Cell(column_id=77, value=Text("?"))])

        assert list(CellGetter(mapper).name_to_cell(row)) == ["Name"]


class TestComparison:
    """Testes para Comparison.matches."""

    def test_eq_and_ne(self):
        """EQ compara igualdade estrutural; NE, desigualdade."""
        assert Comparison.EQ.matches(Numeric(90.0), Numeric(90))
        assert not Comparison.EQ.matches(Text("90"), Numeric(90))
        assert Comparison.NE.matches(Text("90"), Numeric(90))
        assert not Comparison.NE.matches(Boolean(True), Boolean(True))


class TestRowGetter:
    """Testes para RowGetter e RowFinder."""

    def test_where_eq_first(self, mapper, rows):
        """Deve retornar a primeira linha com valor igual."""
        row = RowGetter(rows, mapper).where_eq("Score", 90.0).first()

        assert row.id == 10

    def test_where_ne_find_all(self, mapper, rows):
        """Deve retornar todas as linhas com valor diferente."""
        result = RowGetter(rows, mapper).where_ne("Score", 90.0).find_all()

        assert [row.id for row in result] == [11]

    def test_where_eq_unknown_column(self, mapper, rows):
        """Coluna desconhecida deve falhar na construção da busca."""
        with pytest.raises(ColumnNotFound):
            RowGetter(rows, mapper).where_eq("Nope", 1)

    def test_first_no_match(self, mapper, rows):
        """first() sem resultado deve levantar NoMatchingRow com o contexto da busca."""
        with pytest.raises(NoMatchingRow) as excinfo:
            RowGetter(rows, mapper).where_eq("Name", "Zoe").first()

        assert excinfo.value.column_id == 1
        assert excinfo.value.comparison == "EQ"
        assert excinfo.value.value == "Zoe"

    def test_find_all_no_match_is_empty(self, mapper, rows):
        """find_all() sem resultado deve retornar lista vazia."""
        assert RowGetter(rows, mapper).where_eq("Name", "Zoe").find_all() == []

    def test_find_all_preserves_order(self, mapper):
        """find_all() deve preservar a ordem das linhas."""
        rows = [Row(id=i, cells=[Cell(column_id=1, value=Text("x"))]) for i in (3, 1, 2)]

        result = RowGetter(rows, mapper).where_eq("Name", "x").find_all()

        assert [row.id for row in result] == [3, 1, 2]

    def test_variant_mismatch_never_equal(self, mapper, rows):
        """Texto "90" não deve casar com o número 90."""
        assert RowGetter(rows, mapper).where_eq("Score", "90").find_all() == []

    def test_enum_values(self, mapper):
        """Opções de símbolo devem ser comparadas pelo texto de exibição."""
        rows = [Row(id=1, cells=[Cell(column_id=1, value=Text("Hold"))])]

        assert RowGetter(rows, mapper).where_eq("Name", Decision.HOLD).first().id == 1

    def test_by_id_variants(self, rows):
        """where_eq_by_id e where_ne_by_id devem dispensar o mapeamento."""
        get_row = RowGetter(rows, ColumnMapper([Column(id=1, index=0, title="Name")]))

        assert get_row.where_eq_by_id(2, 75).first().id == 11
        assert [row.id for row in get_row.where_ne_by_id(2, 75).find_all()] == [10]


class TestAbsentValueSemantics:
    """Células ausentes ou sem valor não satisfazem nem EQ nem NE."""

    @pytest.fixture
    def sparse_rows(self):
        return [
            Row(id=20, cells=[Cell(column_id=1, value=Text("Empty")), Cell(column_id=2)]),
            Row(id=21, cells=[Cell(column_id=1, value=Text("Missing"))]),
        ]

    def test_eq_ignores_rows_without_value(self, mapper, sparse_rows):
        with pytest.raises(NoMatchingRow):
            RowGetter(sparse_rows, mapper).where_eq("Score", 90).first()

    def test_ne_ignores_rows_without_value(self, mapper, sparse_rows):
        """Mesmo "sem valor" sendo intuitivamente diferente de 90, NE não casa."""
        with pytest.raises(NoMatchingRow):
            RowGetter(sparse_rows, mapper).where_ne("Score", 90).first()
        assert RowGetter(sparse_rows, mapper).where_ne("Score", 90).find_all() == []

    def test_finder_direct_construction(self, sparse_rows, rows):
        """RowFinder pode ser construído diretamente com o ID da coluna."""
        finder = RowFinder(sparse_rows + rows, 2, 75, Comparison.NE)

        assert [row.id for row in finder.find_all()] == [10]


class TestEndToEnd:
    """Cenário completo: leitura, busca e construção de células."""

    def test_scenario(self, sheet):
        from sheetapi.builder import CellBuilder

        columns = ColumnMapper(sheet.columns)
        get_row = RowGetter(sheet.rows, columns)

        assert get_row.where_eq("Score", 90.0).first().id == 10
        assert [row.id for row in get_row.where_ne("Score", 90.0).find_all()] == [11]

        cell = CellBuilder(columns).cell("Score", 100.0)

        assert cell.column_id == 2
        assert cell.value == Numeric(100.0)
        assert cell.to_dict() == {"columnId": 2, "value": 100.0}
