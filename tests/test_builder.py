"""Testes unitários para o módulo builder."""
import pytest

from sheetapi.builder import CellBuilder
from sheetapi.errors import ColumnNotFound
from sheetapi.helpers import ColumnMapper
from sheetapi.models import Boolean, Column, Contact, Decision, Hyperlink, LightPicker, Numeric, Text


@pytest.fixture
def builder() -> CellBuilder:
    return CellBuilder(ColumnMapper([
        Column(id=1, index=0, title="Col", type="TEXT_NUMBER"),
        Column(id=2, index=1, title="Tags", type="MULTI_PICKLIST"),
        Column(id=3, index=2, title="Owner", type="CONTACT_LIST"),
        Column(id=4, index=3, title="Team", type="MULTI_CONTACT_LIST"),
        Column(id=5, index=4, title="Link", type="TEXT_NUMBER"),
        Column(id=6, index=5, title="Status", type="PICKLIST"),
    ]))


class TestScalarCell:
    """Testes para CellBuilder.cell."""

    def test_text_cell(self, builder):
        """Célula escalar deve ter value e nenhum object_value."""
        cell = builder.cell("Col", "x")

        assert cell.column_id == 1
        assert cell.value == Text("x")
        assert cell.object_value is None
        assert cell.to_dict() == {"columnId": 1, "value": "x"}

    def test_number_and_bool_cells(self, builder):
        """Deve converter números e booleanos na variante correspondente."""
        assert builder.cell("Col", 100.0).value == Numeric(100.0)
        assert builder.cell("Col", 7).value == Numeric(7)
        assert builder.cell("Col", False).value == Boolean(False)

    def test_enum_cells(self, builder):
        """Opções de símbolo devem virar o texto de exibição."""
        assert builder.cell("Status", LightPicker.RED).value == Text("Red")
        assert builder.cell("Status", Decision.YES).to_dict() == {"columnId": 6, "value": "Yes"}

    def test_cell_with_id(self, builder):
        """Deve aceitar o ID da coluna diretamente."""
        assert builder.cell_with_id(42, "x").column_id == 42

    def test_unknown_column(self, builder):
        """Coluna desconhecida deve falhar com ColumnNotFound."""
        with pytest.raises(ColumnNotFound, match="Missing"):
            builder.cell("Missing", "x")


class TestMultiPicklistCell:
    """Testes para CellBuilder.multi_picklist_cell."""

    def test_multi_picklist_shape(self, builder):
        """Deve usar object_value MULTI_PICKLIST e deixar value vazio."""
        cell = builder.multi_picklist_cell("Tags", ["A", "B"])

        assert cell.value is None
        assert cell.object_value == {"objectType": "MULTI_PICKLIST", "values": ["A", "B"]}
        assert cell.to_dict() == {
            "columnId": 2,
            "objectValue": {"objectType": "MULTI_PICKLIST", "values": ["A", "B"]},
        }

    def test_multi_picklist_rejects_single_str(self, builder):
        """Uma única str não deve ser dividida em caracteres."""
        with pytest.raises(TypeError, match="'Red'"):
            builder.multi_picklist_cell("Tags", "Red")

    def test_multi_picklist_accepts_any_collection(self, builder):
        """Deve aceitar tuplas e geradores, preservando a ordem."""
        cell = builder.multi_picklist_cell("Tags", (tag for tag in ("Red",)))

        assert cell.object_value["values"] == ["Red"]

    def test_multi_picklist_unknown_column(self, builder):
        with pytest.raises(ColumnNotFound):
            builder.multi_picklist_cell("Nope", ["A"])


class TestContactCells:
    """Testes para células de contato."""

    def test_contact_cell(self, builder):
        """Contato único deve virar objectValue CONTACT."""
        cell = builder.contact_cell("Owner", Contact("a@b.com", "Ana"))

        assert cell.value is None
        assert cell.object_value == {"objectType": "CONTACT", "email": "a@b.com", "name": "Ana"}

    def test_contact_cell_from_email(self, builder):
        """Deve aceitar apenas o e-mail."""
        cell = builder.contact_cell("Owner", "a@b.com")

        assert cell.object_value == {"objectType": "CONTACT", "email": "a@b.com"}

    def test_multi_contact_cell(self, builder):
        """Múltiplos contatos devem virar objectValue MULTI_CONTACT."""
        cell = builder.multi_contact_cell("Team", [Contact("a@b.com", "Ana"), "c@d.com"])

        assert cell.column_id == 4
        assert cell.value is None
        assert cell.object_value == {
            "objectType": "MULTI_CONTACT",
            "values": [
                {"objectType": "CONTACT", "email": "a@b.com", "name": "Ana"},
                {"objectType": "CONTACT", "email": "c@d.com"},
            ],
        }
        assert cell.contacts() == [Contact("a@b.com", "Ana"), Contact("c@d.com")]

    def test_multi_contact_rejects_single_str(self, builder):
        """Um único e-mail como str não deve virar um contato por caractere."""
        with pytest.raises(TypeError, match="'ab@x'"):
            builder.multi_contact_cell("Team", "ab@x")

        assert builder.multi_contact_cell("Team", ["ab@x"]).contacts() == [Contact("ab@x")]

    def test_multi_contact_unknown_column(self, builder):
        with pytest.raises(ColumnNotFound):
            builder.multi_contact_cell("Nope", [])


class TestHyperlinkCell:
    """Testes para CellBuilder.url_hyperlink_cell."""

    def test_url_hyperlink_sets_value_and_link(self, builder):
        """Deve definir value (texto exibido) e hyperlink ao mesmo tempo."""
        cell = builder.url_hyperlink_cell("Link", "Example", "https://example.com")

        assert cell.value == Text("Example")
        assert cell.hyperlink == Hyperlink(url="https://example.com")
        assert cell.to_dict() == {
            "columnId": 5,
            "value": "Example",
            "hyperlink": {"url": "https://example.com"},
        }

    def test_url_hyperlink_rejects_empty_url(self, builder):
        """URL vazia não deve gerar um hyperlink vazio no corpo da requisição."""
        with pytest.raises(ValueError, match="URL vazia"):
            builder.url_hyperlink_cell("Link", "Example", "")

    def test_url_hyperlink_unknown_column(self, builder):
        with pytest.raises(ColumnNotFound):
            builder.url_hyperlink_cell("Nope", "x", "https://example.com")
