"""
Construção de células para requisições de escrita.

Cada tipo de coluna aceita um formato JSON diferente:

- Colunas escalares (TEXT_NUMBER, CHECKBOX, PICKLIST, símbolos): `value`
- Colunas de múltipla seleção: `objectValue` com objectType MULTI_PICKLIST
- Colunas de contato: `objectValue` com objectType CONTACT ou MULTI_CONTACT
- Hyperlinks: `value` (texto exibido) e `hyperlink` ao mesmo tempo

O CellBuilder concentra esse conhecimento para que o chamador não precise
montar `objectValue` manualmente.
"""
import logging
from collections.abc import Iterable
from typing import Any

from .helpers import ColumnMapper
from .models.cell import Cell, Contact, Hyperlink, ObjectType
from .models.value import CellValue, Text

logger = logging.getLogger(__name__)


def _as_contact(contact: Contact | str) -> Contact:
    return contact if isinstance(contact, Contact) else Contact(email=contact)


def _require_collection(values: Any, argument: str) -> None:
    # str também é Iterable[str] e seria dividida em caracteres
    if isinstance(values, str):
        raise TypeError(f"'{argument}' deve ser uma coleção de valores, não uma única str: {values!r}")


class CellBuilder:
    """
    Cria células a partir do nome da coluna e de um valor tipado.

    Todos os métodos por nome levantam ColumnNotFound se a coluna não existir
    na planilha. As variantes `*_with_id` recebem o ID da coluna diretamente.
    """

    def __init__(self, columns: ColumnMapper):
        self.columns = columns

    def cell(self, column_name: str, value: Any) -> Cell:
        """
        Cria uma célula escalar (texto, número, booleano ou opção de símbolo).

        Args:
            column_name (str): Título da coluna.
            value (Any): str, int, float, bool, LightPicker, Decision ou CellValue.

        Returns:
            Cell: Célula com `value` definido e `object_value` vazio.
        """
        return self.cell_with_id(self.columns.column_id(column_name), value)

    def cell_with_id(self, column_id: int, value: Any) -> Cell:
        return Cell(column_id=column_id, value=CellValue.from_value(value))

    def url_hyperlink_cell(self, column_name: str, display_text: str, url: str) -> Cell:
        """
        Cria uma célula com hyperlink para uma URL.

        Args:
            column_name (str): Título da coluna.
            display_text (str): Texto exibido na célula.
            url (str): URL do link.

        Raises:
            ColumnNotFound: Se a coluna não existir na planilha.
            ValueError: Se a URL estiver vazia.
        """
        return self.url_hyperlink_cell_with_id(self.columns.column_id(column_name), display_text, url)

    def url_hyperlink_cell_with_id(self, column_id: int, display_text: str, url: str) -> Cell:
        if not url:
            raise ValueError(f"URL vazia para o hyperlink da coluna {column_id}.")
        return Cell(column_id=column_id, value=Text(display_text), hyperlink=Hyperlink(url=url))

    def multi_picklist_cell(self, column_name: str, values: Iterable[str]) -> Cell:
        """
        Cria uma célula para uma coluna de múltipla seleção.

        Args:
            column_name (str): Título da coluna.
            values (Iterable[str]): Opções selecionadas.

        Returns:
            Cell: Célula com `object_value` MULTI_PICKLIST e sem `value`.

        Raises:
            TypeError: Se `values` for uma única str em vez de uma coleção.
        """
        return self.multi_picklist_cell_with_id(self.columns.column_id(column_name), values)

    def multi_picklist_cell_with_id(self, column_id: int, values: Iterable[str]) -> Cell:
        _require_collection(values, "values")
        return Cell(
            column_id=column_id,
            object_value={
                "objectType": ObjectType.MULTI_PICKLIST.value,
                "values": [str(value) for value in values],
            },
        )

    def contact_cell(self, column_name: str, contact: Contact | str) -> Cell:
        """
        Cria uma célula para uma coluna de contato único.

        Args:
            column_name (str): Título da coluna.
            contact (Contact | str): Contato, ou apenas o e-mail.
        """
        return self.contact_cell_with_id(self.columns.column_id(column_name), contact)

    def contact_cell_with_id(self, column_id: int, contact: Contact | str) -> Cell:
        return Cell(column_id=column_id, object_value=_as_contact(contact).to_dict())

    def multi_contact_cell(self, column_name: str, contacts: Iterable[Contact | str]) -> Cell:
        """
        Cria uma célula para uma coluna de múltiplos contatos.

        Args:
            column_name (str): Título da coluna.
            contacts (Iterable[Contact | str]): Contatos, ou apenas os e-mails.

        Returns:
            Cell: Célula com `object_value` MULTI_CONTACT e sem `value`.

        Raises:
            TypeError: Se `contacts` for uma única str em vez de uma coleção.
        """
        return self.multi_contact_cell_with_id(self.columns.column_id(column_name), contacts)

    def multi_contact_cell_with_id(self, column_id: int, contacts: Iterable[Contact | str]) -> Cell:
        _require_collection(contacts, "contacts")
        values =[_as_contact(contact).to_dict() for contact in contacts]
        logger.debug("Célula MULTI_CONTACT criada para a coluna %d com %d contatos.", column_id, len(values))
        return Cell(
            column_id=column_id,
            object_value={
                "objectType": ObjectType.MULTI_CONTACT.value,
                "values": values,
            },
        )
