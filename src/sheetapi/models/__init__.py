"""
Modelos de dados da API.

Cada entidade sabe se reconstruir a partir da resposta JSON (`from_dict`) e,
quando pode ser enviada ao servidor, se serializar para o corpo da requisição
(`to_dict`), usando os nomes de campo em lowerCamelCase da API.
"""

from .cell import Cell, Contact, Decision, Hyperlink, Image, LightPicker, ObjectType
from .column import Column, ContactOption
from .row import Row, User
from .sheet import IndexResult, RowResult, Sheet, SheetSummary
from .value import Boolean, CellValue, Numeric, Text

__all__ = [
    "Boolean",
    "Cell",
    "CellValue",
    "Column",
    "Contact",
    "ContactOption",
    "Decision",
    "Hyperlink",
    "Image",
    "IndexResult",
    "LightPicker",
    "Numeric",
    "ObjectType",
    "Row",
    "RowResult",
    "Sheet",
    "SheetSummary",
    "Text",
    "User",
]
