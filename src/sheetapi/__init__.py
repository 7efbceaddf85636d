"""
sheetapi

Cliente tipado para a API de planilhas (sheets, rows, columns, cells).

Este módulo expõe as principais classes para uso externo:

- Config: Configuração do cliente (token de acesso, endpoint)
- ColumnMapper, CellGetter, RowGetter: Navegação sobre planilhas já obtidas
- CellBuilder: Construção de células para requisições de escrita
- Modelos: Sheet, Row, Column, Cell, CellValue (Text, Boolean, Numeric), ...
"""

from .__version__ import __version__
from .builder import CellBuilder
from .config import Config
from .errors import (
    CellNotFound,
    CellValueDecodeError,
    ColumnNotFound,
    MissingColumnDataError,
    NoMatchingRow,
    RequestError,
    RowLocationError,
    SheetApiError,
    SheetNotFound,
    ValueTypeMismatch,
)
from .helpers import CellGetter, ColumnMapper, Comparison, RowFinder, RowGetter
from .models import (
    Boolean,
    Cell,
    CellValue,
    Column,
    Contact,
    Decision,
    Hyperlink,
    LightPicker,
    Numeric,
    ObjectType,
    Row,
    Sheet,
    Text,
)

__all__ = [
    '__version__',
    'Config',
    'CellBuilder',
    'CellGetter',
    'ColumnMapper',
    'Comparison',
    'RowFinder',
    'RowGetter',
    'Boolean',
    'Cell',
    'CellValue',
    'Column',
    'Contact',
    'Decision',
    'Hyperlink',
    'LightPicker',
    'Numeric',
    'ObjectType',
    'Row',
    'Sheet',
    'Text',
    'SheetApiError',
    'ColumnNotFound',
    'CellNotFound',
    'SheetNotFound',
    'ValueTypeMismatch',
    'NoMatchingRow',
    'CellValueDecodeError',
    'RowLocationError',
    'RequestError',
    'MissingColumnDataError',
]
