"""
Gateway para acesso à API HTTP.

Camada fina de transporte: autentica com token estático, executa as
requisições e converte as respostas JSON nos modelos da biblioteca. Não há
retry, rate limiting nem paginação automática.

Módulos:
    - connection: Sessão HTTP autenticada
    - operations: Operações sobre planilhas, linhas e colunas
"""

from .connection import Connection, get_connection, get_connection_from_config
from .operations import (
    add_rows,
    delete_rows,
    get_column,
    get_column_by_title,
    get_row,
    get_row_with_column_data,
    get_row_with_multi_contact_info,
    get_sheet,
    get_sheet_by_name,
    get_sheet_with_multi_contact_info,
    list_columns,
    list_sheets,
    update_rows,
)

__all__ = [
    "Connection",
    "get_connection",
    "get_connection_from_config",
    "list_sheets",
    "get_sheet",
    "get_sheet_with_multi_contact_info",
    "get_sheet_by_name",
    "get_row",
    "get_row_with_column_data",
    "get_row_with_multi_contact_info",
    "add_rows",
    "update_rows",
    "delete_rows",
    "list_columns",
    "get_column",
    "get_column_by_title",
]
