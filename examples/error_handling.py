"""
Exemplo de tratamento de erros do sheetapi.

Falhas recuperáveis derivam de SheetApiError e carregam o identificador que
causou o erro. MissingColumnDataError indica erro de programação e não deve
ser tratado junto com elas.
"""

import os

from dotenv import load_dotenv

from sheetapi import (
    CellGetter,
    CellNotFound,
    ColumnMapper,
    ColumnNotFound,
    Config,
    MissingColumnDataError,
    NoMatchingRow,
    RequestError,
    RowGetter,
)
from sheetapi.gateway import get_connection_from_config, get_row, get_row_with_column_data

load_dotenv()


def main():
    """Função principal."""
    connection = get_connection_from_config(Config())
    sheet_id = int(os.environ["SHEET_ID"])
    row_id = int(os.environ["ROW_ID"])

    # Linha sem colunas: o mapeamento não pode ser construído
    row = get_row(connection, sheet_id, row_id)
    try:
        ColumnMapper(row.columns)
    except MissingColumnDataError as e:
        print(f"⚠️  {e}")

    row = get_row_with_column_data(connection, sheet_id, row_id)
    columns = ColumnMapper(row.columns)
    get_cell = CellGetter(columns)

    try:
        cell = get_cell.by_name(row, "Score")
        print(f"Nota: {cell.value_as_number()}")
    except ColumnNotFound as e:
        print(f"❌ Coluna inexistente: {e.column_name}")
    except CellNotFound as e:
        print(f"❌ Célula vazia na linha {e.row_id}: {e}")

    try:
        RowGetter([row], columns).where_eq("Name", "Zoe").first()
    except NoMatchingRow as e:
        print(f"🔍 {e}")

    try:
        get_row(connection, sheet_id, 0)
    except RequestError as e:
        code = e.error.error_code if e.error else None
        print(f"🌐 HTTP {e.status} ({code}): {e}")


if __name__ == "__main__":
    main()
