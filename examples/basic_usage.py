"""
Exemplo básico de uso do sheetapi.

Este script demonstra como obter uma planilha, buscar linhas por valor de
coluna e atualizar uma célula.

Variáveis de ambiente:
    SMARTSHEET_ACCESS_TOKEN: Token de acesso da API
    SHEET_ID: ID da planilha usada no exemplo
"""

import logging
import os

from dotenv import load_dotenv

from sheetapi import CellBuilder, CellGetter, ColumnMapper, Config, Row, RowGetter
from sheetapi.gateway import get_connection_from_config, get_sheet, update_rows

# Carrega variáveis de ambiente do arquivo .env
load_dotenv()


def main():
    """Função principal."""
    logging.basicConfig(level=logging.INFO)

    connection = get_connection_from_config(Config())
    sheet = get_sheet(connection, int(os.environ["SHEET_ID"]))

    print("=" * 60)
    print(f"📊 Planilha: {sheet.name} ({len(sheet.rows)} linhas)")
    print("=" * 60)

    columns = ColumnMapper(sheet.columns)
    get_cell = CellGetter(columns)
    get_row = RowGetter(sheet.rows, columns)

    # Todas as linhas com nota diferente de 90
    for row in get_row.where_ne("Score", 90).find_all():
        name = get_cell.by_name(row, "Name").value_as_text_safe()
        print(f"  [{row.row_number}] {name}")

    # Primeira linha com nota 90 recebe nota 100
    row = get_row.where_eq("Score", 90).first()
    cell = CellBuilder(columns).cell("Score", 100)

    result = update_rows(connection, sheet.id, [Row(id=row.id, cells=[cell])])
    print(f"✅ {len(result.result)} linha(s) atualizada(s)")


if __name__ == "__main__":
    main()
