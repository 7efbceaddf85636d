"""Ponto de entrada para execução do módulo como script."""

import argparse
import logging
import sys

from .config import Config
from .errors import SheetApiError
from .gateway import get_connection_from_config, get_sheet
from .helpers import CellGetter, ColumnMapper, RowGetter


def _parse_value(raw: str) -> str | bool | int | float:
    """Interpreta o valor da linha de comando como booleano, número ou texto."""
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    return raw


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetapi",
        description="Busca linhas de uma planilha onde uma coluna é igual (ou diferente) de um valor.",
    )
    parser.add_argument("sheet_id", type=int, help="ID da planilha")
    parser.add_argument("column", help="Título da coluna usada na busca")
    parser.add_argument("value", help="Valor comparado (texto, número, true/false)")
    parser.add_argument("--ne", action="store_true", help="Busca linhas com valor diferente")
    parser.add_argument("--first", action="store_true", help="Retorna apenas a primeira linha")
    parser.add_argument("-v", "--verbose", action="store_true", help="Habilita logs de debug")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Função principal: busca a planilha e imprime as linhas encontradas."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        connection = get_connection_from_config(Config())
        sheet = get_sheet(connection, args.sheet_id)

        columns = ColumnMapper(sheet.columns)
        get_cell = CellGetter(columns)
        get_row = RowGetter(sheet.rows, columns)

        value = _parse_value(args.value)
        finder = get_row.where_ne(args.column, value) if args.ne else get_row.where_eq(args.column, value)
        rows = [finder.first()] if args.first else finder.find_all()

        print(f"{len(rows)} linha(s) encontrada(s) em '{sheet.name}'")
        for row in rows:
            cells = get_cell.name_to_cell(row)
            values = {name: cell.value.encode() if cell.value is not None else None for name, cell in cells.items()}
            print(f"  [{row.row_number}] id={row.id} {values}")
        return 0

    except (SheetApiError, ValueError) as e:
        print(f"Erro: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
