"""Configuração de testes pytest."""
import sys
from pathlib import Path

import pytest

# Adicionar src ao path para importação dos módulos
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from sheetapi.helpers import ColumnMapper  # noqa: E402
from sheetapi.models import Cell, Column, Numeric, Row, Sheet, Text  # noqa: E402


@pytest.fixture
def columns() -> list[Column]:
    """Colunas Name (1) e Score (2)."""
    return [
        Column(id=1, index=0, title="Name"),
        Column(id=2, index=1, title="Score"),
    ]


@pytest.fixture
def rows() -> list[Row]:
    """Linhas Alice (90) e Bob (75)."""
    return [
        Row(id=10, row_number=1, cells=[
            Cell(column_id=1, value=Text("Alice")),
            Cell(column_id=2, value=Numeric(90)),
        ]),
        Row(id=11, row_number=2, cells=[
            Cell(column_id=1, value=Text("Bob")),
            Cell(column_id=2, value=Numeric(75)),
        ]),
    ]


@pytest.fixture
def sheet(columns, rows) -> Sheet:
    return Sheet(id=100, name="Scores", columns=columns, rows=rows)


@pytest.fixture
def mapper(columns) -> ColumnMapper:
    return ColumnMapper(columns)
