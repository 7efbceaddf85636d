"""
Valor escalar de uma célula.

O campo `value` de uma célula é transmitido como um primitivo JSON puro:
texto, número ou booleano, dependendo do tipo da coluna. Não existe marcação
de tipo no formato de transmissão, então a variante é inferida pelo tipo do
primitivo recebido.

Variantes:
- Text: valor textual
- Boolean: valor booleano (colunas CHECKBOX, por exemplo)
- Numeric: valor numérico, inteiro ou ponto flutuante
"""
import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from ..errors import CellValueDecodeError, ValueTypeMismatch


class CellValue:
    """
    Base das variantes de valor de célula.

    Duas instâncias só são iguais quando são da mesma variante e carregam o
    mesmo conteúdo. Numeric(90) e Numeric(90.0) são iguais.
    """
    __slots__ = ()

    value: Any

    @property
    def kind(self) -> str:
        """Nome da variante ativa."""
        return type(self).__name__

    @staticmethod
    def from_value(value: Any) -> "CellValue":
        """
        Converte um valor nativo do Python na variante correspondente.

        Args:
            value (Any): str, bool, int, float, Decimal, um enum de opções
                (LightPicker, Decision) ou um CellValue já construído.

        Returns:
            CellValue: A variante correspondente ao valor.

        Raises:
            ValueError: Se o valor for um float não finito (NaN, infinito).
            TypeError: Se o tipo não for suportado.
        """
        if isinstance(value, CellValue):
            return value
        # bool precisa vir antes de int
        if isinstance(value, bool):
            return Boolean(value)
        if isinstance(value, Enum) and isinstance(value.value, str):
            return Text(value.value)
        if isinstance(value, str):
            return Text(value)
        if isinstance(value, int):
            return Numeric(value)
        if isinstance(value, (float, Decimal)):
            if not math.isfinite(value):
                raise ValueError(f"Valor numérico não finito não é suportado: {value!r}")
            if isinstance(value, Decimal):
                value = int(value) if value == value.to_integral_value() else float(value)
            return Numeric(value)
        raise TypeError(f"Tipo não suportado para valor de célula: {type(value).__name__}")

    @staticmethod
    def decode(wire_value: Any) -> "CellValue":
        """
        Reconstrói um valor a partir do primitivo JSON recebido da API.

        Tenta, nesta ordem: texto, booleano, número.

        Raises:
            CellValueDecodeError: Se o valor for lista, objeto, null ou número não finito.
        """
        if isinstance(wire_value, str):
            return Text(wire_value)
        if isinstance(wire_value, bool):
            return Boolean(wire_value)
        if isinstance(wire_value, (int, float)) and math.isfinite(wire_value):
            return Numeric(wire_value)
        raise CellValueDecodeError(wire_value)

    def encode(self) -> Any:
        """Retorna o primitivo puro, sem marcação de tipo."""
        return self.value

    def _mismatch(self, expected: str, detail: str = "") -> ValueTypeMismatch:
        return ValueTypeMismatch(expected, self.kind, detail)

    def as_text(self) -> str:
        """Retorna o texto, ou levanta ValueTypeMismatch se a variante não for Text."""
        if isinstance(self, Text):
            return self.value
        raise self._mismatch("Text")

    def as_text_safe(self) -> str | None:
        return self.value if isinstance(self, Text) else None

    def as_bool(self) -> bool:
        """Retorna o booleano, ou levanta ValueTypeMismatch se a variante não for Boolean."""
        if isinstance(self, Boolean):
            return self.value
        raise self._mismatch("Boolean")

    def as_bool_safe(self) -> bool | None:
        return self.value if isinstance(self, Boolean) else None

    def as_number(self) -> int | float:
        """Retorna o número, ou levanta ValueTypeMismatch se a variante não for Numeric."""
        if isinstance(self, Numeric):
            return self.value
        raise self._mismatch("Numeric")

    def as_number_safe(self) -> int | float | None:
        return self.value if isinstance(self, Numeric) else None

    def as_int(self) -> int:
        """
        Retorna o número como inteiro sem sinal.

        Raises:
            ValueTypeMismatch: Se a variante não for Numeric, ou se o número for
                negativo ou tiver parte fracionária.
        """
        number = self.as_number()
        if isinstance(number, float):
            if not number.is_integer():
                raise self._mismatch("Numeric", f"O número {number} não é inteiro.")
            number = int(number)
        if number < 0:
            raise self._mismatch("Numeric", f"O número {number} é negativo.")
        return number

    def as_int_safe(self) -> int | None:
        try:
            return self.as_int()
        except ValueTypeMismatch:
            return None

    def as_float(self) -> float:
        """Retorna o número como float."""
        return float(self.as_number())

    def as_float_safe(self) -> float | None:
        number = self.as_number_safe()
        return float(number) if number is not None else None


@dataclass(frozen=True)
class Text(CellValue):
    """Valor textual."""
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Boolean(CellValue):
    """Valor booleano."""
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True)
class Numeric(CellValue):
    """Valor numérico, preserva a representação inteira ou de ponto flutuante."""
    value: int | float

    def __post_init__(self):
        if isinstance(self.value, bool):
            raise TypeError("Numeric não aceita bool; use Boolean.")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError(f"Valor numérico não finito não é suportado: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)
