"""
Units — Централизованный модуль конверсии base units ↔ десятичная запись

Единственный допустимый способ преобразований между:
- base units (целое произвольной точности, например wei или 8-decimals oracle)
- десятичной строкой ("1234.56789"), без какой-либо потери точности

ЗАПРЕЩЕНО делить base units на 10**decimals через float.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Final, Union

from viewfmt.core.math.numerical_safeguards import quantize_context

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Целое со знаком: "-123", "42"
INTEGER_STRING_RE: Final[re.Pattern[str]] = re.compile(r"^-?\d+$")

# Десятичная запись без экспоненты: "-1.5", "0.02", "15.", ".5"
DECIMAL_STRING_RE: Final[re.Pattern[str]] = re.compile(r"^(-?)(\d*)\.?(\d*)$")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDecimalNumberError(ValueError):
    """Строка не является десятичной записью, пригодной для parse_units."""


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def pow10(exponent: int) -> int:
    """
    Целая степень десяти.

    Raises:
        ValueError: Если exponent < 0
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return 10**exponent


def format_units(value: int, decimals: int) -> str:
    """
    Конверсия: base units → точная десятичная строка.

    Хвостовые нули дробной части отбрасываются, ведущий ноль сохраняется.

    Args:
        value: Целое в base units (может быть отрицательным)
        decimals: Число десятичных знаков шкалы (>= 0)

    Returns:
        Десятичная строка без экспоненты

    Raises:
        ValueError: Если decimals < 0

    Examples:
        >>> format_units(123_456_789, 8)
        '1.23456789'
        >>> format_units(-5, 9)
        '-0.000000005'
        >>> format_units(1_000_000, 6)
        '1'
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    negative = value < 0
    digits = str(abs(value))

    if decimals == 0:
        return f"{'-' if negative else ''}{digits}"

    digits = digits.rjust(decimals, "0")
    integer = digits[: len(digits) - decimals]
    fraction = digits[len(digits) - decimals :].rstrip("0")

    text = integer or "0"
    if fraction:
        text = f"{text}.{fraction}"
    return f"-{text}" if negative else text


def parse_units(value: str, decimals: int) -> int:
    """
    Конверсия: десятичная строка → base units.

    Лишние знаки дробной части округляются half-up (от нуля).

    Args:
        value: Десятичная строка ("1.02", "-0.5"); экспонента не допускается
        decimals: Число десятичных знаков шкалы (>= 0)

    Returns:
        Целое в base units

    Raises:
        InvalidDecimalNumberError: Если строка не является десятичной записью
        ValueError: Если decimals < 0

    Examples:
        >>> parse_units("1.02", 8)
        102000000
        >>> parse_units("0.123456789", 6)
        123457
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    text = value.strip()
    match = DECIMAL_STRING_RE.match(text)
    if match is None or not (match.group(2) or match.group(3)):
        raise InvalidDecimalNumberError(f'Number "{value}" is not a valid decimal number')

    return scale_decimal(Decimal(text), decimals)


def scale_decimal(value: Decimal, decimals: int) -> int:
    """
    Конверсия: Decimal → base units с half-up округлением.

    Examples:
        >>> scale_decimal(Decimal("1.02"), 8)
        102000000
    """
    if not value.is_finite():
        raise InvalidDecimalNumberError(f'Number "{value}" is not finite')

    scaled = value.scaleb(decimals, context=quantize_context(value, decimals))
    return int(scaled.to_integral_value(rounding=ROUND_HALF_UP, context=quantize_context(scaled, 0)))


def parse_base_units(value: Union[int, str]) -> int:
    """
    Приведение base units к int.

    Принимает int (не bool), целочисленный float и строку вида "-?\\d+".

    Raises:
        ValueError: Если значение не является целым base units
    """
    if isinstance(value, bool):
        raise ValueError(f"base units must be an integer, got bool {value}")

    if isinstance(value, int):
        return value

    if isinstance(value, float) and value.is_integer():
        return int(value)

    if isinstance(value, str) and INTEGER_STRING_RE.match(value.strip()):
        return int(value.strip())

    raise ValueError(f"base units must be an integer or integer-like string, got {value!r}")


def div_toward_zero(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к -inf; здесь знак результата восстанавливается явно.

    Examples:
        >>> div_toward_zero(7, 2)
        3
        >>> div_toward_zero(-7, 2)
        -3
    """
    if denominator == 0:
        raise ZeroDivisionError("denominator must be non-zero")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# SCALED INTEGER
# =============================================================================


@dataclass(frozen=True)
class ScaledInteger:
    """
    Целое произвольной точности + число десятичных знаков.

    Точно представляет fixed-point значение. Создаётся на один вызов,
    нигде не хранится.
    """

    amount: int
    decimals: int

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")

    def to_decimal_string(self) -> str:
        """Точная десятичная строка (см. format_units)."""
        return format_units(self.amount, self.decimals)

    def to_decimal(self) -> Decimal:
        """Точный Decimal."""
        amount = Decimal(self.amount)
        return amount.scaleb(-self.decimals, context=quantize_context(amount, self.decimals))
