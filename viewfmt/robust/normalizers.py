"""
Normalizers — приведение значений неизвестного типа к типам форматтеров

Каждый normalize_* имеет одну форму:
    (value, warnings, errors, field=...) -> typed value | None

- None на входе → None молча (отсутствие, не ошибка)
- Неявное, но допустимое преобразование → строка в warnings
- Непоправимый тип/значение → строка в errors и None
- Исключения наружу не выходят

bool всегда отвергается: в Python это подкласс int, но не число для отображения.
"""

import math
import re
from decimal import Decimal
from typing import Any, Final, List, Optional

from viewfmt.core.math.numerical_safeguards import (
    MAX_SAFE_INTEGER,
    decimal_to_float,
    is_safe_integer,
    to_decimal,
)
from viewfmt.core.math.units import INTEGER_STRING_RE, InvalidDecimalNumberError, parse_units, scale_decimal

# Неотрицательное целое: "0", "18"
DIGITS_STRING_RE: Final[re.Pattern[str]] = re.compile(r"^\d+$")


def describe_runtime_type(value: Any) -> str:
    """
    Имя runtime-типа для сообщений об ошибках.

    Examples:
        >>> describe_runtime_type({"a": 1})
        'dict'
        >>> describe_runtime_type(None)
        'None'
    """
    if value is None:
        return "None"
    return type(value).__name__


def _is_integral_decimal(value: Decimal) -> bool:
    return value.is_finite() and value == value.to_integral_value()


# =============================================================================
# BIG INTEGER
# =============================================================================


def normalize_bigint_value(
    value: Any,
    warnings: List[str],
    errors: List[str],
    field: str = "amount",
) -> Optional[int]:
    """
    Приведение к целому произвольной точности (base units).

    Принимает int; целочисленный конечный float/Decimal (warning);
    строку "-?\\d+" после обрезки пробелов (warning).

    Examples:
        >>> warnings, errors = [], []
        >>> normalize_bigint_value(" 42 ", warnings, errors)
        42
        >>> warnings
        ['amount came as str and was automatically converted to int.']
    """
    if value is None:
        return None

    if isinstance(value, bool):
        errors.append(f'{field} has unsupported runtime type "bool".')
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            errors.append(
                f'{field} has invalid float value "{value!r}"; expected integer-valued number.'
            )
            return None
        warnings.append(f"{field} came as float and was automatically converted to int.")
        return int(value)

    if isinstance(value, Decimal):
        if not _is_integral_decimal(value):
            errors.append(
                f'{field} has invalid Decimal value "{value}"; expected integer-valued number.'
            )
            return None
        warnings.append(f"{field} came as Decimal and was automatically converted to int.")
        return int(value)

    if isinstance(value, str):
        text = value.strip()
        if not INTEGER_STRING_RE.match(text):
            errors.append(f'{field} string "{value}" is not a valid integer string.')
            return None
        warnings.append(f"{field} came as str and was automatically converted to int.")
        return int(text)

    errors.append(f'{field} has unsupported runtime type "{describe_runtime_type(value)}".')
    return None


# =============================================================================
# DECIMALS
# =============================================================================


def normalize_decimals(
    value: Any,
    warnings: List[str],
    errors: List[str],
    field: str = "decimals",
) -> Optional[int]:
    """
    Приведение к неотрицательному целому числу десятичных знаков.

    Диапазон: 0..MAX_SAFE_INTEGER. int — молча; целочисленные float/Decimal
    и строки из цифр — с warning.
    """
    if value is None:
        return None

    if isinstance(value, bool):
        errors.append(f'{field} has unsupported runtime type "bool".')
        return None

    if isinstance(value, int):
        if not 0 <= value <= MAX_SAFE_INTEGER:
            errors.append(f'{field} integer "{value}" is invalid; expected non-negative safe integer.')
            return None
        return value

    if isinstance(value, (float, Decimal)):
        type_name = describe_runtime_type(value)
        number = to_decimal(value)
        if not _is_integral_decimal(number) or not 0 <= number <= MAX_SAFE_INTEGER:
            errors.append(
                f'{field} {type_name} "{value}" is invalid; expected non-negative safe integer.'
            )
            return None
        warnings.append(f"{field} came as {type_name} and was automatically converted to int.")
        return int(number)

    if isinstance(value, str):
        text = value.strip()
        if not DIGITS_STRING_RE.match(text):
            errors.append(
                f'{field} string "{value}" is invalid; expected non-negative integer string.'
            )
            return None
        parsed = int(text)
        if parsed > MAX_SAFE_INTEGER:
            errors.append(f'{field} string "{value}" exceeds safe integer range.')
            return None
        warnings.append(f"{field} came as str and was automatically converted to int.")
        return parsed

    errors.append(f'{field} has unsupported runtime type "{describe_runtime_type(value)}".')
    return None


# =============================================================================
# FINITE NUMBER
# =============================================================================


def normalize_number_value(
    value: Any,
    warnings: List[str],
    errors: List[str],
    field: str = "value",
) -> Optional[float]:
    """
    Приведение к конечному float.

    float — молча; int в safe-integer диапазоне — молча (точно представим);
    конечный Decimal и числовая строка — с warning.

    Examples:
        >>> warnings, errors = [], []
        >>> normalize_number_value("42.42", warnings, errors)
        42.42
        >>> normalize_number_value(float("nan"), warnings, errors) is None
        True
        >>> errors
        ['value float "nan" is not finite.']
    """
    if value is None:
        return None

    if isinstance(value, bool):
        errors.append(
            f'{field} has unsupported runtime type "bool"; expected number-like input.'
        )
        return None

    if isinstance(value, float):
        if not math.isfinite(value):
            errors.append(f'{field} float "{value}" is not finite.')
            return None
        return value

    if isinstance(value, int):
        if not is_safe_integer(value):
            errors.append(
                f'{field} integer "{value}" exceeds safe number range and cannot be converted.'
            )
            return None
        return float(value)

    if isinstance(value, Decimal):
        converted = decimal_to_float(value) if value.is_finite() else math.nan
        if not math.isfinite(converted):
            errors.append(f'{field} Decimal "{value}" is not finite.')
            return None
        warnings.append(f"{field} came as Decimal and was automatically converted to float.")
        return converted

    if isinstance(value, str):
        text = value.strip()
        if not text:
            errors.append(f"{field} string is empty and cannot be converted to float.")
            return None
        number = to_decimal(text)
        converted = decimal_to_float(number) if number.is_finite() else math.nan
        if not math.isfinite(converted):
            errors.append(f'{field} string "{value}" is not a finite numeric representation.')
            return None
        warnings.append(f"{field} came as str and was automatically converted to float.")
        return converted

    errors.append(
        f'{field} has unsupported runtime type "{describe_runtime_type(value)}"; '
        "expected number-like input."
    )
    return None


# =============================================================================
# SYMBOL
# =============================================================================


def normalize_symbol(
    value: Any,
    warnings: List[str],
    errors: List[str],
    field: str = "symbol",
) -> Optional[str]:
    """Символ отображения: только строка (warnings не используется)."""
    if value is None:
        return None

    if isinstance(value, str):
        return value

    errors.append(
        f'{field} has unsupported runtime type "{describe_runtime_type(value)}"; expected str.'
    )
    return None


# =============================================================================
# PRICE
# =============================================================================


def normalize_price_to_scaled_int(
    value: Any,
    price_decimals: Optional[int],
    warnings: List[str],
    errors: List[str],
    field: str = "price",
    decimals_field: str = "price_decimals",
) -> Optional[int]:
    """
    Приведение цены к целому в шкале price_decimals.

    int считается уже масштабированной ценой. float/Decimal/str — десятичная
    запись цены, масштабируется half-up и требует price_decimals.
    Отрицательная цена — ошибка.

    Examples:
        >>> warnings, errors = [], []
        >>> normalize_price_to_scaled_int(1.02, 8, warnings, errors)
        102000000
        >>> normalize_price_to_scaled_int("1.02", 8, warnings, errors)
        102000000
    """
    if value is None:
        return None

    if isinstance(value, bool):
        errors.append(f'{field} has unsupported runtime type "bool".')
        return None

    if isinstance(value, int):
        if value < 0:
            errors.append(f'{field} integer "{value}" cannot be negative.')
            return None
        return value

    if not isinstance(value, (float, Decimal, str)):
        errors.append(f'{field} has unsupported runtime type "{describe_runtime_type(value)}".')
        return None

    if price_decimals is None:
        errors.append(f"{decimals_field} is required to parse non-integer {field} values.")
        return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            errors.append(f"{field} string is empty and cannot be parsed.")
            return None
        try:
            scaled = parse_units(text, price_decimals)
        except InvalidDecimalNumberError as e:
            errors.append(f'{field} string "{value}" is invalid: {e}.')
            return None
        if scaled < 0:
            errors.append(f'{field} string "{value}" cannot be negative.')
            return None
        warnings.append(f"{field} came as str and was parsed into scaled integer price value.")
        return scaled

    type_name = describe_runtime_type(value)
    number = to_decimal(value)
    if not number.is_finite():
        errors.append(f'{field} {type_name} "{value}" is not finite.')
        return None
    if number < 0:
        errors.append(f'{field} {type_name} "{value}" cannot be negative.')
        return None

    return scale_decimal(number, price_decimals)
