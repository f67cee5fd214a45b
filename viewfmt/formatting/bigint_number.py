"""
Scaled-Integer Formatter — base units → ViewNumber

Конвертирует целое в base units (например, 8-decimals USD oracle) в точную
десятичную строку через format_units, затем полностью делегирует
Numeric Formatter и добавляет decimals к результату.
"""

from typing import Any, Mapping, Optional, Union

from viewfmt.core.domain.view_values import DEFAULT_CURRENCY_SYMBOL, ViewNumber
from viewfmt.core.math.units import ScaledInteger, parse_base_units
from viewfmt.formatting.config import NumberFormatConfig
from viewfmt.formatting.errors import InvalidAmountError, MissingDecimalsError
from viewfmt.formatting.number import format_number_to_view_number


def to_scaled_integer(value: Union[int, str], decimals: Optional[int]) -> ScaledInteger:
    """
    Сборка ScaledInteger из сырого значения и decimals.

    Raises:
        MissingDecimalsError: Если decimals is None
        InvalidAmountError: Если value не приводится к целому
    """
    if decimals is None:
        raise MissingDecimalsError("decimals is required to format a base-units value")

    try:
        amount = parse_base_units(value)
    except ValueError as e:
        raise InvalidAmountError(f"value must be an int or integer-like string: {e}") from e

    return ScaledInteger(amount=amount, decimals=decimals)


def format_bigint_to_view_number(
    value: Optional[Union[int, str]],
    decimals: Optional[int],
    symbol: Optional[str] = DEFAULT_CURRENCY_SYMBOL,
    config: Union[NumberFormatConfig, Mapping[str, Any], None] = None,
) -> Optional[ViewNumber]:
    """
    Форматирование значения в base units как числа.

    Args:
        value: Целое в base units (int или строка "-?\\d+"); None → None
        decimals: Число десятичных знаков value (обязательно, например 8)
        symbol: Символ, возвращаемый отдельно (default "$")
        config: Опции, передаваемые в format_number_to_view_number

    Returns:
        ViewNumber с заполненным decimals, или None

    Raises:
        MissingDecimalsError: Если value задан, а decimals is None
        InvalidAmountError: Если value не приводится к целому

    Examples:
        >>> view = format_bigint_to_view_number(123_456_789, 8)
        >>> view.view_value, view.original_value, view.decimals
        ('1.23', '1.23456789', 8)
    """
    if value is None:
        return None

    scaled = to_scaled_integer(value, decimals)

    # Точная строка без float-округления на этом шаге
    result = format_number_to_view_number(scaled.to_decimal_string(), symbol, config)
    if result is None:
        return None

    return result.model_copy(update={"decimals": scaled.decimals})
