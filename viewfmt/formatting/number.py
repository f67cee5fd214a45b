"""
Numeric Formatter — число → ViewNumber

Порядок шагов (фиксирован):
1. None → None
2. Невалидное/нечисловое значение → эхо исходного текста, все флаги False
3. Точный ноль → "0.00" (никогда не below_min)
4. Округление до standard_decimals (половина к +inf); ВСЕ сравнения дальше — по |rounded|
5. Полосы по приоритету: floor → ceiling → compact_threshold → стандартная запись

compact всегда считается независимо: компактная запись |value| при compact_decimals.
"""

import math
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from viewfmt.core.domain.view_values import DEFAULT_CURRENCY_SYMBOL, ViewNumber
from viewfmt.core.math.numerical_safeguards import (
    NumberLike,
    decimal_to_float,
    round_half_toward_positive,
    to_decimal,
)
from viewfmt.formatting.config import NumberFormatConfig, coerce_config
from viewfmt.formatting.locale_format import format_compact, format_standard


# =============================================================================
# HELPERS
# =============================================================================


def original_text(value: NumberLike) -> str:
    """Исходная текстовая форма: строки как есть, числа через repr/str."""
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return repr(value)
    return str(value)


def select_number_band(
    value: Decimal,
    config: NumberFormatConfig,
) -> tuple[str, bool, bool, str]:
    """
    Выбор полосы для ненулевого конечного значения.

    Args:
        value: Ненулевой конечный Decimal (в единицах отображения)
        config: Конфигурация форматтера

    Returns:
        (view_value, below_min, above_max, sign)
    """
    rounded = round_half_toward_positive(value, config.standard_decimals)
    sign = "-" if rounded < 0 else ""
    abs_rounded = rounded.copy_abs()

    min_display = config.min_display
    max_display = config.max_display

    if min_display is not None and abs_rounded < to_decimal(min_display):
        floor_text = format_standard(
            to_decimal(min_display),
            config.locale,
            config.standard_decimals,
            config.standard_decimals,
        )
        return floor_text, True, False, sign

    if max_display is not None and abs_rounded > to_decimal(max_display):
        ceil_text = format_standard(
            to_decimal(max_display),
            config.locale,
            config.standard_decimals,
            config.standard_decimals,
        )
        return ceil_text, False, True, sign

    if abs_rounded >= to_decimal(config.compact_threshold):
        return format_compact(abs_rounded, config.locale, config.compact_decimals), False, False, sign

    view_value = format_standard(
        abs_rounded,
        config.locale,
        config.standard_decimals,
        config.standard_decimals,
    )
    return view_value, False, False, sign


# =============================================================================
# FORMATTER
# =============================================================================


def format_number_to_view_number(
    value: Optional[NumberLike],
    symbol: Optional[str] = DEFAULT_CURRENCY_SYMBOL,
    config: Union[NumberFormatConfig, Mapping[str, Any], None] = None,
) -> Optional[ViewNumber]:
    """
    Форматирование конечного числа для отображения.

    Args:
        value: Число или строка с десятичной записью; None → None
        symbol: Символ, возвращаемый отдельно (default "$")
        config: NumberFormatConfig, mapping полей или None (дефолты)

    Returns:
        ViewNumber или None

    Examples:
        >>> view = format_number_to_view_number(1234.567)
        >>> view.view_value, view.compact, view.sign
        ('1,234.57', '1.23K', '')
        >>> format_number_to_view_number(0.0049).below_min
        True
    """
    if value is None:
        return None

    cfg = coerce_config(NumberFormatConfig, config)
    text = original_text(value)
    number = to_decimal(value)

    if not number.is_finite() or not math.isfinite(decimal_to_float(number)):
        # Fallback: показываем исходный текст как есть (включая значения вне диапазона float)
        return ViewNumber(
            view_value=text,
            compact=text,
            sign="",
            below_min=False,
            above_max=False,
            symbol=symbol,
            original_value=text,
            original_value_number=decimal_to_float(number),
        )

    if number == 0:
        return ViewNumber(
            view_value="0.00",
            compact=format_compact(number, cfg.locale, cfg.compact_decimals),
            sign="",
            below_min=False,
            above_max=False,
            symbol=symbol,
            original_value=text,
            original_value_number=decimal_to_float(number),
        )

    view_value, below_min, above_max, sign = select_number_band(number, cfg)

    return ViewNumber(
        view_value=view_value,
        compact=format_compact(number.copy_abs(), cfg.locale, cfg.compact_decimals),
        sign=sign,
        below_min=below_min,
        above_max=above_max,
        symbol=symbol,
        original_value=text,
        original_value_number=decimal_to_float(number),
    )
