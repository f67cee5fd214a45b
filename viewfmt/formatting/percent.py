"""
Percent Formatter — доля → ViewPercent

Тот же алгоритм, что и у Numeric Formatter, с одним преобразованием:
вход — доля (0.0954), внутри умножается на 100 (без потери цифр) ДО округления и выбора полосы.
Все пороги конфигурации — в процентных единицах.
"""

import math
from typing import Any, Mapping, Optional, Union

from viewfmt.core.domain.view_values import PERCENT_SYMBOL, ViewPercent
from viewfmt.core.math.numerical_safeguards import (
    NumberLike,
    decimal_to_float,
    quantize_context,
    to_decimal,
    to_plain_string,
)
from viewfmt.formatting.config import NumberFormatConfig, PercentFormatConfig, coerce_config
from viewfmt.formatting.locale_format import format_compact
from viewfmt.formatting.number import original_text, select_number_band

PERCENT_SCALE = 100


def format_percent_to_view_percent(
    value: Optional[NumberLike],
    config: Union[PercentFormatConfig, NumberFormatConfig, Mapping[str, Any], None] = None,
) -> ViewPercent:
    """
    Форматирование доли как процента.

    Args:
        value: Доля (0.0954 → 9.54%); None и нечисловые строки → fallback-эхо
        config: PercentFormatConfig, mapping полей или None (дефолты)

    Returns:
        ViewPercent (всегда, в том числе для невалидного входа)

    Examples:
        >>> format_percent_to_view_percent(0.0954).view_value
        '9.54'
        >>> format_percent_to_view_percent(0).view_value
        '0.00'
    """
    cfg = coerce_config(PercentFormatConfig, config)
    number = to_decimal(value) if value is not None else to_decimal("NaN")
    percent = (
        quantize_context(number, 2).multiply(number, PERCENT_SCALE) if number.is_finite() else number
    )

    # Fallback: доля, процент от которой не помещается во float, тоже эхо
    if not percent.is_finite() or not math.isfinite(decimal_to_float(percent)):
        text = original_text(value)
        return ViewPercent(
            view_value=text,
            compact=text,
            sign="",
            below_min=False,
            above_max=False,
            symbol=PERCENT_SYMBOL,
            original_value=text,
            original_value_number=decimal_to_float(number),
        )

    original_value = to_plain_string(percent)
    original_value_number = decimal_to_float(percent)

    if percent == 0:
        return ViewPercent(
            view_value="0.00",
            compact=format_compact(percent, cfg.locale, cfg.compact_decimals),
            sign="",
            below_min=False,
            above_max=False,
            symbol=PERCENT_SYMBOL,
            original_value=original_value,
            original_value_number=original_value_number,
        )

    view_value, below_min, above_max, sign = select_number_band(percent, cfg)

    # Отрицательная доля ниже floor сохраняет знак, даже если округлилась в -0.00
    if below_min and percent < 0:
        sign = "-"

    return ViewPercent(
        view_value=view_value,
        compact=format_compact(percent.copy_abs(), cfg.locale, cfg.compact_decimals),
        sign=sign,
        below_min=below_min,
        above_max=above_max,
        symbol=PERCENT_SYMBOL,
        original_value=original_value,
        original_value_number=original_value_number,
    )
