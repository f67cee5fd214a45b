"""
Token-Amount Formatter — base units токена → ViewTokenAmount

Отдельная политика полос величины (НЕ обёртка над Numeric Formatter):
- |v| < 10            → до single_digit_decimals знаков, без группировки
- 10 <= |v| < 1e6     → до two_digit_decimals знаков, с группировкой
- |v| >= 1e6          → компактная запись, суффикс в верхнем регистре ("1.23M")

Перед полосами проверяются floor (min_display) и ceiling (max_display).
Фиксированная точность (config.decimals) отключает полосы, но не floor.
Сравнения выполняются по неокруглённому |v|.
"""

import math
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from viewfmt.core.domain.view_values import TokenAmountInput, ViewTokenAmount
from viewfmt.core.math.numerical_safeguards import decimal_to_float, to_decimal
from viewfmt.formatting.bigint_number import to_scaled_integer
from viewfmt.formatting.config import (
    SINGLE_DIGIT_BAND_LIMIT,
    TWO_DIGIT_BAND_LIMIT,
    TokenAmountFormatConfig,
    coerce_config,
)
from viewfmt.formatting.errors import InvalidAmountError
from viewfmt.formatting.locale_format import format_compact, format_standard


# =============================================================================
# HELPERS
# =============================================================================


def format_compact_upper(value: Decimal, locale: str, fraction_digits: int) -> str:
    """Компактная запись |value| с суффиксом в верхнем регистре."""
    return format_compact(value.copy_abs(), locale, fraction_digits).upper()


def _floor_text(min_display: float, config: TokenAmountFormatConfig) -> str:
    # Floor всегда при single_digit_decimals, без группировки (обе ветки)
    return format_standard(
        to_decimal(min_display),
        config.locale,
        config.single_digit_decimals,
        config.single_digit_decimals,
        grouping=False,
    )


def _is_below_floor(abs_value: Decimal, min_display: Optional[float]) -> bool:
    return min_display is not None and 0 < abs_value < to_decimal(min_display)


def format_view_value_by_magnitude(
    abs_value: Decimal,
    config: TokenAmountFormatConfig,
) -> tuple[str, bool, bool]:
    """
    Выбор полосы по величине.

    Args:
        abs_value: Неотрицательный ненулевой Decimal
        config: Конфигурация форматтера

    Returns:
        (view_value, below_min, above_max)
    """
    if _is_below_floor(abs_value, config.min_display):
        return _floor_text(config.min_display, config), True, False

    if config.max_display is not None and abs_value > to_decimal(config.max_display):
        ceil_text = format_standard(
            to_decimal(config.max_display),
            config.locale,
            0,
            config.two_digit_decimals,
            grouping=True,
        )
        return ceil_text, False, True

    if abs_value < SINGLE_DIGIT_BAND_LIMIT:
        text = format_standard(
            abs_value, config.locale, 0, config.single_digit_decimals, grouping=False
        )
        return text, False, False

    if abs_value < TWO_DIGIT_BAND_LIMIT:
        text = format_standard(
            abs_value, config.locale, 0, config.two_digit_decimals, grouping=True
        )
        return text, False, False

    return format_compact_upper(abs_value, config.locale, config.compact_decimals), False, False


def format_view_value_fixed(
    abs_value: Decimal,
    fixed_decimals: int,
    config: TokenAmountFormatConfig,
) -> tuple[str, bool]:
    """
    Фиксированная точность независимо от величины; floor сохраняется.

    Returns:
        (view_value, below_min)
    """
    if _is_below_floor(abs_value, config.min_display):
        return _floor_text(config.min_display, config), True

    text = format_standard(abs_value, config.locale, fixed_decimals, fixed_decimals, grouping=True)
    return text, False


# =============================================================================
# FORMATTER
# =============================================================================


def format_bigint_to_view_token_amount(
    data: Union[TokenAmountInput, Mapping[str, Any], None],
    config: Union[TokenAmountFormatConfig, Mapping[str, Any], None] = None,
) -> Optional[ViewTokenAmount]:
    """
    Форматирование суммы токена в base units.

    Args:
        data: TokenAmountInput (или mapping его полей): amount, symbol, decimals
        config: TokenAmountFormatConfig, mapping полей или None (дефолты)

    Returns:
        ViewTokenAmount; None если нет data, amount или decimals

    Raises:
        InvalidAmountError: Если amount не приводится к целому или mapping не проходит валидацию

    Examples:
        >>> view = format_bigint_to_view_token_amount(
        ...     TokenAmountInput(amount=1_234_567, decimals=6, symbol="USDC")
        ... )
        >>> view.view_value, view.compact
        ('1.234567', '1.23')
    """
    if data is None:
        return None

    if not isinstance(data, TokenAmountInput):
        try:
            data = TokenAmountInput.model_validate(data)
        except ValidationError as e:
            raise InvalidAmountError(f"invalid token amount data: {e.errors()[0]['msg']}") from e

    if data.amount is None or data.decimals is None:
        return None

    cfg = coerce_config(TokenAmountFormatConfig, config)

    scaled = to_scaled_integer(data.amount, data.decimals)
    raw = scaled.to_decimal_string()
    number = scaled.to_decimal()
    number_float = decimal_to_float(number)

    common = {
        "symbol": data.symbol,
        "original_value": raw,
        "original_value_number": number_float,
        "decimals": scaled.decimals,
        "amount": scaled.amount,
    }

    # Значение не помещается во float → показываем точную строку как есть
    if not math.isfinite(number_float):
        return ViewTokenAmount(
            view_value=raw,
            compact=raw,
            sign="",
            below_min=False,
            above_max=False,
            **common,
        )

    if number == 0:
        return ViewTokenAmount(
            view_value="0.00",
            compact=format_compact_upper(number, cfg.locale, cfg.compact_decimals),
            sign="",
            below_min=False,
            above_max=False,
            **common,
        )

    abs_value = number.copy_abs()
    sign = "-" if number < 0 else ""
    above_max = False

    if cfg.decimals is not None:
        view_value, below_min = format_view_value_fixed(abs_value, cfg.decimals, cfg)
    else:
        view_value, below_min, above_max = format_view_value_by_magnitude(abs_value, cfg)

    return ViewTokenAmount(
        view_value=view_value,
        compact=format_compact_upper(abs_value, cfg.locale, cfg.compact_decimals),
        sign=sign,
        below_min=below_min,
        above_max=above_max,
        **common,
    )
