"""
Детерминированный слой форматирования.

Чистые функции: одинаковый вход и конфиг → одинаковый результат.
Санкционированные отказы — только InvalidAmountError и MissingDecimalsError.
"""

from viewfmt.formatting.bigint_number import format_bigint_to_view_number, to_scaled_integer
from viewfmt.formatting.config import (
    DEFAULT_COMPACT_DECIMALS,
    DEFAULT_COMPACT_THRESHOLD,
    DEFAULT_LOCALE,
    DEFAULT_MIN_DISPLAY,
    DEFAULT_SINGLE_DIGIT_DECIMALS,
    DEFAULT_STANDARD_DECIMALS,
    DEFAULT_TWO_DIGIT_DECIMALS,
    NumberFormatConfig,
    PercentFormatConfig,
    TokenAmountFormatConfig,
    coerce_config,
)
from viewfmt.formatting.errors import FormattingError, InvalidAmountError, MissingDecimalsError
from viewfmt.formatting.locale_format import format_compact, format_standard, resolve_locale
from viewfmt.formatting.number import format_number_to_view_number
from viewfmt.formatting.percent import PERCENT_SCALE, format_percent_to_view_percent
from viewfmt.formatting.token_amount import format_bigint_to_view_token_amount

__all__ = [
    # Formatters
    "format_number_to_view_number",
    "format_percent_to_view_percent",
    "format_bigint_to_view_number",
    "format_bigint_to_view_token_amount",
    "to_scaled_integer",
    "PERCENT_SCALE",
    # Config
    "DEFAULT_COMPACT_DECIMALS",
    "DEFAULT_COMPACT_THRESHOLD",
    "DEFAULT_LOCALE",
    "DEFAULT_MIN_DISPLAY",
    "DEFAULT_SINGLE_DIGIT_DECIMALS",
    "DEFAULT_STANDARD_DECIMALS",
    "DEFAULT_TWO_DIGIT_DECIMALS",
    "NumberFormatConfig",
    "PercentFormatConfig",
    "TokenAmountFormatConfig",
    "coerce_config",
    # Errors
    "FormattingError",
    "InvalidAmountError",
    "MissingDecimalsError",
    # Locale
    "format_compact",
    "format_standard",
    "resolve_locale",
]
