"""
Domain models and value objects.

Contains the immutable view models returned by the formatting engine.
"""

from viewfmt.core.domain.view_values import (
    DEFAULT_CURRENCY_SYMBOL,
    PERCENT_SYMBOL,
    CalculatedTokenValue,
    TokenAmountInput,
    ViewNumber,
    ViewPercent,
    ViewTokenAmount,
)

__all__ = [
    # Constants
    "DEFAULT_CURRENCY_SYMBOL",
    "PERCENT_SYMBOL",
    # View models
    "ViewNumber",
    "ViewPercent",
    "ViewTokenAmount",
    # Input / calculation models
    "TokenAmountInput",
    "CalculatedTokenValue",
]
