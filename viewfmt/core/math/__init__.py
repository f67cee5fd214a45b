"""
Core math modules для viewfmt

Decimal-примитивы и конверсия base units с гарантией отсутствия потери точности.
"""

# Numerical Safeguards
from viewfmt.core.math.numerical_safeguards import (
    # Safe-integer range
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    # Checks
    is_safe_integer,
    # Parsing
    NumberLike,
    decimal_to_float,
    to_decimal,
    to_plain_string,
    # Rounding
    quantize_context,
    round_half_toward_positive,
    round_half_up,
)

# Units
from viewfmt.core.math.units import (
    DECIMAL_STRING_RE,
    INTEGER_STRING_RE,
    InvalidDecimalNumberError,
    ScaledInteger,
    div_toward_zero,
    format_units,
    parse_base_units,
    parse_units,
    pow10,
    scale_decimal,
)

__all__ = [
    # Numerical Safeguards: Safe-integer range
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Numerical Safeguards: Checks
    "is_safe_integer",
    # Numerical Safeguards: Parsing
    "NumberLike",
    "decimal_to_float",
    "to_decimal",
    "to_plain_string",
    # Numerical Safeguards: Rounding
    "quantize_context",
    "round_half_toward_positive",
    "round_half_up",
    # Units: Constants
    "DECIMAL_STRING_RE",
    "INTEGER_STRING_RE",
    # Units: Exceptions
    "InvalidDecimalNumberError",
    # Units: Types
    "ScaledInteger",
    # Units: Functions
    "div_toward_zero",
    "format_units",
    "parse_base_units",
    "parse_units",
    "pow10",
    "scale_decimal",
]
