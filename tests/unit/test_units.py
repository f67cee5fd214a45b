"""
Тесты для модуля Units (base units ↔ десятичная запись)

Проверяет:
1. format_units: точная строка без потери точности
2. parse_units / scale_decimal: обратное масштабирование с half-up
3. parse_base_units: допустимые формы base units
4. div_toward_zero: усечение к нулю
5. ScaledInteger: инварианты и конверсии
"""

from decimal import Decimal

import pytest

from viewfmt.core.math.units import (
    InvalidDecimalNumberError,
    ScaledInteger,
    div_toward_zero,
    format_units,
    parse_base_units,
    parse_units,
    pow10,
    scale_decimal,
)

# =============================================================================
# FORMAT UNITS
# =============================================================================


class TestFormatUnits:
    """Тесты для format_units"""

    @pytest.mark.parametrize(
        "value, decimals, expected",
        [
            (123_456_789, 8, "1.23456789"),
            (1_000_000, 6, "1"),
            (1_500_000, 6, "1.5"),
            (5, 9, "0.000000005"),
            (-5, 9, "-0.000000005"),
            (0, 18, "0"),
            (42, 0, "42"),
            (-42, 0, "-42"),
        ],
    )
    def test_exact_string(self, value, decimals, expected) -> None:
        assert format_units(value, decimals) == expected

    def test_beyond_float_precision(self) -> None:
        """Цифры за пределами float сохраняются"""
        value = 123_456_789_012_345_678_901_234_567_890
        assert format_units(value, 18) == "123456789012.34567890123456789"

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValueError, match="decimals must be non-negative"):
            format_units(1, -1)


# =============================================================================
# PARSE UNITS
# =============================================================================


class TestParseUnits:
    """Тесты для parse_units и scale_decimal"""

    def test_basic(self) -> None:
        assert parse_units("1.02", 8) == 102_000_000
        assert parse_units("2500000000000000000", 0) == 2_500_000_000_000_000_000

    def test_extra_fraction_rounds_half_up(self) -> None:
        assert parse_units("0.123456789", 6) == 123_457
        assert parse_units("0.0000005", 6) == 1
        assert parse_units("-0.0000005", 6) == -1

    def test_partial_forms(self) -> None:
        """Пропущенная целая или дробная часть"""
        assert parse_units(".5", 1) == 5
        assert parse_units("15.", 1) == 150

    @pytest.mark.parametrize("value", ["abc", "", ".", "-", "1e5", "1.2.3", "1,000"])
    def test_invalid_string(self, value) -> None:
        with pytest.raises(InvalidDecimalNumberError, match="is not a valid decimal number"):
            parse_units(value, 6)

    def test_scale_decimal_large_value(self) -> None:
        value = Decimal("123456789012345678901234567890.5")
        assert scale_decimal(value, 18) == 123456789012345678901234567890_500000000000000000

    def test_scale_decimal_rejects_non_finite(self) -> None:
        with pytest.raises(InvalidDecimalNumberError):
            scale_decimal(Decimal("NaN"), 2)


# =============================================================================
# BASE UNITS / DIVISION
# =============================================================================


class TestParseBaseUnits:
    """Тесты для parse_base_units"""

    def test_accepted_forms(self) -> None:
        assert parse_base_units(42) == 42
        assert parse_base_units("-42") == -42
        assert parse_base_units(" 7 ") == 7
        assert parse_base_units(3.0) == 3

    @pytest.mark.parametrize("value", [True, 1.5, "1.5", "abc", "", None])
    def test_rejected_forms(self, value) -> None:
        with pytest.raises(ValueError):
            parse_base_units(value)


class TestDivTowardZero:
    """Тесты для div_toward_zero"""

    @pytest.mark.parametrize(
        "numerator, denominator, expected",
        [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (1, 10, 0), (-1, 10, 0)],
    )
    def test_truncates(self, numerator, denominator, expected) -> None:
        assert div_toward_zero(numerator, denominator) == expected

    def test_zero_denominator(self) -> None:
        with pytest.raises(ZeroDivisionError):
            div_toward_zero(1, 0)

    def test_pow10(self) -> None:
        assert pow10(0) == 1
        assert pow10(18) == 10**18
        with pytest.raises(ValueError):
            pow10(-1)


# =============================================================================
# SCALED INTEGER
# =============================================================================


class TestScaledInteger:
    """Тесты для ScaledInteger"""

    def test_conversions(self) -> None:
        scaled = ScaledInteger(amount=123_456_789, decimals=8)
        assert scaled.to_decimal_string() == "1.23456789"
        assert scaled.to_decimal() == Decimal("1.23456789")

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValueError, match="decimals must be non-negative"):
            ScaledInteger(amount=1, decimals=-1)

    def test_immutable(self) -> None:
        scaled = ScaledInteger(amount=1, decimals=0)
        with pytest.raises(AttributeError):
            scaled.amount = 2  # type: ignore[misc]
