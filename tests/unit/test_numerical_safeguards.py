"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Разбор числоподобных значений в Decimal (никогда не бросает)
2. Детекцию NaN/Inf и safe-integer диапазона
3. Округление half-up и half toward +inf (выбор полосы)
4. Десятичную запись без экспоненты
"""

import math
from decimal import ROUND_DOWN, Decimal, localcontext

import pytest

from viewfmt.core.math.numerical_safeguards import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    decimal_to_float,
    is_safe_integer,
    quantize_context,
    round_half_toward_positive,
    round_half_up,
    to_decimal,
    to_plain_string,
)

# =============================================================================
# ПРОВЕРКИ
# =============================================================================


class TestChecks:
    """Тесты для is_safe_integer"""

    def test_safe_integer_bounds(self) -> None:
        """Границы 2**53 - 1 включительно"""
        assert is_safe_integer(MAX_SAFE_INTEGER)
        assert is_safe_integer(MIN_SAFE_INTEGER)
        assert not is_safe_integer(MAX_SAFE_INTEGER + 1)
        assert not is_safe_integer(MIN_SAFE_INTEGER - 1)


# =============================================================================
# РАЗБОР
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_float_uses_shortest_repr(self) -> None:
        """0.1 → Decimal('0.1'), а не двоичное значение"""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(1234.567) == Decimal("1234.567")

    def test_int_is_exact(self) -> None:
        big = 2**80 + 1
        assert to_decimal(big) == Decimal(big)

    def test_string_is_trimmed(self) -> None:
        assert to_decimal("  42.42 ") == Decimal("42.42")

    @pytest.mark.parametrize("value", ["", "   ", "abc", "1.2.3", None, [], True, False])
    def test_invalid_input_gives_nan(self, value) -> None:
        """Невалидный вход → NaN, без исключения"""
        assert to_decimal(value).is_nan()

    def test_signaling_nan_is_quieted(self) -> None:
        assert to_decimal("sNaN").is_nan()
        assert not to_decimal("sNaN").is_snan()
        assert not to_decimal(Decimal("sNaN")).is_snan()

    def test_infinity_is_parsed(self) -> None:
        assert to_decimal("Infinity") == Decimal("Infinity")
        assert to_decimal(-math.inf) == Decimal("-Infinity")


class TestToPlainString:
    """Тесты для to_plain_string"""

    def test_strips_trailing_zeros(self) -> None:
        assert to_plain_string(Decimal("9.5400")) == "9.54"
        assert to_plain_string(Decimal("10.000")) == "10"

    def test_no_exponent(self) -> None:
        assert to_plain_string(Decimal("1E+2")) == "100"
        assert to_plain_string(Decimal("1E-7")) == "0.0000001"

    def test_zero(self) -> None:
        assert to_plain_string(Decimal("0.000")) == "0"
        assert to_plain_string(Decimal("-0")) == "0"


class TestDecimalToFloat:
    """Тесты для decimal_to_float"""

    def test_regular_value(self) -> None:
        assert decimal_to_float(Decimal("1.25")) == 1.25

    def test_overflow_gives_infinity(self) -> None:
        assert decimal_to_float(Decimal("1E+400")) == math.inf
        assert decimal_to_float(Decimal("-1E+400")) == -math.inf


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


class TestRoundHalfUp:
    """Тесты для round_half_up"""

    @pytest.mark.parametrize(
        "value, places, expected",
        [
            ("1234.567", 2, "1234.57"),
            ("0.005", 2, "0.01"),
            ("-0.005", 2, "-0.01"),
            ("0.0049", 2, "0.00"),
            ("2.5", 0, "3"),
            ("-2.5", 0, "-3"),
        ],
    )
    def test_half_away_from_zero(self, value, places, expected) -> None:
        assert round_half_up(Decimal(value), places) == Decimal(expected)

    def test_negative_places_rejected(self) -> None:
        with pytest.raises(ValueError, match="places must be non-negative"):
            round_half_up(Decimal("1.5"), -1)

    def test_large_value_keeps_all_digits(self) -> None:
        """Квантование не упирается в точность контекста по умолчанию"""
        value = Decimal("123456789012345678901234567890.125")
        assert round_half_up(value, 2) == Decimal("123456789012345678901234567890.13")

    def test_independent_of_thread_context(self) -> None:
        """Глобальный контекст с другой точностью/округлением не влияет"""
        with localcontext() as ctx:
            ctx.prec = 5
            ctx.rounding = ROUND_DOWN
            assert round_half_up(Decimal("1234.565"), 2) == Decimal("1234.57")

    def test_quantize_context_grows_with_digits(self) -> None:
        context = quantize_context(Decimal(10**40), 6)
        assert context.prec >= 41 + 6


class TestRoundHalfTowardPositive:
    """Тесты для round_half_toward_positive (выбор полосы)"""

    @pytest.mark.parametrize(
        "value, places, expected",
        [
            ("0.125", 2, "0.13"),
            ("-0.125", 2, "-0.12"),
            ("-0.005", 2, "0.00"),
            ("-0.0051", 2, "-0.01"),
            ("2.5", 0, "3"),
            ("-2.5", 0, "-2"),
            ("-1234.567", 2, "-1234.57"),
        ],
    )
    def test_halves_go_up(self, value, places, expected) -> None:
        assert round_half_toward_positive(Decimal(value), places) == Decimal(expected)

    def test_negative_half_rounds_to_zero_without_sign(self) -> None:
        """-0.005 → -0.00, что не меньше нуля"""
        rounded = round_half_toward_positive(Decimal("-0.005"), 2)
        assert not rounded < 0
        assert rounded.copy_abs() == Decimal("0.00")

    def test_large_value_keeps_all_digits(self) -> None:
        value = Decimal("-123456789012345678901234567890.125")
        assert round_half_toward_positive(value, 2) == Decimal(
            "-123456789012345678901234567890.12"
        )

    def test_negative_places_rejected(self) -> None:
        with pytest.raises(ValueError, match="places must be non-negative"):
            round_half_toward_positive(Decimal("1.5"), -1)
