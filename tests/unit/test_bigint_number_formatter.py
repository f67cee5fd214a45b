"""
Тесты для Scaled-Integer Formatter (format_bigint_to_view_number)

Покрытие:
- Точная конверсия base units и делегирование Numeric Formatter
- decimals в результате
- Санкционированные отказы (InvalidAmountError, MissingDecimalsError)
"""

import pytest

from viewfmt.formatting.bigint_number import format_bigint_to_view_number, to_scaled_integer
from viewfmt.formatting.errors import FormattingError, InvalidAmountError, MissingDecimalsError


class TestBigIntToViewNumber:
    """Основной путь"""

    def test_oracle_price(self) -> None:
        view = format_bigint_to_view_number(123_456_789, 8)
        assert view.view_value == "1.23"
        assert view.compact == "1.23"
        assert view.original_value == "1.23456789"
        assert view.decimals == 8
        assert view.symbol == "$"

    def test_string_amount(self) -> None:
        view = format_bigint_to_view_number("250000000000", 8, "USD")
        assert view.view_value == "2,500.00"
        assert view.compact == "2.50K"
        assert view.symbol == "USD"

    def test_negative(self) -> None:
        view = format_bigint_to_view_number(-500_000_000, 8)
        assert view.sign == "-"
        assert view.view_value == "5.00"

    def test_zero(self) -> None:
        view = format_bigint_to_view_number(0, 18)
        assert view.view_value == "0.00"
        assert view.decimals == 18

    def test_options_forwarded(self) -> None:
        view = format_bigint_to_view_number(5, 8, config={"min_display": 0.01})
        assert view.below_min is True
        assert view.view_value == "0.01"

    def test_precision_beyond_float(self) -> None:
        view = format_bigint_to_view_number(123_456_789_012_345_678_901_234_567_890, 18)
        assert view.original_value == "123456789012.34567890123456789"
        assert view.view_value == "123.46B"


class TestBigIntFaults:
    """Санкционированные отказы"""

    def test_none_value(self) -> None:
        assert format_bigint_to_view_number(None, 8) is None
        assert format_bigint_to_view_number(None, None) is None

    def test_missing_decimals(self) -> None:
        with pytest.raises(MissingDecimalsError, match="decimals is required"):
            format_bigint_to_view_number(100, None)

    @pytest.mark.parametrize("value", ["12.5", "abc", 1.5, True])
    def test_invalid_amount(self, value) -> None:
        with pytest.raises(InvalidAmountError):
            format_bigint_to_view_number(value, 8)

    def test_faults_share_base_class(self) -> None:
        assert issubclass(InvalidAmountError, FormattingError)
        assert issubclass(MissingDecimalsError, FormattingError)
        assert issubclass(FormattingError, ValueError)

    def test_to_scaled_integer(self) -> None:
        scaled = to_scaled_integer("-42", 2)
        assert scaled.amount == -42
        assert scaled.decimals == 2
