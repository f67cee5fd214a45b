"""
Тесты для Token-Amount Formatter (format_bigint_to_view_token_amount)

Покрытие:
- Полосы величины: < 10, < 1,000,000, компактная
- Фиксированная точность (config.decimals)
- Floor / ceiling по неокруглённому значению
- Отсутствие полей → None
"""

import pytest

from viewfmt.core.domain.view_values import TokenAmountInput, ViewTokenAmount
from viewfmt.formatting.config import TokenAmountFormatConfig
from viewfmt.formatting.errors import InvalidAmountError
from viewfmt.formatting.token_amount import format_bigint_to_view_token_amount


def token(amount, decimals, symbol="TKN") -> TokenAmountInput:
    return TokenAmountInput(amount=amount, decimals=decimals, symbol=symbol)


# =============================================================================
# MAGNITUDE BANDS
# =============================================================================


class TestMagnitudeBands:
    """Полосы величины"""

    def test_single_digit_band(self) -> None:
        view = format_bigint_to_view_token_amount(token(1_234_567, 6, "USDC"))
        assert isinstance(view, ViewTokenAmount)
        assert view.view_value == "1.234567"
        assert view.compact == "1.23"
        assert view.symbol == "USDC"
        assert view.amount == 1_234_567
        assert view.decimals == 6
        assert view.original_value == "1.234567"

    def test_single_digit_band_has_no_grouping_and_trims_zeros(self) -> None:
        view = format_bigint_to_view_token_amount(token(1_500_000, 6))
        assert view.view_value == "1.5"

    def test_two_digit_band(self) -> None:
        view = format_bigint_to_view_token_amount(token(12_345_678, 2))
        assert view.view_value == "123,456.78"
        assert view.compact == "123.46K"

    def test_compact_band_upper_case(self) -> None:
        view = format_bigint_to_view_token_amount(token(1_234_567_891_234, 6))
        assert view.view_value == "1.23M"
        assert view.compact == "1.23M"

    def test_band_edges(self) -> None:
        assert format_bigint_to_view_token_amount(token(10, 0)).view_value == "10"
        assert format_bigint_to_view_token_amount(token(999_999, 0)).view_value == "999,999"
        assert format_bigint_to_view_token_amount(token(1_000_000, 0)).view_value == "1.00M"

    def test_negative_sign_separate(self) -> None:
        view = format_bigint_to_view_token_amount(token(-1_234_567, 6))
        assert view.sign == "-"
        assert view.view_value == "1.234567"
        assert view.amount == -1_234_567


# =============================================================================
# FIXED DECIMALS / SENTINELS
# =============================================================================


class TestFixedDecimalsAndSentinels:
    """Фиксированная точность, floor и ceiling"""

    def test_fixed_decimals(self) -> None:
        cfg = TokenAmountFormatConfig(decimals=2)
        assert format_bigint_to_view_token_amount(token(1_500_000, 6), cfg).view_value == "1.50"
        assert (
            format_bigint_to_view_token_amount(token(1_234_567_891_234, 6), cfg).view_value
            == "1,234,567.89"
        )

    def test_floor(self) -> None:
        view = format_bigint_to_view_token_amount(
            token(5, 9), {"min_display": 0.000001, "single_digit_decimals": 6}
        )
        assert view.below_min is True
        assert view.view_value == "0.000001"

    def test_floor_applies_with_fixed_decimals(self) -> None:
        view = format_bigint_to_view_token_amount(
            token(15, 9), {"decimals": 2, "min_display": 0.000001}
        )
        assert view.below_min is True
        assert view.view_value == "0.000001"

    def test_no_floor_never_below_min(self) -> None:
        view = format_bigint_to_view_token_amount(token(1, 18))
        assert view.below_min is False
        assert view.view_value == "0"

    def test_ceiling(self) -> None:
        view = format_bigint_to_view_token_amount(token(123_450, 2), {"max_display": 1000})
        assert view.above_max is True
        assert view.view_value == "1,000"

    def test_comparisons_use_unrounded_value(self) -> None:
        """1000.004 > ceiling 1000, хотя при 2 знаках округляется до 1000"""
        view = format_bigint_to_view_token_amount(token(1_000_004, 3), {"max_display": 1000})
        assert view.above_max is True


# =============================================================================
# ABSENCE / EDGE CASES
# =============================================================================


class TestTokenAmountEdgeCases:
    """Отсутствие полей, ноль, mapping на входе"""

    def test_none_data(self) -> None:
        assert format_bigint_to_view_token_amount(None) is None

    def test_missing_amount_or_decimals(self) -> None:
        assert format_bigint_to_view_token_amount(TokenAmountInput(decimals=6)) is None
        assert format_bigint_to_view_token_amount(TokenAmountInput(amount=5)) is None

    def test_mapping_input(self) -> None:
        view = format_bigint_to_view_token_amount({"amount": "1234567", "decimals": 6})
        assert view.view_value == "1.234567"
        assert view.symbol is None

    def test_zero(self) -> None:
        view = format_bigint_to_view_token_amount(token(0, 6))
        assert view.view_value == "0.00"
        assert view.compact == "0.00"
        assert view.below_min is False

    def test_invalid_amount(self) -> None:
        with pytest.raises(InvalidAmountError):
            format_bigint_to_view_token_amount(token("12.5", 6))

    @pytest.mark.parametrize(
        "data",
        [
            {"amount": 5.0, "decimals": 0},
            {"amount": "5", "decimals": "6"},
            {"amount": "5", "decimals": -1},
        ],
    )
    def test_invalid_mapping_raises_invalid_amount(self, data) -> None:
        with pytest.raises(InvalidAmountError, match="invalid token amount data"):
            format_bigint_to_view_token_amount(data)

    def test_float_overflow_falls_back_to_raw(self) -> None:
        view = format_bigint_to_view_token_amount(token(10**400, 0))
        assert view.view_value == "1" + "0" * 400
        assert view.compact == view.view_value
