"""
Тесты для Token-Value Calculator

Покрытие:
- calculate_token_value: целочисленная арифметика, усечение к нулю
- robust_calculate_token_value: int/float/str цены, price_decimals,
  отрицательные значения, required fields
"""

import pytest

from viewfmt.core.domain.view_values import CalculatedTokenValue
from viewfmt.robust import CollectingDiagnosticsSink, RobustResult
from viewfmt.robust.token_value import (
    TOKEN_VALUE_FIELDS,
    calculate_token_value,
    robust_calculate_token_value,
)

# 2.5 токена (18 decimals) по цене 1.02 (8 decimals)
AMOUNT = 2_500_000_000_000_000_000
SCALED_PRICE = 102_000_000
EXPECTED_RAW = 255_000_000


@pytest.fixture
def sink() -> CollectingDiagnosticsSink:
    return CollectingDiagnosticsSink()


# =============================================================================
# CALCULATOR
# =============================================================================


class TestCalculateTokenValue:
    """Детерминированный расчёт"""

    def test_basic(self) -> None:
        result = calculate_token_value(AMOUNT, SCALED_PRICE, 18, 8)
        assert result == CalculatedTokenValue(token_value_raw=EXPECTED_RAW, token_value_decimals=8)

    def test_truncates(self) -> None:
        assert calculate_token_value(19, 1, 1, 0).token_value_raw == 1
        assert calculate_token_value(9, 1, 1, 0).token_value_raw == 0

    def test_zero_decimals(self) -> None:
        assert calculate_token_value(3, 7, 0, 2).token_value_raw == 21

    def test_huge_values_stay_exact(self) -> None:
        amount = 10**40 + 1
        result = calculate_token_value(amount, 10**8, 8, 8)
        assert result.token_value_raw == amount

    @pytest.mark.parametrize("amount,price", [(-1, 1), (1, -1)])
    def test_negative_rejected(self, amount, price) -> None:
        with pytest.raises(ValueError):
            calculate_token_value(amount, price, 0, 0)


# =============================================================================
# ROBUST CALCULATOR
# =============================================================================


class TestRobustCalculateTokenValue:
    """robust_calculate_token_value"""

    def test_scaled_integer_price(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": AMOUNT, "price": SCALED_PRICE, "amount_decimals": 18, "price_decimals": 8},
            required_fields=TOKEN_VALUE_FIELDS,
            sink=sink,
        )
        assert result.value.token_value_raw == EXPECTED_RAW
        assert result.value.token_value_decimals == 8
        assert result.warnings == [] and result.errors == []
        assert sink.reports == []

    def test_float_price_is_scaled_silently(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": AMOUNT, "price": 1.02, "amount_decimals": 18, "price_decimals": 8},
            sink=sink,
        )
        assert result.value.token_value_raw == EXPECTED_RAW
        assert result.warnings == []

    def test_string_price_warns(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": str(AMOUNT), "price": "1.02", "amount_decimals": "18", "price_decimals": 8},
            sink=sink,
        )
        assert result.value.token_value_raw == EXPECTED_RAW
        assert "price came as str and was parsed into scaled integer price value." in result.warnings
        assert "amount came as str and was automatically converted to int." in result.warnings
        assert len(sink.reports) == 1

    def test_invalid_price_string(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": 1, "price": "abc", "amount_decimals": 0, "price_decimals": 8},
            sink=sink,
        )
        assert result.value is None
        assert result.errors == [
            'price string "abc" is invalid: Number "abc" is not a valid decimal number.'
        ]

    def test_price_needs_price_decimals(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": 1, "price": 1.5, "amount_decimals": 0}, sink=sink
        )
        assert result.value is None
        assert result.errors == ["price_decimals is required to parse non-integer price values."]

    def test_invalid_price_decimals_reported_once(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": 1, "price": "1.5", "amount_decimals": 0, "price_decimals": "bad"},
            sink=sink,
        )
        assert result.errors == [
            'price_decimals string "bad" is invalid; expected non-negative integer string.'
        ]

    def test_negative_amount(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": -5, "price": 1, "amount_decimals": 0, "price_decimals": 0},
            sink=sink,
        )
        assert result.value is None
        assert result.errors == ["amount cannot be negative."]

    def test_negative_price(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": 5, "price": "-1.5", "amount_decimals": 0, "price_decimals": 2},
            sink=sink,
        )
        assert result.errors == ['price string "-1.5" cannot be negative.']

    def test_bool_price(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": 5, "price": True, "amount_decimals": 0, "price_decimals": 2},
            sink=sink,
        )
        assert result.errors == ['price has unsupported runtime type "bool".']

    def test_missing_required(self, sink) -> None:
        result = robust_calculate_token_value(
            data={"amount": 5, "price": 1},
            required_fields=TOKEN_VALUE_FIELDS,
            missing_required_field_severity="error",
            sink=sink,
        )
        assert result.value is None
        assert result.errors == [
            "amount_decimals is required but was not provided.",
            "price_decimals is required but was not provided.",
        ]

    def test_missing_without_required_is_silent(self, sink) -> None:
        result = robust_calculate_token_value(data={"amount": 5}, sink=sink)
        assert result == RobustResult(value=None, warnings=[], errors=[])
        assert sink.reports == []
