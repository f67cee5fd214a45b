"""
Token-Value Calculator — стоимость позиции токена в шкале цены

    token_value_raw = (amount * scaled_price) / 10**amount_decimals

Только целочисленная арифметика произвольной точности, деление с усечением
к нулю. token_value_decimals = price_decimals.
"""

from typing import Any, Final, List, Optional, Sequence

from viewfmt.core.domain.view_values import CalculatedTokenValue
from viewfmt.core.math.units import div_toward_zero, pow10
from viewfmt.robust.diagnostics import (
    DiagnosticsSink,
    MissingRequiredFieldSeverity,
    RobustResult,
    finalize_robust_result,
)
from viewfmt.robust.normalizers import (
    normalize_bigint_value,
    normalize_decimals,
    normalize_price_to_scaled_int,
)
from viewfmt.robust.pipeline import call_with_fault_barrier, read_input_fields
from viewfmt.robust.required_fields import SeverityLike, report_missing_required_fields

DEFAULT_CONTEXT: Final[str] = "robust_calculate_token_value"

TOKEN_VALUE_FIELDS: Final[tuple[str, ...]] = (
    "amount",
    "price",
    "amount_decimals",
    "price_decimals",
)


def calculate_token_value(
    amount: int,
    scaled_price: int,
    amount_decimals: int,
    price_decimals: int,
) -> CalculatedTokenValue:
    """
    Стоимость позиции: amount (base units токена) × цена (base units цены).

    Args:
        amount: Сумма в base units токена (>= 0)
        scaled_price: Цена, масштабированная к price_decimals (>= 0)
        amount_decimals: Decimals токена
        price_decimals: Decimals цены (и результата)

    Returns:
        CalculatedTokenValue

    Raises:
        ValueError: Если amount или цена отрицательны, или decimals < 0

    Examples:
        >>> calculate_token_value(2_500_000_000_000_000_000, 102_000_000, 18, 8)
        CalculatedTokenValue(token_value_raw=255000000, token_value_decimals=8)
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    if scaled_price < 0:
        raise ValueError(f"price must be non-negative, got {scaled_price}")

    token_value_raw = div_toward_zero(amount * scaled_price, pow10(amount_decimals))
    return CalculatedTokenValue(
        token_value_raw=token_value_raw,
        token_value_decimals=price_decimals,
    )


def robust_calculate_token_value(
    *,
    data: Any = None,
    context: str = DEFAULT_CONTEXT,
    required_fields: Optional[Sequence[str]] = None,
    missing_required_field_severity: SeverityLike = MissingRequiredFieldSeverity.WARNING,
    sink: Optional[DiagnosticsSink] = None,
) -> RobustResult[CalculatedTokenValue]:
    """
    Расчёт стоимости позиции из недоверенного входа.

    Args:
        data: Mapping с полями amount, price, amount_decimals, price_decimals
        context: Метка вызова для диагностики
        required_fields: Имена обязательных полей (обычно TOKEN_VALUE_FIELDS)
        missing_required_field_severity: "warning" или "error"
        sink: Получатель диагностики (None → логирование)

    Returns:
        RobustResult[CalculatedTokenValue]; никогда не бросает исключение
    """
    warnings: List[str] = []
    errors: List[str] = []

    if report_missing_required_fields(
        data, required_fields, warnings, errors, missing_required_field_severity
    ):
        return finalize_robust_result(context, None, warnings, errors, sink)

    fields = read_input_fields(data, errors)
    amount = normalize_bigint_value(fields.get("amount"), warnings, errors)
    amount_decimals = normalize_decimals(
        fields.get("amount_decimals"), warnings, errors, field="amount_decimals"
    )
    price_decimals = normalize_decimals(
        fields.get("price_decimals"), warnings, errors, field="price_decimals"
    )

    # Невалидный price_decimals уже дал ошибку; цену без шкалы не разбираем повторно
    price = None
    if price_decimals is not None or fields.get("price_decimals") is None:
        price = normalize_price_to_scaled_int(fields.get("price"), price_decimals, warnings, errors)

    if amount is not None and amount < 0:
        errors.append("amount cannot be negative.")

    if errors or amount is None or price is None or amount_decimals is None or price_decimals is None:
        return finalize_robust_result(context, None, warnings, errors, sink)

    value = call_with_fault_barrier(
        "calculate_token_value",
        lambda: calculate_token_value(amount, price, amount_decimals, price_decimals),
        errors,
    )
    return finalize_robust_result(context, value, warnings, errors, sink)
