"""
Robust-обёртка Scaled-Integer Formatter.

Без явного required_fields обязательным считается decimals, но только если
передан amount (см. resolve_bigint_required_fields).
"""

from typing import Any, Final, List, Mapping, Optional, Sequence, Union

from viewfmt.core.domain.view_values import DEFAULT_CURRENCY_SYMBOL, ViewNumber
from viewfmt.formatting.bigint_number import format_bigint_to_view_number
from viewfmt.formatting.config import NumberFormatConfig, coerce_config
from viewfmt.robust.diagnostics import (
    DiagnosticsSink,
    MissingRequiredFieldSeverity,
    RobustResult,
    finalize_robust_result,
)
from viewfmt.robust.normalizers import normalize_bigint_value, normalize_decimals, normalize_symbol
from viewfmt.robust.pipeline import call_with_fault_barrier, read_input_fields
from viewfmt.robust.required_fields import (
    SeverityLike,
    report_missing_required_fields,
    resolve_bigint_required_fields,
)

DEFAULT_CONTEXT: Final[str] = "robust_format_bigint_to_view_number"


def robust_format_bigint_to_view_number(
    *,
    data: Any = None,
    options: Union[NumberFormatConfig, Mapping[str, Any], None] = None,
    context: str = DEFAULT_CONTEXT,
    required_fields: Optional[Sequence[str]] = None,
    missing_required_field_severity: SeverityLike = MissingRequiredFieldSeverity.WARNING,
    sink: Optional[DiagnosticsSink] = None,
) -> RobustResult[ViewNumber]:
    """
    Форматирование base-units значения как числа из недоверенного входа.

    Args:
        data: Mapping с полями amount, decimals, symbol
        options: NumberFormatConfig или mapping его полей
        context: Метка вызова для диагностики
        required_fields: Имена обязательных полей (None → политика по умолчанию)
        missing_required_field_severity: "warning" или "error"
        sink: Получатель диагностики (None → логирование)

    Returns:
        RobustResult[ViewNumber]; никогда не бросает исключение
    """
    warnings: List[str] = []
    errors: List[str] = []

    effective_required = resolve_bigint_required_fields(data, required_fields)
    if report_missing_required_fields(
        data, effective_required, warnings, errors, missing_required_field_severity
    ):
        return finalize_robust_result(context, None, warnings, errors, sink)

    fields = read_input_fields(data, errors)
    amount = normalize_bigint_value(fields.get("amount"), warnings, errors)
    symbol = normalize_symbol(fields.get("symbol"), warnings, errors)
    decimals = normalize_decimals(fields.get("decimals"), warnings, errors)

    if errors or amount is None or decimals is None:
        return finalize_robust_result(context, None, warnings, errors, sink)

    view = call_with_fault_barrier(
        "format_bigint_to_view_number",
        lambda: format_bigint_to_view_number(
            amount,
            decimals,
            symbol if symbol is not None else DEFAULT_CURRENCY_SYMBOL,
            coerce_config(NumberFormatConfig, options),
        ),
        errors,
    )
    return finalize_robust_result(context, view, warnings, errors, sink)
