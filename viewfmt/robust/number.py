"""Robust-обёртка Numeric Formatter."""

from typing import Any, Final, List, Mapping, Optional, Sequence, Union

from viewfmt.core.domain.view_values import DEFAULT_CURRENCY_SYMBOL, ViewNumber
from viewfmt.formatting.config import NumberFormatConfig, coerce_config
from viewfmt.formatting.number import format_number_to_view_number
from viewfmt.robust.diagnostics import (
    DiagnosticsSink,
    MissingRequiredFieldSeverity,
    RobustResult,
    finalize_robust_result,
)
from viewfmt.robust.normalizers import normalize_number_value, normalize_symbol
from viewfmt.robust.pipeline import call_with_fault_barrier, read_input_fields
from viewfmt.robust.required_fields import SeverityLike, report_missing_required_fields

DEFAULT_CONTEXT: Final[str] = "robust_format_number_to_view_number"


def robust_format_number_to_view_number(
    *,
    data: Any = None,
    options: Union[NumberFormatConfig, Mapping[str, Any], None] = None,
    context: str = DEFAULT_CONTEXT,
    required_fields: Optional[Sequence[str]] = None,
    missing_required_field_severity: SeverityLike = MissingRequiredFieldSeverity.WARNING,
    sink: Optional[DiagnosticsSink] = None,
) -> RobustResult[ViewNumber]:
    """
    Форматирование числа из недоверенного входа.

    Args:
        data: Mapping с полями value и symbol
        options: NumberFormatConfig или mapping его полей
        context: Метка вызова для диагностики
        required_fields: Имена обязательных полей data
        missing_required_field_severity: "warning" или "error"
        sink: Получатель диагностики (None → логирование)

    Returns:
        RobustResult[ViewNumber]; никогда не бросает исключение

    Examples:
        >>> result = robust_format_number_to_view_number(data={"value": "42.42"})
        >>> result.value.view_value, result.warnings
        ('42.42', ['value came as str and was automatically converted to float.'])
    """
    warnings: List[str] = []
    errors: List[str] = []

    if report_missing_required_fields(
        data, required_fields, warnings, errors, missing_required_field_severity
    ):
        return finalize_robust_result(context, None, warnings, errors, sink)

    fields = read_input_fields(data, errors)
    value = normalize_number_value(fields.get("value"), warnings, errors)
    symbol = normalize_symbol(fields.get("symbol"), warnings, errors)

    if errors or value is None:
        return finalize_robust_result(context, None, warnings, errors, sink)

    view = call_with_fault_barrier(
        "format_number_to_view_number",
        lambda: format_number_to_view_number(
            value,
            symbol if symbol is not None else DEFAULT_CURRENCY_SYMBOL,
            coerce_config(NumberFormatConfig, options),
        ),
        errors,
    )
    return finalize_robust_result(context, view, warnings, errors, sink)
