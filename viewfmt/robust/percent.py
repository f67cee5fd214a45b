"""
Robust-обёртка Percent Formatter.

Перед форматированием value умножается на multiplier и делится на divider
(оба по умолчанию 1, нормализуются как value). Divider, равный нулю после
нормализации, — ошибка; деление не выполняется.
"""

from decimal import Decimal, localcontext
from typing import Any, Final, List, Mapping, Optional, Sequence, Union

from viewfmt.core.domain.view_values import ViewPercent
from viewfmt.core.math.numerical_safeguards import MIN_CONTEXT_PRECISION, to_decimal
from viewfmt.formatting.config import NumberFormatConfig, PercentFormatConfig, coerce_config
from viewfmt.formatting.percent import format_percent_to_view_percent
from viewfmt.robust.diagnostics import (
    DiagnosticsSink,
    MissingRequiredFieldSeverity,
    RobustResult,
    finalize_robust_result,
)
from viewfmt.robust.normalizers import normalize_number_value
from viewfmt.robust.pipeline import call_with_fault_barrier, read_input_fields
from viewfmt.robust.required_fields import SeverityLike, report_missing_required_fields

DEFAULT_CONTEXT: Final[str] = "robust_format_percent_to_view_percent"

ZERO_DIVIDER_ERROR: Final[str] = "divider normalized to zero; refusing to divide."


def scale_ratio(value: float, multiplier: float, divider: float) -> Decimal:
    """
    value * multiplier / divider в Decimal.

    Произведение точное; частное округляется только за пределами
    суммарного числа цифр множителей.

    Raises:
        ZeroDivisionError: Если divider == 0
    """
    if divider == 0:
        raise ZeroDivisionError(ZERO_DIVIDER_ERROR)
    if multiplier == 1 and divider == 1:
        return to_decimal(value)
    factors = [to_decimal(value), to_decimal(multiplier), to_decimal(divider)]
    digits = sum(len(factor.as_tuple().digits) for factor in factors)
    with localcontext() as ctx:
        ctx.prec = max(MIN_CONTEXT_PRECISION, digits + 2)
        return factors[0] * factors[1] / factors[2]


def robust_format_percent_to_view_percent(
    *,
    data: Any = None,
    options: Union[PercentFormatConfig, NumberFormatConfig, Mapping[str, Any], None] = None,
    context: str = DEFAULT_CONTEXT,
    required_fields: Optional[Sequence[str]] = None,
    missing_required_field_severity: SeverityLike = MissingRequiredFieldSeverity.WARNING,
    sink: Optional[DiagnosticsSink] = None,
) -> RobustResult[ViewPercent]:
    """
    Форматирование доли как процента из недоверенного входа.

    Args:
        data: Mapping с полями value, multiplier, divider
        options: PercentFormatConfig или mapping его полей
        context: Метка вызова для диагностики
        required_fields: Имена обязательных полей data
        missing_required_field_severity: "warning" или "error"
        sink: Получатель диагностики (None → логирование)

    Returns:
        RobustResult[ViewPercent]; никогда не бросает исключение
    """
    warnings: List[str] = []
    errors: List[str] = []

    if report_missing_required_fields(
        data, required_fields, warnings, errors, missing_required_field_severity
    ):
        return finalize_robust_result(context, None, warnings, errors, sink)

    fields = read_input_fields(data, errors)
    value = normalize_number_value(fields.get("value"), warnings, errors)
    multiplier = normalize_number_value(fields.get("multiplier"), warnings, errors, field="multiplier")
    divider = normalize_number_value(fields.get("divider"), warnings, errors, field="divider")

    # Проверяется до любого деления и независимо от multiplier
    if divider == 0:
        errors.append(ZERO_DIVIDER_ERROR)

    if multiplier is None:
        multiplier = 1.0
    if divider is None:
        divider = 1.0

    if errors or value is None:
        return finalize_robust_result(context, None, warnings, errors, sink)

    view = call_with_fault_barrier(
        "format_percent_to_view_percent",
        lambda: format_percent_to_view_percent(
            scale_ratio(value, multiplier, divider),
            coerce_config(PercentFormatConfig, options),
        ),
        errors,
    )
    return finalize_robust_result(context, view, warnings, errors, sink)
