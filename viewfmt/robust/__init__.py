"""
Robust-слой: нормализация недоверенного входа и диагностика.

Каждая robust-операция возвращает RobustResult (value, warnings, errors)
и никогда не бросает исключение.
"""

from viewfmt.robust.bigint_number import robust_format_bigint_to_view_number
from viewfmt.robust.diagnostics import (
    DEFAULT_DIAGNOSTICS_SINK,
    CollectingDiagnosticsSink,
    DiagnosticsReport,
    DiagnosticsSink,
    LoggingDiagnosticsSink,
    MissingRequiredFieldSeverity,
    NullDiagnosticsSink,
    RobustDiagnostics,
    RobustDisplayValue,
    RobustResult,
    build_robust_diagnostics_message,
    finalize_robust_result,
    map_robust_result_to_display_value,
    merge_robust_diagnostics,
    to_error_message,
)
from viewfmt.robust.normalizers import (
    describe_runtime_type,
    normalize_bigint_value,
    normalize_decimals,
    normalize_number_value,
    normalize_price_to_scaled_int,
    normalize_symbol,
)
from viewfmt.robust.number import robust_format_number_to_view_number
from viewfmt.robust.percent import robust_format_percent_to_view_percent
from viewfmt.robust.pipeline import call_with_fault_barrier, read_input_fields
from viewfmt.robust.required_fields import (
    report_missing_required_fields,
    resolve_bigint_required_fields,
)
from viewfmt.robust.token_amount import robust_format_bigint_to_view_token_amount
from viewfmt.robust.token_value import (
    TOKEN_VALUE_FIELDS,
    calculate_token_value,
    robust_calculate_token_value,
)

__all__ = [
    # Robust wrappers
    "robust_format_number_to_view_number",
    "robust_format_percent_to_view_percent",
    "robust_format_bigint_to_view_number",
    "robust_format_bigint_to_view_token_amount",
    "robust_calculate_token_value",
    # Calculator
    "TOKEN_VALUE_FIELDS",
    "calculate_token_value",
    # Diagnostics
    "DEFAULT_DIAGNOSTICS_SINK",
    "CollectingDiagnosticsSink",
    "DiagnosticsReport",
    "DiagnosticsSink",
    "LoggingDiagnosticsSink",
    "MissingRequiredFieldSeverity",
    "NullDiagnosticsSink",
    "RobustDiagnostics",
    "RobustDisplayValue",
    "RobustResult",
    "build_robust_diagnostics_message",
    "finalize_robust_result",
    "map_robust_result_to_display_value",
    "merge_robust_diagnostics",
    "to_error_message",
    # Normalizers
    "describe_runtime_type",
    "normalize_bigint_value",
    "normalize_decimals",
    "normalize_number_value",
    "normalize_price_to_scaled_int",
    "normalize_symbol",
    # Pipeline
    "call_with_fault_barrier",
    "read_input_fields",
    # Required fields
    "report_missing_required_fields",
    "resolve_bigint_required_fields",
]
