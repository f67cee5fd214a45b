"""
viewfmt — детерминированное форматирование чисел для отображения

Два слоя:
- viewfmt.formatting: чистые форматтеры (number, percent, scaled-integer, token amount)
- viewfmt.robust: нормализация недоверенного входа, диагностика, расчёт стоимости токена
"""

from viewfmt.core.domain import (
    CalculatedTokenValue,
    TokenAmountInput,
    ViewNumber,
    ViewPercent,
    ViewTokenAmount,
)
from viewfmt.formatting import (
    FormattingError,
    InvalidAmountError,
    MissingDecimalsError,
    NumberFormatConfig,
    PercentFormatConfig,
    TokenAmountFormatConfig,
    format_bigint_to_view_number,
    format_bigint_to_view_token_amount,
    format_number_to_view_number,
    format_percent_to_view_percent,
)
from viewfmt.robust import (
    CollectingDiagnosticsSink,
    DiagnosticsSink,
    LoggingDiagnosticsSink,
    MissingRequiredFieldSeverity,
    NullDiagnosticsSink,
    RobustResult,
    build_robust_diagnostics_message,
    map_robust_result_to_display_value,
    merge_robust_diagnostics,
    robust_calculate_token_value,
    robust_format_bigint_to_view_number,
    robust_format_bigint_to_view_token_amount,
    robust_format_number_to_view_number,
    robust_format_percent_to_view_percent,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "CalculatedTokenValue",
    "TokenAmountInput",
    "ViewNumber",
    "ViewPercent",
    "ViewTokenAmount",
    # Deterministic formatters
    "format_number_to_view_number",
    "format_percent_to_view_percent",
    "format_bigint_to_view_number",
    "format_bigint_to_view_token_amount",
    "NumberFormatConfig",
    "PercentFormatConfig",
    "TokenAmountFormatConfig",
    "FormattingError",
    "InvalidAmountError",
    "MissingDecimalsError",
    # Robust layer
    "robust_format_number_to_view_number",
    "robust_format_percent_to_view_percent",
    "robust_format_bigint_to_view_number",
    "robust_format_bigint_to_view_token_amount",
    "robust_calculate_token_value",
    "RobustResult",
    "MissingRequiredFieldSeverity",
    "DiagnosticsSink",
    "LoggingDiagnosticsSink",
    "CollectingDiagnosticsSink",
    "NullDiagnosticsSink",
    "merge_robust_diagnostics",
    "build_robust_diagnostics_message",
    "map_robust_result_to_display_value",
]
