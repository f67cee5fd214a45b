"""
Contract Validation Module

Валидация JSON-контрактов, которые viewfmt отдаёт слою отображения.
"""

from .validators import (
    CalculatedTokenValueValidator,
    ContractValidator,
    RobustResultValidator,
    SchemaLoader,
    ViewNumberValidator,
    ViewTokenAmountValidator,
    model_to_payload,
    robust_result_to_payload,
    validate_calculated_token_value,
    validate_robust_result,
    validate_view_number,
    validate_view_token_amount,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ViewNumberValidator",
    "ViewTokenAmountValidator",
    "CalculatedTokenValueValidator",
    "RobustResultValidator",
    # Payloads
    "model_to_payload",
    "robust_result_to_payload",
    # Functions
    "validate_view_number",
    "validate_view_token_amount",
    "validate_calculated_token_value",
    "validate_robust_result",
]
