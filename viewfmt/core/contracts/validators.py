"""
JSON Schema Contract Validators

Валидация payload'ов, которые отдаются слою отображения, против формальных
JSON Schema контрактов (Draft 2020-12).

Схемы (viewfmt/core/contracts/schema/):
- view_number.json — ViewNumber / ViewPercent
- view_token_amount.json — ViewTokenAmount
- calculated_token_value.json — CalculatedTokenValue
- robust_result.json — тройка (value, warnings, errors)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from viewfmt.robust.diagnostics import RobustResult


# =============================================================================
# SCHEMA LOADER
# =============================================================================


SCHEMA_DIR = Path(__file__).parent / "schema"


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета (package data) рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'view_number')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ViewNumberValidator(ContractValidator):
    """Валидатор для view_number контракта (ViewNumber и ViewPercent)."""

    def __init__(self):
        super().__init__("view_number")


class ViewTokenAmountValidator(ContractValidator):
    """Валидатор для view_token_amount контракта."""

    def __init__(self):
        super().__init__("view_token_amount")


class CalculatedTokenValueValidator(ContractValidator):
    """Валидатор для calculated_token_value контракта."""

    def __init__(self):
        super().__init__("calculated_token_value")


class RobustResultValidator(ContractValidator):
    """Валидатор для robust_result контракта."""

    def __init__(self):
        super().__init__("robust_result")


# =============================================================================
# PAYLOADS
# =============================================================================


def model_to_payload(model: BaseModel) -> Dict[str, Any]:
    """Pydantic модель → JSON-совместимый dict."""
    return model.model_dump(mode="json")


def robust_result_to_payload(result: RobustResult[Any]) -> Dict[str, Any]:
    """
    RobustResult → JSON-совместимая тройка для слоя отображения.

    Examples:
        >>> robust_result_to_payload(RobustResult(value=None, warnings=["w"]))
        {'value': None, 'warnings': ['w'], 'errors': []}
    """
    value = result.value
    if isinstance(value, BaseModel):
        value = model_to_payload(value)

    return {
        "value": value,
        "warnings": list(result.warnings),
        "errors": list(result.errors),
    }


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_view_number(data: Dict[str, Any]) -> None:
    """
    Валидация view_number данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ViewNumberValidator().validate(data)


def validate_view_token_amount(data: Dict[str, Any]) -> None:
    """
    Валидация view_token_amount данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ViewTokenAmountValidator().validate(data)


def validate_calculated_token_value(data: Dict[str, Any]) -> None:
    """
    Валидация calculated_token_value данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CalculatedTokenValueValidator().validate(data)


def validate_robust_result(data: Dict[str, Any]) -> None:
    """
    Валидация robust_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RobustResultValidator().validate(data)
