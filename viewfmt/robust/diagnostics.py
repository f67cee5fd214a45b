"""
Diagnostics — результат robust-вызова и агрегация предупреждений/ошибок

RobustResult[T] — единая тройка (value, warnings, errors), которую
возвращает каждая robust-обёртка. Инвариант: непустой errors ⇒ value is None.

Sink диагностики — явный коллаборатор (DiagnosticsSink). Вызывается не более
одного раза на robust-вызов и только при непустой диагностике; отказ sink
логируется и не влияет на результат.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypedDict,
    TypeVar,
    Union,
    runtime_checkable,
)

from viewfmt.core.log import get_logger

T = TypeVar("T")

logger = get_logger("viewfmt.robust")


# =============================================================================
# ENUMS
# =============================================================================


class MissingRequiredFieldSeverity(str, Enum):
    """Уровень, с которым сообщается отсутствие обязательного поля."""

    WARNING = "warning"
    ERROR = "error"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RobustResult(Generic[T]):
    """
    Результат robust-вызова.

    value=None без ошибок — допустимый исход "недостаточно входных данных".
    """

    value: Optional[T]
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.errors and self.value is not None:
            raise ValueError("RobustResult with errors must not carry a value")


class RobustDisplayValue(TypedDict, total=False):
    """Форма, которую ожидает слой отображения."""

    value: Any
    warnings: List[str]
    errors: List[str]


@dataclass(frozen=True)
class RobustDiagnostics:
    """Объединённая диагностика нескольких шагов."""

    warnings: List[str]
    errors: List[str]


# =============================================================================
# SINKS
# =============================================================================


@dataclass(frozen=True)
class DiagnosticsReport:
    """Один вызов sink: контекст и финальная диагностика."""

    context: str
    warnings: Tuple[str, ...]
    errors: Tuple[str, ...]


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Получатель диагностики robust-вызовов."""

    def report(self, context: str, warnings: Sequence[str], errors: Sequence[str]) -> None:
        ...


class LoggingDiagnosticsSink:
    """Sink по умолчанию: warnings → WARNING, errors → ERROR, с префиксом [context]."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logger

    def report(self, context: str, warnings: Sequence[str], errors: Sequence[str]) -> None:
        for warning in warnings:
            self.logger.warning("[%s] %s", context, warning)
        for error in errors:
            self.logger.error("[%s] %s", context, error)


class CollectingDiagnosticsSink:
    """Sink, накапливающий отчёты в памяти (тесты, агрегация у потребителя)."""

    def __init__(self) -> None:
        self.reports: List[DiagnosticsReport] = []

    def report(self, context: str, warnings: Sequence[str], errors: Sequence[str]) -> None:
        self.reports.append(
            DiagnosticsReport(context=context, warnings=tuple(warnings), errors=tuple(errors))
        )

    def clear(self) -> None:
        self.reports.clear()


class NullDiagnosticsSink:
    """Sink, который ничего не делает."""

    def report(self, context: str, warnings: Sequence[str], errors: Sequence[str]) -> None:
        return None


DEFAULT_DIAGNOSTICS_SINK: DiagnosticsSink = LoggingDiagnosticsSink()


# =============================================================================
# FINALIZATION
# =============================================================================


def to_error_message(error: Any) -> str:
    """Текст исключения (или str(error) для не-исключений)."""
    if isinstance(error, BaseException):
        message = str(error)
        return message or type(error).__name__
    return str(error)


def finalize_robust_result(
    context: str,
    value: Optional[T],
    warnings: List[str],
    errors: List[str],
    sink: Optional[DiagnosticsSink] = None,
) -> RobustResult[T]:
    """
    Сборка RobustResult и однократный отчёт в sink.

    Args:
        context: Метка вызова для сообщений sink
        value: Вычисленное значение (игнорируется при наличии ошибок)
        warnings: Накопленные предупреждения
        errors: Накопленные ошибки
        sink: Получатель диагностики (None → DEFAULT_DIAGNOSTICS_SINK)

    Returns:
        RobustResult с копиями списков
    """
    result: RobustResult[T] = RobustResult(
        value=None if errors else value,
        warnings=list(warnings),
        errors=list(errors),
    )

    if result.warnings or result.errors:
        target = sink if sink is not None else DEFAULT_DIAGNOSTICS_SINK
        try:
            target.report(context, tuple(result.warnings), tuple(result.errors))
        except Exception:
            logger.exception("diagnostics sink failed for context %s", context)

    return result


# =============================================================================
# AGGREGATION
# =============================================================================


def _diagnostics_of(result: Any, name: str) -> Iterable[str]:
    if isinstance(result, Mapping):
        return result.get(name) or ()
    return getattr(result, name, None) or ()


def _unique(lines: Iterable[str]) -> List[str]:
    # dict сохраняет порядок вставки → первое вхождение побеждает
    return list(dict.fromkeys(lines))


def merge_robust_diagnostics(
    *results: Union[RobustResult[Any], RobustDiagnostics, Mapping[str, Any], None],
) -> RobustDiagnostics:
    """
    Объединение диагностики нескольких результатов.

    Дедупликация по точному совпадению строк, порядок первого появления.
    None-элементы пропускаются.

    Examples:
        >>> merged = merge_robust_diagnostics(
        ...     {"warnings": ["w1", "w1"], "errors": ["e1"]},
        ...     {"warnings": ["w2"], "errors": ["e1", "e2"]},
        ... )
        >>> merged.warnings, merged.errors
        (['w1', 'w2'], ['e1', 'e2'])
    """
    present = [result for result in results if result is not None]
    warnings = _unique(line for result in present for line in _diagnostics_of(result, "warnings"))
    errors = _unique(line for result in present for line in _diagnostics_of(result, "errors"))
    return RobustDiagnostics(warnings=warnings, errors=errors)


def build_robust_diagnostics_message(
    warnings: Optional[Iterable[str]] = None,
    errors: Optional[Iterable[str]] = None,
) -> Optional[str]:
    """
    Человекочитаемый отчёт: блок "Errors:", затем блок "Warnings:".

    Строки обрезаются, пустые отбрасываются, дубликаты схлопываются.

    Returns:
        Текст отчёта; None если обе коллекции пусты

    Examples:
        >>> build_robust_diagnostics_message(warnings=["w1", "w1", "  "], errors=["e1"])
        'Errors:\\n- e1\\nWarnings:\\n- w1'
    """
    unique_errors = _unique(line.strip() for line in errors or () if line.strip())
    unique_warnings = _unique(line.strip() for line in warnings or () if line.strip())

    lines: List[str] = []

    if unique_errors:
        lines.append("Errors:")
        lines.extend(f"- {line}" for line in unique_errors)

    if unique_warnings:
        lines.append("Warnings:")
        lines.extend(f"- {line}" for line in unique_warnings)

    if not lines:
        return None

    return "\n".join(lines)


def map_robust_result_to_display_value(
    result: Union[RobustResult[Any], Mapping[str, Any]],
) -> RobustDisplayValue:
    """Проекция результата в форму для слоя отображения."""
    if isinstance(result, Mapping):
        return RobustDisplayValue(
            value=result.get("value"),
            warnings=list(result.get("warnings") or []),
            errors=list(result.get("errors") or []),
        )

    return RobustDisplayValue(
        value=result.value,
        warnings=list(result.warnings),
        errors=list(result.errors),
    )
