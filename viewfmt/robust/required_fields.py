"""
Required-Field Validator

Проверка наличия обязательных полей по именам. Ничего не знает о форме
входа конкретного форматтера: поле отсутствует, если ключа нет или значение None.
"""

from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from viewfmt.robust.diagnostics import MissingRequiredFieldSeverity

SeverityLike = Union[MissingRequiredFieldSeverity, str]

# Маркер отсутствующего ключа (отличает "не передано" от "передано None")
_MISSING = object()


def resolve_severity(
    severity: SeverityLike,
    errors: List[str],
) -> Optional[MissingRequiredFieldSeverity]:
    """
    Разбор уровня severity.

    Returns:
        MissingRequiredFieldSeverity; None (и строка в errors) для неизвестного значения
    """
    try:
        return MissingRequiredFieldSeverity(severity)
    except (TypeError, ValueError):
        errors.append(
            f'missing_required_field_severity "{severity}" is invalid; '
            'expected "warning" or "error".'
        )
        return None


def _lookup(data: Any, field_name: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(field_name, _MISSING)
    return _MISSING


def report_missing_required_fields(
    data: Any,
    required_fields: Optional[Sequence[str]],
    warnings: List[str],
    errors: List[str],
    severity: SeverityLike = MissingRequiredFieldSeverity.WARNING,
) -> bool:
    """
    Проверка обязательных полей.

    Args:
        data: Входной mapping (None или не-mapping → все поля отсутствуют)
        required_fields: Имена обязательных полей; None/пусто → ничего не требуется
        warnings: Аккумулятор предупреждений
        errors: Аккумулятор ошибок
        severity: "warning" (default) или "error"

    Returns:
        True если хотя бы одно поле отсутствует (или severity невалиден)

    Examples:
        >>> warnings, errors = [], []
        >>> report_missing_required_fields({"value": None}, ["value"], warnings, errors)
        True
        >>> warnings
        ['value is required but received None.']
    """
    if not required_fields:
        return False

    level = resolve_severity(severity, errors)
    if level is None:
        return True

    target = errors if level is MissingRequiredFieldSeverity.ERROR else warnings
    has_missing = False

    for field_name in required_fields:
        value = _lookup(data, field_name)
        if value is _MISSING:
            target.append(f"{field_name} is required but was not provided.")
            has_missing = True
        elif value is None:
            target.append(f"{field_name} is required but received None.")
            has_missing = True

    return has_missing


def resolve_bigint_required_fields(
    data: Any,
    required_fields: Optional[Sequence[str]],
    amount_field: str = "amount",
    decimals_field: str = "decimals",
) -> Tuple[str, ...]:
    """
    Эффективный набор обязательных полей для bigint-обёрток.

    Явный список (даже пустой) всегда побеждает. Иначе требуется decimals,
    но только если сырое amount присутствует: вызов без amount не штрафуется
    за отсутствие decimals.

    Examples:
        >>> resolve_bigint_required_fields({"amount": 5}, None)
        ('decimals',)
        >>> resolve_bigint_required_fields({}, None)
        ()
        >>> resolve_bigint_required_fields({"amount": 5}, [])
        ()
    """
    if required_fields is not None:
        return tuple(required_fields)

    amount = _lookup(data, amount_field)
    if amount is _MISSING or amount is None:
        return ()

    return (decimals_field,)
