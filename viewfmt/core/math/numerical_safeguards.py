"""
Numerical Safeguards — Decimal-примитивы форматирования

Модуль обеспечивает численную устойчивость всех шагов форматирования:
- Разбор входа (int/float/Decimal/str) в точный Decimal без потери точности
- NaN/Inf детекция для fallback-веток форматтеров
- Округление half-up для записи и half toward +inf для выбора полосы
- Границы safe-integer диапазона для нормализации чисел

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Разбор никогда не бросает исключение (невалидный вход → Decimal NaN)
2. Float конвертируется через кратчайший repr, а не через двоичное значение
3. Квантование не зависит от глобального decimal-контекста потока
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Final, Union

# =============================================================================
# SAFE-INTEGER ДИАПАЗОН
# =============================================================================

# Максимальное целое, точно представимое в float (2**53 - 1)
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# Минимальное целое, точно представимое в float
MIN_SAFE_INTEGER: Final[int] = -(2**53 - 1)

# Минимальная точность decimal-контекста для квантования
MIN_CONTEXT_PRECISION: Final[int] = 28

NumberLike = Union[int, float, Decimal, str]

_NAN: Final[Decimal] = Decimal("NaN")


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_safe_integer(value: int) -> bool:
    """
    Проверка, что целое лежит в safe-integer диапазоне.

    Examples:
        >>> is_safe_integer(2**53 - 1)
        True
        >>> is_safe_integer(2**53)
        False
    """
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


# =============================================================================
# РАЗБОР
# =============================================================================


def to_decimal(value: NumberLike) -> Decimal:
    """
    Разбор числоподобного значения в Decimal.

    Строки обрезаются по краям и разбираются как десятичная запись.
    Float идёт через repr (кратчайшее представление), поэтому 0.1 → Decimal("0.1").

    Args:
        value: int, float, Decimal или строка

    Returns:
        Decimal; NaN если значение не разбирается или тип не поддерживается

    Examples:
        >>> to_decimal("1234.5678")
        Decimal('1234.5678')
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("abc").is_nan()
        True
    """
    if isinstance(value, bool):
        return _NAN

    if isinstance(value, Decimal):
        return _NAN if value.is_snan() else value

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        return Decimal(repr(value))

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return _NAN
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return _NAN
        # sNaN не конвертируется во float и ломает сравнения
        return _NAN if parsed.is_snan() else parsed

    return _NAN


def to_plain_string(value: Decimal) -> str:
    """
    Десятичная запись без экспоненты и без хвостовых нулей дробной части.

    Examples:
        >>> to_plain_string(Decimal("9.5400"))
        '9.54'
        >>> to_plain_string(Decimal("1E+2"))
        '100'
    """
    if not value.is_finite():
        return str(value)

    if value == 0:
        return "0"

    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def decimal_to_float(value: Decimal) -> float:
    """Decimal → float (overflow даёт ±inf, а не исключение)."""
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def quantize_context(value: Decimal, places: int) -> Context:
    """
    Локальный decimal-контекст с точностью, достаточной для квантования.

    Точность растёт вместе с числом цифр значения, чтобы quantize
    не падал с InvalidOperation на больших суммах.
    """
    if not value.is_finite():
        return Context(prec=MIN_CONTEXT_PRECISION, rounding=ROUND_HALF_UP)

    integer_digits = value.adjusted() + 1 if value else 1
    coefficient_digits = len(value.as_tuple().digits)
    precision = max(
        MIN_CONTEXT_PRECISION,
        integer_digits + places + 2,
        coefficient_digits + 2,
    )
    return Context(prec=precision, rounding=ROUND_HALF_UP)


def round_half_up(value: Decimal, places: int) -> Decimal:
    """
    Округление до places знаков после запятой (half away from zero).

    Args:
        value: Конечный Decimal
        places: Число знаков после запятой (>= 0)

    Returns:
        Квантованный Decimal

    Raises:
        ValueError: Если places < 0

    Examples:
        >>> round_half_up(Decimal("1234.567"), 2)
        Decimal('1234.57')
        >>> round_half_up(Decimal("0.005"), 2)
        Decimal('0.01')
        >>> round_half_up(Decimal("-0.005"), 2)
        Decimal('-0.01')
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    quantum = Decimal(1).scaleb(-places)
    return value.quantize(quantum, context=quantize_context(value, places))


def round_half_toward_positive(value: Decimal, places: int) -> Decimal:
    """
    Округление до places знаков, половина — в сторону +inf.

    Совпадает с Math.round(x * 10**places) / 10**places: положительные
    половины вверх, отрицательные к нулю. Используется для выбора полосы.

    Examples:
        >>> round_half_toward_positive(Decimal("0.125"), 2)
        Decimal('0.13')
        >>> round_half_toward_positive(Decimal("-0.125"), 2)
        Decimal('-0.12')
        >>> round_half_toward_positive(Decimal("-0.005"), 2)
        Decimal('-0.00')
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    quantum = Decimal(1).scaleb(-places)
    return value.quantize(quantum, rounding=rounding, context=quantize_context(value, places))
