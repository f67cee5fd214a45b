"""
Locale Format — CLDR-запись чисел (стандартная и компактная)

Обёртка над Babel, которая даёт детерминированный аналог Intl.NumberFormat:
- стандартная запись с min/max знаками после запятой и опциональной группировкой
- компактная запись ("1.23K", "12.35M") с фиксированным числом знаков

Округление всегда half-up (от нуля) и выполняется до передачи в Babel,
поэтому результат не зависит от decimal-контекста вызывающего кода.
Все функции принимают неотрицательные значения: знак форматтеры держат отдельно.
"""

from decimal import Decimal, localcontext
from functools import lru_cache
from typing import Mapping, Optional, Tuple

from babel import Locale
from babel.numbers import NumberPattern, format_decimal, parse_pattern

from viewfmt.core.math.numerical_safeguards import quantize_context, round_half_up


# =============================================================================
# LOCALE
# =============================================================================


@lru_cache(maxsize=64)
def resolve_locale(locale: str) -> Locale:
    """
    Разбор идентификатора локали (BCP 47 "en-US" или POSIX "en_US").

    Raises:
        babel.UnknownLocaleError: Если локаль неизвестна CLDR
        ValueError: Если идентификатор синтаксически невалиден
    """
    return Locale.parse(locale.strip().replace("-", "_"))


# =============================================================================
# STANDARD NOTATION
# =============================================================================


def fraction_pattern(min_fraction: int, max_fraction: int, grouping: bool = True) -> str:
    """
    Паттерн LDML для заданного числа знаков.

    Examples:
        >>> fraction_pattern(2, 2)
        '#,##0.00'
        >>> fraction_pattern(0, 6, grouping=False)
        '0.######'
    """
    integer = "#,##0" if grouping else "0"
    if max_fraction <= 0:
        return integer
    min_fraction = min(min_fraction, max_fraction)
    return f"{integer}.{'0' * min_fraction}{'#' * (max_fraction - min_fraction)}"


def format_standard(
    value: Decimal,
    locale: str,
    min_fraction: int,
    max_fraction: int,
    grouping: bool = True,
) -> str:
    """
    Стандартная запись числа.

    Args:
        value: Неотрицательный конечный Decimal
        locale: Идентификатор локали
        min_fraction: Минимум знаков после запятой
        max_fraction: Максимум знаков после запятой (точность округления)
        grouping: Разделитель групп разрядов

    Examples:
        >>> format_standard(Decimal("1234.567"), "en-US", 2, 2)
        '1,234.57'
        >>> format_standard(Decimal("1.5"), "en-US", 0, 6, grouping=False)
        '1.5'
    """
    rounded = round_half_up(value.copy_abs(), max_fraction)
    with localcontext(quantize_context(rounded, max_fraction)):
        return format_decimal(
            rounded,
            format=fraction_pattern(min_fraction, max_fraction, grouping),
            locale=resolve_locale(locale),
        )


# =============================================================================
# COMPACT NOTATION
# =============================================================================


def _short_compact_formats(locale: Locale) -> Mapping[str, Mapping[str, NumberPattern]]:
    return locale.compact_decimal_formats.get("short", {})


def _scale_to_compact(
    value: Decimal,
    formats: Mapping[str, Mapping[str, NumberPattern]],
    fraction_digits: int,
) -> Tuple[Decimal, Optional[int]]:
    """
    Выбор порядка компактной записи и округлённой мантиссы.

    Если округление мантиссы переносит значение в следующий порядок
    (999,999 → "1,000.00K"), выбор повторяется для округлённого значения.

    Returns:
        (мантисса, порядок); порядок None если компактный паттерн не применяется
    """
    other = formats.get("other", {})
    magnitudes = sorted((int(m) for m in other), reverse=True)

    for index, magnitude in enumerate(magnitudes):
        if value < magnitude:
            continue

        pattern = parse_pattern(other[str(magnitude)])
        if pattern.pattern == "0":
            break

        # "00K" для 10000: мантисса = value / 10^3
        shift = len(str(magnitude)) - pattern.pattern.count("0")
        scaled = value.scaleb(-shift, context=quantize_context(value, fraction_digits))
        mantissa = round_half_up(scaled, fraction_digits)

        if index > 0:
            restored = mantissa.scaleb(shift, context=quantize_context(mantissa, 0))
            if restored >= magnitudes[index - 1]:
                return _scale_to_compact(restored, formats, fraction_digits)

        return mantissa, magnitude

    rounded = round_half_up(value, fraction_digits)

    # 999.999 при 2 знаках округляется до 1000.00 и переходит в первый порядок
    if magnitudes and value < magnitudes[-1] <= rounded:
        return _scale_to_compact(rounded, formats, fraction_digits)

    return rounded, None


def format_compact(value: Decimal, locale: str, fraction_digits: int) -> str:
    """
    Компактная запись числа (short CLDR форма) с фиксированным числом знаков.

    Значения меньше наименьшего компактного порядка (для en — 1000)
    выводятся в стандартной записи с теми же знаками.

    Args:
        value: Неотрицательный конечный Decimal
        locale: Идентификатор локали
        fraction_digits: Ровно столько знаков после запятой

    Examples:
        >>> format_compact(Decimal("1234.567"), "en-US", 2)
        '1.23K'
        >>> format_compact(Decimal("0"), "en-US", 2)
        '0.00'
        >>> format_compact(Decimal("999999"), "en-US", 2)
        '1.00M'
    """
    resolved = resolve_locale(locale)
    formats = _short_compact_formats(resolved)
    mantissa, magnitude = _scale_to_compact(value.copy_abs(), formats, fraction_digits)

    number = format_standard(mantissa, locale, fraction_digits, fraction_digits, grouping=True)
    if magnitude is None:
        return number

    # Плюральная форма выбирается по мантиссе ("1K" vs "2K" в некоторых локалях)
    plural = resolved.plural_form(mantissa)
    other = formats["other"]
    pattern = parse_pattern(formats.get(plural, other).get(str(magnitude), other[str(magnitude)]))
    return f"{pattern.prefix[0]}{number}{pattern.suffix[0]}"
