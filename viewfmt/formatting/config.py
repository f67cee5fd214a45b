"""
Конфигурация форматтеров.

Frozen dataclass-конфиги с документированными дефолтами. Валидация
выполняется при создании, невалидные значения → ValueError.
"""

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Final, Mapping, Optional, Type, TypeVar, Union

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_LOCALE: Final[str] = "en-US"

DEFAULT_STANDARD_DECIMALS: Final[int] = 2

DEFAULT_COMPACT_DECIMALS: Final[int] = 2

# Порог перехода viewValue в компактную запись
DEFAULT_COMPACT_THRESHOLD: Final[float] = 1_000_000

# Floor для number/percent (в единицах отображения)
DEFAULT_MIN_DISPLAY: Final[float] = 0.01

# Полосы форматтера суммы токена
DEFAULT_SINGLE_DIGIT_DECIMALS: Final[int] = 6

DEFAULT_TWO_DIGIT_DECIMALS: Final[int] = 2

# Верхняя граница полос: |v| < 10 и |v| < 1,000,000
SINGLE_DIGIT_BAND_LIMIT: Final[int] = 10

TWO_DIGIT_BAND_LIMIT: Final[int] = 1_000_000

# Верхняя граница числа знаков (CLDR/Intl допускают 0..20)
MAX_FRACTION_DIGITS: Final[int] = 20


ConfigT = TypeVar("ConfigT", "NumberFormatConfig", "TokenAmountFormatConfig")


# =============================================================================
# VALIDATION
# =============================================================================


def _validate_fraction_digits(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= MAX_FRACTION_DIGITS:
        raise ValueError(f"{name} must be in [0, {MAX_FRACTION_DIGITS}], got {value}")


def _validate_bound(name: str, value: Optional[float]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number or None, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _validate_locale(value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"locale must be a non-empty string, got {value!r}")


# =============================================================================
# CONFIGS
# =============================================================================


@dataclass(frozen=True)
class NumberFormatConfig:
    """Конфигурация форматтера чисел.

    Используется для number и scaled-integer форматирования.
    min_display=None отключает floor; max_display=None отключает ceiling.
    """

    locale: str = DEFAULT_LOCALE

    # Знаки после запятой в стандартной записи (и точность округления)
    standard_decimals: int = DEFAULT_STANDARD_DECIMALS

    # Знаки после запятой в компактной записи
    compact_decimals: int = DEFAULT_COMPACT_DECIMALS

    # |rounded| >= порога → viewValue в компактной записи
    compact_threshold: float = DEFAULT_COMPACT_THRESHOLD

    min_display: Optional[float] = DEFAULT_MIN_DISPLAY
    max_display: Optional[float] = None

    def __post_init__(self) -> None:
        _validate_locale(self.locale)
        _validate_fraction_digits("standard_decimals", self.standard_decimals)
        _validate_fraction_digits("compact_decimals", self.compact_decimals)
        _validate_bound("compact_threshold", self.compact_threshold)
        _validate_bound("min_display", self.min_display)
        _validate_bound("max_display", self.max_display)


@dataclass(frozen=True)
class PercentFormatConfig(NumberFormatConfig):
    """Конфигурация форматтера процентов.

    Все пороги (min_display, max_display, compact_threshold) — в процентных
    единицах: min_display=0.01 означает 0.01%.
    """


@dataclass(frozen=True)
class TokenAmountFormatConfig:
    """Конфигурация форматтера суммы токена.

    Собственная точность для каждой полосы величины:
    - |v| < 10: single_digit_decimals, без группировки
    - 10 <= |v| < 1,000,000: two_digit_decimals, с группировкой
    - |v| >= 1,000,000: compact_decimals, компактная запись
    decimals (если задан) фиксирует точность независимо от величины.
    """

    locale: str = DEFAULT_LOCALE

    # Фиксированная точность (override полос)
    decimals: Optional[int] = None

    single_digit_decimals: int = DEFAULT_SINGLE_DIGIT_DECIMALS
    two_digit_decimals: int = DEFAULT_TWO_DIGIT_DECIMALS
    compact_decimals: int = DEFAULT_COMPACT_DECIMALS

    min_display: Optional[float] = None
    max_display: Optional[float] = None

    def __post_init__(self) -> None:
        _validate_locale(self.locale)
        if self.decimals is not None:
            _validate_fraction_digits("decimals", self.decimals)
        _validate_fraction_digits("single_digit_decimals", self.single_digit_decimals)
        _validate_fraction_digits("two_digit_decimals", self.two_digit_decimals)
        _validate_fraction_digits("compact_decimals", self.compact_decimals)
        _validate_bound("min_display", self.min_display)
        _validate_bound("max_display", self.max_display)


# =============================================================================
# COERCION
# =============================================================================


def coerce_config(
    config_cls: Type[ConfigT],
    options: Union[ConfigT, Mapping[str, Any], None],
) -> ConfigT:
    """
    Приведение options к конфигу нужного класса.

    Args:
        config_cls: Класс конфигурации
        options: None (дефолты), экземпляр конфига или mapping имён полей

    Returns:
        Экземпляр config_cls

    Raises:
        ValueError: Если mapping содержит неизвестные поля или невалидные значения
        TypeError: Если options неподдерживаемого типа
    """
    if options is None:
        return config_cls()

    if isinstance(options, config_cls):
        return options

    # NumberFormatConfig ↔ PercentFormatConfig: одинаковый набор полей
    if isinstance(options, NumberFormatConfig) and issubclass(config_cls, NumberFormatConfig):
        return config_cls(**asdict(options))

    if isinstance(options, Mapping):
        known = {f.name for f in fields(config_cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"unknown {config_cls.__name__} options: {', '.join(unknown)}")
        return config_cls(**options)

    raise TypeError(
        f"options must be {config_cls.__name__}, a mapping or None, got {type(options).__name__}"
    )
