"""
ViewValues — Модели результатов форматирования

Immutable Pydantic модели, которые отдаются потребителю (UI-слою).
Полная совместимость с JSON Schema (viewfmt/core/contracts/schema/).

Инварианты для всех моделей:
- view_value/compact никогда не содержат символ валюты/единицы
- sign всегда вынесен отдельно ("-" или "")
- below_min/above_max — флаги-сентинелы, их отрисовка решается потребителем
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


# =============================================================================
# CONSTANTS
# =============================================================================

PERCENT_SYMBOL = "%"

DEFAULT_CURRENCY_SYMBOL = "$"


# =============================================================================
# VIEW MODELS
# =============================================================================


class ViewNumber(BaseModel):
    """
    Результат форматирования числа (number / scaled-integer).

    Immutable модель (frozen=True).
    """

    view_value: str = Field(..., description="Выбранное отображение без символа")
    compact: str = Field(..., description="Всегда компактная запись |value| без символа")
    sign: Literal["-", ""] = Field("", description="Знак, вынесенный отдельно")
    below_min: bool = Field(False, description="Значение ниже настроенного floor")
    above_max: bool = Field(False, description="Значение выше настроенного ceiling")
    symbol: Optional[str] = Field(None, description="Символ для отображения (эхо входа)")
    original_value: str = Field(..., description="Исходная текстовая форма значения")
    original_value_number: Optional[float] = Field(
        None, description="Исходное значение как float (NaN для нечисловых строк)"
    )
    decimals: Optional[int] = Field(
        None, ge=0, description="Число десятичных знаков base units (nullable)"
    )

    model_config = {"frozen": True}


class ViewPercent(ViewNumber):
    """
    Результат форматирования процента.

    Все числовые поля в процентных единицах (ratio * 100).
    """

    symbol: Optional[str] = Field(PERCENT_SYMBOL, description="Всегда '%'")


class ViewTokenAmount(ViewNumber):
    """
    Результат форматирования суммы токена.

    Дополнительно содержит эхо base-units значения.
    """

    amount: int = Field(..., description="Сумма в base units")


# =============================================================================
# INPUT / CALCULATION MODELS
# =============================================================================


class TokenAmountInput(BaseModel):
    """
    Вход детерминированного форматтера суммы токена.

    Отсутствие amount или decimals → форматтер возвращает None (без ошибки).
    """

    amount: Optional[int | str] = Field(None, description="Сумма в base units")
    symbol: Optional[str] = Field(None, description="Символ токена")
    decimals: Optional[int] = Field(None, ge=0, description="Decimals токена")

    model_config = {"frozen": True, "strict": True}


class CalculatedTokenValue(BaseModel):
    """
    Стоимость позиции токена: amount * price в шкале decimals цены.
    """

    token_value_raw: int = Field(..., description="Стоимость в base units цены")
    token_value_decimals: int = Field(..., ge=0, description="Decimals стоимости")

    model_config = {"frozen": True}
