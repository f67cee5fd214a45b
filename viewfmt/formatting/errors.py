"""
Санкционированные отказы детерминированного слоя форматирования.

Только эти два условия форматтеры сигнализируют исключением; всё остальное
выражается через None (структурное отсутствие) или флаги результата.
Robust-слой перехватывает их и превращает в строки ошибок.
"""


class FormattingError(ValueError):
    """Базовый класс отказов форматтеров."""


class InvalidAmountError(FormattingError):
    """Значение в base units не приводится к целому."""


class MissingDecimalsError(FormattingError):
    """Для значения в base units не передано число десятичных знаков."""
