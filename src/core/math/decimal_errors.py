"""
Decimal Errors — Исключения десятичной арифметики

Все ошибки детерминированы и исправляются вызывающим кодом:
повторная попытка с теми же аргументами всегда даст ту же ошибку.

Иерархия:
    DecimalError (ValueError)
    ├── InvalidInput (+ TypeError)        — вход не скаляр (None, list, dict, объект)
    ├── InvalidFormat                     — скаляр не соответствует грамматике
    ├── DivisionByZero (+ ZeroDivisionError)
    ├── InvalidExponent                   — отрицательный или нецелый показатель
    └── InvalidScale                      — отрицательный или нецелый scale
"""


class DecimalError(ValueError):
    """Базовая ошибка десятичной арифметики."""

    pass


class InvalidInput(DecimalError, TypeError):
    """
    Вход конструктора не является скаляром.

    Допустимы str, int, float и BigDecimal. bool отклоняется явно,
    несмотря на то что bool — подкласс int.
    """

    pass


class InvalidFormat(DecimalError):
    """
    Скаляр не соответствует грамматике [sign]digits['.'digits].

    Примеры: "--123.45", "123.", ".45", "-123,45", "1e-05".
    """

    pass


class DivisionByZero(DecimalError, ZeroDivisionError):
    """
    Деление на ноль.

    Проверяется magnitude делителя, а не его текстовое представление:
    "0.0000" — тоже ноль.
    """

    pass


class InvalidExponent(DecimalError):
    """Показатель степени отрицательный или не int."""

    pass


class InvalidScale(DecimalError):
    """Scale отрицательный или не int."""

    pass
