"""
Magnitude — Арифметика неотрицательных целых произвольной длины

Слой big-integer для десятичного ядра. Оперирует строками десятичных цифр
без знака и без scale: знак и положение запятой ведёт вызывающий код
(BigDecimal), этот модуль о них ничего не знает.

Представление:
- magnitude — строка ASCII-цифр без ведущих нулей ("0" — единственный ноль)
- все функции возвращают нормализованную magnitude

Вычисления делегируются встроенному int. Конверсия str <-> int выполняется
кусками по DIGIT_CHUNK_SIZE цифр (divide and conquer), поэтому значения
длиннее лимита интерпретатора (sys.get_int_max_str_digits, 4300 по умолчанию)
обрабатываются без изменения глобальной настройки.

РЕСУРСЫ:
    multiply(a, b): длина результата <= len(a) + len(b)
    power(a, n):    длина результата <= n * len(a)
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ КОНВЕРСИИ
# =============================================================================

# Максимальное число цифр, конвертируемое одним вызовом int()/str().
# Должно быть меньше лимита интерпретатора (4300).
DIGIT_CHUNK_SIZE: Final[int] = 4000

# log10(2): оценка числа десятичных цифр по bit_length
_LOG10_2: Final[float] = 0.30102999566398120

ZERO: Final[str] = "0"
ONE: Final[str] = "1"


# =============================================================================
# КОНВЕРСИЯ str <-> int
# =============================================================================


def from_digits(digits: str) -> int:
    """
    Конверсия строки цифр в int.

    Строки длиннее DIGIT_CHUNK_SIZE делятся пополам и собираются как
    hi * 10**len(lo) + lo.

    Args:
        digits: Непустая строка ASCII-цифр (ведущие нули допустимы)

    Returns:
        Неотрицательное целое
    """
    if len(digits) <= DIGIT_CHUNK_SIZE:
        return int(digits)

    half = len(digits) // 2
    hi = from_digits(digits[:-half])
    lo = from_digits(digits[-half:])
    return hi * 10**half + lo


def to_digits(value: int) -> str:
    """
    Конверсия неотрицательного int в нормализованную строку цифр.

    Args:
        value: Неотрицательное целое

    Returns:
        Строка цифр без ведущих нулей

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError("magnitude must be non-negative")

    # value < 2**b => цифр не больше b * log10(2) + 1
    if value.bit_length() * _LOG10_2 < DIGIT_CHUNK_SIZE:
        return str(value)

    half = int(value.bit_length() * _LOG10_2) // 2
    hi, lo = divmod(value, 10**half)
    return to_digits(hi) + to_digits(lo).zfill(half)


# =============================================================================
# ЗАПРОСЫ
# =============================================================================


def normalize(digits: str) -> str:
    """Удаление ведущих нулей (пустой результат → "0")."""
    return digits.lstrip("0") or ZERO


def is_zero(digits: str) -> bool:
    """True если все цифры нули (в т.ч. ненормализованный "0000")."""
    return digits.strip("0") == ""


def digit_length(digits: str) -> int:
    """Количество значащих цифр magnitude (у нуля — 1)."""
    return len(normalize(digits))


def compare(a: str, b: str) -> int:
    """
    Сравнение двух magnitude без конверсии в int.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b
    """
    a = normalize(a)
    b = normalize(b)
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a == b:
        return 0
    return -1 if a < b else 1


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def shift_left(digits: str, places: int) -> str:
    """
    Умножение на 10**places дописыванием нулей справа.

    Raises:
        ValueError: Если places < 0
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    digits = normalize(digits)
    if digits == ZERO or places == 0:
        return digits
    return digits + ZERO * places


def add(a: str, b: str) -> str:
    """Сумма a + b."""
    return to_digits(from_digits(a) + from_digits(b))


def subtract(a: str, b: str) -> str:
    """
    Разность a - b.

    Raises:
        ValueError: Если a < b (результат не был бы magnitude)
    """
    if compare(a, b) < 0:
        raise ValueError("subtrahend exceeds minuend; compare magnitudes first")
    return to_digits(from_digits(a) - from_digits(b))


def multiply(a: str, b: str) -> str:
    """Произведение a * b."""
    if is_zero(a) or is_zero(b):
        return ZERO
    return to_digits(from_digits(a) * from_digits(b))


def divide(a: str, b: str) -> tuple[str, str]:
    """
    Целочисленное деление с остатком (усечение к нулю).

    Returns:
        (quotient, remainder), где a = quotient * b + remainder, 0 <= remainder < b

    Raises:
        ZeroDivisionError: Если b == 0
    """
    if is_zero(b):
        raise ZeroDivisionError("magnitude division by zero")

    quotient, remainder = divmod(from_digits(a), from_digits(b))
    return to_digits(quotient), to_digits(remainder)


def power(digits: str, exponent: int) -> str:
    """
    Возведение в неотрицательную целую степень.

    power(x, 0) == "1" для любого x, включая "0".

    Raises:
        ValueError: Если exponent < 0
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if exponent == 0:
        return ONE
    return to_digits(pow(from_digits(digits), exponent))
