"""
Rounding — Движок округления десятичных magnitude

Округление magnitude (строки цифр) до заданного числа отброшенных разрядов.
Знак учитывается только режимами CEILING/FLOOR и передаётся флагом.

Алгоритм:
1. magnitude делится на kept (сохраняемый префикс) и discarded (отбрасываемый суффикс)
2. По discarded вычисляются факты: first digit, nonzero, exact half
3. Таблица _INCREMENT_RULES решает, нужно ли kept + 1 (с переносом)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Первая отброшенная цифра < 5 → HALF_* режимы никогда не округляют вверх
   (например HALF_UP: "5.06" → "5", хвост "06" < 0.5)
2. DOWN никогда не увеличивает magnitude
3. Результат — нормализованная magnitude
"""

from enum import Enum
from typing import Callable, Final, NamedTuple

from src.core.math import magnitude

# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления"""

    UP = "up"  # от нуля
    DOWN = "down"  # к нулю (усечение)
    CEILING = "ceiling"  # к +inf
    FLOOR = "floor"  # к -inf
    HALF_UP = "half_up"  # к ближайшему, половина — от нуля
    HALF_DOWN = "half_down"  # к ближайшему, половина — к нулю
    HALF_EVEN = "half_even"  # к ближайшему, половина — к чётному
    HALF_ODD = "half_odd"  # к ближайшему, половина — к нечётному


# Режим округления по умолчанию для BigDecimal.round() и round(d, n)
DEFAULT_ROUNDING_MODE: Final[RoundingMode] = RoundingMode.HALF_UP


# =============================================================================
# ФАКТЫ ОБ ОТБРАСЫВАЕМЫХ РАЗРЯДАХ
# =============================================================================


class DiscardedDigits(NamedTuple):
    """
    Всё, что нужно правилам округления.

    Attributes:
        first: Старшая отбрасываемая цифра (0-9)
        nonzero: Хотя бы одна отбрасываемая цифра ненулевая
        exact_half: first == 5 и все последующие цифры нули
        kept_odd: Младшая сохраняемая цифра нечётная
        negative: Знак исходного значения отрицательный
    """

    first: int
    nonzero: bool
    exact_half: bool
    kept_odd: bool
    negative: bool


def inspect_discarded(kept: str, discarded: str, negative: bool) -> DiscardedDigits:
    """
    Вычисление фактов по разбиению magnitude.

    Args:
        kept: Сохраняемый префикс (непустой)
        discarded: Отбрасываемый суффикс (непустой)
        negative: Знак исходного значения

    Returns:
        DiscardedDigits
    """
    first = int(discarded[0])
    tail_zero = discarded[1:].strip("0") == ""
    return DiscardedDigits(
        first=first,
        nonzero=first != 0 or not tail_zero,
        exact_half=first == 5 and tail_zero,
        kept_odd=int(kept[-1]) % 2 == 1,
        negative=negative,
    )


# =============================================================================
# ТАБЛИЦА ПРАВИЛ
# =============================================================================

# Для каждого режима: увеличивать ли kept на единицу младшего разряда
_INCREMENT_RULES: Final[dict[RoundingMode, Callable[[DiscardedDigits], bool]]] = {
    RoundingMode.UP: lambda d: d.nonzero,
    RoundingMode.DOWN: lambda d: False,
    RoundingMode.CEILING: lambda d: d.nonzero and not d.negative,
    RoundingMode.FLOOR: lambda d: d.nonzero and d.negative,
    RoundingMode.HALF_UP: lambda d: d.first >= 5,
    RoundingMode.HALF_DOWN: lambda d: d.first > 5 or (d.first == 5 and not d.exact_half),
    RoundingMode.HALF_EVEN: lambda d: (
        d.first > 5 or (d.exact_half and d.kept_odd) or (d.first == 5 and not d.exact_half)
    ),
    RoundingMode.HALF_ODD: lambda d: (
        d.first > 5 or (d.exact_half and not d.kept_odd) or (d.first == 5 and not d.exact_half)
    ),
}


def should_increment(mode: RoundingMode, discarded: DiscardedDigits) -> bool:
    """
    Решение об увеличении сохраняемой части.

    Args:
        mode: Режим округления
        discarded: Факты об отбрасываемых разрядах

    Returns:
        True если kept нужно увеличить на 1
    """
    return _INCREMENT_RULES[mode](discarded)


# =============================================================================
# ОКРУГЛЕНИЕ MAGNITUDE
# =============================================================================


def round_digits(digits: str, drop: int, mode: RoundingMode, negative: bool = False) -> str:
    """
    Округление magnitude с отбрасыванием drop младших разрядов.

    Если drop >= len(digits), kept = "0", а digits дополняется нулями слева:
    round_digits("4", 2, HALF_UP) рассматривает "0" | "04".

    Args:
        digits: Нормализованная magnitude
        drop: Количество отбрасываемых младших разрядов (>= 0)
        mode: Режим округления
        negative: Знак исходного значения (для CEILING/FLOOR)

    Returns:
        Нормализованная magnitude из len(digits) - drop (или меньше) разрядов

    Raises:
        ValueError: Если drop < 0
    """
    if drop < 0:
        raise ValueError(f"drop must be non-negative, got {drop}")
    if drop == 0:
        return magnitude.normalize(digits)

    padded = digits.zfill(drop + 1)
    kept, discarded = padded[:-drop], padded[-drop:]

    if should_increment(mode, inspect_discarded(kept, discarded, negative)):
        return magnitude.add(kept, magnitude.ONE)
    return magnitude.normalize(kept)
