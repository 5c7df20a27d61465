"""
Decimal Parser — Разбор и валидация десятичных скаляров

Превращает внешний скаляр (str, int, float) в каноническую тройку
(negative, unscaled, scale) без потери точности.

Грамматика (только ASCII, полное совпадение):
    [+-]? [0-9]+ ( '.' [0-9]+ )?

Отклоняется: двойной знак, посторонние символы, пустая сторона от точки,
альтернативный разделитель (","), экспонента ("1e-05"), nan/inf, пробелы.

Scale:
- не задан → число цифр после точки (0 без точки)
- меньше натурального → лишние цифры ОТБРАСЫВАЮТСЯ (усечение, не округление)
- больше натурального → дробь дополняется нулями справа
"""

import logging
import re
from typing import Any, Final, NamedTuple, Optional

from src.core.math import magnitude
from src.core.math.decimal_errors import InvalidFormat, InvalidInput, InvalidScale

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАММАТИКА
# =============================================================================

# Группы: sign, integer digits, fraction digits (может отсутствовать)
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"([+-]?)([0-9]+)(?:\.([0-9]+))?")


# =============================================================================
# РЕЗУЛЬТАТ РАЗБОРА
# =============================================================================


class ParsedDecimal(NamedTuple):
    """Каноническая форма разобранного скаляра."""

    negative: bool
    unscaled: str
    scale: int


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_scale(scale: Any, name: str = "scale") -> int:
    """
    Проверка scale: неотрицательный int (bool отклоняется).

    Raises:
        InvalidScale: Если scale не int или отрицательный
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise InvalidScale(f"{name} must be an int, got {type(scale).__name__}")
    if scale < 0:
        raise InvalidScale(f"{name} must be non-negative, got {scale}")
    return scale


def scalar_to_text(value: Any) -> str:
    """
    Текстовая форма скаляра.

    Args:
        value: str, int или float

    Returns:
        Строка для разбора грамматикой

    Raises:
        InvalidInput: Для None, bool и любых нескалярных типов
    """
    if isinstance(value, str):
        return value
    # bool — подкласс int, но не числовой литерал
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidInput(f"Decimal input must be str, int or float, got {type(value).__name__}")


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_decimal_parts(value: Any, scale: Optional[int] = None) -> ParsedDecimal:
    """
    Разбор скаляра в каноническую форму.

    Args:
        value: Скаляр (str, int, float)
        scale: Целевой scale (None → натуральный)

    Returns:
        ParsedDecimal с нормализованной unscaled magnitude

    Raises:
        InvalidInput: Вход не скаляр
        InvalidFormat: Скаляр не соответствует грамматике
        InvalidScale: scale не неотрицательный int

    Examples:
        >>> parse_decimal_parts("-00123.45")
        ParsedDecimal(negative=True, unscaled='12345', scale=2)
        >>> parse_decimal_parts("123.456", 2)
        ParsedDecimal(negative=False, unscaled='12345', scale=2)
        >>> parse_decimal_parts("-0.00")
        ParsedDecimal(negative=False, unscaled='0', scale=2)
    """
    text = scalar_to_text(value)
    if scale is not None:
        scale = validate_scale(scale)

    match = DECIMAL_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidFormat(f"Invalid decimal format: {text!r}")

    sign, integer, fraction = match.group(1), match.group(2), match.group(3) or ""

    if scale is None:
        scale = len(fraction)
    elif scale < len(fraction):
        logger.debug("Truncating %r to scale %d", text, scale)
        fraction = fraction[:scale]
    else:
        fraction = fraction.ljust(scale, "0")

    unscaled = magnitude.normalize(integer + fraction)
    negative = sign == "-" and unscaled != magnitude.ZERO

    return ParsedDecimal(negative=negative, unscaled=unscaled, scale=scale)
