"""
BigDecimal — Неизменяемое десятичное число произвольной точности

Immutable Pydantic модель: value = sign * unscaled * 10**(-scale).
Полная совместимость с JSON Schema (src/core/contracts/schema/decimal.json) через
to_contract() / from_contract().

Каждая операция возвращает новый экземпляр; операнды не изменяются.
Результаты арифметики собираются из частей и проходят валидацию модели,
повторного разбора текста нет.

Scale результатов:
    a + b, a - b:  max(a.scale, b.scale)
    a * b:         a.scale + b.scale
    a / b:         a.scale + b.scale (или явный scale), остаток отбрасывается
    a ** n:        a.scale * n
    round(s):      s

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. unscaled без ведущих нулей ("0" — единственный ноль)
2. Ноль всегда NON_NEGATIVE (нет "-0")
3. scale >= 0
4. parse(d.value(), d.scale) == d
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.math import magnitude
from src.core.math.decimal_errors import DivisionByZero, InvalidExponent, InvalidScale
from src.core.math.decimal_parser import parse_decimal_parts, validate_scale
from src.core.math.rounding import DEFAULT_ROUNDING_MODE, RoundingMode, round_digits

logger = logging.getLogger(__name__)

# Операнд арифметики: BigDecimal или скаляр, разбираемый с натуральным scale
Operand = Union["BigDecimal", str, int, float]


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак десятичного числа"""

    NEGATIVE = "negative"
    NON_NEGATIVE = "non_negative"


# =============================================================================
# BIG DECIMAL MODEL
# =============================================================================


class BigDecimal(BaseModel):
    """
    Десятичное число произвольной точности.

    Создание — через BigDecimal.parse(); прямой вызов конструктора с полями
    допустим, но требует уже канонической формы.

    Равенство (==) и hash структурные: BigDecimal.parse("1.0") !=
    BigDecimal.parse("1.00"), хотя "1.0" <= "1.00" и "1.0" >= "1.00" оба True.
    Численное сравнение — compare() (принимает и скаляры) и <, <=, >, >=
    (только между BigDecimal, как и ==: со скаляром — TypeError).
    """

    sign: Sign = Field(Sign.NON_NEGATIVE, description="Знак (ноль всегда NON_NEGATIVE)")
    unscaled: str = Field(
        ..., pattern=r"^(0|[1-9][0-9]*)$", description="Magnitude без запятой, без ведущих нулей"
    )
    scale: int = Field(0, ge=0, description="Число цифр unscaled справа от запятой")

    model_config = {"frozen": True, "strict": True}  # Immutable

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigDecimal":
        """Ноль не может быть отрицательным."""
        if self.unscaled == magnitude.ZERO and self.sign is Sign.NEGATIVE:
            raise ValueError("zero magnitude must have NON_NEGATIVE sign")
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, value: Any, scale: Optional[int] = None) -> "BigDecimal":
        """
        Создание из скаляра.

        Args:
            value: str, int, float или BigDecimal
            scale: Целевой scale (None → натуральный). Лишние цифры
                дроби усекаются, недостающие дополняются нулями.

        Returns:
            Новый BigDecimal

        Raises:
            InvalidInput: Вход не скаляр (None, bool, list, dict, ...)
            InvalidFormat: Нарушение грамматики [sign]digits['.'digits]
            InvalidScale: scale не неотрицательный int

        Examples:
            >>> BigDecimal.parse("123.456", 2).value()
            '123.45'
            >>> BigDecimal.parse("123", 4).value()
            '123.0000'
        """
        if isinstance(value, BigDecimal):
            value = value.value()
        parsed = parse_decimal_parts(value, scale)
        return cls._from_parts(parsed.negative, parsed.unscaled, parsed.scale)

    @classmethod
    def _from_parts(cls, negative: bool, unscaled: str, scale: int) -> "BigDecimal":
        """Сборка результата; нулевая magnitude получает NON_NEGATIVE."""
        unscaled = magnitude.normalize(unscaled)
        if negative and unscaled != magnitude.ZERO:
            sign = Sign.NEGATIVE
        else:
            sign = Sign.NON_NEGATIVE
        return cls(sign=sign, unscaled=unscaled, scale=scale)

    @classmethod
    def _coerce(cls, other: Operand) -> "BigDecimal":
        if isinstance(other, BigDecimal):
            return other
        return cls.parse(other)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def value(self) -> str:
        """
        Каноническое текстовое представление.

        Без экспоненты и без ведущих нулей; ровно scale цифр после точки.
        """
        if self.scale == 0:
            integer, fraction = self.unscaled, ""
        else:
            padded = self.unscaled.zfill(self.scale + 1)
            integer, fraction = padded[: -self.scale], padded[-self.scale :]

        text = f"{integer}.{fraction}" if fraction else integer
        return f"-{text}" if self.is_negative() else text

    def fraction_digits(self) -> str:
        """Цифры дробной части (ровно scale штук)."""
        if self.scale == 0:
            return ""
        return self.unscaled.zfill(self.scale + 1)[-self.scale :]

    def precision(self) -> int:
        """
        Число значащих цифр дроби (после удаления хвостовых нулей) плюс один.

        "123.45" → 3, "123.4500" → 3, "0.00" → 1.
        """
        return len(self.fraction_digits().rstrip("0")) + 1

    def signum(self) -> int:
        """-1, 0 или 1."""
        if self.is_zero():
            return 0
        return -1 if self.is_negative() else 1

    def is_zero(self) -> bool:
        return self.unscaled == magnitude.ZERO

    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def compare(self, other: Operand) -> int:
        """
        Численное сравнение (scale не учитывается).

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        other = self._coerce(other)
        if self.signum() != other.signum():
            return -1 if self.signum() < other.signum() else 1

        common = max(self.scale, other.scale)
        result = magnitude.compare(
            magnitude.shift_left(self.unscaled, common - self.scale),
            magnitude.shift_left(other.unscaled, common - other.scale),
        )
        return -result if self.is_negative() else result

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _add_signed(self, other: "BigDecimal", negate_other: bool) -> "BigDecimal":
        common = max(self.scale, other.scale)
        a = magnitude.shift_left(self.unscaled, common - self.scale)
        b = magnitude.shift_left(other.unscaled, common - other.scale)
        a_negative = self.is_negative()
        b_negative = other.is_negative() != negate_other

        if a_negative == b_negative:
            return self._from_parts(a_negative, magnitude.add(a, b), common)

        # Знаки различны: знак результата у большей magnitude
        if magnitude.compare(a, b) >= 0:
            return self._from_parts(a_negative, magnitude.subtract(a, b), common)
        return self._from_parts(b_negative, magnitude.subtract(b, a), common)

    def add(self, other: Operand) -> "BigDecimal":
        """Сумма; scale = max(self.scale, other.scale)."""
        return self._add_signed(self._coerce(other), negate_other=False)

    def sub(self, other: Operand) -> "BigDecimal":
        """Разность; scale = max(self.scale, other.scale)."""
        return self._add_signed(self._coerce(other), negate_other=True)

    def mul(self, other: Operand) -> "BigDecimal":
        """Произведение; scale = self.scale + other.scale."""
        other = self._coerce(other)
        return self._from_parts(
            self.is_negative() != other.is_negative(),
            magnitude.multiply(self.unscaled, other.unscaled),
            self.scale + other.scale,
        )

    def div(self, other: Operand, scale: Optional[int] = None) -> "BigDecimal":
        """
        Частное с усечением к нулю.

        Делимое масштабируется на 10**(scale - self.scale + other.scale),
        после чего выполняется целочисленное деление magnitude. Остаток
        отбрасывается, режим округления не применяется. Для округлённого
        частного: a.div(b, scale + k).round(scale, mode).

        Args:
            other: Делитель
            scale: Scale результата (None → self.scale + other.scale)

        Returns:
            Новый BigDecimal

        Raises:
            DivisionByZero: magnitude делителя равна нулю (в т.ч. "0.0000")
            InvalidScale: scale не неотрицательный int
        """
        other = self._coerce(other)
        if other.is_zero():
            raise DivisionByZero(f"Division by zero: {self.value()} / {other.value()}")

        target = self.scale + other.scale if scale is None else validate_scale(scale)
        shift = target - self.scale + other.scale

        dividend, divisor = self.unscaled, other.unscaled
        if shift >= 0:
            dividend = magnitude.shift_left(dividend, shift)
        else:
            divisor = magnitude.shift_left(divisor, -shift)

        quotient, remainder = magnitude.divide(dividend, divisor)
        if remainder != magnitude.ZERO:
            logger.debug(
                "Inexact division %s / %s truncated at scale %d",
                self.value(),
                other.value(),
                target,
            )

        return self._from_parts(self.is_negative() != other.is_negative(), quotient, target)

    def pow(self, exponent: int) -> "BigDecimal":
        """
        Целая неотрицательная степень; scale = self.scale * exponent.

        pow(0) всегда равно 1 со scale 0, в т.ч. для нулевого основания.
        Длина magnitude результата растёт как exponent * len(unscaled).

        Raises:
            InvalidExponent: exponent отрицательный или не int
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise InvalidExponent(f"exponent must be an int, got {type(exponent).__name__}")
        if exponent < 0:
            raise InvalidExponent(f"exponent must be non-negative, got {exponent}")
        if exponent == 0:
            return self._from_parts(False, magnitude.ONE, 0)

        return self._from_parts(
            self.is_negative() and exponent % 2 == 1,
            magnitude.power(self.unscaled, exponent),
            self.scale * exponent,
        )

    # -------------------------------------------------------------------------
    # Sign & rounding
    # -------------------------------------------------------------------------

    def negate(self) -> "BigDecimal":
        """Смена знака (ноль остаётся NON_NEGATIVE)."""
        return self._from_parts(not self.is_negative(), self.unscaled, self.scale)

    def abs(self) -> "BigDecimal":
        """Модуль."""
        return self._from_parts(False, self.unscaled, self.scale)

    def round(
        self, scale: int, mode: Union[RoundingMode, str] = DEFAULT_ROUNDING_MODE
    ) -> "BigDecimal":
        """
        Округление до scale знаков после точки.

        scale == self.scale → значение без изменений;
        scale > self.scale → дополнение нулями (точно, без округления).

        Args:
            scale: Целевой scale
            mode: RoundingMode или его строковое значение ("half_even")

        Raises:
            InvalidScale: scale не неотрицательный int
            ValueError: Неизвестный режим округления
        """
        scale = validate_scale(scale)
        mode = RoundingMode(mode)

        if scale >= self.scale:
            return self._from_parts(
                self.is_negative(),
                magnitude.shift_left(self.unscaled, scale - self.scale),
                scale,
            )

        rounded = round_digits(self.unscaled, self.scale - scale, mode, self.is_negative())
        return self._from_parts(self.is_negative(), rounded, scale)

    # -------------------------------------------------------------------------
    # JSON contract
    # -------------------------------------------------------------------------

    def to_contract(self) -> Dict[str, Any]:
        """Payload контракта decimal.json."""
        return {"value": self.value(), "scale": self.scale}

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "BigDecimal":
        """
        Создание из payload контракта decimal.json.

        Raises:
            jsonschema.ValidationError: payload не соответствует схеме
        """
        # Локальный импорт: contracts загружает схемы при импорте
        from src.core.contracts import validate_decimal

        validate_decimal(data)
        return cls.parse(data["value"], data["scale"])

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.value()

    def __repr__(self) -> str:
        return f"BigDecimal('{self.value()}')"

    def __add__(self, other: Operand) -> "BigDecimal":
        return self.add(other)

    def __radd__(self, other: Operand) -> "BigDecimal":
        return self._coerce(other).add(self)

    def __sub__(self, other: Operand) -> "BigDecimal":
        return self.sub(other)

    def __rsub__(self, other: Operand) -> "BigDecimal":
        return self._coerce(other).sub(self)

    def __mul__(self, other: Operand) -> "BigDecimal":
        return self.mul(other)

    def __rmul__(self, other: Operand) -> "BigDecimal":
        return self._coerce(other).mul(self)

    def __truediv__(self, other: Operand) -> "BigDecimal":
        return self.div(other)

    def __rtruediv__(self, other: Operand) -> "BigDecimal":
        return self._coerce(other).div(self)

    def __pow__(self, exponent: int) -> "BigDecimal":
        return self.pow(exponent)

    def __neg__(self) -> "BigDecimal":
        return self.negate()

    def __abs__(self) -> "BigDecimal":
        return self.abs()

    def __round__(self, ndigits: Optional[int] = None) -> "BigDecimal":
        """
        round(d) и round(d, n) в режиме DEFAULT_ROUNDING_MODE.

        Отрицательный ndigits (округление до десятков, сотен) не поддерживается:
        scale BigDecimal всегда >= 0.

        Raises:
            InvalidScale: ndigits < 0
        """
        if ndigits is None:
            return self.round(0)
        if isinstance(ndigits, int) and not isinstance(ndigits, bool) and ndigits < 0:
            raise InvalidScale(
                f"round() ndigits must be non-negative for BigDecimal (scale >= 0), got {ndigits}"
            )
        return self.round(ndigits)

    def __lt__(self, other: "BigDecimal") -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "BigDecimal") -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "BigDecimal") -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "BigDecimal") -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.compare(other) >= 0
