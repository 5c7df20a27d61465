"""
Тесты для Decimal Parser

Проверяет:
1. Грамматику [sign]digits['.'digits] и отклонение всего остального
2. Каноникализацию (ведущие нули, знак нуля)
3. Scale: натуральный, усечение, дополнение нулями
4. Классификацию входов (скаляр / не скаляр)
5. Иерархию исключений
"""

import logging
from datetime import datetime

import pytest

from src.core.math.decimal_errors import (
    DecimalError,
    InvalidFormat,
    InvalidInput,
    InvalidScale,
)
from src.core.math.decimal_parser import (
    DECIMAL_PATTERN,
    ParsedDecimal,
    parse_decimal_parts,
    scalar_to_text,
    validate_scale,
)

# =============================================================================
# ТЕСТЫ ГРАММАТИКИ
# =============================================================================


class TestGrammar:
    """Тесты DECIMAL_PATTERN и отклонения неверных форматов"""

    def test_pattern_groups(self) -> None:
        match = DECIMAL_PATTERN.fullmatch("-12.50")
        assert match is not None
        assert match.groups() == ("-", "12", "50")

        match = DECIMAL_PATTERN.fullmatch("7")
        assert match is not None
        assert match.groups() == ("", "7", None)

    def test_wrong_formats_rejected(self) -> None:
        """Каждый неверный формат → InvalidFormat"""
        wrong = [
            ("--123.45", "Double sign"),
            ("*123.45", "Wrong sign"),
            ("1a3.45", "Wrong char in integer"),
            ("123.45a", "Wrong char in fraction"),
            ("123.", "Empty fraction"),
            (".45", "Empty integer"),
            ("-123,45", "Wrong separator"),
            ("", "Empty string"),
            ("1.2.3", "Two points"),
            ("1e5", "Exponent"),
            (" 1.5", "Leading whitespace"),
            ("1.5\n", "Trailing newline"),
            ("+-1", "Mixed signs"),
            ("１２", "Non-ASCII digits"),
        ]
        for text, case in wrong:
            with pytest.raises(InvalidFormat):
                parse_decimal_parts(text)
                pytest.fail(case)

    def test_error_message_names_input(self) -> None:
        with pytest.raises(InvalidFormat, match="'123,45'"):
            parse_decimal_parts("123,45")


# =============================================================================
# ТЕСТЫ КАНОНИКАЛИЗАЦИИ И SCALE
# =============================================================================


class TestCanonicalization:
    """Тесты разбора в каноническую форму"""

    def test_leading_zeros_stripped(self) -> None:
        assert parse_decimal_parts("-00123.45") == ParsedDecimal(True, "12345", 2)
        assert parse_decimal_parts("000") == ParsedDecimal(False, "0", 0)
        assert parse_decimal_parts("0.05") == ParsedDecimal(False, "5", 2)

    def test_plus_sign(self) -> None:
        assert parse_decimal_parts("+123.45") == ParsedDecimal(False, "12345", 2)

    def test_negative_zero_is_non_negative(self) -> None:
        assert parse_decimal_parts("-0.00") == ParsedDecimal(False, "0", 2)
        assert parse_decimal_parts("-0") == ParsedDecimal(False, "0", 0)

    def test_natural_scale(self) -> None:
        assert parse_decimal_parts("123.45").scale == 2
        assert parse_decimal_parts("123.4500").scale == 4
        assert parse_decimal_parts("123.00").scale == 2
        assert parse_decimal_parts("123").scale == 0

    def test_scale_truncates_not_rounds(self) -> None:
        assert parse_decimal_parts("123.456", 2) == ParsedDecimal(False, "12345", 2)
        assert parse_decimal_parts("123.999", 0) == ParsedDecimal(False, "123", 0)

    def test_truncation_to_zero_drops_sign(self) -> None:
        assert parse_decimal_parts("-0.001", 2) == ParsedDecimal(False, "0", 2)

    def test_scale_pads_with_zeros(self) -> None:
        assert parse_decimal_parts("123", 4) == ParsedDecimal(False, "1230000", 4)
        assert parse_decimal_parts("123.45", 4) == ParsedDecimal(False, "1234500", 4)

    def test_truncation_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.math.decimal_parser"):
            parse_decimal_parts("123.456", 2)
        assert "Truncating" in caplog.text


# =============================================================================
# ТЕСТЫ ВХОДНЫХ ТИПОВ
# =============================================================================


class TestInputTypes:
    """Тесты scalar_to_text и классификации входов"""

    def test_numeric_literals(self) -> None:
        assert parse_decimal_parts(42) == ParsedDecimal(False, "42", 0)
        assert parse_decimal_parts(-7) == ParsedDecimal(True, "7", 0)
        assert parse_decimal_parts(1.5) == ParsedDecimal(False, "15", 1)

    def test_float_in_exponent_form_rejected(self) -> None:
        """str(1e-05) == '1e-05' — научная нотация не поддерживается"""
        with pytest.raises(InvalidFormat):
            parse_decimal_parts(1e-05)

    def test_non_finite_floats_rejected(self) -> None:
        for value in (float("nan"), float("inf"), float("-inf")):
            with pytest.raises(InvalidFormat):
                parse_decimal_parts(value)

    def test_non_scalars_rejected(self) -> None:
        for value in (None, [], {}, (), datetime(2024, 1, 1), object()):
            with pytest.raises(InvalidInput):
                parse_decimal_parts(value)

    def test_bool_rejected(self) -> None:
        """bool — подкласс int, но не числовой литерал"""
        with pytest.raises(InvalidInput, match="got bool"):
            scalar_to_text(True)

    def test_str_passthrough(self) -> None:
        assert scalar_to_text("1.5") == "1.5"
        assert scalar_to_text(10) == "10"


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ SCALE
# =============================================================================


class TestValidateScale:
    """Тесты validate_scale"""

    def test_valid(self) -> None:
        assert validate_scale(0) == 0
        assert validate_scale(12) == 12

    def test_negative(self) -> None:
        with pytest.raises(InvalidScale, match="non-negative"):
            parse_decimal_parts("1.5", -1)

    def test_non_int(self) -> None:
        for scale in (1.5, "2", True):
            with pytest.raises(InvalidScale):
                validate_scale(scale)


# =============================================================================
# ТЕСТЫ ИЕРАРХИИ ИСКЛЮЧЕНИЙ
# =============================================================================


class TestErrorHierarchy:
    """Исключения совместимы со стандартными типами"""

    def test_all_are_value_errors(self) -> None:
        for error in (InvalidFormat, InvalidInput, InvalidScale):
            assert issubclass(error, DecimalError)
            assert issubclass(error, ValueError)

    def test_invalid_input_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            parse_decimal_parts(None)
