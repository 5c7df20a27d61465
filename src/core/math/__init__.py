"""
Core math modules

Десятичные примитивы: magnitude произвольной длины, разбор скаляров,
движок округления и исключения десятичной арифметики.
"""

# Errors
from src.core.math.decimal_errors import (
    DecimalError,
    DivisionByZero,
    InvalidExponent,
    InvalidFormat,
    InvalidInput,
    InvalidScale,
)

# Magnitude
from src.core.math import magnitude
from src.core.math.magnitude import DIGIT_CHUNK_SIZE

# Parser
from src.core.math.decimal_parser import (
    DECIMAL_PATTERN,
    ParsedDecimal,
    parse_decimal_parts,
    scalar_to_text,
    validate_scale,
)

# Rounding
from src.core.math.rounding import (
    DEFAULT_ROUNDING_MODE,
    DiscardedDigits,
    RoundingMode,
    inspect_discarded,
    round_digits,
    should_increment,
)

__all__ = [
    # Errors
    "DecimalError",
    "DivisionByZero",
    "InvalidExponent",
    "InvalidFormat",
    "InvalidInput",
    "InvalidScale",
    # Magnitude
    "magnitude",
    "DIGIT_CHUNK_SIZE",
    # Parser
    "DECIMAL_PATTERN",
    "ParsedDecimal",
    "parse_decimal_parts",
    "scalar_to_text",
    "validate_scale",
    # Rounding
    "DEFAULT_ROUNDING_MODE",
    "DiscardedDigits",
    "RoundingMode",
    "inspect_discarded",
    "round_digits",
    "should_increment",
]
