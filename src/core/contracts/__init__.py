"""
Contract Validation Module

Модуль для валидации JSON контрактов десятичных значений.
"""

from .validators import (
    ContractValidator,
    DecimalValidator,
    SCHEMA_DIR,
    SchemaLoader,
    validate_decimal,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalValidator",
    # Functions
    "validate_decimal",
]
