"""
Domain models and value objects.

Contains the immutable BigDecimal value type.
"""

from src.core.domain.big_decimal import BigDecimal, Sign
from src.core.math.rounding import RoundingMode

__all__ = [
    "BigDecimal",
    "Sign",
    "RoundingMode",
]
