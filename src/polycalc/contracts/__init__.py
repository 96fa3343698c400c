"""
Contract Validation Module

Валидация JSON payload'ов Polynomial и Range.
"""

from .validators import (
    ContractValidator,
    PolynomialValidator,
    RangeValidator,
    SchemaLoader,
    validate_polynomial,
    validate_range,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PolynomialValidator",
    "RangeValidator",
    # Functions
    "validate_polynomial",
    "validate_range",
]
