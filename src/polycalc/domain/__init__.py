"""
Domain models and value objects.

Contains the Range interval type and the dense-coefficient Polynomial.
"""

from polycalc.domain.formatting import DEFAULT_COEFFICIENT_FORMAT, format_polynomial
from polycalc.domain.polynomial import Polynomial
from polycalc.domain.range import Range, make_range

__all__ = [
    # Range
    "Range",
    "make_range",
    # Polynomial
    "Polynomial",
    # Formatting
    "DEFAULT_COEFFICIENT_FORMAT",
    "format_polynomial",
]
