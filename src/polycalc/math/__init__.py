"""
Core math modules для polycalc

Численное интегрирование и дифференцирование функций одной переменной,
целочисленная алгебра и комбинаторика.
"""

# Quadrature
from polycalc.math.quadrature import (
    Function1D,
    get_bins,
    integrate_bins,
    integrate_rect,
    integrate_trap,
    set_bins,
)

# Differentiation & root finding
from polycalc.math.differentiation import (
    derivative_at,
    derivative_function,
    get_dx,
    secant_root,
    set_dx,
)

# Algebra
from polycalc.math.algebra import gcd, lcm

# Combinatorics
from polycalc.math.combinatorics import (
    DEFAULT_BITS,
    SUPPORTED_BITS,
    binomial,
    factorial,
)

__all__ = [
    # Quadrature: Types
    "Function1D",
    # Quadrature: Configuration
    "get_bins",
    "set_bins",
    # Quadrature: Functions
    "integrate_bins",
    "integrate_rect",
    "integrate_trap",
    # Differentiation: Configuration
    "get_dx",
    "set_dx",
    # Differentiation: Functions
    "derivative_at",
    "derivative_function",
    "secant_root",
    # Algebra
    "gcd",
    "lcm",
    # Combinatorics: Constants
    "DEFAULT_BITS",
    "SUPPORTED_BITS",
    # Combinatorics: Functions
    "binomial",
    "factorial",
]
