"""
Compat — API в стиле статус-флагов

Функции этого модуля повторяют операции polycalc, но никогда не выбрасывают
PolycalcError: при ошибке возвращается выделенное значение (None для
конструкторов, 0 / 0.0 для чисел), а код ошибки остаётся в get_status().

    rng = compat.make_range(5.0, 1.0)
    if rng is None and compat.get_status() == StatusCode.INVALID_RANGE:
        ...

Исключения Python, не относящиеся к PolycalcError (ZeroDivisionError,
OverflowError из арифметики), пробрасываются как есть.
"""

import functools
import logging
from typing import Any, Callable, Optional, Sequence, TypeVar

from polycalc.domain.formatting import format_polynomial
from polycalc.domain.polynomial import Polynomial
from polycalc.domain.range import Range
from polycalc.math import algebra, combinatorics, differentiation, quadrature
from polycalc.math.quadrature import Function1D
from polycalc.status import PolycalcError, StatusCode, get_status

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "StatusCode",
    "get_status",
    "make_range",
    "range_width",
    "make_poly",
    "poly_coeff",
    "poly_lead",
    "poly_trail",
    "poly_eval",
    "poly_diff",
    "poly_integ",
    "poly_integ_range",
    "poly_func",
    "poly_isconst",
    "poly_cmp",
    "poly_cpy",
    "poly_print",
    "set_bins",
    "get_bins",
    "integrate_bins",
    "integrate_rect",
    "integrate_trap",
    "set_dx",
    "get_dx",
    "diff",
    "secant_method",
    "gcd",
    "lcm",
    "factorial",
    "binomial",
]


def _with_fallback(fallback: Any) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Вернуть `fallback` вместо PolycalcError; статус уже выставлен операцией."""

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except PolycalcError as e:
                logger.debug("%s failed with status %d: %s", func.__name__, e.status, e)
                return fallback

        return wrapper

    return decorator


# =============================================================================
# RANGE
# =============================================================================


@_with_fallback(None)
def make_range(min: float, max: float) -> Optional[Range]:
    return Range.make(min, max)


def range_width(rng: Range) -> float:
    return rng.width()


# =============================================================================
# POLYNOMIAL
# =============================================================================


@_with_fallback(None)
def make_poly(degree: int, coefficients: Sequence[float]) -> Optional[Polynomial]:
    return Polynomial.make(degree, coefficients)


@_with_fallback(0.0)
def poly_coeff(poly: Polynomial, index: int) -> float:
    """При index > degree: старший коэффициент и статус POLY_INDEX_GT_DEGREE."""
    return poly.coefficient(index)


def poly_lead(poly: Polynomial) -> float:
    return poly.leading()


def poly_trail(poly: Polynomial) -> float:
    return poly.trailing()


def poly_eval(poly: Polynomial, x: float) -> float:
    return poly.evaluate(x)


@_with_fallback(None)
def poly_diff(poly: Polynomial) -> Optional[Polynomial]:
    return poly.differentiate()


@_with_fallback(None)
def poly_integ(poly: Polynomial, constant: float) -> Optional[Polynomial]:
    return poly.antiderivative(constant)


@_with_fallback(0.0)
def poly_integ_range(poly: Polynomial, rng: Range) -> float:
    return poly.definite_integral(rng)


def poly_func(poly: Polynomial) -> Function1D:
    return poly.as_function()


def poly_isconst(poly: Polynomial) -> bool:
    return poly.is_constant()


@_with_fallback(0)
def poly_cmp(p: Polynomial, q: Polynomial) -> int:
    return p.compare(q)


def poly_cpy(poly: Polynomial) -> Polynomial:
    return poly.duplicate()


def poly_print(poly: Polynomial, fmt: str = "%g") -> str:
    return format_polynomial(poly, fmt)


# =============================================================================
# QUADRATURE
# =============================================================================


@_with_fallback(None)
def set_bins(n: int) -> None:
    quadrature.set_bins(n)


get_bins = quadrature.get_bins


@_with_fallback(0.0)
def integrate_bins(f: Function1D, rng: Range) -> float:
    return quadrature.integrate_bins(f, rng)


@_with_fallback(0.0)
def integrate_rect(f: Function1D, rng: Range, subintervals: int) -> float:
    return quadrature.integrate_rect(f, rng, subintervals)


@_with_fallback(0.0)
def integrate_trap(f: Function1D, rng: Range, subintervals: int) -> float:
    return quadrature.integrate_trap(f, rng, subintervals)


# =============================================================================
# DIFFERENTIATION
# =============================================================================


@_with_fallback(None)
def set_dx(dx: float) -> None:
    differentiation.set_dx(dx)


get_dx = differentiation.get_dx


def diff(f: Function1D, x: float) -> float:
    return differentiation.derivative_at(f, x)


@_with_fallback(0.0)
def secant_method(f: Function1D, rng: Range, iterations: int) -> float:
    return differentiation.secant_root(f, rng, iterations)


# =============================================================================
# ALGEBRA & COMBINATORICS
# =============================================================================


@_with_fallback(0)
def gcd(m: int, n: int) -> int:
    return algebra.gcd(m, n)


@_with_fallback(0)
def lcm(m: int, n: int) -> int:
    return algebra.lcm(m, n)


@_with_fallback(0)
def factorial(x: int, bits: int = combinatorics.DEFAULT_BITS) -> int:
    """0 при переполнении (факториал никогда не равен 0)."""
    return combinatorics.factorial(x, bits)


@_with_fallback(0)
def binomial(m: int, n: int, bits: int = combinatorics.DEFAULT_BITS) -> int:
    return combinatorics.binomial(m, n, bits)
