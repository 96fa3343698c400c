"""
Combinatorics — факториал и биномиальные коэффициенты

Значения ограничены беззнаковым целым заданной разрядности (32 или 64 бит):
результат, не помещающийся в эту разрядность, считается переполнением
и приводит к FactorialOverflowError.
"""

import logging
import math
from typing import Final

from polycalc.status import (
    FactorialOverflowError,
    InvalidParameterError,
    StatusCode,
    fail,
    set_status,
)

logger = logging.getLogger(__name__)

# Разрядность по умолчанию (unsigned int)
DEFAULT_BITS: Final[int] = 32

SUPPORTED_BITS: Final[tuple] = (32, 64)


def _check_bits(bits: int) -> None:
    if bits not in SUPPORTED_BITS:
        raise fail(InvalidParameterError(f"bits must be one of {SUPPORTED_BITS}, got {bits!r}"))


def factorial(x: int, bits: int = DEFAULT_BITS) -> int:
    """
    Факториал x!.

    Args:
        x: Неотрицательное целое
        bits: Разрядность результата (32 или 64)

    Returns:
        x! (0! == 1)

    Raises:
        FactorialOverflowError: Если x! >= 2**bits
        InvalidParameterError: Если x отрицательный или bits не поддерживается

    Examples:
        >>> factorial(5)
        120
        >>> factorial(20, bits=64)
        2432902008176640000
    """
    _check_bits(bits)
    if isinstance(x, bool) or not isinstance(x, int) or x < 0:
        raise fail(InvalidParameterError(f"x must be a non-negative int, got {x!r}"))

    result = math.factorial(x)
    if result >= 1 << bits:
        logger.debug("%d! does not fit into %d bits", x, bits)
        raise fail(FactorialOverflowError(f"{x}! overflows {bits}-bit unsigned integer"))

    set_status(StatusCode.OK)
    return result


def binomial(m: int, n: int, bits: int = DEFAULT_BITS) -> int:
    """
    Биномиальный коэффициент C(m, n) = m! / (n! (m - n)!).

    Факториалы вычисляются с той же разрядностью, поэтому переполнение
    m! приводит к FactorialOverflowError даже при небольшом C(m, n).

    Raises:
        InvalidParameterError: Если m < n
        FactorialOverflowError: Если любой из факториалов переполняется

    Examples:
        >>> binomial(5, 2)
        10
    """
    if m < n:
        raise fail(InvalidParameterError(f"binomial requires m >= n, got m={m}, n={n}"))

    numerator = factorial(m, bits)
    denominator = factorial(n, bits) * factorial(m - n, bits)
    return numerator // denominator
