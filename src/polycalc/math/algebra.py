"""
Algebra — НОД и НОК неотрицательных целых

gcd(0, n) = n и gcd(m, 0) = m (любое число делит 0), но gcd(0, 0) не
определён: выбрасывается AlgebraicError.
"""

import math

from polycalc.status import AlgebraicError, InvalidParameterError, StatusCode, fail, set_status


def _check_non_negative(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise fail(InvalidParameterError(f"{name} must be a non-negative int, got {value!r}"))


def gcd(m: int, n: int) -> int:
    """
    Наибольший общий делитель.

    Raises:
        AlgebraicError: Если m == n == 0
        InvalidParameterError: Если аргумент отрицательный или не int

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(0, 7)
        7
    """
    _check_non_negative(m, "m")
    _check_non_negative(n, "n")

    if m == 0 and n == 0:
        raise fail(AlgebraicError("gcd(0, 0) is undefined"))

    set_status(StatusCode.OK)
    return math.gcd(m, n)


def lcm(m: int, n: int) -> int:
    """
    Наименьшее общее кратное.

    lcm(0, 0) возвращает 0 со статусом OK.

    Examples:
        >>> lcm(4, 6)
        12
    """
    _check_non_negative(m, "m")
    _check_non_negative(n, "n")

    if m == 0 and n == 0:
        set_status(StatusCode.OK)
        return 0

    return m * n // gcd(m, n)
