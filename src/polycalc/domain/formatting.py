"""
Текстовое представление полиномов.

Формат: для каждого k по возрастанию: знак ("+ " / "- "), модуль
коэффициента в printf-формате и "x^k ":

    >>> format_polynomial(Polynomial.make(2, [1.0, -2.0, 0.5]))
    '+ 1x^0 - 2x^1 + 0.5x^2 '
"""

from typing import TYPE_CHECKING, Final

from polycalc.status import StatusCode, set_status

if TYPE_CHECKING:
    from polycalc.domain.polynomial import Polynomial

DEFAULT_COEFFICIENT_FORMAT: Final[str] = "%g"


def format_polynomial(poly: "Polynomial", fmt: str = DEFAULT_COEFFICIENT_FORMAT) -> str:
    """
    Строковое представление полинома.

    Args:
        poly: Полином
        fmt: printf-формат для модуля коэффициента (default: "%g")

    Returns:
        Строка вида "+ c0x^0 - c1x^1 ..." (с завершающим пробелом)
    """
    parts = []
    for k, c in enumerate(poly.coefficients):
        parts.append("- " if c < 0 else "+ ")
        parts.append(fmt % abs(c))
        parts.append(f"x^{k} ")

    set_status(StatusCode.OK)
    return "".join(parts)
