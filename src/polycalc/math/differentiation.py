"""
Differentiation — численное дифференцирование и поиск корней

- derivative_at: прямая разность (f(x + dx) - f(x)) / dx
- secant_root:   метод секущих с фиксированным числом итераций

Шаг dx берётся из текущей конфигурации (set_dx / get_dx, default: 1e-8).

Деление на ноль не перехватывается: dx == 0 в derivative_at или
f(x1) == f(x0) в secant_root приводят к ZeroDivisionError. Сходимость
secant_root не проверяется.
"""

import logging
from typing import Callable

from polycalc.config import store_values, stored_dx
from polycalc.domain.range import Range
from polycalc.status import (
    InvalidParameterError,
    NegativeStepError,
    StatusCode,
    fail,
    set_status,
)

logger = logging.getLogger(__name__)

Function1D = Callable[[float], float]


# =============================================================================
# CONFIGURATION
# =============================================================================


def set_dx(dx: float) -> None:
    """
    Установить шаг dx для derivative_at.

    Raises:
        NegativeStepError: Если dx < 0 (текущее значение не меняется)
    """
    if dx < 0:
        logger.debug("Rejected negative dx=%r, keeping dx=%r", dx, stored_dx())
        raise fail(NegativeStepError(f"dx must be non-negative, got {dx}"))

    store_values(dx=float(dx))
    set_status(StatusCode.OK)


def get_dx() -> float:
    """Текущий шаг dx. Статус не изменяется."""
    return stored_dx()


# =============================================================================
# DERIVATIVE
# =============================================================================


def derivative_at(f: Function1D, x: float) -> float:
    """
    Производная f в точке x прямой разностью.

    Examples:
        >>> abs(derivative_at(lambda t: t * t, 3.0) - 6.0) < 1e-6
        True
    """
    dx = get_dx()
    result = (f(x + dx) - f(x)) / dx
    set_status(StatusCode.OK)
    return result


def derivative_function(f: Function1D) -> Function1D:
    """Функция x -> derivative_at(f, x), пригодная для квадратурных формул."""

    def derivative(x: float) -> float:
        return derivative_at(f, x)

    return derivative


# =============================================================================
# ROOT FINDING
# =============================================================================


def secant_root(f: Function1D, rng: Range, iterations: int) -> float:
    """
    Корень f методом секущих.

    x0 = min, x1 = max; на каждой итерации
        x2 = x1 - f(x1) * (x1 - x0) / (f(x1) - f(x0)),  x0 <- x1,  x1 <- x2

    Args:
        f: Функция одной переменной
        rng: Начальные приближения (min, max)
        iterations: Число итераций (> 0)

    Returns:
        x2 после последней итерации

    Raises:
        InvalidParameterError: Если iterations < 1

    Examples:
        >>> secant_root(lambda x: x * x - 612, Range.make(10.0, 30.0), 5)  # doctest: +ELLIPSIS
        24.7386337...
    """
    if iterations < 1:
        raise fail(InvalidParameterError(f"iterations must be positive, got {iterations}"))

    x0 = rng.min
    x1 = rng.max
    x2 = x1

    for _ in range(iterations):
        x2 = x1 - f(x1) * (x1 - x0) / (f(x1) - f(x0))
        x0 = x1
        x1 = x2

    set_status(StatusCode.OK)
    return x2
