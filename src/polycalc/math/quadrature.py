"""
Quadrature — численное интегрирование функций одной переменной

Фиксированные (не адаптивные) формулы:
- integrate_bins:  левые прямоугольники с шагом width / bins
- integrate_rect:  формула прямоугольников (см. примечание ниже)
- integrate_trap:  составная формула трапеций

integrate_bins использует количество бинов из текущей конфигурации
(set_bins / get_bins, default: 1000).

ПРИМЕЧАНИЯ:
1. integrate_bins продвигает x накоплением шага и останавливается по условию
   x <= max, поэтому из-за округления может выполнить bins или bins ± 1 шагов.
2. integrate_rect при subintervals > 0 НЕ является классической составной
   формулой средних прямоугольников: f вычисляется один раз в точке
   midpoint + Σ (min + k*h), k = 1..subintervals-1, результат h * f(точка).
   Поведение сохранено как есть; для составного правила используйте
   integrate_trap.
"""

import logging
import math
from typing import Callable

from polycalc.config import store_values, stored_bins
from polycalc.domain.range import Range
from polycalc.status import InvalidParameterError, StatusCode, fail, set_status

logger = logging.getLogger(__name__)

Function1D = Callable[[float], float]


# =============================================================================
# CONFIGURATION
# =============================================================================


def set_bins(n: int) -> None:
    """
    Установить количество бинов для integrate_bins.

    Raises:
        InvalidParameterError: Если n < 1 (текущее значение не меняется)
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise fail(InvalidParameterError(f"bins must be a positive int, got {n!r}"))

    store_values(bins=n)
    set_status(StatusCode.OK)


def get_bins() -> int:
    """Текущее количество бинов. Статус не изменяется."""
    return stored_bins()


# =============================================================================
# INTEGRATION
# =============================================================================


def _check_subintervals(subintervals: int) -> None:
    if subintervals < 0:
        raise fail(InvalidParameterError(f"subintervals must be non-negative, got {subintervals}"))


def integrate_bins(f: Function1D, rng: Range) -> float:
    """
    Интеграл f по rng суммой левых прямоугольников.

    step = width / bins; начиная с x = min накапливается step * f(x),
    пока x <= max.

    Интервал нулевой ширины даёт 0.0.

    Raises:
        InvalidParameterError: Если ширина интервала не конечна или шаг
            width / bins слишком мал, чтобы сдвинуть x на границах интервала

    Examples:
        >>> integrate_bins(lambda x: 1.0, Range.make(0.0, 1.0))  # doctest: +SKIP
        1.001
    """
    width = rng.width()
    if width == 0:
        logger.debug("Zero-width range at x=%r, integral is 0", rng.min)
        set_status(StatusCode.OK)
        return 0.0

    if not math.isfinite(width):
        raise fail(InvalidParameterError(f"Range width must be finite, got {width!r}"))

    step = width / get_bins()
    # |x| максимален на границах: если шаг сдвигает обе, он сдвигает любую x
    if rng.min + step == rng.min or rng.max + step == rng.max:
        logger.debug("Step %r does not advance x on [%r, %r]", step, rng.min, rng.max)
        raise fail(
            InvalidParameterError(
                f"Step {step!r} is below float resolution on [{rng.min!r}, {rng.max!r}]"
            )
        )

    area = 0.0
    x = rng.min
    while x <= rng.max:
        area += step * f(x)
        x += step

    set_status(StatusCode.OK)
    return area


def integrate_rect(f: Function1D, rng: Range, subintervals: int) -> float:
    """
    Интеграл f по rng формулой прямоугольников.

    - subintervals == 0: width * f(midpoint)
    - subintervals > 0: h = width / subintervals,
      h * f(midpoint + Σ_{k=1}^{subintervals-1} (min + k*h))

    Raises:
        InvalidParameterError: Если subintervals < 0
    """
    _check_subintervals(subintervals)

    head = rng.max - rng.min
    body = rng.min + rng.max

    if subintervals == 0:
        area = head * f(body / 2)
    else:
        head /= subintervals

        mid = 0.0
        for k in range(1, subintervals):
            mid += rng.min + k * head

        area = head * f(body / 2 + mid)

    set_status(StatusCode.OK)
    return area


def integrate_trap(f: Function1D, rng: Range, subintervals: int) -> float:
    """
    Интеграл f по rng формулой трапеций.

    - subintervals == 0: width * (f(min) + f(max)) / 2
    - subintervals > 0: h * ((f(min) + f(max)) / 2 + Σ_{k=1}^{subintervals-1} f(min + k*h))

    Raises:
        InvalidParameterError: Если subintervals < 0

    Examples:
        >>> integrate_trap(lambda x: x, Range.make(0.0, 10.0), 0)
        50.0
    """
    _check_subintervals(subintervals)

    head = rng.max - rng.min
    body = f(rng.min) + f(rng.max)

    if subintervals == 0:
        area = head * body / 2
    else:
        head /= subintervals

        mid = 0.0
        for k in range(1, subintervals):
            mid += f(rng.min + k * head)

        area = head * (body / 2 + mid)

    set_status(StatusCode.OK)
    return area
