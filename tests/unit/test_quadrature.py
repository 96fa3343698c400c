"""
Тесты для Quadrature

Проверяет:
1. integrate_bins: левые прямоугольники с условием x <= max
2. integrate_rect: вырожденный случай и агрегированная точка выборки
3. integrate_trap: двухточечная и составная формулы трапеций
4. InvalidParameterError при subintervals < 0
5. Конфигурацию bins (set_bins / get_bins)
"""

import pytest

from polycalc.config import DEFAULT_BINS
from polycalc.domain import Polynomial, Range
from polycalc.math.quadrature import (
    get_bins,
    integrate_bins,
    integrate_rect,
    integrate_trap,
    set_bins,
)
from polycalc.status import InvalidParameterError, StatusCode, get_status


def identity(x: float) -> float:
    return x


def square(x: float) -> float:
    return x * x


def one(x: float) -> float:
    return 1.0


# =============================================================================
# ТЕСТЫ: Bins configuration
# =============================================================================


class TestBinsConfig:
    """Тесты set_bins / get_bins"""

    def test_default(self):
        assert get_bins() == DEFAULT_BINS == 1000

    def test_set_bins(self):
        set_bins(50)
        assert get_bins() == 50
        assert get_status() == StatusCode.OK

    @pytest.mark.parametrize("bad", [0, -5])
    def test_non_positive_rejected_and_value_kept(self, bad):
        set_bins(20)
        with pytest.raises(InvalidParameterError):
            set_bins(bad)
        assert get_bins() == 20
        assert get_status() == StatusCode.INVALID_PARAM


# =============================================================================
# ТЕСТЫ: integrate_bins
# =============================================================================


class TestIntegrateBins:
    """Тесты integrate_bins"""

    def test_literal_loop_includes_right_endpoint(self):
        """С точным шагом 0.25 цикл x <= max выполняет bins + 1 итераций."""
        set_bins(4)
        assert integrate_bins(one, Range.make(0.0, 1.0)) == 1.25

    def test_left_endpoint_sum(self):
        set_bins(4)
        # 0.25 * (0 + 0.25 + 0.5 + 0.75 + 1.0)
        assert integrate_bins(identity, Range.make(0.0, 1.0)) == 0.625

    def test_default_bins_approximates_integral(self):
        assert integrate_bins(one, Range.make(0.0, 1.0)) == pytest.approx(1.0, abs=2e-3)
        assert get_status() == StatusCode.OK

    def test_zero_width_range(self):
        assert integrate_bins(square, Range.make(3.0, 3.0)) == 0.0
        assert get_status() == StatusCode.OK

    def test_polynomial_adapter(self):
        poly = Polynomial.make(2, [0.0, 0.0, 1.0])
        result = integrate_bins(poly.as_function(), Range.make(0.0, 3.0))
        assert result == pytest.approx(9.0, abs=0.1)

    def test_infinite_range_rejected(self):
        """Бесконечная ширина: шаг inf, цикл x <= max не завершился бы."""
        with pytest.raises(InvalidParameterError, match="finite"):
            integrate_bins(one, Range.make(0.0, float("inf")))
        assert get_status() == StatusCode.INVALID_PARAM

    def test_infinite_min_rejected(self):
        with pytest.raises(InvalidParameterError, match="finite"):
            integrate_bins(one, Range.make(float("-inf"), 0.0))

    def test_step_below_float_resolution_rejected(self):
        """step = 2 / 1000 меньше половины ulp(1e16): x + step == x."""
        with pytest.raises(InvalidParameterError, match="float resolution"):
            integrate_bins(one, Range.make(1e16, 1e16 + 2.0))
        assert get_status() == StatusCode.INVALID_PARAM

    def test_step_below_resolution_at_negative_end(self):
        with pytest.raises(InvalidParameterError, match="float resolution"):
            integrate_bins(one, Range.make(-1e16 - 2.0, -1e16))

    def test_large_offset_with_coarse_step_terminates(self):
        """Шаг больше ulp на обеих границах: цикл завершается."""
        set_bins(2)
        result = integrate_bins(one, Range.make(1e16, 1e16 + 8.0))
        # step = 4: x = 1e16, 1e16 + 4, 1e16 + 8
        assert result == 12.0
        assert get_status() == StatusCode.OK


# =============================================================================
# ТЕСТЫ: integrate_rect
# =============================================================================


class TestIntegrateRect:
    """Тесты integrate_rect"""

    def test_zero_subintervals_is_midpoint_rectangle(self):
        assert integrate_rect(square, Range.make(0.0, 2.0), 0) == 2.0
        assert get_status() == StatusCode.OK

    def test_one_subinterval_matches_zero(self):
        rng = Range.make(0.0, 2.0)
        assert integrate_rect(square, rng, 1) == integrate_rect(square, rng, 0)

    def test_aggregate_sampling_point(self):
        """f вычисляется один раз в midpoint + Σ (min + k*h)."""
        # h = 1, точка 1.5 + (1 + 2) = 4.5, результат 1 * 4.5^2
        assert integrate_rect(square, Range.make(0.0, 3.0), 3) == 20.25

    def test_negative_subintervals(self):
        with pytest.raises(InvalidParameterError, match="subintervals"):
            integrate_rect(square, Range.make(0.0, 1.0), -1)
        assert get_status() == StatusCode.INVALID_PARAM


# =============================================================================
# ТЕСТЫ: integrate_trap
# =============================================================================


class TestIntegrateTrap:
    """Тесты integrate_trap"""

    def test_two_point_trapezoid(self):
        assert integrate_trap(identity, Range.make(0.0, 10.0), 0) == 50.0

    def test_composite_trapezoid(self):
        # h = 0.5: 0.5 * ((0 + 4) / 2 + 0.25 + 1 + 2.25)
        assert integrate_trap(square, Range.make(0.0, 2.0), 4) == 2.75

    def test_exact_for_linear(self):
        line = Polynomial.make(1, [1.0, 2.0])
        assert integrate_trap(line, Range.make(0.0, 4.0), 8) == pytest.approx(20.0)

    def test_converges_to_closed_form(self):
        poly = Polynomial.make(3, [1.0, -2.0, 0.5, 1.0])
        rng = Range.make(-1.0, 2.0)
        exact = poly.definite_integral(rng)
        assert integrate_trap(poly, rng, 1000) == pytest.approx(exact, rel=1e-5)

    def test_status_ok_after_polynomial_callback(self):
        poly = Polynomial.make(1, [0.0, 1.0])
        integrate_trap(poly.as_function(), Range.make(0.0, 1.0), 2)
        assert get_status() == StatusCode.OK

    def test_negative_subintervals(self):
        with pytest.raises(InvalidParameterError):
            integrate_trap(identity, Range.make(0.0, 1.0), -3)
        assert get_status() == StatusCode.INVALID_PARAM
