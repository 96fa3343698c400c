"""
Тесты для Differentiation

Проверяет:
1. Прямую разность с настраиваемым шагом dx
2. NegativeStepError при dx < 0, значение dx сохраняется
3. Метод секущих (пример x^2 - 612 на [10, 30])
4. Необработанные арифметические ошибки пробрасываются
"""

import math

import pytest

from polycalc.config import DEFAULT_DX
from polycalc.domain import Polynomial, Range
from polycalc.math.differentiation import (
    derivative_at,
    derivative_function,
    get_dx,
    secant_root,
    set_dx,
)
from polycalc.math.quadrature import integrate_trap
from polycalc.status import (
    InvalidParameterError,
    NegativeStepError,
    StatusCode,
    get_status,
)


# =============================================================================
# ТЕСТЫ: dx configuration
# =============================================================================


class TestStepConfig:
    """Тесты set_dx / get_dx"""

    def test_default(self):
        assert get_dx() == DEFAULT_DX == 1e-8

    def test_set_dx(self):
        set_dx(1e-4)
        assert get_dx() == 1e-4
        assert get_status() == StatusCode.OK

    def test_zero_allowed(self):
        set_dx(0.0)
        assert get_dx() == 0.0

    def test_negative_rejected_and_value_kept(self):
        set_dx(1e-3)
        with pytest.raises(NegativeStepError):
            set_dx(-1e-3)
        assert get_dx() == 1e-3
        assert get_status() == StatusCode.NEGATIVE_STEP


# =============================================================================
# ТЕСТЫ: derivative_at
# =============================================================================


class TestDerivativeAt:
    """Тесты прямой разности"""

    def test_square_default_step(self):
        assert derivative_at(lambda x: x * x, 3.0) == pytest.approx(6.0, abs=1e-5)
        assert get_status() == StatusCode.OK

    def test_forward_difference_bias(self):
        """(f(x + dx) - f(x)) / dx для x^2 равно 2x + dx."""
        set_dx(1e-3)
        assert derivative_at(lambda x: x * x, 1.0) == pytest.approx(2.001, abs=1e-9)

    def test_sin(self):
        set_dx(1e-7)
        assert derivative_at(math.sin, 0.0) == pytest.approx(1.0, abs=1e-6)

    def test_matches_closed_form_polynomial_derivative(self):
        poly = Polynomial.make(3, [1.0, -2.0, 0.5, 1.0])
        exact = poly.differentiate()
        set_dx(1e-6)
        for x in (-1.0, 0.0, 0.5, 2.0):
            assert derivative_at(poly, x) == pytest.approx(exact(x), abs=1e-4)

    def test_zero_step_raises_zero_division(self):
        set_dx(0.0)
        with pytest.raises(ZeroDivisionError):
            derivative_at(lambda x: x, 1.0)

    def test_derivative_function_feeds_quadrature(self):
        """∫ f'(x) dx по [0, 1] ≈ f(1) - f(0)."""
        set_dx(1e-6)
        poly = Polynomial.make(2, [0.0, 0.0, 1.0])
        area = integrate_trap(derivative_function(poly), Range.make(0.0, 1.0), 100)
        assert area == pytest.approx(1.0, abs=1e-4)


# =============================================================================
# ТЕСТЫ: secant_root
# =============================================================================


class TestSecantRoot:
    """Тесты метода секущих"""

    def test_worked_example(self):
        root = secant_root(lambda x: x * x - 612, Range.make(10.0, 30.0), 5)
        assert root == pytest.approx(24.73863375, abs=1e-6)
        assert root == pytest.approx(6 * math.sqrt(17), abs=1e-6)
        assert get_status() == StatusCode.OK

    def test_linear_function_one_step(self):
        # 5 - 6 * 5 / (6 - (-4))
        assert secant_root(lambda x: 2 * x - 4, Range.make(0.0, 5.0), 1) == 2.0

    def test_polynomial_root(self):
        poly = Polynomial.make(2, [-2.0, 0.0, 1.0])
        root = secant_root(poly.as_function(), Range.make(1.0, 2.0), 6)
        assert root == pytest.approx(math.sqrt(2), abs=1e-9)

    def test_zero_iterations(self):
        with pytest.raises(InvalidParameterError, match="iterations"):
            secant_root(lambda x: x, Range.make(0.0, 1.0), 0)
        assert get_status() == StatusCode.INVALID_PARAM

    def test_converged_secant_divides_by_zero(self):
        """Без проверки сходимости совпавшие точки дают ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            secant_root(lambda x: 2 * x - 4, Range.make(0.0, 5.0), 3)
