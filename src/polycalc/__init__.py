"""
polycalc — численные методы для функций одной переменной и полиномов

- Polynomial: плотное представление, точные производная и первообразная
- Range: замкнутый интервал [min, max]
- Квадратурные формулы (бины, прямоугольники, трапеции)
- Прямая разность и метод секущих
- НОД/НОК, факториал и биномиальные коэффициенты

Ошибки сообщаются исключениями PolycalcError и дублируются кодом статуса
(get_status). API без исключений: в модуле polycalc.compat.
"""

from polycalc.config import (
    DEFAULT_BINS,
    DEFAULT_CONFIG,
    DEFAULT_DX,
    NumericsConfig,
    apply_config,
    current_config,
    numerics_config,
    reset_config,
)
from polycalc.domain import Polynomial, Range, format_polynomial, make_range
from polycalc.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    set_level,
)
from polycalc.math import (
    Function1D,
    binomial,
    derivative_at,
    derivative_function,
    factorial,
    gcd,
    get_bins,
    get_dx,
    integrate_bins,
    integrate_rect,
    integrate_trap,
    lcm,
    secant_root,
    set_bins,
    set_dx,
)
from polycalc.status import (
    AlgebraicError,
    CoefficientBoundsError,
    FactorialOverflowError,
    InvalidParameterError,
    InvalidRangeError,
    NegativeStepError,
    PolycalcError,
    StatusCode,
    get_status,
    reset_status,
)

__version__ = "0.1.0"

__all__ = [
    # Domain
    "Polynomial",
    "Range",
    "format_polynomial",
    "make_range",
    # Quadrature
    "Function1D",
    "get_bins",
    "set_bins",
    "integrate_bins",
    "integrate_rect",
    "integrate_trap",
    # Differentiation
    "get_dx",
    "set_dx",
    "derivative_at",
    "derivative_function",
    "secant_root",
    # Algebra & combinatorics
    "gcd",
    "lcm",
    "factorial",
    "binomial",
    # Status & errors
    "StatusCode",
    "get_status",
    "reset_status",
    "PolycalcError",
    "InvalidParameterError",
    "CoefficientBoundsError",
    "InvalidRangeError",
    "AlgebraicError",
    "FactorialOverflowError",
    "NegativeStepError",
    # Config
    "DEFAULT_BINS",
    "DEFAULT_DX",
    "DEFAULT_CONFIG",
    "NumericsConfig",
    "apply_config",
    "current_config",
    "numerics_config",
    "reset_config",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "set_level",
]
