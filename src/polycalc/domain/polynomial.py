"""
Polynomial — полином в плотном представлении коэффициентов

p(x) = Σ c_k x^k, k = 0..degree

Immutable модель: коэффициенты хранятся в tuple длины degree + 1,
coefficients[k]: множитель при x^k. Старший коэффициент может быть нулём:
нормализация степени не выполняется (полином степени 3 с нулевым старшим
членом остаётся полиномом степени 3).

Все преобразования (differentiate, antiderivative, duplicate) возвращают
НОВЫЙ экземпляр. Дифференцирование и интегрирование точные (степенное
правило над коэффициентами), квадратурные формулы не используются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(coefficients) == degree + 1
2. Аргументы операций никогда не изменяются
3. coefficient(index > degree) не выбрасывает исключение: возвращает
   старший коэффициент и выставляет статус POLY_INDEX_GT_DEGREE
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence, Tuple

from polycalc.domain.range import Range
from polycalc.status import (
    CoefficientBoundsError,
    InvalidParameterError,
    StatusCode,
    fail,
    set_status,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Polynomial:
    """
    Полином степени `degree` с коэффициентами по возрастанию степени.

    Создавать через Polynomial.make(degree, coefficients) или
    Polynomial.from_coefficients(coefficients).
    """

    degree: int
    coefficients: Tuple[float, ...]

    def __post_init__(self) -> None:
        if isinstance(self.degree, bool) or not isinstance(self.degree, int) or self.degree < 0:
            raise fail(InvalidParameterError(f"degree must be a non-negative int, got {self.degree!r}"))
        if not isinstance(self.coefficients, tuple):
            object.__setattr__(self, "coefficients", tuple(float(c) for c in self.coefficients))
        if len(self.coefficients) != self.degree + 1:
            raise fail(
                CoefficientBoundsError(
                    f"Polynomial of degree {self.degree} needs {self.degree + 1} "
                    f"coefficients, got {len(self.coefficients)}"
                )
            )

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def make(cls, degree: int, coefficients: Sequence[float]) -> "Polynomial":
        """
        Создать полином, скопировав первые degree + 1 коэффициентов.

        Args:
            degree: Степень полинома (>= 0)
            coefficients: Коэффициенты c_0..c_n (лишние элементы игнорируются)

        Returns:
            Новый Polynomial, независимый от переданной последовательности

        Raises:
            InvalidParameterError: Если degree отрицательная или не int
            CoefficientBoundsError: Если len(coefficients) < degree + 1

        Examples:
            >>> Polynomial.make(2, [1.0, 0.0, 3.0, 99.0]).coefficients
            (1.0, 0.0, 3.0)
        """
        if isinstance(degree, bool) or not isinstance(degree, int) or degree < 0:
            raise fail(InvalidParameterError(f"degree must be a non-negative int, got {degree!r}"))

        if len(coefficients) < degree + 1:
            raise fail(
                CoefficientBoundsError(
                    f"Polynomial of degree {degree} needs {degree + 1} "
                    f"coefficients, got {len(coefficients)}"
                )
            )

        poly = cls(degree=degree, coefficients=tuple(float(c) for c in coefficients[: degree + 1]))
        set_status(StatusCode.OK)
        return poly

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[float]) -> "Polynomial":
        """Создать полином степени len(coefficients) - 1."""
        if len(coefficients) == 0:
            raise fail(InvalidParameterError("coefficients must not be empty"))
        return cls.make(len(coefficients) - 1, coefficients)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Polynomial":
        """
        Создать полином из payload {"degree": n, "coefficients": [...]}.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме polynomial
            CoefficientBoundsError: Если коэффициентов меньше degree + 1
        """
        from polycalc.contracts import validate_polynomial

        validate_polynomial(data)
        return cls.make(data["degree"], data["coefficients"])

    def to_dict(self) -> Dict[str, Any]:
        """Payload, совместимый со схемой polynomial."""
        return {"degree": self.degree, "coefficients": list(self.coefficients)}

    def duplicate(self) -> "Polynomial":
        """Глубокая копия полинома."""
        return Polynomial.make(self.degree, self.coefficients)

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def coefficient(self, index: int) -> float:
        """
        Коэффициент при x^index.

        При index > degree возвращается старший коэффициент, а статус
        выставляется в POLY_INDEX_GT_DEGREE (деградированный результат,
        не ошибка).

        Raises:
            InvalidParameterError: Если index < 0
        """
        if index < 0:
            raise fail(InvalidParameterError(f"index must be non-negative, got {index}"))

        if index > self.degree:
            logger.debug(
                "Coefficient index %d exceeds degree %d, falling back to leading coefficient",
                index,
                self.degree,
            )
            set_status(StatusCode.POLY_INDEX_GT_DEGREE)
            return self.coefficients[self.degree]

        set_status(StatusCode.OK)
        return self.coefficients[index]

    def leading(self) -> float:
        """Старший коэффициент c_degree."""
        set_status(StatusCode.OK)
        return self.coefficients[self.degree]

    def trailing(self) -> float:
        """Свободный член c_0."""
        set_status(StatusCode.OK)
        return self.coefficients[0]

    def is_constant(self) -> bool:
        """True для полинома степени 0 (значение коэффициента не проверяется)."""
        set_status(StatusCode.OK)
        return self.degree == 0

    # =========================================================================
    # EVALUATION
    # =========================================================================

    def evaluate(self, x: float) -> float:
        """
        Значение полинома в точке x.

        Прямая сумма степеней c_0 + c_1 x + c_2 x^2 + ... в порядке
        возрастания k (не схема Горнера): результаты совпадают бит-в-бит
        с вычислением Σ c_k * x**k.

        Переполнение x**k даёт бесконечность со знаком x**k (как pow в libm),
        а не OverflowError: 0 * inf при этом даёт nan.
        """
        x = float(x)
        result = 0.0
        for k, c in enumerate(self.coefficients):
            try:
                power = x**k
            except OverflowError:
                power = math.copysign(math.inf, x if k % 2 else 1.0)
            result += c * power
        set_status(StatusCode.OK)
        return result

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def as_function(self) -> Callable[[float], float]:
        """
        Адаптер полинома к интерфейсу функции одной переменной.

        Возвращает bound method, привязанный к этому полиному: несколько
        адаптеров разных полиномов независимы друг от друга.
        """
        set_status(StatusCode.OK)
        return self.evaluate

    # =========================================================================
    # CALCULUS (closed form)
    # =========================================================================

    def differentiate(self) -> "Polynomial":
        """
        Производная по степенному правилу.

        Для константы возвращается полином степени 0 с коэффициентом 0.
        Иначе result[k] = c[k+1] * (k+1), степень degree - 1.
        """
        if self.degree == 0:
            return Polynomial.make(0, (0.0,))

        coeffs = [self.coefficients[k + 1] * (k + 1.0) for k in range(self.degree)]
        return Polynomial.make(self.degree - 1, coeffs)

    def antiderivative(self, constant: float = 0.0) -> "Polynomial":
        """
        Первообразная с константой интегрирования `constant`.

        result[0] = constant, result[k+1] = c[k] / (k+1), степень degree + 1.
        """
        coeffs = [float(constant)]
        coeffs.extend(c / (k + 1.0) for k, c in enumerate(self.coefficients))
        return Polynomial.make(self.degree + 1, coeffs)

    def definite_integral(self, rng: Range) -> float:
        """
        Определённый интеграл по интервалу (формула Ньютона-Лейбница).

        F = antiderivative(0); результат F(max) - F(min).

        Examples:
            >>> Polynomial.make(2, [0.0, 0.0, 1.0]).definite_integral(Range.make(0.0, 3.0))
            9.0
        """
        if not isinstance(rng, Range):
            raise fail(InvalidParameterError(f"Expected Range, got {type(rng).__name__}"))

        primitive = self.antiderivative(0.0)
        integral = primitive.evaluate(rng.max) - primitive.evaluate(rng.min)

        set_status(StatusCode.OK)
        return integral

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare(self, other: "Polynomial") -> int:
        """
        Сравнение полиномов.

        - Разные степени: self.degree - other.degree (сама разность, не знак)
        - Равные степени: для первого i (от 0) с self[i] != other[i]
          (точное сравнение float) возвращается degree + 1 - i
        - Иначе 0

        0 возвращается тогда и только тогда, когда степени и все
        коэффициенты совпадают. Для равных степеней результат всегда
        положителен, поэтому compare не задаёт порядок.
        """
        if not isinstance(other, Polynomial):
            raise fail(InvalidParameterError(f"Expected Polynomial, got {type(other).__name__}"))

        set_status(StatusCode.OK)

        if self.degree != other.degree:
            return self.degree - other.degree

        for i in range(self.degree + 1):
            if self.coefficients[i] != other.coefficients[i]:
                return self.degree + 1 - i

        return 0

    def __eq__(self, other: object) -> bool:
        """
        p == q тогда и только тогда, когда p.compare(q) == 0.

        Коэффициенты сравниваются поэлементно через ==, без проверки
        идентичности (в отличие от tuple): полином с nan не равен даже себе.
        Статус не изменяется.
        """
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.degree == other.degree and all(
            a == b for a, b in zip(self.coefficients, other.coefficients)
        )

    def __str__(self) -> str:
        from polycalc.domain.formatting import format_polynomial

        return format_polynomial(self)
