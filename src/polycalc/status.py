"""
Status — коды завершения и иерархия исключений

Каждая публичная операция polycalc сообщает результат двумя способами:
- через исключение из иерархии PolycalcError (основной API)
- через "последний статус": целочисленный код, доступный через get_status()

Коды статуса (первая цифра: подсистема):
- 0   OK
- 1xx внутренние ошибки и неверные аргументы
- 2xx алгебра (gcd/lcm)
- 4xx полиномы
- 5xx функции, факториал и интегрирование
- 6xx дифференцирование

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Статус выставляется ДО возврата значения или выброса исключения
2. Последняя запись побеждает (last-write-wins)
3. Хранилище статуса thread-local: потоки не затирают статус друг друга
"""

import threading
from enum import IntEnum


# =============================================================================
# STATUS CODES
# =============================================================================


class StatusCode(IntEnum):
    """Код завершения последней операции."""

    OK = 0
    BAD_ALLOC = 101
    INVALID_PARAM = 102
    ALGEBRAIC_INVALID_OP = 201
    POLY_INDEX_GT_DEGREE = 401
    FACTORIAL_OVERFLOW = 501
    INVALID_RANGE = 506
    NEGATIVE_STEP = 601


# =============================================================================
# LAST-STATUS CELL
# =============================================================================

_state = threading.local()


def get_status() -> StatusCode:
    """
    Статус последней операции в текущем потоке.

    Не изменяет статус. Читать сразу после интересующего вызова:
    любой следующий вызов polycalc перезапишет значение.
    """
    return getattr(_state, "status", StatusCode.OK)


def set_status(status: StatusCode) -> None:
    """Выставить статус текущего потока (используется внутри библиотеки)."""
    _state.status = StatusCode(status)


def reset_status() -> None:
    """Сбросить статус текущего потока в OK."""
    _state.status = StatusCode.OK


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PolycalcError(Exception):
    """
    Базовое исключение polycalc.

    Атрибут класса `status`: код, который операция оставляет в статусе
    перед выбросом исключения.
    """

    status: StatusCode = StatusCode.INVALID_PARAM


class InvalidParameterError(PolycalcError, ValueError):
    """Функция вызвана с недопустимыми аргументами."""

    status = StatusCode.INVALID_PARAM


class CoefficientBoundsError(InvalidParameterError):
    """Последовательность коэффициентов короче, чем degree + 1."""


class InvalidRangeError(PolycalcError, ValueError):
    """Попытка построить интервал с max < min."""

    status = StatusCode.INVALID_RANGE


class AlgebraicError(PolycalcError, ArithmeticError):
    """Алгебраическая операция не определена на данных аргументах (gcd(0, 0))."""

    status = StatusCode.ALGEBRAIC_INVALID_OP


class FactorialOverflowError(PolycalcError, OverflowError):
    """Факториал не помещается в целое заданной разрядности."""

    status = StatusCode.FACTORIAL_OVERFLOW


class NegativeStepError(PolycalcError, ValueError):
    """Попытка установить отрицательный шаг dx."""

    status = StatusCode.NEGATIVE_STEP


def fail(error: PolycalcError) -> PolycalcError:
    """
    Зафиксировать статус ошибки и вернуть её для raise.

    Examples:
        >>> raise fail(InvalidParameterError("iterations must be positive"))
        Traceback (most recent call last):
            ...
        polycalc.status.InvalidParameterError: iterations must be positive
    """
    set_status(error.status)
    return error
