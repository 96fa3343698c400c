"""
Numerics Config — параметры численных методов

Два настраиваемых параметра:
- bins: количество бинов для integrate_bins (default: 1000)
- dx:   шаг прямой разности для derivative_at (default: 1e-8)

Значения хранятся thread-local: каждый поток начинает с DEFAULT_CONFIG
и меняет только свою копию. Валидация значений выполняется pydantic-моделью.

Переменные окружения (NumericsConfig.from_env):
    POLYCALC_BINS: количество бинов
    POLYCALC_DX:   шаг дифференцирования
"""

import os
import threading
from contextlib import contextmanager
from typing import Final, Iterator, Optional

from pydantic import BaseModel, Field


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_BINS: Final[int] = 1000

DEFAULT_DX: Final[float] = 1e-8

ENV_BINS: Final[str] = "POLYCALC_BINS"
ENV_DX: Final[str] = "POLYCALC_DX"


# =============================================================================
# CONFIG MODEL
# =============================================================================


class NumericsConfig(BaseModel):
    """Снимок параметров численных методов."""

    bins: int = Field(DEFAULT_BINS, ge=1, description="Количество бинов для integrate_bins")
    dx: float = Field(DEFAULT_DX, ge=0.0, description="Шаг прямой разности")

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "NumericsConfig":
        """
        Построить конфигурацию из переменных окружения.

        Отсутствующие переменные заменяются значениями по умолчанию.

        Raises:
            pydantic.ValidationError: Если значение не проходит валидацию
        """
        data = {}
        if os.environ.get(ENV_BINS):
            data["bins"] = os.environ[ENV_BINS]
        if os.environ.get(ENV_DX):
            data["dx"] = os.environ[ENV_DX]
        return cls.model_validate(data)


DEFAULT_CONFIG: Final[NumericsConfig] = NumericsConfig()


# =============================================================================
# THREAD-LOCAL CELLS
# =============================================================================

_cells = threading.local()


def stored_bins() -> int:
    return getattr(_cells, "bins", DEFAULT_CONFIG.bins)


def stored_dx() -> float:
    return getattr(_cells, "dx", DEFAULT_CONFIG.dx)


def store_values(bins: Optional[int] = None, dx: Optional[float] = None) -> None:
    # Значения уже провалидированы вызывающим кодом
    if bins is not None:
        _cells.bins = bins
    if dx is not None:
        _cells.dx = dx


def current_config() -> NumericsConfig:
    """Текущие значения bins/dx в этом потоке."""
    return NumericsConfig(bins=stored_bins(), dx=stored_dx())


def apply_config(config: NumericsConfig) -> None:
    """Установить bins/dx текущего потока из конфигурации."""
    store_values(bins=config.bins, dx=config.dx)


def reset_config() -> None:
    """Вернуть bins/dx текущего потока к DEFAULT_CONFIG."""
    apply_config(DEFAULT_CONFIG)


@contextmanager
def numerics_config(
    bins: Optional[int] = None,
    dx: Optional[float] = None,
) -> Iterator[NumericsConfig]:
    """
    Временно переопределить bins и/или dx.

    Examples:
        >>> with numerics_config(bins=10):
        ...     current_config().bins
        10
    """
    previous = current_config()
    overrides = {}
    if bins is not None:
        overrides["bins"] = bins
    if dx is not None:
        overrides["dx"] = dx
    config = NumericsConfig.model_validate({**previous.model_dump(), **overrides})
    apply_config(config)
    try:
        yield config
    finally:
        apply_config(previous)
