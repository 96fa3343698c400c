"""
Range — замкнутый интервал [min, max]

Immutable Pydantic модель. Инвариант min <= max проверяется только при
создании; после создания интервал не изменяется.
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from polycalc.status import InvalidRangeError, StatusCode, fail, set_status

logger = logging.getLogger(__name__)


class Range(BaseModel):
    """
    Замкнутый интервал вещественной оси.

    Предпочтительный способ создания: Range.make(min, max): он выставляет
    статус и выбрасывает InvalidRangeError. Прямой вызов Range(min=..., max=...)
    проверяет тот же инвариант и выставляет тот же статус INVALID_RANGE, но
    pydantic оборачивает InvalidRangeError в ValidationError.
    """

    min: float = Field(..., description="Левая граница")
    max: float = Field(..., description="Правая граница")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "Range":
        if self.max < self.min:
            raise fail(InvalidRangeError(f"Invalid range: max ({self.max}) < min ({self.min})"))
        return self

    @classmethod
    def make(cls, min: float, max: float) -> "Range":
        """
        Создать интервал [min, max].

        Raises:
            InvalidRangeError: Если max < min (статус INVALID_RANGE)

        Examples:
            >>> Range.make(0.0, 5.0).width()
            5.0
        """
        if max < min:
            logger.debug("Rejected range: min=%r max=%r", min, max)
            raise fail(InvalidRangeError(f"Invalid range: max ({max}) < min ({min})"))

        rng = cls(min=min, max=max)
        set_status(StatusCode.OK)
        return rng

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Range":
        """
        Создать интервал из payload {"min": a, "max": b}.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме range
            InvalidRangeError: Если max < min
        """
        from polycalc.contracts import validate_range

        validate_range(data)
        return cls.make(data["min"], data["max"])

    def to_dict(self) -> Dict[str, Any]:
        """Payload, совместимый со схемой range."""
        return self.model_dump()

    def width(self) -> float:
        """Ширина интервала max - min. Статус не изменяется."""
        return self.max - self.min

    def midpoint(self) -> float:
        """Середина интервала. Статус не изменяется."""
        return (self.min + self.max) / 2

    def contains(self, x: float) -> bool:
        """Принадлежит ли x интервалу. Статус не изменяется."""
        return self.min <= x <= self.max


def make_range(min: float, max: float) -> Range:
    """Сокращение для Range.make."""
    return Range.make(min, max)
