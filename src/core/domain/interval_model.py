"""
IntervalModel — сериализуемое представление интервала

Immutable Pydantic модели, соответствующие контракту interval.json.
Представление структурное: сохраняются виды границ, а не только множество
значений, поэтому [1, 4) и [1, 3] сериализуются по-разному.
"""

import math
from typing import Any, Callable, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.intervals.bounds import Bound, BoundKind
from src.core.intervals.interval import Interval

_UNBOUNDED_KINDS = (BoundKind.LEFT_UNBOUNDED, BoundKind.RIGHT_UNBOUNDED)


# =============================================================================
# BOUND MODEL
# =============================================================================


class BoundModel(BaseModel):
    """
    Модель одной границы.

    value обязателен для left_of / right_of и запрещён для бесконечных границ.
    Точки float inf и nan отвергаются: в JSON у них нет представления, а
    бесконечная граница выражается видом left_unbounded / right_unbounded.
    """

    kind: BoundKind = Field(..., description="Вид границы")
    value: Any = Field(None, description="Точка границы (null для бесконечной)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_value(self) -> "BoundModel":
        """Проверка согласованности kind и value, конечность float точки"""
        if self.kind in _UNBOUNDED_KINDS:
            if self.value is not None:
                raise ValueError(f"{self.kind.value} bound cannot carry a value, got {self.value!r}")
        elif self.value is None:
            raise ValueError(f"{self.kind.value} bound requires a value")
        elif isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError(f"{self.kind.value} bound point must be finite, got {self.value!r}")
        return self

    @classmethod
    def from_bound(cls, bound: Bound) -> "BoundModel":
        return cls(kind=bound.kind, value=bound.value())

    def to_bound(self, convert: Optional[Callable[[Any], Any]] = None) -> Bound:
        """
        Args:
            convert: Преобразование сериализованной точки (например,
                datetime.fromisoformat). None — точка как есть.
        """
        if self.kind in _UNBOUNDED_KINDS:
            return Bound(self.kind)
        point = convert(self.value) if convert is not None else self.value
        return Bound(self.kind, point)


# =============================================================================
# INTERVAL MODEL
# =============================================================================


class IntervalModel(BaseModel):
    """
    Модель интервала (контракт interval.json).

    Immutable модель (frozen=True).
    """

    schema_version: Literal["1"] = Field("1", description="Версия контракта")
    lower: BoundModel = Field(..., description="Нижняя граница")
    upper: BoundModel = Field(..., description="Верхняя граница")

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval) -> "IntervalModel":
        return cls(
            lower=BoundModel.from_bound(interval.lower_bound),
            upper=BoundModel.from_bound(interval.upper_bound),
        )

    def to_interval(self, convert: Optional[Callable[[Any], Any]] = None) -> Interval:
        """
        Восстановление интервала.

        Args:
            convert: Преобразование точек (применяется к обеим конечным границам)
        """
        return Interval(self.lower.to_bound(convert), self.upper.to_bound(convert))
