"""
Domain models and value objects.

Сериализуемые (Pydantic) представления интервалов.
"""

from src.core.domain.interval_model import BoundModel, IntervalModel

__all__ = [
    "BoundModel",
    "IntervalModel",
]
