"""
Contract Validation Module

Модуль для валидации и сериализации JSON представления интервалов.
"""

from .serialization import interval_from_dict, interval_to_dict
from .validators import (
    IntervalValidator,
    SchemaLoader,
    validate_interval,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "IntervalValidator",
    # Functions
    "validate_interval",
    "interval_to_dict",
    "interval_from_dict",
]
