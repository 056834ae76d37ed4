"""
Core math modules

Тотальные примитивы сравнения, на которых построена алгебра интервалов.
"""

from src.core.math.numerical_safeguards import (
    # Constants
    CMP_EQUAL,
    CMP_GREATER,
    CMP_LESS,
    FLOAT_EPSILON,
    # Partial ordering
    is_comparable,
    is_nan,
    partial_cmp,
    # Float adjacency
    float_successor,
    floats_adjacent,
)

__all__ = [
    # Constants
    "CMP_LESS",
    "CMP_EQUAL",
    "CMP_GREATER",
    "FLOAT_EPSILON",
    # Partial ordering
    "partial_cmp",
    "is_comparable",
    "is_nan",
    # Float adjacency
    "float_successor",
    "floats_adjacent",
]
