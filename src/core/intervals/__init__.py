"""
Interval algebra

Математически точные одномерные интервалы над произвольным упорядоченным
типом: границы, интервалы, результат разности (один или два фрагмента),
oracle смежности и bracket-нотация.
"""

from src.core.intervals.bounds import Bound, BoundKind
from src.core.intervals.interval import Interval
from src.core.intervals.multi_interval import MultiInterval, One, Two
from src.core.intervals.nothing_between import (
    has_nothing_between,
    nothing_between,
    register_dense,
    register_nothing_between,
)
from src.core.intervals.parsing import EMPTY_TOKEN, parse_interval

__all__ = [
    # Bounds
    "Bound",
    "BoundKind",
    # Intervals
    "Interval",
    # Multi intervals
    "MultiInterval",
    "One",
    "Two",
    # Adjacency oracle
    "nothing_between",
    "register_nothing_between",
    "register_dense",
    "has_nothing_between",
    # Parsing
    "EMPTY_TOKEN",
    "parse_interval",
]
