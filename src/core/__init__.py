"""
Core interval algebra, comparison primitives and serialization contracts.

This package is independent of the ledger application that consumes it:
no I/O beyond loading its own JSON schemas, no global mutable state.
"""

from src.core.errors import AdjacencyOracleMissing, IntervalParseError

__all__ = [
    "AdjacencyOracleMissing",
    "IntervalParseError",
]
