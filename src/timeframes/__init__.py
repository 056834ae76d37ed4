"""
Timeframes — относительные временные окна отчётов поверх Interval[datetime].
"""

from .config import FISCAL_YEAR_START_MONTH_DEFAULT, TimeframeConfig
from .instants import Instant, InstantKind, current_fiscal_year, fiscal_year_start, shift_months
from .windows import TimeWindow, WindowKind, select_in_window

__all__ = [
    "FISCAL_YEAR_START_MONTH_DEFAULT",
    "TimeframeConfig",
    "Instant",
    "InstantKind",
    "TimeWindow",
    "WindowKind",
    "shift_months",
    "fiscal_year_start",
    "current_fiscal_year",
    "select_in_window",
]
