"""TimeWindow — относительное временное окно отчёта.

Окно разрешается в один или несколько интервалов Interval[datetime]:
- up_to(instant)          → (, t]            (баланс на момент t)
- last_days/months/years  → [now - n, now]
- year_to_date            → [начало фин. года, now]
- between(begin, end)     → [begin, end]
- monthly/yearly(b, e)    → [start, next start) для каждого периода,
                            обрезанные до [b, e]

Потребители (net worth, cashflow) только спрашивают "содержит ли окно
момент X" и "где верхняя граница окна".
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, List, Optional, TypeVar

from src.core.intervals import Interval
from src.timeframes.config import TimeframeConfig
from src.timeframes.instants import (
    Instant,
    current_fiscal_year,
    fiscal_year_start,
    shift_months,
)

logger = logging.getLogger(__name__)

Item = TypeVar("Item")


class WindowKind(str, Enum):
    """Вид временного окна."""
    UP_TO = "up_to"
    LAST_DAYS = "last_days"
    LAST_MONTHS = "last_months"
    LAST_YEARS = "last_years"
    YEAR_TO_DATE = "year_to_date"
    BETWEEN = "between"
    MONTHLY = "monthly"
    YEARLY = "yearly"


_LAST_N = {
    WindowKind.LAST_DAYS: Instant.days_ago,
    WindowKind.LAST_MONTHS: Instant.months_ago,
    WindowKind.LAST_YEARS: Instant.years_ago,
}


@dataclass(frozen=True)
class TimeWindow:
    """Относительное временное окно.

    Immutable: одно и то же окно разрешается заново при каждом now.
    """
    kind: WindowKind
    begin: Optional[Instant] = None
    end: Optional[Instant] = None
    count: int = 0

    def __post_init__(self) -> None:
        if self.kind in _LAST_N and self.count < 0:
            raise ValueError(f"{self.kind.value} count must be non-negative, got {self.count}")
        if self.kind in (WindowKind.BETWEEN, WindowKind.MONTHLY, WindowKind.YEARLY):
            if self.begin is None or self.end is None:
                raise ValueError(f"{self.kind.value} window requires begin and end")
        if self.kind is WindowKind.UP_TO and self.end is None:
            raise ValueError("up_to window requires end")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def up_to(cls, instant: Instant) -> "TimeWindow":
        return cls(WindowKind.UP_TO, end=instant)

    @classmethod
    def last_days(cls, count: int) -> "TimeWindow":
        return cls(WindowKind.LAST_DAYS, count=count)

    @classmethod
    def last_months(cls, count: int) -> "TimeWindow":
        return cls(WindowKind.LAST_MONTHS, count=count)

    @classmethod
    def last_years(cls, count: int) -> "TimeWindow":
        return cls(WindowKind.LAST_YEARS, count=count)

    @classmethod
    def year_to_date(cls) -> "TimeWindow":
        return cls(WindowKind.YEAR_TO_DATE)

    @classmethod
    def between(cls, begin: Instant, end: Instant) -> "TimeWindow":
        return cls(WindowKind.BETWEEN, begin=begin, end=end)

    @classmethod
    def monthly(cls, begin: Instant, end: Instant) -> "TimeWindow":
        return cls(WindowKind.MONTHLY, begin=begin, end=end)

    @classmethod
    def yearly(cls, begin: Instant, end: Instant) -> "TimeWindow":
        return cls(WindowKind.YEARLY, begin=begin, end=end)

    # -------------------------------------------------------------------------
    # Разрешение
    # -------------------------------------------------------------------------

    def resolve(
        self,
        now: datetime,
        config: Optional[TimeframeConfig] = None,
    ) -> List[Interval[datetime]]:
        """Разрешение окна в интервалы относительно now.

        Returns:
            Список интервалов в хронологическом порядке (один для
            окон из одного периода, пустой если begin > end)
        """
        config = config or TimeframeConfig()

        if self.kind is WindowKind.UP_TO:
            result = [Interval.new_unbounded_closed(self.end.to_time(now, config))]
        elif self.kind in _LAST_N:
            start = _LAST_N[self.kind](self.count).to_time(now, config)
            result = [Interval.new_closed_closed(start, now)]
        elif self.kind is WindowKind.YEAR_TO_DATE:
            start = fiscal_year_start(current_fiscal_year(now, config), now, config)
            result = [Interval.new_closed_closed(start, now)]
        elif self.kind is WindowKind.BETWEEN:
            result = [
                Interval.new_closed_closed(
                    self.begin.to_time(now, config), self.end.to_time(now, config)
                )
            ]
        else:
            result = self._split(now, config)

        logger.debug("Resolved %s window at %s into %d interval(s)", self.kind.value, now, len(result))
        return result

    def _split(self, now: datetime, config: TimeframeConfig) -> List[Interval[datetime]]:
        begin = self.begin.to_time(now, config)
        end = self.end.to_time(now, config)
        overall = Interval.new_closed_closed(begin, end)
        if overall.is_empty():
            return []

        if self.kind is WindowKind.MONTHLY:
            step = 1
            start = begin.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        else:
            step = 12
            fiscal_year = current_fiscal_year(begin, config)
            start = fiscal_year_start(fiscal_year, begin, config)

        periods: List[Interval[datetime]] = []
        while not overall.strictly_left_of(start):
            following = shift_months(start, step)
            period = Interval.new_closed_open(start, following) & overall
            if not period.is_empty():
                periods.append(period)
            start = following
        return periods


def select_in_window(
    items: Iterable[Item],
    window: Interval[datetime],
    key: Callable[[Item], datetime],
) -> List[Item]:
    """Элементы, чей момент времени (key(item)) лежит в окне."""
    return [item for item in items if window.contains(key(item))]
