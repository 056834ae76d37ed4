"""Instant — момент времени относительно "сейчас".

Такая спецификация хранится в конфигурации, например "год назад", и при
каждом запуске приложения разрешается заново: через месяц "год назад"
по-прежнему означает год до текущего момента.

Арифметика месяцев прижимает день к последнему дню целевого месяца:
31 марта минус 1 месяц = 28 (29) февраля.
"""

import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from src.timeframes.config import TimeframeConfig


class InstantKind(str, Enum):
    """Вид относительного момента."""
    NOW = "now"
    DAYS_AGO = "days_ago"
    MONTHS_AGO = "months_ago"
    YEARS_AGO = "years_ago"
    START_OF_YEAR = "start_of_year"
    END_OF_YEAR = "end_of_year"


_COUNTED = (InstantKind.DAYS_AGO, InstantKind.MONTHS_AGO, InstantKind.YEARS_AGO)


def shift_months(moment: datetime, months: int) -> datetime:
    """Сдвиг на целое число месяцев (отрицательное — назад).

    День прижимается к длине целевого месяца.
    """
    month_index = moment.year * 12 + (moment.month - 1) + months
    year, month0 = divmod(month_index, 12)
    day = min(moment.day, calendar.monthrange(year, month0 + 1)[1])
    return moment.replace(year=year, month=month0 + 1, day=day)


def fiscal_year_start(year: int, now: datetime, config: TimeframeConfig) -> datetime:
    """Начало финансового года `year` (в часовом поясе now)."""
    return datetime(year, config.fiscal_year_start_month, 1, tzinfo=now.tzinfo)


def current_fiscal_year(now: datetime, config: TimeframeConfig) -> int:
    """Финансовый год, которому принадлежит now (по году начала)."""
    if now.month >= config.fiscal_year_start_month:
        return now.year
    return now.year - 1


@dataclass(frozen=True)
class Instant:
    """Относительный момент времени.

    count — число дней/месяцев/лет назад, либо сам год для
    START_OF_YEAR / END_OF_YEAR.
    """
    kind: InstantKind
    count: int = 0

    def __post_init__(self) -> None:
        if self.kind in _COUNTED and self.count < 0:
            raise ValueError(f"{self.kind.value} count must be non-negative, got {self.count}")

    @classmethod
    def now(cls) -> "Instant":
        return cls(InstantKind.NOW)

    @classmethod
    def days_ago(cls, count: int) -> "Instant":
        return cls(InstantKind.DAYS_AGO, count)

    @classmethod
    def months_ago(cls, count: int) -> "Instant":
        return cls(InstantKind.MONTHS_AGO, count)

    @classmethod
    def years_ago(cls, count: int) -> "Instant":
        return cls(InstantKind.YEARS_AGO, count)

    @classmethod
    def start_of_year(cls, year: int) -> "Instant":
        """Первый момент финансового года."""
        return cls(InstantKind.START_OF_YEAR, year)

    @classmethod
    def end_of_year(cls, year: int) -> "Instant":
        """Первый момент следующего финансового года (открытая верхняя граница)."""
        return cls(InstantKind.END_OF_YEAR, year)

    def to_time(self, now: datetime, config: Optional[TimeframeConfig] = None) -> datetime:
        """Разрешение в конкретный datetime относительно now."""
        config = config or TimeframeConfig()

        if self.kind is InstantKind.NOW:
            return now
        if self.kind is InstantKind.DAYS_AGO:
            return now - timedelta(days=self.count)
        if self.kind is InstantKind.MONTHS_AGO:
            return shift_months(now, -self.count)
        if self.kind is InstantKind.YEARS_AGO:
            return shift_months(now, -12 * self.count)
        if self.kind is InstantKind.START_OF_YEAR:
            return fiscal_year_start(self.count, now, config)
        return fiscal_year_start(self.count + 1, now, config)
