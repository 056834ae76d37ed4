"""
Тесты для относительных временных окон (timeframes)

Проверяет:
1. TimeframeConfig: валидацию месяца начала финансового года
2. Арифметику месяцев с прижатием дня
3. Разрешение Instant относительно now
4. Разрешение TimeWindow в Interval[datetime]
5. Разбиение monthly / yearly на периоды
6. select_in_window
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

import pytest

from src.core.intervals import Interval
from src.timeframes import (
    Instant,
    InstantKind,
    TimeframeConfig,
    TimeWindow,
    WindowKind,
    current_fiscal_year,
    select_in_window,
    shift_months,
)

NOW = datetime(2024, 3, 15, 10, 0)
APRIL_FISCAL = TimeframeConfig(fiscal_year_start_month=4)


@dataclass(frozen=True)
class Split:
    """Проводка с моментом времени"""

    post_ts: datetime
    amount: int


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class TestTimeframeConfig:
    """Тесты для TimeframeConfig"""

    def test_default_is_calendar_year(self) -> None:
        assert TimeframeConfig().fiscal_year_start_month == 1

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month) -> None:
        with pytest.raises(ValueError, match="fiscal_year_start_month"):
            TimeframeConfig(fiscal_year_start_month=month)

    def test_current_fiscal_year(self) -> None:
        assert current_fiscal_year(NOW, TimeframeConfig()) == 2024
        assert current_fiscal_year(NOW, APRIL_FISCAL) == 2023
        assert current_fiscal_year(datetime(2024, 4, 1), APRIL_FISCAL) == 2024


# =============================================================================
# АРИФМЕТИКА МЕСЯЦЕВ
# =============================================================================


class TestShiftMonths:
    """Тесты для shift_months"""

    @pytest.mark.parametrize(
        "moment, months, expected",
        [
            (datetime(2024, 3, 31), -1, datetime(2024, 2, 29)),
            (datetime(2023, 3, 31), -1, datetime(2023, 2, 28)),
            (datetime(2024, 1, 15), -1, datetime(2023, 12, 15)),
            (datetime(2024, 1, 31), 1, datetime(2024, 2, 29)),
            (datetime(2024, 2, 29), -12, datetime(2023, 2, 28)),
            (datetime(2024, 11, 30), 3, datetime(2025, 2, 28)),
            (datetime(2024, 5, 10, 8, 30), 0, datetime(2024, 5, 10, 8, 30)),
        ],
    )
    def test_shift(self, moment, months, expected) -> None:
        assert shift_months(moment, months) == expected

    def test_keeps_time_and_tz(self) -> None:
        moment = datetime(2024, 3, 31, 23, 59, tzinfo=timezone.utc)
        assert shift_months(moment, -1) == datetime(2024, 2, 29, 23, 59, tzinfo=timezone.utc)


# =============================================================================
# INSTANT
# =============================================================================


class TestInstant:
    """Тесты для Instant.to_time"""

    def test_now(self) -> None:
        assert Instant.now().to_time(NOW) == NOW

    def test_days_ago(self) -> None:
        assert Instant.days_ago(10).to_time(NOW) == datetime(2024, 3, 5, 10, 0)
        assert Instant.days_ago(15).to_time(NOW) == datetime(2024, 2, 29, 10, 0)

    def test_months_ago(self) -> None:
        assert Instant.months_ago(1).to_time(NOW) == datetime(2024, 2, 15, 10, 0)
        assert Instant.months_ago(3).to_time(datetime(2024, 5, 31)) == datetime(2024, 2, 29)

    def test_years_ago(self) -> None:
        assert Instant.years_ago(1).to_time(NOW) == datetime(2023, 3, 15, 10, 0)
        assert Instant.years_ago(1).to_time(datetime(2024, 2, 29)) == datetime(2023, 2, 28)

    def test_start_and_end_of_year(self) -> None:
        assert Instant.start_of_year(2024).to_time(NOW) == datetime(2024, 1, 1)
        assert Instant.end_of_year(2024).to_time(NOW) == datetime(2025, 1, 1)

    def test_fiscal_year(self) -> None:
        assert Instant.start_of_year(2024).to_time(NOW, APRIL_FISCAL) == datetime(2024, 4, 1)
        assert Instant.end_of_year(2024).to_time(NOW, APRIL_FISCAL) == datetime(2025, 4, 1)

    def test_keeps_timezone(self) -> None:
        now = NOW.replace(tzinfo=timezone.utc)
        assert Instant.start_of_year(2024).to_time(now).tzinfo is timezone.utc

    def test_relative_to_each_now(self) -> None:
        """Один и тот же Instant разрешается заново для каждого now"""
        year_ago = Instant.years_ago(1)
        assert year_ago.to_time(datetime(2024, 1, 1)) == datetime(2023, 1, 1)
        assert year_ago.to_time(datetime(2024, 6, 1)) == datetime(2023, 6, 1)

    @pytest.mark.parametrize("factory", [Instant.days_ago, Instant.months_ago, Instant.years_ago])
    def test_negative_count(self, factory) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            factory(-1)

    def test_kind(self) -> None:
        assert Instant.months_ago(2) == Instant(InstantKind.MONTHS_AGO, 2)


# =============================================================================
# TIME WINDOW
# =============================================================================


class TestTimeWindowResolve:
    """Тесты для TimeWindow.resolve (окна из одного периода)"""

    def test_up_to(self) -> None:
        """Баланс на момент: (, now]"""
        (window,) = TimeWindow.up_to(Instant.now()).resolve(NOW)
        assert window == Interval.new_unbounded_closed(NOW)
        assert window.contains(datetime(1900, 1, 1))
        assert window.contains(NOW)
        assert not window.contains(datetime(2024, 3, 15, 10, 0, 1))

    def test_last_days(self) -> None:
        (window,) = TimeWindow.last_days(30).resolve(NOW)
        assert window == Interval.new_closed_closed(datetime(2024, 2, 14, 10, 0), NOW)

    def test_last_months(self) -> None:
        now = datetime(2024, 3, 31)
        (window,) = TimeWindow.last_months(1).resolve(now)
        assert window == Interval.new_closed_closed(datetime(2024, 2, 29), now)

    def test_last_years(self) -> None:
        (window,) = TimeWindow.last_years(2).resolve(NOW)
        assert window.lower == datetime(2022, 3, 15, 10, 0)
        assert window.upper == NOW
        assert window.lower_inclusive and window.upper_inclusive

    def test_year_to_date(self) -> None:
        (window,) = TimeWindow.year_to_date().resolve(NOW)
        assert window == Interval.new_closed_closed(datetime(2024, 1, 1), NOW)

    def test_year_to_date_fiscal(self) -> None:
        (window,) = TimeWindow.year_to_date().resolve(NOW, APRIL_FISCAL)
        assert window == Interval.new_closed_closed(datetime(2023, 4, 1), NOW)

    def test_between(self) -> None:
        window = TimeWindow.between(Instant.years_ago(1), Instant.now())
        assert window.resolve(NOW) == [
            Interval.new_closed_closed(datetime(2023, 3, 15, 10, 0), NOW)
        ]

    def test_between_reversed_is_empty(self) -> None:
        (window,) = TimeWindow.between(Instant.now(), Instant.days_ago(1)).resolve(NOW)
        assert window.is_empty()

    def test_invalid_windows(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            TimeWindow.last_days(-1)
        with pytest.raises(ValueError, match="requires begin and end"):
            TimeWindow(WindowKind.MONTHLY, begin=Instant.now())
        with pytest.raises(ValueError, match="requires end"):
            TimeWindow(WindowKind.UP_TO)


class TestTimeWindowPeriods:
    """Тесты для monthly / yearly"""

    def test_monthly(self) -> None:
        window = TimeWindow.monthly(Instant.start_of_year(2024), Instant.now())
        assert window.resolve(NOW) == [
            Interval.new_closed_open(datetime(2024, 1, 1), datetime(2024, 2, 1)),
            Interval.new_closed_open(datetime(2024, 2, 1), datetime(2024, 3, 1)),
            Interval.new_closed_closed(datetime(2024, 3, 1), NOW),
        ]

    def test_monthly_clips_first_period(self) -> None:
        periods = TimeWindow.monthly(Instant.months_ago(2), Instant.now()).resolve(NOW)
        assert len(periods) == 3
        assert periods[0] == Interval.new_closed_open(
            datetime(2024, 1, 15, 10, 0), datetime(2024, 2, 1)
        )

    def test_periods_are_contiguous_and_disjoint(self) -> None:
        periods = TimeWindow.monthly(Instant.years_ago(1), Instant.now()).resolve(NOW)
        assert len(periods) == 13
        for left, right in zip(periods, periods[1:]):
            assert left.strictly_left_of_interval(right)
            assert left.contiguous(right)

    def test_yearly(self) -> None:
        window = TimeWindow.yearly(Instant.start_of_year(2022), Instant.now())
        assert window.resolve(NOW) == [
            Interval.new_closed_open(datetime(2022, 1, 1), datetime(2023, 1, 1)),
            Interval.new_closed_open(datetime(2023, 1, 1), datetime(2024, 1, 1)),
            Interval.new_closed_closed(datetime(2024, 1, 1), NOW),
        ]

    def test_yearly_fiscal(self) -> None:
        window = TimeWindow.yearly(Instant.start_of_year(2022), Instant.now())
        assert window.resolve(NOW, APRIL_FISCAL) == [
            Interval.new_closed_open(datetime(2022, 4, 1), datetime(2023, 4, 1)),
            Interval.new_closed_closed(datetime(2023, 4, 1), NOW),
        ]

    def test_reversed_range(self) -> None:
        window = TimeWindow.monthly(Instant.now(), Instant.days_ago(5))
        assert window.resolve(NOW) == []

    def test_timezone_aware(self) -> None:
        now = NOW.replace(tzinfo=timezone.utc)
        periods = TimeWindow.monthly(Instant.start_of_year(2024), Instant.now()).resolve(now)
        assert periods[0].lower == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert periods[-1].upper == now

    def test_debug_logging(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="src.timeframes.windows")
        TimeWindow.yearly(Instant.start_of_year(2023), Instant.now()).resolve(NOW)
        assert "Resolved yearly window" in caplog.text
        assert "2 interval(s)" in caplog.text


# =============================================================================
# SELECT IN WINDOW
# =============================================================================


class TestSelectInWindow:
    """Тесты для select_in_window"""

    def test_filter_by_timestamp(self) -> None:
        splits = [
            Split(datetime(2024, 1, 31), 10),
            Split(datetime(2024, 2, 1), 20),
            Split(datetime(2024, 2, 29, 23, 59), 30),
            Split(datetime(2024, 3, 1), 40),
        ]
        february = TimeWindow.monthly(Instant.start_of_year(2024), Instant.now()).resolve(NOW)[1]

        selected = select_in_window(splits, february, key=lambda s: s.post_ts)
        assert [s.amount for s in selected] == [20, 30]

    def test_up_to_window(self) -> None:
        splits = [Split(datetime(2024, 3, 15, 10, 0), 1), Split(datetime(2024, 3, 16), 2)]
        (window,) = TimeWindow.up_to(Instant.now()).resolve(NOW)
        assert select_in_window(splits, window, key=lambda s: s.post_ts) == [splits[0]]
