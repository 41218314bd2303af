from datetime import date

import pytest

from timetrack.core.enums import PeriodView
from timetrack.core.exceptions import ValidationError
from timetrack.reports.periods import DayPeriod, MonthPeriod, WeekPeriod, period_for


def test_factory_picks_period_by_view():
    anchor = date(2026, 2, 19)

    assert isinstance(period_for("day", anchor), DayPeriod)
    assert isinstance(period_for(PeriodView.WEEK, anchor), WeekPeriod)
    assert isinstance(period_for("month", anchor), MonthPeriod)


def test_factory_rejects_unknown_view():
    with pytest.raises(ValidationError):
        period_for("year", date(2026, 2, 19))


def test_week_navigation():
    week = WeekPeriod(date(2026, 2, 19))

    assert (week.first, week.last) == (date(2026, 2, 16), date(2026, 2, 22))
    assert week.shift(1).first == date(2026, 2, 23)
    assert week.shift(-1).first == date(2026, 2, 9)
    assert week.label == "2026-02-16 to 2026-02-22"


def test_month_displays_grid_but_contains_only_its_days():
    month = MonthPeriod(date(2026, 2, 19))
    grid = month.days()

    assert len(grid) == 42
    assert not month.contains(grid[0])
    assert month.contains(date(2026, 2, 1))
    assert month.contains(date(2026, 2, 28))
    assert not month.contains(date(2026, 3, 1))


def test_month_navigation_clamps_day():
    month = MonthPeriod(date(2026, 1, 31))

    assert month.shift(1).anchor == date(2026, 2, 28)
    assert month.shift(-1).first == date(2025, 12, 1)


def test_day_period():
    day = DayPeriod(date(2026, 2, 28))

    assert day.days() == [date(2026, 2, 28)]
    assert day.shift(1).anchor == date(2026, 3, 1)
    assert day.label == "2026-02-28"
