from __future__ import annotations

from datetime import date

import pytest

from timetrack.reports.aggregation import (
    completion_percent,
    daily_totals,
    hours_for_day,
    hours_for_month,
    hours_for_project,
    hours_for_week,
)
from timetrack.time_entries.model import TimeEntry


def _entry(entry_id: int, day: str, hours: float, project_id: int = 1) -> TimeEntry:
    return TimeEntry(
        entry_id=entry_id,
        user_id=1,
        project_id=project_id,
        task_id=None,
        entry_date=date.fromisoformat(day),
        hours=hours,
    )


ENTRIES = [
    _entry(1, "2026-01-30", 3),  # previous month, inside the February grid
    _entry(2, "2026-02-16", 4),  # Monday
    _entry(3, "2026-02-19", 2.5, project_id=2),
    _entry(4, "2026-02-22", 1),  # Sunday
    _entry(5, "2026-02-23", 6),  # next week
    _entry(6, "2026-03-02", 5),  # next month, inside the February grid
]


def test_project_hours():
    assert hours_for_project(ENTRIES, 1) == 19
    assert hours_for_project(ENTRIES, 2) == 2.5
    assert hours_for_project(ENTRIES, 3) == 0


def test_day_hours_use_exact_date():
    assert hours_for_day(ENTRIES, date(2026, 2, 19)) == 2.5
    assert hours_for_day(ENTRIES, date(2026, 2, 20)) == 0


@pytest.mark.parametrize("anchor", [date(2026, 2, 16), date(2026, 2, 19), date(2026, 2, 22)])
def test_week_hours_only_count_monday_to_sunday(anchor):
    assert hours_for_week(ENTRIES, anchor) == 7.5


def test_month_hours_exclude_adjacent_months():
    assert hours_for_month(ENTRIES, date(2026, 2, 10)) == 13.5
    assert hours_for_month(ENTRIES, date(2026, 1, 10)) == 3


def test_daily_totals_fill_missing_days_with_zero():
    days = [date(2026, 2, 16), date(2026, 2, 17)]
    assert daily_totals(ENTRIES + [_entry(7, "2026-02-16", 1)], days) == {
        date(2026, 2, 16): 5,
        date(2026, 2, 17): 0,
    }


def test_completion_percent():
    assert completion_percent(20, 40) == 50
    assert completion_percent(60, 40) == 100
    assert completion_percent(5, 0) is None
