"""Hour sums over time entries.

All functions are pure: they take the entries the caller already loaded and
never touch storage.
"""
from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from ..time_entries.model import TimeEntry
from .periods import MonthPeriod, Period, WeekPeriod


def total_hours(entries: Iterable[TimeEntry]) -> float:
    return sum(e.hours for e in entries)


def hours_for_project(entries: Iterable[TimeEntry], project_id: int) -> float:
    return total_hours(e for e in entries if e.project_id == project_id)


def hours_for_day(entries: Iterable[TimeEntry], day: date) -> float:
    return total_hours(e for e in entries if e.entry_date == day)


def hours_in_period(entries: Iterable[TimeEntry], period: Period) -> float:
    return total_hours(e for e in entries if period.contains(e.entry_date))


def hours_for_week(entries: Iterable[TimeEntry], anchor: date) -> float:
    return hours_in_period(entries, WeekPeriod(anchor))


def hours_for_month(entries: Iterable[TimeEntry], anchor: date) -> float:
    # Grid padding days from adjacent months are not part of MonthPeriod
    return hours_in_period(entries, MonthPeriod(anchor))


def daily_totals(entries: Iterable[TimeEntry], days: Iterable[date]) -> dict[date, float]:
    days = list(days)
    wanted = set(days)
    sums: dict[date, float] = defaultdict(float)
    for e in entries:
        if e.entry_date in wanted:
            sums[e.entry_date] += e.hours
    return {d: sums.get(d, 0.0) for d in days}


def completion_percent(logged_hours: float, planned_hours: float) -> Optional[float]:
    """Logged over planned as a percentage capped at 100; None when nothing is planned."""
    if not planned_hours or planned_hours <= 0:
        return None
    return min(100.0, logged_hours / planned_hours * 100)
