"""Calendar periods for the time entry view.

Each period knows which days it covers (for sums), which days it displays
(a month shows a full 6-week grid) and how to step to its neighbours.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, timedelta

from ..common.datetime_utils import (
    add_months,
    month_end,
    month_grid,
    month_start,
    to_iso,
    week_days,
    week_start,
)
from ..core.enums import PeriodView
from ..core.exceptions import ValidationError


class Period(ABC):
    """Strategy Pattern: one calendar granularity around an anchor date."""

    view: PeriodView

    def __init__(self, anchor: date):
        self.anchor = anchor

    @property
    @abstractmethod
    def first(self) -> date:
        raise NotImplementedError

    @property
    @abstractmethod
    def last(self) -> date:
        raise NotImplementedError

    @abstractmethod
    def days(self) -> list[date]:
        """Days to display, possibly wider than the period itself."""
        raise NotImplementedError

    @abstractmethod
    def shift(self, steps: int) -> "Period":
        raise NotImplementedError

    @property
    def label(self) -> str:
        return f"{to_iso(self.first)} to {to_iso(self.last)}"

    def contains(self, day: date) -> bool:
        return self.first <= day <= self.last

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and (self.first, self.last) == (other.first, other.last)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.first}..{self.last})"


class DayPeriod(Period):
    view = PeriodView.DAY

    @property
    def first(self) -> date:
        return self.anchor

    @property
    def last(self) -> date:
        return self.anchor

    @property
    def label(self) -> str:
        return to_iso(self.anchor)

    def days(self) -> list[date]:
        return [self.anchor]

    def shift(self, steps: int) -> "DayPeriod":
        return DayPeriod(self.anchor + timedelta(days=steps))


class WeekPeriod(Period):
    """Monday through Sunday."""

    view = PeriodView.WEEK

    @property
    def first(self) -> date:
        return week_start(self.anchor)

    @property
    def last(self) -> date:
        return self.first + timedelta(days=6)

    def days(self) -> list[date]:
        return week_days(self.anchor)

    def shift(self, steps: int) -> "WeekPeriod":
        return WeekPeriod(self.anchor + timedelta(weeks=steps))


class MonthPeriod(Period):
    """Calendar month; displays the 42-day grid but only counts its own days."""

    view = PeriodView.MONTH

    @property
    def first(self) -> date:
        return month_start(self.anchor)

    @property
    def last(self) -> date:
        return month_end(self.anchor)

    @property
    def label(self) -> str:
        return self.first.strftime("%B %Y")

    def days(self) -> list[date]:
        return month_grid(self.anchor)

    def shift(self, steps: int) -> "MonthPeriod":
        return MonthPeriod(add_months(self.anchor, steps))


_PERIODS = {
    PeriodView.DAY: DayPeriod,
    PeriodView.WEEK: WeekPeriod,
    PeriodView.MONTH: MonthPeriod,
}


def period_for(view: PeriodView | str, anchor: date) -> Period:
    """Factory Pattern: pick the period class for a view name."""
    try:
        view = PeriodView(view)
    except ValueError:
        raise ValidationError(f"Unknown calendar view: {view!r}")
    return _PERIODS[view](anchor)
