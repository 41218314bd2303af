from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..core.constants import MONTH_GRID_DAYS

ISO_DATE_FORMAT = "%Y-%m-%d"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    """Parse an ISO date, treating None and blank strings as "no date"."""
    if value is None or not str(value).strip():
        return None
    return parse_iso_date(str(value).strip())


def to_iso(value: Optional[date]) -> Optional[str]:
    return value.strftime(ISO_DATE_FORMAT) if value else None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def week_start(anchor: date) -> date:
    """Monday of the Monday..Sunday week containing ``anchor``.

    ``date.weekday()`` counts Monday as 0, so a Sunday anchor goes back six
    days and every other day goes back ``weekday`` days.
    """
    return anchor - timedelta(days=anchor.weekday())


def week_days(anchor: date) -> list[date]:
    monday = week_start(anchor)
    return [monday + timedelta(days=i) for i in range(7)]


def month_start(anchor: date) -> date:
    return anchor.replace(day=1)


def month_end(anchor: date) -> date:
    first_of_next = (anchor.replace(day=28) + timedelta(days=4)).replace(day=1)
    return first_of_next - timedelta(days=1)


def month_days(anchor: date) -> list[date]:
    first = month_start(anchor)
    return [first + timedelta(days=i) for i in range(month_end(anchor).day)]


def month_grid(anchor: date) -> list[date]:
    """Fixed 6x7 display grid for the month of ``anchor``.

    Starts on the Monday on or before the first of the month, so the leading
    and trailing cells belong to the adjacent months.
    """
    start = week_start(month_start(anchor))
    return [start + timedelta(days=i) for i in range(MONTH_GRID_DAYS)]


def add_months(anchor: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month length."""
    index = anchor.year * 12 + (anchor.month - 1) + months
    year, month = divmod(index, 12)
    target = date(year, month + 1, 1)
    return target.replace(day=min(anchor.day, month_end(target).day))
