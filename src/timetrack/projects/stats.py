"""Project status derivation.

``ProjectStats`` is a function of a project's current task list. It is never
stored or cached: callers recompute it on every read so that edits to task
dates show up immediately.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import to_iso, today_local
from ..core.enums import ProjectStatus
from ..tasks.model import Task


@dataclass(frozen=True)
class ProjectStats:
    start_date: Optional[date]
    end_date: Optional[date]
    total_planned_hours: float
    status: ProjectStatus

    @property
    def status_label(self) -> str:
        return self.status.label

    def to_dict(self) -> dict:
        return {
            "start_date": to_iso(self.start_date),
            "end_date": to_iso(self.end_date),
            "total_planned_hours": self.total_planned_hours,
            "status": self.status.value,
            "status_label": self.status_label,
        }


NO_ACTIVITY = ProjectStats(
    start_date=None,
    end_date=None,
    total_planned_hours=0,
    status=ProjectStatus.NO_ACTIVITY,
)


def derive_status(start_date: Optional[date], end_date: Optional[date], today: date) -> ProjectStatus:
    """Status of a project window relative to ``today``.

    Checked in order: not started yet, already finished, otherwise active.
    A window with no dates at all is active.
    """
    if start_date is not None and today < start_date:
        return ProjectStatus.AWAITING
    if end_date is not None and today > end_date:
        return ProjectStatus.COMPLETED
    return ProjectStatus.ACTIVE


def compute_project_stats(tasks: Iterable[Task], *, today: Optional[date] = None) -> ProjectStats:
    """Planning window, planned hours and status for one project's tasks.

    The caller filters ``tasks`` by project beforehand.
    """
    tasks = list(tasks)
    if not tasks:
        return NO_ACTIVITY

    start_dates = [t.start_date for t in tasks if t.start_date is not None]
    end_dates = [t.end_date for t in tasks if t.end_date is not None]
    start_date = min(start_dates) if start_dates else None
    end_date = max(end_dates) if end_dates else None
    total_planned_hours = sum((t.planned_hours or 0) for t in tasks)

    today = today or today_local()
    return ProjectStats(
        start_date=start_date,
        end_date=end_date,
        total_planned_hours=total_planned_hours,
        status=derive_status(start_date, end_date, today),
    )
