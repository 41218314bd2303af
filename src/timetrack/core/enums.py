from __future__ import annotations

from enum import Enum


class ProjectStatus(str, Enum):
    """Lifecycle status derived from a project's tasks."""

    AWAITING = "awaiting"
    ACTIVE = "active"
    COMPLETED = "completed"
    NO_ACTIVITY = "no_activity"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    ProjectStatus.AWAITING: "Awaiting",
    ProjectStatus.ACTIVE: "Active",
    ProjectStatus.COMPLETED: "Completed",
    ProjectStatus.NO_ACTIVITY: "No activity",
}


class PeriodView(str, Enum):
    """Calendar granularity used by the time entry view."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class DashboardFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
