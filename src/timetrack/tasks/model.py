from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class Task:
    """A planned unit of work within a project.

    Dates and planned hours are optional; a task with neither still counts
    toward its project's status.
    """

    task_id: int
    project_id: int
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    planned_hours: Optional[float] = None
    assigned_user_ids: tuple[int, ...] = ()
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.task_id,
            "project_id": self.project_id,
            "name": self.name,
            "start_date": to_iso(self.start_date),
            "end_date": to_iso(self.end_date),
            "planned_hours": self.planned_hours,
            "assigned_user_ids": list(self.assigned_user_ids),
            "note": self.note,
        }
