from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class TimeEntry:
    entry_id: int
    user_id: int
    project_id: int
    task_id: Optional[int]
    entry_date: date
    hours: float
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "user_id": self.user_id,
            "project_id": self.project_id,
            "task_id": self.task_id,
            "date": to_iso(self.entry_date),
            "hours": self.hours,
            "note": self.note,
        }
