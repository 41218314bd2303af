from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    def list_entries(
        self,
        *,
        user_id: Optional[int] = None,
        project_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[TimeEntry]:
        """Entries matching every given filter, newest date first. ``start``/``end`` are inclusive."""

        raise NotImplementedError

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

    def create_entry(
        self,
        *,
        user_id: int,
        project_id: int,
        task_id: Optional[int],
        entry_date: date,
        hours: float,
        note: Optional[str],
    ) -> int:
        raise NotImplementedError

    def update_entry(
        self,
        entry_id: int,
        *,
        user_id: int,
        project_id: int,
        task_id: Optional[int],
        entry_date: date,
        hours: float,
        note: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, entry_id: int) -> bool:
        raise NotImplementedError

    # Cascades; each returns the number of deleted rows
    def delete_for_user(self, user_id: int) -> int:
        raise NotImplementedError

    def delete_for_project(self, project_id: int) -> int:
        raise NotImplementedError

    def delete_for_task(self, task_id: int) -> int:
        raise NotImplementedError
