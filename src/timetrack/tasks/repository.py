from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Task


class TaskRepository(Protocol):
    def list_tasks(self, *, project_id: Optional[int] = None) -> Sequence[Task]:
        raise NotImplementedError

    def get_by_id(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def create_task(
        self,
        *,
        project_id: int,
        name: str,
        start_date: Optional[date],
        end_date: Optional[date],
        planned_hours: Optional[float],
        assigned_user_ids: Sequence[int],
        note: Optional[str],
    ) -> int:
        raise NotImplementedError

    def update_task(
        self,
        task_id: int,
        *,
        project_id: int,
        name: str,
        start_date: Optional[date],
        end_date: Optional[date],
        planned_hours: Optional[float],
        assigned_user_ids: Sequence[int],
        note: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, task_id: int) -> bool:
        raise NotImplementedError

    def remove_assignee(self, user_id: int) -> int:
        """Drop ``user_id`` from every task's assignees; returns the number of tasks changed."""
        raise NotImplementedError
