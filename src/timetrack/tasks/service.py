from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.validators import optional_date, optional_number, optional_text, require_id, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..projects.repository import ProjectRepository
from ..time_entries.repository import TimeEntryRepository
from ..users.repository import UserRepository
from .model import Task
from .repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskFields:
    project_id: int
    name: str
    start_date: Optional[date]
    end_date: Optional[date]
    planned_hours: Optional[float]
    assigned_user_ids: tuple[int, ...]
    note: Optional[str]


class TaskService:
    def __init__(
        self,
        tasks: TaskRepository,
        projects: ProjectRepository,
        users: UserRepository,
        entries: TimeEntryRepository,
    ):
        self._tasks = tasks
        self._projects = projects
        self._users = users
        self._entries = entries

    def list_tasks(self, *, project_id: Optional[int] = None) -> Sequence[Task]:
        return self._tasks.list_tasks(project_id=project_id)

    def get_task(self, task_id: int) -> Task:
        task = self._tasks.get_by_id(int(task_id))
        if not task:
            raise NotFoundError("Task not found")
        return task

    def _validate(self, values: Mapping[str, Any]) -> TaskFields:
        project_id = require_id(values.get("project_id"), "Project")
        if not self._projects.get_by_id(project_id):
            raise ValidationError("Project does not exist")

        start_date = optional_date(values.get("start_date"), "Start date")
        end_date = optional_date(values.get("end_date"), "End date")
        if start_date and end_date and end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        return TaskFields(
            project_id=project_id,
            name=require_non_empty(values.get("name"), "Name"),
            start_date=start_date,
            end_date=end_date,
            planned_hours=optional_number(values.get("planned_hours"), "Planned hours"),
            assigned_user_ids=self._validate_assignees(values.get("assigned_user_ids") or ()),
            note=optional_text(values.get("note")),
        )

    def _validate_assignees(self, user_ids: Iterable[Any]) -> tuple[int, ...]:
        if isinstance(user_ids, (str, bytes)):
            raise ValidationError("Assigned users must be a list")
        out: list[int] = []
        for raw in user_ids:
            user_id = require_id(raw, "Assigned user")
            if not self._users.get_by_id(user_id):
                raise ValidationError(f"User {user_id} does not exist")
            if user_id not in out:
                out.append(user_id)
        return tuple(out)

    def create_task(self, values: Mapping[str, Any]) -> Task:
        fields = self._validate(values)
        task_id = self._tasks.create_task(
            project_id=fields.project_id,
            name=fields.name,
            start_date=fields.start_date,
            end_date=fields.end_date,
            planned_hours=fields.planned_hours,
            assigned_user_ids=fields.assigned_user_ids,
            note=fields.note,
        )
        return self.get_task(task_id)

    def update_task(self, task_id: int, changes: Mapping[str, Any]) -> Task:
        current = self.get_task(task_id)
        merged = {
            "project_id": current.project_id,
            "name": current.name,
            "start_date": current.start_date,
            "end_date": current.end_date,
            "planned_hours": current.planned_hours,
            "assigned_user_ids": current.assigned_user_ids,
            "note": current.note,
        }
        merged.update({k: v for k, v in changes.items() if k in merged})
        fields = self._validate(merged)

        if not self._tasks.update_task(
            current.task_id,
            project_id=fields.project_id,
            name=fields.name,
            start_date=fields.start_date,
            end_date=fields.end_date,
            planned_hours=fields.planned_hours,
            assigned_user_ids=fields.assigned_user_ids,
            note=fields.note,
        ):
            raise ValidationError("Updating task failed")
        return self.get_task(current.task_id)

    def delete_task(self, task_id: int) -> None:
        task = self.get_task(task_id)
        removed = self._entries.delete_for_task(task.task_id)
        if not self._tasks.delete_by_id(task.task_id):
            raise ValidationError("Deleting task failed")
        logger.info("Deleted task %s with %s time entries", task.task_id, removed)
