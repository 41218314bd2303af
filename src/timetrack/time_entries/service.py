from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..absences.service import AbsenceService
from ..common.validators import optional_text, require_date, require_id, require_number
from ..core.exceptions import NotFoundError, ValidationError
from ..projects.repository import ProjectRepository
from ..tasks.repository import TaskRepository
from ..users.repository import UserRepository
from .model import TimeEntry
from .repository import TimeEntryRepository


@dataclass(frozen=True)
class EntryFields:
    user_id: int
    project_id: int
    task_id: Optional[int]
    entry_date: date
    hours: float
    note: Optional[str]


class TimeEntryService:
    def __init__(
        self,
        entries: TimeEntryRepository,
        users: UserRepository,
        projects: ProjectRepository,
        tasks: TaskRepository,
        absences: AbsenceService,
    ):
        self._entries = entries
        self._users = users
        self._projects = projects
        self._tasks = tasks
        self._absences = absences

    def list_entries(
        self,
        *,
        user_id: Optional[int] = None,
        project_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[TimeEntry]:
        if start and end and end < start:
            raise ValidationError("End date must be on or after start date")
        return self._entries.list_entries(user_id=user_id, project_id=project_id, start=start, end=end)

    def get_entry(self, entry_id: int) -> TimeEntry:
        entry = self._entries.get_by_id(int(entry_id))
        if not entry:
            raise NotFoundError("Time entry not found")
        return entry

    def _validate(self, values: Mapping[str, Any]) -> EntryFields:
        user_id = require_id(values.get("user_id"), "User")
        if not self._users.get_by_id(user_id):
            raise ValidationError("User does not exist")

        project_id = require_id(values.get("project_id"), "Project")
        if not self._projects.get_by_id(project_id):
            raise ValidationError("Project does not exist")

        task_id = None
        if values.get("task_id") not in (None, ""):
            task_id = require_id(values.get("task_id"), "Task")
            task = self._tasks.get_by_id(task_id)
            if not task:
                raise ValidationError("Task does not exist")
            if task.project_id != project_id:
                raise ValidationError("Task does not belong to the selected project")

        return EntryFields(
            user_id=user_id,
            project_id=project_id,
            task_id=task_id,
            entry_date=require_date(values.get("date"), "Date"),
            hours=require_number(values.get("hours"), "Hours", positive=True),
            note=optional_text(values.get("note")),
        )

    def create_entry(self, values: Mapping[str, Any]) -> TimeEntry:
        fields = self._validate(values)
        self._absences.ensure_present(fields.user_id, fields.entry_date)

        entry_id = self._entries.create_entry(
            user_id=fields.user_id,
            project_id=fields.project_id,
            task_id=fields.task_id,
            entry_date=fields.entry_date,
            hours=fields.hours,
            note=fields.note,
        )
        return self.get_entry(entry_id)

    def update_entry(self, entry_id: int, changes: Mapping[str, Any]) -> TimeEntry:
        current = self.get_entry(entry_id)
        merged = {
            "user_id": current.user_id,
            "project_id": current.project_id,
            "task_id": current.task_id,
            "date": current.entry_date,
            "hours": current.hours,
            "note": current.note,
        }
        merged.update({k: v for k, v in changes.items() if k in merged})
        fields = self._validate(merged)

        # Existing entries stay editable on absent days; only moving an entry is gated
        if (fields.user_id, fields.entry_date) != (current.user_id, current.entry_date):
            self._absences.ensure_present(fields.user_id, fields.entry_date)

        if not self._entries.update_entry(
            current.entry_id,
            user_id=fields.user_id,
            project_id=fields.project_id,
            task_id=fields.task_id,
            entry_date=fields.entry_date,
            hours=fields.hours,
            note=fields.note,
        ):
            raise ValidationError("Updating time entry failed")
        return self.get_entry(current.entry_id)

    def delete_entry(self, entry_id: int) -> None:
        entry = self.get_entry(entry_id)
        if not self._entries.delete_by_id(entry.entry_id):
            raise ValidationError("Deleting time entry failed")
