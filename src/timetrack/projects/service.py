from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..clients.repository import ClientRepository
from ..common.validators import optional_text, require_id, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..tasks.repository import TaskRepository
from ..time_entries.repository import TimeEntryRepository
from .model import Project
from .repository import ProjectRepository
from .stats import ProjectStats, compute_project_stats

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(
        self,
        projects: ProjectRepository,
        clients: ClientRepository,
        tasks: TaskRepository,
        entries: TimeEntryRepository,
    ):
        self._projects = projects
        self._clients = clients
        self._tasks = tasks
        self._entries = entries

    def list_projects(self, *, client_id: Optional[int] = None) -> Sequence[Project]:
        return self._projects.list_all(client_id=client_id)

    def get_project(self, project_id: int) -> Project:
        project = self._projects.get_by_id(int(project_id))
        if not project:
            raise NotFoundError("Project not found")
        return project

    def get_stats(self, project_id: int, *, today: Optional[date] = None) -> ProjectStats:
        project = self.get_project(project_id)
        return compute_project_stats(self._tasks.list_tasks(project_id=project.project_id), today=today)

    def _require_client(self, client_id: Any) -> int:
        client_id = require_id(client_id, "Client")
        if not self._clients.get_by_id(client_id):
            raise ValidationError("Client does not exist")
        return client_id

    def create_project(self, *, client_id: Any, name: str, notes: Optional[str] = None) -> Project:
        project_id = self._projects.create_project(
            client_id=self._require_client(client_id),
            name=require_non_empty(name, "Name"),
            notes=optional_text(notes),
        )
        return self.get_project(project_id)

    def update_project(self, project_id: int, changes: Mapping[str, Any]) -> Project:
        current = self.get_project(project_id)
        client_id = self._require_client(changes["client_id"]) if "client_id" in changes else current.client_id
        name = require_non_empty(changes["name"], "Name") if "name" in changes else current.name
        notes = optional_text(changes["notes"]) if "notes" in changes else current.notes

        if not self._projects.update_project(current.project_id, client_id=client_id, name=name, notes=notes):
            raise ValidationError("Updating project failed")
        return self.get_project(current.project_id)

    def delete_project(self, project_id: int) -> None:
        project = self.get_project(project_id)

        tasks = self._tasks.list_tasks(project_id=project.project_id)
        for task in tasks:
            self._entries.delete_for_task(task.task_id)
            self._tasks.delete_by_id(task.task_id)
        removed_entries = self._entries.delete_for_project(project.project_id)

        if not self._projects.delete_by_id(project.project_id):
            raise ValidationError("Deleting project failed")
        logger.info(
            "Deleted project %s with %s tasks and %s remaining time entries",
            project.project_id,
            len(tasks),
            removed_entries,
        )
