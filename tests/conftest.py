from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from timetrack.absences.model import Absence
from timetrack.clients.model import Client
from timetrack.container import wire_container
from timetrack.projects.model import Project
from timetrack.tasks.model import Task
from timetrack.time_entries.model import TimeEntry
from timetrack.users.model import User


class InMemoryUsers:
    def __init__(self):
        self.users: dict[int, User] = {}
        self._id = 0

    def list_all(self):
        return sorted(self.users.values(), key=lambda u: (u.surname, u.name))

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    def create_user(self, *, name, surname, email, password_hash, daily_hours) -> int:
        self._id += 1
        self.users[self._id] = User(self._id, name, surname, email, password_hash, daily_hours)
        return self._id

    def update_user(self, user_id, *, name, surname, email, password_hash, daily_hours) -> bool:
        if user_id not in self.users:
            return False
        self.users[user_id] = User(user_id, name, surname, email, password_hash, daily_hours)
        return True

    def delete_by_id(self, user_id: int) -> bool:
        return self.users.pop(user_id, None) is not None


class InMemoryClients:
    def __init__(self):
        self.clients: dict[int, Client] = {}
        self._id = 0

    def list_all(self):
        return sorted(self.clients.values(), key=lambda c: c.name)

    def get_by_id(self, client_id: int) -> Optional[Client]:
        return self.clients.get(client_id)

    def create_client(self, *, name, vat) -> int:
        self._id += 1
        self.clients[self._id] = Client(self._id, name, vat)
        return self._id

    def update_client(self, client_id, *, name, vat) -> bool:
        self.clients[client_id] = Client(client_id, name, vat)
        return True

    def delete_by_id(self, client_id: int) -> bool:
        return self.clients.pop(client_id, None) is not None


class InMemoryProjects:
    def __init__(self):
        self.projects: dict[int, Project] = {}
        self._id = 0

    def list_all(self, *, client_id=None):
        return [p for p in self.projects.values() if client_id is None or p.client_id == client_id]

    def get_by_id(self, project_id: int) -> Optional[Project]:
        return self.projects.get(project_id)

    def create_project(self, *, client_id, name, notes) -> int:
        self._id += 1
        self.projects[self._id] = Project(self._id, client_id, name, notes)
        return self._id

    def update_project(self, project_id, *, client_id, name, notes) -> bool:
        self.projects[project_id] = Project(project_id, client_id, name, notes)
        return True

    def delete_by_id(self, project_id: int) -> bool:
        return self.projects.pop(project_id, None) is not None


class InMemoryTasks:
    def __init__(self):
        self.tasks: dict[int, Task] = {}
        self._id = 0

    def list_tasks(self, *, project_id=None):
        return [t for t in self.tasks.values() if project_id is None or t.project_id == project_id]

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self.tasks.get(task_id)

    def create_task(self, *, project_id, name, start_date, end_date, planned_hours, assigned_user_ids, note) -> int:
        self._id += 1
        self.tasks[self._id] = Task(
            self._id, project_id, name, start_date, end_date, planned_hours, tuple(assigned_user_ids), note
        )
        return self._id

    def update_task(self, task_id, *, project_id, name, start_date, end_date, planned_hours, assigned_user_ids, note) -> bool:
        self.tasks[task_id] = Task(
            task_id, project_id, name, start_date, end_date, planned_hours, tuple(assigned_user_ids), note
        )
        return True

    def delete_by_id(self, task_id: int) -> bool:
        return self.tasks.pop(task_id, None) is not None

    def remove_assignee(self, user_id: int) -> int:
        changed = [t for t in self.tasks.values() if user_id in t.assigned_user_ids]
        for task in changed:
            self.tasks[task.task_id] = replace(
                task, assigned_user_ids=tuple(u for u in task.assigned_user_ids if u != user_id)
            )
        return len(changed)


class InMemoryEntries:
    def __init__(self):
        self.entries: dict[int, TimeEntry] = {}
        self._id = 0

    def list_entries(self, *, user_id=None, project_id=None, start=None, end=None):
        out = [
            e
            for e in self.entries.values()
            if (user_id is None or e.user_id == user_id)
            and (project_id is None or e.project_id == project_id)
            and (start is None or e.entry_date >= start)
            and (end is None or e.entry_date <= end)
        ]
        return sorted(out, key=lambda e: (e.entry_date, e.entry_id), reverse=True)

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        return self.entries.get(entry_id)

    def create_entry(self, *, user_id, project_id, task_id, entry_date, hours, note) -> int:
        self._id += 1
        self.entries[self._id] = TimeEntry(self._id, user_id, project_id, task_id, entry_date, hours, note)
        return self._id

    def update_entry(self, entry_id, *, user_id, project_id, task_id, entry_date, hours, note) -> bool:
        current = self.entries[entry_id]
        self.entries[entry_id] = replace(
            current,
            user_id=user_id,
            project_id=project_id,
            task_id=task_id,
            entry_date=entry_date,
            hours=hours,
            note=note,
        )
        return True

    def delete_by_id(self, entry_id: int) -> bool:
        return self.entries.pop(entry_id, None) is not None

    def _delete(self, predicate) -> int:
        doomed = [k for k, e in self.entries.items() if predicate(e)]
        for k in doomed:
            del self.entries[k]
        return len(doomed)

    def delete_for_user(self, user_id: int) -> int:
        return self._delete(lambda e: e.user_id == user_id)

    def delete_for_project(self, project_id: int) -> int:
        return self._delete(lambda e: e.project_id == project_id)

    def delete_for_task(self, task_id: int) -> int:
        return self._delete(lambda e: e.task_id == task_id)


class InMemoryAbsences:
    def __init__(self):
        self.pairs: set[tuple[int, date]] = set()

    def list_absences(self, *, user_id=None, start=None, end=None):
        return [
            Absence(u, d)
            for u, d in sorted(self.pairs, key=lambda p: (p[1], p[0]))
            if (user_id is None or u == user_id) and (start is None or d >= start) and (end is None or d <= end)
        ]

    def exists(self, user_id: int, absence_date: date) -> bool:
        return (user_id, absence_date) in self.pairs

    def create(self, user_id: int, absence_date: date) -> bool:
        if (user_id, absence_date) in self.pairs:
            return False
        self.pairs.add((user_id, absence_date))
        return True

    def delete(self, user_id: int, absence_date: date) -> bool:
        if (user_id, absence_date) not in self.pairs:
            return False
        self.pairs.discard((user_id, absence_date))
        return True

    def delete_for_user(self, user_id: int) -> int:
        doomed = {p for p in self.pairs if p[0] == user_id}
        self.pairs -= doomed
        return len(doomed)


@pytest.fixture
def container():
    return wire_container(
        users_repo=InMemoryUsers(),
        clients_repo=InMemoryClients(),
        projects_repo=InMemoryProjects(),
        tasks_repo=InMemoryTasks(),
        entries_repo=InMemoryEntries(),
        absences_repo=InMemoryAbsences(),
    )


@pytest.fixture
def seeded(container):
    """One user, one client, one project with a task. Returns the ids."""
    users = container.users_repo
    user_id = users.create_user(
        name="Marco",
        surname="Bianchi",
        email="marco@example.com",
        password_hash=generate_password_hash("secret123"),
        daily_hours=8,
    )
    client_id = container.clients_repo.create_client(name="TechVision Srl", vat="IT12345678901")
    project_id = container.projects_repo.create_project(client_id=client_id, name="Portal", notes=None)
    task_id = container.tasks_repo.create_task(
        project_id=project_id,
        name="Design",
        start_date=date(2026, 2, 1),
        end_date=date(2026, 2, 28),
        planned_hours=40,
        assigned_user_ids=[user_id],
        note=None,
    )
    return {"user_id": user_id, "client_id": client_id, "project_id": project_id, "task_id": task_id}


@pytest.fixture
def app(container):
    from timetrack.main import create_app

    return create_app(container=container, settings_module="timetrack.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client, seeded):
    resp = client.post("/api/login", json={"email": "marco@example.com", "password": "secret123"})
    assert resp.status_code == 200
    return client
