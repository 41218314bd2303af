from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .absences.mysql_absence_repository import MySQLAbsenceRepository
from .absences.repository import AbsenceRepository
from .absences.service import AbsenceService
from .clients.mysql_client_repository import MySQLClientRepository
from .clients.repository import ClientRepository
from .clients.service import ClientService
from .database.connection import DBConfig, DatabaseConnection
from .projects.mysql_project_repository import MySQLProjectRepository
from .projects.repository import ProjectRepository
from .projects.service import ProjectService
from .reports.service import CalendarService, DashboardService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService
from .time_entries.mysql_time_entry_repository import MySQLTimeEntryRepository
from .time_entries.repository import TimeEntryRepository
from .time_entries.service import TimeEntryService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    clients_repo: ClientRepository
    projects_repo: ProjectRepository
    tasks_repo: TaskRepository
    entries_repo: TimeEntryRepository
    absences_repo: AbsenceRepository

    auth_service: AuthService
    user_service: UserService
    client_service: ClientService
    project_service: ProjectService
    task_service: TaskService
    absence_service: AbsenceService
    time_entry_service: TimeEntryService
    dashboard_service: DashboardService
    calendar_service: CalendarService

    conn: Optional[DatabaseConnection] = None


def wire_container(
    *,
    users_repo: UserRepository,
    clients_repo: ClientRepository,
    projects_repo: ProjectRepository,
    tasks_repo: TaskRepository,
    entries_repo: TimeEntryRepository,
    absences_repo: AbsenceRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build the service graph on top of any set of repositories."""
    absence_service = AbsenceService(absences_repo, users_repo)
    project_service = ProjectService(projects_repo, clients_repo, tasks_repo, entries_repo)

    return Container(
        users_repo=users_repo,
        clients_repo=clients_repo,
        projects_repo=projects_repo,
        tasks_repo=tasks_repo,
        entries_repo=entries_repo,
        absences_repo=absences_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo, tasks_repo, entries_repo, absences_repo),
        client_service=ClientService(clients_repo, projects_repo, project_service),
        project_service=project_service,
        task_service=TaskService(tasks_repo, projects_repo, users_repo, entries_repo),
        absence_service=absence_service,
        time_entry_service=TimeEntryService(entries_repo, users_repo, projects_repo, tasks_repo, absence_service),
        dashboard_service=DashboardService(projects_repo, clients_repo, tasks_repo, entries_repo),
        calendar_service=CalendarService(entries_repo, absences_repo, users_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        users_repo=MySQLUserRepository(conn),
        clients_repo=MySQLClientRepository(conn),
        projects_repo=MySQLProjectRepository(conn),
        tasks_repo=MySQLTaskRepository(conn),
        entries_repo=MySQLTimeEntryRepository(conn),
        absences_repo=MySQLAbsenceRepository(conn),
        conn=conn,
    )
