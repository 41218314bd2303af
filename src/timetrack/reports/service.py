from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..absences.repository import AbsenceRepository
from ..clients.repository import ClientRepository
from ..common.datetime_utils import to_iso, today_local
from ..core.constants import RECENT_ENTRIES_LIMIT
from ..core.enums import DashboardFilter, PeriodView, ProjectStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..projects.model import Project
from ..projects.repository import ProjectRepository
from ..projects.stats import ProjectStats, compute_project_stats
from ..tasks.repository import TaskRepository
from ..time_entries.model import TimeEntry
from ..time_entries.repository import TimeEntryRepository
from ..users.repository import UserRepository
from .aggregation import completion_percent, daily_totals, hours_in_period, total_hours
from .periods import period_for


@dataclass(frozen=True)
class ProjectSummary:
    project: Project
    client_name: Optional[str]
    stats: ProjectStats
    logged_hours: float

    @property
    def planned_hours(self) -> float:
        return self.stats.total_planned_hours

    @property
    def completion(self) -> Optional[float]:
        return completion_percent(self.logged_hours, self.planned_hours)

    def to_dict(self) -> dict:
        out = self.project.to_dict()
        out.update(
            {
                "client_name": self.client_name,
                "stats": self.stats.to_dict(),
                "planned_hours": self.planned_hours,
                "logged_hours": self.logged_hours,
                "completion": self.completion,
            }
        )
        return out


@dataclass(frozen=True)
class DashboardData:
    projects: list[ProjectSummary]
    active_count: int
    recent_entries: list[TimeEntry]

    @property
    def total_planned(self) -> float:
        return sum(p.planned_hours for p in self.projects)

    @property
    def total_logged(self) -> float:
        return sum(p.logged_hours for p in self.projects)

    @property
    def completion(self) -> Optional[float]:
        return completion_percent(self.total_logged, self.total_planned)

    def to_dict(self) -> dict:
        return {
            "projects": [p.to_dict() for p in self.projects],
            "project_count": len(self.projects),
            "active_count": self.active_count,
            "total_planned": self.total_planned,
            "total_logged": self.total_logged,
            "completion": self.completion,
            "recent_entries": [e.to_dict() for e in self.recent_entries],
        }


class DashboardService:
    """Read model behind the dashboard: stats are recomputed on every call."""

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

    def project_summaries(self, *, today: Optional[date] = None) -> list[ProjectSummary]:
        today = today or today_local()
        client_names = {c.client_id: c.name for c in self._clients.list_all()}

        tasks_by_project = defaultdict(list)
        for task in self._tasks.list_tasks():
            tasks_by_project[task.project_id].append(task)

        logged_by_project: dict[int, float] = defaultdict(float)
        for entry in self._entries.list_entries():
            logged_by_project[entry.project_id] += entry.hours

        return [
            ProjectSummary(
                project=project,
                client_name=client_names.get(project.client_id),
                stats=compute_project_stats(tasks_by_project[project.project_id], today=today),
                logged_hours=logged_by_project.get(project.project_id, 0.0),
            )
            for project in self._projects.list_all()
        ]

    def project_summary(self, project_id: int, *, today: Optional[date] = None) -> ProjectSummary:
        project = self._projects.get_by_id(int(project_id))
        if not project:
            raise NotFoundError("Project not found")
        client = self._clients.get_by_id(project.client_id)

        return ProjectSummary(
            project=project,
            client_name=client.name if client else None,
            stats=compute_project_stats(self._tasks.list_tasks(project_id=project.project_id), today=today),
            logged_hours=total_hours(self._entries.list_entries(project_id=project.project_id)),
        )

    def build(self, *, filter: DashboardFilter | str = DashboardFilter.ALL, today: Optional[date] = None) -> DashboardData:
        try:
            filter = DashboardFilter(filter)
        except ValueError:
            raise ValidationError(f"Unknown dashboard filter: {filter!r}")

        summaries = self.project_summaries(today=today)
        active = [s for s in summaries if s.stats.status == ProjectStatus.ACTIVE]
        shown = active if filter == DashboardFilter.ACTIVE else summaries
        shown = sorted(shown, key=lambda s: s.logged_hours, reverse=True)

        recent = sorted(self._entries.list_entries(), key=lambda e: (e.entry_date, e.entry_id), reverse=True)
        return DashboardData(
            projects=shown,
            active_count=len(active),
            recent_entries=recent[:RECENT_ENTRIES_LIMIT],
        )


@dataclass(frozen=True)
class CalendarDay:
    day: date
    hours: float
    absent: bool
    in_period: bool

    def to_dict(self) -> dict:
        return {
            "date": to_iso(self.day),
            "hours": self.hours,
            "absent": self.absent,
            "in_period": self.in_period,
        }


@dataclass(frozen=True)
class CalendarView:
    user_id: int
    view: PeriodView
    anchor: date
    label: str
    days: list[CalendarDay]
    total_hours: float
    prev_anchor: date
    next_anchor: date
    entries: list[TimeEntry]

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "view": self.view.value,
            "date": to_iso(self.anchor),
            "label": self.label,
            "days": [d.to_dict() for d in self.days],
            "total_hours": self.total_hours,
            "prev": to_iso(self.prev_anchor),
            "next": to_iso(self.next_anchor),
            "entries": [e.to_dict() for e in self.entries],
        }


class CalendarService:
    """Day/week/month view of one user's logged hours."""

    def __init__(self, entries: TimeEntryRepository, absences: AbsenceRepository, users: UserRepository):
        self._entries = entries
        self._absences = absences
        self._users = users

    def build(self, *, user_id: int, view: PeriodView | str = PeriodView.WEEK, anchor: Optional[date] = None) -> CalendarView:
        if not self._users.get_by_id(int(user_id)):
            raise NotFoundError("User not found")

        period = period_for(view, anchor or today_local())
        shown = period.days()
        entries = list(self._entries.list_entries(user_id=int(user_id), start=shown[0], end=shown[-1]))
        absent_days = {
            a.absence_date for a in self._absences.list_absences(user_id=int(user_id), start=shown[0], end=shown[-1])
        }
        totals = daily_totals(entries, shown)

        return CalendarView(
            user_id=int(user_id),
            view=period.view,
            anchor=period.anchor,
            label=period.label,
            days=[
                CalendarDay(day=d, hours=totals[d], absent=d in absent_days, in_period=period.contains(d))
                for d in shown
            ],
            total_hours=hours_in_period(entries, period),
            prev_anchor=period.shift(-1).anchor,
            next_anchor=period.shift(1).anchor,
            entries=sorted((e for e in entries if period.contains(e.entry_date)), key=lambda e: (e.entry_date, e.entry_id)),
        )
