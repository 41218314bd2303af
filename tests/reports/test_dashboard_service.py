from __future__ import annotations

from datetime import date

import pytest

from timetrack.core.enums import ProjectStatus
from timetrack.core.exceptions import NotFoundError, ValidationError

TODAY = date(2026, 2, 10)


@pytest.fixture
def portfolio(container, seeded):
    """Portal is active, Mobile App awaits June, Archive has no tasks."""
    mobile = container.projects_repo.create_project(client_id=seeded["client_id"], name="Mobile App", notes=None)
    container.tasks_repo.create_task(
        project_id=mobile,
        name="Kickoff",
        start_date=date(2026, 6, 1),
        end_date=date(2026, 6, 30),
        planned_hours=20,
        assigned_user_ids=[],
        note=None,
    )
    archive = container.projects_repo.create_project(client_id=seeded["client_id"], name="Archive", notes=None)

    entries = container.entries_repo
    entries.create_entry(
        user_id=seeded["user_id"], project_id=seeded["project_id"], task_id=seeded["task_id"],
        entry_date=date(2026, 2, 2), hours=3, note=None,
    )
    entries.create_entry(
        user_id=seeded["user_id"], project_id=mobile, task_id=None,
        entry_date=date(2026, 2, 3), hours=5, note="Estimate",
    )
    return {"portal": seeded["project_id"], "mobile": mobile, "archive": archive}


def test_summaries_carry_status_and_hours(container, portfolio):
    by_id = {s.project.project_id: s for s in container.dashboard_service.project_summaries(today=TODAY)}

    portal = by_id[portfolio["portal"]]
    assert portal.stats.status == ProjectStatus.ACTIVE
    assert portal.client_name == "TechVision Srl"
    assert portal.logged_hours == 3
    assert portal.completion == pytest.approx(7.5)

    assert by_id[portfolio["mobile"]].stats.status == ProjectStatus.AWAITING
    archive = by_id[portfolio["archive"]]
    assert archive.stats.status == ProjectStatus.NO_ACTIVITY
    assert archive.completion is None


def test_all_filter_sorts_by_logged_hours(container, portfolio):
    data = container.dashboard_service.build(filter="all", today=TODAY)

    assert [s.project.name for s in data.projects][:2] == ["Mobile App", "Portal"]
    assert data.active_count == 1
    assert data.total_planned == 60
    assert data.total_logged == 8


def test_active_filter(container, portfolio):
    data = container.dashboard_service.build(filter="active", today=TODAY)

    assert [s.project.project_id for s in data.projects] == [portfolio["portal"]]
    assert data.to_dict()["project_count"] == 1


def test_status_follows_today(container, portfolio):
    data = container.dashboard_service.build(filter="active", today=date(2026, 6, 15))

    assert [s.project.project_id for s in data.projects] == [portfolio["mobile"]]


def test_recent_entries_are_capped(container, seeded):
    for day in range(1, 10):
        container.entries_repo.create_entry(
            user_id=seeded["user_id"], project_id=seeded["project_id"], task_id=None,
            entry_date=date(2026, 2, day), hours=1, note=None,
        )

    recent = container.dashboard_service.build(today=TODAY).recent_entries

    assert len(recent) == 6
    assert recent[0].entry_date == date(2026, 2, 9)


def test_unknown_filter(container):
    with pytest.raises(ValidationError):
        container.dashboard_service.build(filter="late")


def test_missing_project_summary(container):
    with pytest.raises(NotFoundError):
        container.dashboard_service.project_summary(42)
