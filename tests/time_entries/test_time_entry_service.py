from __future__ import annotations

from datetime import date

import pytest

from timetrack.core.exceptions import NotFoundError, ValidationError


def _payload(seeded, **overrides):
    data = {
        "user_id": seeded["user_id"],
        "project_id": seeded["project_id"],
        "task_id": seeded["task_id"],
        "date": "2026-02-24",
        "hours": 6,
        "note": "Wireframes",
    }
    data.update(overrides)
    return data


def test_create_entry(container, seeded):
    entry = container.time_entry_service.create_entry(_payload(seeded))

    assert entry.entry_date == date(2026, 2, 24)
    assert entry.hours == 6
    assert entry.task_id == seeded["task_id"]


def test_entry_without_task(container, seeded):
    entry = container.time_entry_service.create_entry(_payload(seeded, task_id=None, note="  "))

    assert entry.task_id is None
    assert entry.note is None


@pytest.mark.parametrize("hours", [0, -1, "abc", None, "nan", "inf", float("nan")])
def test_hours_must_be_positive(container, seeded, hours):
    with pytest.raises(ValidationError):
        container.time_entry_service.create_entry(_payload(seeded, hours=hours))


def test_task_must_belong_to_project(container, seeded):
    other_project = container.projects_repo.create_project(client_id=seeded["client_id"], name="Other", notes=None)

    with pytest.raises(ValidationError):
        container.time_entry_service.create_entry(_payload(seeded, project_id=other_project))


def test_invalid_date_is_rejected(container, seeded):
    with pytest.raises(ValidationError):
        container.time_entry_service.create_entry(_payload(seeded, date="24/02/2026"))


def test_absent_day_blocks_new_entries(container, seeded):
    container.absence_service.mark_absent(user_id=seeded["user_id"], day="2026-02-24")

    with pytest.raises(ValidationError, match="absent"):
        container.time_entry_service.create_entry(_payload(seeded))

    # other days are unaffected
    container.time_entry_service.create_entry(_payload(seeded, date="2026-02-25"))


def test_moving_entry_onto_absent_day_is_blocked(container, seeded):
    entry = container.time_entry_service.create_entry(_payload(seeded))
    container.absence_service.mark_absent(user_id=seeded["user_id"], day="2026-02-25")

    with pytest.raises(ValidationError):
        container.time_entry_service.update_entry(entry.entry_id, {"date": "2026-02-25"})


def test_existing_entry_on_absent_day_stays_editable(container, seeded):
    entry = container.time_entry_service.create_entry(_payload(seeded))
    container.absence_service.mark_absent(user_id=seeded["user_id"], day="2026-02-24")

    updated = container.time_entry_service.update_entry(entry.entry_id, {"hours": 4})

    assert updated.hours == 4


def test_list_rejects_inverted_range(container, seeded):
    with pytest.raises(ValidationError):
        container.time_entry_service.list_entries(start=date(2026, 3, 1), end=date(2026, 2, 1))


def test_delete_missing_entry(container, seeded):
    with pytest.raises(NotFoundError):
        container.time_entry_service.delete_entry(999)
