from __future__ import annotations

from datetime import date

import pytest

from timetrack.core.exceptions import AuthenticationError, NotFoundError, ValidationError


def test_authenticate_with_email_and_password(container, seeded):
    s_user = container.auth_service.authenticate("Marco@Example.com ", "secret123")

    assert s_user.user_id == seeded["user_id"]
    assert s_user.full_name == "Marco Bianchi"


def test_wrong_password_raises(container, seeded):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("marco@example.com", "wrong")


def test_placeholder_hash_never_authenticates(container):
    container.users_repo.create_user(
        name="Seed", surname="User", email="seed@example.com", password_hash="CHANGE_ME", daily_hours=8
    )

    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("seed@example.com", "CHANGE_ME")


def test_create_user_uses_default_password(container):
    user = container.user_service.create_user(name="Laura", surname="Rossi", email="laura@example.com")

    assert user.daily_hours == 8
    assert container.auth_service.authenticate("laura@example.com", "changeme").user_id == user.user_id


def test_duplicate_email_is_rejected(container, seeded):
    with pytest.raises(ValidationError):
        container.user_service.create_user(name="Other", surname="Marco", email="marco@example.com")


@pytest.mark.parametrize("daily_hours", [0, -2, "many"])
def test_daily_hours_must_be_positive(container, daily_hours):
    with pytest.raises(ValidationError):
        container.user_service.create_user(
            name="Laura", surname="Rossi", email="laura@example.com", daily_hours=daily_hours
        )


def test_partial_update_keeps_other_fields(container, seeded):
    user = container.user_service.update_user(seeded["user_id"], {"daily_hours": 6})

    assert user.daily_hours == 6
    assert user.email == "marco@example.com"
    assert user.name == "Marco"


def test_password_change(container, seeded):
    container.user_service.update_user(seeded["user_id"], {"password": "another-secret"})

    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("marco@example.com", "secret123")
    assert container.auth_service.authenticate("marco@example.com", "another-secret")


def test_delete_user_removes_entries_and_absences(container, seeded):
    container.time_entry_service.create_entry(
        {"user_id": seeded["user_id"], "project_id": seeded["project_id"], "date": "2026-02-24", "hours": 3}
    )
    container.absence_service.mark_absent(user_id=seeded["user_id"], day=date(2026, 2, 25))

    container.user_service.delete_user(seeded["user_id"])

    assert container.entries_repo.list_entries() == []
    assert container.absences_repo.list_absences() == []
    with pytest.raises(NotFoundError):
        container.user_service.get_user(seeded["user_id"])


def test_delete_user_unassigns_tasks(container, seeded):
    other = container.user_service.create_user(name="Laura", surname="Rossi", email="laura@example.com")
    container.task_service.update_task(seeded["task_id"], {"assigned_user_ids": [seeded["user_id"], other.user_id]})

    container.user_service.delete_user(other.user_id)

    task = container.task_service.update_task(seeded["task_id"], {"name": "Renamed"})
    assert task.name == "Renamed"
    assert task.assigned_user_ids == (seeded["user_id"],)
