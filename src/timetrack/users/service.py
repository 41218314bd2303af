from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..absences.repository import AbsenceRepository
from ..common.validators import require_email, require_min_length, require_non_empty, require_number
from ..core.constants import DEFAULT_DAILY_HOURS, DEFAULT_PASSWORD, MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..tasks.repository import TaskRepository
from ..time_entries.repository import TimeEntryRepository
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    full_name: str
    email: str


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip().lower())
        if not user:
            logger.info("Login rejected for unknown email %r", email)
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Login rejected for user_id=%s", user.user_id)
            raise AuthenticationError("Invalid email or password")

        logger.info("User %s logged in", user.user_id)
        return SessionUser(user_id=user.user_id, full_name=user.full_name, email=user.email)


class UserService:
    """Use case: manage users."""

    def __init__(
        self,
        users: UserRepository,
        tasks: TaskRepository,
        entries: TimeEntryRepository,
        absences: AbsenceRepository,
    ):
        self._users = users
        self._tasks = tasks
        self._entries = entries
        self._absences = absences

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User not found")
        return user

    def create_user(
        self,
        *,
        name: str,
        surname: str,
        email: str,
        password: str | None = None,
        daily_hours: Any = DEFAULT_DAILY_HOURS,
    ) -> User:
        name = require_non_empty(name, "Name")
        surname = require_non_empty(surname, "Surname")
        email = require_email(email)
        password = require_min_length(password or DEFAULT_PASSWORD, "Password", MIN_PASSWORD_LENGTH)
        hours = require_number(DEFAULT_DAILY_HOURS if daily_hours is None else daily_hours, "Daily hours", positive=True)

        if self._users.get_by_email(email):
            raise ValidationError("Email already in use")

        user_id = self._users.create_user(
            name=name,
            surname=surname,
            email=email,
            password_hash=generate_password_hash(password),
            daily_hours=hours,
        )
        return self.get_user(user_id)

    def update_user(self, user_id: int, changes: Mapping[str, Any]) -> User:
        current = self.get_user(user_id)

        name = require_non_empty(changes["name"], "Name") if "name" in changes else current.name
        surname = require_non_empty(changes["surname"], "Surname") if "surname" in changes else current.surname
        email = require_email(changes["email"]) if "email" in changes else current.email
        daily_hours = (
            require_number(changes["daily_hours"], "Daily hours", positive=True)
            if "daily_hours" in changes
            else current.daily_hours
        )
        password_hash = current.password_hash
        if changes.get("password"):
            password = require_min_length(changes["password"], "Password", MIN_PASSWORD_LENGTH)
            password_hash = generate_password_hash(password)

        if email != current.email:
            other = self._users.get_by_email(email)
            if other and other.user_id != current.user_id:
                raise ValidationError("Email already in use")

        if not self._users.update_user(
            current.user_id,
            name=name,
            surname=surname,
            email=email,
            password_hash=password_hash,
            daily_hours=daily_hours,
        ):
            raise ValidationError("Updating user failed")
        return self.get_user(current.user_id)

    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)

        removed_entries = self._entries.delete_for_user(user.user_id)
        removed_absences = self._absences.delete_for_user(user.user_id)
        unassigned = self._tasks.remove_assignee(user.user_id)
        if not self._users.delete_by_id(user.user_id):
            raise ValidationError("Deleting user failed")

        logger.info(
            "Deleted user %s with %s time entries and %s absences, unassigned from %s tasks",
            user.user_id,
            removed_entries,
            removed_absences,
            unassigned,
        )
