from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_date, require_id
from ..core.exceptions import NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import Absence
from .repository import AbsenceRepository

logger = logging.getLogger(__name__)


class AbsenceService:
    def __init__(self, absences: AbsenceRepository, users: UserRepository):
        self._absences = absences
        self._users = users

    def list_absences(
        self,
        *,
        user_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Absence]:
        if start and end and end < start:
            raise ValidationError("End date must be on or after start date")
        return self._absences.list_absences(user_id=user_id, start=start, end=end)

    def is_absent(self, user_id: int, day: date) -> bool:
        return self._absences.exists(int(user_id), day)

    def ensure_present(self, user_id: int, day: date) -> None:
        """Gate used before logging hours: refuse days the user is marked absent."""
        if self.is_absent(user_id, day):
            logger.info("Blocked time entry for user %s on absent day %s", user_id, day)
            raise ValidationError(f"User is marked absent on {day.isoformat()}")

    def mark_absent(self, *, user_id, day) -> Absence:
        user_id = require_id(user_id, "User")
        day = require_date(day, "Date")
        if not self._users.get_by_id(user_id):
            raise ValidationError("User does not exist")

        if not self._absences.create(user_id, day):
            logger.debug("User %s already absent on %s", user_id, day)
        return Absence(user_id=user_id, absence_date=day)

    def clear_absence(self, *, user_id: int, day: date) -> None:
        if not self._absences.delete(int(user_id), day):
            raise NotFoundError("Absence not found")
