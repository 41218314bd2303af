from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Absence


class AbsenceRepository(Protocol):
    def list_absences(
        self,
        *,
        user_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Absence]:
        raise NotImplementedError

    def exists(self, user_id: int, absence_date: date) -> bool:
        raise NotImplementedError

    def create(self, user_id: int, absence_date: date) -> bool:
        """Insert the pair; False when it is already present."""

        raise NotImplementedError

    def delete(self, user_id: int, absence_date: date) -> bool:
        raise NotImplementedError

    def delete_for_user(self, user_id: int) -> int:
        raise NotImplementedError
