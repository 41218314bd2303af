from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class Absence:
    """A user/date pair: the user did not work that day."""

    user_id: int
    absence_date: date

    def to_dict(self) -> dict:
        return {"user_id": self.user_id, "date": to_iso(self.absence_date)}
