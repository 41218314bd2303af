from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, no DB access code here.
    """

    user_id: int
    name: str
    surname: str
    email: str
    password_hash: str
    daily_hours: float

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"

    def to_dict(self) -> dict:
        # password_hash never leaves the service boundary
        return {
            "id": self.user_id,
            "name": self.name,
            "surname": self.surname,
            "email": self.email,
            "daily_hours": self.daily_hours,
        }
