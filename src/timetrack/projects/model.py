from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Project:
    project_id: int
    client_id: int
    name: str
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.project_id,
            "client_id": self.client_id,
            "name": self.name,
            "notes": self.notes,
        }
