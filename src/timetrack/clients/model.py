from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Client:
    client_id: int
    name: str
    vat: str

    def to_dict(self) -> dict:
        return {"id": self.client_id, "name": self.name, "vat": self.vat}
