from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Client


class ClientRepository(Protocol):
    def list_all(self) -> Sequence[Client]:
        raise NotImplementedError

    def get_by_id(self, client_id: int) -> Optional[Client]:
        raise NotImplementedError

    def create_client(self, *, name: str, vat: str) -> int:
        raise NotImplementedError

    def update_client(self, client_id: int, *, name: str, vat: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, client_id: int) -> bool:
        raise NotImplementedError
