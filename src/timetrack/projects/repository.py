from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def list_all(self, *, client_id: Optional[int] = None) -> Sequence[Project]:
        raise NotImplementedError

    def get_by_id(self, project_id: int) -> Optional[Project]:
        raise NotImplementedError

    def create_project(self, *, client_id: int, name: str, notes: Optional[str]) -> int:
        raise NotImplementedError

    def update_project(self, project_id: int, *, client_id: int, name: str, notes: Optional[str]) -> bool:
        raise NotImplementedError

    def delete_by_id(self, project_id: int) -> bool:
        raise NotImplementedError
