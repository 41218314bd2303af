from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, where_clause
from .model import Project
from .repository import ProjectRepository


def _row_to_project(row: dict) -> Project:
    return Project(
        project_id=int(row["project_id"]),
        client_id=int(row["client_id"]),
        name=row["name"],
        notes=row.get("notes"),
    )


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, client_id: Optional[int] = None) -> Sequence[Project]:
        where, params = where_clause({"client_id=": client_id})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT project_id, client_id, name, notes FROM projects {where} ORDER BY name", params)
            return [_row_to_project(r) for r in fetchall(cur)]

    def get_by_id(self, project_id: int) -> Optional[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT project_id, client_id, name, notes FROM projects WHERE project_id=%s",
                (project_id,),
            )
            row = fetchone(cur)
            return _row_to_project(row) if row else None

    def create_project(self, *, client_id: int, name: str, notes: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO projects(client_id, name, notes) VALUES(%s,%s,%s)",
                (client_id, name, notes),
            )
            return int(cur.lastrowid)

    def update_project(self, project_id: int, *, client_id: int, name: str, notes: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE projects SET client_id=%s, name=%s, notes=%s WHERE project_id=%s",
                (client_id, name, notes, project_id),
            )
            return cur.rowcount >= 0

    def delete_by_id(self, project_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM projects WHERE project_id=%s", (project_id,))
            return cur.rowcount > 0
