from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, where_clause
from .model import TimeEntry
from .repository import TimeEntryRepository

_COLUMNS = "entry_id, user_id, project_id, task_id, entry_date, hours, note"


def _row_to_entry(row: dict) -> TimeEntry:
    task_id = row.get("task_id")
    return TimeEntry(
        entry_id=int(row["entry_id"]),
        user_id=int(row["user_id"]),
        project_id=int(row["project_id"]),
        task_id=int(task_id) if task_id is not None else None,
        entry_date=row["entry_date"],
        hours=float(row["hours"]),
        note=row.get("note"),
    )


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_entries(
        self,
        *,
        user_id: Optional[int] = None,
        project_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[TimeEntry]:
        where, params = where_clause(
            {
                "user_id=": user_id,
                "project_id=": project_id,
                "entry_date>=": start,
                "entry_date<=": end,
            }
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM time_entries {where} ORDER BY entry_date DESC, entry_id DESC", params)
            return [_row_to_entry(r) for r in fetchall(cur)]

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM time_entries WHERE entry_id=%s", (entry_id,))
            row = fetchone(cur)
            return _row_to_entry(row) if row else None

    def create_entry(
        self,
        *,
        user_id: int,
        project_id: int,
        task_id: Optional[int],
        entry_date: date,
        hours: float,
        note: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(user_id, project_id, task_id, entry_date, hours, note)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (user_id, project_id, task_id, entry_date, hours, note),
            )
            return int(cur.lastrowid)

    def update_entry(
        self,
        entry_id: int,
        *,
        user_id: int,
        project_id: int,
        task_id: Optional[int],
        entry_date: date,
        hours: float,
        note: Optional[str],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_entries
                SET user_id=%s, project_id=%s, task_id=%s, entry_date=%s, hours=%s, note=%s
                WHERE entry_id=%s
                """,
                (user_id, project_id, task_id, entry_date, hours, note, entry_id),
            )
            return cur.rowcount >= 0

    def delete_by_id(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_entries WHERE entry_id=%s", (entry_id,))
            return cur.rowcount > 0

    def _delete_where(self, column: str, value: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM time_entries WHERE {column}=%s", (value,))
            return int(cur.rowcount)

    def delete_for_user(self, user_id: int) -> int:
        return self._delete_where("user_id", user_id)

    def delete_for_project(self, project_id: int) -> int:
        return self._delete_where("project_id", project_id)

    def delete_for_task(self, task_id: int) -> int:
        return self._delete_where("task_id", task_id)
