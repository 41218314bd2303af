from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    dump_id_list,
    fetchall,
    fetchone,
    load_id_list,
    optional_float,
    where_clause,
)
from .model import Task
from .repository import TaskRepository

_COLUMNS = "task_id, project_id, name, start_date, end_date, planned_hours, assigned_user_ids, note"


def _row_to_task(row: dict) -> Task:
    return Task(
        task_id=int(row["task_id"]),
        project_id=int(row["project_id"]),
        name=row["name"],
        start_date=row.get("start_date"),
        end_date=row.get("end_date"),
        planned_hours=optional_float(row.get("planned_hours")),
        assigned_user_ids=load_id_list(row.get("assigned_user_ids")),
        note=row.get("note"),
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_tasks(self, *, project_id: Optional[int] = None) -> Sequence[Task]:
        where, params = where_clause({"project_id=": project_id})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM tasks {where} ORDER BY start_date IS NULL, start_date, task_id", params)
            return [_row_to_task(r) for r in fetchall(cur)]

    def get_by_id(self, task_id: int) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM tasks WHERE task_id=%s", (task_id,))
            row = fetchone(cur)
            return _row_to_task(row) if row else None

    def create_task(
        self,
        *,
        project_id: int,
        name: str,
        start_date: Optional[date],
        end_date: Optional[date],
        planned_hours: Optional[float],
        assigned_user_ids: Sequence[int],
        note: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tasks(project_id, name, start_date, end_date, planned_hours, assigned_user_ids, note)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (project_id, name, start_date, end_date, planned_hours, dump_id_list(assigned_user_ids), note),
            )
            return int(cur.lastrowid)

    def update_task(
        self,
        task_id: int,
        *,
        project_id: int,
        name: str,
        start_date: Optional[date],
        end_date: Optional[date],
        planned_hours: Optional[float],
        assigned_user_ids: Sequence[int],
        note: Optional[str],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE tasks
                SET project_id=%s, name=%s, start_date=%s, end_date=%s,
                    planned_hours=%s, assigned_user_ids=%s, note=%s
                WHERE task_id=%s
                """,
                (
                    project_id,
                    name,
                    start_date,
                    end_date,
                    planned_hours,
                    dump_id_list(assigned_user_ids),
                    note,
                    task_id,
                ),
            )
            return cur.rowcount >= 0

    def delete_by_id(self, task_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tasks WHERE task_id=%s", (task_id,))
            return cur.rowcount > 0

    def remove_assignee(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT task_id, assigned_user_ids FROM tasks WHERE JSON_CONTAINS(assigned_user_ids, %s)",
                (str(int(user_id)),),
            )
            rows = fetchall(cur)
            for row in rows:
                remaining = [uid for uid in load_id_list(row["assigned_user_ids"]) if uid != user_id]
                cur.execute(
                    "UPDATE tasks SET assigned_user_ids=%s WHERE task_id=%s",
                    (dump_id_list(remaining), row["task_id"]),
                )
            return len(rows)
