from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, where_clause
from .model import Absence
from .repository import AbsenceRepository


class MySQLAbsenceRepository(AbsenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_absences(
        self,
        *,
        user_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Absence]:
        where, params = where_clause(
            {"user_id=": user_id, "absence_date>=": start, "absence_date<=": end}
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT user_id, absence_date FROM absences {where} ORDER BY absence_date, user_id", params)
            return [Absence(user_id=int(r["user_id"]), absence_date=r["absence_date"]) for r in fetchall(cur)]

    def exists(self, user_id: int, absence_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS present FROM absences WHERE user_id=%s AND absence_date=%s",
                (user_id, absence_date),
            )
            return fetchone(cur) is not None

    def create(self, user_id: int, absence_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT IGNORE INTO absences(user_id, absence_date) VALUES(%s,%s)",
                (user_id, absence_date),
            )
            return cur.rowcount > 0

    def delete(self, user_id: int, absence_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM absences WHERE user_id=%s AND absence_date=%s",
                (user_id, absence_date),
            )
            return cur.rowcount > 0

    def delete_for_user(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM absences WHERE user_id=%s", (user_id,))
            return int(cur.rowcount)
