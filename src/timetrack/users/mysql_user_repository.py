from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, name, surname, email, password_hash, daily_hours"


def _row_to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        name=row["name"],
        surname=row["surname"],
        email=row["email"],
        password_hash=row["password_hash"],
        daily_hours=float(row["daily_hours"]),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY surname, name")
            return [_row_to_user(r) for r in fetchall(cur)]

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def create_user(
        self,
        *,
        name: str,
        surname: str,
        email: str,
        password_hash: str,
        daily_hours: float,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(name, surname, email, password_hash, daily_hours)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, surname, email, password_hash, daily_hours),
            )
            return int(cur.lastrowid)

    def update_user(
        self,
        user_id: int,
        *,
        name: str,
        surname: str,
        email: str,
        password_hash: str,
        daily_hours: float,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE users
                SET name=%s, surname=%s, email=%s, password_hash=%s, daily_hours=%s
                WHERE user_id=%s
                """,
                (name, surname, email, password_hash, daily_hours, user_id),
            )
            # MySQL reports 0 affected rows when values are unchanged
            return cur.rowcount >= 0

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_id=%s", (user_id,))
            return cur.rowcount > 0
