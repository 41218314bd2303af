from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Client
from .repository import ClientRepository


def _row_to_client(row: dict) -> Client:
    return Client(client_id=int(row["client_id"]), name=row["name"], vat=row["vat"])


class MySQLClientRepository(ClientRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT client_id, name, vat FROM clients ORDER BY name")
            return [_row_to_client(r) for r in fetchall(cur)]

    def get_by_id(self, client_id: int) -> Optional[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT client_id, name, vat FROM clients WHERE client_id=%s", (client_id,))
            row = fetchone(cur)
            return _row_to_client(row) if row else None

    def create_client(self, *, name: str, vat: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO clients(name, vat) VALUES(%s,%s)", (name, vat))
            return int(cur.lastrowid)

    def update_client(self, client_id: int, *, name: str, vat: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE clients SET name=%s, vat=%s WHERE client_id=%s", (name, vat, client_id))
            return cur.rowcount >= 0

    def delete_by_id(self, client_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM clients WHERE client_id=%s", (client_id,))
            return cur.rowcount > 0
