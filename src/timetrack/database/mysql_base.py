from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def optional_float(value: Any) -> Optional[float]:
    """MySQL DECIMAL/FLOAT columns come back as Decimal or float; NULL stays None."""
    if value is None:
        return None
    return float(value)


def load_id_list(value: Any) -> tuple[int, ...]:
    """Decode a JSON id array column.

    mysql-connector returns JSON columns as str (or bytes with the C extension).
    """
    if value is None or value == "":
        return ()
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        value = json.loads(value)
    return tuple(int(v) for v in value)


def dump_id_list(values) -> str:
    return json.dumps([int(v) for v in values or ()])


def where_clause(filters: Dict[str, Any]) -> tuple[str, tuple]:
    """Build "WHERE a=%s AND b>=%s" from {"a=": 1, "b>=": x}, skipping None values."""
    parts: list[str] = []
    params: list[Any] = []
    for expr, value in filters.items():
        if value is None:
            continue
        parts.append(f"{expr}%s")
        params.append(value)
    if not parts:
        return "", ()
    return "WHERE " + " AND ".join(parts), tuple(params)
