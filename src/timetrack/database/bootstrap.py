from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.constants import DEFAULT_PASSWORD
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

SQL_DIR = Path(__file__).resolve().parent
SCHEMA_PATH = SQL_DIR / "schema.sql"
SEED_PATH = SQL_DIR / "seed.sql"

# Seed rows are inserted with this placeholder and rehashed by ensure_demo_passwords().
PLACEHOLDER_HASH = "CHANGE_ME"


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_script(conn_factory: DatabaseConnection, path: Path) -> int:
    sql = _strip_comments(_strip_create_db_and_use(Path(path).read_text(encoding="utf-8")))
    conn = conn_factory.connect()
    count = 0
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    database = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    ensure_database_exists(conn_factory)
    count = _run_script(conn_factory, Path(schema_path))
    logger.info("Applied %s statements from %s to %s", count, schema_path, conn_factory.config.describe())


def apply_seed_sql(conn_factory: DatabaseConnection, *, seed_path: str | Path = SEED_PATH) -> None:
    count = _run_script(conn_factory, Path(seed_path))
    logger.info("Applied %s seed statements to %s", count, conn_factory.config.describe())


def ensure_demo_passwords(conn_factory: DatabaseConnection, *, password: str = DEFAULT_PASSWORD) -> int:
    """Replace placeholder password hashes left by seed.sql with real werkzeug hashes."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SELECT user_id FROM users WHERE password_hash=%s", (PLACEHOLDER_HASH,))
        user_ids = [int(row[0]) for row in cur.fetchall()]
        for user_id in user_ids:
            cur.execute(
                "UPDATE users SET password_hash=%s WHERE user_id=%s",
                (generate_password_hash(password), user_id),
            )
        conn.commit()
    finally:
        conn.close()
    if user_ids:
        logger.info("Set demo password for %s seeded users", len(user_ids))
    return len(user_ids)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
