from __future__ import annotations

from datetime import date
from pathlib import Path

from timetrack.database.bootstrap import SCHEMA_PATH, SEED_PATH, iter_sql_statements
from timetrack.database.mysql_base import dump_id_list, load_id_list, where_clause


def test_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c;d\");\n\n"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
    ]


def test_schema_file_declares_all_tables():
    sql = SCHEMA_PATH.read_text(encoding="utf-8")
    statements = [s for s in iter_sql_statements(sql) if s.upper().startswith("CREATE TABLE")]

    assert len(statements) == 6


def test_where_clause_skips_missing_filters():
    clause, params = where_clause({"user_id=": 3, "project_id=": None, "entry_date>=": date(2026, 2, 1)})

    assert clause == "WHERE user_id=%s AND entry_date>=%s"
    assert params == (3, date(2026, 2, 1))
    assert where_clause({"user_id=": None}) == ("", ())


def test_id_list_column():
    assert load_id_list(b"[1, 2]") == (1, 2)
    assert load_id_list(None) == ()
    assert dump_id_list((4, "5")) == "[4, 5]"


def test_sql_files_ship_inside_the_package():
    import timetrack.database

    package_dir = Path(timetrack.database.__file__).resolve().parent

    assert SCHEMA_PATH.parent == package_dir
    assert SEED_PATH.is_file()
