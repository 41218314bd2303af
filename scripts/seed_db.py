from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from timetrack.config import get_settings_module
from timetrack.database.bootstrap import apply_seed_sql, ensure_demo_passwords
from timetrack.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(settings.DB_CONFIG))

    apply_seed_sql(conn)
    updated = ensure_demo_passwords(conn)
    print(f"OK: Seeded database -> {conn.config.describe()} (demo passwords set={updated})")


if __name__ == "__main__":
    main()
