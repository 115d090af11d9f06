from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from office_service.database.bootstrap import create_schema, ensure_database_exists, list_tables
from office_service.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    database_url = getattr(settings, "DATABASE_URL", None)

    if not database_url:
        ensure_database_exists(db_config)

    conn = DatabaseConnection(database_url or DBConfig.from_dict(db_config).url())
    try:
        create_schema(conn)
        tables = list_tables(conn)
    finally:
        conn.dispose()

    print(f"OK: Schema ready -> {conn.engine.url.render_as_string(hide_password=True)} (tables={len(tables)})")


if __name__ == "__main__":
    main()
