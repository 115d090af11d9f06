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

from office_service.database.bootstrap import seed_roles
from office_service.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    database_url = getattr(settings, "DATABASE_URL", None)

    conn = DatabaseConnection(database_url or DBConfig.from_dict(dict(settings.DB_CONFIG)).url())
    try:
        created = seed_roles(conn)
    finally:
        conn.dispose()

    print(f"OK: Seeded database -> {conn.engine.url.render_as_string(hide_password=True)} (roles created={created})")


if __name__ == "__main__":
    main()
