from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.daycare_tracker.daycare_tracker.database.bootstrap import ensure_demo_user
from src.daycare_tracker.daycare_tracker.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    username = os.getenv("DEMO_USERNAME", "demo")
    uid = ensure_demo_user(conn, username=username, password=os.getenv("DEMO_PASSWORD", "demo123"))

    print(
        f"OK: Demo account '{username}' (uid={uid}) -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
