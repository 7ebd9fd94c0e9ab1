from __future__ import annotations

import importlib
from pathlib import Path

from erp_suite.config import get_settings_module
from erp_suite.database.bootstrap import DEMO_ADMIN_EMAIL, apply_sql_file, ensure_demo_admin


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    seed_path = Path(__file__).resolve().parents[1] / "database" / "seed.sql"
    apply_sql_file(db_config, sql_path=seed_path)
    ensure_demo_admin(db_config)
    print(f"OK: Seeded demo employees and admin ({DEMO_ADMIN_EMAIL}) -> {db_config.get('database')}")


if __name__ == "__main__":
    main()
