from __future__ import annotations

import importlib
from pathlib import Path

from erp_suite.config import get_settings_module
from erp_suite.database.bootstrap import apply_schema, list_tables

REQUIRED_TABLES = {
    "employees",
    "employee_attendance",
    "employee_overtime",
    "expenses",
    "tasks",
    "identities",
    "admins",
}


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=Path(__file__).resolve().parents[1] / "database" / "schema.sql")

    missing = REQUIRED_TABLES - set(list_tables(db_config))
    if missing:
        raise SystemExit(f"Schema applied but tables are missing: {', '.join(sorted(missing))}")
    print(f"OK: ERP schema ready in {db_config.get('database')} ({len(REQUIRED_TABLES)} tables)")


if __name__ == "__main__":
    main()
