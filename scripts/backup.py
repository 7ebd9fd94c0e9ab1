"""Dump the ERP tables to backups/<database>_<timestamp>.sql.

Requires the `mysqldump` client on PATH.
"""

from __future__ import annotations

import importlib
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path

from erp_suite.config import get_settings_module
from erp_suite.database.connection import DBConfig

ERP_TABLES = (
    "employees",
    "employee_attendance",
    "employee_overtime",
    "expenses",
    "tasks",
    "identities",
    "admins",
)


def build_dump_command(target: DBConfig) -> list[str]:
    return [
        "mysqldump",
        "--single-transaction",
        "--skip-lock-tables",
        f"--host={target.host}",
        f"--port={target.port}",
        f"--user={target.user}",
        f"--default-character-set={target.charset}",
        target.database,
        *ERP_TABLES,
    ]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    target = DBConfig.from_dict(settings.DB_CONFIG)

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"{target.database}_{datetime.now():%Y%m%d_%H%M%S}.sql"

    # mysqldump reads MYSQL_PWD, which keeps the password out of the process list.
    env = {**os.environ, "MYSQL_PWD": target.password}

    try:
        with out_file.open("wb") as f:
            subprocess.run(build_dump_command(target), stdout=f, stderr=subprocess.PIPE, env=env, check=True)
    except FileNotFoundError:
        raise SystemExit("`mysqldump` not found. Install the MySQL client tools first.")
    except subprocess.CalledProcessError as e:
        out_file.unlink(missing_ok=True)
        sys.stderr.write(e.stderr.decode("utf-8", errors="replace"))
        raise SystemExit(f"Backup failed (exit code {e.returncode})")

    print(f"OK: Backup of {len(ERP_TABLES)} tables created: {out_file}")


if __name__ == "__main__":
    main()
