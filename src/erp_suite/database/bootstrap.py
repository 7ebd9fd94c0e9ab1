from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)

DEMO_ADMIN_EMAIL = "admin@example.com"
DEMO_ADMIN_PASSWORD = "admin12345"


def _connect(target: DBConfig, *, with_database: bool = True):
    return mysql.connector.connect(**target.connect_kwargs(with_database=with_database))


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Splits on ';' outside of quoted strings; comment lines are dropped.
    buf: list[str] = []
    quote = None

    for line in sql.splitlines():
        if quote is None and line.strip().startswith("--"):
            continue
        for ch in line + "\n":
            if quote is None and ch in ("'", '"'):
                quote = ch
            elif ch == quote:
                quote = None
            elif ch == ";" and quote is None:
                stmt = "".join(buf).strip()
                buf.clear()
                if stmt:
                    yield stmt
                continue
            buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_sql_file(db_config: dict, *, sql_path: str | Path) -> None:
    target = DBConfig.from_dict(db_config)
    sql = _strip_create_db_and_use(Path(sql_path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    apply_sql_file(db_config, sql_path=schema_path)


def ensure_demo_admin(
    db_config: dict,
    *,
    email: str = DEMO_ADMIN_EMAIL,
    password: str = DEMO_ADMIN_PASSWORD,
) -> None:
    """Create (or reset) the demo identity together with its admin record."""

    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)
        password_hash = generate_password_hash(password)

        cur.execute("SELECT uid FROM identities WHERE email=%s", (email,))
        if cur.fetchone():
            cur.execute("UPDATE identities SET password_hash=%s WHERE email=%s", (password_hash, email))
        else:
            cur.execute(
                "INSERT INTO identities (uid, email, password_hash) VALUES (%s, %s, %s)",
                (uuid.uuid4().hex, email, password_hash),
            )

        cur.execute("SELECT admin_id FROM admins WHERE email=%s", (email,))
        if not cur.fetchone():
            cur.execute("INSERT INTO admins (admin_id, email) VALUES (%s, %s)", (uuid.uuid4().hex, email))

        conn.commit()
        logger.info("Demo admin ready: %s", email)
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
