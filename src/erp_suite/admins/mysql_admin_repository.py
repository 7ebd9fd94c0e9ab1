from __future__ import annotations

import uuid
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Admin, Identity
from .repository import AdminRepository, IdentityProvider


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT admin_id, email, created_at FROM admins ORDER BY created_at DESC")
            return [Admin(admin_id=r["admin_id"], email=r["email"], created_at=r.get("created_at")) for r in fetchall(cur)]

    def get_by_email(self, email: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT admin_id, email, created_at FROM admins WHERE email=%s", (email,))
            row = fetchone(cur)
            if not row:
                return None
            return Admin(admin_id=row["admin_id"], email=row["email"], created_at=row.get("created_at"))

    def create(self, email: str) -> str:
        admin_id = uuid.uuid4().hex
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO admins(admin_id, email) VALUES(%s,%s)", (admin_id, email))
        return admin_id

    def delete_by_id(self, admin_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM admins WHERE admin_id=%s", (admin_id,))
            return cur.rowcount > 0


class MySQLIdentityProvider(IdentityProvider):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Identity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT uid, email, password_hash FROM identities WHERE email=%s", (email,))
            row = fetchone(cur)
            if not row:
                return None
            return Identity(uid=row["uid"], email=row["email"], password_hash=row["password_hash"])

    def create_user(self, *, email: str, password: str) -> str:
        uid = uuid.uuid4().hex
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO identities(uid, email, password_hash) VALUES(%s,%s,%s)",
                (uid, email, generate_password_hash(password)),
            )
        return uid

    def verify_password(self, *, email: str, password: str) -> bool:
        identity = self.get_by_email(email)
        if not identity:
            return False
        try:
            return check_password_hash(identity.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            return False
