from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash, generate_password_hash

from erp_suite.admins.model import Admin, Identity
from erp_suite.admins.service import AdminService, AuthService
from erp_suite.core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, StoreError, ValidationError


class FakeAdminRepo:
    def __init__(self, *, fail_create=False):
        self._rows: dict[str, Admin] = {}
        self._fail_create = fail_create

    def list_all(self):
        return list(self._rows.values())

    def get_by_email(self, email):
        return next((a for a in self._rows.values() if a.email == email), None)

    def create(self, email):
        if self._fail_create:
            raise StoreError("permission denied")
        admin_id = f"A{len(self._rows) + 1}"
        self._rows[admin_id] = Admin(admin_id=admin_id, email=email)
        return admin_id

    def delete_by_id(self, admin_id):
        return self._rows.pop(admin_id, None) is not None


class FakeIdentityProvider:
    def __init__(self):
        self._rows: dict[str, Identity] = {}

    def get_by_email(self, email):
        return self._rows.get(email)

    def create_user(self, *, email, password):
        uid = f"U{len(self._rows) + 1}"
        self._rows[email] = Identity(uid=uid, email=email, password_hash=generate_password_hash(password))
        return uid

    def verify_password(self, *, email, password):
        identity = self._rows.get(email)
        return bool(identity) and check_password_hash(identity.password_hash, password)


def test_create_admin_then_login():
    admins, identities = FakeAdminRepo(), FakeIdentityProvider()
    AdminService(admins, identities).create_admin(email="Boss@Example.com ", password="s3cret-pass")

    session_admin = AuthService(admins, identities).authenticate("boss@example.com", "s3cret-pass")

    assert session_admin.email == "boss@example.com"
    with pytest.raises(AuthenticationError):
        AuthService(admins, identities).authenticate("boss@example.com", "wrong-pass")


@pytest.mark.parametrize(
    "email,password",
    [("not-an-email", "long-enough"), ("a@b.co", "short")],
)
def test_create_admin_validation(email, password):
    admins = FakeAdminRepo()

    with pytest.raises(ValidationError):
        AdminService(admins, FakeIdentityProvider()).create_admin(email=email, password=password)

    assert admins.list_all() == []


def test_duplicate_admin_is_rejected():
    svc = AdminService(FakeAdminRepo(), FakeIdentityProvider())
    svc.create_admin(email="a@b.co", password="long-enough")

    with pytest.raises(ValidationError):
        svc.create_admin(email="a@b.co", password="long-enough")


def test_failed_admin_record_leaves_identity_behind():
    admins, identities = FakeAdminRepo(fail_create=True), FakeIdentityProvider()

    with pytest.raises(StoreError):
        AdminService(admins, identities).create_admin(email="a@b.co", password="long-enough")

    assert identities.get_by_email("a@b.co") is not None
    assert admins.get_by_email("a@b.co") is None


def test_deleted_admin_keeps_identity_but_cannot_log_in():
    admins, identities = FakeAdminRepo(), FakeIdentityProvider()
    svc = AdminService(admins, identities)
    admin_id = svc.create_admin(email="a@b.co", password="long-enough")

    svc.delete_admin(admin_id)

    assert identities.get_by_email("a@b.co") is not None
    with pytest.raises(AuthorizationError):
        AuthService(admins, identities).authenticate("a@b.co", "long-enough")
    with pytest.raises(NotFoundError):
        svc.delete_admin(admin_id)
