from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..common.validators import require_email, require_min_length
from ..core.constants import MIN_ADMIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, StoreError, ValidationError
from .model import Admin
from .repository import AdminRepository, IdentityProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionAdmin:
    """What we store into Flask session after login."""

    admin_id: str
    email: str


class AuthService:
    """Use case: authenticate an admin (login)."""

    def __init__(self, admins: AdminRepository, identities: IdentityProvider):
        self._admins = admins
        self._identities = identities

    def authenticate(self, email: str, password: str) -> SessionAdmin:
        email = (email or "").strip().lower()
        if not email or not password:
            raise AuthenticationError("Invalid email or password")

        if not self._identities.verify_password(email=email, password=password):
            raise AuthenticationError("Invalid email or password")

        admin = self._admins.get_by_email(email)
        if not admin:
            # Identity exists but its admin record was removed.
            raise AuthorizationError("This account is not an admin")

        return SessionAdmin(admin_id=admin.admin_id, email=admin.email)


class AdminService:
    """Use case: manage admin accounts."""

    def __init__(self, admins: AdminRepository, identities: IdentityProvider):
        self._admins = admins
        self._identities = identities

    def list_admins(self) -> Sequence[Admin]:
        return self._admins.list_all()

    def create_admin(self, *, email: str, password: str) -> str:
        email = require_email(email)
        require_min_length(password, "Password", MIN_ADMIN_PASSWORD_LENGTH)

        if self._admins.get_by_email(email):
            raise ValidationError("An admin with this email already exists")

        if self._identities.get_by_email(email) is not None:
            raise ValidationError("A login account already exists for this email")

        self._identities.create_user(email=email, password=password)

        try:
            admin_id = self._admins.create(email)
        except StoreError:
            logger.error("Identity created for %s but admin record was not written", email)
            raise

        logger.info("Admin created: %s", email)
        return admin_id

    def delete_admin(self, admin_id: str) -> None:
        """Remove the admin record only; the identity account is left in place."""

        if not self._admins.delete_by_id(admin_id):
            raise NotFoundError("Admin not found")
        logger.info("Admin record deleted: %s (identity kept)", admin_id)
