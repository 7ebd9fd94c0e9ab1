from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Admin, Identity


class AdminRepository(Protocol):
    def list_all(self) -> Sequence[Admin]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Admin]:
        raise NotImplementedError

    def create(self, email: str) -> str:
        raise NotImplementedError

    def delete_by_id(self, admin_id: str) -> bool:
        raise NotImplementedError


class IdentityProvider(Protocol):
    """Account store used for login.

    Note: Admin records and identities are written separately and can drift apart.
    """

    def get_by_email(self, email: str) -> Optional[Identity]:
        raise NotImplementedError

    def create_user(self, *, email: str, password: str) -> str:
        raise NotImplementedError

    def verify_password(self, *, email: str, password: str) -> bool:
        raise NotImplementedError
