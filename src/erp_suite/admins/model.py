from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Admin:
    """Domain entity: an authorized operator account."""

    admin_id: str
    email: str
    created_at: Optional[datetime] = None

    def as_dict(self) -> dict:
        return {
            "admin_id": self.admin_id,
            "email": self.email,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class Identity:
    """Login record kept by the identity provider (separate from Admin)."""

    uid: str
    email: str
    password_hash: str
