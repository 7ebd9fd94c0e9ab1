from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: str) -> Optional[date]:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        return None


def require_iso_date(value: str, field_name: str) -> date:
    parsed = try_parse_iso_date(value)
    if parsed is None:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")
    return parsed


def require_month(month: int) -> int:
    if not isinstance(month, int) or isinstance(month, bool) or not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month!r}")
    return month


def month_key(year: int, month: int) -> str:
    """Canonical overtime key: zero-padded YYYY-MM."""
    return f"{int(year):04d}-{int(month):02d}"


def parse_month_key(value: str) -> tuple[int, int]:
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except (TypeError, ValueError):
        raise ValidationError("Month key must be in YYYY-MM format")
    return parsed.year, parsed.month


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, require_month(month))[1]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months, 1-indexed in and out."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_name(month: int) -> str:
    return calendar.month_name[require_month(month)]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
