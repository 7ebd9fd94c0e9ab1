from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceMark
from .model import Employee, EmployeeDraft


class EmployeeRepository(Protocol):
    """Repository interface for employees and their attendance/overtime maps.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, draft: EmployeeDraft) -> str:
        raise NotImplementedError

    def update_profile(self, employee_id: str, draft: EmployeeDraft) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError

    def set_attendance(self, employee_id: str, day: date, status: AttendanceMark) -> None:
        """Upsert one day's mark; repeating the call is a no-op."""

        raise NotImplementedError

    def set_attendance_bulk(self, employee_ids: Sequence[str], day: date, status: AttendanceMark) -> None:
        """Upsert the same mark for many employees in one transaction."""

        raise NotImplementedError

    def set_overtime(self, employee_id: str, month_key: str, hours: float) -> None:
        raise NotImplementedError
