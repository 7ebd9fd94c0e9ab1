from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import month_key, parse_month_key, require_iso_date
from ..common.validators import (
    optional_text,
    require_choice,
    require_min_length,
    require_non_negative,
    require_positive,
)
from ..core.constants import MIN_NAME_LENGTH
from ..core.enums import AttendanceMark
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def build_employee_draft(data: Mapping[str, Any]) -> EmployeeDraft:
    """Validate raw employee fields (form, JSON or AI output) into a draft."""

    if not isinstance(data, Mapping):
        raise ValidationError("Employee data must be an object")
    return EmployeeDraft(
        name=require_min_length(data.get("name"), "Name", MIN_NAME_LENGTH),
        designation=require_min_length(data.get("designation"), "Designation", MIN_NAME_LENGTH),
        salary=require_positive(data.get("salary"), "Salary"),
        country=require_min_length(data.get("country"), "Country", MIN_NAME_LENGTH),
        city=optional_text(data.get("city")),
        mobile=optional_text(data.get("mobile")),
    )


class EmployeeService:
    """Use case: manage employees, daily attendance and monthly overtime."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create_employee(self, data: Mapping[str, Any]) -> str:
        draft = build_employee_draft(data)
        employee_id = self._employees.create(draft)
        logger.info("Employee created: %s (%s)", employee_id, draft.name)
        return employee_id

    def import_drafts(self, drafts: Iterable[Mapping[str, Any]]) -> list[str]:
        """Create several employees; every draft is validated before any write."""

        validated = [build_employee_draft(d) for d in drafts]
        if not validated:
            raise ValidationError("No employees to import")
        return [self._employees.create(d) for d in validated]

    def update_employee(self, employee_id: str, data: Mapping[str, Any]) -> None:
        draft = build_employee_draft(data)
        if not self._employees.update_profile(employee_id, draft):
            raise NotFoundError("Employee not found")

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Employee deleted: %s", employee_id)

    def mark_attendance(self, employee_id: str, *, day: str, status: Any) -> None:
        work_date = require_iso_date(day, "Date")
        mark = require_choice(status, AttendanceMark, "Attendance status")
        self.get_employee(employee_id)
        self._employees.set_attendance(employee_id, work_date, mark)

    def mark_attendance_bulk(
        self,
        *,
        day: str,
        status: Any,
        employee_ids: Optional[Sequence[str]] = None,
    ) -> int:
        """Apply one mark to many employees (all of them when no ids are given)."""

        work_date = require_iso_date(day, "Date")
        mark = require_choice(status, AttendanceMark, "Attendance status")

        known = {e.employee_id for e in self._employees.list_all()}
        if employee_ids is None:
            targets = sorted(known)
        else:
            if not all(isinstance(i, str) for i in employee_ids):
                raise ValidationError("employee_ids must be a list of strings")
            targets = list(dict.fromkeys(employee_ids))
            missing = [i for i in targets if i not in known]
            if missing:
                raise NotFoundError(f"Unknown employees: {', '.join(map(str, missing))}")

        self._employees.set_attendance_bulk(targets, work_date, mark)
        return len(targets)

    def set_overtime_hours(self, employee_id: str, *, key: str, hours: Any) -> None:
        year, month = parse_month_key(key)
        value = require_non_negative(hours, "Overtime hours")
        self.get_employee(employee_id)
        self._employees.set_overtime(employee_id, month_key(year, month), value)
