from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import try_parse_iso_date
from ..core.enums import AttendanceMark


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    `attendance` maps ISO days (YYYY-MM-DD) to a mark; a missing day is unmarked.
    `overtime_hours` maps month keys (YYYY-MM) to hours; a missing month is zero.
    """

    employee_id: str
    name: str
    designation: str
    salary: float
    country: str
    city: Optional[str] = None
    mobile: Optional[str] = None
    attendance: Mapping[str, AttendanceMark] = field(default_factory=dict)
    overtime_hours: Mapping[str, float] = field(default_factory=dict)

    def mark_for(self, day: date) -> Optional[AttendanceMark]:
        return self.attendance.get(day.strftime("%Y-%m-%d"))

    def present_days_in(self, year: int, month: int) -> int:
        count = 0
        for key, mark in self.attendance.items():
            day = try_parse_iso_date(key)
            if day is None or day.year != year or day.month != month:
                continue
            if mark == AttendanceMark.PRESENT:
                count += 1
        return count

    def overtime_for(self, key: str) -> float:
        hours = self.overtime_hours.get(key)
        if hours is None or hours < 0:
            return 0.0
        return float(hours)


@dataclass(frozen=True)
class EmployeeDraft:
    """Validated employee fields, before an id is assigned."""

    name: str
    designation: str
    salary: float
    country: str
    city: Optional[str] = None
    mobile: Optional[str] = None
