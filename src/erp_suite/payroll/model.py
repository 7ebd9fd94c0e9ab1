from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.datetime_utils import days_in_month, month_key, month_name, require_month
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class PayPeriod:
    """Reporting month. Months are 1-indexed (1 = January)."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if isinstance(self.year, bool) or not isinstance(self.year, int) or not 1 <= self.year <= 9999:
            raise ValidationError(f"Year is not valid: {self.year!r}")
        require_month(self.month)

    @property
    def key(self) -> str:
        return month_key(self.year, self.month)

    @property
    def days(self) -> int:
        return days_in_month(self.year, self.month)

    @property
    def label(self) -> str:
        return f"{month_name(self.month)} {self.year}"


@dataclass(frozen=True)
class SalaryBreakdown:
    total_present: int
    base_calculated_salary: float
    overtime_pay: float
    total_salary: float
    employee_overtime_hours: float


@dataclass(frozen=True)
class PayrollRow:
    employee_id: str
    name: str
    designation: str
    monthly_salary: float
    breakdown: SalaryBreakdown
    # Per-day marks for the period, index 0 = day 1; None when unmarked.
    daily_marks: tuple = ()

    def as_dict(self) -> dict:
        b = self.breakdown
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "designation": self.designation,
            "monthly_salary": round(self.monthly_salary, 2),
            "total_present": b.total_present,
            "overtime_hours": b.employee_overtime_hours,
            "base_calculated_salary": round(b.base_calculated_salary, 2),
            "overtime_pay": round(b.overtime_pay, 2),
            "total_salary": round(b.total_salary, 2),
        }


@dataclass(frozen=True)
class MonthlyPayrollReport:
    period: PayPeriod
    rows: list[PayrollRow] = field(default_factory=list)
    total_monthly_payroll: float = 0.0
    fetch_error: Optional[str] = None


@dataclass(frozen=True)
class TrendPoint:
    year: int
    month: int
    label: str
    salary: float
    expenses: float
    calculated: bool


@dataclass(frozen=True)
class DashboardSummary:
    period: PayPeriod
    employee_count: int
    current_month_payroll: float
    current_month_expenses: float
    trend: list[TrendPoint]
    errors: list[str] = field(default_factory=list)
