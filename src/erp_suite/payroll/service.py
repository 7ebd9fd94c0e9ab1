from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..core.constants import DASHBOARD_TREND_MONTHS
from ..core.exceptions import StoreError
from ..common.datetime_utils import shift_month
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..expenses.repository import ExpenseRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import DashboardSummary, MonthlyPayrollReport, PayPeriod, PayrollRow, TrendPoint

logger = logging.getLogger(__name__)


def aggregate_monthly_payroll(
    employees: Iterable[Employee],
    year: int,
    month: int,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> float:
    """Fleet payroll: sum of every employee's total salary for the month."""

    calculator = calculator or StandardPayrollCalculator()
    period = PayPeriod(year, month)
    return sum((calculator.calculate(e, period).total_salary for e in employees), 0.0)


class PayrollReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        expenses: Optional[ExpenseRepository] = None,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._expenses = expenses
        self._calculator = calculator or StandardPayrollCalculator()

    def _fetch_roster(self) -> tuple[Sequence[Employee], Optional[str]]:
        try:
            return self._employees.list_all(), None
        except StoreError as e:
            logger.warning("Employee roster fetch failed: %s", e)
            return [], "Could not load employees"

    def build_rows(self, employees: Iterable[Employee], period: PayPeriod) -> list[PayrollRow]:
        first_day = date(period.year, period.month, 1)
        rows: list[PayrollRow] = []
        for e in employees:
            marks = tuple(e.mark_for(first_day + timedelta(days=i)) for i in range(period.days))
            rows.append(
                PayrollRow(
                    employee_id=e.employee_id,
                    name=e.name,
                    designation=e.designation,
                    monthly_salary=float(e.salary),
                    breakdown=self._calculator.calculate(e, period),
                    daily_marks=marks,
                )
            )
        return rows

    def build_monthly_report(self, period: PayPeriod) -> MonthlyPayrollReport:
        employees, error = self._fetch_roster()
        rows = self.build_rows(employees, period)
        total = sum((r.breakdown.total_salary for r in rows), 0.0)
        return MonthlyPayrollReport(period=period, rows=rows, total_monthly_payroll=total, fetch_error=error)

    def _expense_total(self, period: PayPeriod) -> float:
        if self._expenses is None:
            return 0.0
        start = date(period.year, period.month, 1)
        end = date(period.year, period.month, period.days)
        return sum((x.cost for x in self._expenses.list_between(start, end)), 0.0)

    def build_dashboard(self, today: date) -> DashboardSummary:
        """Dashboard figures for the month containing `today`.

        The trend covers the last six months. Earlier months show the full
        potential salary (sum of fixed salaries); the current month shows the
        attendance-adjusted payroll.
        """

        current = PayPeriod(today.year, today.month)
        employees, roster_error = self._fetch_roster()
        errors = [roster_error] if roster_error else []

        current_payroll = aggregate_monthly_payroll(
            employees, current.year, current.month, calculator=self._calculator
        )
        potential_salary = sum((float(e.salary) for e in employees), 0.0)

        trend: list[TrendPoint] = []
        expenses_failed = False
        for offset in range(DASHBOARD_TREND_MONTHS - 1, -1, -1):
            period = PayPeriod(*shift_month(current.year, current.month, -offset))
            expenses = 0.0
            if not expenses_failed:
                try:
                    expenses = self._expense_total(period)
                except StoreError as e:
                    logger.warning("Expense fetch failed: %s", e)
                    errors.append("Could not load expenses")
                    expenses_failed = True
            is_current = offset == 0
            trend.append(
                TrendPoint(
                    year=period.year,
                    month=period.month,
                    label=period.label,
                    salary=current_payroll if is_current else potential_salary,
                    expenses=expenses,
                    calculated=is_current,
                )
            )

        return DashboardSummary(
            period=current,
            employee_count=len(employees),
            current_month_payroll=current_payroll,
            current_month_expenses=trend[-1].expenses,
            trend=trend,
            errors=errors,
        )
