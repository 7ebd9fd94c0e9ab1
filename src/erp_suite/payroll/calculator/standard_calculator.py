from __future__ import annotations

from ...core.constants import NOMINAL_HOURS_PER_DAY, NOMINAL_WORKING_DAYS, OVERTIME_MULTIPLIER
from ...employees.model import Employee
from ..model import PayPeriod, SalaryBreakdown
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary pro-rated by days present, plus overtime at 1.5x.

    Base pay divides by the real calendar length of the month, while the
    overtime hourly rate always assumes a 22-day, 8-hour month. Every calendar
    day counts as a potential working day.
    """

    def calculate(self, employee: Employee, period: PayPeriod) -> SalaryBreakdown:
        salary = float(employee.salary)
        total_present = employee.present_days_in(period.year, period.month)
        base_salary = salary / period.days * total_present

        hourly_rate = salary / (NOMINAL_WORKING_DAYS * NOMINAL_HOURS_PER_DAY)
        overtime_rate = hourly_rate * OVERTIME_MULTIPLIER
        overtime_hours = employee.overtime_for(period.key)
        overtime_pay = overtime_rate * overtime_hours

        return SalaryBreakdown(
            total_present=total_present,
            base_calculated_salary=base_salary,
            overtime_pay=overtime_pay,
            total_salary=base_salary + overtime_pay,
            employee_overtime_hours=overtime_hours,
        )


def calculate_salary_info(employee: Employee, year: int, month: int) -> SalaryBreakdown:
    """Salary breakdown for one employee and a 1-indexed (year, month)."""
    return StandardPayrollCalculator().calculate(employee, PayPeriod(year, month))
