"""CSV renderings of payroll and attendance reports.

Amounts are written with exactly two decimals; the in-memory report keeps
full precision.
"""

from __future__ import annotations

import csv
import io
from decimal import Decimal
from typing import Sequence

from ..core.exceptions import NoDataError
from .model import MonthlyPayrollReport

PAYROLL_HEADERS = ["Employee", "Total Present", "Overtime Pay", "Monthly Salary", "Total Salary"]


def money(value: float) -> Decimal:
    # Decimal keeps trailing zeros and stays unquoted under QUOTE_NONNUMERIC.
    return Decimal(f"{value:.2f}")


def _render(header: Sequence[str], rows: Sequence[Sequence]) -> str:
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return out.getvalue()


def payroll_csv(report: MonthlyPayrollReport) -> str:
    if not report.rows:
        raise NoDataError("No payroll data to export")

    rows = [
        [
            r.name,
            r.breakdown.total_present,
            money(r.breakdown.overtime_pay),
            money(r.monthly_salary),
            money(r.breakdown.total_salary),
        ]
        for r in report.rows
    ]
    return _render(PAYROLL_HEADERS, rows)


def attendance_report_csv(report: MonthlyPayrollReport) -> str:
    """Monthly attendance sheet: one column per day, P/A/L or '-' when unmarked."""

    if not report.rows:
        raise NoDataError("No attendance data to export")

    header = ["Employee"]
    header += [f"Day {d}" for d in range(1, report.period.days + 1)]
    header += ["Total Present", "Calculated Salary"]

    rows = []
    for r in report.rows:
        marks = [m.short_code if m else "-" for m in r.daily_marks]
        rows.append([r.name, *marks, r.breakdown.total_present, money(r.breakdown.base_calculated_salary)])
    return _render(header, rows)
