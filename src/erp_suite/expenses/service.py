from __future__ import annotations

import csv
import io
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import days_in_month, now_local, parse_iso_date, require_iso_date
from ..common.validators import require_min_length, require_positive
from ..core.constants import EARLIEST_EXPENSE_DATE, MIN_NAME_LENGTH
from ..core.exceptions import NoDataError, NotFoundError, ValidationError
from .model import Expense, ExpenseDraft
from .repository import ExpenseRepository

EXPENSE_HEADERS = ["Date", "Expense Name", "Quantity", "Cost"]


def build_expense_draft(data: Mapping[str, Any], *, today: Optional[date] = None) -> ExpenseDraft:
    today = today or now_local().date()
    expense_date = require_iso_date(data.get("date"), "Date")
    if expense_date > today or expense_date < parse_iso_date(EARLIEST_EXPENSE_DATE):
        raise ValidationError("Date must be between 1900-01-01 and today")

    quantity = data.get("quantity")
    if quantity in (None, ""):
        quantity = None
    else:
        quantity = require_positive(quantity, "Quantity")

    return ExpenseDraft(
        expense_date=expense_date,
        name=require_min_length(data.get("name"), "Expense name", MIN_NAME_LENGTH),
        cost=require_positive(data.get("cost"), "Cost"),
        quantity=quantity,
    )


def expenses_csv(expenses: Sequence[Expense]) -> str:
    if not expenses:
        raise NoDataError("No expenses to export")

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(EXPENSE_HEADERS)
    for x in expenses:
        quantity = "N/A" if x.quantity is None else f"{x.quantity:g}"
        writer.writerow([x.expense_date.strftime("%Y-%m-%d"), x.name, quantity, f"{x.cost:.2f}"])
    return out.getvalue()


class ExpenseService:
    """Use case: daily expense log."""

    def __init__(self, expenses: ExpenseRepository):
        self._expenses = expenses

    def list_for_day(self, day: str) -> Sequence[Expense]:
        d = require_iso_date(day, "Date")
        return self._expenses.list_between(d, d)

    def list_for_month(self, year: int, month: int) -> Sequence[Expense]:
        last_day = days_in_month(year, month)
        start = date(year, month, 1)
        end = date(year, month, last_day)
        return self._expenses.list_between(start, end)

    def list_all(self) -> Sequence[Expense]:
        return self._expenses.list_all()

    def add_expense(self, data: Mapping[str, Any], *, today: Optional[date] = None) -> str:
        return self._expenses.create(build_expense_draft(data, today=today))

    def update_expense(self, expense_id: str, data: Mapping[str, Any], *, today: Optional[date] = None) -> None:
        draft = build_expense_draft(data, today=today)
        if not self._expenses.update(expense_id, draft):
            raise NotFoundError("Expense not found")

    def delete_expense(self, expense_id: str) -> None:
        if not self._expenses.delete_by_id(expense_id):
            raise NotFoundError("Expense not found")
