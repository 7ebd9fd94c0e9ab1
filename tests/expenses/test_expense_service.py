from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from erp_suite.core.exceptions import NoDataError, NotFoundError, ValidationError
from erp_suite.expenses.model import Expense
from erp_suite.expenses.service import ExpenseService, expenses_csv

TODAY = date(2024, 7, 15)


class FakeExpenseRepo:
    def __init__(self):
        self._next_id = 1
        self._rows: dict[str, Expense] = {}

    def _sorted(self, rows):
        return sorted(rows, key=lambda x: x.expense_date, reverse=True)

    def list_all(self):
        return self._sorted(self._rows.values())

    def list_between(self, start, end):
        return self._sorted(x for x in self._rows.values() if start <= x.expense_date <= end)

    def get_by_id(self, expense_id):
        return self._rows.get(expense_id)

    def create(self, draft):
        expense_id = f"X{self._next_id}"
        self._next_id += 1
        self._rows[expense_id] = Expense(expense_id=expense_id, **draft.__dict__)
        return expense_id

    def update(self, expense_id, draft):
        if expense_id not in self._rows:
            return False
        self._rows[expense_id] = replace(self._rows[expense_id], **draft.__dict__)
        return True

    def delete_by_id(self, expense_id):
        return self._rows.pop(expense_id, None) is not None


def _svc_with_data():
    svc = ExpenseService(FakeExpenseRepo())
    svc.add_expense({"date": "2024-07-01", "name": "Cement bags", "quantity": "50", "cost": "250"}, today=TODAY)
    svc.add_expense({"date": "2024-07-03", "name": "Diesel", "cost": 120.5}, today=TODAY)
    svc.add_expense({"date": "2024-06-30", "name": "Site lunch", "quantity": "", "cost": 80}, today=TODAY)
    return svc


def test_month_filter_is_newest_first():
    svc = _svc_with_data()

    names = [x.name for x in svc.list_for_month(2024, 7)]

    assert names == ["Diesel", "Cement bags"]


def test_day_filter():
    svc = _svc_with_data()

    assert [x.name for x in svc.list_for_day("2024-06-30")] == ["Site lunch"]


@pytest.mark.parametrize(
    "data",
    [
        {"date": "2024-07-01", "name": "X", "cost": 10},
        {"date": "2024-07-01", "name": "Fuel", "cost": 0},
        {"date": "2024-07-01", "name": "Fuel", "cost": 10, "quantity": -2},
        {"date": "2024-07-16", "name": "Fuel", "cost": 10},
        {"date": "1899-12-31", "name": "Fuel", "cost": 10},
        {"name": "Fuel", "cost": 10},
    ],
)
def test_rejects_invalid_expenses(data):
    with pytest.raises(ValidationError):
        ExpenseService(FakeExpenseRepo()).add_expense(data, today=TODAY)


def test_missing_quantity_is_stored_as_none():
    svc = _svc_with_data()

    lunch = svc.list_for_day("2024-06-30")[0]

    assert lunch.quantity is None


def test_update_and_delete():
    svc = _svc_with_data()
    diesel = svc.list_for_day("2024-07-03")[0]

    svc.update_expense(diesel.expense_id, {"date": "2024-07-03", "name": "Diesel", "cost": 99}, today=TODAY)
    assert svc.list_for_day("2024-07-03")[0].cost == 99

    svc.delete_expense(diesel.expense_id)
    assert svc.list_for_day("2024-07-03") == []
    with pytest.raises(NotFoundError):
        svc.delete_expense(diesel.expense_id)


def test_expenses_csv():
    svc = _svc_with_data()

    lines = expenses_csv(svc.list_all()).splitlines()

    assert lines[0] == "Date,Expense Name,Quantity,Cost"
    assert lines[1] == "2024-07-03,Diesel,N/A,120.50"
    assert lines[2] == "2024-07-01,Cement bags,50,250.00"
    with pytest.raises(NoDataError):
        expenses_csv([])
