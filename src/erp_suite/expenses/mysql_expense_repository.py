from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, optional_float
from .model import Expense, ExpenseDraft
from .repository import ExpenseRepository


class MySQLExpenseRepository(ExpenseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_expense(row: dict) -> Expense:
        return Expense(
            expense_id=row["expense_id"],
            expense_date=normalize_mysql_date(row["expense_date"]),
            name=row["name"],
            cost=float(row["cost"]),
            quantity=optional_float(row.get("quantity")),
        )

    def list_all(self) -> Sequence[Expense]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT expense_id, expense_date, name, quantity, cost FROM expenses ORDER BY expense_date DESC"
            )
            return [self._to_expense(r) for r in fetchall(cur)]

    def list_between(self, start: date, end: date) -> Sequence[Expense]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT expense_id, expense_date, name, quantity, cost
                FROM expenses
                WHERE expense_date BETWEEN %s AND %s
                ORDER BY expense_date DESC
                """,
                (start, end),
            )
            return [self._to_expense(r) for r in fetchall(cur)]

    def get_by_id(self, expense_id: str) -> Optional[Expense]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT expense_id, expense_date, name, quantity, cost FROM expenses WHERE expense_id=%s",
                (expense_id,),
            )
            row = fetchone(cur)
            return self._to_expense(row) if row else None

    def create(self, draft: ExpenseDraft) -> str:
        expense_id = uuid.uuid4().hex
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO expenses(expense_id, expense_date, name, quantity, cost) VALUES(%s,%s,%s,%s,%s)",
                (expense_id, draft.expense_date, draft.name, draft.quantity, draft.cost),
            )
        return expense_id

    def update(self, expense_id: str, draft: ExpenseDraft) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE expenses SET expense_date=%s, name=%s, quantity=%s, cost=%s WHERE expense_id=%s",
                (draft.expense_date, draft.name, draft.quantity, draft.cost, expense_id),
            )
            cur.execute("SELECT 1 AS found FROM expenses WHERE expense_id=%s", (expense_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, expense_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM expenses WHERE expense_id=%s", (expense_id,))
            return cur.rowcount > 0
