from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Expense, ExpenseDraft


class ExpenseRepository(Protocol):
    def list_all(self) -> Sequence[Expense]:
        raise NotImplementedError

    def list_between(self, start: date, end: date) -> Sequence[Expense]:
        """Expenses dated within [start, end], newest first."""

        raise NotImplementedError

    def get_by_id(self, expense_id: str) -> Optional[Expense]:
        raise NotImplementedError

    def create(self, draft: ExpenseDraft) -> str:
        raise NotImplementedError

    def update(self, expense_id: str, draft: ExpenseDraft) -> bool:
        raise NotImplementedError

    def delete_by_id(self, expense_id: str) -> bool:
        raise NotImplementedError
