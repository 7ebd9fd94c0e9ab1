from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Expense:
    """Domain entity: one logged expense. Not linked to any employee."""

    expense_id: str
    expense_date: date
    name: str
    cost: float
    quantity: Optional[float] = None

    def as_dict(self) -> dict:
        return {
            "expense_id": self.expense_id,
            "date": self.expense_date.strftime("%Y-%m-%d"),
            "name": self.name,
            "quantity": self.quantity,
            "cost": self.cost,
        }


@dataclass(frozen=True)
class ExpenseDraft:
    expense_date: date
    name: str
    cost: float
    quantity: Optional[float] = None
