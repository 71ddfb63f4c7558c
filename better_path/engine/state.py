# engine/state.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List

from ..data_model import (
    COLUMN_TO_ATTR,
    Expense,
    ExpenseTableModel,
    records_to_expenses,
    to_cost,
    to_text,
)

logger = logging.getLogger(__name__)


class ExpenseSession:
    """Owns the expense list for one interactive page."""

    def __init__(self, expenses: Iterable[Expense] | None = None) -> None:
        self._expenses: List[Expense] = []
        for expense in expenses or []:
            if self.get(expense.id) is not None:
                raise ValueError(f"Duplicate expense id: {expense.id}")
            self._expenses.append(expense)

    @classmethod
    def from_records(cls, rows: Iterable[Dict[str, Any]] | None) -> "ExpenseSession":
        return cls(records_to_expenses(rows))

    @classmethod
    def with_defaults(cls) -> "ExpenseSession":
        return cls.from_records(ExpenseTableModel().default_rows)

    @property
    def expenses(self) -> List[Expense]:
        return list(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(list(self._expenses))

    def to_records(self) -> List[Dict[str, Any]]:
        return [expense.to_record() for expense in self._expenses]

    def get(self, expense_id: str) -> Expense | None:
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        return None

    def add(self) -> Expense:
        expense = Expense.blank()
        while self.get(expense.id) is not None:
            expense = Expense.blank()
        self._expenses.append(expense)
        logger.debug("Added expense %s", expense.id)
        return expense

    def update(self, expense_id: str, field: str, value: Any) -> Expense | None:
        attr = COLUMN_TO_ATTR.get(field)
        if attr is None or attr == "id":
            raise KeyError(f"Unknown expense field: {field}")
        expense = self.get(expense_id)
        if expense is None:
            return None
        if attr == "current_cost":
            setattr(expense, attr, to_cost(value))
        else:
            setattr(expense, attr, to_text(value))
        logger.debug("Updated expense %s: %s=%r", expense_id, attr, getattr(expense, attr))
        return expense

    def delete(self, expense_id: str) -> bool:
        before = len(self._expenses)
        self._expenses = [exp for exp in self._expenses if exp.id != expense_id]
        removed = len(self._expenses) != before
        if removed:
            logger.debug("Deleted expense %s", expense_id)
        return removed
