from __future__ import annotations

import logging
import math
import uuid
from dataclasses import dataclass
from typing import Any, Iterable, List, Literal

import pandas as pd

from .base import ColumnDefinition, TableModel

logger = logging.getLogger(__name__)

Frequency = Literal["daily", "weekly", "monthly", "yearly"]

FREQUENCIES = ["daily", "weekly", "monthly", "yearly"]
DEFAULT_FREQUENCY = "monthly"

# Periods per year; anything unrecognised is billed monthly.
ANNUAL_MULTIPLIERS = {"daily": 365, "weekly": 52, "monthly": 12, "yearly": 1}

# Table column id -> Expense attribute
COLUMN_TO_ATTR = {
    "id": "id",
    "category": "category",
    "description": "description",
    "current_cost": "current_cost",
    "currentCost": "current_cost",
    "frequency": "frequency",
}


def annual_multiplier(frequency: str) -> int:
    return ANNUAL_MULTIPLIERS.get(frequency, ANNUAL_MULTIPLIERS[DEFAULT_FREQUENCY])


def new_expense_id() -> str:
    return uuid.uuid4().hex


def to_cost(value: Any) -> float:
    """Coerce a table cell into a float cost; blanks and junk become 0.0."""
    if value is None or value == "":
        return 0.0
    try:
        cost = float(value)
    except (TypeError, ValueError):
        logger.debug("Unparsable cost %r, using 0.0", value)
        return 0.0
    if math.isnan(cost):
        return 0.0
    return cost


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value)


@dataclass
class Expense:
    id: str
    category: str = ""
    description: str = ""
    current_cost: float = 0.0
    frequency: str = DEFAULT_FREQUENCY

    @classmethod
    def blank(cls) -> "Expense":
        return cls(id=new_expense_id())

    def annual_cost(self) -> float:
        return self.current_cost * annual_multiplier(self.frequency)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "description": self.description,
            "current_cost": self.current_cost,
            "frequency": self.frequency,
            "annual_cost": self.annual_cost(),
        }


@dataclass
class Alternative:
    expense_id: str
    suggestion: str
    new_cost: float
    savings: float
    annual_savings: float


def _default_expense_rows() -> List[dict[str, float | str]]:
    return [
        {
            "category": "Food",
            "description": "Daily coffee",
            "current_cost": 6.0,
            "frequency": "daily",
        },
        {
            "category": "Transport",
            "description": "Uber to work",
            "current_cost": 25.0,
            "frequency": "daily",
        },
        {
            "category": "Subscription",
            "description": "Streaming services",
            "current_cost": 45.0,
            "frequency": "monthly",
        },
    ]


class ExpenseTableModel(TableModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition("category", "Category", help="e.g. Food"),
            ColumnDefinition("description", "Description", help="What you pay for"),
            ColumnDefinition(
                "current_cost",
                "Cost (USD)",
                kind="number",
                default=0.0,
                min_value=0.0,
                step=0.5,
                format="%.2f",
            ),
            ColumnDefinition(
                "frequency",
                "Frequency",
                kind="select",
                default=DEFAULT_FREQUENCY,
                options=FREQUENCIES,
            ),
        ]
        super().__init__("expenses", columns, _default_expense_rows())


def record_to_expense(row: dict[str, Any]) -> Expense:
    expense_id = to_text(row.get("id")).strip() or new_expense_id()
    cost = row.get("current_cost", row.get("currentCost"))
    return Expense(
        id=expense_id,
        category=to_text(row.get("category")),
        description=to_text(row.get("description")),
        current_cost=to_cost(cost),
        frequency=to_text(row.get("frequency")) or DEFAULT_FREQUENCY,
    )


def records_to_expenses(rows: Iterable[dict[str, Any]] | None) -> List[Expense]:
    return [record_to_expense(row) for row in rows or []]


def dataframe_to_expenses(df: pd.DataFrame) -> List[Expense]:
    if df.empty:
        return []
    return records_to_expenses(df.to_dict("records"))
