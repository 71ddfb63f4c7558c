from .base import ColumnDefinition, TableModel
from .expense import (
    ANNUAL_MULTIPLIERS,
    COLUMN_TO_ATTR,
    DEFAULT_FREQUENCY,
    FREQUENCIES,
    Alternative,
    Expense,
    ExpenseTableModel,
    Frequency,
    annual_multiplier,
    dataframe_to_expenses,
    new_expense_id,
    record_to_expense,
    records_to_expenses,
    to_cost,
    to_text,
)
from .results import PathComparison, Projection, Totals

__all__ = [
    "ANNUAL_MULTIPLIERS",
    "COLUMN_TO_ATTR",
    "DEFAULT_FREQUENCY",
    "FREQUENCIES",
    "Alternative",
    "ColumnDefinition",
    "Expense",
    "ExpenseTableModel",
    "Frequency",
    "PathComparison",
    "Projection",
    "TableModel",
    "annual_multiplier",
    "Totals",
    "dataframe_to_expenses",
    "new_expense_id",
    "record_to_expense",
    "records_to_expenses",
    "to_cost",
    "to_text",
]
