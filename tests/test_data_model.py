import math

from better_path.data_model import (
    ExpenseTableModel,
    dataframe_to_expenses,
    record_to_expense,
    records_to_expenses,
)


def test_record_without_id_gets_a_fresh_one():
    first = record_to_expense({"description": "Gym", "current_cost": 20})
    second = record_to_expense({"description": "Gym", "current_cost": 20})

    assert first.id and second.id
    assert first.id != second.id


def test_record_coerces_blank_and_nan_cells():
    expense = record_to_expense(
        {"id": "a", "category": None, "description": math.nan, "current_cost": "", "frequency": None}
    )

    assert expense.category == ""
    assert expense.description == ""
    assert expense.current_cost == 0.0
    assert expense.frequency == "monthly"


def test_record_keeps_unknown_frequency_and_bills_it_monthly():
    expense = record_to_expense({"id": "a", "description": "Tea", "currentCost": "3", "frequency": "biweekly"})

    assert expense.frequency == "biweekly"
    assert expense.current_cost == 3.0
    assert expense.annual_cost() == 36.0


def test_records_to_expenses_handles_none():
    assert records_to_expenses(None) == []


def test_default_table_converts_to_expenses():
    model = ExpenseTableModel()

    expenses = dataframe_to_expenses(model.create_default_df())

    assert [exp.category for exp in expenses] == ["Food", "Transport", "Subscription"]
    assert expenses[0].current_cost == 6.0
    assert expenses[0].frequency == "daily"


def test_table_model_blank_row_uses_column_defaults():
    model = ExpenseTableModel()

    assert model.field_names() == ["category", "description", "current_cost", "frequency"]
    assert model.blank_row() == {"category": "", "description": "", "current_cost": 0.0, "frequency": "monthly"}
