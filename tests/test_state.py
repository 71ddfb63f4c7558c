import pytest

from better_path.data_model import Expense
from better_path.engine import ExpenseSession


def test_add_creates_blank_expense_with_fresh_id():
    session = ExpenseSession()

    first = session.add()
    second = session.add()

    assert len(session) == 2
    assert first.id != second.id
    assert (first.category, first.description, first.current_cost, first.frequency) == ("", "", 0.0, "monthly")


def test_update_sets_field_by_name():
    session = ExpenseSession()
    expense = session.add()

    session.update(expense.id, "description", "Gym membership")
    session.update(expense.id, "current_cost", "49.5")
    session.update(expense.id, "frequency", "weekly")

    stored = session.get(expense.id)
    assert stored.description == "Gym membership"
    assert stored.current_cost == 49.5
    assert stored.frequency == "weekly"


def test_update_accepts_camel_case_cost_and_coerces_junk():
    session = ExpenseSession()
    expense = session.add()

    session.update(expense.id, "currentCost", 12)
    assert session.get(expense.id).current_cost == 12.0

    session.update(expense.id, "currentCost", "twelve")
    assert session.get(expense.id).current_cost == 0.0


def test_update_unknown_id_is_noop():
    session = ExpenseSession()
    session.add()

    assert session.update("missing", "description", "x") is None


def test_update_rejects_unknown_field_and_id():
    session = ExpenseSession()
    expense = session.add()

    with pytest.raises(KeyError):
        session.update(expense.id, "price", 3)
    with pytest.raises(KeyError):
        session.update(expense.id, "id", "other")


def test_delete_removes_only_matching_expense():
    session = ExpenseSession()
    keep = session.add()
    drop = session.add()

    assert session.delete(drop.id) is True
    assert session.delete(drop.id) is False
    assert [exp.id for exp in session] == [keep.id]


def test_expenses_property_is_a_snapshot():
    session = ExpenseSession()
    session.add()

    snapshot = session.expenses
    snapshot.clear()

    assert len(session) == 1


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError):
        ExpenseSession([Expense(id="x"), Expense(id="x")])


def test_records_round_trip_keeps_ids_and_order():
    session = ExpenseSession.with_defaults()

    rebuilt = ExpenseSession.from_records(session.to_records())

    assert [exp.id for exp in rebuilt] == [exp.id for exp in session]
    assert [exp.description for exp in rebuilt] == ["Daily coffee", "Uber to work", "Streaming services"]


def test_sessions_are_isolated():
    first = ExpenseSession.with_defaults()
    second = ExpenseSession.with_defaults()

    first.update(first.expenses[0].id, "current_cost", 100)

    assert second.expenses[0].current_cost == 6.0
