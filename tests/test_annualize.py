import pytest

from better_path.data_model import Expense
from better_path.engine import annualize


@pytest.mark.parametrize(
    "frequency, expected",
    [("daily", 3650), ("weekly", 520), ("monthly", 120), ("yearly", 10)],
)
def test_annualize_known_frequencies(frequency, expected):
    assert annualize(10, frequency) == expected


def test_unknown_frequency_is_billed_monthly():
    assert annualize(10, "fortnightly") == 120
    assert annualize(10, "") == 120


def test_zero_and_negative_costs_scale_proportionally():
    assert annualize(0, "daily") == 0
    assert annualize(-2, "weekly") == -104


def test_expense_annual_cost_matches_annualize():
    expense = Expense(id="a", description="Gym", current_cost=30.0, frequency="monthly")

    assert expense.annual_cost() == annualize(30.0, "monthly") == 360.0


def test_expense_annual_cost_uses_monthly_fallback_like_annualize():
    expense = Expense(id="a", description="Tea", current_cost=3.0, frequency="biweekly")

    assert expense.annual_cost() == annualize(3.0, "biweekly") == 36.0
