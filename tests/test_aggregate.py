import pytest

from better_path.data_model import Expense, Projection, Totals
from better_path.engine import aggregate, compare_paths, generate_alternatives, summarize


def test_aggregate_empty_is_zero():
    totals = aggregate([], [])

    assert totals.total_current_annual == 0
    assert totals.total_savings_annual == 0
    assert totals.total_new_annual == 0


def test_daily_coffee_scenario():
    expenses = [Expense(id="1", category="Food", description="Daily coffee", current_cost=6.0, frequency="daily")]

    alternatives = generate_alternatives(expenses)
    totals = aggregate(expenses, alternatives)

    assert alternatives[0].new_cost == pytest.approx(1.5)
    assert alternatives[0].savings == pytest.approx(4.5)
    assert alternatives[0].annual_savings == pytest.approx(1642.5)
    assert totals.total_current_annual == pytest.approx(2190.0)
    assert totals.total_savings_annual == pytest.approx(1642.5)
    assert totals.total_new_annual == pytest.approx(547.5)


def test_expenses_without_alternatives_still_count_toward_current_total():
    expenses = [
        Expense(id="1", description="", current_cost=100.0, frequency="yearly"),
        Expense(id="2", description="Gym", current_cost=10.0, frequency="monthly"),
    ]

    totals = aggregate(expenses, generate_alternatives(expenses))

    assert totals.total_current_annual == pytest.approx(220.0)
    assert totals.total_savings_annual == pytest.approx(84.0)
    assert totals.total_new_annual == pytest.approx(136.0)


def test_aggregate_is_order_independent():
    expenses = [
        Expense(id="1", description="Gym", current_cost=10.0, frequency="weekly"),
        Expense(id="2", description="Streaming", current_cost=15.0, frequency="monthly"),
        Expense(id="3", category="Food", description="Lunch", current_cost=12.0, frequency="daily"),
    ]

    forward = aggregate(expenses, generate_alternatives(expenses))
    backward = aggregate(list(reversed(expenses)), generate_alternatives(list(reversed(expenses))))

    assert forward.total_current_annual == pytest.approx(backward.total_current_annual)
    assert forward.total_savings_annual == pytest.approx(backward.total_savings_annual)


def test_compare_paths_reproduces_page_figures():
    totals = Totals(total_current_annual=2190.0, total_savings_annual=1642.5, total_new_annual=547.5)
    projection = Projection(future_value=10000.0, total_contributions=8212.5, investment_gains=1787.5)

    cmp = compare_paths(totals, projection, 5)

    assert cmp.current_path_total == pytest.approx(10950.0)
    assert cmp.better_path_spent == pytest.approx(2737.5)
    assert cmp.better_path_total == pytest.approx(12737.5)
    assert cmp.net_position == pytest.approx(10000.0 - 8212.5)
    assert cmp.difference == pytest.approx(10000.0 + 8212.5)


def test_summarize_runs_full_pipeline():
    expenses = [Expense(id="1", category="Food", description="Daily coffee", current_cost=6.0, frequency="daily")]

    summary = summarize(expenses, 0, 2)

    assert summary.by_expense["1"].suggestion.startswith("Make at home")
    assert summary.projection.future_value == pytest.approx(3285.0)
    assert summary.comparison.current_path_total == pytest.approx(4380.0)
