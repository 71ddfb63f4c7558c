from __future__ import annotations

from typing import Iterable

from ..data_model import Alternative, Expense, PathComparison, Projection, Totals
from .annualize import annualize


def aggregate(expenses: Iterable[Expense], alternatives: Iterable[Alternative]) -> Totals:
    """Yearly totals before and after switching.

    Every expense counts toward the current total, including rows that get no
    alternative (blank description or zero cost).
    """
    total_current = sum(annualize(exp.current_cost, exp.frequency) for exp in expenses)
    total_savings = sum(alt.annual_savings for alt in alternatives)
    return Totals(
        total_current_annual=total_current,
        total_savings_annual=total_savings,
        total_new_annual=total_current - total_savings,
    )


def compare_paths(totals: Totals, projection: Projection, years: int) -> PathComparison:
    current_path_total = totals.total_current_annual * years
    better_path_spent = totals.total_new_annual * years
    # Both figures add the raw savings stream on top of future_value, which already contains it.
    saved_over_horizon = (totals.total_current_annual - totals.total_new_annual) * years
    return PathComparison(
        years=years,
        current_path_total=current_path_total,
        better_path_spent=better_path_spent,
        future_value=projection.future_value,
        better_path_total=better_path_spent + projection.future_value,
        net_position=projection.future_value - saved_over_horizon,
        difference=projection.future_value + saved_over_horizon,
    )
