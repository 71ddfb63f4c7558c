from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from ..data_model import Alternative, Expense, PathComparison, Projection, Totals
from .aggregate import aggregate, compare_paths
from .projector import project
from .recommender import RuleBasedRecommender, DEFAULT_RECOMMENDER


@dataclass
class Summary:
    expenses: List[Expense]
    alternatives: List[Alternative]
    totals: Totals
    projection: Projection
    comparison: PathComparison
    annual_rate_percent: float = 0.0
    years: int = 0
    by_expense: dict[str, Alternative] = field(default_factory=dict)


def summarize(
    expenses: Iterable[Expense],
    annual_rate_percent: float,
    years: int,
    recommender: RuleBasedRecommender | None = None,
) -> Summary:
    """Recompute alternatives, totals, projection and comparison in one pass."""
    expenses = list(expenses)
    alternatives = (recommender or DEFAULT_RECOMMENDER).generate(expenses)
    totals = aggregate(expenses, alternatives)
    projection = project(totals.total_savings_annual, annual_rate_percent, years)
    return Summary(
        expenses=expenses,
        alternatives=alternatives,
        totals=totals,
        projection=projection,
        comparison=compare_paths(totals, projection, years),
        annual_rate_percent=annual_rate_percent,
        years=years,
        by_expense={alt.expense_id: alt for alt in alternatives},
    )
