from .aggregate import aggregate, compare_paths
from .annualize import annualize
from .projector import aggregate_period, future_value, growth_schedule, project
from .recommender import (
    DEFAULT_RULES,
    AlternativeRule,
    RuleBasedRecommender,
    generate_alternatives,
    recommend,
)
from .state import ExpenseSession
from .summary import Summary, summarize

__all__ = [
    "DEFAULT_RULES",
    "AlternativeRule",
    "ExpenseSession",
    "RuleBasedRecommender",
    "Summary",
    "aggregate",
    "aggregate_period",
    "annualize",
    "compare_paths",
    "future_value",
    "generate_alternatives",
    "growth_schedule",
    "project",
    "recommend",
    "summarize",
]
