"""Rule-based alternative suggestions for recurring expenses.

Each rule pairs a set of keywords with a suggested substitute and the share of
the cost it removes. Rules are checked in order against the lower-cased
category and description; the first hit wins and the last rule always matches.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..data_model import Alternative, Expense
from .annualize import annualize


@dataclass(frozen=True)
class AlternativeRule:
    suggestion: str
    reduction: float
    category_keywords: tuple[str, ...] = ()
    description_keywords: tuple[str, ...] = ()

    def is_fallback(self) -> bool:
        return not self.category_keywords and not self.description_keywords

    def matches(self, category: str, description: str) -> bool:
        if self.is_fallback():
            return True
        if any(kw in category for kw in self.category_keywords):
            return True
        return any(kw in description for kw in self.description_keywords)


# Order matters: a "Food" expense described as an Uber ride is still a coffee swap.
DEFAULT_RULES: tuple[AlternativeRule, ...] = (
    AlternativeRule(
        "Make at home - Premium coffee maker + beans",
        0.75,
        category_keywords=("food",),
        description_keywords=("coffee",),
    ),
    AlternativeRule(
        "Bike + public transit monthly pass",
        0.80,
        category_keywords=("transport",),
        description_keywords=("uber",),
    ),
    AlternativeRule(
        "Bundle services or share family plan",
        0.50,
        description_keywords=("streaming",),
    ),
    AlternativeRule(
        "Home equipment or outdoor workouts",
        0.70,
        description_keywords=("gym",),
    ),
    AlternativeRule(
        "Meal prep + occasional dining out",
        0.60,
        description_keywords=("dining", "restaurant"),
    ),
    AlternativeRule("Find generic/bulk alternative", 0.30),
)


class RuleBasedRecommender:
    """First-match keyword recommender.

    Parameters:
        rules: ordered rules; the final rule should be a catch-all
    """

    def __init__(self, rules: Sequence[AlternativeRule] | None = None) -> None:
        self.rules: tuple[AlternativeRule, ...] = DEFAULT_RULES if rules is None else tuple(rules)

    def select_rule(self, category: str, description: str) -> AlternativeRule | None:
        category_norm = (category or "").lower()
        description_norm = (description or "").lower()
        for rule in self.rules:
            if rule.matches(category_norm, description_norm):
                return rule
        return None

    def recommend(self, expense: Expense) -> Alternative | None:
        if not expense.description or expense.current_cost == 0:
            return None

        rule = self.select_rule(expense.category, expense.description)
        if rule is None:
            return None

        new_cost = max(0.0, expense.current_cost * (1 - rule.reduction))
        savings = expense.current_cost - new_cost
        return Alternative(
            expense_id=expense.id,
            suggestion=rule.suggestion,
            new_cost=new_cost,
            savings=savings,
            annual_savings=annualize(savings, expense.frequency),
        )

    def generate(self, expenses: Iterable[Expense]) -> List[Alternative]:
        alternatives: List[Alternative] = []
        for expense in expenses:
            alternative = self.recommend(expense)
            if alternative is not None:
                alternatives.append(alternative)
        return alternatives


DEFAULT_RECOMMENDER = RuleBasedRecommender()


def recommend(expense: Expense) -> Alternative | None:
    return DEFAULT_RECOMMENDER.recommend(expense)


def generate_alternatives(expenses: Iterable[Expense]) -> List[Alternative]:
    return DEFAULT_RECOMMENDER.generate(expenses)
