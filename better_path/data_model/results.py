# data_model/results.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Totals:
    total_current_annual: float = 0.0
    total_savings_annual: float = 0.0
    total_new_annual: float = 0.0


@dataclass
class Projection:
    future_value: float = 0.0
    total_contributions: float = 0.0
    investment_gains: float = 0.0


@dataclass
class PathComparison:
    """Horizon totals for keeping every expense vs. switching to alternatives."""

    years: int
    current_path_total: float
    better_path_spent: float
    future_value: float
    better_path_total: float
    net_position: float
    difference: float
