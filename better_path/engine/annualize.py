from __future__ import annotations

from ..data_model import annual_multiplier


def annualize(cost: float, frequency: str) -> float:
    """Convert a per-period cost into its yearly total.

    Unknown frequencies are treated as monthly rather than rejected.
    """
    return cost * annual_multiplier(frequency)
