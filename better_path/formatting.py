from __future__ import annotations


def format_currency(value: float, decimals: int = 2) -> str:
    """``1234.5 -> "$1,234.50"``; negatives keep the sign before the dollar."""
    amount = round(float(value or 0.0), decimals)
    if amount == 0:
        amount = 0.0
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.{decimals}f}"


def format_percent(value: float) -> str:
    return f"{float(value):g}%"
