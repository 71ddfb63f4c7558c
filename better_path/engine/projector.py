from __future__ import annotations

import pandas as pd

from ..data_model import Projection

REQUIRED_COLUMNS = {"MonthIndex", "YearIndex", "MonthInYear"}


def future_value(annual_contribution: float, annual_rate_percent: float, years: int) -> float:
    """Future value of monthly end-of-period contributions compounded monthly."""
    monthly_rate = annual_rate_percent / 100 / 12
    months = years * 12
    monthly_contribution = annual_contribution / 12

    if monthly_rate == 0:
        return monthly_contribution * months
    return monthly_contribution * ((1 + monthly_rate) ** months - 1) / monthly_rate


def project(annual_contribution: float, annual_rate_percent: float, years: int) -> Projection:
    """Project invested savings over the horizon.

    ``years`` and ``annual_rate_percent`` are expected to be non-negative; the
    caller's input controls enforce that and nothing is clamped here.
    """
    fv = future_value(annual_contribution, annual_rate_percent, years)
    total_contributions = annual_contribution * years
    return Projection(
        future_value=fv,
        total_contributions=total_contributions,
        investment_gains=fv - total_contributions,
    )


def growth_schedule(annual_contribution: float, annual_rate_percent: float, years: int) -> pd.DataFrame:
    """Month-by-month balance of the savings account.

    The final ``Balance`` matches ``project(...).future_value``.
    """
    monthly_rate = annual_rate_percent / 100 / 12
    monthly_contribution = annual_contribution / 12
    n_months = max(0, int(years * 12))

    records = []
    balance = 0.0
    contributions = 0.0
    for m in range(n_months):
        balance = balance * (1 + monthly_rate) + monthly_contribution
        contributions += monthly_contribution
        records.append(
            {
                "MonthIndex": m,
                "YearIndex": m // 12,
                "MonthInYear": (m % 12) + 1,
                "Contributions": contributions,
                "Balance": balance,
                "Gains": balance - contributions,
            }
        )
    return pd.DataFrame(
        records,
        columns=["MonthIndex", "YearIndex", "MonthInYear", "Contributions", "Balance", "Gains"],
    )


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    return df.sort_values("MonthIndex").copy()


def aggregate_period(df: pd.DataFrame, freq: str = "Y") -> pd.DataFrame:
    """Snapshot a growth schedule by month or by year (last month of each year)."""
    if df.empty:
        return df

    freq = (freq or "Y").upper()
    df = _prepare(df)

    if freq == "Y":
        df["PeriodValue"] = df["YearIndex"]
        grouped = df.groupby("PeriodValue", as_index=False).last()
        grouped["Period"] = "Year " + (grouped["PeriodValue"] + 1).astype(str)
        return grouped

    df["PeriodValue"] = df["MonthIndex"]
    df["Period"] = "Month " + (df["MonthIndex"] + 1).astype(str)
    return df
