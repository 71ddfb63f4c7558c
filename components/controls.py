# components/controls.py
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from better_path.config import AppConfig


def _rate_marks(cfg: AppConfig) -> dict:
    lo, hi = int(cfg.rate_min), int(cfg.rate_max)
    return {i: f"{i}%" for i in range(lo, hi + 1, 5)}


def _year_marks(cfg: AppConfig) -> dict:
    marks = {cfg.years_min: f"{cfg.years_min} year"}
    marks.update({i: str(i) for i in range(10, cfg.years_max, 10)})
    marks[cfg.years_max] = f"{cfg.years_max} years"
    return marks


def build_controls(cfg: AppConfig):
    return dbc.Card(
        [
            html.H4("Investment Settings", className="card-title"),
            dbc.Label(
                [
                    "Annual Return Rate ",
                    html.Span(id="rate-display", className="badge bg-info text-dark ms-2"),
                ]
            ),
            dcc.Slider(
                id="investment-rate",
                min=cfg.rate_min,
                max=cfg.rate_max,
                value=cfg.default_rate,
                step=cfg.rate_step,
                marks=_rate_marks(cfg),
                tooltip={"placement": "bottom", "always_visible": False},
            ),
            dbc.Label(
                [
                    "Time Horizon ",
                    html.Span(id="years-display", className="badge bg-info text-dark ms-2"),
                ],
                className="mt-3",
            ),
            dcc.Slider(
                id="time-horizon",
                min=cfg.years_min,
                max=cfg.years_max,
                value=cfg.default_years,
                step=1,
                marks=_year_marks(cfg),
            ),
            html.Hr(),
            html.Div(
                [
                    html.Span("Annual Amount to Invest: "),
                    html.Strong(id="annual-invest"),
                ]
            ),
        ],
        body=True,
    )


__all__ = ["build_controls"]
