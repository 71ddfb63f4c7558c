"""Dash single-page app: expenses in, alternatives and compounded savings out."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, ctx, html

from better_path.config import AppConfig, configure_logging, load_config_from_env
from better_path.engine import ExpenseSession, summarize
from better_path.formatting import format_currency, format_percent
from components.controls import build_controls
from components.expense_table import EXPENSE_MODEL, build_expense_card
from components.results import (
    build_alternatives_card,
    build_comparison_card,
    build_results_card,
    growth_figure,
    render_alternatives,
    render_comparison,
    render_projection,
)

logger = logging.getLogger(__name__)


def add_expense_row(rows: List[Dict[str, Any]] | None) -> List[Dict[str, Any]]:
    session = ExpenseSession.from_records(rows)
    session.add()
    return session.to_records()


def reconcile_rows(
    rows: List[Dict[str, Any]] | None,
    previous_rows: List[Dict[str, Any]] | None,
) -> List[Dict[str, Any]]:
    """Replay a table edit onto the previous snapshot as explicit deletes/updates."""
    if previous_rows is None:
        return ExpenseSession.from_records(rows).to_records()

    session = ExpenseSession.from_records(previous_rows)
    current_ids = {str(row.get("id")) for row in rows or []}
    for expense in session.expenses:
        if expense.id not in current_ids:
            session.delete(expense.id)

    for row in rows or []:
        expense_id = str(row.get("id"))
        existing = session.get(expense_id)
        if existing is None:
            continue
        before = existing.to_record()
        for field in EXPENSE_MODEL.field_names():
            if field in row and row[field] != before.get(field):
                session.update(expense_id, field, row[field])
    return session.to_records()


def compute_outputs(rows: List[Dict[str, Any]] | None, rate: float | None, years: int | None, cfg: AppConfig):
    rate = cfg.default_rate if rate is None else float(rate)
    years = cfg.default_years if years is None else int(years)
    session = ExpenseSession.from_records(rows)
    summary = summarize(session.expenses, rate, years)
    return (
        format_currency(summary.totals.total_current_annual),
        render_alternatives(summary),
        format_currency(summary.totals.total_savings_annual),
        format_percent(rate),
        f"{years} Years",
        format_currency(summary.totals.total_savings_annual),
        render_projection(summary),
        growth_figure(summary),
        render_comparison(summary),
    )


def build_layout(cfg: AppConfig):
    session = ExpenseSession.with_defaults()
    return dbc.Container(
        [
            html.Div(
                dbc.Input(
                    id="promo-message",
                    value=cfg.promo_message,
                    type="text",
                    className="bg-transparent text-white border-0 text-center",
                ),
                className="w-100 py-2 mb-3",
                style={"backgroundColor": "#00a8e1"},
            ),
            html.H2("Smart Money Choices Calculator", className="mb-1"),
            html.P(
                "See how small changes to your recurring expenses compound into real wealth.",
                className="text-muted",
            ),
            dbc.Row(
                [
                    dbc.Col(build_expense_card(session.to_records()), lg=6),
                    dbc.Col(build_alternatives_card(), lg=6),
                ],
                className="g-3",
            ),
            dbc.Row(
                [
                    dbc.Col(build_controls(cfg), lg=4),
                    dbc.Col(build_results_card(), lg=8),
                ],
                className="g-3 mt-1",
            ),
            dbc.Row(dbc.Col(build_comparison_card()), className="g-3 mt-1 mb-4"),
        ],
        fluid=True,
    )


def register_callbacks(app: dash.Dash, cfg: AppConfig) -> None:
    @app.callback(
        Output("expense-table", "data"),
        Input("add-expense-row", "n_clicks"),
        Input("expense-table", "data_timestamp"),
        State("expense-table", "data"),
        State("expense-table", "data_previous"),
        prevent_initial_call=True,
    )
    def sync_expenses(_n_clicks, _timestamp, rows, previous_rows):
        if ctx.triggered_id == "add-expense-row":
            return add_expense_row(rows)
        return reconcile_rows(rows, previous_rows)

    @app.callback(
        Output("total-current-annual", "children"),
        Output("alternatives-list", "children"),
        Output("total-savings-annual", "children"),
        Output("rate-display", "children"),
        Output("years-display", "children"),
        Output("annual-invest", "children"),
        Output("projection-results", "children"),
        Output("growth-chart", "figure"),
        Output("path-comparison", "children"),
        Input("expense-table", "data"),
        Input("investment-rate", "value"),
        Input("time-horizon", "value"),
    )
    def refresh(rows, rate, years):
        return compute_outputs(rows, rate, years, cfg)


def create_app(cfg: AppConfig | None = None) -> dash.Dash:
    cfg = cfg or load_config_from_env()
    app = dash.Dash(__name__, external_stylesheets=[dbc.themes.DARKLY], title="Smart Money Choices")
    app.layout = build_layout(cfg)
    register_callbacks(app, cfg)
    return app


def main() -> None:
    cfg = load_config_from_env()
    configure_logging(cfg.log_level)
    logger.info("Starting calculator on %s:%s (debug=%s)", cfg.host, cfg.port, cfg.debug)
    app = create_app(cfg)
    app.run(host=cfg.host, port=cfg.port, debug=cfg.debug)


if __name__ == "__main__":
    main()
