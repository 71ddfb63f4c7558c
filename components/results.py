# components/results.py
from __future__ import annotations

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import dcc, html

from better_path.engine import Summary, aggregate_period, growth_schedule
from better_path.formatting import format_currency


def _stat(label: str, value: str, color: str = "light"):
    return dbc.Col(
        dbc.Card(
            [
                html.Div(label, className="small text-muted"),
                html.Div(value, className="fs-4 fw-bold"),
            ],
            body=True,
            color=color,
            outline=True,
        ),
        md=4,
    )


def render_alternatives(summary: Summary):
    """One row per expense that has a suggested substitute, in table order."""
    if not summary.alternatives:
        return [html.P("Add an expense with a description to see alternatives.", className="text-muted")]

    items = []
    for expense in summary.expenses:
        alt = summary.by_expense.get(expense.id)
        if alt is None:
            continue
        items.append(
            dbc.ListGroupItem(
                [
                    html.Div(
                        [
                            html.Strong(expense.description),
                            html.Span(f" ({expense.category})" if expense.category else "", className="text-muted"),
                        ]
                    ),
                    html.Div(f"→ {alt.suggestion}", className="text-info"),
                    html.Div(
                        [
                            html.Span(f"{format_currency(alt.new_cost)} / {expense.frequency}"),
                            html.Span(
                                f"  -{format_currency(alt.savings)} / {expense.frequency}",
                                className="text-success ms-3",
                            ),
                            html.Span(
                                f"  -{format_currency(alt.annual_savings)} / year",
                                className="text-success fw-bold ms-3",
                            ),
                        ],
                        className="small",
                    ),
                ]
            )
        )
    return [dbc.ListGroup(items, flush=True)]


def build_alternatives_card():
    return dbc.Card(
        [
            html.H4("Smarter Alternatives", className="card-title"),
            html.Div(id="alternatives-list"),
            html.Hr(),
            html.Div(
                [
                    html.Span("Total Annual Savings: "),
                    html.Strong(id="total-savings-annual", className="text-success"),
                ],
                className="fs-5",
            ),
        ],
        body=True,
    )


def render_projection(summary: Summary):
    projection = summary.projection
    return [
        dbc.Row(
            [
                _stat("Total Contributions", format_currency(projection.total_contributions)),
                _stat("Investment Gains", "+" + format_currency(projection.investment_gains), "success"),
                _stat(f"Future Value in {summary.years} Years", format_currency(projection.future_value), "info"),
            ],
            className="g-2",
        ),
        html.P(
            [
                "By making smarter choices today, you could have an additional ",
                html.Strong(format_currency(projection.future_value, decimals=0)),
                f" in {summary.years} years. That's the power of compound growth.",
            ],
            className="mt-3",
        ),
    ]


def growth_figure(summary: Summary) -> go.Figure:
    schedule = growth_schedule(summary.totals.total_savings_annual, summary.annual_rate_percent, summary.years)
    yearly = aggregate_period(schedule, freq="Y")
    fig = go.Figure()
    if not yearly.empty:
        fig.add_trace(go.Scatter(x=yearly["Period"], y=yearly["Contributions"], mode="lines", name="Contributions"))
        fig.add_trace(go.Scatter(x=yearly["Period"], y=yearly["Balance"], mode="lines+markers", name="Balance"))
    fig.update_layout(
        template="plotly_dark",
        margin={"l": 40, "r": 20, "t": 30, "b": 40},
        yaxis={"tickprefix": "$"},
        legend={"orientation": "h"},
    )
    return fig


def build_results_card():
    return dbc.Card(
        [
            html.H4("Your Wealth Building Potential", className="card-title"),
            html.Div(id="projection-results"),
            dcc.Graph(id="growth-chart", config={"displayModeBar": False}),
        ],
        body=True,
    )


def render_comparison(summary: Summary):
    cmp = summary.comparison
    current = dbc.Card(
        [
            html.H5("CURRENT PATH (No Changes)", className="text-danger"),
            html.Div(f"Total Spent Over {cmp.years} Years", className="small text-muted"),
            html.Div(format_currency(cmp.current_path_total), className="fs-3 fw-bold"),
            html.Div("Invested: $0.00", className="small mt-2"),
        ],
        body=True,
    )
    better = dbc.Card(
        [
            html.H5("BETTER PATH (With Alternatives)", className="text-success"),
            html.Div(f"Total Spent Over {cmp.years} Years", className="small text-muted"),
            html.Div(format_currency(cmp.better_path_spent), className="fs-3 fw-bold"),
            html.Div(["Invested & Growing: ", html.Strong("+" + format_currency(cmp.future_value))], className="small mt-2"),
            html.Div(
                ["Net Position: ", html.Strong(format_currency(cmp.net_position, decimals=0))],
                className="mt-2",
            ),
        ],
        body=True,
    )
    return [
        dbc.Row([dbc.Col(current, md=6), dbc.Col(better, md=6)], className="g-3"),
        html.Div(
            [
                html.H5("The Difference"),
                html.Div(format_currency(cmp.difference, decimals=0), className="display-6 fw-bold text-success"),
                html.P(f"That's what making better choices is worth in {cmp.years} years"),
            ],
            className="text-center mt-4",
        ),
    ]


def build_comparison_card():
    return dbc.Card(
        [
            html.H4("Side-by-Side Comparison", className="card-title"),
            html.Div(id="path-comparison"),
        ],
        body=True,
    )


__all__ = [
    "build_alternatives_card",
    "build_comparison_card",
    "build_results_card",
    "growth_figure",
    "render_alternatives",
    "render_comparison",
    "render_projection",
]
