# components/expense_table.py
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dash_table, html
from dash.dash_table import FormatTemplate

from better_path.data_model import ExpenseTableModel, TableModel

EXPENSE_MODEL = ExpenseTableModel()


def _table_config(model: TableModel):
    columns = [{"name": "id", "id": "id", "editable": False}]
    dropdowns = {}
    for col in model.columns:
        col_def = {"name": col.label, "id": col.field, "editable": True}
        if col.kind == "number":
            col_def["type"] = "numeric"
        if col.kind == "select":
            col_def["presentation"] = "dropdown"
            dropdowns[col.field] = [{"label": opt, "value": opt} for opt in col.options or []]
        columns.append(col_def)
    columns.append(
        {
            "name": "Annual Cost",
            "id": "annual_cost",
            "type": "numeric",
            "format": FormatTemplate.money(2),
            "editable": False,
        }
    )
    return columns, dropdowns


EXPENSE_COLUMNS, EXPENSE_DROPDOWNS = _table_config(EXPENSE_MODEL)


def _datatable(id_value: str, data, columns, dropdowns):
    table = dash_table.DataTable(
        id=id_value,
        data=data,
        columns=columns,
        hidden_columns=["id"],
        editable=True,
        row_deletable=True,
        style_table={"height": "auto", "overflowY": "visible"},
        style_header={"backgroundColor": "#222", "color": "#eee", "fontWeight": "bold"},
        style_data={"backgroundColor": "#111", "color": "#eee"},
        css=[{"selector": ".show-hide", "rule": "display: none"}],
        dropdown={col: {"options": opts} for col, opts in dropdowns.items()},
        fill_width=True,
    )
    return html.Div(table, style={"maxHeight": "320px", "overflowY": "auto"})


def build_expense_card(records: list[dict]):
    return dbc.Card(
        [
            html.H4("Your Current Expenses", className="card-title"),
            _datatable("expense-table", records, EXPENSE_COLUMNS, EXPENSE_DROPDOWNS),
            dbc.Button("Add Expense", id="add-expense-row", color="secondary", size="sm", className="mt-2"),
            html.Hr(),
            html.Div(
                [
                    html.Span("Total Annual Cost: "),
                    html.Strong(id="total-current-annual"),
                ],
                className="fs-5",
            ),
        ],
        body=True,
    )


__all__ = [
    "EXPENSE_MODEL",
    "EXPENSE_COLUMNS",
    "EXPENSE_DROPDOWNS",
    "build_expense_card",
]
