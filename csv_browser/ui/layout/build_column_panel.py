from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.ui.ids import IDs


def build_column_panel() -> dbc.Card:
    """
    Column visibility checklist plus move left/right for display order.
    """
    return dbc.Card(
        [
            dbc.CardHeader("Columns"),
            dbc.CardBody(
                [
                    html.Div(
                        [
                            dbc.Button("Show all", id=IDs.Control.COLUMNS_SHOW_ALL_BTN, size="sm", color="light", className="me-1"),
                            dbc.Button("Hide all", id=IDs.Control.COLUMNS_HIDE_ALL_BTN, size="sm", color="light"),
                        ],
                        className="mb-2 pb-2 border-bottom",
                    ),
                    dcc.Checklist(
                        id=IDs.Control.COLUMN_CHECKLIST,
                        options=[],
                        value=[],
                        labelClassName="d-block small text-truncate",
                        inputClassName="me-2",
                        style={"maxHeight": "16rem", "overflowY": "auto"},
                    ),
                    html.Div("Move column", className="small text-muted mt-3"),
                    dbc.InputGroup(
                        [
                            dbc.Select(id=IDs.Control.COLUMN_MOVE_SELECT, options=[]),
                            dbc.Button("◀", id=IDs.Control.COLUMN_MOVE_LEFT_BTN, color="secondary", outline=True),
                            dbc.Button("▶", id=IDs.Control.COLUMN_MOVE_RIGHT_BTN, color="secondary", outline=True),
                        ],
                        size="sm",
                    ),
                ]
            ),
        ],
        className="mt-3",
    )
