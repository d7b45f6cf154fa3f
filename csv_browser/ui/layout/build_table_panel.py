from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from csv_browser.ui.ids import IDs

PAGE_SIZE_OPTIONS = [10, 25, 50, 100]
SHOW_ALL_VALUE = "all"


def build_table_panel(default_page_size: int) -> html.Div:
    sizes = sorted(set(PAGE_SIZE_OPTIONS) | {default_page_size})
    size_options = [{"label": f"{n} / page", "value": str(n)} for n in sizes]
    size_options.append({"label": "Show all", "value": SHOW_ALL_VALUE})

    pager = html.Div(
        [
            html.Div(id=IDs.Control.PAGE_RANGE, className="small"),
            html.Div(
                [
                    dbc.Button("«", id=IDs.Control.PAGE_FIRST_BTN, size="sm", color="light"),
                    dbc.Button("‹", id=IDs.Control.PAGE_PREV_BTN, size="sm", color="light"),
                    html.Span(id=IDs.Control.PAGE_LABEL, className="px-3 small"),
                    dbc.Button("›", id=IDs.Control.PAGE_NEXT_BTN, size="sm", color="light"),
                    dbc.Button("»", id=IDs.Control.PAGE_LAST_BTN, size="sm", color="light", className="me-2"),
                    dbc.Select(
                        id=IDs.Control.PAGE_SIZE_SELECT,
                        options=size_options,
                        value=str(default_page_size),
                        size="sm",
                        style={"width": "8rem"},
                    ),
                ],
                className="d-flex align-items-center",
            ),
        ],
        className="mt-3 d-flex flex-wrap justify-content-between align-items-center",
    )

    return html.Div(
        [
            html.Div(
                [html.Div(id=IDs.Control.TABLE_CONTAINER, className="border rounded"), pager],
                id=IDs.Control.TABLE_PANEL,
            ),
            html.Div(
                html.Div(id=IDs.Control.JSON_CONTAINER, className="bg-light p-3 rounded"),
                id=IDs.Control.JSON_PANEL,
                style={"display": "none"},
            ),
        ]
    )
