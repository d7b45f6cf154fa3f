from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.ui.helpers import ALL_FIELDS_VALUE
from csv_browser.ui.ids import IDs


def build_toolbar() -> dbc.Row:
    """
    Search, sort, view mode and export controls.
    """
    search = dbc.InputGroup(
        [
            dbc.Input(
                id=IDs.Control.SEARCH_INPUT,
                placeholder="Search...",
                type="text",
                debounce=True,
                value="",
            ),
            dbc.Select(
                id=IDs.Control.SEARCH_SCOPE,
                options=[{"label": "All columns", "value": ALL_FIELDS_VALUE}],
                value=ALL_FIELDS_VALUE,
            ),
        ],
        size="sm",
    )

    sort = dbc.InputGroup(
        [
            dbc.Select(id=IDs.Control.SORT_SELECT, options=[], placeholder="Sort by..."),
            dbc.Button("Sort", id=IDs.Control.SORT_BTN, color="primary", outline=True),
            dbc.Button("Clear", id=IDs.Control.SORT_CLEAR_BTN, color="secondary", outline=True),
        ],
        size="sm",
    )

    view_mode = dbc.RadioItems(
        id=IDs.Control.VIEW_MODE,
        options=[
            {"label": "Table", "value": "table"},
            {"label": "JSON", "value": "json"},
        ],
        value="table",
        inline=True,
        className="small",
    )

    export = html.Div(
        [
            dbc.Button("Save JSON", id=IDs.Control.EXPORT_JSON_BTN, color="success", size="sm", className="me-1"),
            dbc.Button("Save CSV", id=IDs.Control.EXPORT_CSV_BTN, color="info", size="sm", className="me-2"),
            dbc.Checkbox(
                id=IDs.Control.EXPORT_PAGE_ONLY,
                label="Current page only",
                value=False,
                className="d-inline-block small me-2",
            ),
            html.Span(
                [
                    dcc.Clipboard(id=IDs.Control.CLIPBOARD, title="Copy page as JSON", className="d-inline-block"),
                    html.Span(" Copy JSON", className="small"),
                ],
            ),
            dcc.Download(id=IDs.Control.DOWNLOAD),
        ],
        className="d-flex align-items-center",
    )

    return dbc.Row(
        [
            dbc.Col(search, md=4),
            dbc.Col(
                [sort, html.Small(id=IDs.Control.SORT_STATUS, className="text-muted")],
                md=3,
            ),
            dbc.Col(view_mode, md=1),
            dbc.Col(export, md=4),
        ],
        className="gx-2 gy-2 align-items-start",
    )
