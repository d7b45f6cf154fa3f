from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.ui.ids import IDs


def build_load_panel() -> dbc.Card:
    """
    File picker + sample data button.
    """
    return dbc.Card(
        dbc.CardBody(
            [
                dcc.Upload(
                    id=IDs.Control.UPLOAD,
                    children=html.Div(
                        ["Drag and drop or ", html.A("select a CSV file")],
                    ),
                    accept=".csv,text/csv",
                    multiple=False,
                    className="csvb-upload text-center p-4 border border-2 rounded",
                    style={"borderStyle": "dashed"},
                ),
                html.Div("or", className="text-muted small text-center my-2"),
                html.Div(
                    dbc.Button(
                        "Load sample data",
                        id=IDs.Control.SAMPLE_BTN,
                        color="success",
                        size="sm",
                    ),
                    className="text-center",
                ),
                html.Div(id=IDs.Control.CURRENT_FILE, className="mt-3 small fw-semibold text-center"),
                html.Div(id=IDs.Control.LOAD_STATUS, className="mt-2"),
            ]
        ),
        className="mt-3",
    )
