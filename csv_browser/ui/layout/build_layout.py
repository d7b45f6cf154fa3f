from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.ui.ids import IDs
from csv_browser.ui.layout.build_column_panel import build_column_panel
from csv_browser.ui.layout.build_load_panel import build_load_panel
from csv_browser.ui.layout.build_table_panel import build_table_panel
from csv_browser.ui.layout.build_toolbar import build_toolbar

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    cfg = ctx.browser_config

    header = html.Div(
        [
            html.H2(cfg.ui_title, className="mb-1"),
            html.Small(
                "Load a UTF-8 CSV file to browse it as a table or JSON, search, and export.",
                className="text-muted",
            ),
        ],
        className="mt-3",
    )

    controls = html.Div(
        [
            build_toolbar(),
            html.Div(id=IDs.Control.SUMMARY, className="mt-3 small text-muted"),
            dbc.Row(
                [
                    dbc.Col(build_table_panel(cfg.page_size), md=9, className="mt-3"),
                    dbc.Col(build_column_panel(), md=3),
                ],
                className="gx-3",
            ),
        ],
        id=IDs.Control.CONTROLS_PANEL,
        style={"display": "none"},
        className="mt-3",
    )

    return dbc.Container(
        fluid=True,
        className="csvb-root",
        children=[
            dcc.Store(id=IDs.Store.VIEW_VERSION, data=0),
            header,
            dbc.Row(dbc.Col(build_load_panel(), md=6), justify="center"),
            controls,
        ],
    )
