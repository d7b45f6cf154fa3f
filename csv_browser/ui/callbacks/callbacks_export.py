from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State
from dash.exceptions import PreventUpdate

from csv_browser.ui.ids import IDs

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_export_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    session = ctx.session

    @app.callback(
        Output(IDs.Control.DOWNLOAD, "data"),
        Input(IDs.Control.EXPORT_JSON_BTN, "n_clicks"),
        Input(IDs.Control.EXPORT_CSV_BTN, "n_clicks"),
        State(IDs.Control.EXPORT_PAGE_ONLY, "value"),
        prevent_initial_call=True,
    )
    def download_export(_json_clicks, _csv_clicks, page_only):
        """Filtered set by default, current page when the checkbox is ticked."""
        if not session.has_dataset:
            raise PreventUpdate

        if dash.ctx.triggered_id == IDs.Control.EXPORT_JSON_BTN:
            artifact = session.export_json(page_only=bool(page_only))
        else:
            artifact = session.export_csv(page_only=bool(page_only))

        if artifact is None:
            raise PreventUpdate

        return dict(content=artifact.content, filename=artifact.filename, type=artifact.mime_type)

    @app.callback(
        Output(IDs.Control.CLIPBOARD, "content"),
        Input(IDs.Control.CLIPBOARD, "n_clicks"),
        prevent_initial_call=True,
    )
    def copy_page_json(_n_clicks):
        if not session.has_dataset or session.view.is_empty:
            raise PreventUpdate
        return session.clipboard_payload()
