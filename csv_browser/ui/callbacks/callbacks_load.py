from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, html
from dash.exceptions import PreventUpdate

from csv_browser.core.exceptions import (
    ContentReadError,
    IngestError,
    ParseError,
    ProcessingError,
)
from csv_browser.importing.source import decode_upload
from csv_browser.services.viewer_session import ViewerSession
from csv_browser.ui.callbacks.callbacks_utils import column_control_values
from csv_browser.ui.helpers import ALL_FIELDS_VALUE, field_options, scope_options
from csv_browser.ui.ids import IDs

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

LOAD_ERRORS = (ContentReadError, ParseError, ProcessingError, IngestError)


def register_load_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Store.VIEW_VERSION, "data", allow_duplicate=True),
        Output(IDs.Control.LOAD_STATUS, "children"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.SEARCH_SCOPE, "options"),
        Output(IDs.Control.SEARCH_SCOPE, "value"),
        Output(IDs.Control.SORT_SELECT, "options"),
        Output(IDs.Control.SORT_SELECT, "value"),
        Output(IDs.Control.COLUMN_CHECKLIST, "options", allow_duplicate=True),
        Output(IDs.Control.COLUMN_CHECKLIST, "value", allow_duplicate=True),
        Output(IDs.Control.COLUMN_MOVE_SELECT, "options", allow_duplicate=True),
        Input(IDs.Control.UPLOAD, "contents"),
        Input(IDs.Control.SAMPLE_BTN, "n_clicks"),
        State(IDs.Control.UPLOAD, "filename"),
        State(IDs.Store.VIEW_VERSION, "data"),
        prevent_initial_call=True,
    )
    def load_dataset(contents, _sample_clicks, filename, version):
        """
        Parse + ingest the uploaded file (or the sample). On failure the
        previously loaded dataset stays on screen and only the error is shown.
        """
        session = ctx.session
        triggered = dash.ctx.triggered_id

        try:
            if triggered == IDs.Control.SAMPLE_BTN:
                dataset = session.load_sample()
            else:
                if not contents:
                    raise PreventUpdate
                dataset = session.load_bytes(decode_upload(contents), filename or "upload.csv")
        except LOAD_ERRORS as e:
            logger.error("Load failed", extra={"file": filename, "error": str(e)})
            alert = dbc.Alert(str(e), color="danger", className="mb-0 small")
            return tuple(alert if i == 1 else dash.no_update for i in range(10))

        notes = []
        if session.parse_issues:
            notes.append(f"{len(session.parse_issues)} malformed row(s) were skipped.")
        if dataset.truncated:
            notes.append(f"Only the first {dataset.row_count:,} rows were loaded.")
        status = (
            dbc.Alert(" ".join(notes), color="warning", className="mb-0 small")
            if notes
            else html.Span()
        )

        return loaded_control_values(session, (version or 0) + 1, status)


def loaded_control_values(session: ViewerSession, version: int, status) -> tuple:
    """
    Outputs of a successful load, in callback order. Every control that
    names a field is reset so nothing from the previous file stays selected.
    """
    dataset = session.dataset
    checklist_options, checklist_value, move_options = column_control_values(session)
    return (
        version,
        status,
        "",
        scope_options(dataset),
        ALL_FIELDS_VALUE,
        field_options(dataset.fields),
        None,
        checklist_options,
        checklist_value,
        move_options,
    )
