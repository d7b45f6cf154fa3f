from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State
from dash.exceptions import PreventUpdate

from csv_browser.ui.callbacks.callbacks_utils import column_control_values
from csv_browser.ui.helpers import (
    json_preview,
    range_text,
    records_table,
    scope_from_value,
    sort_status,
    summary_text,
)
from csv_browser.ui.ids import IDs
from csv_browser.ui.layout.build_table_panel import SHOW_ALL_VALUE

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}
SHOWN = {"display": "block"}


def register_view_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    session = ctx.session

    # ---------------------------------------------------------
    # 1. Search (term + scope)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_VERSION, "data", allow_duplicate=True),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.SEARCH_SCOPE, "value"),
        State(IDs.Store.VIEW_VERSION, "data"),
        prevent_initial_call=True,
    )
    def on_search(term, scope_value, version):
        if not session.has_dataset:
            raise PreventUpdate
        session.set_search(term or "", scope_from_value(scope_value))
        return (version or 0) + 1

    # ---------------------------------------------------------
    # 2. Sort
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_VERSION, "data", allow_duplicate=True),
        Input(IDs.Control.SORT_BTN, "n_clicks"),
        Input(IDs.Control.SORT_CLEAR_BTN, "n_clicks"),
        State(IDs.Control.SORT_SELECT, "value"),
        State(IDs.Store.VIEW_VERSION, "data"),
        prevent_initial_call=True,
    )
    def on_sort(_sort_clicks, _clear_clicks, key, version):
        if not session.has_dataset:
            raise PreventUpdate
        if dash.ctx.triggered_id == IDs.Control.SORT_CLEAR_BTN:
            session.clear_sort()
        elif key:
            session.request_sort(key)
        else:
            raise PreventUpdate
        return (version or 0) + 1

    # ---------------------------------------------------------
    # 3. Pagination
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_VERSION, "data", allow_duplicate=True),
        Input(IDs.Control.PAGE_FIRST_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_PREV_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_NEXT_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_LAST_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        State(IDs.Store.VIEW_VERSION, "data"),
        prevent_initial_call=True,
    )
    def on_page(_first, _prev, _next, _last, size_value, version):
        if not session.has_dataset:
            raise PreventUpdate

        triggered = dash.ctx.triggered_id
        if triggered == IDs.Control.PAGE_FIRST_BTN:
            session.first_page()
        elif triggered == IDs.Control.PAGE_PREV_BTN:
            session.previous_page()
        elif triggered == IDs.Control.PAGE_NEXT_BTN:
            session.next_page()
        elif triggered == IDs.Control.PAGE_LAST_BTN:
            session.last_page()
        elif triggered == IDs.Control.PAGE_SIZE_SELECT:
            if size_value == SHOW_ALL_VALUE:
                session.set_show_all(True)
            else:
                session.set_page_size(int(size_value))
        return (version or 0) + 1

    # ---------------------------------------------------------
    # 4. Columns: visibility + order
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_VERSION, "data", allow_duplicate=True),
        Output(IDs.Control.COLUMN_CHECKLIST, "options", allow_duplicate=True),
        Output(IDs.Control.COLUMN_CHECKLIST, "value", allow_duplicate=True),
        Output(IDs.Control.COLUMN_MOVE_SELECT, "options", allow_duplicate=True),
        Output(IDs.Control.COLUMN_MOVE_SELECT, "value"),
        Input(IDs.Control.COLUMN_CHECKLIST, "value"),
        Input(IDs.Control.COLUMNS_SHOW_ALL_BTN, "n_clicks"),
        Input(IDs.Control.COLUMNS_HIDE_ALL_BTN, "n_clicks"),
        Input(IDs.Control.COLUMN_MOVE_LEFT_BTN, "n_clicks"),
        Input(IDs.Control.COLUMN_MOVE_RIGHT_BTN, "n_clicks"),
        State(IDs.Control.COLUMN_MOVE_SELECT, "value"),
        State(IDs.Store.VIEW_VERSION, "data"),
        prevent_initial_call=True,
    )
    def on_columns(checked, _show, _hide, _left, _right, move_value, version):
        if not session.has_dataset:
            raise PreventUpdate

        triggered = dash.ctx.triggered_id
        move_to = move_value

        if triggered == IDs.Control.COLUMN_CHECKLIST:
            # the checklist reports the whole selection; apply each difference as a toggle
            changed = set(checked or []) ^ set(session.column_state.visible)
            if not changed:
                raise PreventUpdate
            for name in sorted(changed):
                session.toggle_column(name)
        elif triggered == IDs.Control.COLUMNS_SHOW_ALL_BTN:
            session.set_all_columns(True)
        elif triggered == IDs.Control.COLUMNS_HIDE_ALL_BTN:
            session.set_all_columns(False)
        elif triggered in (IDs.Control.COLUMN_MOVE_LEFT_BTN, IDs.Control.COLUMN_MOVE_RIGHT_BTN):
            if move_value is None:
                raise PreventUpdate
            index = int(move_value)
            step = -1 if triggered == IDs.Control.COLUMN_MOVE_LEFT_BTN else 1
            target = index + step
            if not 0 <= target < len(session.column_state.order):
                raise PreventUpdate
            session.reorder_columns(index, target)
            # keep the moved column selected
            move_to = str(target)

        options, value, move_options = column_control_values(session)
        return (version or 0) + 1, options, value, move_options, move_to

    # ---------------------------------------------------------
    # 5. Render
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_CONTAINER, "children"),
        Output(IDs.Control.JSON_CONTAINER, "children"),
        Output(IDs.Control.SUMMARY, "children"),
        Output(IDs.Control.PAGE_LABEL, "children"),
        Output(IDs.Control.PAGE_RANGE, "children"),
        Output(IDs.Control.SORT_STATUS, "children"),
        Output(IDs.Control.CURRENT_FILE, "children"),
        Output(IDs.Control.CONTROLS_PANEL, "style"),
        Output(IDs.Control.TABLE_PANEL, "style"),
        Output(IDs.Control.JSON_PANEL, "style"),
        Output(IDs.Control.PAGE_FIRST_BTN, "disabled"),
        Output(IDs.Control.PAGE_PREV_BTN, "disabled"),
        Output(IDs.Control.PAGE_NEXT_BTN, "disabled"),
        Output(IDs.Control.PAGE_LAST_BTN, "disabled"),
        Input(IDs.Store.VIEW_VERSION, "data"),
        Input(IDs.Control.VIEW_MODE, "value"),
    )
    def render(_version, view_mode):
        if not session.has_dataset:
            return (
                None, None, None, "", "", "", "",
                HIDDEN, SHOWN, HIDDEN,
                True, True, True, True,
            )

        view = session.view
        dataset = session.dataset
        page = view.page
        as_json = view_mode == "json"

        return (
            records_table(view) if not as_json else dash.no_update,
            json_preview(view, dataset.fields) if as_json else dash.no_update,
            summary_text(view, bool(session.filter_state.term.strip()), dataset.truncated),
            page.label,
            range_text(view),
            sort_status(session.sort_state),
            f"Current file: {dataset.identity}",
            SHOWN,
            HIDDEN if as_json else SHOWN,
            SHOWN if as_json else HIDDEN,
            not page.has_previous,
            not page.has_previous,
            not page.has_next,
            not page.has_next,
        )
