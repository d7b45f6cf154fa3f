from __future__ import annotations

from typing import List, Optional

from dash import dash_table, html

from csv_browser.core.dataset import Dataset
from csv_browser.core.state import ASCENDING, SortState
from csv_browser.core.view import View
from csv_browser.services.export_service import to_json

ROW_NUMBER_COLUMN = "__row__"
ALL_FIELDS_VALUE = "__all__"


def scope_options(dataset: Optional[Dataset]) -> List[dict]:
    options = [{"label": "All columns", "value": ALL_FIELDS_VALUE}]
    if dataset is not None:
        options.extend({"label": f, "value": f} for f in dataset.fields)
    return options


def scope_from_value(value: Optional[str]) -> Optional[str]:
    if not value or value == ALL_FIELDS_VALUE:
        return None
    return value


def field_options(fields) -> List[dict]:
    return [{"label": f, "value": f} for f in fields]


def sort_status(state: SortState) -> str:
    if state.key is None:
        return "Unsorted"
    arrow = "▲" if state.direction == ASCENDING else "▼"
    return f"Sorted by {state.key} {arrow}"


def summary_text(view: View, searching: bool, truncated: bool) -> List:
    lines = [html.Div(f"Total records: {view.total_rows:,}")]
    if searching:
        lines.append(html.Div(f"Search results: {view.match_count:,}"))
    if truncated:
        lines.append(
            html.Div(
                "Only the first rows of this file were loaded.",
                className="text-warning",
            )
        )
    return lines


def range_text(view: View) -> str:
    page = view.page
    return f"Showing {page.first_item} - {page.last_item} of {page.total_items}"


def records_table(view: View):
    """
    Build a Dash DataTable for the current page.
    The first column is the 1-based position within the matched records.
    """
    if view.is_empty:
        return html.Div("No matching records.", className="text-muted p-3 text-center")

    offset = view.page.first_item
    data = []
    for i, record in enumerate(view.records):
        row = {ROW_NUMBER_COLUMN: offset + i}
        row.update({c: record.get(c, "") for c in view.columns})
        data.append(row)

    columns = [{"name": "No.", "id": ROW_NUMBER_COLUMN}]
    columns.extend({"name": c, "id": c} for c in view.columns)

    return dash_table.DataTable(
        data=data,
        columns=columns,
        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif',
            "fontSize": "12px",
            "padding": "6px 8px",
            "textAlign": "left",
            "whiteSpace": "normal",
        },
        style_header={
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
        },
        style_data_conditional=[
            {"if": {"row_index": "odd"}, "backgroundColor": "#fafafa"},
        ],
    )


def json_preview(view: View, fields) -> html.Pre:
    return html.Pre(
        to_json(view.records, fields),
        className="small mb-0",
        style={"whiteSpace": "pre-wrap", "maxHeight": "32rem", "overflow": "auto"},
    )
