from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        # Bumped by every action callback; the render callback listens to it
        VIEW_VERSION = "view-version"

    class Control:
        # Loading
        UPLOAD = "csv-upload"
        SAMPLE_BTN = "sample-btn"
        LOAD_STATUS = "load-status"
        CURRENT_FILE = "current-file"

        # Search
        SEARCH_INPUT = "search-input"
        SEARCH_SCOPE = "search-scope"

        # Sort
        SORT_SELECT = "sort-select"
        SORT_BTN = "sort-btn"
        SORT_CLEAR_BTN = "sort-clear-btn"
        SORT_STATUS = "sort-status"

        # View mode
        VIEW_MODE = "view-mode"

        # Columns
        COLUMN_CHECKLIST = "column-checklist"
        COLUMNS_SHOW_ALL_BTN = "columns-show-all-btn"
        COLUMNS_HIDE_ALL_BTN = "columns-hide-all-btn"
        COLUMN_MOVE_SELECT = "column-move-select"
        COLUMN_MOVE_LEFT_BTN = "column-move-left-btn"
        COLUMN_MOVE_RIGHT_BTN = "column-move-right-btn"

        # Pagination
        PAGE_FIRST_BTN = "page-first-btn"
        PAGE_PREV_BTN = "page-prev-btn"
        PAGE_NEXT_BTN = "page-next-btn"
        PAGE_LAST_BTN = "page-last-btn"
        PAGE_LABEL = "page-label"
        PAGE_RANGE = "page-range"
        PAGE_SIZE_SELECT = "page-size-select"

        # Export
        EXPORT_JSON_BTN = "export-json-btn"
        EXPORT_CSV_BTN = "export-csv-btn"
        EXPORT_PAGE_ONLY = "export-page-only"
        DOWNLOAD = "download"
        CLIPBOARD = "clipboard"

        # Output panels
        SUMMARY = "summary"
        TABLE_CONTAINER = "table-container"
        JSON_CONTAINER = "json-container"
        TABLE_PANEL = "table-panel"
        JSON_PANEL = "json-panel"
        CONTROLS_PANEL = "controls-panel"
