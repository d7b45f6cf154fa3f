from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from csv_browser.config import BrowserConfig
from csv_browser.core.columns import ColumnStateManager
from csv_browser.core.dataset import Dataset, ingest
from csv_browser.core.exceptions import NoDatasetError
from csv_browser.core.sorting import request_sort
from csv_browser.core.state import ColumnState, FilterState, PageState, SortState
from csv_browser.core.view import View, recompute_view
from csv_browser.importing.csv_adapter import CsvParserAdapter, ParseIssue, ParseOptions, ParseResult
from csv_browser.importing.sample import SAMPLE_CSV, SAMPLE_IDENTITY
from csv_browser.importing.source import read_source, read_source_async
from csv_browser.services.export_service import ExportArtifact, ExportService, clipboard_payload
from csv_browser.services.preferences import PreferenceGateway

logger = logging.getLogger(__name__)


class ViewerSession:
    """
    The single writer for one viewer.

    Each public action is one atomic transition of dataset / column / filter /
    sort / page state, after which `view` is recomputed from scratch.

    A failed load changes nothing: the previous dataset and every piece of
    state that goes with it stay in place. The new dataset is only installed
    once it has been parsed, ingested and its column preferences loaded.
    """

    def __init__(
            self,
            gateway: PreferenceGateway,
            parser: Optional[CsvParserAdapter] = None,
            config: Optional[BrowserConfig] = None,
            export_service: Optional[ExportService] = None,
    ) -> None:
        self.config = config or BrowserConfig()
        self.gateway = gateway
        self.parser = parser or CsvParserAdapter(
            ParseOptions(
                max_rows=self.config.max_rows,
                encoding=self.config.encoding,
                delimiter=self.config.delimiter,
            )
        )
        self.export_service = export_service or ExportService(delimiter=self.config.delimiter)

        self.dataset: Optional[Dataset] = None
        self.columns: Optional[ColumnStateManager] = None
        self.column_state = ColumnState()
        self.filter_state = FilterState()
        self.sort_state = SortState()
        self.page_state = PageState(page_size=self.config.page_size)
        self.parse_issues: List[ParseIssue] = []
        self._view: Optional[View] = None

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------
    def load_text(self, text: str, identity: str) -> Dataset:
        return self._install(self.parser.parse_text(text), identity)

    def load_bytes(self, data: bytes, identity: str) -> Dataset:
        return self._install(self.parser.parse_bytes(data), identity)

    def load_file(self, path: str | Path) -> Dataset:
        path = Path(path)
        return self.load_bytes(read_source(path), path.name)

    async def load_file_async(self, path: str | Path) -> Dataset:
        path = Path(path)
        data = await read_source_async(path)
        return self.load_bytes(data, path.name)

    def load_sample(self) -> Dataset:
        return self.load_text(SAMPLE_CSV, SAMPLE_IDENTITY)

    def _install(self, result: ParseResult, identity: str) -> Dataset:
        # Everything is built before any attribute is touched
        dataset = ingest(result.fields, result.records, identity, truncated=result.truncated)
        manager = ColumnStateManager(
            dataset.fields,
            identity,
            self.gateway,
            default_visible_count=self.config.default_visible_columns,
        )
        column_state = manager.load_column_settings()

        self.dataset = dataset
        self.columns = manager
        self.column_state = column_state
        self.filter_state = FilterState()
        self.sort_state = SortState()
        self.page_state = PageState(
            page_size=self.page_state.page_size,
            show_all=self.page_state.show_all,
        )
        self.parse_issues = list(result.errors)
        self._recompute()

        logger.info(
            "Dataset loaded",
            extra={
                "dataset": identity,
                "rows": dataset.row_count,
                "truncated": dataset.truncated,
                "skipped_rows": len(self.parse_issues),
            },
        )
        return dataset

    # -------------------------------------------------------------------------
    # View
    # -------------------------------------------------------------------------
    @property
    def has_dataset(self) -> bool:
        return self.dataset is not None

    @property
    def view(self) -> View:
        if self._view is None:
            raise NoDatasetError("No dataset loaded")
        return self._view

    def _require_dataset(self) -> Dataset:
        if self.dataset is None:
            raise NoDatasetError("No dataset loaded")
        return self.dataset

    def _recompute(self) -> View:
        dataset = self._require_dataset()
        self._view = recompute_view(
            dataset,
            self.filter_state,
            self.sort_state,
            self.page_state,
            self.column_state,
        )
        # keep the stored index in range so next/previous move from what is shown
        if self._view.page.page_index != self.page_state.page_index:
            self.page_state = replace(self.page_state, page_index=self._view.page.page_index)
        return self._view

    # -------------------------------------------------------------------------
    # Search + sort
    # -------------------------------------------------------------------------
    def set_search(self, term: str, scope: Optional[str] = None) -> View:
        self._require_dataset()
        self.filter_state = FilterState(term=term or "", scope=scope)
        self.page_state = replace(self.page_state, page_index=1)
        return self._recompute()

    def request_sort(self, key: str) -> View:
        self._require_dataset()
        self.sort_state = request_sort(self.sort_state, key)
        return self._recompute()

    def clear_sort(self) -> View:
        self._require_dataset()
        self.sort_state = SortState()
        return self._recompute()

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------
    def go_to_page(self, page_index: int) -> View:
        self._require_dataset()
        self.page_state = replace(self.page_state, page_index=page_index)
        return self._recompute()

    def next_page(self) -> View:
        return self.go_to_page(self.page_state.page_index + 1)

    def previous_page(self) -> View:
        return self.go_to_page(self.page_state.page_index - 1)

    def first_page(self) -> View:
        return self.go_to_page(1)

    def last_page(self) -> View:
        return self.go_to_page(self.view.page.display_pages)

    def set_page_size(self, page_size: int) -> View:
        self._require_dataset()
        self.page_state = PageState(page_size=page_size, page_index=1)
        return self._recompute()

    def set_show_all(self, show_all: bool) -> View:
        self._require_dataset()
        self.page_state = replace(self.page_state, show_all=show_all, page_index=1)
        return self._recompute()

    # -------------------------------------------------------------------------
    # Columns
    # -------------------------------------------------------------------------
    def _manager(self) -> ColumnStateManager:
        if self.columns is None:
            raise NoDatasetError("No dataset loaded")
        return self.columns

    def toggle_column(self, field: str) -> View:
        self.column_state = self._manager().toggle_visibility(self.column_state, field)
        return self._recompute()

    def set_all_columns(self, show: bool) -> View:
        self.column_state = self._manager().set_all_visible(self.column_state, show)
        return self._recompute()

    def reorder_columns(self, from_index: int, to_index: int) -> View:
        self.column_state = self._manager().reorder(self.column_state, from_index, to_index)
        return self._recompute()

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------
    def _export_records(self, page_only: bool):
        view = self.view
        return view.records if page_only else view.matched

    def export_json(self, page_only: bool = False) -> Optional[ExportArtifact]:
        dataset = self._require_dataset()
        return self.export_service.export_json(
            dataset.identity, dataset.fields, self._export_records(page_only)
        )

    def export_csv(self, page_only: bool = False) -> Optional[ExportArtifact]:
        dataset = self._require_dataset()
        return self.export_service.export_csv(
            dataset.identity, dataset.fields, self._export_records(page_only)
        )

    def clipboard_payload(self) -> str:
        dataset = self._require_dataset()
        return clipboard_payload(self.view.records, dataset.fields)
