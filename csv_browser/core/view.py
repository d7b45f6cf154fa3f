from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from csv_browser.core.columns import ColumnStateManager
from csv_browser.core.dataset import Dataset, Record
from csv_browser.core.filtering import apply_filter
from csv_browser.core.pagination import Page, paginate_state
from csv_browser.core.sorting import apply_sort
from csv_browser.core.state import ColumnState, FilterState, PageState, SortState


@dataclass(frozen=True)
class View:
    """
    Ephemeral result of Filter -> Sort -> Pagination. Never persisted.

    - records: the current page
    - matched: every record that passed the filter, in sorted order
    - columns: fields to display, in display order
    """
    records: Tuple[Record, ...]
    matched: Tuple[Record, ...]
    columns: Tuple[str, ...]
    page: Page
    total_rows: int

    @property
    def match_count(self) -> int:
        return len(self.matched)

    @property
    def is_empty(self) -> bool:
        return not self.records


def recompute_view(
    dataset: Dataset,
    filter_state: FilterState,
    sort_state: SortState,
    page_state: PageState,
    column_state: ColumnState,
) -> View:
    filtered = apply_filter(dataset.records, filter_state)
    ordered = tuple(apply_sort(filtered, sort_state))
    page = paginate_state(ordered, page_state)

    return View(
        records=page.records,
        matched=ordered,
        columns=ColumnStateManager.display_columns(column_state),
        page=page,
        total_rows=dataset.row_count,
    )
