from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from csv_browser.core.dataset import Record
from csv_browser.core.state import PageState


@dataclass(frozen=True)
class Page:
    """
    One slice of a sequence.

    total_pages is 0 for an empty sequence; display_pages is what the
    UI shows ("1 of 1").
    """
    records: Tuple[Record, ...]
    total_pages: int
    page_index: int
    page_size: int
    total_items: int

    @property
    def display_pages(self) -> int:
        return max(self.total_pages, 1)

    @property
    def label(self) -> str:
        return f"{self.page_index} of {self.display_pages}"

    @property
    def first_item(self) -> int:
        """1-based number of the first record on this page, 0 when empty."""
        if not self.records:
            return 0
        return (self.page_index - 1) * self.page_size + 1

    @property
    def last_item(self) -> int:
        if not self.records:
            return 0
        return self.first_item + len(self.records) - 1

    @property
    def has_previous(self) -> bool:
        return self.page_index > 1

    @property
    def has_next(self) -> bool:
        return self.page_index < self.total_pages


def total_pages(n_items: int, page_size: int) -> int:
    return -(-n_items // page_size)


def clamp_page_index(page_index: int, n_pages: int) -> int:
    return min(max(page_index, 1), max(n_pages, 1))


def paginate(sequence: Sequence[Record], page_size: int, page_index: int) -> Page:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    n = len(sequence)
    n_pages = total_pages(n, page_size)
    index = clamp_page_index(page_index, n_pages)
    start = (index - 1) * page_size

    return Page(
        records=tuple(sequence[start:start + page_size]),
        total_pages=n_pages,
        page_index=index,
        page_size=page_size,
        total_items=n,
    )


def show_all_state(sequence: Sequence[Record]) -> PageState:
    """Single page holding everything (one empty page for an empty sequence)."""
    return PageState(page_size=max(len(sequence), 1), page_index=1)


def paginate_state(sequence: Sequence[Record], state: PageState) -> Page:
    if state.show_all:
        state = show_all_state(sequence)
    return paginate(sequence, state.page_size, state.page_index)
