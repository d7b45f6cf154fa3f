from __future__ import annotations

from typing import Sequence

from csv_browser.core.dataset import Record
from csv_browser.core.state import FilterState


def _contains(value: object, needle: str) -> bool:
    return needle in str(value).lower()


def apply_filter(records: Sequence[Record], state: FilterState) -> Sequence[Record]:
    """
    Keep records whose value contains the search term (case-insensitive).

    Searching all fields includes columns that are currently hidden.
    A blank term returns `records` itself, untouched.
    """
    if not state.term.strip():
        return records

    needle = state.term.lower()

    if state.searches_all_fields:
        return tuple(
            r for r in records
            if any(_contains(v, needle) for v in r.values())
        )

    scope = state.scope
    return tuple(r for r in records if _contains(r.get(scope, ""), needle))
