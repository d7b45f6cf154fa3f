from __future__ import annotations

from functools import cmp_to_key
from typing import Sequence

from csv_browser.core.dataset import Record
from csv_browser.core.state import ASCENDING, DESCENDING, SortState
from csv_browser.core.values import Value, as_number, as_text, is_numeric, to_value


def request_sort(current: SortState, key: str) -> SortState:
    """
    Header-click semantics: clicking the ascending column flips it to
    descending, anything else starts ascending on `key`.
    """
    if key == current.key and current.direction == ASCENDING:
        return SortState(key=key, direction=DESCENDING)
    return SortState(key=key, direction=ASCENDING)


def compare_values(a: Value, b: Value) -> int:
    """Numeric when both sides are numbers, code-point order otherwise."""
    if is_numeric(a) and is_numeric(b):
        x, y = as_number(a), as_number(b)
        return (x > y) - (x < y)
    s, t = as_text(a), as_text(b)
    return (s > t) - (s < t)


def apply_sort(records: Sequence[Record], state: SortState) -> Sequence[Record]:
    """
    Stable sort on `state.key`; equal keys keep their input order in both
    directions. key=None returns `records` itself.
    """
    if state.key is None:
        return records

    key = state.key
    sign = -1 if state.direction == DESCENDING else 1

    def cmp(a: Value, b: Value) -> int:
        return sign * compare_values(a, b)

    # decorate once so each record's value is tagged a single time
    decorated = [(to_value(r.get(key)), r) for r in records]
    wrapped = cmp_to_key(cmp)
    decorated.sort(key=lambda pair: wrapped(pair[0]))
    return tuple(r for _, r in decorated)
