"""
Core domain layer: the immutable dataset, view state, and the
filter -> sort -> paginate pipeline with column preferences.
"""

from .dataset import Dataset, ingest
from .columns import ColumnStateManager
from .state import ColumnState, FilterState, PageState, SortState
from .view import View, recompute_view

__all__ = [
    "ColumnState",
    "ColumnStateManager",
    "Dataset",
    "FilterState",
    "PageState",
    "SortState",
    "View",
    "ingest",
    "recompute_view",
]
