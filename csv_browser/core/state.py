from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

ASCENDING = "ascending"
DESCENDING = "descending"

# Accepted when a scope arrives as a string (UI dropdown, saved dicts)
ALL_FIELDS_ALIAS = "all"


@dataclass(frozen=True)
class FilterState:
    """
    Current search.

    - term: raw search text; blank means no filtering
    - scope: field to search in, or None to search every field
    """
    term: str = ""
    scope: Optional[str] = None

    @property
    def searches_all_fields(self) -> bool:
        return self.scope is None

    def to_dict(self) -> Dict[str, Any]:
        return {"term": self.term, "scope": self.scope if self.scope is not None else ALL_FIELDS_ALIAS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        scope = data.get("scope")
        if scope in (None, "", ALL_FIELDS_ALIAS):
            scope = None
        return cls(term=str(data.get("term") or ""), scope=scope)


@dataclass(frozen=True)
class SortState:
    """key=None keeps the filter output order."""
    key: Optional[str] = None
    direction: str = ASCENDING

    def __post_init__(self) -> None:
        if self.direction not in (ASCENDING, DESCENDING):
            raise ValueError(f"Unknown sort direction: {self.direction!r}")


@dataclass(frozen=True)
class PageState:
    page_size: int = 10
    page_index: int = 1
    show_all: bool = False

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")


@dataclass(frozen=True)
class ColumnState:
    """
    Which fields are shown and in what order.

    Invariant: `order` is a permutation of the dataset fields and
    `visible` is a subset of them.
    """
    visible: FrozenSet[str] = field(default_factory=frozenset)
    order: Tuple[str, ...] = ()

    def is_visible(self, name: str) -> bool:
        return name in self.visible
