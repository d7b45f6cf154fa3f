from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple

from csv_browser.core.exceptions import ReorderIndexError, UnknownFieldError
from csv_browser.core.state import ColumnState

if TYPE_CHECKING:
    from csv_browser.services.preferences import PreferenceGateway

logger = logging.getLogger(__name__)

DEFAULT_VISIBLE_COLUMNS = 10


class ColumnStateManager:
    """
    Owns column visibility and display order for one dataset.

    Every mutation returns a new ColumnState and is persisted straight away
    under keys namespaced by the dataset identity. The gateway is injected so
    each manager (and each test) can use its own store.
    """

    def __init__(
        self,
        fields: Sequence[str],
        identity: str,
        gateway: PreferenceGateway,
        default_visible_count: int = DEFAULT_VISIBLE_COLUMNS,
    ) -> None:
        self.fields: Tuple[str, ...] = tuple(fields)
        self.identity = identity
        self.gateway = gateway
        self.default_visible_count = default_visible_count

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------
    @property
    def visibility_key(self) -> str:
        return f"columns_{self.identity}"

    @property
    def order_key(self) -> str:
        return f"columnOrder_{self.identity}"

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------
    def default_state(self) -> ColumnState:
        return ColumnState(
            visible=frozenset(self.fields[: self.default_visible_count]),
            order=self.fields,
        )

    def load_column_settings(self) -> ColumnState:
        """
        Persisted state for this identity, falling back to defaults.

        Saved values are reconciled with the current schema: names that no
        longer exist are dropped and new fields are appended in schema order.
        """
        default = self.default_state()

        saved_visible = self._saved_names(self.visibility_key)
        saved_order = self._saved_names(self.order_key)

        if saved_visible is None:
            visible = default.visible
        else:
            known = set(self.fields)
            visible = frozenset(n for n in saved_visible if n in known)

        order = default.order if saved_order is None else self._reconcile_order(saved_order)

        if saved_visible is not None or saved_order is not None:
            logger.info("Restored column preferences", extra={"dataset": self.identity})

        return ColumnState(visible=visible, order=order)

    def _saved_names(self, key: str) -> Optional[List[str]]:
        value: Any = self.gateway.get_json(key)
        if value is None:
            return None
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            logger.warning("Ignoring malformed column preference", extra={"key": key})
            return None
        return value

    def _reconcile_order(self, saved: Sequence[str]) -> Tuple[str, ...]:
        known = set(self.fields)
        seen: set = set()
        order: List[str] = []
        for name in saved:
            if name in known and name not in seen:
                order.append(name)
                seen.add(name)
        order.extend(f for f in self.fields if f not in seen)
        return tuple(order)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def toggle_visibility(self, state: ColumnState, field: str) -> ColumnState:
        if field not in self.fields:
            raise UnknownFieldError(f"Unknown field '{field}'")
        visible = state.visible - {field} if field in state.visible else state.visible | {field}
        return self._persist(ColumnState(visible=frozenset(visible), order=state.order))

    def set_all_visible(self, state: ColumnState, show: bool) -> ColumnState:
        visible = frozenset(self.fields) if show else frozenset()
        return self._persist(ColumnState(visible=visible, order=state.order))

    def reorder(self, state: ColumnState, from_index: int, to_index: int) -> ColumnState:
        """
        Move the field at `from_index` to `to_index`, shifting the ones in between.
        Out-of-range indices are rejected, never clamped.
        """
        n = len(state.order)
        for name, idx in (("from_index", from_index), ("to_index", to_index)):
            if not 0 <= idx < n:
                raise ReorderIndexError(f"{name}={idx} outside [0, {n})")

        order = list(state.order)
        moved = order.pop(from_index)
        order.insert(to_index, moved)
        return self._persist(ColumnState(visible=state.visible, order=tuple(order)))

    # ------------------------------------------------------------------
    # Display + persistence
    # ------------------------------------------------------------------
    @staticmethod
    def display_columns(state: ColumnState) -> Tuple[str, ...]:
        """Order governs sequence, visible governs inclusion."""
        return tuple(f for f in state.order if f in state.visible)

    def _persist(self, state: ColumnState) -> ColumnState:
        # visible names are saved in display order so the file reads naturally
        self.gateway.set_json(self.visibility_key, list(self.display_columns(state)))
        self.gateway.set_json(self.order_key, list(state.order))
        return state
