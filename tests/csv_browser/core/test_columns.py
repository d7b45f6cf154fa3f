from __future__ import annotations

import itertools
import json
import logging

import pytest

from csv_browser.core.columns import ColumnStateManager
from csv_browser.core.dataset import ingest
from csv_browser.core.exceptions import ReorderIndexError, UnknownFieldError
from csv_browser.core.state import ColumnState
from csv_browser.services.preferences import PreferenceGateway
from csv_browser.services.storage import InMemoryStorage, StorageBackend


class _BrokenStorage(StorageBackend):
    def read(self, key):
        raise RuntimeError("store offline")

    def write(self, key, value):
        raise RuntimeError("store offline")

    def keys(self):
        return []


def _make_manager(fields=("a", "b", "c", "d"), storage=None, identity="data.csv"):
    storage = storage if storage is not None else InMemoryStorage()
    return ColumnStateManager(fields, identity, PreferenceGateway(storage)), storage


def test_defaults_show_first_ten_fields_in_natural_order():
    fields = [f"f{i}" for i in range(12)]
    manager, _ = _make_manager(fields)

    state = manager.load_column_settings()

    assert state.order == tuple(fields)
    assert state.visible == frozenset(fields[:10])


def test_toggle_flips_membership_and_persists():
    manager, storage = _make_manager()
    state = manager.load_column_settings()

    state = manager.toggle_visibility(state, "b")
    assert not state.is_visible("b")
    assert json.loads(storage.read("columns_data.csv")) == ["a", "c", "d"]
    assert json.loads(storage.read("columnOrder_data.csv")) == ["a", "b", "c", "d"]

    state = manager.toggle_visibility(state, "b")
    assert state.is_visible("b")
    assert json.loads(storage.read("columns_data.csv")) == ["a", "b", "c", "d"]


def test_toggle_does_not_touch_dataset():
    ds = ingest(["a", "b"], [{"a": "1", "b": "2"}], identity="data.csv")
    snapshot = ([dict(r) for r in ds.records], ds.fields)
    manager = ColumnStateManager(ds.fields, ds.identity, PreferenceGateway(InMemoryStorage()))

    manager.toggle_visibility(manager.load_column_settings(), "a")

    assert ([dict(r) for r in ds.records], ds.fields) == snapshot


def test_toggle_unknown_field_is_rejected():
    manager, _ = _make_manager()

    with pytest.raises(UnknownFieldError):
        manager.toggle_visibility(manager.load_column_settings(), "zzz")


def test_set_all_visible():
    manager, storage = _make_manager()
    state = manager.load_column_settings()

    hidden = manager.set_all_visible(state, False)
    assert hidden.visible == frozenset()
    assert json.loads(storage.read("columns_data.csv")) == []

    shown = manager.set_all_visible(hidden, True)
    assert shown.visible == frozenset({"a", "b", "c", "d"})
    assert shown.order == state.order


def test_reorder_moves_and_shifts():
    manager, storage = _make_manager()
    state = manager.load_column_settings()

    moved = manager.reorder(state, 0, 2)

    assert moved.order == ("b", "c", "a", "d")
    assert json.loads(storage.read("columnOrder_data.csv")) == ["b", "c", "a", "d"]


def test_reorder_round_trip_restores_order():
    manager, _ = _make_manager()
    state = manager.load_column_settings()

    for i, j in itertools.permutations(range(len(state.order)), 2):
        there = manager.reorder(state, i, j)
        back = manager.reorder(there, j, i)
        assert back.order == state.order, (i, j)


@pytest.mark.parametrize("from_index,to_index", [(-1, 0), (0, 4), (4, 0), (0, -1)])
def test_reorder_rejects_out_of_range_indices(from_index, to_index):
    manager, storage = _make_manager()
    state = manager.load_column_settings()

    with pytest.raises(IndexError):
        manager.reorder(state, from_index, to_index)

    with pytest.raises(ReorderIndexError):
        manager.reorder(state, from_index, to_index)

    assert storage.keys() == []


def test_display_columns_follow_order_and_visibility():
    state = ColumnState(visible=frozenset({"a", "c"}), order=("c", "b", "a"))

    assert ColumnStateManager.display_columns(state) == ("c", "a")


def test_saved_preferences_are_restored():
    storage = InMemoryStorage(
        {
            "columns_data.csv": json.dumps(["b"]),
            "columnOrder_data.csv": json.dumps(["d", "c", "b", "a"]),
        }
    )
    manager, _ = _make_manager(storage=storage)

    state = manager.load_column_settings()

    assert state.visible == frozenset({"b"})
    assert state.order == ("d", "c", "b", "a")


def test_saved_preferences_are_reconciled_with_schema():
    storage = InMemoryStorage(
        {
            "columns_data.csv": json.dumps(["gone", "a"]),
            "columnOrder_data.csv": json.dumps(["gone", "c", "c", "a"]),
        }
    )
    manager, _ = _make_manager(storage=storage)

    state = manager.load_column_settings()

    assert state.visible == frozenset({"a"})
    assert state.order == ("c", "a", "b", "d")


@pytest.mark.parametrize("raw", ["{not json", json.dumps({"a": 1}), json.dumps([1, 2])])
def test_corrupt_preferences_fall_back_to_defaults(raw):
    storage = InMemoryStorage({"columns_data.csv": raw, "columnOrder_data.csv": raw})
    manager, _ = _make_manager(storage=storage)

    assert manager.load_column_settings() == manager.default_state()


def test_failing_store_falls_back_to_defaults(caplog):
    manager, _ = _make_manager(storage=_BrokenStorage())

    with caplog.at_level(logging.ERROR):
        state = manager.load_column_settings()
        # writes fail silently too
        toggled = manager.toggle_visibility(state, "a")

    assert state == manager.default_state()
    assert not toggled.is_visible("a")
    assert "Failed to read preference" in caplog.text
    assert "Failed to write preference" in caplog.text


def test_preferences_are_namespaced_by_identity():
    storage = InMemoryStorage()
    first, _ = _make_manager(storage=storage, identity="one.csv")
    second, _ = _make_manager(storage=storage, identity="two.csv")

    first.set_all_visible(first.load_column_settings(), False)

    assert second.load_column_settings().visible == frozenset({"a", "b", "c", "d"})
    assert first.load_column_settings().visible == frozenset()
