from __future__ import annotations

import logging

from csv_browser.services.preferences import PreferenceGateway
from csv_browser.services.storage import InMemoryStorage, StorageBackend


class _ExplodingStorage(StorageBackend):
    def read(self, key):
        raise OSError("disk gone")

    def write(self, key, value):
        raise OSError("disk gone")

    def keys(self):
        return []


def test_get_and_set_never_raise(caplog):
    gateway = PreferenceGateway(_ExplodingStorage())

    with caplog.at_level(logging.ERROR):
        assert gateway.get("columns_x.csv") is None
        gateway.set("columns_x.csv", "[]")
        assert gateway.get_json("columns_x.csv") is None
        gateway.set_json("columns_x.csv", ["a"])

    assert caplog.text.count("Failed to read preference") == 2
    assert caplog.text.count("Failed to write preference") == 2


def test_json_helpers_roundtrip():
    gateway = PreferenceGateway(InMemoryStorage())

    gateway.set_json("columnOrder_x.csv", ["b", "ä"])

    assert gateway.get("columnOrder_x.csv") == '["b", "ä"]'
    assert gateway.get_json("columnOrder_x.csv") == ["b", "ä"]


def test_corrupt_json_reads_as_missing():
    gateway = PreferenceGateway(InMemoryStorage({"columns_x.csv": "[oops"}))

    assert gateway.get("columns_x.csv") == "[oops"
    assert gateway.get_json("columns_x.csv") is None
