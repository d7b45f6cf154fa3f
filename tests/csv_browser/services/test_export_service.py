from __future__ import annotations

import json

import pytest

from csv_browser.core.dataset import ingest
from csv_browser.services.export_service import (
    ExportService,
    clipboard_payload,
    export_filename,
    to_delimited_text,
    to_json,
)


def _make_dataset():
    return ingest(
        ["id", "name", "note"],
        [
            {"id": "1", "name": "Ada", "note": "x,y"},
            {"id": "2", "name": "Bjørn", "note": 'say "hi"'},
            {"id": "3", "name": "Chen", "note": "line\nbreak"},
        ],
        identity="people.csv",
    )


def test_json_is_two_space_indented_array():
    assert to_json([{"a": "1"}]) == '[\n  {\n    "a": "1"\n  }\n]'
    assert to_json([]) == "[]"


def test_json_export_round_trips():
    ds = _make_dataset()

    parsed = json.loads(to_json(ds.records, ds.fields))

    assert parsed == [dict(r) for r in ds.records]
    assert list(parsed[0].keys()) == ["id", "name", "note"]


def test_json_keeps_non_ascii_characters():
    ds = _make_dataset()

    assert "Bjørn" in to_json(ds.records)


def test_delimited_text_uses_schema_order_and_quotes_when_needed():
    ds = _make_dataset()

    text = to_delimited_text(ds.fields, ds.records[:2])

    assert text == 'id,name,note\r\n1,Ada,"x,y"\r\n2,Bjørn,"say ""hi"""\r\n'


def test_delimited_text_of_nothing_is_just_the_header():
    assert to_delimited_text(["a", "b"], []) == "a,b\r\n"


def test_delimited_text_keeps_values_as_strings():
    text = to_delimited_text(["code", "note"], [{"code": "007", "note": ""}])

    assert text == "code,note\r\n007,\r\n"


@pytest.mark.parametrize(
    "identity,extension,expected",
    [
        ("data.csv", "json", "data_export.json"),
        ("data.csv", "csv", "data_export.csv"),
        ("report.csv.csv", "csv", "report.csv_export.csv"),
        ("notes.txt", "json", "notes.txt_export.json"),
        ("DATA.CSV", "csv", "DATA.CSV_export.csv"),
    ],
)
def test_export_filename(identity, extension, expected):
    assert export_filename(identity, extension) == expected


def test_export_service_builds_artifacts():
    ds = _make_dataset()
    service = ExportService()

    json_artifact = service.export_json(ds.identity, ds.fields, ds.records)
    csv_artifact = service.export_csv(ds.identity, ds.fields, ds.records)

    assert json_artifact.filename == "people_export.json"
    assert json_artifact.mime_type == "application/json"
    assert json.loads(json_artifact.content)[2]["note"] == "line\nbreak"

    assert csv_artifact.filename == "people_export.csv"
    assert csv_artifact.content.startswith("id,name,note\r\n")


def test_export_service_skips_empty_sequences():
    service = ExportService()

    assert service.export_json("people.csv", ["id"], []) is None
    assert service.export_csv("people.csv", ["id"], []) is None


def test_clipboard_payload_is_json_of_given_page():
    ds = _make_dataset()

    payload = clipboard_payload(ds.records[:1], ds.fields)

    assert json.loads(payload) == [{"id": "1", "name": "Ada", "note": "x,y"}]
