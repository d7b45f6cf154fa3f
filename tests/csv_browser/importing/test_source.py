import asyncio
import base64

import pytest

from csv_browser.core.exceptions import ContentReadError
from csv_browser.importing.source import decode_upload, read_source, read_source_async


def _data_url(payload: bytes) -> str:
    return "data:text/csv;base64," + base64.b64encode(payload).decode("ascii")


def test_read_source_returns_bytes(tmp_path):
    path = tmp_path / "a.csv"
    path.write_bytes(b"a,b\n1,2\n")

    assert read_source(path) == b"a,b\n1,2\n"
    assert asyncio.run(read_source_async(path)) == b"a,b\n1,2\n"


def test_read_source_missing_file(tmp_path):
    with pytest.raises(ContentReadError):
        read_source(tmp_path / "missing.csv")

    with pytest.raises(ContentReadError):
        asyncio.run(read_source_async(tmp_path / "missing.csv"))


def test_decode_upload_roundtrip():
    assert decode_upload(_data_url(b"x,y\n1,2\n")) == b"x,y\n1,2\n"


@pytest.mark.parametrize(
    "contents",
    [
        "",
        "no comma here",
        "data:text/csv,plain text",
        "data:text/csv;base64,@@not-base64@@",
    ],
)
def test_decode_upload_rejects_bad_payloads(contents):
    with pytest.raises(ContentReadError):
        decode_upload(contents)
