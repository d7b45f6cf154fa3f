from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from pathlib import Path

from csv_browser.core.exceptions import ContentReadError

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 100_000_000


def read_source(path: str | Path) -> bytes:
    """Read raw file content. OS failures become ContentReadError."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read source", extra={"path": str(path), "error": str(e)})
        raise ContentReadError(f"Could not read '{path.name}': {e.strerror or e}") from e
    logger.info("Read source", extra={"path": str(path), "bytes": len(data)})
    return data


async def read_source_async(path: str | Path) -> bytes:
    """Suspends the caller until the content is available or the read fails."""
    return await asyncio.to_thread(read_source, path)


def decode_upload(contents: str) -> bytes:
    """
    Decode a Dash `dcc.Upload` payload ("data:<mime>;base64,<data>").
    """
    if not contents or "," not in contents:
        raise ContentReadError("Upload payload is empty or malformed")

    header, _, b64data = contents.partition(",")
    if ";base64" not in header:
        raise ContentReadError("Upload payload is not base64 encoded")

    try:
        data = base64.b64decode(b64data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ContentReadError(f"Upload payload could not be decoded: {e}") from e

    if len(data) > MAX_UPLOAD_BYTES:
        raise ContentReadError(
            f"Upload is {len(data)} bytes, more than the {MAX_UPLOAD_BYTES} byte limit"
        )
    return data
