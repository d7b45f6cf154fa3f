from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"
CSV_MIME = "text/csv;charset=utf-8"


def _as_objects(
    records: Sequence[Mapping[str, Any]],
    fields: Optional[Sequence[str]] = None,
) -> List[Dict[str, Any]]:
    if fields is None:
        return [dict(r) for r in records]
    return [{f: r.get(f, "") for f in fields} for r in records]


def to_json(
    records: Sequence[Mapping[str, Any]],
    fields: Optional[Sequence[str]] = None,
) -> str:
    """
    Pretty-printed (2-space) JSON array of record objects.
    When `fields` is given, each object carries exactly those keys in that order.
    """
    return json.dumps(_as_objects(records, fields), indent=2, ensure_ascii=False)


def to_delimited_text(
    fields: Sequence[str],
    records: Sequence[Mapping[str, Any]],
    delimiter: str = ",",
) -> str:
    """
    Header row in schema order, then one row per record.
    Quoting is minimal: only values containing the delimiter, quotes or newlines.
    """
    frame = pd.DataFrame(_as_objects(records, fields), columns=list(fields), dtype=object)
    return frame.to_csv(index=False, sep=delimiter, lineterminator="\r\n")


def export_filename(identity: str, extension: str) -> str:
    stem = identity[: -len(".csv")] if identity.endswith(".csv") else identity
    return f"{stem}_export.{extension}"


def clipboard_payload(
    page_records: Sequence[Mapping[str, Any]],
    fields: Optional[Sequence[str]] = None,
) -> str:
    """JSON text of the current page only."""
    return to_json(page_records, fields)


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    content: str
    mime_type: str


class ExportService:
    """
    Packages record sequences into downloadable artifacts.
    Stateless: callers pass whichever sequence they want exported
    (the full filtered set or just the current page).
    """

    def __init__(self, *, delimiter: str = ","):
        self.delimiter = delimiter

    def export_json(
        self,
        identity: str,
        fields: Sequence[str],
        records: Sequence[Mapping[str, Any]],
    ) -> Optional[ExportArtifact]:
        if not records:
            logger.info("Nothing to export", extra={"dataset": identity, "format": "json"})
            return None
        artifact = ExportArtifact(
            filename=export_filename(identity, "json"),
            content=to_json(records, fields),
            mime_type=JSON_MIME,
        )
        logger.info("Exported JSON", extra={"dataset": identity, "rows": len(records)})
        return artifact

    def export_csv(
        self,
        identity: str,
        fields: Sequence[str],
        records: Sequence[Mapping[str, Any]],
    ) -> Optional[ExportArtifact]:
        if not records:
            logger.info("Nothing to export", extra={"dataset": identity, "format": "csv"})
            return None
        artifact = ExportArtifact(
            filename=export_filename(identity, "csv"),
            content=to_delimited_text(fields, records, self.delimiter),
            mime_type=CSV_MIME,
        )
        logger.info("Exported CSV", extra={"dataset": identity, "rows": len(records)})
        return artifact
