from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Sequence, Tuple

from csv_browser.core.exceptions import IngestError, ProcessingError

logger = logging.getLogger(__name__)

Record = Mapping[str, str]


@dataclass(frozen=True)
class Dataset:
    """
    Immutable ingested dataset.

    - identity: name the dataset was loaded under (usually the file name),
      also used to namespace persisted column preferences
    - fields: schema in source order
    - records: read-only mappings, one per ingested row, each holding every field
    - truncated: True when the source held more rows than the row cap

    A new load replaces the Dataset wholesale; nothing mutates it in place.
    """
    identity: str
    fields: Tuple[str, ...]
    records: Tuple[Record, ...]
    truncated: bool = False

    @property
    def row_count(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:
        return (
            f"Dataset(identity={self.identity!r}, fields={len(self.fields)}, "
            f"rows={self.row_count}, truncated={self.truncated})"
        )


def _cell(value: Any) -> str:
    if value is None:
        return ""
    # pandas NaN survives fillna in some object columns
    if isinstance(value, float) and value != value:
        return ""
    return str(value)


def ingest(
    fields: Sequence[str] | None,
    records: Iterable[Mapping[str, Any]] | None,
    identity: str,
    *,
    truncated: bool = False,
) -> Dataset:
    """
    Build a read-only Dataset from parser output.

    Raises:
        ProcessingError: parser output has no schema or a row isn't a mapping
        IngestError: the schema contains duplicate field names
    """
    if fields is None:
        raise ProcessingError("Parser output has no schema (fields missing)")
    if isinstance(fields, (str, bytes)) or not isinstance(fields, Sequence):
        raise ProcessingError(f"Unexpected schema type: {type(fields).__name__}")
    if records is None:
        raise ProcessingError("Parser output has no records")

    schema = tuple(str(f) for f in fields)

    duplicates = sorted(name for name, n in Counter(schema).items() if n > 1)
    if duplicates:
        raise IngestError(f"Duplicate field names: {', '.join(duplicates)}")

    frozen = []
    for idx, row in enumerate(records):
        if not isinstance(row, Mapping):
            raise ProcessingError(
                f"Row {idx} is {type(row).__name__}, expected a mapping of field -> value"
            )
        frozen.append(MappingProxyType({f: _cell(row.get(f)) for f in schema}))

    dataset = Dataset(
        identity=identity,
        fields=schema,
        records=tuple(frozen),
        truncated=truncated,
    )
    logger.info(
        "Ingested dataset",
        extra={"dataset": identity, "fields": len(schema), "rows": dataset.row_count},
    )
    return dataset
