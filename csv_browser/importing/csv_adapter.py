from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

from csv_browser.core.exceptions import ParseError, ProcessingError

logger = logging.getLogger(__name__)

MAX_ROWS = 5000


@dataclass(frozen=True)
class ParseOptions:
    header: bool = True
    skip_empty_lines: bool = True
    max_rows: int = MAX_ROWS
    encoding: str = "utf-8"
    delimiter: str = ","


@dataclass(frozen=True)
class ParseIssue:
    """A row-level problem the parser skipped over. Not fatal."""
    code: str
    message: str


@dataclass
class ParseResult:
    fields: List[str]
    records: List[Dict[str, str]]
    errors: List[ParseIssue] = field(default_factory=list)
    truncated: bool = False


class CsvParserAdapter:
    """
    Delimited text -> (fields, records, errors) using pandas.

    Every value stays a string (no dtype inference, no NA conversion).
    Rows beyond `max_rows` are never returned; `truncated` reports whether
    any were dropped.
    """

    def __init__(self, options: Optional[ParseOptions] = None):
        self.options = options or ParseOptions()
        if not self.options.header:
            raise ValueError("Only header=True is supported")
        if self.options.max_rows < 1:
            raise ValueError(f"max_rows must be positive, got {self.options.max_rows}")

    def parse_bytes(self, data: bytes) -> ParseResult:
        try:
            text = data.decode(self.options.encoding)
        except UnicodeDecodeError as e:
            raise ParseError(
                f"File is not valid {self.options.encoding.upper()}: {e.reason} at byte {e.start}"
            ) from e
        except LookupError as e:
            raise ParseError(f"Unknown encoding '{self.options.encoding}'") from e
        return self.parse_text(text)

    def parse_text(self, text: str) -> ParseResult:
        opts = self.options
        # a UTF-8 BOM would otherwise end up in the first field name
        text = text.lstrip("\ufeff")
        issues: List[ParseIssue] = []

        def _bad_line(line: List[str]) -> None:
            issues.append(
                ParseIssue(
                    code="TooManyFields",
                    message=f"Skipped row with {len(line)} fields: {opts.delimiter.join(line)[:80]}",
                )
            )
            return None

        # header row + max_rows records + one more to tell whether the cap cut anything
        wanted = opts.max_rows + 2
        chunks: List[pd.DataFrame] = []
        kept = 0

        try:
            # header=None: pandas would otherwise rename duplicate or blank
            # header cells ("a.1", "Unnamed: 1") and hide them from ingest
            reader = pd.read_csv(
                io.StringIO(text),
                sep=opts.delimiter,
                header=None,
                # object keeps the raw strings; short rows are padded with None
                dtype=object,
                keep_default_na=False,
                na_filter=False,
                skip_blank_lines=opts.skip_empty_lines,
                engine="python",
                on_bad_lines=_bad_line,
                chunksize=wanted,
            )
            with reader:
                # skipped rows don't count, so keep reading until enough good rows arrived
                while kept < wanted:
                    try:
                        chunk = reader.get_chunk(wanted - kept)
                    except StopIteration:
                        break
                    chunks.append(chunk)
                    kept += len(chunk)
        except pd.errors.EmptyDataError as e:
            raise ProcessingError("No header row found; the file is empty") from e
        except (pd.errors.ParserError, csv.Error) as e:
            raise ParseError(f"Could not parse delimited text: {e}") from e

        if not kept:
            raise ProcessingError("No header row found; the file is empty")

        frame = pd.concat(chunks, ignore_index=True).fillna("")
        fields = [str(v) for v in frame.iloc[0]]
        body = frame.iloc[1:]

        truncated = len(body) > opts.max_rows
        if truncated:
            body = body.iloc[: opts.max_rows]
            logger.warning("Input truncated", extra={"max_rows": opts.max_rows})

        records = [
            dict(zip(fields, (str(v) for v in row)))
            for row in body.itertuples(index=False, name=None)
        ]

        if issues:
            logger.warning("Skipped malformed rows", extra={"count": len(issues)})

        return ParseResult(fields=fields, records=records, errors=issues, truncated=truncated)

