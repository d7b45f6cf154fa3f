"""
Getting raw delimited text into the browser: source reading and parsing.
"""

from .csv_adapter import CsvParserAdapter, ParseIssue, ParseOptions, ParseResult
from .source import decode_upload, read_source, read_source_async

__all__ = [
    "CsvParserAdapter",
    "ParseIssue",
    "ParseOptions",
    "ParseResult",
    "decode_upload",
    "read_source",
    "read_source_async",
]
