from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Union

# Whole-string decimal or scientific literal, no hex/underscores/inf/nan
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Text:
    """A non-empty cell value."""
    raw: str


@dataclass(frozen=True)
class Empty:
    """A missing or empty cell value."""


EMPTY = Empty()

Value = Union[Text, Empty]


def to_value(raw: Any) -> Value:
    if raw is None:
        return EMPTY
    text = str(raw)
    return Text(text) if text else EMPTY


def as_text(value: Value) -> str:
    return value.raw if isinstance(value, Text) else ""


def is_numeric(value: Value) -> bool:
    """
    True when the trimmed string is entirely a finite number.
    Empty values are never numeric.
    """
    if not isinstance(value, Text):
        return False
    stripped = value.raw.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        return False
    # "1e400" matches the literal but overflows to inf
    return math.isfinite(float(stripped))


def as_number(value: Value) -> float:
    if not is_numeric(value):
        raise ValueError(f"Not a numeric value: {value!r}")
    return float(value.raw.strip())
