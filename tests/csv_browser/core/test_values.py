from __future__ import annotations

import pytest

from csv_browser.core.values import EMPTY, Text, as_number, as_text, is_numeric, to_value


@pytest.mark.parametrize(
    "raw",
    ["42", " 3.5 ", "-1e5", "+7", ".5", "5.", "0", "1E-3"],
)
def test_is_numeric_accepts_whole_finite_numbers(raw):
    assert is_numeric(Text(raw))


@pytest.mark.parametrize(
    "raw",
    ["abc", "1_000", "inf", "nan", "0x10", "1e400", "1 2", "12abc", "-", "."],
)
def test_is_numeric_rejects_partial_or_non_finite(raw):
    assert not is_numeric(Text(raw))


def test_empty_is_never_numeric():
    assert not is_numeric(EMPTY)
    assert not is_numeric(to_value(""))


def test_to_value_tags_empty_and_text():
    assert to_value(None) is EMPTY
    assert to_value("") is EMPTY
    assert to_value(" ") == Text(" ")
    assert as_text(to_value("x")) == "x"
    assert as_text(EMPTY) == ""


def test_as_number_trims_and_rejects_text():
    assert as_number(Text(" 10 ")) == 10.0
    with pytest.raises(ValueError):
        as_number(Text("ten"))
