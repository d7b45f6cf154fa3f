import pytest

from csv_browser.core.exceptions import ParseError, ProcessingError
from csv_browser.importing.csv_adapter import CsvParserAdapter, ParseOptions


def _parse(text: str, **options):
    return CsvParserAdapter(ParseOptions(**options)).parse_text(text)


def test_values_stay_strings():
    result = _parse("code,flag,amount\n007,NA,1e3\n")

    assert result.fields == ["code", "flag", "amount"]
    assert result.records == [{"code": "007", "flag": "NA", "amount": "1e3"}]
    assert result.errors == []
    assert not result.truncated


def test_quoted_delimiters_and_blank_lines():
    text = 'id,address\n1,"1 Main St, Springfield"\n\n2,"2 Oak Ave"\n'

    result = _parse(text)

    assert [r["address"] for r in result.records] == ["1 Main St, Springfield", "2 Oak Ave"]


def test_short_rows_are_padded_with_empty_strings():
    result = _parse("a,b,c\n1,2\n")

    assert result.records == [{"a": "1", "b": "2", "c": ""}]


def test_wide_rows_are_skipped_and_reported():
    result = _parse("a,b\n1,2\n3,4,5\n6,7\n")

    assert result.records == [{"a": "1", "b": "2"}, {"a": "6", "b": "7"}]
    assert len(result.errors) == 1
    assert result.errors[0].code == "TooManyFields"


def test_first_row_wider_than_header_is_skipped_too():
    result = _parse("a,b\n1,2,3\n4,5\n")

    assert result.fields == ["a", "b"]
    assert result.records == [{"a": "4", "b": "5"}]
    assert len(result.errors) == 1


def test_row_cap_marks_truncation():
    capped = _parse("n\n1\n2\n3\n", max_rows=2)
    exact = _parse("n\n1\n2\n", max_rows=2)

    assert [r["n"] for r in capped.records] == ["1", "2"]
    assert capped.truncated
    assert not exact.truncated


def test_skipped_rows_do_not_count_towards_row_cap():
    result = _parse("a,b\n1,2\n3,4,5\n6,7\n8,9\n", max_rows=2)

    assert result.records == [{"a": "1", "b": "2"}, {"a": "6", "b": "7"}]
    assert result.truncated
    assert len(result.errors) == 1


def test_skipped_rows_inside_cap_keep_later_rows():
    result = _parse("a,b\n1,2\n3,4,5\n6,7\n", max_rows=2)

    assert [r["a"] for r in result.records] == ["1", "6"]
    assert not result.truncated


def test_header_names_are_kept_verbatim():
    duplicated = _parse("a,a\n1,2\n")
    blank = _parse("a,,c\n1,2,3\n")

    assert duplicated.fields == ["a", "a"]
    assert blank.fields == ["a", "", "c"]
    assert blank.records == [{"a": "1", "": "2", "c": "3"}]


def test_header_only_file_has_no_records():
    result = _parse("a,b\n")

    assert result.fields == ["a", "b"]
    assert result.records == []


def test_empty_input_is_a_processing_error():
    with pytest.raises(ProcessingError):
        _parse("")


def test_invalid_bytes_are_a_parse_error():
    with pytest.raises(ParseError):
        CsvParserAdapter().parse_bytes(b"a,b\n\xff\xfe,1\n")


def test_byte_order_mark_is_dropped():
    result = CsvParserAdapter().parse_bytes("id,name\n1,x\n".encode("utf-8-sig"))

    assert result.fields == ["id", "name"]


def test_custom_delimiter():
    result = _parse("a;b\n1;2\n", delimiter=";")

    assert result.records == [{"a": "1", "b": "2"}]


def test_headerless_parsing_is_rejected():
    with pytest.raises(ValueError):
        CsvParserAdapter(ParseOptions(header=False))
