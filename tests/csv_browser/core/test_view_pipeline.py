from __future__ import annotations

from csv_browser.core.dataset import ingest
from csv_browser.core.state import ColumnState, DESCENDING, FilterState, PageState, SortState
from csv_browser.core.view import recompute_view


def _make_dataset(n=25):
    rows = [{"id": str(i), "group": "even" if i % 2 == 0 else "odd", "note": f"n{i}"} for i in range(n)]
    return ingest(["id", "group", "note"], rows, identity="view.csv")


def test_pipeline_filters_sorts_and_pages():
    ds = _make_dataset()

    view = recompute_view(
        ds,
        FilterState(term="odd", scope="group"),
        SortState(key="id", direction=DESCENDING),
        PageState(page_size=5, page_index=2),
        ColumnState(visible=frozenset({"id", "note"}), order=("note", "group", "id")),
    )

    assert view.total_rows == 25
    assert view.match_count == 12
    assert [r["id"] for r in view.matched[:3]] == ["23", "21", "19"]
    assert [r["id"] for r in view.records] == ["13", "11", "9", "7", "5"]
    assert view.page.label == "2 of 3"
    assert view.columns == ("note", "id")


def test_hidden_columns_are_still_searched():
    ds = _make_dataset(4)
    only_id = ColumnState(visible=frozenset({"id"}), order=ds.fields)

    view = recompute_view(ds, FilterState(term="n3"), SortState(), PageState(), only_id)

    assert [r["id"] for r in view.records] == ["3"]
    assert view.columns == ("id",)


def test_no_matches_gives_one_empty_page():
    ds = _make_dataset(4)

    view = recompute_view(
        ds, FilterState(term="nothing"), SortState(), PageState(page_index=4), ColumnState(order=ds.fields)
    )

    assert view.is_empty
    assert view.page.total_pages == 0
    assert view.page.label == "1 of 1"
