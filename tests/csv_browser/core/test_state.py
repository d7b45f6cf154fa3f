from __future__ import annotations

import pytest

from csv_browser.core.state import FilterState, SortState


def test_filter_state_dict_roundtrip_maps_all_alias():
    assert FilterState.from_dict({"term": "x", "scope": "all"}) == FilterState(term="x", scope=None)
    assert FilterState.from_dict({"term": "x", "scope": "City"}) == FilterState(term="x", scope="City")
    assert FilterState(term="x").to_dict() == {"term": "x", "scope": "all"}

    st = FilterState(term="abc", scope="Name")
    assert FilterState.from_dict(st.to_dict()) == st


def test_sort_state_rejects_unknown_direction():
    with pytest.raises(ValueError):
        SortState(key="a", direction="sideways")
