"""Unit tests for catalog filtering and progressive disclosure."""

from __future__ import annotations

import typing as typ

import pytest

from folio_view.catalog import (
    CatalogItem,
    CatalogView,
    FilterState,
    categories,
    set_filter,
    show_more_available,
    toggle_show_all,
    visible_items,
)


def _ids(items: typ.Iterable[CatalogItem]) -> list[str]:
    return [item.id for item in items]


def test_set_filter_resets_disclosure() -> None:
    state = FilterState(active_category="mobile", show_all=True)
    assert set_filter(state, "website") == FilterState("website", show_all=False)


def test_toggle_show_all_keeps_category() -> None:
    state = toggle_show_all(FilterState("mobile"))
    assert state == FilterState("mobile", show_all=True)


def test_visible_items_is_idempotent(seven_items: list[CatalogItem]) -> None:
    """Pure function: repeated calls yield identical slices."""
    state = FilterState()
    first = visible_items(seven_items, state, 4)
    second = visible_items(seven_items, state, 4)
    assert first == second
    assert _ids(first) == ["item-0", "item-1", "item-2", "item-3"]


def test_show_all_returns_every_match(seven_items: list[CatalogItem]) -> None:
    state = FilterState(show_all=True)
    assert len(visible_items(seven_items, state, 4)) == 7


def test_unknown_category_is_empty(seven_items: list[CatalogItem]) -> None:
    state = FilterState("games")
    assert visible_items(seven_items, state) == ()
    assert show_more_available(seven_items, state) is False


def test_end_to_end_disclosure(seven_items: list[CatalogItem]) -> None:
    """Mobile fits on one page; ``all`` pages at four until disclosed."""
    view = CatalogView(seven_items, page_size=4)

    view.set_filter("mobile")
    assert _ids(view.visible_items()) == ["item-0", "item-2", "item-4"]
    assert view.state.show_all is False
    assert view.show_more_available is False, "3 items fit within a page of 4"

    view.set_filter("all")
    assert view.show_more_available is True
    assert len(view.visible_items()) == 4

    view.toggle_show_all()
    assert len(view.visible_items()) == 7


def test_view_cache_tracks_state(seven_items: list[CatalogItem]) -> None:
    view = CatalogView(seven_items)
    first = view.visible_items()
    assert view.visible_items() is first, "expected cached slice for unchanged state"
    view.set_filter("website")
    assert _ids(view.visible_items()) == ["item-1", "item-3", "item-5"]


def test_categories_lists_all_first(seven_items: list[CatalogItem]) -> None:
    assert categories(seven_items) == ["all", "mobile", "website", "data"]


def test_page_size_must_be_positive(seven_items: list[CatalogItem]) -> None:
    with pytest.raises(ValueError, match="Page size"):
        CatalogView(seven_items, page_size=0)


def test_find_returns_item_or_none(seven_items: list[CatalogItem]) -> None:
    view = CatalogView(seven_items)
    found = view.find(seven_items[2].id)
    assert found is seven_items[2]
    assert view.find("missing") is None


def test_items_hash_despite_unhashable_payload() -> None:
    first = CatalogItem("dash", "dashboard", payload={"stack": ["python", "plotly"]})
    second = CatalogItem("dash", "dashboard", payload={"stack": ["rust"]})
    assert hash(first) == hash(second)
    assert first == second, "payload is inert and ignored by equality"
    assert len({first, second}) == 1
