"""Catalog filtering and progressive disclosure.

Everything here is a pure function of ``(catalog, filter_state, page_size)``.
:class:`CatalogView` only swaps its :class:`FilterState` on user actions and
caches the last derived slice keyed on its inputs.

Examples
--------
>>> items = [CatalogItem(f"p{i}", "web") for i in range(6)]
>>> [item.id for item in visible_items(items, FilterState(), 4)]
['p0', 'p1', 'p2', 'p3']
>>> show_more_available(items, FilterState("mobile"), 4)
False
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import ALL_CATEGORIES, DEFAULT_PAGE_SIZE

if typ.TYPE_CHECKING:
    from .media import MediaItem

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class CatalogItem:
    """A portfolio entry; everything past ``category`` is inert payload.

    ``payload`` is excluded from equality and hashing, so items can key sets
    and dicts whatever YAML values it holds.
    """

    id: str
    category: str
    title: str = ""
    media: tuple[MediaItem, ...] = ()
    payload: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=dict, compare=False, hash=False
    )


@dc.dataclass(frozen=True, slots=True)
class FilterState:
    """Active category and whether the full filtered list is disclosed."""

    active_category: str = ALL_CATEGORIES
    show_all: bool = False


def filtered_items(
    catalog: typ.Sequence[CatalogItem], filter_state: FilterState
) -> tuple[CatalogItem, ...]:
    """Return catalog entries matching the active category, in catalog order."""
    category = filter_state.active_category
    return tuple(
        item
        for item in catalog
        if category == ALL_CATEGORIES or item.category == category
    )


def visible_items(
    catalog: typ.Sequence[CatalogItem],
    filter_state: FilterState,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> tuple[CatalogItem, ...]:
    """Return the filtered items, truncated to ``page_size`` unless disclosed."""
    matches = filtered_items(catalog, filter_state)
    if filter_state.show_all:
        return matches
    return matches[:page_size]


def show_more_available(
    catalog: typ.Sequence[CatalogItem],
    filter_state: FilterState,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> bool:
    """Return whether the show more/less control should be present."""
    return len(filtered_items(catalog, filter_state)) > page_size


def set_filter(filter_state: FilterState, category: str) -> FilterState:
    """Switch category; browsing a category always starts collapsed."""
    return FilterState(active_category=category, show_all=False)


def toggle_show_all(filter_state: FilterState) -> FilterState:
    return dc.replace(filter_state, show_all=not filter_state.show_all)


def categories(catalog: typ.Sequence[CatalogItem]) -> list[str]:
    """Return the filter keys for ``catalog``: ``all`` then first-seen order."""
    keys = [ALL_CATEGORIES]
    for item in catalog:
        if item.category not in keys:
            keys.append(item.category)
    return keys


class CatalogView:
    """Hold the :class:`FilterState` for a fixed catalog."""

    def __init__(
        self,
        catalog: typ.Iterable[CatalogItem],
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            msg = f"Page size must be positive, got {page_size!r}."
            raise ValueError(msg)
        self.catalog: tuple[CatalogItem, ...] = tuple(catalog)
        self.page_size = page_size
        self.state = FilterState()
        self._cache: tuple[FilterState, tuple[CatalogItem, ...]] | None = None

    def set_filter(self, category: str) -> FilterState:
        self.state = set_filter(self.state, category)
        logger.debug("catalog filter set to %s", category)
        return self.state

    def toggle_show_all(self) -> FilterState:
        self.state = toggle_show_all(self.state)
        return self.state

    def visible_items(self) -> tuple[CatalogItem, ...]:
        """Return the visible slice, reusing the previous result when unchanged."""
        if self._cache is not None and self._cache[0] == self.state:
            return self._cache[1]
        items = visible_items(self.catalog, self.state, self.page_size)
        self._cache = (self.state, items)
        return items

    @property
    def show_more_available(self) -> bool:
        return show_more_available(self.catalog, self.state, self.page_size)

    def find(self, item_id: str) -> CatalogItem | None:
        for item in self.catalog:
            if item.id == item_id:
                return item
        return None


__all__ = [
    "CatalogItem",
    "CatalogView",
    "FilterState",
    "categories",
    "filtered_items",
    "set_filter",
    "show_more_available",
    "toggle_show_all",
    "visible_items",
]
