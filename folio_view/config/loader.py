"""Load folio configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import ALL_CATEGORIES
from ..catalog import CatalogItem
from ..chrome import Theme
from ..media import MediaItem, build_media_items, media_item
from .helpers import _normalize_extensions, _optional_str, _require_number
from .models import Breakpoints, FolioConfig, FolioConfigError, ViewSettings

_ITEM_FIELDS = frozenset({"id", "category", "title", "media"})


def load_folio_config(path: Path) -> FolioConfig:
    """Load the YAML configuration describing view settings and the catalog.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/portfolio.yaml``).

    Returns
    -------
    FolioConfig
        Parsed configuration with defaults applied to missing view settings.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    FolioConfigError
        If settings, sections or catalog entries are missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_folio_config(Path("config/portfolio.yaml"))  # doctest: +SKIP
    >>> config.settings.page_size  # doctest: +SKIP
    4
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_folio_config(loaded)


def build_folio_config(raw: typ.Mapping[str, typ.Any]) -> FolioConfig:
    """Build a :class:`FolioConfig` from an already-parsed mapping."""
    settings = _build_view_settings(raw.get("view") or {})
    sections = _build_sections(raw.get("sections"))
    if sections and settings.projects_section not in sections:
        msg = (
            f"Projects section '{settings.projects_section}' is not one of the "
            f"configured sections: {', '.join(sections)}"
        )
        raise FolioConfigError(msg)
    catalog = _build_catalog(raw.get("catalog"), settings)
    return FolioConfig(settings=settings, sections=sections, catalog=catalog)


def _build_view_settings(payload: typ.Mapping[str, typ.Any]) -> ViewSettings:
    """Build view settings, falling back to defaults for omitted keys."""
    if not isinstance(payload, dict):
        msg = "The 'view' block must be a mapping."
        raise FolioConfigError(msg)
    base = ViewSettings()

    page_size = payload.get("page_size", base.page_size)
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        msg = f"View setting 'page_size' must be a positive integer, got {page_size!r}."
        raise FolioConfigError(msg)

    breakpoints = _build_breakpoints(payload.get("breakpoints") or {}, base.breakpoints)
    extensions = base.video_extensions
    if "video_extensions" in payload:
        extensions = _normalize_extensions(payload["video_extensions"])

    theme_value = payload.get("theme", base.theme)
    try:
        theme = Theme(theme_value)
    except ValueError as exc:
        msg = f"Unknown theme {theme_value!r}; expected 'light' or 'dark'."
        raise FolioConfigError(msg) from exc

    return ViewSettings(
        activation_lead=_require_number(
            payload, "activation_lead", base.activation_lead, minimum=0
        ),
        suppression_ms=_require_number(
            payload, "suppression_ms", base.suppression_ms, minimum=0
        ),
        page_size=page_size,
        reveal_threshold=_require_number(
            payload, "reveal_threshold", base.reveal_threshold, minimum=0, maximum=1
        ),
        preloader_ms=_require_number(
            payload, "preloader_ms", base.preloader_ms, minimum=0
        ),
        breakpoints=breakpoints,
        video_extensions=extensions,
        placeholder=_build_placeholder(payload.get("placeholder"), base.placeholder),
        projects_section=_optional_str(payload.get("projects_section"))
        or base.projects_section,
        theme=theme,
    )


def _build_breakpoints(
    payload: typ.Mapping[str, typ.Any], base: Breakpoints
) -> Breakpoints:
    if not isinstance(payload, dict):
        msg = "View setting 'breakpoints' must be a mapping."
        raise FolioConfigError(msg)
    mobile = _require_number(payload, "mobile", base.mobile, minimum=0)
    tablet = _require_number(payload, "tablet", base.tablet, minimum=0)
    if tablet < mobile:
        msg = f"Tablet breakpoint ({tablet}) must not be below mobile ({mobile})."
        raise FolioConfigError(msg)
    return Breakpoints(mobile=mobile, tablet=tablet)


def _build_placeholder(payload: object, base: MediaItem) -> MediaItem:
    match payload:
        case None:
            return base
        case str() as src:
            alt = base.alt
        case {"src": src, **rest}:
            alt = _optional_str(rest.get("alt")) or base.alt
        case _:
            msg = "View setting 'placeholder' must be a path or a {src, alt} mapping."
            raise FolioConfigError(msg)
    return media_item(str(src), alt=alt, placeholder=base)


def _build_sections(entries: object) -> list[str]:
    """Build the ordered section id list."""
    match entries:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = "The 'sections' block must be a list of section ids."
            raise FolioConfigError(msg)
    sections: list[str] = []
    for entry in items:
        key = _optional_str(entry)
        if key is None:
            msg = "Section ids must be non-empty strings."
            raise FolioConfigError(msg)
        if key in sections:
            msg = f"Section '{key}' is listed more than once."
            raise FolioConfigError(msg)
        sections.append(key)
    return sections


def _build_catalog(entries: object, settings: ViewSettings) -> list[CatalogItem]:
    """Build catalog entries; unknown keys are kept as inert payload."""
    match entries:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = "The 'catalog' block must be a list of items."
            raise FolioConfigError(msg)
    catalog: list[CatalogItem] = []
    seen: set[str] = set()
    for entry in items:
        match entry:
            case {"id": item_id, "category": category, **rest}:
                pass
            case _:
                msg = f"Catalog items require 'id' and 'category', got {entry!r}."
                raise FolioConfigError(msg)
        key = _optional_str(item_id)
        category_key = _optional_str(category)
        if key is None or category_key is None:
            msg = "Catalog item 'id' and 'category' must be non-empty."
            raise FolioConfigError(msg)
        if category_key == ALL_CATEGORIES:
            msg = f"Catalog item '{key}' uses the reserved category '{ALL_CATEGORIES}'."
            raise FolioConfigError(msg)
        if key in seen:
            msg = f"Catalog item '{key}' is defined more than once."
            raise FolioConfigError(msg)
        seen.add(key)
        media_raw = rest.get("media") or []
        if not isinstance(media_raw, list):
            msg = f"Catalog item '{key}' media must be a list."
            raise FolioConfigError(msg)
        catalog.append(
            CatalogItem(
                id=key,
                category=category_key,
                title=str(rest.get("title") or key),
                media=build_media_items(
                    media_raw,
                    video_extensions=settings.video_extensions,
                    placeholder=settings.placeholder,
                ),
                payload={k: v for k, v in rest.items() if k not in _ITEM_FIELDS},
            )
        )
    return catalog


__all__ = ["build_folio_config", "load_folio_config"]
