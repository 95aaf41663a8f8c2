"""Typed dataclasses describing folio configuration structures."""

from __future__ import annotations

import dataclasses as dc

from .._constants import (
    DEFAULT_ACTIVATION_LEAD,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PRELOADER_MS,
    DEFAULT_REVEAL_THRESHOLD,
    DEFAULT_SUPPRESSION_MS,
    MOBILE_MAX_WIDTH,
    PROJECTS_SECTION,
    TABLET_MAX_WIDTH,
    VIDEO_EXTENSIONS,
)
from ..catalog import CatalogItem  # noqa: TC001 - used for runtime type metadata
from ..chrome import Theme
from ..media import PLACEHOLDER, MediaItem


class FolioConfigError(ValueError):
    """Raised when the folio configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class Breakpoints:
    """Exclusive upper widths of the mobile and tablet classes."""

    mobile: float = MOBILE_MAX_WIDTH
    tablet: float = TABLET_MAX_WIDTH


@dc.dataclass(slots=True)
class ViewSettings:
    """Tunables shared by the view-state controllers."""

    activation_lead: float = DEFAULT_ACTIVATION_LEAD
    suppression_ms: float = DEFAULT_SUPPRESSION_MS
    page_size: int = DEFAULT_PAGE_SIZE
    reveal_threshold: float = DEFAULT_REVEAL_THRESHOLD
    preloader_ms: float = DEFAULT_PRELOADER_MS
    breakpoints: Breakpoints = dc.field(default_factory=Breakpoints)
    video_extensions: frozenset[str] = VIDEO_EXTENSIONS
    placeholder: MediaItem = PLACEHOLDER
    projects_section: str = PROJECTS_SECTION
    theme: Theme = Theme.LIGHT


@dc.dataclass(slots=True)
class FolioConfig:
    """Settings, section order and the static catalog."""

    settings: ViewSettings = dc.field(default_factory=ViewSettings)
    sections: list[str] = dc.field(default_factory=list)
    catalog: list[CatalogItem] = dc.field(default_factory=list)


__all__ = ["Breakpoints", "FolioConfig", "FolioConfigError", "ViewSettings"]
