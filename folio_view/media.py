"""Modal media carousel over a catalog item's images and videos.

The carousel is a reducer over :class:`CarouselState`: :func:`open_carousel`,
:func:`close_carousel`, :func:`next_item`, :func:`previous_item`,
:func:`jump_to` and :func:`mark_failed` each return a new state and never
raise. :class:`MediaCarousel` holds the current state, owns the background
scroll lease while open, and maps the three dismissal triggers (outside
pointer press, Escape, close button) onto the same idempotent close.

Examples
--------
>>> classify("clip.mp4")
<MediaKind.VIDEO: 'video'>
>>> classify("photo.PNG")
<MediaKind.IMAGE: 'image'>
>>> state = open_carousel(CarouselState(), build_media_items(["a.png", "b.png"]))
>>> previous_item(state).current_index
1
"""

from __future__ import annotations

import contextlib
import dataclasses as dc
import enum
import logging
import posixpath
import typing as typ
from urllib.parse import urlsplit

from ._constants import PLACEHOLDER_ALT, PLACEHOLDER_SRC, VIDEO_EXTENSIONS

if typ.TYPE_CHECKING:
    from .geometry import Rect
    from .scroll_lock import ScrollLease, ScrollLock

logger = logging.getLogger(__name__)

ESCAPE_KEY = "Escape"


class MediaKind(enum.StrEnum):
    IMAGE = "image"
    VIDEO = "video"


def classify(
    src: str, video_extensions: typ.Collection[str] = VIDEO_EXTENSIONS
) -> MediaKind:
    """Classify a media source by its case-insensitive file extension.

    Query strings and fragments are ignored; a path without an extension is an
    image.
    """
    path = urlsplit(src).path
    _, ext = posixpath.splitext(path)
    if ext[1:].lower() in video_extensions:
        return MediaKind.VIDEO
    return MediaKind.IMAGE


@dc.dataclass(frozen=True, slots=True)
class MediaItem:
    """A resolved media reference."""

    src: str
    kind: MediaKind = MediaKind.IMAGE
    alt: str = ""

    @property
    def is_video(self) -> bool:
        return self.kind is MediaKind.VIDEO

    @property
    def shows_gradient(self) -> bool:
        """Videos never receive the decorative overlay gradient."""
        return not self.is_video


PLACEHOLDER = MediaItem(src=PLACEHOLDER_SRC, kind=MediaKind.IMAGE, alt=PLACEHOLDER_ALT)


def media_item(
    src: str | None,
    *,
    alt: str | None = None,
    position: int = 0,
    video_extensions: typ.Collection[str] = VIDEO_EXTENSIONS,
    placeholder: MediaItem = PLACEHOLDER,
) -> MediaItem:
    """Build a :class:`MediaItem`, substituting ``placeholder`` for blank sources."""
    text = (src or "").strip()
    if not text:
        logger.debug("blank media source at position %d, using placeholder", position)
        return placeholder
    label = (alt or "").strip() or f"Screenshot {position + 1}"
    return MediaItem(src=text, kind=classify(text, video_extensions), alt=label)


def build_media_items(
    sources: typ.Iterable[str | typ.Mapping[str, typ.Any] | None],
    *,
    video_extensions: typ.Collection[str] = VIDEO_EXTENSIONS,
    placeholder: MediaItem = PLACEHOLDER,
) -> tuple[MediaItem, ...]:
    """Resolve raw sources (strings or ``{src, alt}`` mappings) into items."""
    items: list[MediaItem] = []
    for position, entry in enumerate(sources):
        match entry:
            case str() | None:
                src, alt = entry, None
            case {"src": src, **rest}:
                alt = rest.get("alt")
            case _:
                src, alt = None, None
        items.append(
            media_item(
                None if src is None else str(src),
                alt=None if alt is None else str(alt),
                position=position,
                video_extensions=video_extensions,
                placeholder=placeholder,
            )
        )
    return tuple(items)


@dc.dataclass(frozen=True, slots=True)
class CarouselState:
    """Items, cursor and visibility of the media modal.

    While open, ``items`` is never empty and ``current_index`` is in range.
    """

    items: tuple[MediaItem, ...] = ()
    current_index: int = 0
    is_open: bool = False
    selection: str | None = None

    @property
    def current(self) -> MediaItem | None:
        if not self.items:
            return None
        return self.items[self.current_index]

    @property
    def has_controls(self) -> bool:
        """Previous/next buttons and thumbnails exist for two or more items."""
        return len(self.items) > 1

    @property
    def counter(self) -> str | None:
        if not self.has_controls:
            return None
        return f"{self.current_index + 1} / {len(self.items)}"


def open_carousel(
    state: CarouselState,
    items: typ.Sequence[MediaItem],
    *,
    selection: str | None = None,
    placeholder: MediaItem = PLACEHOLDER,
) -> CarouselState:
    """Open on ``items`` at the first entry, discarding any prior state."""
    resolved = tuple(items) or (placeholder,)
    return CarouselState(
        items=resolved, current_index=0, is_open=True, selection=selection
    )


def close_carousel(state: CarouselState) -> CarouselState:
    if not state.is_open and not state.items:
        return state
    return CarouselState()


def next_item(state: CarouselState) -> CarouselState:
    if not state.has_controls:
        return state
    return dc.replace(state, current_index=(state.current_index + 1) % len(state.items))


def previous_item(state: CarouselState) -> CarouselState:
    if not state.has_controls:
        return state
    count = len(state.items)
    return dc.replace(state, current_index=(state.current_index - 1 + count) % count)


def jump_to(state: CarouselState, index: int) -> CarouselState:
    """Move to ``index``; out-of-range indices leave the state unchanged."""
    if not 0 <= index < len(state.items):
        return state
    return dc.replace(state, current_index=index)


def mark_failed(
    state: CarouselState, index: int, *, placeholder: MediaItem = PLACEHOLDER
) -> CarouselState:
    """Replace the item at ``index`` with the placeholder after a load failure."""
    if not 0 <= index < len(state.items) or state.items[index] == placeholder:
        return state
    items = list(state.items)
    items[index] = placeholder
    return dc.replace(state, items=tuple(items))


class MediaCarousel:
    """Hold the carousel state and its background scroll lease."""

    def __init__(
        self,
        lock: ScrollLock,
        *,
        placeholder: MediaItem = PLACEHOLDER,
    ) -> None:
        self.lock = lock
        self.placeholder = placeholder
        self.state = CarouselState()
        self._lease: ScrollLease | None = None

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def current_index(self) -> int:
        return self.state.current_index

    @property
    def items(self) -> tuple[MediaItem, ...]:
        return self.state.items

    def open(
        self, items: typ.Sequence[MediaItem], *, selection: str | None = None
    ) -> CarouselState:
        """Show ``items`` from the start, replacing any open selection."""
        self.state = open_carousel(
            self.state, items, selection=selection, placeholder=self.placeholder
        )
        if self._lease is None:
            self._lease = self.lock.acquire("carousel")
        logger.debug("carousel opened on %s with %d items", selection, len(self.items))
        return self.state

    def close(self) -> CarouselState:
        """Close and clear; closing an already-closed carousel does nothing."""
        if not self.state.is_open and self._lease is None:
            return self.state
        self.state = close_carousel(self.state)
        lease, self._lease = self._lease, None
        if lease is not None:
            lease.release()
        logger.debug("carousel closed")
        return self.state

    def next(self) -> CarouselState:
        self.state = next_item(self.state)
        return self.state

    def previous(self) -> CarouselState:
        self.state = previous_item(self.state)
        return self.state

    def jump_to(self, index: int) -> CarouselState:
        self.state = jump_to(self.state, index)
        return self.state

    def media_failed(self, index: int) -> CarouselState:
        self.state = mark_failed(self.state, index, placeholder=self.placeholder)
        return self.state

    def pointer_down(self, x: float, y: float, bounds: Rect | None) -> bool:
        """Close on a press outside ``bounds``; returns whether it closed.

        With no measured modal bounds there is no outside region to hit.
        """
        if not self.is_open or bounds is None or bounds.contains(x, y):
            return False
        self.close()
        return True

    def key_down(self, key: str) -> bool:
        if not self.is_open or key != ESCAPE_KEY:
            return False
        self.close()
        return True

    def close_button(self) -> bool:
        if not self.is_open:
            return False
        self.close()
        return True

    @contextlib.contextmanager
    def session(
        self, items: typ.Sequence[MediaItem], *, selection: str | None = None
    ) -> typ.Iterator[CarouselState]:
        """Open for the duration of a ``with`` block, closing on every exit."""
        self.open(items, selection=selection)
        try:
            yield self.state
        finally:
            self.close()


__all__ = [
    "ESCAPE_KEY",
    "PLACEHOLDER",
    "CarouselState",
    "MediaCarousel",
    "MediaItem",
    "MediaKind",
    "build_media_items",
    "classify",
    "close_carousel",
    "jump_to",
    "mark_failed",
    "media_item",
    "next_item",
    "open_carousel",
    "previous_item",
]
