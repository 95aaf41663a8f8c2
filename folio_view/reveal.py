"""One-shot reveal flags for elements animated on first visibility."""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as typ

from ._constants import DEFAULT_REVEAL_THRESHOLD
from .viewport import BoundsProvider, Subscription, ViewportObserver

if typ.TYPE_CHECKING:
    from .geometry import Rect

logger = logging.getLogger(__name__)


class Direction(enum.StrEnum):
    """Entry direction consumed by the presentation layer only."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dc.dataclass(slots=True)
class RevealHandle:
    """Per-element reveal state.

    Attributes
    ----------
    element_id : str
        Stable identifier assigned by the host view.
    direction : Direction
        Inert hint for choosing the entry transition.
    revealed : bool
        ``False`` until the element is first seen, then ``True`` for good.
    """

    element_id: str
    direction: Direction
    revealed: bool = False


class RevealController:
    """Wrap one :class:`ViewportObserver` registration per attached element."""

    def __init__(
        self,
        *,
        threshold: float = DEFAULT_REVEAL_THRESHOLD,
        observer: ViewportObserver | None = None,
    ) -> None:
        self.observer = observer or ViewportObserver(threshold=threshold)
        self._handles: dict[str, RevealHandle] = {}
        self._subscriptions: dict[str, Subscription] = {}

    def attach(
        self,
        element_id: str,
        direction: Direction | str,
        bounds: BoundsProvider,
    ) -> RevealHandle:
        """Register ``element_id`` and return its reveal handle.

        Attaching an id that is already attached returns the existing handle,
        so a re-rendered element never loses its revealed state.
        """
        existing = self._handles.get(element_id)
        if existing is not None:
            return existing
        handle = RevealHandle(element_id=element_id, direction=Direction(direction))
        self._handles[element_id] = handle
        self._subscriptions[element_id] = self.observer.register(
            element_id, bounds, self._on_visible
        )
        return handle

    def detach(self, element_id: str) -> None:
        """Forget ``element_id``; a pending registration simply never fires."""
        subscription = self._subscriptions.pop(element_id, None)
        if subscription is not None:
            self.observer.unregister(subscription)
        self._handles.pop(element_id, None)

    def observe(self, viewport: Rect) -> list[str]:
        """Advance the observer and return ids revealed by this tick."""
        return self.observer.observe(viewport)

    def get(self, element_id: str) -> RevealHandle | None:
        return self._handles.get(element_id)

    def is_revealed(self, element_id: str) -> bool:
        handle = self._handles.get(element_id)
        return bool(handle and handle.revealed)

    def states(self) -> dict[str, bool]:
        """Return the revealed flag of every attached element."""
        return {key: handle.revealed for key, handle in self._handles.items()}

    def _on_visible(self, element_id: str) -> None:
        self._subscriptions.pop(element_id, None)
        handle = self._handles.get(element_id)
        if handle is None:
            return
        logger.debug("revealing %s (%s)", element_id, handle.direction)
        handle.revealed = True


__all__ = ["Direction", "RevealController", "RevealHandle"]
