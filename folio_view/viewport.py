"""Report when registered elements first enter the visible viewport.

:class:`ViewportObserver` is the scroll/resize-driven fallback for a native
visibility notification primitive. Hosts register an element together with a
callable returning its current bounds, then call :meth:`ViewportObserver.observe`
on every layout or scroll tick. Each registration produces at most one
``visible`` notification, after which it is dropped.

Examples
--------
>>> from folio_view.geometry import Rect
>>> observer = ViewportObserver(threshold=0.1)
>>> sub = observer.register("hero", lambda: Rect(0, 900, 100, 100))
>>> observer.observe(Rect(0, 0, 1280, 800))
[]
>>> observer.observe(Rect(0, 200, 1280, 800))
['hero']
>>> observer.is_registered(sub)
False
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import DEFAULT_REVEAL_THRESHOLD
from .geometry import Rect, intersection_ratio

logger = logging.getLogger(__name__)

BoundsProvider = typ.Callable[[], Rect | None]
VisibleListener = typ.Callable[[str], None]


@dc.dataclass(frozen=True, slots=True)
class Subscription:
    """Token identifying one registration of an element."""

    element_id: str
    serial: int


@dc.dataclass(slots=True)
class _Registration:
    subscription: Subscription
    bounds: BoundsProvider
    listener: VisibleListener | None


class ViewportObserver:
    """Track registered elements until each has been visible once."""

    def __init__(self, *, threshold: float = DEFAULT_REVEAL_THRESHOLD) -> None:
        if not 0.0 <= threshold <= 1.0:
            msg = f"Intersection threshold must be within [0, 1], got {threshold!r}."
            raise ValueError(msg)
        self.threshold = threshold
        self._registrations: dict[Subscription, _Registration] = {}
        self._serial = 0

    def register(
        self,
        element_id: str,
        bounds: BoundsProvider,
        listener: VisibleListener | None = None,
    ) -> Subscription:
        """Start watching ``element_id`` and return its subscription token."""
        self._serial += 1
        subscription = Subscription(element_id=element_id, serial=self._serial)
        self._registrations[subscription] = _Registration(
            subscription=subscription, bounds=bounds, listener=listener
        )
        return subscription

    def unregister(self, subscription: Subscription) -> None:
        """Stop watching; unknown or already-fired subscriptions are ignored."""
        self._registrations.pop(subscription, None)

    def is_registered(self, subscription: Subscription) -> bool:
        return subscription in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)

    def observe(self, viewport: Rect) -> list[str]:
        """Check every registration against ``viewport``.

        Returns the ids of elements that became visible during this tick, in
        registration order. Those registrations are removed before any
        listener runs, so a listener may safely register or unregister.
        """
        fired: list[_Registration] = []
        for registration in list(self._registrations.values()):
            bounds = registration.bounds()
            if bounds is None:
                continue
            ratio = intersection_ratio(bounds, viewport)
            if ratio > 0.0 and ratio >= self.threshold:
                fired.append(registration)
        for registration in fired:
            del self._registrations[registration.subscription]
        for registration in fired:
            logger.debug("element %s became visible", registration.subscription.element_id)
            if registration.listener is not None:
                registration.listener(registration.subscription.element_id)
        return [registration.subscription.element_id for registration in fired]


__all__ = ["BoundsProvider", "Subscription", "ViewportObserver", "VisibleListener"]
