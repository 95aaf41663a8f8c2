"""Reference-counted suppression of background page scrolling.

Every modal that needs the page frozen acquires a :class:`ScrollLease`; the
page scrolls again only once every lease has been released. Leases release
idempotently, and :meth:`ScrollLock.hold` scopes one to a ``with`` block so
abnormal exits still release it.

Examples
--------
>>> lock = ScrollLock()
>>> first = lock.acquire("carousel")
>>> with lock.hold("dialog"):
...     lock.count
2
>>> lock.locked
True
>>> first.release()
>>> lock.locked
False
"""

from __future__ import annotations

import contextlib
import logging
import typing as typ

logger = logging.getLogger(__name__)

LockListener = typ.Callable[[bool], None]


class ScrollLease:
    """A single acquisition of a :class:`ScrollLock`."""

    __slots__ = ("_lock", "owner", "released")

    def __init__(self, lock: ScrollLock, owner: str) -> None:
        self._lock = lock
        self.owner = owner
        self.released = False

    def release(self) -> None:
        """Give the lease back; repeated calls are no-ops."""
        if self.released:
            return
        self.released = True
        self._lock._release(self)

    def __repr__(self) -> str:
        state = "released" if self.released else "held"
        return f"ScrollLease(owner={self.owner!r}, {state})"


class ScrollLock:
    """Count outstanding leases and report lock/unlock edges to a listener.

    Parameters
    ----------
    listener : callable, optional
        Called with ``True`` when the first lease is taken and ``False`` when
        the last one is released, so the host can toggle page overflow.
    """

    def __init__(self, listener: LockListener | None = None) -> None:
        self._listener = listener
        self._leases: list[ScrollLease] = []

    @property
    def count(self) -> int:
        return len(self._leases)

    @property
    def locked(self) -> bool:
        return bool(self._leases)

    def acquire(self, owner: str = "anonymous") -> ScrollLease:
        lease = ScrollLease(self, owner)
        self._leases.append(lease)
        if len(self._leases) == 1:
            logger.debug("background scroll locked by %s", owner)
            self._notify(True)
        return lease

    @contextlib.contextmanager
    def hold(self, owner: str = "anonymous") -> typ.Iterator[ScrollLease]:
        lease = self.acquire(owner)
        try:
            yield lease
        finally:
            lease.release()

    def _release(self, lease: ScrollLease) -> None:
        self._leases.remove(lease)
        if not self._leases:
            logger.debug("background scroll restored by %s", lease.owner)
            self._notify(False)

    def _notify(self, locked: bool) -> None:
        if self._listener is not None:
            self._listener(locked)


__all__ = ["LockListener", "ScrollLease", "ScrollLock"]
