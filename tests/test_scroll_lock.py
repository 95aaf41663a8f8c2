"""Unit tests for the reference-counted background scroll lock."""

from __future__ import annotations

import typing as typ

import pytest

from folio_view.scroll_lock import ScrollLock

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture


def test_nested_leases_keep_scroll_locked(mocker: MockerFixture) -> None:
    """Scrolling returns only when the last lease is released."""
    listener = mocker.Mock()
    lock = ScrollLock(listener)
    first = lock.acquire("carousel")
    second = lock.acquire("dialog")

    first.release()
    assert lock.locked is True
    second.release()
    assert lock.locked is False
    assert listener.call_args_list == [mocker.call(True), mocker.call(False)]


def test_release_is_idempotent() -> None:
    lock = ScrollLock()
    lease = lock.acquire()
    other = lock.acquire()
    lease.release()
    lease.release()
    assert lock.count == 1, "double release must not drop another lease"
    other.release()


def test_hold_releases_on_exception() -> None:
    lock = ScrollLock()
    with pytest.raises(KeyError), lock.hold("modal"):
        raise KeyError("boom")
    assert lock.locked is False
