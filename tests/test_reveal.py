"""Unit tests for one-shot reveal flags."""

from __future__ import annotations

from folio_view.geometry import Rect
from folio_view.reveal import Direction, RevealController

ON_SCREEN = Rect(0, 0, 1000, 800)
OFF_SCREEN = Rect(0, 5000, 1000, 800)


def test_reveal_is_monotonic() -> None:
    """Once revealed, scrolling away never clears the flag."""
    controller = RevealController()
    handle = controller.attach("about", "left", lambda: Rect(0, 100, 200, 200))
    assert handle.revealed is False, "expected handle to start hidden"

    controller.observe(OFF_SCREEN)
    assert handle.revealed is False
    controller.observe(ON_SCREEN)
    assert handle.revealed is True
    for viewport in (OFF_SCREEN, ON_SCREEN, OFF_SCREEN):
        controller.observe(viewport)
        assert handle.revealed is True, "expected reveal to stay latched"


def test_direction_hint_is_inert() -> None:
    """Direction only travels to the presentation layer."""
    controller = RevealController()
    handles = [
        controller.attach(f"el-{direction}", direction, lambda: Rect(0, 0, 10, 10))
        for direction in Direction
    ]
    controller.observe(ON_SCREEN)
    assert all(handle.revealed for handle in handles)
    assert handles[0].direction is Direction.UP


def test_elements_reveal_independently() -> None:
    controller = RevealController()
    controller.attach("top", Direction.UP, lambda: Rect(0, 100, 10, 10))
    controller.attach("bottom", Direction.UP, lambda: Rect(0, 3000, 10, 10))

    controller.observe(ON_SCREEN)
    assert controller.states() == {"top": True, "bottom": False}


def test_reattach_keeps_existing_state() -> None:
    controller = RevealController()
    first = controller.attach("card", Direction.UP, lambda: Rect(0, 0, 10, 10))
    controller.observe(ON_SCREEN)
    again = controller.attach("card", Direction.DOWN, lambda: Rect(0, 0, 10, 10))
    assert again is first
    assert again.revealed is True


def test_detach_before_visibility_is_silent() -> None:
    controller = RevealController()
    controller.attach("late", Direction.RIGHT, lambda: Rect(0, 0, 10, 10))
    controller.detach("late")

    assert controller.observe(ON_SCREEN) == []
    assert controller.get("late") is None
    assert len(controller.observer) == 0
