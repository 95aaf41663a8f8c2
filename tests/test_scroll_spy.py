"""Unit tests for scroll-spy section activation and suppression."""

from __future__ import annotations

import pytest

from folio_view.scroll_spy import ScrollSpy, Section, compute_active_section

SECTIONS = [Section("a", 0), Section("b", 800), Section("c", 1600)]


@pytest.mark.parametrize(
    ("offset", "expected"),
    [(750, "a"), (850, "b"), (1550, "b"), (1650, "c")],
)
def test_active_section_ordering(offset: float, expected: str) -> None:
    """Activation uses a 100-unit lead before each anchor."""
    actual = compute_active_section(offset, SECTIONS, 100)
    assert actual == expected, f"expected {expected!r} at {offset}, got {actual!r}"


def test_first_section_is_active_above_every_anchor() -> None:
    sections = [Section("hero", 300), Section("about", 900)]
    assert compute_active_section(0, sections) == "hero"


def test_sections_are_sorted_before_evaluation() -> None:
    shuffled = [SECTIONS[2], SECTIONS[0], SECTIONS[1]]
    assert compute_active_section(850, shuffled) == "b"


def test_unmeasured_layout_reports_no_section() -> None:
    assert compute_active_section(500, [Section("a", 0), Section("b")]) is None
    assert compute_active_section(500, []) is None


def test_navigation_suppresses_until_timeout() -> None:
    """Intermediate scroll events during a smooth scroll are ignored."""
    spy = ScrollSpy(suppression_ms=1000)
    spy.measure(SECTIONS)
    assert spy.scroll(0, now=0) == "a"

    spy.navigate(now=100)
    assert spy.scroll(850, now=400) == "a", "expected suppression mid-flight"
    assert spy.scroll(1650, now=900) == "a"
    assert spy.tick(now=1099) == "a", "expected suppression before deadline"
    assert spy.tick(now=1100) == "c", "expected recompute from the latest offset"
    assert spy.state.suppressed is False


def test_scroll_after_deadline_lifts_suppression() -> None:
    spy = ScrollSpy(suppression_ms=1000)
    spy.measure(SECTIONS)
    spy.navigate(now=0)
    assert spy.scroll(850, now=1500) == "b"


def test_renavigating_restarts_the_window() -> None:
    spy = ScrollSpy(suppression_ms=1000)
    spy.measure(SECTIONS)
    spy.navigate(now=0)
    spy.navigate(now=800)
    spy.scroll(1650, now=1200)
    assert spy.active == "a"
    assert spy.tick(now=1800) == "c"
