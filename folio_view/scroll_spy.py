"""Derive the active page section from the scroll offset.

The pure function :func:`compute_active_section` implements the activation
rule; :class:`ScrollSpy` keeps the last derived section and suppresses
recomputation while a navigation-triggered smooth scroll is in flight, so the
active indicator does not flicker through the sections the viewport passes.

Examples
--------
>>> sections = [Section("home", 0), Section("about", 800), Section("projects", 1600)]
>>> compute_active_section(850, sections)
'about'
>>> compute_active_section(850, [Section("home", None)]) is None
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import DEFAULT_ACTIVATION_LEAD, DEFAULT_SUPPRESSION_MS

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class Section:
    """A page section and the document-relative offset of its top edge.

    ``anchor_offset`` is ``None`` until the host has measured layout.
    """

    id: str
    anchor_offset: float | None = None


def sections_measured(sections: typ.Sequence[Section]) -> bool:
    """Return whether every section has a measured anchor."""
    return bool(sections) and all(s.anchor_offset is not None for s in sections)


def find_anchor(sections: typ.Sequence[Section], section_id: str) -> float | None:
    """Return the anchor of ``section_id`` or ``None`` when absent or unmeasured."""
    for section in sections:
        if section.id == section_id:
            return section.anchor_offset
    return None


def compute_active_section(
    scroll_offset: float,
    sections: typ.Sequence[Section],
    activation_lead: float = DEFAULT_ACTIVATION_LEAD,
) -> str | None:
    """Return the id of the section the reader is currently in.

    Parameters
    ----------
    scroll_offset : float
        Current vertical scroll position of the page.
    sections : Sequence[Section]
        Sections in any order; they are sorted by anchor before evaluation.
    activation_lead : float, optional
        Lead-in that compensates for fixed chrome at the top of the viewport.

    Returns
    -------
    str or None
        The last section whose anchor is at or above
        ``scroll_offset + activation_lead``; the first section when the
        position is above every anchor; ``None`` when anchors are unmeasured.
    """
    if not sections_measured(sections):
        return None
    ordered = sorted(sections, key=lambda s: typ.cast("float", s.anchor_offset))
    position = scroll_offset + activation_lead
    active = ordered[0].id
    for section in ordered:
        if typ.cast("float", section.anchor_offset) <= position:
            active = section.id
        else:
            break
    return active


@dc.dataclass(frozen=True, slots=True)
class ScrollSpyState:
    """Snapshot of the scroll-spy reducer.

    Attributes
    ----------
    sections : tuple[Section, ...]
        Latest measured layout.
    scroll_offset : float
        Most recent scroll offset, recorded even while suppressed.
    active : str or None
        Active section id, ``None`` until anchors are measured.
    suppressed_until : float or None
        Timestamp (ms) at which suppression lifts, ``None`` when idle.
    """

    sections: tuple[Section, ...] = ()
    scroll_offset: float = 0.0
    active: str | None = None
    suppressed_until: float | None = None

    @property
    def suppressed(self) -> bool:
        return self.suppressed_until is not None


def _derive(state: ScrollSpyState, activation_lead: float) -> ScrollSpyState:
    active = compute_active_section(state.scroll_offset, state.sections, activation_lead)
    return dc.replace(state, active=active)


def _lift_if_due(state: ScrollSpyState, now: float) -> ScrollSpyState:
    if state.suppressed_until is not None and now >= state.suppressed_until:
        return dc.replace(state, suppressed_until=None)
    return state


def on_layout(
    state: ScrollSpyState,
    sections: typ.Iterable[Section],
    *,
    activation_lead: float = DEFAULT_ACTIVATION_LEAD,
) -> ScrollSpyState:
    """Record re-measured section anchors."""
    updated = dc.replace(state, sections=tuple(sections))
    if updated.suppressed:
        return updated
    return _derive(updated, activation_lead)


def on_scroll(
    state: ScrollSpyState,
    scroll_offset: float,
    now: float,
    *,
    activation_lead: float = DEFAULT_ACTIVATION_LEAD,
) -> ScrollSpyState:
    """Record a scroll event, recomputing unless a smooth scroll is in flight."""
    updated = _lift_if_due(dc.replace(state, scroll_offset=scroll_offset), now)
    if updated.suppressed:
        return updated
    return _derive(updated, activation_lead)


def on_navigate(
    state: ScrollSpyState,
    now: float,
    *,
    suppression_ms: float = DEFAULT_SUPPRESSION_MS,
) -> ScrollSpyState:
    """Start (or restart) the suppression window for a programmatic scroll."""
    return dc.replace(state, suppressed_until=now + suppression_ms)


def on_tick(
    state: ScrollSpyState,
    now: float,
    *,
    activation_lead: float = DEFAULT_ACTIVATION_LEAD,
) -> ScrollSpyState:
    """Lift an expired suppression window and catch up with the latest offset."""
    if not state.suppressed:
        return state
    updated = _lift_if_due(state, now)
    if updated.suppressed:
        return updated
    return _derive(updated, activation_lead)


class ScrollSpy:
    """Hold the current :class:`ScrollSpyState` and apply reducer transitions."""

    def __init__(
        self,
        *,
        activation_lead: float = DEFAULT_ACTIVATION_LEAD,
        suppression_ms: float = DEFAULT_SUPPRESSION_MS,
    ) -> None:
        self.activation_lead = activation_lead
        self.suppression_ms = suppression_ms
        self.state = ScrollSpyState()

    @property
    def active(self) -> str | None:
        return self.state.active

    @property
    def sections(self) -> tuple[Section, ...]:
        return self.state.sections

    def measure(self, sections: typ.Iterable[Section]) -> str | None:
        self.state = on_layout(
            self.state, sections, activation_lead=self.activation_lead
        )
        return self.active

    def scroll(self, scroll_offset: float, now: float) -> str | None:
        self.state = on_scroll(
            self.state, scroll_offset, now, activation_lead=self.activation_lead
        )
        return self.active

    def navigate(self, now: float) -> None:
        self.state = on_navigate(self.state, now, suppression_ms=self.suppression_ms)
        logger.debug("scroll-spy suppressed until %s", self.state.suppressed_until)

    def tick(self, now: float) -> str | None:
        was_suppressed = self.state.suppressed
        self.state = on_tick(self.state, now, activation_lead=self.activation_lead)
        if was_suppressed and not self.state.suppressed:
            logger.debug("scroll-spy suppression lifted at %s", now)
        return self.active


__all__ = [
    "ScrollSpy",
    "ScrollSpyState",
    "Section",
    "compute_active_section",
    "find_anchor",
    "on_layout",
    "on_navigate",
    "on_scroll",
    "on_tick",
    "sections_measured",
]
