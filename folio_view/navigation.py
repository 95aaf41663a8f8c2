"""Responsive navigation presentation and the overlay open flag.

On desktop and tablet widths the navigation is always an inline bar. On
mobile it collapses into an overlay menu once the reader approaches the
projects section. The overlay open flag is the only stored user state; it is
forced closed whenever the mode leaves the overlay family and whenever a
navigation target is selected.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging

from ._constants import (
    DEFAULT_ACTIVATION_LEAD,
    MOBILE_MAX_WIDTH,
    NAV_SCROLLED_OFFSET,
    SCROLL_TOP_OFFSET,
    TABLET_MAX_WIDTH,
)

logger = logging.getLogger(__name__)


class NavMode(enum.StrEnum):
    """Presentation mode of the navigation."""

    INLINE_BAR = "inline_bar"
    OVERLAY_CLOSED = "overlay_closed"
    OVERLAY_OPEN = "overlay_open"

    @property
    def is_overlay(self) -> bool:
        return self is not NavMode.INLINE_BAR


class WidthClass(enum.StrEnum):
    """Coarse viewport width bucket."""

    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


def classify_width(
    width: float,
    *,
    mobile_max: float = MOBILE_MAX_WIDTH,
    tablet_max: float = TABLET_MAX_WIDTH,
) -> WidthClass:
    """Bucket a viewport width; each maximum is exclusive."""
    if width < mobile_max:
        return WidthClass.MOBILE
    if width < tablet_max:
        return WidthClass.TABLET
    return WidthClass.DESKTOP


def overlay_engaged(
    scroll_offset: float,
    width_class: WidthClass,
    projects_anchor: float | None,
    lead: float = DEFAULT_ACTIVATION_LEAD,
) -> bool:
    """Return whether the navigation belongs to the overlay family."""
    if width_class is not WidthClass.MOBILE or projects_anchor is None:
        return False
    return scroll_offset >= projects_anchor - lead


def compute_mode(
    scroll_offset: float,
    width_class: WidthClass,
    projects_anchor: float | None,
    *,
    overlay_open: bool = False,
    lead: float = DEFAULT_ACTIVATION_LEAD,
) -> NavMode:
    """Derive the navigation mode.

    Parameters
    ----------
    scroll_offset : float
        Current vertical scroll position.
    width_class : WidthClass
        Bucketed viewport width.
    projects_anchor : float or None
        Top edge of the projects section; ``None`` while unmeasured.
    overlay_open : bool, optional
        Stored user toggle, only honoured in the overlay family.
    lead : float, optional
        Distance before the projects anchor at which the overlay engages.

    Returns
    -------
    NavMode
        ``INLINE_BAR`` outside mobile widths or above the threshold, otherwise
        ``OVERLAY_OPEN`` or ``OVERLAY_CLOSED`` according to ``overlay_open``.
    """
    if not overlay_engaged(scroll_offset, width_class, projects_anchor, lead):
        return NavMode.INLINE_BAR
    return NavMode.OVERLAY_OPEN if overlay_open else NavMode.OVERLAY_CLOSED


@dc.dataclass(frozen=True, slots=True)
class NavState:
    """Inputs and stored toggle for the navigation reducer."""

    scroll_offset: float = 0.0
    width_class: WidthClass = WidthClass.DESKTOP
    projects_anchor: float | None = None
    overlay_open: bool = False
    lead: float = DEFAULT_ACTIVATION_LEAD

    @property
    def mode(self) -> NavMode:
        return compute_mode(
            self.scroll_offset,
            self.width_class,
            self.projects_anchor,
            overlay_open=self.overlay_open,
            lead=self.lead,
        )

    @property
    def scrolled(self) -> bool:
        """Whether the bar should render its opaque scrolled chrome."""
        return self.scroll_offset > NAV_SCROLLED_OFFSET

    @property
    def show_scroll_top(self) -> bool:
        return self.scroll_offset > SCROLL_TOP_OFFSET


def _settle(state: NavState) -> NavState:
    """Force the overlay closed when the inputs leave the overlay family."""
    if state.overlay_open and not overlay_engaged(
        state.scroll_offset, state.width_class, state.projects_anchor, state.lead
    ):
        return dc.replace(state, overlay_open=False)
    return state


def with_inputs(
    state: NavState,
    *,
    scroll_offset: float | None = None,
    width_class: WidthClass | None = None,
    projects_anchor: float | None = None,
    anchor_measured: bool = False,
) -> NavState:
    """Apply new scroll/resize/layout inputs.

    ``projects_anchor`` is only applied when ``anchor_measured`` is true, so a
    layout pass can explicitly reset the anchor to ``None``.
    """
    changes: dict[str, object] = {}
    if scroll_offset is not None:
        changes["scroll_offset"] = scroll_offset
    if width_class is not None:
        changes["width_class"] = width_class
    if anchor_measured:
        changes["projects_anchor"] = projects_anchor
    return _settle(dc.replace(state, **changes))


def toggle_overlay(state: NavState) -> NavState:
    """Flip the overlay flag; ignored while the mode is ``INLINE_BAR``."""
    if not state.mode.is_overlay:
        return state
    return dc.replace(state, overlay_open=not state.overlay_open)


def select_target(state: NavState) -> NavState:
    """Close the overlay as part of a navigation selection."""
    if not state.overlay_open:
        return state
    return dc.replace(state, overlay_open=False)


class NavModeController:
    """Hold the current :class:`NavState` and apply reducer transitions."""

    def __init__(
        self,
        *,
        lead: float = DEFAULT_ACTIVATION_LEAD,
        mobile_max: float = MOBILE_MAX_WIDTH,
        tablet_max: float = TABLET_MAX_WIDTH,
    ) -> None:
        self.mobile_max = mobile_max
        self.tablet_max = tablet_max
        self.state = NavState(lead=lead)

    @property
    def mode(self) -> NavMode:
        return self.state.mode

    def compute_mode(
        self,
        scroll_offset: float,
        width_class: WidthClass,
        projects_anchor: float | None,
    ) -> NavMode:
        """Feed new inputs and return the resulting mode."""
        previous = self.mode
        self.state = with_inputs(
            self.state,
            scroll_offset=scroll_offset,
            width_class=width_class,
            projects_anchor=projects_anchor,
            anchor_measured=True,
        )
        if self.mode is not previous:
            logger.debug("navigation mode %s -> %s", previous, self.mode)
        return self.mode

    def scroll(self, scroll_offset: float) -> NavMode:
        self.state = with_inputs(self.state, scroll_offset=scroll_offset)
        return self.mode

    def resize(self, width: float) -> NavMode:
        width_class = classify_width(
            width, mobile_max=self.mobile_max, tablet_max=self.tablet_max
        )
        self.state = with_inputs(self.state, width_class=width_class)
        return self.mode

    def measure(self, projects_anchor: float | None) -> NavMode:
        self.state = with_inputs(
            self.state, projects_anchor=projects_anchor, anchor_measured=True
        )
        return self.mode

    def toggle_overlay(self) -> NavMode:
        self.state = toggle_overlay(self.state)
        return self.mode

    def select_target(self) -> NavMode:
        self.state = select_target(self.state)
        return self.mode


__all__ = [
    "NavMode",
    "NavModeController",
    "NavState",
    "WidthClass",
    "classify_width",
    "compute_mode",
    "overlay_engaged",
    "select_target",
    "toggle_overlay",
    "with_inputs",
]
