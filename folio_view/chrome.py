"""Page-level chrome state: colour theme and the start-up preloader."""

from __future__ import annotations

import dataclasses as dc
import enum

from ._constants import DEFAULT_PRELOADER_MS


class Theme(enum.StrEnum):
    LIGHT = "light"
    DARK = "dark"


def toggle_theme(theme: Theme) -> Theme:
    return Theme.LIGHT if theme is Theme.DARK else Theme.DARK


@dc.dataclass(frozen=True, slots=True)
class PreloaderState:
    """Splash screen shown for a fixed window after page start.

    Attributes
    ----------
    started_at : float
        Timestamp (ms) of page start.
    duration_ms : float
        How long the splash stays up.
    now : float
        Latest timestamp observed by the coordinator.
    """

    started_at: float = 0.0
    duration_ms: float = DEFAULT_PRELOADER_MS
    now: float = 0.0

    @property
    def loading(self) -> bool:
        return self.now - self.started_at < self.duration_ms


def advance(state: PreloaderState, now: float) -> PreloaderState:
    """Record the passage of time; timestamps never move backwards."""
    if now <= state.now:
        return state
    return dc.replace(state, now=now)


__all__ = ["PreloaderState", "Theme", "advance", "toggle_theme"]
