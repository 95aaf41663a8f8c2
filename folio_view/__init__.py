"""View-state coordination for a single-page portfolio.

This package derives what a portfolio page shows as the reader scrolls,
resizes and clicks: the active section, the navigation mode, one-shot reveal
flags, the visible catalog slice and the media carousel. The rendering layer
consumes :class:`~folio_view.coordinator.ViewSnapshot` objects; the ``folio``
console script replays event scripts against the same coordinator.

Exports
-------
- ``PortfolioView``: coordinator that routes input events to every controller.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from folio_view import PortfolioView
>>> from folio_view.config import FolioConfig
>>> PortfolioView(FolioConfig()).snapshot().active_section is None
True
"""

from __future__ import annotations

from .cli import app, main
from .coordinator import PortfolioView, Region, ViewSnapshot

__all__ = ["PortfolioView", "Region", "ViewSnapshot", "app", "main"]
