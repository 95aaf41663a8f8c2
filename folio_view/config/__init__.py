"""Load and validate folio configuration YAML.

This subpackage parses the project's ``portfolio.yaml`` file, applies defaults
to the view tunables, resolves catalog media into classified
:class:`~folio_view.media.MediaItem` entries, and produces the dataclasses
(:class:`FolioConfig`, :class:`ViewSettings`) the coordinator consumes. The
primary entry point is :func:`load_folio_config`.

Examples
--------
>>> from pathlib import Path
>>> from folio_view.config import load_folio_config
>>> config = load_folio_config(Path("config/portfolio.yaml"))  # doctest: +SKIP
>>> [item.id for item in config.catalog][:2]  # doctest: +SKIP
['weather-app', 'shop-front']
"""

from .loader import build_folio_config, load_folio_config
from .models import Breakpoints, FolioConfig, FolioConfigError, ViewSettings

__all__ = [
    "Breakpoints",
    "FolioConfig",
    "FolioConfigError",
    "ViewSettings",
    "build_folio_config",
    "load_folio_config",
]
