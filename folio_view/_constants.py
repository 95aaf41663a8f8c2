"""Common literal values used across folio_view.

These constants keep thresholds, breakpoints and placeholder references
centralized so the controllers, the configuration loader, and tests can import
the same values without drifting. Intended for internal use within the
folio_view package.

Examples
--------
>>> from folio_view import _constants
>>> _constants.DEFAULT_ACTIVATION_LEAD
100.0
>>> "mp4" in _constants.VIDEO_EXTENSIONS
True
"""

DEFAULT_ACTIVATION_LEAD = 100.0
DEFAULT_SUPPRESSION_MS = 1000.0
DEFAULT_PAGE_SIZE = 4
DEFAULT_REVEAL_THRESHOLD = 0.1
DEFAULT_PRELOADER_MS = 2000.0

MOBILE_MAX_WIDTH = 768.0
TABLET_MAX_WIDTH = 1024.0

NAV_SCROLLED_OFFSET = 100.0
SCROLL_TOP_OFFSET = 500.0

ALL_CATEGORIES = "all"
PROJECTS_SECTION = "projects"

VIDEO_EXTENSIONS = frozenset({"mp4", "webm", "ogg", "mov"})
PLACEHOLDER_SRC = "/images/default-screenshot.png"
PLACEHOLDER_ALT = "Default screenshot"
