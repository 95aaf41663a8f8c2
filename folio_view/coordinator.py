"""Top-level coordinator holding one instance of every view-state holder.

:class:`PortfolioView` receives typed events from the host page, routes each
one to the controllers it concerns, and reports which view regions changed so
the rendering layer only repaints those. Controllers never read each other's
state: the navigation threshold and the scroll-spy both derive from the same
measured :class:`~folio_view.scroll_spy.Section` list independently.

Typical usage mirrors the browser wiring:

>>> from folio_view.config import FolioConfig
>>> view = PortfolioView(FolioConfig(sections=["home", "about", "projects"]))
>>> regions = view.dispatch(Resize(width=390, height=844))
>>> Region.NAVIGATION in regions
True
>>> view.snapshot().navigation.width_class
<WidthClass.MOBILE: 'mobile'>
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as typ

from .catalog import CatalogView, categories
from .chrome import PreloaderState, Theme, advance, toggle_theme
from .events import (
    CarouselJump,
    CarouselNext,
    CarouselPrevious,
    CloseButton,
    KeyDown,
    Layout,
    MediaError,
    Navigate,
    PointerDown,
    RegisterElement,
    Resize,
    Scroll,
    SelectFilter,
    SelectItem,
    Tick,
    ToggleOverlay,
    ToggleShowAll,
    ToggleTheme,
    UnregisterElement,
)
from .geometry import Rect
from .media import MediaCarousel, MediaItem
from .navigation import NavMode, NavModeController, WidthClass
from .reveal import RevealController
from .scroll_lock import ScrollLock
from .scroll_spy import ScrollSpy, Section, find_anchor

if typ.TYPE_CHECKING:
    from .config import FolioConfig
    from .events import Event

logger = logging.getLogger(__name__)


class Region(enum.StrEnum):
    """View regions the rendering layer repaints independently."""

    NAVIGATION = "navigation"
    SECTIONS = "sections"
    REVEAL = "reveal"
    CATALOG = "catalog"
    CAROUSEL = "carousel"
    CHROME = "chrome"


@dc.dataclass(frozen=True, slots=True)
class NavigationSnapshot:
    mode: NavMode
    width_class: WidthClass
    overlay_open: bool
    scrolled: bool
    show_scroll_top: bool


@dc.dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    active_category: str
    show_all: bool
    show_more_available: bool
    visible_ids: tuple[str, ...]
    categories: tuple[str, ...]


@dc.dataclass(frozen=True, slots=True)
class CarouselSnapshot:
    is_open: bool
    selection: str | None
    current_index: int
    items: tuple[MediaItem, ...]
    current: MediaItem | None
    has_controls: bool
    counter: str | None


@dc.dataclass(frozen=True, slots=True)
class ChromeSnapshot:
    theme: Theme
    loading: bool
    scroll_locked: bool


@dc.dataclass(frozen=True, slots=True)
class ViewSnapshot:
    """Everything the rendering layer needs, keyed by region."""

    active_section: str | None
    navigation: NavigationSnapshot
    revealed: dict[str, bool]
    catalog: CatalogSnapshot
    carousel: CarouselSnapshot
    chrome: ChromeSnapshot

    def region(self, region: Region) -> object:
        match region:
            case Region.NAVIGATION:
                return self.navigation
            case Region.SECTIONS:
                return self.active_section
            case Region.REVEAL:
                return self.revealed
            case Region.CATALOG:
                return self.catalog
            case Region.CAROUSEL:
                return self.carousel
            case Region.CHROME:
                return self.chrome


class PortfolioView:
    """Route input events to the view-state controllers.

    Parameters
    ----------
    config : FolioConfig
        Settings, section order and the static catalog.
    lock : ScrollLock, optional
        Shared background scroll lock; a private one is created when omitted.
    """

    def __init__(self, config: FolioConfig, *, lock: ScrollLock | None = None) -> None:
        settings = config.settings
        self.config = config
        self.lock = lock or ScrollLock()
        self.scroll_spy = ScrollSpy(
            activation_lead=settings.activation_lead,
            suppression_ms=settings.suppression_ms,
        )
        self.navigation = NavModeController(
            lead=settings.activation_lead,
            mobile_max=settings.breakpoints.mobile,
            tablet_max=settings.breakpoints.tablet,
        )
        self.reveal = RevealController(threshold=settings.reveal_threshold)
        self.catalog = CatalogView(config.catalog, page_size=settings.page_size)
        self.carousel = MediaCarousel(self.lock, placeholder=settings.placeholder)
        self.theme = settings.theme
        self.preloader = PreloaderState(duration_ms=settings.preloader_ms)
        self._categories = tuple(categories(self.catalog.catalog))
        self._scroll_offset = 0.0
        self._viewport_width = 0.0
        self._viewport_height = 0.0
        self._element_bounds: dict[str, Rect | None] = {}
        self._modal_bounds: Rect | None = None
        self.scroll_spy.measure(Section(key) for key in config.sections)

    @property
    def viewport(self) -> Rect:
        return Rect(0.0, self._scroll_offset, self._viewport_width, self._viewport_height)

    def dispatch(self, event: Event) -> frozenset[Region]:
        """Apply ``event`` and return the regions whose derived state changed."""
        before = self.snapshot()
        self._apply(event)
        after = self.snapshot()
        changed = frozenset(
            region for region in Region if before.region(region) != after.region(region)
        )
        if changed:
            logger.debug("%s changed %s", type(event).__name__, sorted(changed))
        return changed

    def run(self, events: typ.Iterable[Event]) -> ViewSnapshot:
        """Dispatch every event in order and return the final snapshot."""
        for event in events:
            self.dispatch(event)
        return self.snapshot()

    def snapshot(self) -> ViewSnapshot:
        nav_state = self.navigation.state
        filter_state = self.catalog.state
        carousel = self.carousel.state
        return ViewSnapshot(
            active_section=self.scroll_spy.active,
            navigation=NavigationSnapshot(
                mode=nav_state.mode,
                width_class=nav_state.width_class,
                overlay_open=nav_state.mode is NavMode.OVERLAY_OPEN,
                scrolled=nav_state.scrolled,
                show_scroll_top=nav_state.show_scroll_top,
            ),
            revealed=self.reveal.states(),
            catalog=CatalogSnapshot(
                active_category=filter_state.active_category,
                show_all=filter_state.show_all,
                show_more_available=self.catalog.show_more_available,
                visible_ids=tuple(item.id for item in self.catalog.visible_items()),
                categories=self._categories,
            ),
            carousel=CarouselSnapshot(
                is_open=carousel.is_open,
                selection=carousel.selection,
                current_index=carousel.current_index,
                items=carousel.items,
                current=carousel.current,
                has_controls=carousel.has_controls,
                counter=carousel.counter,
            ),
            chrome=ChromeSnapshot(
                theme=self.theme,
                loading=self.preloader.loading,
                scroll_locked=self.lock.locked,
            ),
        )

    def _apply(self, event: Event) -> None:
        match event:
            case Scroll(offset=offset, at=at):
                self._advance(at)
                self._scroll_offset = offset
                self.scroll_spy.scroll(offset, at)
                self.navigation.scroll(offset)
                self._observe()
            case Resize(width=width, height=height, at=at):
                self._advance(at)
                self._viewport_width = width
                self._viewport_height = height
                self.navigation.resize(width)
                self._observe()
            case Layout():
                self._apply_layout(event)
            case RegisterElement(element_id=element_id, bounds=bounds, direction=direction):
                self._element_bounds[element_id] = bounds
                self.reveal.attach(element_id, direction, self._bounds_provider(element_id))
                self._observe()
            case UnregisterElement(element_id=element_id):
                self.reveal.detach(element_id)
                self._element_bounds.pop(element_id, None)
            case Navigate(target=target, at=at):
                self._advance(at)
                logger.debug("navigating to %s", target)
                self.navigation.select_target()
                self.scroll_spy.navigate(at)
            case ToggleOverlay():
                self.navigation.toggle_overlay()
            case Tick(at=at):
                self._advance(at)
                self.scroll_spy.tick(at)
            case SelectFilter(category=category):
                self.catalog.set_filter(category)
            case ToggleShowAll():
                self.catalog.toggle_show_all()
            case SelectItem(item_id=item_id):
                item = self.catalog.find(item_id)
                if item is None:
                    logger.debug("ignoring selection of unknown item %s", item_id)
                    return
                self.carousel.open(item.media, selection=item.id)
            case CarouselNext():
                self.carousel.next()
            case CarouselPrevious():
                self.carousel.previous()
            case CarouselJump(index=index):
                self.carousel.jump_to(index)
            case MediaError(index=index):
                self.carousel.media_failed(index)
            case PointerDown(x=x, y=y):
                self._dismissed(self.carousel.pointer_down(x, y, self._modal_bounds))
            case KeyDown(key=key):
                self._dismissed(self.carousel.key_down(key))
            case CloseButton():
                self._dismissed(self.carousel.close_button())
            case ToggleTheme():
                self.theme = toggle_theme(self.theme)

    def _dismissed(self, closed: bool) -> None:
        # A reopened modal may differ in size; it must be measured again.
        if closed:
            self._modal_bounds = None

    def _merge_sections(self, measured: typ.Sequence[Section]) -> tuple[Section, ...]:
        """Align measured anchors with the configured section order.

        Configured sections missing from ``measured`` stay unmeasured and ids
        that are not configured are ignored. Without configured sections the
        layout defines the page.
        """
        if not self.config.sections:
            return tuple(measured)
        anchors = {section.id: section.anchor_offset for section in measured}
        unknown = sorted(set(anchors) - set(self.config.sections))
        if unknown:
            logger.debug("ignoring anchors for unknown sections %s", unknown)
        return tuple(Section(key, anchors.get(key)) for key in self.config.sections)

    def _apply_layout(self, event: Layout) -> None:
        if event.sections:
            sections = self._merge_sections(event.sections)
            self.scroll_spy.measure(sections)
            self.navigation.measure(
                find_anchor(sections, self.config.settings.projects_section)
            )
        for element_id, bounds in event.element_bounds.items():
            if element_id in self._element_bounds:
                self._element_bounds[element_id] = bounds
        if event.modal_bounds is not None:
            self._modal_bounds = event.modal_bounds
        self._observe()

    def _bounds_provider(self, element_id: str) -> typ.Callable[[], Rect | None]:
        return lambda: self._element_bounds.get(element_id)

    def _observe(self) -> None:
        self.reveal.observe(self.viewport)

    def _advance(self, at: float) -> None:
        self.preloader = advance(self.preloader, at)


__all__ = [
    "CarouselSnapshot",
    "CatalogSnapshot",
    "ChromeSnapshot",
    "NavigationSnapshot",
    "PortfolioView",
    "Region",
    "ViewSnapshot",
]
