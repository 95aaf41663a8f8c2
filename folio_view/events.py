"""Typed input events and the YAML event-script parser.

Hosts feed the coordinator one event per scroll, resize, pointer, key or
timer callback. Event scripts are YAML sequences of mappings with a ``type``
key, used by ``folio replay`` and the behaviour tests:

.. code-block:: yaml

    - {type: resize, width: 390, height: 844}
    - {type: layout, sections: {home: 0, about: 800, projects: 1600}}
    - {type: scroll, offset: 1550, at: 120}
    - {type: toggle_overlay}
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .geometry import Rect
from .reveal import Direction
from .scroll_spy import Section


class EventScriptError(ValueError):
    """Raised when an event script entry is malformed."""


@dc.dataclass(frozen=True, slots=True)
class Scroll:
    offset: float
    at: float = 0.0


@dc.dataclass(frozen=True, slots=True)
class Resize:
    width: float
    height: float
    at: float = 0.0


@dc.dataclass(frozen=True, slots=True)
class Layout:
    """Fresh layout measurements.

    ``element_bounds`` updates already registered reveal elements;
    ``modal_bounds`` is the carousel's hit region for outside presses.
    """

    sections: tuple[Section, ...] = ()
    element_bounds: dict[str, Rect] = dc.field(default_factory=dict)
    modal_bounds: Rect | None = None


@dc.dataclass(frozen=True, slots=True)
class RegisterElement:
    element_id: str
    bounds: Rect | None = None
    direction: Direction = Direction.UP


@dc.dataclass(frozen=True, slots=True)
class UnregisterElement:
    element_id: str


@dc.dataclass(frozen=True, slots=True)
class Navigate:
    target: str
    at: float = 0.0


@dc.dataclass(frozen=True, slots=True)
class ToggleOverlay:
    pass


@dc.dataclass(frozen=True, slots=True)
class Tick:
    at: float


@dc.dataclass(frozen=True, slots=True)
class SelectFilter:
    category: str


@dc.dataclass(frozen=True, slots=True)
class ToggleShowAll:
    pass


@dc.dataclass(frozen=True, slots=True)
class SelectItem:
    item_id: str


@dc.dataclass(frozen=True, slots=True)
class CarouselNext:
    pass


@dc.dataclass(frozen=True, slots=True)
class CarouselPrevious:
    pass


@dc.dataclass(frozen=True, slots=True)
class CarouselJump:
    index: int


@dc.dataclass(frozen=True, slots=True)
class MediaError:
    index: int


@dc.dataclass(frozen=True, slots=True)
class PointerDown:
    x: float
    y: float


@dc.dataclass(frozen=True, slots=True)
class KeyDown:
    key: str


@dc.dataclass(frozen=True, slots=True)
class CloseButton:
    pass


@dc.dataclass(frozen=True, slots=True)
class ToggleTheme:
    pass


Event = (
    Scroll
    | Resize
    | Layout
    | RegisterElement
    | UnregisterElement
    | Navigate
    | ToggleOverlay
    | Tick
    | SelectFilter
    | ToggleShowAll
    | SelectItem
    | CarouselNext
    | CarouselPrevious
    | CarouselJump
    | MediaError
    | PointerDown
    | KeyDown
    | CloseButton
    | ToggleTheme
)

_NO_ARG_EVENTS: dict[str, type[Event]] = {
    "toggle_overlay": ToggleOverlay,
    "toggle_show_all": ToggleShowAll,
    "next": CarouselNext,
    "previous": CarouselPrevious,
    "close_button": CloseButton,
    "toggle_theme": ToggleTheme,
}


def parse_rect(value: object) -> Rect:
    """Parse ``[x, y, width, height]`` or an ``{x, y, width, height}`` mapping."""
    match value:
        case [x, y, width, height]:
            pass
        case {"x": x, "y": y, "width": width, "height": height}:
            pass
        case _:
            msg = f"Expected a rectangle as [x, y, width, height], got {value!r}."
            raise EventScriptError(msg)
    try:
        return Rect(float(x), float(y), float(width), float(height))
    except (TypeError, ValueError) as exc:
        msg = f"Rectangle values must be numeric, got {value!r}."
        raise EventScriptError(msg) from exc


def parse_sections(value: object) -> tuple[Section, ...]:
    """Parse an ordered ``{id: anchor}`` mapping; ``null`` anchors are unmeasured."""
    match value:
        case dict() as anchors:
            pass
        case None:
            return ()
        case _:
            msg = "Layout 'sections' must map section ids to anchor offsets."
            raise EventScriptError(msg)
    sections: list[Section] = []
    for key, anchor in anchors.items():
        sections.append(
            Section(str(key), None if anchor is None else _number(anchor, "anchor"))
        )
    return tuple(sections)


def _number(value: object, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"Event field '{field}' must be a number, got {value!r}."
        raise EventScriptError(msg)
    return float(value)


def parse_event(entry: typ.Mapping[str, typ.Any]) -> Event:
    """Build one typed event from a script mapping.

    Raises
    ------
    EventScriptError
        If the ``type`` is unknown or a required field is missing or invalid.
    """
    match entry:
        case {"type": "scroll", "offset": offset, **rest}:
            return Scroll(_number(offset, "offset"), _number(rest.get("at", 0), "at"))
        case {"type": "resize", "width": width, **rest}:
            return Resize(
                _number(width, "width"),
                _number(rest.get("height", 0), "height"),
                _number(rest.get("at", 0), "at"),
            )
        case {"type": "layout", **rest}:
            elements = rest.get("elements") or {}
            if not isinstance(elements, dict):
                msg = "Layout 'elements' must map element ids to rectangles."
                raise EventScriptError(msg)
            modal = rest.get("modal")
            return Layout(
                sections=parse_sections(rest.get("sections")),
                element_bounds={str(k): parse_rect(v) for k, v in elements.items()},
                modal_bounds=None if modal is None else parse_rect(modal),
            )
        case {"type": "register", "id": element_id, **rest}:
            bounds = rest.get("bounds")
            try:
                direction = Direction(rest.get("direction", Direction.UP))
            except ValueError as exc:
                msg = f"Unknown reveal direction {rest.get('direction')!r}."
                raise EventScriptError(msg) from exc
            return RegisterElement(
                str(element_id),
                None if bounds is None else parse_rect(bounds),
                direction,
            )
        case {"type": "unregister", "id": element_id}:
            return UnregisterElement(str(element_id))
        case {"type": "navigate", "target": target, **rest}:
            return Navigate(str(target), _number(rest.get("at", 0), "at"))
        case {"type": "tick", "at": at}:
            return Tick(_number(at, "at"))
        case {"type": "filter", "category": category}:
            return SelectFilter(str(category))
        case {"type": "select", "item": item_id}:
            return SelectItem(str(item_id))
        case {"type": "jump", "index": index}:
            return CarouselJump(int(_number(index, "index")))
        case {"type": "media_error", "index": index}:
            return MediaError(int(_number(index, "index")))
        case {"type": "pointer", "x": x, "y": y}:
            return PointerDown(_number(x, "x"), _number(y, "y"))
        case {"type": "key", "key": key}:
            return KeyDown(str(key))
        case {"type": str() as kind} if kind in _NO_ARG_EVENTS:
            return _NO_ARG_EVENTS[kind]()
        case {"type": kind}:
            msg = f"Unknown or incomplete event of type {kind!r}: {dict(entry)!r}"
            raise EventScriptError(msg)
        case _:
            msg = f"Event entries must be mappings with a 'type', got {entry!r}."
            raise EventScriptError(msg)


def load_event_script(path: Path) -> list[Event]:
    """Load a YAML event script into typed events."""
    if not path.exists():
        msg = f"Event script '{path}' not found."
        raise FileNotFoundError(msg)
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or []
    if not isinstance(loaded, list):
        msg = "Event script must be a YAML sequence."
        raise EventScriptError(msg)
    return [parse_event(entry) for entry in loaded]


__all__ = [
    "CarouselJump",
    "CarouselNext",
    "CarouselPrevious",
    "CloseButton",
    "Event",
    "EventScriptError",
    "KeyDown",
    "Layout",
    "MediaError",
    "Navigate",
    "PointerDown",
    "RegisterElement",
    "Resize",
    "Scroll",
    "SelectFilter",
    "SelectItem",
    "Tick",
    "ToggleOverlay",
    "ToggleShowAll",
    "ToggleTheme",
    "UnregisterElement",
    "load_event_script",
    "parse_event",
    "parse_rect",
    "parse_sections",
]
