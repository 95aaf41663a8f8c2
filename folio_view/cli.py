"""Cyclopts CLI entrypoint for inspecting folio view state.

The ``folio`` console script defined here loads ``portfolio.yaml``, drives a
:class:`~folio_view.coordinator.PortfolioView` with either a handful of
command-line inputs or a recorded YAML event script, and prints the derived
view state as JSON. Typical usage is checking how the page reacts to a
sequence of scrolls and clicks without a browser.

Examples
--------
Print the state for a phone scrolled into the projects section:

>>> from folio_view.cli import app
>>> app.run(
...     ["snapshot", "--width", "390", "--scroll", "1550",
...      "--anchor", "home=0", "--anchor", "projects=1600"]
... )  # doctest: +SKIP

Replay an event script:

>>> from folio_view.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .config import load_folio_config
from .coordinator import PortfolioView
from .events import (
    EventScriptError,
    Layout,
    Resize,
    Scroll,
    SelectFilter,
    ToggleShowAll,
    load_event_script,
)
from .scroll_spy import Section

DEFAULT_CONFIG = Path("config/portfolio.yaml")

app = App(name="folio", config=cyclopts.config.Env("FOLIO_", command=False))  # type: ignore[unknown-argument]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _parse_anchor(text: str) -> Section:
    """Parse ``id=offset`` into a measured section."""
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        msg = f"Anchors must look like 'section=offset', got {text!r}."
        raise EventScriptError(msg)
    try:
        return Section(key.strip(), float(value))
    except ValueError as exc:
        msg = f"Anchor offset for '{key}' must be a number, got {value!r}."
        raise EventScriptError(msg) from exc


def _emit(payload: object) -> None:
    print(msgspec_json.encode(payload).decode("utf-8"))


@app.command(help="Print the view state for a single set of inputs.")
def snapshot(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to portfolio config", env_var="FOLIO_CONFIG")
    ] = DEFAULT_CONFIG,
    scroll: typ.Annotated[float, Parameter(help="Page scroll offset")] = 0.0,
    width: typ.Annotated[float, Parameter(help="Viewport width")] = 1280.0,
    height: typ.Annotated[float, Parameter(help="Viewport height")] = 800.0,
    anchor: typ.Annotated[
        list[str] | None,
        Parameter(help="Measured section anchor as id=offset (repeatable)"),
    ] = None,
    category: typ.Annotated[
        str | None, Parameter(name="--filter", help="Active catalog category")
    ] = None,
    show_all: typ.Annotated[
        bool, Parameter(help="Disclose the full filtered catalog")
    ] = False,
    verbose: typ.Annotated[
        bool, Parameter(help="Log state transitions to stderr")
    ] = False,
) -> None:
    """Derive and print one view snapshot.

    Parameters
    ----------
    config : Path, optional
        Path to the ``portfolio.yaml`` configuration file (overridable via
        ``FOLIO_CONFIG``).
    scroll : float, optional
        Page scroll offset applied after layout.
    width, height : float, optional
        Viewport dimensions.
    anchor : list of str, optional
        Section anchors as ``id=offset``; sections without anchors stay
        unmeasured and report no active section.
    category : str or None, optional
        Catalog category to select before printing, passed as ``--filter``.
    show_all : bool, optional
        Toggle progressive disclosure after selecting the category.
    verbose : bool, optional
        Emit debug logs for every state transition on stderr.

    Returns
    -------
    None
        Writes a JSON document to stdout.
    """
    _configure_logging(verbose)
    view = PortfolioView(load_folio_config(config))
    view.dispatch(Resize(width=width, height=height))
    if anchor:
        view.dispatch(Layout(sections=tuple(_parse_anchor(text) for text in anchor)))
    view.dispatch(Scroll(offset=scroll))
    if category is not None:
        view.dispatch(SelectFilter(category))
    if show_all:
        view.dispatch(ToggleShowAll())
    _emit(view.snapshot())


@app.command(help="Replay a YAML event script, printing state after each event.")
def replay(
    events: typ.Annotated[Path, Parameter(help="Path to the YAML event script")],
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to portfolio config", env_var="FOLIO_CONFIG")
    ] = DEFAULT_CONFIG,
    changes_only: typ.Annotated[
        bool, Parameter(help="Print only the changed regions per event")
    ] = False,
    verbose: typ.Annotated[
        bool, Parameter(help="Log state transitions to stderr")
    ] = False,
) -> None:
    """Dispatch every scripted event and print one JSON line per event.

    Each line holds the event type, the sorted list of changed regions and,
    unless ``changes_only`` is set, the full snapshot after the event.

    Raises
    ------
    FileNotFoundError
        If the config or the event script does not exist.
    EventScriptError
        If a scripted event is malformed.
    """
    _configure_logging(verbose)
    view = PortfolioView(load_folio_config(config))
    for step, event in enumerate(load_event_script(events), start=1):
        changed = view.dispatch(event)
        record: dict[str, object] = {
            "step": step,
            "event": type(event).__name__,
            "changed": sorted(changed),
        }
        if not changes_only:
            record["snapshot"] = view.snapshot()
        _emit(record)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``folio`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
