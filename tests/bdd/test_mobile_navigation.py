"""Behaviour tests for the mobile navigation overlay."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from pytest_bdd import given, parsers, scenarios, then, when

from folio_view.coordinator import PortfolioView
from folio_view.events import Layout, Navigate, Resize, Scroll, ToggleOverlay
from folio_view.scroll_spy import Section

if typ.TYPE_CHECKING:
    from folio_view.config import FolioConfig


FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "mobile_navigation.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, object]


def _view(scenario_state: ScenarioState) -> PortfolioView:
    return typ.cast("PortfolioView", scenario_state["view"])


@given("a phone-sized viewport on the sample portfolio")
def given_phone_viewport(
    scenario_state: ScenarioState, sample_config: FolioConfig
) -> None:
    view = PortfolioView(sample_config)
    view.dispatch(Resize(width=390, height=844))
    scenario_state["view"] = view


@given(
    parsers.parse(
        "the sections are measured at home {home:d}, about {about:d}, "
        "projects {projects:d}, contact {contact:d}"
    )
)
def given_sections_measured(
    scenario_state: ScenarioState, home: int, about: int, projects: int, contact: int
) -> None:
    sections = (
        Section("home", home),
        Section("about", about),
        Section("projects", projects),
        Section("contact", contact),
    )
    _view(scenario_state).dispatch(Layout(sections=sections))


@when(parsers.parse("the visitor scrolls to {offset:d}"))
def when_scroll(scenario_state: ScenarioState, offset: int) -> None:
    _view(scenario_state).dispatch(Scroll(offset=offset))


@when("the visitor toggles the overlay")
def when_toggle_overlay(scenario_state: ScenarioState) -> None:
    _view(scenario_state).dispatch(ToggleOverlay())


@when(parsers.parse('the visitor navigates to "{target}" at {at:d} ms'))
def when_navigate(scenario_state: ScenarioState, target: str, at: int) -> None:
    _view(scenario_state).dispatch(Navigate(target=target, at=at))


@then(parsers.parse('the navigation mode is "{mode}"'))
def then_mode(scenario_state: ScenarioState, mode: str) -> None:
    actual = _view(scenario_state).snapshot().navigation.mode
    assert actual == mode, f"expected navigation mode {mode!r}, got {actual!r}"
