"""Behaviour tests for catalog filtering and show-all disclosure.

These scenarios drive the coordinator with filter and show-all events against
the sample portfolio and check the visible slice and the presence of the show
more control.

Usage
-----
Run ``pytest tests/bdd/test_catalog_disclosure.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from pytest_bdd import parsers, scenarios, then, when

from folio_view.events import SelectFilter, ToggleShowAll

if typ.TYPE_CHECKING:
    from folio_view.coordinator import PortfolioView

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "catalog_disclosure.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, object]


def _view(scenario_state: ScenarioState) -> PortfolioView:
    return typ.cast("PortfolioView", scenario_state["view"])


@when(parsers.parse('the visitor selects the "{category}" filter'))
def when_select_filter(scenario_state: ScenarioState, category: str) -> None:
    _view(scenario_state).dispatch(SelectFilter(category))


@when("the visitor toggles show all")
def when_toggle_show_all(scenario_state: ScenarioState) -> None:
    _view(scenario_state).dispatch(ToggleShowAll())


@then(parsers.parse("{count:d} projects are visible"))
def then_visible_count(scenario_state: ScenarioState, count: int) -> None:
    visible = _view(scenario_state).snapshot().catalog.visible_ids
    assert len(visible) == count, f"expected {count} visible projects, got {visible!r}"


@then("the show more control is absent")
def then_show_more_absent(scenario_state: ScenarioState) -> None:
    assert _view(scenario_state).snapshot().catalog.show_more_available is False


@then("the show more control is present")
def then_show_more_present(scenario_state: ScenarioState) -> None:
    assert _view(scenario_state).snapshot().catalog.show_more_available is True


@then("show all is off")
def then_show_all_off(scenario_state: ScenarioState) -> None:
    assert _view(scenario_state).snapshot().catalog.show_all is False
