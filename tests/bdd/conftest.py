"""Shared fixtures and steps for the folio behaviour scenarios."""

from __future__ import annotations

import typing as typ

import pytest
from pytest_bdd import given

from folio_view.coordinator import PortfolioView

if typ.TYPE_CHECKING:
    from folio_view.config import FolioConfig

ScenarioState = dict[str, object]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps.

    Returns
    -------
    ScenarioState
        Mutable dictionary used to exchange the coordinator between ``given``,
        ``when``, and ``then`` steps.
    """
    return {}


@given("the sample portfolio with seven projects")
def given_sample_portfolio(
    scenario_state: ScenarioState, sample_config: FolioConfig
) -> None:
    """Build a desktop coordinator over the checked-in sample portfolio."""
    scenario_state["view"] = PortfolioView(sample_config)
