"""Shared fixtures for the folio_view test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from folio_view.catalog import CatalogItem
from folio_view.config import FolioConfig, load_folio_config

REPO_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_CONFIG = REPO_ROOT / "config" / "portfolio.yaml"


@pytest.fixture
def sample_config_path() -> Path:
    """Return the checked-in sample portfolio configuration."""
    return SAMPLE_CONFIG


@pytest.fixture
def sample_config() -> FolioConfig:
    """Load the seven-project sample portfolio."""
    return load_folio_config(SAMPLE_CONFIG)


@pytest.fixture
def seven_items() -> list[CatalogItem]:
    """Seven catalog items, three of them tagged ``mobile``."""
    categories = ["mobile", "website", "mobile", "website", "mobile", "website", "data"]
    return [
        CatalogItem(id=f"item-{index}", category=category)
        for index, category in enumerate(categories)
    ]
