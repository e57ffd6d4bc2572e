"""Shared pytest fixtures for plate layout tests."""

from __future__ import annotations

import pytest

from platelayout import config
from platelayout.generator import PlateLayoutGenerator

# ============================================================================
# Generator Fixtures
# ============================================================================


@pytest.fixture
def sample_generator() -> PlateLayoutGenerator:
    """96-well plate, replicates of 4, sample order."""
    return PlateLayoutGenerator(group_size=4, strategy="SampleLayout", dimensions=(8, 12))


@pytest.fixture
def small_primer_generator() -> PlateLayoutGenerator:
    """2×3 plate, pairs, primer order: A1 A2 A3 B1 B2 B3."""
    return PlateLayoutGenerator(group_size=2, strategy="PrimerLayout", dimensions=(2, 3))


# ============================================================================
# API Fixtures
# ============================================================================


@pytest.fixture
def default_config(monkeypatch):
    """Pin generator defaults so a local .env cannot change them."""
    monkeypatch.setattr(config, "DEFAULT_GROUP_SIZE", 1)
    monkeypatch.setattr(config, "DEFAULT_STRATEGY", "SampleLayout")
    monkeypatch.setattr(config, "DEFAULT_ROWS", 8)
    monkeypatch.setattr(config, "DEFAULT_COLUMNS", 12)


@pytest.fixture
def client(default_config):
    """Flask test client with no generator loaded."""
    import app as app_module

    app_module._generator = None
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c
    app_module._generator = None
