"""Pytest configuration and fixtures for price API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from budgetapi.config import AppConfig, reset_config
from budgetapi.store import PriceStore
from budgetapi.web.app import create_app


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read configuration from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def store() -> PriceStore:
    """Store holding the three seed prices."""
    return PriceStore.seeded()


@pytest.fixture
def app(store: PriceStore):
    return create_app(AppConfig(), store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
