"""
Shared pytest fixtures.

Every test gets a freshly built application with its own seeded
stores, so tests can create and delete records without affecting each
other.
"""

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.core.store import RecordStore, SEED_PRODUCTS, SEED_USERS
from catalog_api.app.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(api_prefix="/api", seed_data=True, log_level="WARNING", log_file=None)


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def product_store() -> RecordStore:
    return RecordStore("products", SEED_PRODUCTS)


@pytest.fixture
def user_store() -> RecordStore:
    return RecordStore("users", SEED_USERS)
