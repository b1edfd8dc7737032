"""
Shared pytest fixtures and configuration for docspine tests.

This module provides:
- Settings built without touching the process environment or ``.env``
- An in-memory MongoDB (mongomock-motor) behind a real ``MongoConnector``
- A ``TestClient`` running the full app lifespan

Usage:
    def test_something(client):
        resp = client.get("/users")
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from docspine.api.app import create_app
from docspine.api.deps import get_settings
from docspine.api.settings import DocSpineSettings
from docspine.db.mongo import MongoConnector

TEST_URI = "mongodb://localhost:27017"
TEST_DATABASE = "docspine_test"


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark endpoint tests as integration, everything else as unit."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        markers = {mark.name for mark in item.iter_markers()}
        if markers.intersection({"unit", "integration"}):
            continue
        if "endpoints" in test_path.name:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings_cache() -> Generator[None, None, None]:
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> DocSpineSettings:
    return DocSpineSettings(
        mongodb_uri=TEST_URI,
        database_name=TEST_DATABASE,
        _env_file=None,
    )


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    return AsyncMongoMockClient()


@pytest.fixture
def connector(mongo_client) -> MongoConnector:
    """A real connector over the in-memory client; only the ping is stubbed."""
    conn = MongoConnector(TEST_URI, TEST_DATABASE, client=mongo_client)
    conn.ping = AsyncMock(return_value=True)
    return conn


@pytest.fixture
def database(mongo_client):
    return mongo_client[TEST_DATABASE]


# =============================================================================
# API
# =============================================================================


@pytest.fixture
def app(settings, connector):
    return create_app(settings=settings, connector=connector)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Test client with the lifespan (connect/disconnect) running."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seed_users(client) -> list[dict]:
    """Create the Paris/Oslo users through the API and return the responses."""
    users = [
        {"name": "Ana", "email": "ana@example.com", "age": 20, "city": "Paris"},
        {"name": "Ben", "email": "ben@example.com", "age": 30, "city": "Paris"},
        {"name": "Cleo", "email": "cleo@example.com", "age": 40, "city": "Paris"},
        {"name": "Dag", "email": "dag@example.com", "age": 50, "city": "Oslo"},
    ]
    created = []
    for body in users:
        resp = client.post("/users", json=body)
        assert resp.status_code == 200
        created.append(resp.json())
    return created
