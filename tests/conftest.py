"""Root conftest — shared fixtures: path maps, providers, FastAPI test client.

Invariants:
    - Tests never read a real .env graph file (built-in map or tmp files only)
    - Dependency overrides cleared after every client test

Design Decisions:
    - Providers swapped through app.dependency_overrides, not monkeypatching modules
    - httpx AsyncClient + ASGITransport: lifespan not run, so tests configure logging themselves
"""

import os

os.environ.setdefault("SKYROUTE_LOG_FORMAT", "text")
os.environ.pop("SKYROUTE_GRAPH_FILE", None)

import pytest
from httpx import ASGITransport, AsyncClient

from skyroute.config import Settings, get_settings
from skyroute.infrastructure.graph_provider import (
    StaticGraphProvider, get_graph_provider,
)
from skyroute.main import app
from tests.fakes import SCENARIO_PATHS


@pytest.fixture
def scenario_paths() -> dict:
    return {node: dict(edges) for node, edges in SCENARIO_PATHS.items()}


@pytest.fixture
def provider():
    return StaticGraphProvider()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
async def client(provider, settings):
    """FastAPI test client with provider and settings overridden."""
    app.dependency_overrides[get_graph_provider] = lambda: provider
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
