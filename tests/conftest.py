"""
BirdAPI: Test Configuration (conftest.py)
==========================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── test_settings: Settings pointing at the repo's assets directory
    ├── memory_store: Fresh, empty InMemoryBirdStore
    ├── sqlite_settings: Settings for a temporary SQLite database
    ├── sql_store: SqlBirdStore with the `birds` table created
    ├── test_client: HTTPX AsyncClient for an app serving memory_store
    └── sql_client: HTTPX AsyncClient for an app serving sql_store
"""

import os
from pathlib import Path

# Override settings for testing BEFORE any birdapi imports
# Why: the module-level app in birdapi.main is built on import
os.environ["STORE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from birdapi.config import Settings
from birdapi.main import create_app
from birdapi.schemas.bird import Bird
from birdapi.stores import InMemoryBirdStore, SqlBirdStore

ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"


@pytest.fixture
def test_settings():
    return Settings(assets_dir=str(ASSETS_DIR), log_level="WARNING")


@pytest.fixture
def memory_store():
    return InMemoryBirdStore()


@pytest.fixture
def sample_bird():
    return Bird(species="Crow", description="Black bird")


@pytest.fixture
def sqlite_settings(tmp_path):
    """
    Settings for a SQLite file inside pytest's tmp_path.

    Why a file (not :memory:): every pooled connection to `:memory:` would
    see its own empty database.
    """
    return Settings(
        store_backend="sql",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'birds.db'}",
        assets_dir=str(ASSETS_DIR),
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def sql_store(sqlite_settings):
    store = SqlBirdStore.from_settings(sqlite_settings)
    await store.create_schema()
    yield store
    await store.close()


@pytest_asyncio.fixture
async def test_client(test_settings, memory_store):
    """
    Async HTTP client talking to an app that serves `memory_store`.

    Usage:
        async def test_hello(test_client):
            response = await test_client.get("/hello")
            assert response.status_code == 200
    """
    app = create_app(settings=test_settings, store=memory_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def sql_client(sqlite_settings, sql_store):
    app = create_app(settings=sqlite_settings, store=sql_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
