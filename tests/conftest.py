"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from db import seed
from db.store import BookmarkStore

# Keep the app configuration independent of any local .env
os.environ.setdefault("SEED_BOOKMARKS", "false")


@pytest.fixture
def store() -> BookmarkStore:
    """An empty bookmark store, private to the test."""
    return BookmarkStore()


@pytest.fixture
def seeded_store(store: BookmarkStore) -> BookmarkStore:
    """The test store populated with the example bookmarks."""
    seed.populate(store)
    return store


@pytest.fixture
async def client(store: BookmarkStore) -> AsyncGenerator[AsyncClient]:
    """
    Create a test client whose requests all use the test's store.

    ASGITransport does not run the lifespan, so the store dependency is
    overridden directly.
    """
    from core.config import get_settings

    get_settings.cache_clear()

    from api.dependencies import get_store
    from api.main import app

    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
