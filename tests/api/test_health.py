"""Tests for the health check endpoint."""
from httpx import AsyncClient

from db.store import BookmarkStore


async def test_health_endpoint_returns_200(client: AsyncClient) -> None:
    """Test that the health endpoint returns 200 OK."""
    response = await client.get("/health")
    assert response.status_code == 200


async def test_health_endpoint_reports_bookmark_count(
    client: AsyncClient, seeded_store: BookmarkStore,
) -> None:
    """Test that the health endpoint reports status and the number of bookmarks."""
    response = await client.get("/health")
    assert response.json() == {"status": "healthy", "bookmarks": len(seeded_store)}
