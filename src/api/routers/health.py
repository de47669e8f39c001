"""Health check endpoints."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_store
from db.store import BookmarkStore


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    bookmarks: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: BookmarkStore = Depends(get_store),
) -> HealthResponse:
    """Check application health and report how many bookmarks are held."""
    return HealthResponse(status="healthy", bookmarks=len(store))
