"""FastAPI dependencies for injection."""
from fastapi import Request

from core.config import get_settings
from db.store import BookmarkStore


def get_store(request: Request) -> BookmarkStore:
    """Return the bookmark store created at application startup."""
    return request.app.state.store


__all__ = [
    "get_settings",
    "get_store",
]
