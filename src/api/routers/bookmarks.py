"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends, Query, Response

from api.dependencies import get_settings, get_store
from core.config import Settings
from db.store import BookmarkStore
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from services import bookmark_service

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.post("", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate | None = None,
    store: BookmarkStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> BookmarkResponse:
    """Create a new bookmark, fetching the page title if none is given."""
    bookmark = await bookmark_service.create_bookmark(
        store,
        data or BookmarkCreate(),
        timeout=settings.fetch_timeout,
        block_private=settings.block_private_urls,
    )
    return BookmarkResponse.model_validate(bookmark)


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    tag: str | None = Query(default=None, description="Only bookmarks with this tag (case-insensitive)"),  # noqa: E501
    store: BookmarkStore = Depends(get_store),
) -> list[BookmarkResponse]:
    """List all bookmarks in creation order, optionally filtered by tag."""
    bookmarks = await bookmark_service.list_bookmarks(store, tag=tag)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: str,
    store: BookmarkStore = Depends(get_store),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    bookmark = await bookmark_service.get_bookmark(store, bookmark_id)
    return BookmarkResponse.model_validate(bookmark)


@router.put("/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    bookmark_id: str,
    data: BookmarkUpdate | None = None,
    store: BookmarkStore = Depends(get_store),
) -> BookmarkResponse:
    """Update a bookmark with the fields present in the body. No body changes nothing."""
    bookmark = await bookmark_service.update_bookmark(
        store, bookmark_id, data or BookmarkUpdate(),
    )
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: str,
    store: BookmarkStore = Depends(get_store),
) -> Response:
    """Delete a bookmark."""
    await bookmark_service.delete_bookmark(store, bookmark_id)
    return Response(status_code=204)
