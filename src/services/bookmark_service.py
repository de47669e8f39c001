"""Service layer for bookmark CRUD operations."""
import logging

from db.store import BookmarkStore
from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import NotFoundError, ValidationError
from services.url_scraper import DEFAULT_TIMEOUT, scrape_title

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 500
MAX_TAGS = 5

_URL_SCHEMES = ('http://', 'https://')


def normalize_url(url: str) -> str:
    """Prepend https:// to a URL that has no http/https scheme."""
    if url.lower().startswith(_URL_SCHEMES):
        return url
    return f"https://{url}"


def normalize_tags(tags: list[str] | None) -> list[str]:
    """Lowercase tags and keep at most the first MAX_TAGS, preserving order."""
    if not tags:
        return []
    return [tag.lower() for tag in tags[:MAX_TAGS]]


async def resolve_title(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,  # noqa: ASYNC109
    block_private: bool = True,
) -> str:
    """
    Look up the page title for `url`, falling back to the URL itself.

    Best-effort: any failure to fetch or parse the page is logged and the URL
    is returned, so this never fails.
    """
    result = await scrape_title(url, timeout=timeout, block_private=block_private)
    if result.found:
        return result.title
    logger.warning("Title enrichment failed for %s: %s", url, result.error)
    return url


async def create_bookmark(
    store: BookmarkStore,
    data: BookmarkCreate,
    timeout: float = DEFAULT_TIMEOUT,  # noqa: ASYNC109
    block_private: bool = True,
) -> Bookmark:
    """
    Create a new bookmark, fetching the page title when none is given.

    Flow:
    1. Reject a missing or empty url
    2. Normalize the url (default to https://)
    3. If no title was provided, fetch the page and use its <title>, or the
       url when that fails
    4. Truncate title/description, lowercase and cap tags
    5. Append to the store and return the new bookmark

    Raises:
        ValidationError: If url is missing or empty.
    """
    if not data.url:
        raise ValidationError("URL is required")

    url = normalize_url(data.url)
    title = data.title
    if not title:
        title = await resolve_title(url, timeout=timeout, block_private=block_private)

    bookmark = Bookmark(
        url=url,
        title=title[:MAX_TITLE_LENGTH],
        description=(data.description or "")[:MAX_DESCRIPTION_LENGTH],
        tags=normalize_tags(data.tags),
    )
    store.insert(bookmark)
    logger.info("Created bookmark %s for %s", bookmark.id, bookmark.url)
    return bookmark


async def list_bookmarks(
    store: BookmarkStore,
    tag: str | None = None,
) -> list[Bookmark]:
    """List bookmarks in store order, optionally only those carrying `tag` (case-insensitive)."""
    if tag:
        return store.list_by_tag(tag.lower())
    return store.list_all()


async def get_bookmark(store: BookmarkStore, bookmark_id: str) -> Bookmark:
    """
    Get a bookmark by ID.

    Raises:
        NotFoundError: If no bookmark has that ID.
    """
    bookmark = store.get(bookmark_id)
    if bookmark is None:
        raise NotFoundError(bookmark_id)
    return bookmark


async def update_bookmark(
    store: BookmarkStore,
    bookmark_id: str,
    data: BookmarkUpdate,
) -> Bookmark:
    """
    Apply a partial update to a bookmark.

    Only fields present in the request are merged; explicit nulls are skipped.
    The id and creation time always come from the existing record.

    Note: merged values are stored as given. Create normalizes the url,
    truncates title/description and lowercases tags; update does none of that.

    Raises:
        NotFoundError: If no bookmark has that ID.
    """
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    bookmark = store.merge(bookmark_id, changes)
    if bookmark is None:
        raise NotFoundError(bookmark_id)
    logger.info("Updated bookmark %s (%s)", bookmark_id, ", ".join(sorted(changes)) or "no changes")
    return bookmark


async def delete_bookmark(store: BookmarkStore, bookmark_id: str) -> None:
    """
    Delete a bookmark.

    Raises:
        NotFoundError: If no bookmark has that ID.
    """
    if not store.remove(bookmark_id):
        raise NotFoundError(bookmark_id)
    logger.info("Deleted bookmark %s", bookmark_id)
