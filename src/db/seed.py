"""Example bookmarks loaded into the store at startup."""
import logging

from db.store import BookmarkStore
from models.bookmark import Bookmark

logger = logging.getLogger(__name__)

SEED_BOOKMARKS = [
    {
        'title': 'GitHub',
        'url': 'https://github.com',
        'description': 'Where world builds software',
        'tags': ['dev', 'git'],
    },
    {
        'title': 'MDN Web Docs',
        'url': 'https://developer.mozilla.org',
        'description': 'Web docs for devs',
        'tags': ['dev', 'docs'],
    },
    {
        'title': 'Vite',
        'url': 'https://vitejs.dev',
        'description': 'Next gen frontend tooling',
        'tags': ['tooling', 'frontend'],
    },
    {
        'title': 'Tailwind CSS',
        'url': 'https://tailwindcss.com',
        'description': 'Utility-first CSS framework',
        'tags': ['css', 'design'],
    },
    {
        'title': 'Excalidraw',
        'url': 'https://excalidraw.com',
        'description': 'Virtual whiteboard',
        'tags': ['design', 'tools'],
    },
]


def build_seed_bookmarks() -> list[Bookmark]:
    """Build fresh bookmark records (new ids and timestamps) from SEED_BOOKMARKS."""
    return [
        Bookmark(
            url=item['url'],
            title=item['title'],
            description=item['description'],
            tags=list(item['tags']),
        )
        for item in SEED_BOOKMARKS
    ]


def populate(store: BookmarkStore) -> None:
    """Reset the store to the example bookmarks."""
    bookmarks = build_seed_bookmarks()
    store.seed(bookmarks)
    logger.info("Seeded bookmark store with %d bookmarks", len(bookmarks))
