"""In-memory bookmark store."""
import dataclasses
import threading
from collections.abc import Iterable
from typing import Any

from models.bookmark import IMMUTABLE_FIELDS, Bookmark


class BookmarkStore:
    """
    Ordered, process-local collection of bookmarks.

    Records are kept in insertion order and looked up by linear scan. Every
    operation holds the store lock, so an insert, merge, replace or remove is
    never observed half-applied by another operation. Nothing survives a
    restart.

    Records handed out by the store are the stored instances; callers must go
    through `merge`/`replace` to change them.
    """

    def __init__(self, records: Iterable[Bookmark] = ()) -> None:
        self._lock = threading.RLock()
        self._records: list[Bookmark] = list(records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list_all(self) -> list[Bookmark]:
        """Return all bookmarks in insertion order."""
        with self._lock:
            return list(self._records)

    def list_by_tag(self, tag: str) -> list[Bookmark]:
        """
        Return bookmarks whose tags contain `tag`, in insertion order.

        The match is exact; callers lowercase the filter value since stored
        tags are lowercased on create.
        """
        with self._lock:
            return [record for record in self._records if tag in record.tags]

    def find_index(self, bookmark_id: str) -> int | None:
        """Return the position of the bookmark with `bookmark_id`, or None."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == bookmark_id:
                    return index
            return None

    def get(self, bookmark_id: str) -> Bookmark | None:
        """Get a bookmark by ID. Returns None if not found."""
        with self._lock:
            index = self.find_index(bookmark_id)
            return None if index is None else self._records[index]

    def insert(self, record: Bookmark) -> None:
        """Append a bookmark to the end of the collection."""
        with self._lock:
            self._records.append(record)

    def replace(self, bookmark_id: str, record: Bookmark) -> bool:
        """Overwrite the bookmark at `bookmark_id`'s position. Returns False if not found."""
        with self._lock:
            index = self.find_index(bookmark_id)
            if index is None:
                return False
            self._records[index] = record
            return True

    def merge(self, bookmark_id: str, changes: dict[str, Any]) -> Bookmark | None:
        """
        Shallow-merge `changes` onto a bookmark and store the result.

        `id` and `created_at` are always kept from the existing record.
        Returns the merged bookmark, or None if not found.
        """
        with self._lock:
            index = self.find_index(bookmark_id)
            if index is None:
                return None
            updates = {
                key: value for key, value in changes.items() if key not in IMMUTABLE_FIELDS
            }
            merged = dataclasses.replace(self._records[index], **updates)
            self._records[index] = merged
            return merged

    def remove(self, bookmark_id: str) -> bool:
        """Delete a bookmark. Returns True if deleted, False if not found."""
        with self._lock:
            index = self.find_index(bookmark_id)
            if index is None:
                return False
            del self._records[index]
            return True

    def clear(self) -> None:
        """Remove every bookmark."""
        with self._lock:
            self._records.clear()

    def seed(self, records: Iterable[Bookmark]) -> None:
        """Replace the contents with `records`."""
        with self._lock:
            self._records = list(records)
