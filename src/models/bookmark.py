"""Bookmark record held by the bookmark store."""
from dataclasses import dataclass, field
from datetime import UTC, datetime

from uuid6 import uuid7


def _new_id() -> str:
    return str(uuid7())


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass
class Bookmark:
    """
    A saved link with its metadata and tags.

    `id` and `created_at` are assigned once at creation and never change.
    Everything else can be replaced by an update.
    """

    url: str
    title: str
    description: str = ""
    tags: list[str] = field(default_factory=list)
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_utc_now)


# Fields an update is never allowed to overwrite
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})
