"""Domain models."""
from models.bookmark import IMMUTABLE_FIELDS, Bookmark

__all__ = ["IMMUTABLE_FIELDS", "Bookmark"]
