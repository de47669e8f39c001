"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    Everything is optional at the schema level; the service decides what is
    required (a missing url is a 400, not a schema error) and normalizes the
    values.
    """

    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def ignore_non_list_tags(cls, v: Any) -> Any:
        """Treat any non-list tags value as no tags."""
        if not isinstance(v, list):
            return None
        return v


class BookmarkUpdate(BaseModel):
    """
    Schema for a partial bookmark update.

    Only fields present in the request body are applied. Values are taken
    as-is: unlike create, nothing is normalized or truncated. `id` and
    `createdAt` in the body are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    url: str
    title: str
    description: str
    tags: list[str]
    created_at: datetime = Field(alias="createdAt")
