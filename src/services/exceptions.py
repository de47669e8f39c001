"""Shared exceptions for service layer operations."""


class ValidationError(Exception):
    """Raised when input for a bookmark operation is missing or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NotFoundError(Exception):
    """Raised when no bookmark exists with the requested ID."""

    def __init__(self, bookmark_id: str, message: str = "Bookmark not found") -> None:
        self.bookmark_id = bookmark_id
        super().__init__(message)