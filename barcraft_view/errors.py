"""Exceptions raised by the cocktail list view."""
from __future__ import annotations

from typing import Optional


class ValidationError(ValueError):
    """Raised when a query is rejected before any request is issued."""


class FetchFailed(RuntimeError):
    """Raised when the proxy cannot be reached or answers with an error status."""

    def __init__(
        self, message: str, status: Optional[int] = None, url: Optional[str] = None
    ) -> None:
        if status is not None:
            message = f"{message} (HTTP {status})"
        super().__init__(message)
        self.status = status
        self.url = url


class NotFound(LookupError):
    """Raised when a detail lookup succeeds but carries no cocktail."""

    def __init__(self, cocktail_id: int | str) -> None:
        super().__init__(f"Cocktail with ID {cocktail_id} not found")
        self.cocktail_id = cocktail_id
