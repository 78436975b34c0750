"""Engine exceptions."""

from __future__ import annotations

from typing import Any


class ScoutError(Exception):
    """Base exception for engine errors."""


class ConfigurationError(ScoutError):
    """Raised when the engine or a record type is not configured for an operation."""


class IndexOperationError(ScoutError):
    """Raised when checking, creating or deleting an index fails."""


class QueryError(ScoutError):
    """Raised when a search request fails."""


class BulkError(ScoutError):
    """Raised when a bulk request fails or the backend reports item errors.

    Attributes:
        items: Per-item results reported by the backend (empty when the
            request itself failed).
    """

    def __init__(self, message: str, items: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.items = items or []
