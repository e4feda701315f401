"""Custom persistence exceptions."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base class for persistence layer errors."""


class NotFoundError(RepositoryError):
    """Raised when a write targets an entity that does not exist."""


class ConflictError(RepositoryError):
    """Raised when the store rejects a write that breaks a uniqueness constraint."""
