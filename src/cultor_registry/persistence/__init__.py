"""Persistence layer: repository protocols plus in-memory and SQLite backends."""

from .errors import ConflictError, NotFoundError, RepositoryError
from .interfaces import CultorRepository, LookupRepository, UnitOfWork
from .memory import InMemoryCultorRepository, InMemoryLookupRepository, InMemoryUnitOfWork

__all__ = [
    "ConflictError",
    "CultorRepository",
    "InMemoryCultorRepository",
    "InMemoryLookupRepository",
    "InMemoryUnitOfWork",
    "LookupRepository",
    "NotFoundError",
    "RepositoryError",
    "UnitOfWork",
]
