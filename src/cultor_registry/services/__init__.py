"""Application services."""

from .cultors import CultorService, UnitOfWorkFactory

__all__ = ["CultorService", "UnitOfWorkFactory"]
