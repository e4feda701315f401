"""Persistence layer abstractions for repositories and unit of work."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType
from typing import Protocol, TypeVar

from cultor_registry.domain import (
    ArtCategory,
    ArtDiscipline,
    Cultor,
    CultorId,
    Municipality,
    Parish,
    UniqueField,
)
from cultor_registry.filtering import Predicate

L = TypeVar("L", Municipality, Parish, ArtCategory, ArtDiscipline)


class CultorRepository(Protocol):
    """Storage for cultor records."""

    async def get(self, cultor_id: CultorId) -> Cultor | None: ...

    async def exists(self, cultor_id: CultorId) -> bool: ...

    async def add(self, cultor: Cultor) -> Cultor:
        """Persist a new record and return it with its assigned id."""
        ...

    async def update(self, cultor: Cultor) -> Cultor: ...

    async def delete(self, cultor_id: CultorId) -> None: ...

    async def exists_by_field(self, field: UniqueField, value: str) -> bool: ...

    async def exists_by_field_excluding(
        self,
        field: UniqueField,
        value: str,
        exclude_id: CultorId,
    ) -> bool: ...

    async def find(
        self,
        predicate: Predicate,
        *,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[Cultor], int]:
        """Return one window of matches ordered by id, plus the total match count."""
        ...


class LookupRepository(Protocol[L]):
    """Read-mostly storage for one kind of reference data."""

    async def get(self, item_id: int) -> L | None: ...

    async def list_all(self) -> Sequence[L]: ...

    async def count(self) -> int: ...

    async def add_many(self, items: Sequence[L]) -> None: ...


class UnitOfWork(Protocol):
    """Transactional boundary for repository operations."""

    cultor_repository: CultorRepository
    municipality_repository: LookupRepository[Municipality]
    parish_repository: LookupRepository[Parish]
    art_category_repository: LookupRepository[ArtCategory]
    art_discipline_repository: LookupRepository[ArtDiscipline]

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
