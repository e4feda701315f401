"""In-memory repository implementations for unit testing."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from copy import deepcopy
from dataclasses import dataclass, field
from types import TracebackType
from typing import Generic, TypeVar

from cultor_registry.domain import (
    ArtCategory,
    ArtDiscipline,
    Cultor,
    CultorId,
    Municipality,
    Parish,
    UniqueField,
)
from cultor_registry.filtering import Predicate, matches

from .errors import ConflictError, NotFoundError
from .interfaces import CultorRepository, LookupRepository, UnitOfWork

T = TypeVar("T")
L = TypeVar("L", Municipality, Parish, ArtCategory, ArtDiscipline)


def _copy(value: T) -> T:
    return deepcopy(value)


@dataclass
class InMemoryCultorRepository(CultorRepository):
    _cultors: dict[CultorId, Cultor] = field(default_factory=dict)
    _next_id: int = 1

    async def get(self, cultor_id: CultorId) -> Cultor | None:
        return _copy(self._cultors.get(cultor_id))

    async def exists(self, cultor_id: CultorId) -> bool:
        return cultor_id in self._cultors

    async def add(self, cultor: Cultor) -> Cultor:
        self._enforce_unique(cultor, exclude_id=None)
        stored = cultor.model_copy(update={"id": CultorId(self._next_id)})
        self._next_id += 1
        self._cultors[stored.id] = stored
        return _copy(stored)

    async def update(self, cultor: Cultor) -> Cultor:
        if cultor.id is None or cultor.id not in self._cultors:
            msg = f"Cultor {cultor.id} not found"
            raise NotFoundError(msg)
        self._enforce_unique(cultor, exclude_id=cultor.id)
        self._cultors[cultor.id] = cultor
        return _copy(cultor)

    async def delete(self, cultor_id: CultorId) -> None:
        self._cultors.pop(cultor_id, None)

    async def exists_by_field(self, field: UniqueField, value: str) -> bool:
        return any(
            cultor.unique_value(field) == value for cultor in self._cultors.values()
        )

    async def exists_by_field_excluding(
        self,
        field: UniqueField,
        value: str,
        exclude_id: CultorId,
    ) -> bool:
        return any(
            cultor.unique_value(field) == value
            for cultor_id, cultor in self._cultors.items()
            if cultor_id != exclude_id
        )

    async def find(
        self,
        predicate: Predicate,
        *,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[Cultor], int]:
        matched = [
            cultor
            for _, cultor in sorted(self._cultors.items())
            if matches(predicate, cultor)
        ]
        return [_copy(cultor) for cultor in matched[offset : offset + limit]], len(matched)

    def _enforce_unique(self, cultor: Cultor, *, exclude_id: CultorId | None) -> None:
        # Mirrors the unique constraints of the SQL schema.
        for unique_field in UniqueField:
            value = cultor.unique_value(unique_field)
            if value is None:
                continue
            for other_id, other in self._cultors.items():
                if other_id != exclude_id and other.unique_value(unique_field) == value:
                    msg = f"Unique constraint failed: cultors.{unique_field.value}"
                    raise ConflictError(msg)


@dataclass
class InMemoryLookupRepository(LookupRepository[L], Generic[L]):
    _items: dict[int, L] = field(default_factory=dict)

    async def get(self, item_id: int) -> L | None:
        return _copy(self._items.get(item_id))

    async def list_all(self) -> Sequence[L]:
        return [_copy(item) for _, item in sorted(self._items.items())]

    async def count(self) -> int:
        return len(self._items)

    async def add_many(self, items: Sequence[L]) -> None:
        for item in items:
            if item.id in self._items:
                msg = f"{type(item).__name__} {item.id} already exists"
                raise ConflictError(msg)
            self._items[item.id] = item


@dataclass
class InMemoryUnitOfWork(UnitOfWork):
    cultor_repository: InMemoryCultorRepository = field(
        default_factory=InMemoryCultorRepository
    )
    municipality_repository: InMemoryLookupRepository[Municipality] = field(
        default_factory=InMemoryLookupRepository
    )
    parish_repository: InMemoryLookupRepository[Parish] = field(
        default_factory=InMemoryLookupRepository
    )
    art_category_repository: InMemoryLookupRepository[ArtCategory] = field(
        default_factory=InMemoryLookupRepository
    )
    art_discipline_repository: InMemoryLookupRepository[ArtDiscipline] = field(
        default_factory=InMemoryLookupRepository
    )
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def __aenter__(self) -> InMemoryUnitOfWork:
        await self._lock.acquire()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._lock.release()

    async def commit(self) -> None:
        return None

    async def rollback(self) -> None:
        return None
