"""SQLite repository implementations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

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
from cultor_registry.persistence.errors import ConflictError, NotFoundError
from cultor_registry.persistence.interfaces import CultorRepository, LookupRepository

from .filters import to_clause
from .models import (
    ArtCategoryRecord,
    ArtDisciplineRecord,
    Base,
    CultorRecord,
    MunicipalityRecord,
    ParishRecord,
)

L = TypeVar("L", Municipality, Parish, ArtCategory, ArtDiscipline)

_CULTOR_FIELDS = tuple(name for name in Cultor.model_fields if name != "id")


def _columns(record: Base, names: Sequence[str]) -> dict[str, Any]:
    return {name: getattr(record, name) for name in names}


def _to_cultor(record: CultorRecord) -> Cultor:
    return Cultor.model_validate({"id": record.id, **_columns(record, _CULTOR_FIELDS)})


def _apply(record: CultorRecord, cultor: Cultor) -> None:
    for name in _CULTOR_FIELDS:
        setattr(record, name, getattr(cultor, name))
    record.gender = cultor.gender.value
    record.search_first_name = cultor.first_name.lower()
    record.search_last_name = cultor.last_name.lower()


class SQLiteCultorRepository(CultorRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, cultor_id: CultorId) -> Cultor | None:
        record = await self._session.get(CultorRecord, int(cultor_id))
        if record is None:
            return None
        return _to_cultor(record)

    async def exists(self, cultor_id: CultorId) -> bool:
        stmt = select(CultorRecord.id).where(CultorRecord.id == int(cultor_id))
        return await self._session.scalar(stmt) is not None

    async def add(self, cultor: Cultor) -> Cultor:
        record = CultorRecord()
        _apply(record, cultor)
        self._session.add(record)
        await self._flush()
        return cultor.model_copy(update={"id": CultorId(record.id)})

    async def update(self, cultor: Cultor) -> Cultor:
        record = None
        if cultor.id is not None:
            record = await self._session.get(CultorRecord, int(cultor.id))
        if record is None:
            msg = f"Cultor {cultor.id} not found"
            raise NotFoundError(msg)
        _apply(record, cultor)
        await self._flush()
        return cultor

    async def delete(self, cultor_id: CultorId) -> None:
        record = await self._session.get(CultorRecord, int(cultor_id))
        if record is not None:
            await self._session.delete(record)
            await self._session.flush()

    async def exists_by_field(self, field: UniqueField, value: str) -> bool:
        column = getattr(CultorRecord, field.value)
        stmt = select(CultorRecord.id).where(column == value).limit(1)
        return await self._session.scalar(stmt) is not None

    async def exists_by_field_excluding(
        self,
        field: UniqueField,
        value: str,
        exclude_id: CultorId,
    ) -> bool:
        column = getattr(CultorRecord, field.value)
        stmt = (
            select(CultorRecord.id)
            .where(column == value, CultorRecord.id != int(exclude_id))
            .limit(1)
        )
        return await self._session.scalar(stmt) is not None

    async def find(
        self,
        predicate: Predicate,
        *,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[Cultor], int]:
        clause = to_clause(predicate)
        stmt: Select[tuple[CultorRecord]] = (
            select(CultorRecord)
            .where(clause)
            .order_by(CultorRecord.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        items = [_to_cultor(record) for record in result.scalars()]
        total = await self._session.scalar(
            select(func.count()).select_from(CultorRecord).where(clause)
        )
        return items, int(total or 0)

    async def _flush(self) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise ConflictError(str(exc.orig)) from exc


class SQLiteLookupRepository(LookupRepository[L], Generic[L]):
    """Reference data table mapped onto one domain model."""

    def __init__(
        self,
        session: AsyncSession,
        record_type: type[Base],
        model_type: type[L],
    ) -> None:
        self._session = session
        self._record_type = record_type
        self._model_type = model_type
        self._fields = tuple(model_type.model_fields)

    async def get(self, item_id: int) -> L | None:
        record = await self._session.get(self._record_type, item_id)
        if record is None:
            return None
        return self._model_type.model_validate(_columns(record, self._fields))

    async def list_all(self) -> Sequence[L]:
        stmt = select(self._record_type).order_by(self._record_type.id)
        result = await self._session.execute(stmt)
        return [
            self._model_type.model_validate(_columns(record, self._fields))
            for record in result.scalars()
        ]

    async def count(self) -> int:
        total = await self._session.scalar(select(func.count()).select_from(self._record_type))
        return int(total or 0)

    async def add_many(self, items: Sequence[L]) -> None:
        self._session.add_all(self._record_type(**item.model_dump()) for item in items)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise ConflictError(str(exc.orig)) from exc


class SQLiteMunicipalityRepository(SQLiteLookupRepository[Municipality]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, MunicipalityRecord, Municipality)


class SQLiteParishRepository(SQLiteLookupRepository[Parish]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ParishRecord, Parish)


class SQLiteArtCategoryRepository(SQLiteLookupRepository[ArtCategory]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ArtCategoryRecord, ArtCategory)


class SQLiteArtDisciplineRepository(SQLiteLookupRepository[ArtDiscipline]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ArtDisciplineRecord, ArtDiscipline)


__all__ = [
    "SQLiteArtCategoryRepository",
    "SQLiteArtDisciplineRepository",
    "SQLiteCultorRepository",
    "SQLiteLookupRepository",
    "SQLiteMunicipalityRepository",
    "SQLiteParishRepository",
]
