"""Async SQLite unit of work implementation."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from types import TracebackType
from typing import Any

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cultor_registry.persistence.errors import ConflictError
from cultor_registry.persistence.interfaces import UnitOfWork

from .migrations import apply_migrations
from .repositories import (
    SQLiteArtCategoryRepository,
    SQLiteArtDisciplineRepository,
    SQLiteCultorRepository,
    SQLiteMunicipalityRepository,
    SQLiteParishRepository,
)

_migration_lock = asyncio.Lock()
_migrated_urls: set[str] = set()


async def _ensure_migrated(engine: AsyncEngine, database_url: str) -> None:
    async with _migration_lock:
        if database_url in _migrated_urls:
            return
        await apply_migrations(engine)
        _migrated_urls.add(database_url)


def _enable_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class SQLiteUnitOfWork(UnitOfWork):
    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession],
        database_url: str,
    ) -> None:
        self._engine = engine
        self._session_factory = session_factory
        self._database_url = database_url
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> SQLiteUnitOfWork:
        await _ensure_migrated(self._engine, self._database_url)
        self._session = self._session_factory()
        self.cultor_repository = SQLiteCultorRepository(self._session)
        self.municipality_repository = SQLiteMunicipalityRepository(self._session)
        self.parish_repository = SQLiteParishRepository(self._session)
        self.art_category_repository = SQLiteArtCategoryRepository(self._session)
        self.art_discipline_repository = SQLiteArtDisciplineRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._session is None:
            return
        try:
            if exc_type is not None:
                await self._session.rollback()
            else:
                await self.commit()
        finally:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        if self._session is None:
            raise RuntimeError("UnitOfWork session not started")
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            raise ConflictError(str(exc.orig)) from exc

    async def rollback(self) -> None:
        if self._session is None:
            raise RuntimeError("UnitOfWork session not started")
        await self._session.rollback()


def create_sqlite_unit_of_work_factory(database_url: str) -> Callable[[], SQLiteUnitOfWork]:
    engine = create_async_engine(database_url, future=True)
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    def factory() -> SQLiteUnitOfWork:
        return SQLiteUnitOfWork(engine, session_factory, database_url)

    return factory


__all__ = ["SQLiteUnitOfWork", "create_sqlite_unit_of_work_factory"]
