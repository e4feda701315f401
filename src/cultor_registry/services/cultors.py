"""Cultor registry service: create, update, delete, get and list."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date

from cultor_registry.domain import (
    MAX_PAGE_SIZE,
    OTHER_DISCIPLINE_NAME,
    Accepted,
    ArtCategory,
    ArtDiscipline,
    Cultor,
    CultorCriteria,
    CultorId,
    CultorPage,
    EntityKind,
    Municipality,
    NotFoundFailure,
    Outcome,
    PageRequest,
    Parish,
    Rejected,
)
from cultor_registry.filtering import compile_criteria
from cultor_registry.lookups import LookupRegistry
from cultor_registry.persistence.interfaces import UnitOfWork
from cultor_registry.validation import CultorPipeline, Submission, UniquenessGuard

UnitOfWorkFactory = Callable[[], UnitOfWork]

logger = logging.getLogger(__name__)


class CultorService:
    """Runs each registry operation inside its own unit of work.

    Expected failures come back as ``Rejected`` outcomes. ``ConflictError``
    from the store (a duplicate that raced past the uniqueness checks)
    propagates to the caller.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        *,
        today: Callable[[], date],
        other_discipline_name: str = OTHER_DISCIPLINE_NAME,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self._uow_factory = uow_factory
        self._today = today
        self._other_discipline_name = other_discipline_name
        self._max_page_size = max_page_size

    def _pipeline(self, uow: UnitOfWork) -> CultorPipeline:
        return CultorPipeline(
            LookupRegistry(uow),
            UniquenessGuard(uow.cultor_repository),
            today=self._today,
            other_discipline_name=self._other_discipline_name,
        )

    async def create(self, data: Submission) -> Outcome[Cultor]:
        async with self._uow_factory() as uow:
            outcome = await self._pipeline(uow).create(data)
            if isinstance(outcome, Rejected):
                logger.warning("Cultor creation rejected: %s", outcome.kind.value)
                return outcome
            stored = await uow.cultor_repository.add(outcome.value)
            await uow.commit()
        logger.info("Created cultor %s", stored.id)
        return Accepted(stored)

    async def update(self, cultor_id: CultorId, data: Submission) -> Outcome[Cultor]:
        async with self._uow_factory() as uow:
            existing = await uow.cultor_repository.get(cultor_id)
            if existing is None:
                logger.warning("Cultor update rejected: cultor %s not found", cultor_id)
                return Rejected(NotFoundFailure(entity=EntityKind.CULTOR, id=cultor_id))
            outcome = await self._pipeline(uow).update(existing, data)
            if isinstance(outcome, Rejected):
                logger.warning(
                    "Cultor %s update rejected: %s", cultor_id, outcome.kind.value
                )
                return outcome
            stored = await uow.cultor_repository.update(outcome.value)
            await uow.commit()
        logger.info("Updated cultor %s", cultor_id)
        return Accepted(stored)

    async def delete(self, cultor_id: CultorId) -> Outcome[CultorId]:
        async with self._uow_factory() as uow:
            if not await uow.cultor_repository.exists(cultor_id):
                logger.warning("Cultor delete rejected: cultor %s not found", cultor_id)
                return Rejected(NotFoundFailure(entity=EntityKind.CULTOR, id=cultor_id))
            await uow.cultor_repository.delete(cultor_id)
            await uow.commit()
        logger.info("Deleted cultor %s", cultor_id)
        return Accepted(cultor_id)

    async def get(self, cultor_id: CultorId) -> Outcome[Cultor]:
        async with self._uow_factory() as uow:
            cultor = await uow.cultor_repository.get(cultor_id)
        if cultor is None:
            return Rejected(NotFoundFailure(entity=EntityKind.CULTOR, id=cultor_id))
        return Accepted(cultor)

    async def list_cultors(
        self,
        criteria: CultorCriteria | None = None,
        page: PageRequest | None = None,
    ) -> CultorPage:
        """Return one page of matching cultors ordered by id."""

        predicate = compile_criteria(criteria or CultorCriteria())
        requested = page or PageRequest()
        request = PageRequest(page=requested.page, size=min(requested.size, self._max_page_size))
        async with self._uow_factory() as uow:
            items, total = await uow.cultor_repository.find(
                predicate, offset=request.offset, limit=request.size
            )
        return CultorPage(
            items=tuple(items), total=total, page=request.page, size=request.size
        )

    async def list_municipalities(self) -> Sequence[Municipality]:
        async with self._uow_factory() as uow:
            return await LookupRegistry(uow).list_municipalities()

    async def list_parishes(self, municipality_id: int | None = None) -> Sequence[Parish]:
        async with self._uow_factory() as uow:
            return await LookupRegistry(uow).list_parishes(municipality_id)

    async def list_art_categories(self) -> Sequence[ArtCategory]:
        async with self._uow_factory() as uow:
            return await LookupRegistry(uow).list_art_categories()

    async def list_art_disciplines(
        self, art_category_id: int | None = None
    ) -> Sequence[ArtDiscipline]:
        async with self._uow_factory() as uow:
            return await LookupRegistry(uow).list_art_disciplines(art_category_id)


__all__ = ["CultorService", "UnitOfWorkFactory"]
