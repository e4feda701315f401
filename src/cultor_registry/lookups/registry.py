"""Resolve reference ids and enumerate reference data."""

from __future__ import annotations

from collections.abc import Sequence

from cultor_registry.domain import (
    ArtCategory,
    ArtDiscipline,
    EntityKind,
    Municipality,
    NotFoundFailure,
    Parish,
)
from cultor_registry.persistence.interfaces import UnitOfWork


class LookupRegistry:
    """Read-only view over the reference tables of an open unit of work.

    ``find_*`` methods return the entity or a ``NotFoundFailure`` naming the
    missing kind and id; enumerations are sorted by id.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def find_municipality(self, municipality_id: int) -> Municipality | NotFoundFailure:
        found = await self._uow.municipality_repository.get(municipality_id)
        if found is None:
            return NotFoundFailure(entity=EntityKind.MUNICIPALITY, id=municipality_id)
        return found

    async def find_parish(self, parish_id: int) -> Parish | NotFoundFailure:
        found = await self._uow.parish_repository.get(parish_id)
        if found is None:
            return NotFoundFailure(entity=EntityKind.PARISH, id=parish_id)
        return found

    async def find_art_category(self, art_category_id: int) -> ArtCategory | NotFoundFailure:
        found = await self._uow.art_category_repository.get(art_category_id)
        if found is None:
            return NotFoundFailure(entity=EntityKind.ART_CATEGORY, id=art_category_id)
        return found

    async def find_art_discipline(
        self, art_discipline_id: int
    ) -> ArtDiscipline | NotFoundFailure:
        found = await self._uow.art_discipline_repository.get(art_discipline_id)
        if found is None:
            return NotFoundFailure(entity=EntityKind.ART_DISCIPLINE, id=art_discipline_id)
        return found

    async def list_municipalities(self) -> Sequence[Municipality]:
        return await self._uow.municipality_repository.list_all()

    async def list_parishes(self, municipality_id: int | None = None) -> Sequence[Parish]:
        parishes = await self._uow.parish_repository.list_all()
        if municipality_id is None:
            return parishes
        return [parish for parish in parishes if parish.belongs_to(municipality_id)]

    async def list_art_categories(self) -> Sequence[ArtCategory]:
        return await self._uow.art_category_repository.list_all()

    async def list_art_disciplines(
        self, art_category_id: int | None = None
    ) -> Sequence[ArtDiscipline]:
        disciplines = await self._uow.art_discipline_repository.list_all()
        if art_category_id is None:
            return disciplines
        return [item for item in disciplines if item.belongs_to(art_category_id)]


__all__ = ["LookupRegistry"]
