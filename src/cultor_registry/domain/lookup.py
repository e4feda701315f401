"""Reference data: municipalities, parishes, art categories and disciplines."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from .base import DomainModel
from .types import ArtCategoryId, ArtDisciplineId, MunicipalityId, ParishId

OTHER_DISCIPLINE_NAME = "Otra..."

Name = Annotated[str, Field(min_length=1, max_length=100)]


class Municipality(DomainModel):
    id: MunicipalityId
    name: Name


class Parish(DomainModel):
    """Parish belonging to exactly one municipality."""

    id: ParishId
    name: Name
    municipality_id: MunicipalityId

    def belongs_to(self, municipality_id: int) -> bool:
        return self.municipality_id == municipality_id


class ArtCategory(DomainModel):
    id: ArtCategoryId
    name: Name


class ArtDiscipline(DomainModel):
    """Discipline within an art category.

    Each category carries one discipline named ``"Otra..."``; choosing it obliges
    the cultor to describe the discipline in free text.
    """

    id: ArtDisciplineId
    name: Name
    art_category_id: ArtCategoryId

    def belongs_to(self, art_category_id: int) -> bool:
        return self.art_category_id == art_category_id

    def is_other(self, sentinel: str = OTHER_DISCIPLINE_NAME) -> bool:
        return self.name == sentinel


__all__ = [
    "OTHER_DISCIPLINE_NAME",
    "ArtCategory",
    "ArtDiscipline",
    "Municipality",
    "Parish",
]
