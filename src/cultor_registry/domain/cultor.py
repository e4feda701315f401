"""Cultor domain model."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import Field

from .base import DomainModel
from .enums import Gender, UniqueField
from .types import ArtCategoryId, ArtDisciplineId, CultorId, MunicipalityId, ParishId

PersonalName = Annotated[str, Field(min_length=1, max_length=50)]
FreeText = Annotated[str, Field(max_length=100)]


class Cultor(DomainModel):
    """Registered cultural practitioner.

    Records are only built by the validation pipeline, so every instance is
    already normalized. ``id`` stays ``None`` until the store assigns one.
    """

    id: CultorId | None = None
    first_name: PersonalName
    last_name: PersonalName
    gender: Gender
    id_number: Annotated[str, Field(min_length=3, max_length=10)]
    birth_date: date
    phone_number: Annotated[str, Field(min_length=12, max_length=12)]
    email: Annotated[str, Field(max_length=150)] | None = None
    instagram_user: Annotated[str, Field(max_length=30)] | None = None
    municipality_id: MunicipalityId
    parish_id: ParishId
    home_address: Annotated[str, Field(min_length=1, max_length=100)]
    art_category_id: ArtCategoryId
    art_discipline_id: ArtDisciplineId
    other_discipline: FreeText | None = None
    years_of_experience: Annotated[int, Field(ge=1, le=100)]
    group_name: FreeText | None = None
    disability: FreeText | None = None
    illness: FreeText | None = None
    created_at: date

    def unique_value(self, field: UniqueField) -> str | None:
        return getattr(self, field.value)


__all__ = ["Cultor"]
