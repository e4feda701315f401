"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import NewType

CultorId = NewType("CultorId", int)
MunicipalityId = NewType("MunicipalityId", int)
ParishId = NewType("ParishId", int)
ArtCategoryId = NewType("ArtCategoryId", int)
ArtDisciplineId = NewType("ArtDisciplineId", int)

__all__ = [
    "ArtCategoryId",
    "ArtDisciplineId",
    "CultorId",
    "MunicipalityId",
    "ParishId",
]
