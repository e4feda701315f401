"""Domain models for the cultor registry."""

from .base import DomainModel
from .criteria import MAX_PAGE_SIZE, CultorCriteria, CultorPage, PageRequest
from .cultor import Cultor
from .enums import EntityKind, FailureKind, Gender, UniqueField
from .failures import (
    Accepted,
    DuplicateFailure,
    Failure,
    FieldError,
    ImmutableFieldFailure,
    NotFoundFailure,
    Outcome,
    RegistryError,
    Rejected,
    ValidationFailure,
    unwrap,
)
from .lookup import OTHER_DISCIPLINE_NAME, ArtCategory, ArtDiscipline, Municipality, Parish
from .types import ArtCategoryId, ArtDisciplineId, CultorId, MunicipalityId, ParishId

__all__ = [
    "MAX_PAGE_SIZE",
    "OTHER_DISCIPLINE_NAME",
    "Accepted",
    "ArtCategory",
    "ArtCategoryId",
    "ArtDiscipline",
    "ArtDisciplineId",
    "Cultor",
    "CultorCriteria",
    "CultorId",
    "CultorPage",
    "DomainModel",
    "DuplicateFailure",
    "EntityKind",
    "Failure",
    "FailureKind",
    "FieldError",
    "Gender",
    "ImmutableFieldFailure",
    "Municipality",
    "MunicipalityId",
    "NotFoundFailure",
    "Outcome",
    "PageRequest",
    "Parish",
    "ParishId",
    "RegistryError",
    "Rejected",
    "UniqueField",
    "ValidationFailure",
    "unwrap",
]
