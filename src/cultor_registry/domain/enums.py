"""Enumerations used across the cultor registry domain layer."""

from __future__ import annotations

from enum import StrEnum


class Gender(StrEnum):
    """Gender codes accepted on a cultor record."""

    FEMALE = "F"
    MALE = "M"


class UniqueField(StrEnum):
    """Cultor attributes that must be unique across the registry."""

    ID_NUMBER = "id_number"
    PHONE_NUMBER = "phone_number"
    EMAIL = "email"
    INSTAGRAM_USER = "instagram_user"


class EntityKind(StrEnum):
    """Entities that can be referenced by id."""

    CULTOR = "cultor"
    MUNICIPALITY = "municipality"
    PARISH = "parish"
    ART_CATEGORY = "art_category"
    ART_DISCIPLINE = "art_discipline"


class FailureKind(StrEnum):
    """Discriminator for expected, caller-recoverable failures."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    IMMUTABLE_FIELD = "immutable_field"
