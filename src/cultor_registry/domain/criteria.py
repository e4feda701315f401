"""Search criteria and pagination models for cultor listings."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator

from .base import DomainModel
from .cultor import Cultor

MAX_PAGE_SIZE = 100


class CultorCriteria(DomainModel):
    """Optional filters for cultor listings; unset fields impose no constraint."""

    query: str | None = None
    gender: str | None = None
    municipality_id: int | None = None
    parish_id: int | None = None
    art_category_id: int | None = None
    art_discipline_id: int | None = None
    has_disability: bool | None = None
    has_illness: bool | None = None

    @field_validator("query")
    @classmethod
    def drop_blank_query(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    @field_validator("gender")
    @classmethod
    def normalize_gender(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip().upper()

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class PageRequest(DomainModel):
    """Zero-based page selector."""

    page: Annotated[int, Field(ge=0)] = 0
    size: Annotated[int, Field(ge=1, le=MAX_PAGE_SIZE)] = 20

    @property
    def offset(self) -> int:
        return self.page * self.size


class CultorPage(DomainModel):
    """One page of cultors ordered by id."""

    items: tuple[Cultor, ...] = ()
    total: Annotated[int, Field(ge=0)] = 0
    page: int = 0
    size: int = 20

    @property
    def pages(self) -> int:
        return -(-self.total // self.size) if self.total else 0


__all__ = ["MAX_PAGE_SIZE", "CultorCriteria", "CultorPage", "PageRequest"]
