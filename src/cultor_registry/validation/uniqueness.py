"""Existence checks for the cultor attributes that must be unique."""

from __future__ import annotations

from collections.abc import Mapping

from cultor_registry.domain import CultorId, DuplicateFailure, UniqueField
from cultor_registry.persistence.interfaces import CultorRepository

# Checked in this order so that the reported duplicate is deterministic.
CHECK_ORDER = (
    UniqueField.ID_NUMBER,
    UniqueField.PHONE_NUMBER,
    UniqueField.EMAIL,
    UniqueField.INSTAGRAM_USER,
)


class UniquenessGuard:
    """Answers whether a candidate value is already taken by another cultor.

    The check runs before the write and is not atomic with it; the unique
    constraints of the store reject whatever slips through concurrently.
    """

    def __init__(self, repository: CultorRepository) -> None:
        self._repository = repository

    async def exists_by_field(self, field: UniqueField, value: str) -> bool:
        return await self._repository.exists_by_field(field, value)

    async def exists_by_field_excluding(
        self,
        field: UniqueField,
        value: str,
        exclude_id: CultorId,
    ) -> bool:
        return await self._repository.exists_by_field_excluding(field, value, exclude_id)

    async def first_duplicate(
        self,
        candidates: Mapping[UniqueField, str | None],
        *,
        exclude_id: CultorId | None = None,
    ) -> DuplicateFailure | None:
        """Return the first taken field among ``candidates``; ``None`` values are skipped."""

        for field in CHECK_ORDER:
            value = candidates.get(field)
            if value is None:
                continue
            if exclude_id is None:
                taken = await self.exists_by_field(field, value)
            else:
                taken = await self.exists_by_field_excluding(field, value, exclude_id)
            if taken:
                return DuplicateFailure(field=field)
        return None


__all__ = ["CHECK_ORDER", "UniquenessGuard"]
