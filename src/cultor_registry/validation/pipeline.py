"""Validation and normalization pipeline for cultor submissions."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import date
from typing import Any, cast

from cultor_registry.domain import (
    OTHER_DISCIPLINE_NAME,
    Accepted,
    ArtDiscipline,
    Cultor,
    FieldError,
    Gender,
    ImmutableFieldFailure,
    NotFoundFailure,
    Outcome,
    Parish,
    Rejected,
    UniqueField,
    ValidationFailure,
)
from cultor_registry.lookups import LookupRegistry

from .dates import is_valid_birth_date
from .formats import is_valid_name
from .normalize import is_blank, lower_or_none, title_case, title_or_none
from .submission import CultorSubmission, parse_submission, raw_value, submitted_identity
from .uniqueness import UniquenessGuard

Submission = Mapping[str, Any] | CultorSubmission

_GENDERS = frozenset(gender.value for gender in Gender)
_FIELD_ORDER = {name: index for index, name in enumerate(CultorSubmission.model_fields)}


def _ordered(errors: Iterable[FieldError]) -> tuple[FieldError, ...]:
    return tuple(sorted(errors, key=lambda error: _FIELD_ORDER.get(error.field, len(_FIELD_ORDER))))


class CultorPipeline:
    """Turns a raw submission into a normalized, internally consistent ``Cultor``.

    ``create`` and ``update`` share one routine; ``update`` additionally pins
    ``id_number`` and ``birth_date`` to the stored values. Format and grammar
    problems are reported together in a single ``ValidationFailure``.
    Immutability, uniqueness and missing references stop the run at the first
    failure because later checks depend on them. Nothing is persisted here.
    """

    def __init__(
        self,
        lookups: LookupRegistry,
        guard: UniquenessGuard,
        *,
        today: Callable[[], date],
        other_discipline_name: str = OTHER_DISCIPLINE_NAME,
    ) -> None:
        self._lookups = lookups
        self._guard = guard
        self._today = today
        self._other_discipline_name = other_discipline_name

    async def create(self, data: Submission) -> Outcome[Cultor]:
        return await self._run(data, existing=None)

    async def update(self, existing: Cultor, data: Submission) -> Outcome[Cultor]:
        if existing.id is None:
            raise ValueError("update requires a persisted cultor")
        return await self._run(data, existing=existing)

    async def _run(self, data: Submission, *, existing: Cultor | None) -> Outcome[Cultor]:
        if existing is not None:
            pinned = self._check_identity(existing, data)
            if pinned is not None:
                return Rejected(pinned)

        parsed = parse_submission(data)
        if isinstance(parsed, CultorSubmission):
            format_errors: tuple[FieldError, ...] = ()
            first_name, last_name = parsed.first_name, parsed.last_name
            gender, birth_date = parsed.gender, parsed.birth_date
        else:
            format_errors = parsed
            first_name = raw_value(data, "first_name")
            last_name = raw_value(data, "last_name")
            gender = raw_value(data, "gender")
            birth_date = submitted_identity(data)[1]

        flagged = {error.field for error in format_errors}
        rule_errors = [
            error
            for error in self._check_fields(
                first_name,
                last_name,
                gender,
                birth_date,
                creating=existing is None,
            )
            if error.field not in flagged
        ]
        if format_errors or rule_errors:
            return Rejected(ValidationFailure.of(_ordered([*format_errors, *rule_errors])))
        submission = cast(CultorSubmission, parsed)

        id_number = submission.id_number.strip()
        phone_number = submission.phone_number.strip()
        email = lower_or_none(submission.email)
        instagram_user = lower_or_none(submission.instagram_user)

        duplicate = await self._guard.first_duplicate(
            {
                UniqueField.ID_NUMBER: id_number if existing is None else None,
                UniqueField.PHONE_NUMBER: phone_number,
                UniqueField.EMAIL: email,
                UniqueField.INSTAGRAM_USER: instagram_user,
            },
            exclude_id=existing.id if existing is not None else None,
        )
        if duplicate is not None:
            return Rejected(duplicate)

        municipality = await self._lookups.find_municipality(submission.municipality_id)
        if isinstance(municipality, NotFoundFailure):
            return Rejected(municipality)
        parish = await self._lookups.find_parish(submission.parish_id)
        if isinstance(parish, NotFoundFailure):
            return Rejected(parish)
        category = await self._lookups.find_art_category(submission.art_category_id)
        if isinstance(category, NotFoundFailure):
            return Rejected(category)
        discipline = await self._lookups.find_art_discipline(submission.art_discipline_id)
        if isinstance(discipline, NotFoundFailure):
            return Rejected(discipline)

        other_discipline = title_or_none(submission.other_discipline)
        reference_errors = [
            *self._check_location(parish, municipality.id),
            *self._check_craft(discipline, category.id, other_discipline),
        ]
        if reference_errors:
            return Rejected(ValidationFailure.of(_ordered(reference_errors)))

        values: dict[str, Any] = {
            "first_name": title_case(submission.first_name),
            "last_name": title_case(submission.last_name),
            "gender": Gender(submission.gender.strip().upper()),
            "id_number": id_number,
            "birth_date": submission.birth_date,
            "phone_number": phone_number,
            "email": email,
            "instagram_user": instagram_user,
            "municipality_id": municipality.id,
            "parish_id": parish.id,
            "home_address": title_case(submission.home_address),
            "art_category_id": category.id,
            "art_discipline_id": discipline.id,
            "other_discipline": other_discipline,
            "years_of_experience": submission.years_of_experience,
            "group_name": title_or_none(submission.group_name),
            "disability": lower_or_none(submission.disability),
            "illness": lower_or_none(submission.illness),
        }
        if existing is None:
            return Accepted(Cultor(**values, created_at=self._today()))
        return Accepted(Cultor(**{**existing.model_dump(), **values}))

    @staticmethod
    def _check_identity(existing: Cultor, data: Submission) -> ImmutableFieldFailure | None:
        id_number, birth_date = submitted_identity(data)
        if id_number != existing.id_number:
            return ImmutableFieldFailure(field="id_number")
        if birth_date != existing.birth_date:
            return ImmutableFieldFailure(field="birth_date")
        return None

    def _check_fields(
        self,
        first_name: object,
        last_name: object,
        gender: object,
        birth_date: date | None,
        *,
        creating: bool,
    ) -> list[FieldError]:
        errors: list[FieldError] = []
        for field, value in (("first_name", first_name), ("last_name", last_name)):
            if not isinstance(value, str) or not is_valid_name(value):
                errors.append(FieldError(field=field, reason="Is Invalid"))
        if not isinstance(gender, str) or gender.strip().upper() not in _GENDERS:
            errors.append(FieldError(field="gender", reason="Is Invalid"))
        if creating and not is_valid_birth_date(birth_date, self._today()):
            errors.append(
                FieldError(field="birth_date", reason="Age Must Be Between 18 And 120 Years")
            )
        return errors

    @staticmethod
    def _check_location(parish: Parish, municipality_id: int) -> list[FieldError]:
        if parish.belongs_to(municipality_id):
            return []
        reason = "The Selected Parish Does Not Belong To The Chosen Municipality"
        return [
            FieldError(field="municipality_id", reason=reason),
            FieldError(field="parish_id", reason=reason),
        ]

    def _check_craft(
        self,
        discipline: ArtDiscipline,
        art_category_id: int,
        other_discipline: str | None,
    ) -> list[FieldError]:
        errors: list[FieldError] = []
        if not discipline.belongs_to(art_category_id):
            reason = "The Selected Discipline Does Not Belong To The Chosen Category"
            errors.append(FieldError(field="art_category_id", reason=reason))
            errors.append(FieldError(field="art_discipline_id", reason=reason))
        sentinel = self._other_discipline_name
        if discipline.is_other(sentinel) and is_blank(other_discipline):
            errors.append(FieldError(field="other_discipline", reason="Is Required"))
        elif not discipline.is_other(sentinel) and not is_blank(other_discipline):
            errors.append(
                FieldError(
                    field="other_discipline",
                    reason=f'Only Allowed When The Selected Discipline Is "{sentinel}"',
                )
            )
        return errors


__all__ = ["CultorPipeline", "Submission"]
