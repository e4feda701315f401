"""Submission model enforcing field formats before the pipeline runs."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from cultor_registry.domain import FieldError

from . import formats

_INVALID = "Is Invalid"
_DATE_ADAPTER: TypeAdapter[date] = TypeAdapter(date)

ReferenceId = Annotated[int, Field(ge=1)]


class CultorSubmission(BaseModel):
    """Raw cultor data as submitted by a client.

    Keys may be snake_case or camelCase. Only shape and format are checked
    here; grammar, cross-field and store-backed rules belong to the pipeline.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    first_name: Annotated[str, Field(max_length=formats.PERSONAL_NAME_MAX_LENGTH)]
    last_name: Annotated[str, Field(max_length=formats.PERSONAL_NAME_MAX_LENGTH)]
    gender: Annotated[str, Field(min_length=1, max_length=1)]
    id_number: str
    birth_date: date
    phone_number: str
    email: str | None = None
    instagram_user: str | None = None
    municipality_id: ReferenceId
    parish_id: ReferenceId
    home_address: str
    art_category_id: ReferenceId
    art_discipline_id: ReferenceId
    other_discipline: str | None = None
    years_of_experience: Annotated[int, Field(ge=1, le=100)]
    group_name: str | None = None
    disability: str | None = None
    illness: str | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def check_name_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Is Required")
        return value

    @field_validator("id_number")
    @classmethod
    def check_id_number(cls, value: str) -> str:
        if not formats.is_valid_id_number(value):
            raise ValueError(_INVALID)
        return value

    @field_validator("phone_number")
    @classmethod
    def check_phone_number(cls, value: str) -> str:
        if not formats.is_valid_phone_number(value):
            raise ValueError(_INVALID)
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        if not formats.is_valid_email(value):
            raise ValueError(_INVALID)
        return value

    @field_validator("instagram_user")
    @classmethod
    def check_instagram_user(cls, value: str | None) -> str | None:
        if not formats.is_valid_instagram_user(value):
            raise ValueError(_INVALID)
        return value

    @field_validator("home_address")
    @classmethod
    def check_home_address(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Is Required")
        if not formats.is_valid_free_text(value):
            raise ValueError(_INVALID)
        return value

    @field_validator("other_discipline", "group_name", "disability", "illness")
    @classmethod
    def check_free_text(cls, value: str | None) -> str | None:
        if not formats.is_valid_free_text(value):
            raise ValueError(_INVALID)
        return value


_FIELD_BY_ALIAS = {
    (info.alias or name): name for name, info in CultorSubmission.model_fields.items()
}


def _field_name(location: tuple[int | str, ...]) -> str:
    if not location:
        return "__root__"
    head = str(location[0])
    return _FIELD_BY_ALIAS.get(head, head)


def _reason(error: Mapping[str, Any]) -> str:
    if error["type"] == "missing":
        return "Is Required"
    if error["type"] == "extra_forbidden":
        return "Is Not An Accepted Field"
    if error["type"] == "value_error":
        ctx = error.get("ctx") or {}
        if "error" in ctx:
            return str(ctx["error"])
    return str(error["msg"])


def field_errors(exc: ValidationError) -> tuple[FieldError, ...]:
    """Translate a pydantic validation error into per-field errors."""

    return tuple(
        FieldError(field=_field_name(tuple(error["loc"])), reason=_reason(error))
        for error in exc.errors()
    )


def parse_submission(
    data: Mapping[str, Any] | CultorSubmission,
) -> CultorSubmission | tuple[FieldError, ...]:
    """Return a validated submission or every format error found."""

    if isinstance(data, CultorSubmission):
        return data
    try:
        return CultorSubmission.model_validate(dict(data))
    except ValidationError as exc:
        return field_errors(exc)


def raw_value(data: Mapping[str, Any], name: str) -> Any:
    if name in data:
        return data[name]
    return data.get(to_camel(name))


def submitted_identity(
    data: Mapping[str, Any] | CultorSubmission,
) -> tuple[str | None, date | None]:
    """Extract ``(id_number, birth_date)`` even from a submission that fails validation.

    The id number is trimmed; a birth date that cannot be read as a date comes
    back as ``None``.
    """

    if isinstance(data, CultorSubmission):
        return data.id_number.strip(), data.birth_date

    raw_id = raw_value(data, "id_number")
    id_number = raw_id.strip() if isinstance(raw_id, str) else None

    raw_birth = raw_value(data, "birth_date")
    try:
        birth_date = _DATE_ADAPTER.validate_python(raw_birth) if raw_birth is not None else None
    except ValidationError:
        birth_date = None
    return id_number, birth_date


__all__ = [
    "CultorSubmission",
    "field_errors",
    "parse_submission",
    "raw_value",
    "submitted_identity",
]
