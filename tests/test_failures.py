from __future__ import annotations

import pytest
from pydantic import ValidationError

from cultor_registry.domain import (
    Accepted,
    DuplicateFailure,
    EntityKind,
    FailureKind,
    FieldError,
    ImmutableFieldFailure,
    NotFoundFailure,
    RegistryError,
    Rejected,
    UniqueField,
    ValidationFailure,
    unwrap,
)
from cultor_registry.domain.failures import FAILURE_ADAPTER


def test_failures_round_trip_through_discriminator() -> None:
    payload = {"kind": "duplicate", "field": "email"}

    failure = FAILURE_ADAPTER.validate_python(payload)

    assert failure == DuplicateFailure(field=UniqueField.EMAIL)
    assert FAILURE_ADAPTER.dump_python(failure, mode="json") == payload


def test_failure_messages() -> None:
    assert NotFoundFailure(entity=EntityKind.ART_DISCIPLINE, id=3).message == (
        "Art Discipline Not Found With Id: 3"
    )
    assert DuplicateFailure(field=UniqueField.PHONE_NUMBER).message == (
        "Phone Number Already Exists"
    )
    assert ImmutableFieldFailure(field="birth_date").message == (
        "The Birth Date Cannot Be Modified"
    )
    failure = ValidationFailure.of(
        [
            FieldError(field="first_name", reason="Is Invalid"),
            FieldError(field="gender", reason="Is Invalid"),
        ]
    )
    assert failure.message == "first_name: Is Invalid; gender: Is Invalid"


def test_validation_failure_needs_an_error() -> None:
    with pytest.raises(ValidationError):
        ValidationFailure(errors=())


def test_unwrap() -> None:
    assert unwrap(Accepted(5)) == 5

    rejected = Rejected(ImmutableFieldFailure(field="id_number"))
    assert rejected.ok is False
    assert rejected.kind is FailureKind.IMMUTABLE_FIELD
    with pytest.raises(RegistryError, match="The Id Number Cannot Be Modified"):
        unwrap(rejected)
