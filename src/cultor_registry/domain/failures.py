"""Expected failure taxonomy and the accepted/rejected outcome pair.

Validation, missing references, duplicates and attempts to alter immutable
fields are ordinary results of handling a submission, so they travel as
values. ``unwrap`` converts a rejection into ``RegistryError`` for callers
that prefer exceptions.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Annotated, Generic, Literal, TypeAlias, TypeVar

from pydantic import Field, TypeAdapter

from .base import DomainModel
from .enums import EntityKind, FailureKind, UniqueField

T = TypeVar("T")


class FieldError(DomainModel):
    field: str
    reason: str

    def describe(self) -> str:
        return f"{self.field}: {self.reason}"


class ValidationFailure(DomainModel):
    """Malformed or internally inconsistent input, reported for every field at once."""

    kind: Literal[FailureKind.VALIDATION] = FailureKind.VALIDATION
    errors: Annotated[tuple[FieldError, ...], Field(min_length=1)]

    @classmethod
    def of(cls, errors: Iterable[FieldError]) -> ValidationFailure:
        return cls(errors=tuple(errors))

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(error.field for error in self.errors))

    @property
    def message(self) -> str:
        return "; ".join(error.describe() for error in self.errors)


class NotFoundFailure(DomainModel):
    kind: Literal[FailureKind.NOT_FOUND] = FailureKind.NOT_FOUND
    entity: EntityKind
    id: int

    @property
    def message(self) -> str:
        label = self.entity.value.replace("_", " ").title()
        return f"{label} Not Found With Id: {self.id}"


class DuplicateFailure(DomainModel):
    kind: Literal[FailureKind.DUPLICATE] = FailureKind.DUPLICATE
    field: UniqueField

    @property
    def message(self) -> str:
        label = self.field.value.replace("_", " ").title()
        return f"{label} Already Exists"


class ImmutableFieldFailure(DomainModel):
    kind: Literal[FailureKind.IMMUTABLE_FIELD] = FailureKind.IMMUTABLE_FIELD
    field: Literal["id_number", "birth_date"]

    @property
    def message(self) -> str:
        label = self.field.replace("_", " ").title()
        return f"The {label} Cannot Be Modified"


Failure: TypeAlias = Annotated[
    ValidationFailure | NotFoundFailure | DuplicateFailure | ImmutableFieldFailure,
    Field(discriminator="kind"),
]

FAILURE_ADAPTER: TypeAdapter[Failure] = TypeAdapter(Failure)


@dataclass(frozen=True)
class Accepted(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    failure: Failure

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind


Outcome: TypeAlias = Accepted[T] | Rejected


class RegistryError(RuntimeError):
    """Raised by ``unwrap`` when an outcome carries a failure."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure = failure

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind


def unwrap(outcome: Outcome[T]) -> T:
    """Return the accepted value or raise ``RegistryError``."""

    if isinstance(outcome, Rejected):
        raise RegistryError(outcome.failure)
    return outcome.value


__all__ = [
    "FAILURE_ADAPTER",
    "Accepted",
    "DuplicateFailure",
    "Failure",
    "FieldError",
    "ImmutableFieldFailure",
    "NotFoundFailure",
    "Outcome",
    "RegistryError",
    "Rejected",
    "ValidationFailure",
    "unwrap",
]
