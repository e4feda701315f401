"""Storage-independent predicate tree over cultor attributes.

Text comparisons (``StartsWith``, ``Contains``) are case-insensitive literal
substring tests; every backend must honor that.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

TEXT_FIELDS = frozenset({"first_name", "last_name", "id_number", "phone_number"})


@dataclass(frozen=True, slots=True)
class StartsWith:
    field: str
    prefix: str


@dataclass(frozen=True, slots=True)
class Contains:
    field: str
    fragment: str


@dataclass(frozen=True, slots=True)
class Equals:
    field: str
    value: str | int


@dataclass(frozen=True, slots=True)
class IsPresent:
    """Field is neither null nor the empty string."""

    field: str


@dataclass(frozen=True, slots=True)
class IsBlank:
    """Field is null or the empty string."""

    field: str


@dataclass(frozen=True, slots=True)
class AllOf:
    parts: tuple[Predicate, ...] = ()


@dataclass(frozen=True, slots=True)
class AnyOf:
    parts: tuple[Predicate, ...] = ()


Predicate: TypeAlias = StartsWith | Contains | Equals | IsPresent | IsBlank | AllOf | AnyOf

MATCH_ALL = AllOf()


def all_of(*parts: Predicate) -> AllOf:
    return AllOf(tuple(parts))


def any_of(*parts: Predicate) -> AnyOf:
    return AnyOf(tuple(parts))


__all__ = [
    "MATCH_ALL",
    "TEXT_FIELDS",
    "AllOf",
    "AnyOf",
    "Contains",
    "Equals",
    "IsBlank",
    "IsPresent",
    "Predicate",
    "StartsWith",
    "all_of",
    "any_of",
]
