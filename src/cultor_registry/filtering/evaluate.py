"""Evaluate a predicate tree against in-memory cultors."""

from __future__ import annotations

from cultor_registry.domain import Cultor

from .predicates import AllOf, AnyOf, Contains, Equals, IsBlank, IsPresent, Predicate, StartsWith


def _text(cultor: Cultor, field: str) -> str:
    value = getattr(cultor, field)
    return "" if value is None else str(value).lower()


def matches(predicate: Predicate, cultor: Cultor) -> bool:
    if isinstance(predicate, AllOf):
        return all(matches(part, cultor) for part in predicate.parts)
    if isinstance(predicate, AnyOf):
        return any(matches(part, cultor) for part in predicate.parts)
    if isinstance(predicate, StartsWith):
        return _text(cultor, predicate.field).startswith(predicate.prefix.lower())
    if isinstance(predicate, Contains):
        return predicate.fragment.lower() in _text(cultor, predicate.field)
    if isinstance(predicate, Equals):
        return getattr(cultor, predicate.field) == predicate.value
    if isinstance(predicate, IsPresent):
        return getattr(cultor, predicate.field) not in (None, "")
    if isinstance(predicate, IsBlank):
        return getattr(cultor, predicate.field) in (None, "")
    raise TypeError(f"Unsupported predicate: {predicate!r}")


__all__ = ["matches"]
