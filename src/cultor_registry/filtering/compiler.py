"""Compile cultor search criteria into a predicate tree."""

from __future__ import annotations

from cultor_registry.domain import CultorCriteria

from .predicates import (
    AllOf,
    Contains,
    Equals,
    IsBlank,
    IsPresent,
    Predicate,
    StartsWith,
    all_of,
    any_of,
)


def tokenize(query: str | None) -> tuple[str, ...]:
    """Trim, lowercase and split a free-text query on runs of whitespace."""

    if query is None:
        return ()
    return tuple(query.strip().lower().split())


def text_predicate(tokens: tuple[str, ...]) -> Predicate | None:
    """Name/id/phone match driven by the number of words in the query.

    One word may be the start of either name or part of the id or phone
    number. Two to four words are split between first and last name, the
    first name taking at most two words. Any other count adds no constraint.
    """

    count = len(tokens)
    if count == 1:
        (word,) = tokens
        return any_of(
            StartsWith("first_name", word),
            StartsWith("last_name", word),
            Contains("id_number", word),
            Contains("phone_number", word),
        )
    if count == 2:
        first, second = tokens
        joined = f"{first} {second}"
        return any_of(
            StartsWith("first_name", joined),
            StartsWith("last_name", joined),
            all_of(StartsWith("first_name", first), StartsWith("last_name", second)),
        )
    if count == 3:
        first, second, third = tokens
        return any_of(
            all_of(
                StartsWith("first_name", f"{first} {second}"),
                StartsWith("last_name", third),
            ),
            all_of(
                StartsWith("first_name", first),
                StartsWith("last_name", f"{second} {third}"),
            ),
        )
    if count == 4:
        first, second, third, fourth = tokens
        return all_of(
            StartsWith("first_name", f"{first} {second}"),
            StartsWith("last_name", f"{third} {fourth}"),
        )
    return None


def _presence(field: str, wanted: bool) -> Predicate:
    return IsPresent(field) if wanted else IsBlank(field)


def compile_criteria(criteria: CultorCriteria) -> AllOf:
    """Conjoin one fragment per populated criterion; an empty result matches everything."""

    parts: list[Predicate] = []

    text = text_predicate(tokenize(criteria.query))
    if text is not None:
        parts.append(text)

    if criteria.gender is not None:
        parts.append(Equals("gender", criteria.gender))
    for field in ("municipality_id", "parish_id", "art_category_id", "art_discipline_id"):
        value = getattr(criteria, field)
        if value is not None:
            parts.append(Equals(field, value))

    if criteria.has_disability is not None:
        parts.append(_presence("disability", criteria.has_disability))
    if criteria.has_illness is not None:
        parts.append(_presence("illness", criteria.has_illness))

    return AllOf(tuple(parts))


__all__ = ["compile_criteria", "text_predicate", "tokenize"]
