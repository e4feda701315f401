"""Translate predicate trees into SQLAlchemy clauses over ``cultors``."""

from __future__ import annotations

from sqlalchemy import ColumnElement, and_, false, func, or_, true

from cultor_registry.filtering import (
    TEXT_FIELDS,
    AllOf,
    AnyOf,
    Contains,
    Equals,
    IsBlank,
    IsPresent,
    Predicate,
    StartsWith,
)

from .models import CultorRecord


def _text_column(field: str) -> ColumnElement[str]:
    if field not in TEXT_FIELDS:
        msg = f"Unsupported text field: {field}"
        raise ValueError(msg)
    if field == "first_name":
        return CultorRecord.search_first_name
    if field == "last_name":
        return CultorRecord.search_last_name
    return func.lower(getattr(CultorRecord, field))


def _column(field: str) -> ColumnElement[object]:
    column = getattr(CultorRecord, field, None)
    if column is None:
        msg = f"Unknown cultor field: {field}"
        raise ValueError(msg)
    return column


def to_clause(predicate: Predicate) -> ColumnElement[bool]:
    """Build a WHERE clause; empty ``AllOf`` is TRUE and empty ``AnyOf`` is FALSE."""

    if isinstance(predicate, AllOf):
        return and_(true(), *(to_clause(part) for part in predicate.parts))
    if isinstance(predicate, AnyOf):
        return or_(false(), *(to_clause(part) for part in predicate.parts))
    if isinstance(predicate, StartsWith):
        return _text_column(predicate.field).startswith(
            predicate.prefix.lower(), autoescape=True
        )
    if isinstance(predicate, Contains):
        return _text_column(predicate.field).contains(
            predicate.fragment.lower(), autoescape=True
        )
    if isinstance(predicate, Equals):
        return _column(predicate.field) == predicate.value
    if isinstance(predicate, IsPresent):
        column = _column(predicate.field)
        return and_(column.is_not(None), column != "")
    if isinstance(predicate, IsBlank):
        column = _column(predicate.field)
        return or_(column.is_(None), column == "")
    msg = f"Unsupported predicate: {predicate!r}"
    raise TypeError(msg)


__all__ = ["to_clause"]
