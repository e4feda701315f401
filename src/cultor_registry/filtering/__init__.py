"""Dynamic filter compilation for cultor listings."""

from .compiler import compile_criteria, text_predicate, tokenize
from .evaluate import matches
from .predicates import (
    MATCH_ALL,
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
    "compile_criteria",
    "matches",
    "text_predicate",
    "tokenize",
]
