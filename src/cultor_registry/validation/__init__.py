"""Validation and normalization of cultor submissions."""

from .dates import MAX_AGE_YEARS, MIN_AGE_YEARS, is_valid_birth_date, years_before
from .formats import (
    is_valid_email,
    is_valid_free_text,
    is_valid_id_number,
    is_valid_instagram_user,
    is_valid_name,
    is_valid_phone_number,
)
from .normalize import blank_to_none, is_blank, lower_or_none, title_case, title_or_none
from .pipeline import CultorPipeline, Submission
from .submission import CultorSubmission, parse_submission
from .uniqueness import UniquenessGuard

__all__ = [
    "MAX_AGE_YEARS",
    "MIN_AGE_YEARS",
    "CultorPipeline",
    "CultorSubmission",
    "Submission",
    "UniquenessGuard",
    "blank_to_none",
    "is_blank",
    "is_valid_birth_date",
    "is_valid_email",
    "is_valid_free_text",
    "is_valid_id_number",
    "is_valid_instagram_user",
    "is_valid_name",
    "is_valid_phone_number",
    "lower_or_none",
    "parse_submission",
    "title_case",
    "title_or_none",
    "years_before",
]
