"""Birth date rules."""

from __future__ import annotations

from datetime import date

MIN_AGE_YEARS = 18
MAX_AGE_YEARS = 120


def years_before(reference: date, years: int) -> date:
    """Same calendar day ``years`` earlier; Feb 29 falls back to Feb 28."""

    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)


def is_valid_birth_date(birth_date: date | None, reference: date | None) -> bool:
    """True when the age at ``reference`` lies between 18 and 120 years inclusive."""

    if birth_date is None or reference is None:
        return False
    oldest = years_before(reference, MAX_AGE_YEARS)
    youngest = years_before(reference, MIN_AGE_YEARS)
    return oldest <= birth_date <= youngest


__all__ = ["MAX_AGE_YEARS", "MIN_AGE_YEARS", "is_valid_birth_date", "years_before"]
