"""String normalization helpers shared by the validation pipeline."""

from __future__ import annotations


def _capitalize_tokens(value: str) -> str:
    return " ".join(token.capitalize() for token in value.split())


def title_case(value: str) -> str:
    """Capitalize each whitespace-delimited token and lower the rest.

    Runs of whitespace collapse to a single space. Some characters change
    length when case-mapped (``"ŉ"`` becomes ``"ʼN"``), so the mapping is
    repeated until the text is stable, which keeps the function idempotent.
    """

    result = _capitalize_tokens(value)
    while True:
        again = _capitalize_tokens(result)
        if again == result:
            return result
        result = again


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def blank_to_none(value: str | None) -> str | None:
    return None if is_blank(value) else value.strip()


def lower_or_none(value: str | None) -> str | None:
    stripped = blank_to_none(value)
    return stripped.lower() if stripped is not None else None


def title_or_none(value: str | None) -> str | None:
    stripped = blank_to_none(value)
    return title_case(stripped) if stripped is not None else None


__all__ = ["blank_to_none", "is_blank", "lower_or_none", "title_case", "title_or_none"]
