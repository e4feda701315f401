"""Field format rules.

Patterns are matched against the whole value with ASCII semantics for ``\\d``
and ``\\s``; the accented letters are listed explicitly.
"""

from __future__ import annotations

import re

_LETTERS = "A-Za-zÁÉÍÓÚáéíóúÑñ"

ID_NUMBER_PATTERN = re.compile(r"[VE]-\d{1,8}", re.ASCII)
PHONE_NUMBER_PATTERN = re.compile(r"04(12|14|16|24|26)-\d{7}", re.ASCII)
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9._%+-]{1,64}@[a-zA-Z0-9.-]{1,184}\.[a-zA-Z]{2,10}", re.ASCII
)
INSTAGRAM_USER_PATTERN = re.compile(
    r"(?!.*[._]{2})[a-zA-Z0-9](?:[a-zA-Z0-9._]{0,28}[a-zA-Z0-9])?", re.ASCII
)
PERSONAL_NAME_PATTERN = re.compile(rf"[{_LETTERS}]+([ '\-][{_LETTERS}]+)*", re.ASCII)
FREE_TEXT_PATTERN = re.compile(rf"[{_LETTERS}0-9\s\-',.]{{0,100}}", re.ASCII)

ID_NUMBER_MAX_LENGTH = 10
PHONE_NUMBER_LENGTH = 12
EMAIL_MAX_LENGTH = 150
INSTAGRAM_USER_MAX_LENGTH = 30
PERSONAL_NAME_MAX_LENGTH = 50
FREE_TEXT_MAX_LENGTH = 100


def _matches(pattern: re.Pattern[str], value: str | None) -> bool:
    return value is not None and pattern.fullmatch(value) is not None


def is_valid_name(value: str | None) -> bool:
    """Letters with single space, apostrophe or hyphen separators between them."""

    if value is None or not value.strip():
        return False
    return _matches(PERSONAL_NAME_PATTERN, value)


def is_valid_id_number(value: str | None) -> bool:
    return (
        value is not None
        and len(value) <= ID_NUMBER_MAX_LENGTH
        and _matches(ID_NUMBER_PATTERN, value)
    )


def is_valid_phone_number(value: str | None) -> bool:
    return (
        value is not None
        and len(value) == PHONE_NUMBER_LENGTH
        and _matches(PHONE_NUMBER_PATTERN, value)
    )


def is_valid_email(value: str | None) -> bool:
    if value is None or value == "":
        return True
    return len(value) <= EMAIL_MAX_LENGTH and _matches(EMAIL_PATTERN, value)


def is_valid_instagram_user(value: str | None) -> bool:
    if value is None or value == "":
        return True
    return len(value) <= INSTAGRAM_USER_MAX_LENGTH and _matches(INSTAGRAM_USER_PATTERN, value)


def is_valid_free_text(value: str | None) -> bool:
    if value is None or value == "":
        return True
    return len(value) <= FREE_TEXT_MAX_LENGTH and _matches(FREE_TEXT_PATTERN, value)


__all__ = [
    "EMAIL_PATTERN",
    "FREE_TEXT_PATTERN",
    "ID_NUMBER_PATTERN",
    "INSTAGRAM_USER_PATTERN",
    "PERSONAL_NAME_PATTERN",
    "PHONE_NUMBER_PATTERN",
    "is_valid_email",
    "is_valid_free_text",
    "is_valid_id_number",
    "is_valid_instagram_user",
    "is_valid_name",
    "is_valid_phone_number",
]
