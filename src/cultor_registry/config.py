"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass

from cultor_registry.domain import MAX_PAGE_SIZE, OTHER_DISCIPLINE_NAME


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from exc


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///cultor_registry.db"
    timezone: str = "America/Caracas"
    seed_reference_data: bool = True
    default_page_size: int = 20
    max_page_size: int = MAX_PAGE_SIZE
    other_discipline_name: str = OTHER_DISCIPLINE_NAME
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("CULTOR_ENV", cls.environment),
            database_url=os.getenv("CULTOR_DATABASE_URL", cls.database_url),
            timezone=os.getenv("CULTOR_TIMEZONE", cls.timezone),
            seed_reference_data=_env_bool("CULTOR_SEED_REFERENCE_DATA", True),
            default_page_size=min(
                max(_env_int("CULTOR_PAGE_SIZE", cls.default_page_size), 1), MAX_PAGE_SIZE
            ),
            other_discipline_name=os.getenv(
                "CULTOR_OTHER_DISCIPLINE_NAME", cls.other_discipline_name
            ),
            log_level=os.getenv("CULTOR_LOG_LEVEL", cls.log_level).upper(),
        )


__all__ = ["AppSettings"]
