from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from cultor_registry.config import AppSettings
from cultor_registry.container import build_container
from cultor_registry.persistence import InMemoryUnitOfWork


def test_build_container_seeds_reference_data(tmp_path: Path) -> None:
    db_url = f"sqlite+aiosqlite:///{tmp_path/'nested'/'container.db'}"
    settings = AppSettings(environment="test", database_url=db_url, timezone="UTC")

    container = build_container(settings)

    assert (tmp_path / "nested").exists()
    municipalities = asyncio.run(container.cultor_service.list_municipalities())
    assert len(municipalities) == 14
    assert asyncio.run(container.seed()).total == 0


def test_build_container_can_skip_seeding() -> None:
    uow = InMemoryUnitOfWork()
    settings = AppSettings(environment="test", seed_reference_data=False)

    container = build_container(settings, unit_of_work_factory=lambda: uow)

    assert asyncio.run(container.cultor_service.list_art_categories()) == []
    assert container.today() is not None


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CULTOR_ENV", "staging")
    monkeypatch.setenv("CULTOR_SEED_REFERENCE_DATA", "No")
    monkeypatch.setenv("CULTOR_PAGE_SIZE", "500")
    monkeypatch.setenv("CULTOR_LOG_LEVEL", "debug")
    monkeypatch.delenv("CULTOR_TIMEZONE", raising=False)

    settings = AppSettings.from_env()

    assert settings.environment == "staging"
    assert settings.seed_reference_data is False
    assert settings.default_page_size == 100
    assert settings.log_level == "DEBUG"
    assert settings.timezone == "America/Caracas"
    assert settings.other_discipline_name == "Otra..."


def test_settings_reject_non_numeric_page_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CULTOR_PAGE_SIZE", "many")

    with pytest.raises(ValueError):
        AppSettings.from_env()
