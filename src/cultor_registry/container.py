"""Service container wiring application components."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from cultor_registry.config import AppSettings
from cultor_registry.lookups import SeedReport, seed_reference_data
from cultor_registry.persistence.sqlite import create_sqlite_unit_of_work_factory
from cultor_registry.services import CultorService, UnitOfWorkFactory
from cultor_registry.utils import clock_for

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates constructed services with shared configuration."""

    settings: AppSettings
    unit_of_work_factory: UnitOfWorkFactory
    today: Callable[[], date]
    cultor_service: CultorService

    async def seed(self) -> SeedReport:
        async with self.unit_of_work_factory() as uow:
            report = await seed_reference_data(
                uow, other_discipline_name=self.settings.other_discipline_name
            )
            await uow.commit()
        return report


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite"):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    if not path or path == ":memory:":
        return
    db_path = Path(path).expanduser()
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to prepare SQLite directory %s: %s", db_path.parent, exc)


def build_container(
    settings: AppSettings | None = None,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ServiceContainer:
    """Construct the primary service container.

    Reference data is seeded immediately when ``settings.seed_reference_data``
    is set; do not call this from inside a running event loop in that case.
    """

    resolved_settings = settings or AppSettings.from_env()

    if unit_of_work_factory is None:
        _ensure_sqlite_directory(resolved_settings.database_url)
        unit_of_work_factory = create_sqlite_unit_of_work_factory(
            resolved_settings.database_url
        )
    today = clock_for(resolved_settings.timezone)

    cultor_service = CultorService(
        unit_of_work_factory,
        today=today,
        other_discipline_name=resolved_settings.other_discipline_name,
        max_page_size=resolved_settings.max_page_size,
    )

    container = ServiceContainer(
        settings=resolved_settings,
        unit_of_work_factory=unit_of_work_factory,
        today=today,
        cultor_service=cultor_service,
    )
    if resolved_settings.seed_reference_data:
        asyncio.run(container.seed())
    return container


__all__ = ["ServiceContainer", "build_container"]
