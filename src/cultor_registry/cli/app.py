"""Typer CLI wiring the cultor registry services."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path
from typing import Any

import typer

from cultor_registry.config import AppSettings
from cultor_registry.domain import (
    CultorCriteria,
    CultorId,
    DomainModel,
    Outcome,
    PageRequest,
    Rejected,
)
from cultor_registry.services import CultorService

from .deps import get_container

app = typer.Typer(help="Cultor registry command-line interface")


class LookupKind(StrEnum):
    MUNICIPALITIES = "municipalities"
    PARISHES = "parishes"
    CATEGORIES = "categories"
    DISCIPLINES = "disciplines"


@app.callback()
def main() -> None:
    """Register and search cultural practitioners."""

    logging.basicConfig(level=AppSettings.from_env().log_level)


def _service() -> CultorService:
    return get_container().cultor_service


def _dump(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _dump_models(models: Sequence[DomainModel]) -> str:
    return _dump([model.model_dump(mode="json") for model in models])


def _read_payload(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise typer.BadParameter(f"{path} must contain a JSON object")
    return payload


def _emit(outcome: Outcome[Any]) -> None:
    if isinstance(outcome, Rejected):
        failure = outcome.failure
        typer.echo(_dump({**failure.model_dump(mode="json"), "message": failure.message}))
        raise typer.Exit(code=1)
    value = outcome.value
    if isinstance(value, DomainModel):
        typer.echo(_dump(value.model_dump(mode="json")))
    else:
        typer.echo(_dump({"id": value}))


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    container = get_container()
    settings = container.settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo("Timezone:\t" + settings.timezone)
    typer.echo("Page Size:\t" + str(settings.default_page_size))


@app.command("seed")
def seed() -> None:
    """Load the reference data into any empty lookup table."""

    container = get_container()
    report = asyncio.run(container.seed())
    typer.echo(f"Municipalities:\t{report.municipalities}")
    typer.echo(f"Parishes:\t{report.parishes}")
    typer.echo(f"Art categories:\t{report.art_categories}")
    typer.echo(f"Art disciplines:\t{report.art_disciplines}")


@app.command("lookups")
def lookups(
    kind: LookupKind,
    parent_id: int | None = typer.Option(
        None, min=1, help="Municipality id for parishes, category id for disciplines"
    ),
) -> None:
    """List reference data sorted by id."""

    service = _service()

    async def _run() -> str:
        if kind is LookupKind.MUNICIPALITIES:
            return _dump_models(await service.list_municipalities())
        if kind is LookupKind.PARISHES:
            return _dump_models(await service.list_parishes(parent_id))
        if kind is LookupKind.CATEGORIES:
            return _dump_models(await service.list_art_categories())
        return _dump_models(await service.list_art_disciplines(parent_id))

    typer.echo(asyncio.run(_run()))


@app.command("create")
def create(
    file: Path = typer.Option(..., exists=True, dir_okay=False, help="JSON payload"),
) -> None:
    """Register a new cultor from a JSON payload."""

    payload = _read_payload(file)
    _emit(asyncio.run(_service().create(payload)))


@app.command("update")
def update(
    cultor_id: int = typer.Argument(..., min=1),
    file: Path = typer.Option(..., exists=True, dir_okay=False, help="JSON payload"),
) -> None:
    """Replace a cultor's data; id number and birth date must stay the same."""

    payload = _read_payload(file)
    _emit(asyncio.run(_service().update(CultorId(cultor_id), payload)))


@app.command("get")
def get(cultor_id: int = typer.Argument(..., min=1)) -> None:
    """Show one cultor."""

    _emit(asyncio.run(_service().get(CultorId(cultor_id))))


@app.command("delete")
def delete(cultor_id: int = typer.Argument(..., min=1)) -> None:
    """Delete one cultor."""

    outcome = asyncio.run(_service().delete(CultorId(cultor_id)))
    _emit(outcome)


@app.command("list")
def list_cultors(
    query: str | None = typer.Option(None, help="Name, id number or phone fragment"),
    gender: str | None = typer.Option(None, help="F or M"),
    municipality_id: int | None = typer.Option(None, min=1),
    parish_id: int | None = typer.Option(None, min=1),
    category_id: int | None = typer.Option(None, min=1),
    discipline_id: int | None = typer.Option(None, min=1),
    has_disability: bool | None = typer.Option(None, "--has-disability/--no-disability"),
    has_illness: bool | None = typer.Option(None, "--has-illness/--no-illness"),
    page: int = typer.Option(0, min=0),
    size: int | None = typer.Option(None, min=1),
) -> None:
    """Search cultors; every filter is optional."""

    container = get_container()
    criteria = CultorCriteria(
        query=query,
        gender=gender,
        municipality_id=municipality_id,
        parish_id=parish_id,
        art_category_id=category_id,
        art_discipline_id=discipline_id,
        has_disability=has_disability,
        has_illness=has_illness,
    )
    settings = container.settings
    resolved_size = min(size or settings.default_page_size, settings.max_page_size)
    request = PageRequest(page=page, size=resolved_size)
    result = asyncio.run(container.cultor_service.list_cultors(criteria, request))
    typer.echo(_dump(result.model_dump(mode="json")))


__all__ = ["LookupKind", "app"]
