from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from datetime import date
from importlib import import_module
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from cultor_registry.cli.app import app
from cultor_registry.cli.deps import reset_container
from cultor_registry.config import AppSettings
from cultor_registry.lookups import seed_reference_data
from cultor_registry.persistence import InMemoryUnitOfWork
from cultor_registry.services import CultorService

app_module = import_module("cultor_registry.cli.app")

PayloadFactory = Callable[..., dict[str, Any]]


def _env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    db_url = f"sqlite+aiosqlite:///{tmp_path/'cli.db'}"
    monkeypatch.setenv("CULTOR_DATABASE_URL", db_url)
    monkeypatch.setenv("CULTOR_ENV", "test")
    monkeypatch.delenv("CULTOR_SEED_REFERENCE_DATA", raising=False)
    reset_container()


def _write(tmp_path: Path, name: str, payload: dict[str, Any]) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


class StubContainer:
    def __init__(self, uow: InMemoryUnitOfWork) -> None:
        self.settings = AppSettings(environment="stub", seed_reference_data=False)
        self.unit_of_work_factory = lambda: uow
        self.cultor_service = CultorService(
            self.unit_of_work_factory, today=lambda: date(2025, 6, 15)
        )


def test_cli_show_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["show-settings"])
    assert result.exit_code == 0
    assert "Environment:\ttest" in result.stdout
    assert "cli.db" in result.stdout


def test_cli_seed_is_idempotent(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    result = runner.invoke(app, ["seed"])

    assert result.exit_code == 0
    # The container already seeded the empty database on start.
    assert "Municipalities:\t0" in result.stdout
    assert "Art disciplines:\t0" in result.stdout


def test_cli_lookups(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    parishes = runner.invoke(app, ["lookups", "parishes", "--parent-id", "14"])
    disciplines = runner.invoke(app, ["lookups", "disciplines"])

    assert parishes.exit_code == 0
    assert [item["name"] for item in json.loads(parishes.stdout)][:2] == [
        "Candelaria",
        "Catedral",
    ]
    assert len(json.loads(disciplines.stdout)) == 45


def test_cli_cultor_lifecycle(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, make_payload: PayloadFactory
) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()
    payload_file = _write(tmp_path, "cultor.json", make_payload())

    created = runner.invoke(app, ["create", "--file", payload_file])
    assert created.exit_code == 0
    body = json.loads(created.stdout)
    assert body["id"] == 1
    assert body["first_name"] == "María José"
    assert body["gender"] == "F"

    duplicate = runner.invoke(app, ["create", "--file", payload_file])
    assert duplicate.exit_code == 1
    failure = json.loads(duplicate.stdout)
    assert failure["kind"] == "duplicate"
    assert failure["field"] == "id_number"
    assert failure["message"] == "Id Number Already Exists"

    renamed_file = _write(tmp_path, "renamed.json", make_payload(firstName="ana"))
    updated = runner.invoke(app, ["update", "1", "--file", renamed_file])
    assert updated.exit_code == 0
    assert json.loads(updated.stdout)["first_name"] == "Ana"

    listed = runner.invoke(app, ["list", "--query", "ana pérez", "--gender", "f"])
    assert listed.exit_code == 0
    page = json.loads(listed.stdout)
    assert page["total"] == 1
    assert page["items"][0]["id"] == 1

    empty = runner.invoke(app, ["list", "--has-disability"])
    assert json.loads(empty.stdout)["total"] == 0

    deleted = runner.invoke(app, ["delete", "1"])
    assert deleted.exit_code == 0
    assert json.loads(deleted.stdout) == {"id": 1}

    missing = runner.invoke(app, ["get", "1"])
    assert missing.exit_code == 1
    assert json.loads(missing.stdout)["kind"] == "not_found"


def test_cli_reports_validation_errors(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, make_payload: PayloadFactory
) -> None:
    uow = InMemoryUnitOfWork()
    asyncio.run(seed_reference_data(uow))
    container = StubContainer(uow)
    monkeypatch.setattr(app_module, "get_container", lambda: container)
    payload_file = _write(
        tmp_path, "invalid.json", make_payload(firstName="J0se", parishId=1)
    )

    runner = CliRunner()
    result = runner.invoke(app, ["create", "--file", payload_file])

    assert result.exit_code == 1
    failure = json.loads(result.stdout)
    assert failure["kind"] == "validation"
    assert [error["field"] for error in failure["errors"]] == ["first_name"]


def test_cli_rejects_non_object_payload(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    uow = InMemoryUnitOfWork()
    monkeypatch.setattr(app_module, "get_container", lambda: StubContainer(uow))
    payload_file = tmp_path / "list.json"
    payload_file.write_text("[1, 2]", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["create", "--file", str(payload_file)])

    assert result.exit_code != 0
