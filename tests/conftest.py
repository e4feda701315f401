from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from cultor_registry.lookups import seed_reference_data  # noqa: E402
from cultor_registry.persistence import InMemoryUnitOfWork  # noqa: E402

TODAY = date(2025, 6, 15)

# Ids assigned by the reference seed.
VALENCIA = 14
CANDELARIA = 30  # parish of Valencia
BEJUMA_PARISH = 1  # parish of the Bejuma municipality
MUSICA = 6
LLANERA = 34  # discipline of Música
MUSICA_OTHER = 39  # "Otra..." of Música
TEATRO_OTHER = 45  # "Otra..." of Teatro


def _valid_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "firstName": "maría josé",
        "lastName": "pérez",
        "gender": "f",
        "idNumber": "V-12345678",
        "birthDate": "1990-05-20",
        "phoneNumber": "0414-1234567",
        "email": "Maria@Example.com",
        "instagramUser": "Maria.Perez",
        "municipalityId": VALENCIA,
        "parishId": CANDELARIA,
        "homeAddress": "av  bolívar norte",
        "artCategoryId": MUSICA,
        "artDisciplineId": LLANERA,
        "otherDiscipline": None,
        "yearsOfExperience": 10,
        "groupName": "los cantores del valle",
        "disability": "",
        "illness": None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    return _valid_payload


@pytest.fixture
def seeded_uow() -> InMemoryUnitOfWork:
    uow = InMemoryUnitOfWork()
    asyncio.run(seed_reference_data(uow))
    return uow
