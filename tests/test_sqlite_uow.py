from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from cultor_registry.domain import Cultor, CultorCriteria, CultorId, Gender, UniqueField
from cultor_registry.filtering import MATCH_ALL, compile_criteria
from cultor_registry.lookups import seed_reference_data
from cultor_registry.persistence import ConflictError, InMemoryUnitOfWork, NotFoundError
from cultor_registry.persistence.interfaces import UnitOfWork
from cultor_registry.persistence.sqlite import create_sqlite_unit_of_work_factory


def _db_url(tmp_path: Path) -> str:
    db_file = tmp_path / "cultors.db"
    return f"sqlite+aiosqlite:///{db_file}"


def _cultor(**overrides: Any) -> Cultor:
    values: dict[str, Any] = {
        "first_name": "María José",
        "last_name": "Pérez Rojas",
        "gender": Gender.FEMALE,
        "id_number": "V-12345678",
        "birth_date": date(1990, 5, 20),
        "phone_number": "0414-1234567",
        "email": "maria@example.com",
        "municipality_id": 14,
        "parish_id": 30,
        "home_address": "Av Bolívar",
        "art_category_id": 6,
        "art_discipline_id": 34,
        "years_of_experience": 10,
        "disability": "sordera",
        "created_at": date(2025, 6, 15),
    }
    values.update(overrides)
    return Cultor.model_validate(values)


CULTORS = (
    _cultor(),
    _cultor(
        first_name="Ángel",
        last_name="Martínez",
        gender=Gender.MALE,
        id_number="V-87654321",
        phone_number="0424-7654321",
        email=None,
        municipality_id=1,
        parish_id=1,
        art_category_id=7,
        art_discipline_id=45,
        other_discipline="Zancos",
        disability=None,
        illness="asma",
    ),
    _cultor(
        first_name="Ana",
        last_name="Ángeles",
        id_number="E-555",
        phone_number="0412-5550000",
        email="ana@example.com",
        parish_id=31,
        art_discipline_id=39,
        other_discipline="Jazz",
        disability="",
    ),
    _cultor(
        first_name="Luis Alberto",
        last_name="Díaz",
        gender=Gender.MALE,
        id_number="V-100",
        phone_number="0416-1000000",
        email=None,
        municipality_id=11,
        parish_id=20,
        art_category_id=4,
        art_discipline_id=19,
        disability=None,
    ),
)

Factory = Callable[[], UnitOfWork]


async def _load(factory: Factory) -> list[Cultor]:
    async with factory() as uow:
        await seed_reference_data(uow)
        stored = [await uow.cultor_repository.add(cultor) for cultor in CULTORS]
        await uow.commit()
    return stored


async def _find_ids(factory: Factory, criteria: CultorCriteria) -> list[int]:
    async with factory() as uow:
        items, total = await uow.cultor_repository.find(
            compile_criteria(criteria), offset=0, limit=50
        )
    assert total == len(items)
    return [int(cultor.id) for cultor in items if cultor.id is not None]


def _memory_factory() -> Factory:
    uow = InMemoryUnitOfWork()
    return lambda: uow


def test_sqlite_cultor_round_trip(tmp_path: Path) -> None:
    factory = create_sqlite_unit_of_work_factory(_db_url(tmp_path))

    stored = asyncio.run(_load(factory))
    assert [cultor.id for cultor in stored] == [1, 2, 3, 4]

    async def _get() -> Cultor | None:
        async with factory() as uow:
            return await uow.cultor_repository.get(CultorId(2))

    loaded = asyncio.run(_get())
    assert loaded is not None
    assert loaded.model_dump() == stored[1].model_dump()
    assert loaded.gender is Gender.MALE


@pytest.mark.parametrize(
    ("criteria", "expected"),
    [
        (CultorCriteria(), [1, 2, 3, 4]),
        (CultorCriteria(query="ángel"), [2, 3]),
        (CultorCriteria(query="ÁNGEL"), [2, 3]),
        (CultorCriteria(query="555"), [3]),
        (CultorCriteria(query="10"), [4]),
        (CultorCriteria(query="v-8765"), [2]),
        (CultorCriteria(query="luis alberto"), [4]),
        (CultorCriteria(query="ana ángeles"), [3]),
        (CultorCriteria(query="maría josé pérez"), [1]),
        (CultorCriteria(query="maría josé pérez rojas"), [1]),
        (CultorCriteria(query="a b c d e"), [1, 2, 3, 4]),
        (CultorCriteria(query="m_"), []),
        (CultorCriteria(gender="m"), [2, 4]),
        (CultorCriteria(municipality_id=14), [1, 3]),
        (CultorCriteria(has_disability=True), [1]),
        (CultorCriteria(has_disability=False), [2, 3, 4]),
        (CultorCriteria(has_illness=True), [2]),
        (CultorCriteria(query="ana", art_category_id=6), [3]),
        (CultorCriteria(parish_id=20, art_discipline_id=19), [4]),
    ],
)
def test_sqlite_filters_match_in_memory_filters(
    tmp_path: Path, criteria: CultorCriteria, expected: list[int]
) -> None:
    sqlite_factory = create_sqlite_unit_of_work_factory(_db_url(tmp_path))
    memory_factory = _memory_factory()
    asyncio.run(_load(sqlite_factory))
    asyncio.run(_load(memory_factory))

    assert asyncio.run(_find_ids(sqlite_factory, criteria)) == expected
    assert asyncio.run(_find_ids(memory_factory, criteria)) == expected


@pytest.mark.parametrize("use_sqlite", [True, False])
def test_find_pages_in_id_order(tmp_path: Path, use_sqlite: bool) -> None:
    factory = (
        create_sqlite_unit_of_work_factory(_db_url(tmp_path)) if use_sqlite else _memory_factory()
    )
    asyncio.run(_load(factory))

    async def _page() -> tuple[Sequence[Cultor], int]:
        async with factory() as uow:
            return await uow.cultor_repository.find(MATCH_ALL, offset=1, limit=2)

    items, total = asyncio.run(_page())
    assert [cultor.id for cultor in items] == [2, 3]
    assert total == 4


@pytest.mark.parametrize("use_sqlite", [True, False])
def test_unique_constraints_reject_racing_duplicates(tmp_path: Path, use_sqlite: bool) -> None:
    factory = (
        create_sqlite_unit_of_work_factory(_db_url(tmp_path)) if use_sqlite else _memory_factory()
    )
    asyncio.run(_load(factory))
    twin = _cultor(id_number="V-999", email="twin@example.com")

    async def _add() -> None:
        async with factory() as uow:
            await uow.cultor_repository.add(twin)
            await uow.commit()

    with pytest.raises(ConflictError):
        asyncio.run(_add())

    async def _count() -> int:
        async with factory() as uow:
            _, total = await uow.cultor_repository.find(MATCH_ALL, offset=0, limit=1)
        return total

    assert asyncio.run(_count()) == 4


def test_sqlite_uniqueness_queries(tmp_path: Path) -> None:
    factory = create_sqlite_unit_of_work_factory(_db_url(tmp_path))
    asyncio.run(_load(factory))

    async def _check() -> tuple[bool, bool, bool, bool]:
        async with factory() as uow:
            repo = uow.cultor_repository
            return (
                await repo.exists_by_field(UniqueField.PHONE_NUMBER, "0414-1234567"),
                await repo.exists_by_field(UniqueField.EMAIL, "nobody@example.com"),
                await repo.exists_by_field_excluding(
                    UniqueField.PHONE_NUMBER, "0414-1234567", CultorId(1)
                ),
                await repo.exists_by_field_excluding(
                    UniqueField.PHONE_NUMBER, "0414-1234567", CultorId(2)
                ),
            )

    assert asyncio.run(_check()) == (True, False, False, True)


def test_sqlite_update_and_delete(tmp_path: Path) -> None:
    factory = create_sqlite_unit_of_work_factory(_db_url(tmp_path))
    stored = asyncio.run(_load(factory))
    renamed = stored[0].model_copy(update={"first_name": "Ánge", "illness": "asma"})

    async def _update_then_delete() -> tuple[list[int], bool]:
        async with factory() as uow:
            await uow.cultor_repository.update(renamed)
            await uow.commit()
        ids = await _find_ids(factory, CultorCriteria(query="ánge"))
        async with factory() as uow:
            await uow.cultor_repository.delete(CultorId(1))
            await uow.commit()
        async with factory() as uow:
            return ids, await uow.cultor_repository.exists(CultorId(1))

    ids, still_there = asyncio.run(_update_then_delete())
    assert ids == [1, 2, 3]
    assert still_there is False


def test_sqlite_update_of_missing_cultor_raises(tmp_path: Path) -> None:
    factory = create_sqlite_unit_of_work_factory(_db_url(tmp_path))
    asyncio.run(_load(factory))
    ghost = _cultor(id=CultorId(42), id_number="V-42", phone_number="0426-4242424", email=None)

    async def _update() -> None:
        async with factory() as uow:
            await uow.cultor_repository.update(ghost)

    with pytest.raises(NotFoundError):
        asyncio.run(_update())


@pytest.mark.parametrize("use_sqlite", [True, False])
def test_seeding_is_idempotent(tmp_path: Path, use_sqlite: bool) -> None:
    factory = (
        create_sqlite_unit_of_work_factory(_db_url(tmp_path)) if use_sqlite else _memory_factory()
    )

    async def _seed_twice() -> tuple[int, int, list[int]]:
        async with factory() as uow:
            first = await seed_reference_data(uow)
            await uow.commit()
        async with factory() as uow:
            second = await seed_reference_data(uow)
            counts = [
                await uow.municipality_repository.count(),
                await uow.parish_repository.count(),
                await uow.art_category_repository.count(),
                await uow.art_discipline_repository.count(),
            ]
            await uow.commit()
        return first.total, second.total, counts

    first_total, second_total, counts = asyncio.run(_seed_twice())
    assert first_total == 14 + 38 + 7 + 45
    assert second_total == 0
    assert counts == [14, 38, 7, 45]


def test_sqlite_lookups_sorted_by_id(tmp_path: Path) -> None:
    factory = create_sqlite_unit_of_work_factory(_db_url(tmp_path))

    async def _lookups() -> tuple[list[str], list[str]]:
        async with factory() as uow:
            await seed_reference_data(uow)
            await uow.commit()
        async with factory() as uow:
            municipalities = await uow.municipality_repository.list_all()
            disciplines = await uow.art_discipline_repository.list_all()
        return [item.name for item in municipalities], [item.name for item in disciplines]

    municipalities, disciplines = asyncio.run(_lookups())
    assert municipalities[0] == "Bejuma"
    assert municipalities[-1] == "Valencia"
    assert disciplines.count("Otra...") == 7
    assert disciplines[6] == "Otra..."
