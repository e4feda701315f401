"""Reference data for the state of Carabobo and its idempotent loader."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cultor_registry.domain import (
    OTHER_DISCIPLINE_NAME,
    ArtCategory,
    ArtCategoryId,
    ArtDiscipline,
    ArtDisciplineId,
    Municipality,
    MunicipalityId,
    Parish,
    ParishId,
)
from cultor_registry.persistence.interfaces import UnitOfWork

logger = logging.getLogger(__name__)

# Municipality -> parishes, in insertion (and therefore id) order.
MUNICIPALITIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Bejuma", ("Bejuma", "Canoabo", "Simón Bolívar")),
    ("Carlos Arvelo", ("Güigüe", "Belén", "Tacarigua")),
    ("Diego Ibarra", ("Mariara", "Aguas Calientes")),
    ("Guacara", ("Guacara", "Yagua", "Ciudad Alianza")),
    ("Juan José Mora", ("Morón", "Urama")),
    ("Libertador", ("Tocuyito", "Independencia")),
    ("Los Guayos", ("Los Guayos",)),
    ("Miranda", ("Miranda",)),
    ("Montalbán", ("Montalbán",)),
    ("Naguanagua", ("Naguanagua",)),
    (
        "Puerto Cabello",
        (
            "Bartolomé Salom",
            "Borburata",
            "Democracia",
            "Fraternidad",
            "Goaigoaza",
            "Juan José Flores",
            "Patanemo",
            "Unión",
        ),
    ),
    ("San Diego", ("San Diego",)),
    ("San Joaquín", ("San Joaquín",)),
    (
        "Valencia",
        (
            "Candelaria",
            "Catedral",
            "El Socorro",
            "Miguel Peña",
            "Rafael Urdaneta",
            "San Blas",
            "San José",
            "Santa Rosa",
            "Negro Primero",
        ),
    ),
)

# Category -> disciplines; every category ends with the "other" sentinel.
ART_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Artes Plásticas",
        ("Cestería", "Dulcería criolla", "Luthería", "Muñequería", "Prendas", "Tejido"),
    ),
    ("Artesanía", ("Cerámica", "Escultura", "Instalación", "Orfebrería", "Pintura")),
    ("Audiovisuales", ("Cine", "Experimental", "Fotografía", "Videoarte")),
    ("Danza", ("Ballet", "Contemporánea", "Moderna", "Urbana", "Tradicional")),
    ("Literatura", ("Crónica", "Cuento", "Ensayo", "Novela", "Poesía")),
    (
        "Música",
        (
            "Clásica o académica",
            "Experimental",
            "Fusión",
            "Llanera",
            "Popular",
            "Rock",
            "Tradicional",
            "Urbana",
        ),
    ),
    ("Teatro", ("Circo", "Clown", "Mimo", "Teatro", "Títeres")),
)


@dataclass(frozen=True)
class SeedReport:
    """Rows inserted per reference table; zero means the table was already populated."""

    municipalities: int = 0
    parishes: int = 0
    art_categories: int = 0
    art_disciplines: int = 0

    @property
    def total(self) -> int:
        return self.municipalities + self.parishes + self.art_categories + self.art_disciplines


def build_municipalities() -> tuple[list[Municipality], list[Parish]]:
    municipalities: list[Municipality] = []
    parishes: list[Parish] = []
    for municipality_name, parish_names in MUNICIPALITIES:
        municipality_id = MunicipalityId(len(municipalities) + 1)
        municipalities.append(Municipality(id=municipality_id, name=municipality_name))
        for parish_name in parish_names:
            parishes.append(
                Parish(
                    id=ParishId(len(parishes) + 1),
                    name=parish_name,
                    municipality_id=municipality_id,
                )
            )
    return municipalities, parishes


def build_art_categories(
    other_discipline_name: str = OTHER_DISCIPLINE_NAME,
) -> tuple[list[ArtCategory], list[ArtDiscipline]]:
    categories: list[ArtCategory] = []
    disciplines: list[ArtDiscipline] = []
    for category_name, discipline_names in ART_CATEGORIES:
        category_id = ArtCategoryId(len(categories) + 1)
        categories.append(ArtCategory(id=category_id, name=category_name))
        for discipline_name in (*discipline_names, other_discipline_name):
            disciplines.append(
                ArtDiscipline(
                    id=ArtDisciplineId(len(disciplines) + 1),
                    name=discipline_name,
                    art_category_id=category_id,
                )
            )
    return categories, disciplines


async def seed_reference_data(
    uow: UnitOfWork,
    *,
    other_discipline_name: str = OTHER_DISCIPLINE_NAME,
) -> SeedReport:
    """Insert the reference dataset into every empty table of ``uow``.

    Tables that already hold rows are left untouched, so running this again
    is a no-op. The caller commits.
    """

    municipalities, parishes = build_municipalities()
    categories, disciplines = build_art_categories(other_discipline_name)

    inserted: dict[str, int] = {}
    for label, repository, rows in (
        ("municipalities", uow.municipality_repository, municipalities),
        ("parishes", uow.parish_repository, parishes),
        ("art_categories", uow.art_category_repository, categories),
        ("art_disciplines", uow.art_discipline_repository, disciplines),
    ):
        if await repository.count() > 0:
            logger.debug("Reference table %s already populated; skipping", label)
            inserted[label] = 0
            continue
        await repository.add_many(rows)
        inserted[label] = len(rows)

    report = SeedReport(**inserted)
    if report.total:
        logger.info(
            "Seeded reference data: %d municipalities, %d parishes, "
            "%d art categories, %d art disciplines",
            report.municipalities,
            report.parishes,
            report.art_categories,
            report.art_disciplines,
        )
    return report


__all__ = [
    "ART_CATEGORIES",
    "MUNICIPALITIES",
    "SeedReport",
    "build_art_categories",
    "build_municipalities",
    "seed_reference_data",
]
