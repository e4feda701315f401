"""SQLAlchemy ORM models for cultor registry SQLite persistence."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):  # type: ignore[misc]
    pass


class MunicipalityRecord(Base):
    __tablename__ = "municipalities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class ParishRecord(Base):
    __tablename__ = "parishes"
    __table_args__ = (UniqueConstraint("municipality_id", "name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    municipality_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("municipalities.id"), nullable=False, index=True
    )


class ArtCategoryRecord(Base):
    __tablename__ = "art_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class ArtDisciplineRecord(Base):
    __tablename__ = "art_disciplines"
    __table_args__ = (UniqueConstraint("art_category_id", "name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    art_category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("art_categories.id"), nullable=False, index=True
    )


class CultorRecord(Base):
    __tablename__ = "cultors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    # SQLite lower() only folds ASCII, so names are also stored folded for search.
    search_first_name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    search_last_name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    gender: Mapped[str] = mapped_column(String(1), nullable=False)
    id_number: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(12), nullable=False, unique=True)
    email: Mapped[str | None] = mapped_column(String(150), unique=True)
    instagram_user: Mapped[str | None] = mapped_column(String(30), unique=True)
    municipality_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("municipalities.id"), nullable=False
    )
    parish_id: Mapped[int] = mapped_column(Integer, ForeignKey("parishes.id"), nullable=False)
    home_address: Mapped[str] = mapped_column(String(100), nullable=False)
    art_category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("art_categories.id"), nullable=False
    )
    art_discipline_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("art_disciplines.id"), nullable=False
    )
    other_discipline: Mapped[str | None] = mapped_column(String(100))
    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False)
    group_name: Mapped[str | None] = mapped_column(String(100))
    disability: Mapped[str | None] = mapped_column(String(100))
    illness: Mapped[str | None] = mapped_column(String(100))
    created_at: Mapped[date] = mapped_column(Date, nullable=False)


__all__ = [
    "ArtCategoryRecord",
    "ArtDisciplineRecord",
    "Base",
    "CultorRecord",
    "MunicipalityRecord",
    "ParishRecord",
]
