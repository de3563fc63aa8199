"""SQLAlchemy models for persistence layer (solar systems, planets, weather conditions)."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    """Classe de base pour tous les modèles SQLAlchemy."""

    metadata = MetaData()


class SolarSystemORM(Base):
    """Modèle ORM pour les systèmes solaires."""

    __tablename__ = "solar_systems"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(128), nullable=False)
    reference_planet_id = Column(Integer, nullable=True)
    planets = relationship(
        "PlanetORM",
        order_by="PlanetORM.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class PlanetORM(Base):
    """Modèle ORM pour les planètes; `position` conserve l'ordre dans le système."""

    __tablename__ = "planets"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    solar_system_id = Column(Integer, ForeignKey("solar_systems.id"), nullable=False)
    planet_id = Column(Integer, nullable=False)
    position = Column(Integer, nullable=False)
    name = Column(String(128), nullable=False)
    radius = Column(Float, nullable=False)
    angular_speed = Column(Float, nullable=False)
    initial_phase = Column(Float, nullable=False, default=0.0)


class WeatherConditionORM(Base):
    """Modèle ORM pour les conditions météo calculées."""

    __tablename__ = "weather_conditions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    solar_system_id = Column(Integer, ForeignKey("solar_systems.id"), nullable=False)
    day = Column(Integer, nullable=False)
    category = Column(String(16), nullable=False)
    triangle_area = Column(Float, nullable=False)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(UTC))

    __table_args__ = (
        UniqueConstraint("solar_system_id", "day", name="uq_weather_condition_system_day"),
    )
