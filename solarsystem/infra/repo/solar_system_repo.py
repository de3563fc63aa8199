# ============================================================
# Module : solarsystem/infra/repo/solar_system_repo.py
# Objet  : Accès SQL pour SolarSystem et ses planètes ordonnées.
# ============================================================

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ...domain.entities import SolarSystem
from ...domain.errors import NotFoundError, PersistenceFailureError
from ..base import SolarSystemStore
from .db import session_scope
from .models import PlanetORM, SolarSystemORM


def _to_record(row: SolarSystemORM) -> dict:
    return {
        "id": row.id,
        "name": row.name,
        "reference_planet_id": row.reference_planet_id,
        "planets": [
            {
                "id": p.planet_id,
                "name": p.name,
                "radius": p.radius,
                "angular_speed": p.angular_speed,
                "initial_phase": p.initial_phase,
            }
            for p in row.planets
        ],
    }


def _planet_rows(system: SolarSystem) -> list[PlanetORM]:
    return [
        PlanetORM(
            planet_id=planet.id,
            position=index,
            name=planet.name,
            radius=planet.radius,
            angular_speed=planet.angular_speed,
            initial_phase=planet.initial_phase,
        )
        for index, planet in enumerate(system.planets)
    ]


class SqlSolarSystemRepo(SolarSystemStore):
    """Dépôt SQL des systèmes solaires."""

    def __init__(self, engine: Engine) -> None:
        """Construit le repo avec un moteur SQLAlchemy (une session par opération)."""
        self._engine = engine

    def get(self, solar_system_id: int) -> SolarSystem:
        """Charge un système et ses planètes dans l'ordre; `NotFoundError` si absent."""
        try:
            with session_scope(self._engine) as session:
                row = session.get(SolarSystemORM, solar_system_id)
                record = _to_record(row) if row is not None else None
        except SQLAlchemyError as err:
            raise PersistenceFailureError("Error reading solar system") from err
        if record is None:
            raise NotFoundError(
                f"Solar system {solar_system_id} not found",
                details={"solar_system_id": solar_system_id},
            )
        return SolarSystem.from_record(record)

    def save(self, system: SolarSystem) -> SolarSystem:
        """Crée ou met à jour un système; ses planètes sont remplacées."""
        try:
            with session_scope(self._engine) as session:
                row = session.get(SolarSystemORM, system.id)
                if row is None:
                    row = SolarSystemORM(id=system.id)
                    session.add(row)
                row.name = system.name
                row.reference_planet_id = system.reference_planet_id
                row.planets = _planet_rows(system)
        except SQLAlchemyError as err:
            raise PersistenceFailureError("Error saving solar system") from err
        return system

    def list_ids(self) -> list[int]:
        try:
            with session_scope(self._engine) as session:
                stmt = select(SolarSystemORM.id).order_by(SolarSystemORM.id)
                return list(session.execute(stmt).scalars().all())
        except SQLAlchemyError as err:
            raise PersistenceFailureError("Error listing solar systems") from err
