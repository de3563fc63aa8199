# ============================================================
# Module : solarsystem/infra/repo/weather_condition_repo.py
# Objet  : Accès SQL pour WeatherCondition (clé unique système/jour).
# ============================================================

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ...domain.entities import WeatherCondition, WeatherConditionCategory
from ...domain.errors import PersistenceFailureError, UniquenessConflictError
from ..base import WeatherConditionStore
from .db import session_scope
from .models import WeatherConditionORM


def _from_row(row: WeatherConditionORM) -> WeatherCondition:
    return WeatherCondition(
        id=row.id,
        solar_system_id=row.solar_system_id,
        day=row.day,
        category=WeatherConditionCategory(row.category),
        triangle_area=row.triangle_area,
    )


class SqlWeatherConditionRepo(WeatherConditionStore):
    """Cache SQL des conditions météo.

    Contrainte d'unicité: (solar_system_id, day); la base arbitre les créations concurrentes.
    """

    def __init__(self, engine: Engine) -> None:
        """Construit le repo avec un moteur SQLAlchemy."""
        self._engine = engine

    def find_by_key(self, solar_system_id: int, day: int) -> WeatherCondition | None:
        stmt = select(WeatherConditionORM).where(
            WeatherConditionORM.solar_system_id == solar_system_id,
            WeatherConditionORM.day == day,
        )
        try:
            with session_scope(self._engine) as session:
                row = session.execute(stmt).scalars().first()
                return _from_row(row) if row is not None else None
        except SQLAlchemyError as err:
            raise PersistenceFailureError("Error reading weather condition") from err

    def create(self, condition: WeatherCondition) -> WeatherCondition:
        """Crée une ligne en base. Lève `UniquenessConflictError` sur doublon."""
        try:
            with session_scope(self._engine) as session:
                row = WeatherConditionORM(
                    solar_system_id=condition.solar_system_id,
                    day=condition.day,
                    category=condition.category.value,
                    triangle_area=condition.triangle_area,
                )
                session.add(row)
                session.flush()
                saved = _from_row(row)
        except IntegrityError as err:
            raise UniquenessConflictError(
                "Weather condition already exists",
                details={"solar_system_id": condition.solar_system_id, "day": condition.day},
            ) from err
        except SQLAlchemyError as err:
            raise PersistenceFailureError("There was an error creating WeatherCondition") from err
        return saved

    def count(self, solar_system_id: int | None = None) -> int:
        stmt = select(func.count()).select_from(WeatherConditionORM)
        if solar_system_id is not None:
            stmt = stmt.where(WeatherConditionORM.solar_system_id == solar_system_id)
        try:
            with session_scope(self._engine) as session:
                return int(session.execute(stmt).scalar_one())
        except SQLAlchemyError as err:
            raise PersistenceFailureError("Error counting weather conditions") from err
