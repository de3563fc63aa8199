"""
Entités du domaine métier.

Ce module définit les modèles de données principaux: planètes, systèmes solaires, conditions
météorologiques journalières et résumés de période. Les entités sont immuables une fois construites.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from solarsystem.domain.errors import ComputationFailureError


class WeatherConditionCategory(str, Enum):
    """Catégorie météo d'un jour: exactement une par (système solaire, jour)."""

    DROUGHT = "Drought"
    OPTIMAL = "Optimal"
    RAINY = "Rainy"


class Planet(BaseModel):
    """Planète en orbite circulaire autour du corps de référence.

    `angular_speed` est en radians par jour (positif: sens trigonométrique, négatif: horaire),
    `initial_phase` en radians.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str
    radius: float = Field(gt=0)
    angular_speed: float
    initial_phase: float = 0.0

    @classmethod
    def from_degrees(
        cls,
        id: int,
        name: str,
        radius: float,
        degrees_per_day: float,
        initial_phase_degrees: float = 0.0,
    ) -> Planet:
        """Construit une planète à partir de paramètres exprimés en degrés."""
        return cls(
            id=id,
            name=name,
            radius=radius,
            angular_speed=math.radians(degrees_per_day),
            initial_phase=math.radians(initial_phase_degrees),
        )


class SolarSystem(BaseModel):
    """Système solaire: suite ordonnée de planètes et corps de référence nommé.

    `reference_planet_id` désigne la planète servant de référence pour le test d'inclusion;
    lorsqu'il est absent, la référence est l'étoile centrale, à l'origine.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str
    planets: tuple[Planet, ...]
    reference_planet_id: int | None = None

    @model_validator(mode="after")
    def _check_planets(self) -> SolarSystem:
        ids = [p.id for p in self.planets]
        if len(ids) != len(set(ids)):
            raise ValueError("planet ids must be unique within a solar system")
        if self.reference_planet_id is not None and self.reference_planet_id not in ids:
            raise ValueError("reference_planet_id must designate one of the planets")
        return self

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> SolarSystem:
        """Reconstruit un système depuis un enregistrement stocké.

        Des paramètres orbitaux invalides (rayon nul, etc.) lèvent `ComputationFailureError`.
        """
        try:
            return cls.model_validate(record)
        except ValidationError as err:
            raise ComputationFailureError(
                "Invalid orbital parameters for solar system",
                details={"solar_system_id": record.get("id")},
            ) from err


class WeatherCondition(BaseModel):
    """Condition météo calculée pour un (système solaire, jour); clé naturelle unique."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    solar_system_id: int = Field(gt=0)
    day: int = Field(gt=0)
    category: WeatherConditionCategory
    triangle_area: float = Field(ge=0.0)


class PeriodSummary(BaseModel):
    """Agrégat des conditions d'une période de `years` années (jamais persisté)."""

    solar_system_id: int
    years: int
    weather_conditions: list[WeatherCondition]
    drought_count: int = 0
    rainy_count: int = 0
    optimal_count: int = 0
    peak_rain_day: int | None = None

    @property
    def total_days(self) -> int:
        return len(self.weather_conditions)
