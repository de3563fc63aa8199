# Schémas Pydantic exposés par l'API (réponses).

from pydantic import BaseModel

from solarsystem.domain.entities import PeriodSummary, WeatherCondition


class PlanetResponse(BaseModel):
    """Planète d'un système solaire (angles en radians)."""

    id: int
    name: str
    radius: float
    angular_speed: float
    initial_phase: float


class SolarSystemResponse(BaseModel):
    """Système solaire et ses planètes, dans l'ordre."""

    id: int
    name: str
    reference_planet_id: int | None
    planets: list[PlanetResponse]


class PlanetPositionResponse(BaseModel):
    """Position cartésienne d'une planète pour un jour donné."""

    planet_id: int
    name: str
    x: float
    y: float


class PositionsResponse(BaseModel):
    """Positions de toutes les planètes d'un système pour un jour."""

    solar_system_id: int
    day: int
    positions: list[PlanetPositionResponse]


class WeatherConditionResponse(BaseModel):
    """Condition météo d'un jour.

    Champs:
    - id: identifiant de la condition persistée
    - solar_system_id, day: clé naturelle
    - weather_condition: Drought | Optimal | Rainy
    - triangle_area: aire du triangle formé par les trois planètes mesurées
    """

    id: int | None
    solar_system_id: int
    day: int
    weather_condition: str
    triangle_area: float

    @classmethod
    def from_condition(cls, condition: WeatherCondition) -> "WeatherConditionResponse":
        return cls(
            id=condition.id,
            solar_system_id=condition.solar_system_id,
            day=condition.day,
            weather_condition=condition.category.value,
            triangle_area=condition.triangle_area,
        )


class PeriodWeatherConditionResponse(BaseModel):
    """Résumé des conditions météo d'une période de plusieurs années."""

    solar_system_id: int
    years: int
    total_days: int
    drought_periods: int
    rainy_periods: int
    optimal_periods: int
    day_with_maximum_rainfall_intensity: int | None
    weather_conditions: list[WeatherConditionResponse]

    @classmethod
    def from_summary(cls, summary: PeriodSummary) -> "PeriodWeatherConditionResponse":
        return cls(
            solar_system_id=summary.solar_system_id,
            years=summary.years,
            total_days=summary.total_days,
            drought_periods=summary.drought_count,
            rainy_periods=summary.rainy_count,
            optimal_periods=summary.optimal_count,
            day_with_maximum_rainfall_intensity=summary.peak_rain_day,
            weather_conditions=[
                WeatherConditionResponse.from_condition(c) for c in summary.weather_conditions
            ],
        )
