"""
Routes liées aux systèmes solaires: description, positions et conditions météo.

Ce module regroupe les endpoints `/solar-systems` qui exposent le moteur de conditions météo
(un jour) et l'agrégateur (une période en années).
"""

from fastapi import APIRouter

from solarsystem.api.schemas import (
    PeriodWeatherConditionResponse,
    PositionsResponse,
    SolarSystemResponse,
    WeatherConditionResponse,
)
from solarsystem.core.container import container
from solarsystem.domain.validation import require_solar_system_id

router = APIRouter(prefix="/solar-systems", tags=["weather"])


@router.get("/{solar_system_id}", response_model=SolarSystemResponse)
def get_solar_system(solar_system_id: int):
    """Retourne un système solaire et ses planètes."""
    require_solar_system_id(solar_system_id)
    system = container.solar_system_repo.get(solar_system_id)
    return system.model_dump()


@router.get("/{solar_system_id}/positions", response_model=PositionsResponse)
def get_positions(solar_system_id: int, day: int | None = None):
    """Positions cartésiennes des planètes au jour `day`."""
    positions = container.engine.positions(solar_system_id, day)
    return {"solar_system_id": solar_system_id, "day": day, "positions": positions}


@router.get("/{solar_system_id}/weather", response_model=WeatherConditionResponse)
def get_weather_condition(solar_system_id: int, day: int | None = None):
    """
    Retourne la condition météo d'un jour.

    Paramètres:
    - solar_system_id: identifiant du système solaire.
    - day: numéro de jour (>= 1).
    """
    condition = container.engine.determine(solar_system_id, day)
    return WeatherConditionResponse.from_condition(condition)


@router.get("/{solar_system_id}/weather/period", response_model=PeriodWeatherConditionResponse)
def get_period_weather_conditions(solar_system_id: int, years: int | None = None):
    """
    Retourne le résumé des conditions météo sur `years` années.

    Retour: compteurs par catégorie, jour de pluie maximale et conditions jour par jour.
    """
    summary = container.aggregator.summarize(solar_system_id, years)
    return PeriodWeatherConditionResponse.from_summary(summary)
