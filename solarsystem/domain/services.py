"""Services métier: moteur de conditions météo et agrégation par période.

Responsabilités:
- `WeatherConditionEngine`: calcule (ou relit en cache) la condition d'un jour pour un système.
- `PeriodAggregator`: parcourt une période de jours et réduit les résultats en compteurs et jour
  de pluie maximale.
"""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import structlog

from solarsystem.app.metrics import (
    PERIOD_SUMMARIES,
    WEATHER_CONDITION_CONFLICTS,
    WEATHER_CONDITION_LOOKUPS,
)
from solarsystem.domain.classifier import DEFAULT_AREA_EPSILON, Classification, classify
from solarsystem.domain.entities import (
    PeriodSummary,
    SolarSystem,
    WeatherCondition,
    WeatherConditionCategory,
)
from solarsystem.domain.errors import PersistenceFailureError, UniquenessConflictError
from solarsystem.domain.geometry import ORIGIN, Point
from solarsystem.domain.orbit import planet_positions
from solarsystem.domain.validation import require_day, require_solar_system_id, require_years
from solarsystem.infra.base import SolarSystemStore, WeatherConditionStore

log = structlog.get_logger(__name__)


def reference_frame(system: SolarSystem, day: int) -> tuple[list[Point], int, list[int | None]]:
    """Positions du jour, index du corps de référence et identités des corps.

    Sans planète de référence, l'étoile centrale (origine, identité None) est insérée en tête.
    """
    located = planet_positions(system, day)
    points = [point for _, point in located]
    ids: list[int | None] = [planet.id for planet, _ in located]
    if system.reference_planet_id is None:
        return [ORIGIN, *points], 0, [None, *ids]
    return points, ids.index(system.reference_planet_id), ids


class WeatherConditionEngine:
    """Moteur de conditions météo avec cache par (système solaire, jour)."""

    def __init__(
        self,
        solar_systems: SolarSystemStore,
        conditions: WeatherConditionStore,
        epsilon: float = DEFAULT_AREA_EPSILON,
    ):
        """Initialise le moteur avec ses dépôts.

        Paramètres:
        - solar_systems: dépôt des systèmes solaires.
        - conditions: dépôt (cache) des conditions calculées.
        - epsilon: seuil d'aire en dessous duquel trois planètes sont alignées.
        """
        self.solar_systems = solar_systems
        self.conditions = conditions
        self.epsilon = epsilon

    def classify_day(self, system: SolarSystem, day: int) -> Classification:
        """Classe la configuration du système au jour `day`, sans accès au stockage."""
        points, reference_index, _ = reference_frame(system, day)
        return classify(points, reference_index, self.epsilon)

    def build_condition(self, system: SolarSystem, day: int) -> WeatherCondition:
        """Construit (sans le persister) la condition météo du jour."""
        classification = self.classify_day(system, day)
        return WeatherCondition(
            solar_system_id=system.id,
            day=day,
            category=classification.category,
            triangle_area=classification.triangle_area,
        )

    def determine(self, solar_system_id: int, day: int) -> WeatherCondition:
        """Retourne la condition météo du jour, calculée une seule fois par clé.

        Démarche:
        - Valide les paramètres avant tout accès au stockage.
        - Relit la condition en cache si elle existe.
        - Sinon charge le système, calcule et persiste; en cas de création concurrente,
          relit et renvoie la valeur du gagnant.
        """
        require_day(day)
        require_solar_system_id(solar_system_id)

        cached = self.conditions.find_by_key(solar_system_id, day)
        if cached is not None:
            WEATHER_CONDITION_LOOKUPS.labels(result="hit").inc()
            return cached
        WEATHER_CONDITION_LOOKUPS.labels(result="miss").inc()

        system = self.solar_systems.get(solar_system_id)
        condition = self.build_condition(system, day)
        try:
            created = self.conditions.create(condition)
        except UniquenessConflictError:
            WEATHER_CONDITION_CONFLICTS.inc()
            log.info(
                "weather_condition_conflict_reread",
                solar_system_id=solar_system_id,
                day=day,
            )
            winner = self.conditions.find_by_key(solar_system_id, day)
            if winner is None:
                raise PersistenceFailureError(
                    "Weather condition vanished after a uniqueness conflict",
                    details={"solar_system_id": solar_system_id, "day": day},
                ) from None
            return winner
        log.debug(
            "weather_condition_created",
            solar_system_id=solar_system_id,
            day=day,
            category=created.category.value,
            triangle_area=created.triangle_area,
        )
        return created

    def positions(self, solar_system_id: int, day: int) -> list[dict[str, Any]]:
        """Positions cartésiennes des planètes du système au jour `day`."""
        require_day(day)
        require_solar_system_id(solar_system_id)
        system = self.solar_systems.get(solar_system_id)
        return [
            {"planet_id": planet.id, "name": planet.name, "x": point.x, "y": point.y}
            for planet, point in planet_positions(system, day)
        ]


def reduce_period(
    solar_system_id: int, years: int, conditions: Iterable[WeatherCondition]
) -> PeriodSummary:
    """Réduit des conditions ordonnées par jour en compteurs et jour de pluie maximale.

    À aire égale, le premier jour rencontré l'emporte (comparaison stricte).
    """
    ordered = list(conditions)
    drought = rainy = optimal = 0
    peak_day: int | None = None
    peak_area = 0.0
    for condition in ordered:
        if condition.category is WeatherConditionCategory.DROUGHT:
            drought += 1
        elif condition.category is WeatherConditionCategory.OPTIMAL:
            optimal += 1
        else:
            rainy += 1
            if peak_day is None or condition.triangle_area > peak_area:
                peak_area = condition.triangle_area
                peak_day = condition.day
    return PeriodSummary(
        solar_system_id=solar_system_id,
        years=years,
        weather_conditions=ordered,
        drought_count=drought,
        rainy_count=rainy,
        optimal_count=optimal,
        peak_rain_day=peak_day,
    )


class PeriodAggregator:
    """Agrégation des conditions météo sur une période de plusieurs années."""

    def __init__(
        self,
        engine: WeatherConditionEngine,
        days_per_year: int,
        max_years: int = 10,
        workers: int = 1,
    ):
        """Initialise l'agrégateur.

        Paramètres:
        - engine: moteur de conditions journalières.
        - days_per_year: nombre de jours d'une année (configuration injectée).
        - max_years: borne supérieure du nombre d'années demandé.
        - workers: >1 active la récupération parallèle des jours.
        """
        if days_per_year <= 0:
            raise ValueError("days_per_year must be a positive integer")
        self.engine = engine
        self.days_per_year = days_per_year
        self.max_years = max_years
        self.workers = workers

    def _collect(self, solar_system_id: int, total_days: int) -> list[WeatherCondition]:
        days = range(1, total_days + 1)
        if self.workers <= 1:
            return [self.engine.determine(solar_system_id, day) for day in days]
        # map() conserve l'ordre des jours et relance la première erreur dans cet ordre
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(lambda day: self.engine.determine(solar_system_id, day), days))

    def summarize(self, solar_system_id: int, years: int) -> PeriodSummary:
        """Calcule le résumé de la période `years` pour le système.

        Échoue entièrement si le calcul d'un seul jour échoue.
        """
        require_years(years, self.max_years)
        require_solar_system_id(solar_system_id)

        total_days = self.days_per_year * years
        conditions = self._collect(solar_system_id, total_days)
        summary = reduce_period(solar_system_id, years, conditions)
        PERIOD_SUMMARIES.inc()
        log.info(
            "period_summary_computed",
            solar_system_id=solar_system_id,
            years=years,
            total_days=total_days,
            drought=summary.drought_count,
            rainy=summary.rainy_count,
            optimal=summary.optimal_count,
            peak_rain_day=summary.peak_rain_day,
        )
        return summary
