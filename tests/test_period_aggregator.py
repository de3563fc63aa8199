"""
Tests pour l'agrégation des conditions météo sur une période.

Années courtes (jours par an injectés) pour garder des périodes rapides à calculer.
"""

from __future__ import annotations

import pytest

from solarsystem.domain.entities import WeatherConditionCategory
from solarsystem.domain.errors import InvalidArgumentError, NotFoundError
from solarsystem.domain.services import PeriodAggregator, WeatherConditionEngine, reduce_period
from solarsystem.infra.repositories import InMemorySolarSystemRepo, InMemoryWeatherConditionRepo
from solarsystem.infra.seed import default_solar_system
from tests.fakes import ScriptedEngine, condition

DROUGHT = WeatherConditionCategory.DROUGHT
OPTIMAL = WeatherConditionCategory.OPTIMAL
RAINY = WeatherConditionCategory.RAINY

SHORT_YEAR = 7


def test_counts_add_up_to_total_days(engine) -> None:
    """Teste que la somme des compteurs vaut le nombre total de jours."""
    aggregator = PeriodAggregator(engine, days_per_year=SHORT_YEAR)
    summary = aggregator.summarize(1, 3)
    assert summary.total_days == 3 * SHORT_YEAR
    assert summary.drought_count + summary.rainy_count + summary.optimal_count == 3 * SHORT_YEAR


def test_conditions_are_day_ordered(engine) -> None:
    aggregator = PeriodAggregator(engine, days_per_year=SHORT_YEAR)
    summary = aggregator.summarize(1, 2)
    assert [c.day for c in summary.weather_conditions] == list(range(1, 2 * SHORT_YEAR + 1))


@pytest.mark.parametrize("years", [0, -1, 11, None])
def test_years_out_of_range_rejected(years) -> None:
    scripted = ScriptedEngine({})
    aggregator = PeriodAggregator(scripted, days_per_year=SHORT_YEAR)
    with pytest.raises(InvalidArgumentError):
        aggregator.summarize(1, years)
    assert scripted.calls == []


def test_invalid_solar_system_id_rejected() -> None:
    aggregator = PeriodAggregator(ScriptedEngine({}), days_per_year=SHORT_YEAR)
    with pytest.raises(InvalidArgumentError):
        aggregator.summarize(0, 1)


def test_ten_years_is_accepted(engine, condition_repo) -> None:
    aggregator = PeriodAggregator(engine, days_per_year=2)
    summary = aggregator.summarize(1, 10)
    assert summary.total_days == 20
    assert condition_repo.count(1) == 20


def test_peak_rain_day_first_seen_wins_ties() -> None:
    """Teste qu'à aire maximale égale le jour le plus tôt est retenu."""
    script = {
        1: condition(1, RAINY, 1.0),
        2: condition(2, RAINY, 5.0),
        3: condition(3, DROUGHT, 9.0),
        4: condition(4, RAINY, 5.0),
    }
    aggregator = PeriodAggregator(ScriptedEngine(script), days_per_year=4)
    summary = aggregator.summarize(1, 1)
    assert summary.peak_rain_day == 2
    assert summary.rainy_count == 3
    assert summary.drought_count == 1


def test_non_rainy_area_does_not_count_as_peak() -> None:
    script = {
        1: condition(1, DROUGHT, 100.0),
        2: condition(2, RAINY, 2.0),
        3: condition(3, OPTIMAL, 0.0),
    }
    summary = PeriodAggregator(ScriptedEngine(script), days_per_year=3).summarize(1, 1)
    assert summary.peak_rain_day == 2
    assert summary.optimal_count == 1


def test_no_rainy_day_has_no_peak() -> None:
    summary = reduce_period(1, 1, [condition(1, DROUGHT, 3.0), condition(2, OPTIMAL)])
    assert summary.peak_rain_day is None
    assert summary.rainy_count == 0


def test_failure_on_any_day_fails_whole_period() -> None:
    """Teste qu'une erreur sur un jour fait échouer toute la période."""
    script = {
        1: condition(1, RAINY, 1.0),
        2: NotFoundError("Solar system 1 not found"),
        3: condition(3, RAINY, 1.0),
    }
    aggregator = PeriodAggregator(ScriptedEngine(script), days_per_year=3)
    with pytest.raises(NotFoundError):
        aggregator.summarize(1, 1)


def test_unknown_system_fails_period(engine) -> None:
    with pytest.raises(NotFoundError):
        PeriodAggregator(engine, days_per_year=SHORT_YEAR).summarize(42, 1)


def test_parallel_fetch_matches_sequential() -> None:
    """Teste que la récupération parallèle donne le même résumé que la version séquentielle."""
    summaries = []
    for workers in (1, 4):
        solar = InMemorySolarSystemRepo()
        solar.save(default_solar_system())
        engine = WeatherConditionEngine(solar, InMemoryWeatherConditionRepo())
        summaries.append(PeriodAggregator(engine, days_per_year=90, workers=workers).summarize(1, 2))
    sequential, parallel = summaries
    assert [(c.day, c.category, c.triangle_area) for c in parallel.weather_conditions] == [
        (c.day, c.category, c.triangle_area) for c in sequential.weather_conditions
    ]
    assert parallel.peak_rain_day == sequential.peak_rain_day
    assert parallel.drought_count == sequential.drought_count


def test_parallel_fetch_surfaces_first_error_in_day_order() -> None:
    first = InvalidArgumentError("day 2 failed")
    script = {
        1: condition(1, RAINY, 1.0),
        2: first,
        3: condition(3, RAINY, 1.0),
        4: NotFoundError("day 4 failed"),
    }
    aggregator = PeriodAggregator(ScriptedEngine(script), days_per_year=4, workers=3)
    with pytest.raises(InvalidArgumentError) as excinfo:
        aggregator.summarize(1, 1)
    assert excinfo.value is first


def test_days_per_year_must_be_positive(engine) -> None:
    with pytest.raises(ValueError):
        PeriodAggregator(engine, days_per_year=0)


def test_default_system_has_optimal_days_over_a_year() -> None:
    """Les trois planètes du système de référence s'alignent avec l'étoile tous les 90 jours."""
    solar = InMemorySolarSystemRepo()
    solar.save(default_solar_system())
    engine = WeatherConditionEngine(solar, InMemoryWeatherConditionRepo())
    summary = PeriodAggregator(engine, days_per_year=360).summarize(1, 1)
    by_day = {c.day: c.category for c in summary.weather_conditions}
    for day in (90, 180, 270, 360):
        assert by_day[day] is OPTIMAL
    assert summary.rainy_count > 0
    assert summary.peak_rain_day is not None
    assert by_day[summary.peak_rain_day] is RAINY
