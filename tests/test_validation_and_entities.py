"""Tests pour la validation des paramètres et les entités du domaine."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from solarsystem.domain.entities import Planet, SolarSystem, WeatherCondition
from solarsystem.domain.errors import ComputationFailureError, InvalidArgumentError
from solarsystem.domain.validation import (
    ParamValidator,
    any_of,
    require_day,
    require_solar_system_id,
    require_years,
)


def test_any_of_composes_predicates() -> None:
    predicate = any_of(lambda v: v < 0, lambda v: v > 10)
    assert predicate(-1)
    assert predicate(11)
    assert not predicate(5)


def test_param_validator_reports_parameter_name() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        ParamValidator.test(3, lambda v: v == 3, name="day")
    assert excinfo.value.details == {"param": "day"}
    assert isinstance(excinfo.value, ValueError)


def test_require_day_and_id() -> None:
    require_day(1)
    require_solar_system_id(1)
    for bad in (0, -5, None, True, 2.0):
        with pytest.raises(InvalidArgumentError):
            require_day(bad)
        with pytest.raises(InvalidArgumentError):
            require_solar_system_id(bad)


def test_require_years_bounds() -> None:
    require_years(1, max_years=10)
    require_years(10, max_years=10)
    for bad in (0, 11, None):
        with pytest.raises(InvalidArgumentError):
            require_years(bad, max_years=10)


def test_planet_radius_must_be_positive() -> None:
    """Teste que le rayon orbital est validé à la construction de la planète."""
    with pytest.raises(ValidationError):
        Planet(id=1, name="p", radius=0.0, angular_speed=0.0)


def test_planet_from_degrees() -> None:
    planet = Planet.from_degrees(1, "p", 10, 90, 180)
    assert planet.angular_speed == pytest.approx(math.pi / 2)
    assert planet.initial_phase == pytest.approx(math.pi)


def test_planet_is_immutable() -> None:
    planet = Planet(id=1, name="p", radius=1.0, angular_speed=0.0)
    with pytest.raises(ValidationError):
        planet.radius = 2.0


def test_solar_system_rejects_unknown_reference() -> None:
    planets = (Planet(id=1, name="p", radius=1.0, angular_speed=0.0),)
    with pytest.raises(ValidationError):
        SolarSystem(id=1, name="s", planets=planets, reference_planet_id=9)


def test_solar_system_rejects_duplicate_planet_ids() -> None:
    planet = Planet(id=1, name="p", radius=1.0, angular_speed=0.0)
    with pytest.raises(ValidationError):
        SolarSystem(id=1, name="s", planets=(planet, planet))


def test_from_record_with_zero_radius_is_computation_failure() -> None:
    record = {
        "id": 1,
        "name": "s",
        "planets": [{"id": 1, "name": "p", "radius": 0, "angular_speed": 0.0}],
    }
    with pytest.raises(ComputationFailureError):
        SolarSystem.from_record(record)


def test_weather_condition_area_is_non_negative() -> None:
    with pytest.raises(ValidationError):
        WeatherCondition(solar_system_id=1, day=1, category="Rainy", triangle_area=-1.0)
