"""Tests pour le calcul des positions orbitales."""

from __future__ import annotations

import math

import pytest

from solarsystem.domain.entities import Planet
from solarsystem.domain.orbit import (
    TAU,
    normalize_angle,
    orbital_angle,
    planet_positions,
    position,
)
from solarsystem.infra.seed import default_solar_system


def test_normalize_angle_range() -> None:
    assert normalize_angle(0.0) == 0.0
    assert normalize_angle(TAU) == 0.0
    assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert normalize_angle(5 * math.pi) == pytest.approx(math.pi)
    for angle in (-1e-18, -100.0, 1e6):
        assert 0.0 <= normalize_angle(angle) < TAU


def test_orbital_angle_includes_initial_phase() -> None:
    planet = Planet(id=1, name="p", radius=1.0, angular_speed=0.1, initial_phase=1.0)
    assert orbital_angle(planet, 10) == pytest.approx(2.0)


def test_position_quarter_orbit() -> None:
    """Teste la position après un quart d'orbite."""
    planet = Planet(id=1, name="p", radius=2.0, angular_speed=math.pi / 2)
    p = position(planet, 1)
    assert p.x == pytest.approx(0.0, abs=1e-12)
    assert p.y == pytest.approx(2.0)


def test_position_matches_polar_coordinates() -> None:
    planet = Planet(id=1, name="p", radius=3.0, angular_speed=0.25, initial_phase=0.5)
    p = position(planet, 7)
    angle = normalize_angle(0.5 + 0.25 * 7)
    assert p.x == 3.0 * math.cos(angle)
    assert p.y == 3.0 * math.sin(angle)
    assert math.hypot(p.x, p.y) == pytest.approx(3.0)


def test_position_is_deterministic() -> None:
    """Teste que deux appels identiques donnent des résultats identiques au bit près."""
    planet = Planet.from_degrees(1, "Vulcano", 1000, 5)
    for day in (1, 17, 365, 3650):
        assert position(planet, day) == position(planet, day)


def test_clockwise_planet_of_default_system() -> None:
    """Ferengi (1°/jour, sens horaire) est à -90° au jour 90."""
    ferengi = default_solar_system().planets[0]
    p = position(ferengi, 90)
    assert p.x == pytest.approx(0.0, abs=1e-9)
    assert p.y == pytest.approx(-500.0)


def test_planet_positions_keep_system_order() -> None:
    system = default_solar_system()
    located = planet_positions(system, 1)
    assert [planet.name for planet, _ in located] == ["Ferengi", "Betasoide", "Vulcano"]
