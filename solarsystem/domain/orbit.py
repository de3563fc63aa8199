"""
Calcul des positions orbitales.

Mouvement circulaire uniforme: la position d'une planète est une fonction pure de ses
paramètres orbitaux et du numéro de jour.
"""

from __future__ import annotations

import math

from solarsystem.domain.entities import Planet, SolarSystem
from solarsystem.domain.geometry import Point, rotate

TAU = 2.0 * math.pi


def normalize_angle(angle: float) -> float:
    """Ramène un angle en radians dans l'intervalle [0, 2π)."""
    normalized = math.fmod(angle, TAU)
    if normalized < 0:
        normalized += TAU
    if normalized >= TAU:
        normalized = 0.0
    return normalized


def orbital_angle(planet: Planet, day: int) -> float:
    """Angle de la planète au jour `day`, normalisé."""
    return normalize_angle(planet.initial_phase + planet.angular_speed * day)


def position(planet: Planet, day: int) -> Point:
    """Position cartésienne de la planète au jour `day`."""
    return rotate(Point(planet.radius, 0.0), orbital_angle(planet, day))


def planet_positions(system: SolarSystem, day: int) -> list[tuple[Planet, Point]]:
    """Positions de toutes les planètes du système pour un jour, dans l'ordre du système."""
    return [(planet, position(planet, day)) for planet in system.planets]
