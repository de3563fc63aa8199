"""
Primitives géométriques 2D.

Fonctions pures sur des points du plan: rotation autour de l'origine, distance, aire d'un
triangle (formule du lacet), appartenance d'un point à un triangle (bord inclus) et test
d'alignement de trois points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Point (ou position cartésienne) du plan."""

    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


def rotate(point: Point, angle: float) -> Point:
    """Fait tourner `point` autour de l'origine d'un angle en radians (sens trigonométrique)."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(
        point.x * cos_a - point.y * sin_a,
        point.x * sin_a + point.y * cos_a,
    )


def distance(a: Point, b: Point) -> float:
    """Distance euclidienne entre deux points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def _cross(o: Point, a: Point, b: Point) -> float:
    # signe: côté de `b` par rapport à la droite orientée (o, a)
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def triangle_area(p1: Point, p2: Point, p3: Point) -> float:
    """Aire (toujours >= 0) du triangle p1 p2 p3 via la formule du lacet."""
    return 0.5 * abs(
        p1.x * (p2.y - p3.y) + p2.x * (p3.y - p1.y) + p3.x * (p1.y - p2.y)
    )


def point_in_triangle(point: Point, a: Point, b: Point, c: Point) -> bool:
    """Indique si `point` est dans le triangle abc, bord compris.

    Le point est intérieur s'il est du même côté des trois arêtes; un produit vectoriel nul
    (point sur une arête) compte comme intérieur.
    """
    d1 = _cross(a, b, point)
    d2 = _cross(b, c, point)
    d3 = _cross(c, a, point)
    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def are_aligned(p1: Point, p2: Point, p3: Point, epsilon: float) -> bool:
    """Trois points sont (quasi) alignés si l'aire de leur triangle est <= epsilon."""
    return triangle_area(p1, p2, p3) <= epsilon
