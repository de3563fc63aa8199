"""
Classification météo d'une configuration planétaire.

Le triangle de mesure est formé par les trois premiers corps non-référence, dans l'ordre de la
séquence. Ordre de décision fixe:

1. Drought: le corps de référence est dans le triangle (bord compris).
2. Optimal: les trois sommets sont (quasi) alignés, aire <= epsilon.
3. Rainy: sinon; l'aire du triangle mesure l'intensité.

Un triangle dégénéré n'a pas d'intérieur: une référence alignée avec les trois sommets donne
Optimal, jamais Drought.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from solarsystem.domain.entities import WeatherConditionCategory
from solarsystem.domain.errors import ComputationFailureError
from solarsystem.domain.geometry import Point, are_aligned, point_in_triangle, triangle_area

DEFAULT_AREA_EPSILON = 1e-6
TRIANGLE_SIZE = 3


@dataclass(frozen=True)
class Classification:
    """Résultat de classification: catégorie, aire du triangle et indices de ses sommets."""

    category: WeatherConditionCategory
    triangle_area: float
    vertices: tuple[int, int, int]


def measuring_triangle(positions: Sequence[Point], reference_index: int) -> tuple[int, int, int]:
    """Indices des trois premiers corps non-référence."""
    if not 0 <= reference_index < len(positions):
        raise ComputationFailureError(
            "Reference body index out of range",
            details={"reference_index": reference_index, "bodies": len(positions)},
        )
    outer = [i for i in range(len(positions)) if i != reference_index]
    if len(outer) < TRIANGLE_SIZE:
        raise ComputationFailureError(
            "At least 3 planets are required to determine the weather condition",
            details={"planets": len(outer)},
        )
    return outer[0], outer[1], outer[2]


def classify(
    positions: Sequence[Point],
    reference_index: int = 0,
    epsilon: float = DEFAULT_AREA_EPSILON,
) -> Classification:
    """Classe la configuration `positions` autour du corps `positions[reference_index]`."""
    i, j, k = measuring_triangle(positions, reference_index)
    a, b, c = positions[i], positions[j], positions[k]
    area = triangle_area(a, b, c)
    degenerate = are_aligned(a, b, c, epsilon)

    if not degenerate and point_in_triangle(positions[reference_index], a, b, c):
        category = WeatherConditionCategory.DROUGHT
    elif degenerate:
        category = WeatherConditionCategory.OPTIMAL
    else:
        category = WeatherConditionCategory.RAINY
    return Classification(category=category, triangle_area=area, vertices=(i, j, k))
