"""Validation des paramètres d'entrée par prédicats composables.

Un prédicat décrit la condition d'ERREUR: `ParamValidator.test(value, predicate)` lève
`InvalidArgumentError` lorsque le prédicat est vrai pour la valeur.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from solarsystem.domain.errors import InvalidArgumentError

Predicate = Callable[[Any], bool]


def any_of(*predicates: Predicate) -> Predicate:
    """Compose des prédicats: vrai dès que l'un d'eux l'est (évaluation paresseuse, dans l'ordre)."""

    def _composed(value: Any) -> bool:
        return any(p(value) for p in predicates)

    return _composed


def is_missing(value: Any) -> bool:
    # bool est un int en Python, on le refuse explicitement
    return value is None or isinstance(value, bool) or not isinstance(value, int)


def is_not_positive(value: Any) -> bool:
    return value <= 0


class ParamValidator:
    """Point d'entrée unique de validation des paramètres."""

    @staticmethod
    def test(value: Any, predicate: Predicate, name: str = "value") -> None:
        """Lève `InvalidArgumentError` si `predicate(value)` est vrai."""
        if predicate(value):
            raise InvalidArgumentError(
                f"Invalid parameter '{name}': {value!r}", details={"param": name}
            )


def require_day(day: Any) -> None:
    """Un jour est un entier strictement positif (1-indexé)."""
    ParamValidator.test(day, any_of(is_missing, is_not_positive), name="day")


def require_solar_system_id(solar_system_id: Any) -> None:
    """Un identifiant de système solaire est un entier strictement positif."""
    ParamValidator.test(
        solar_system_id, any_of(is_missing, is_not_positive), name="solar_system_id"
    )


def require_years(years: Any, max_years: int) -> None:
    """Le nombre d'années est borné à l'intervalle (0, max_years]."""
    ParamValidator.test(
        years,
        any_of(is_missing, is_not_positive, lambda y: y > max_years),
        name="years",
    )
