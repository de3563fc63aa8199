"""Configuration de test pour pytest avec gestion des chemins.

Ajoute la racine du projet au sys.path (imports `solarsystem...` et `tests.fakes`), neutralise les
variables de stockage pour que le conteneur global utilise la mémoire, et fournit les fixtures
partagées: dépôts en mémoire, moteur météo.
"""

import os
import sys

import pytest

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

for _var in ("DATABASE_URL", "REDIS_URL", "REQUIRE_REDIS"):
    os.environ.pop(_var, None)

from solarsystem.domain.services import WeatherConditionEngine  # noqa: E402
from solarsystem.infra.repositories import (  # noqa: E402
    InMemorySolarSystemRepo,
    InMemoryWeatherConditionRepo,
)
from tests.fakes import scenario_system  # noqa: E402


@pytest.fixture
def solar_repo() -> InMemorySolarSystemRepo:
    """Dépôt de systèmes contenant le système du scénario (id 1)."""
    repo = InMemorySolarSystemRepo()
    repo.save(scenario_system())
    return repo


@pytest.fixture
def condition_repo() -> InMemoryWeatherConditionRepo:
    """Cache de conditions vide."""
    return InMemoryWeatherConditionRepo()


@pytest.fixture
def engine(solar_repo, condition_repo) -> WeatherConditionEngine:
    """Moteur branché sur les dépôts en mémoire."""
    return WeatherConditionEngine(solar_repo, condition_repo)
