"""
Système solaire de référence.

Trois planètes en orbite circulaire autour d'une étoile à l'origine, toutes en phase 0 au jour 0:
- Ferengi: 500 km, 1°/jour, sens horaire
- Betasoide: 2000 km, 3°/jour, sens horaire
- Vulcano: 1000 km, 5°/jour, sens anti-horaire
"""

from __future__ import annotations

import structlog

from solarsystem.domain.entities import Planet, SolarSystem
from solarsystem.infra.base import SolarSystemStore

DEFAULT_SOLAR_SYSTEM_ID = 1

log = structlog.get_logger(__name__)


def default_solar_system() -> SolarSystem:
    """Construit le système de référence (id 1)."""
    return SolarSystem(
        id=DEFAULT_SOLAR_SYSTEM_ID,
        name="Galaxy far far away",
        planets=(
            Planet.from_degrees(1, "Ferengi", 500, -1),
            Planet.from_degrees(2, "Betasoide", 2000, -3),
            Planet.from_degrees(3, "Vulcano", 1000, 5),
        ),
    )


def seed_default_system(store: SolarSystemStore) -> bool:
    """Installe le système de référence si le dépôt est vide. Retourne True si installé."""
    if store.list_ids():
        return False
    store.save(default_solar_system())
    log.info("default_solar_system_seeded", solar_system_id=DEFAULT_SOLAR_SYSTEM_ID)
    return True
