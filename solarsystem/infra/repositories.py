"""
Repositories pour la gestion des données.

Ce module fournit les implémentations des dépôts de systèmes solaires et de conditions météo,
avec des versions en mémoire et Redis. L'unicité de la clé (solar_system_id, day) est garantie par
le dépôt lui-même (verrou en mémoire, `SET NX` côté Redis).
"""

import json
import threading

import redis

from solarsystem.domain.entities import SolarSystem, WeatherCondition
from solarsystem.domain.errors import (
    NotFoundError,
    PersistenceFailureError,
    UniquenessConflictError,
)
from solarsystem.infra.base import SolarSystemStore, WeatherConditionStore


def _not_found(solar_system_id: int) -> NotFoundError:
    return NotFoundError(
        f"Solar system {solar_system_id} not found",
        details={"solar_system_id": solar_system_id},
    )


def _conflict(condition: WeatherCondition) -> UniquenessConflictError:
    return UniquenessConflictError(
        "Weather condition already exists",
        details={"solar_system_id": condition.solar_system_id, "day": condition.day},
    )


class InMemorySolarSystemRepo(SolarSystemStore):
    """
    Dépôt de systèmes solaires en mémoire (utilisé pour dev/tests).

    Stocke les systèmes dans un dict local, non persistant.
    """

    def __init__(self):
        """Initialise une base mémoire vide."""
        self._db: dict[int, SolarSystem] = {}

    def get(self, solar_system_id: int) -> SolarSystem:
        """Retourne un système par id; lève `NotFoundError` s'il est absent."""
        system = self._db.get(solar_system_id)
        if system is None:
            raise _not_found(solar_system_id)
        return system

    def save(self, system: SolarSystem) -> SolarSystem:
        """Enregistre/écrase un système et le renvoie."""
        self._db[system.id] = system
        return system

    def list_ids(self) -> list[int]:
        return sorted(self._db)


class InMemoryWeatherConditionRepo(WeatherConditionStore):
    """
    Cache de conditions météo en mémoire.

    La création est une section critique protégée par un verrou: vérification de la clé puis
    insertion sont atomiques.
    """

    def __init__(self):
        """Initialise une base mémoire vide."""
        self._db: dict[tuple[int, int], WeatherCondition] = {}
        self._lock = threading.Lock()
        self._next_id = 1

    def find_by_key(self, solar_system_id: int, day: int) -> WeatherCondition | None:
        """Retourne la condition pour (système, jour), ou None."""
        return self._db.get((solar_system_id, day))

    def create(self, condition: WeatherCondition) -> WeatherCondition:
        """Crée la condition; lève `UniquenessConflictError` si la clé existe déjà."""
        key = (condition.solar_system_id, condition.day)
        with self._lock:
            if key in self._db:
                raise _conflict(condition)
            saved = condition.model_copy(update={"id": self._next_id})
            self._next_id += 1
            self._db[key] = saved
        return saved

    def count(self, solar_system_id: int | None = None) -> int:
        if solar_system_id is None:
            return len(self._db)
        return sum(1 for sid, _ in self._db if sid == solar_system_id)


class RedisSolarSystemRepo(SolarSystemStore):
    """Dépôt de systèmes solaires adossé à Redis (clé: `solar_system:{id}`)."""

    def __init__(self, url: str | None = None, client=None):
        """Crée un client Redis à partir de l'URL fournie (ou utilise `client`)."""
        self.client = client or redis.Redis.from_url(url, decode_responses=True)
        self.idx_key = "solar_system:ids"

    def get(self, solar_system_id: int) -> SolarSystem:
        """Charge et désérialise le système `solar_system:{id}`."""
        try:
            raw = self.client.get(f"solar_system:{solar_system_id}")
        except redis.RedisError as err:
            raise PersistenceFailureError("Error reading solar system") from err
        if not raw:
            raise _not_found(solar_system_id)
        return SolarSystem.from_record(json.loads(raw))

    def save(self, system: SolarSystem) -> SolarSystem:
        """Sérialise en JSON, stocke le système et met à jour l'index des ids."""
        try:
            pipe = self.client.pipeline()
            pipe.set(f"solar_system:{system.id}", system.model_dump_json())
            pipe.sadd(self.idx_key, system.id)
            pipe.execute()
        except redis.RedisError as err:
            raise PersistenceFailureError("Error saving solar system") from err
        return system

    def list_ids(self) -> list[int]:
        try:
            members = self.client.smembers(self.idx_key) or set()
        except redis.RedisError as err:
            raise PersistenceFailureError("Error listing solar systems") from err
        return sorted(int(m) for m in members)


class RedisWeatherConditionRepo(WeatherConditionStore):
    """Cache de conditions météo via Redis (clé: `weather_condition:{system}:{day}`).

    L'unicité repose sur `SET NX`: seul le premier écrivain d'une clé gagne.
    """

    def __init__(self, url: str | None = None, client=None):
        """Crée un client Redis à partir de l'URL fournie (ou utilise `client`)."""
        self.client = client or redis.Redis.from_url(url, decode_responses=True)
        self.seq_key = "weather_condition:seq"

    @staticmethod
    def _key(solar_system_id: int, day: int) -> str:
        return f"weather_condition:{solar_system_id}:{day}"

    def find_by_key(self, solar_system_id: int, day: int) -> WeatherCondition | None:
        try:
            raw = self.client.get(self._key(solar_system_id, day))
        except redis.RedisError as err:
            raise PersistenceFailureError("Error reading weather condition") from err
        return WeatherCondition.model_validate_json(raw) if raw else None

    def create(self, condition: WeatherCondition) -> WeatherCondition:
        """Crée la condition si la clé est libre; lève `UniquenessConflictError` sinon."""
        key = self._key(condition.solar_system_id, condition.day)
        try:
            new_id = int(self.client.incr(self.seq_key))
            saved = condition.model_copy(update={"id": new_id})
            created = self.client.set(key, saved.model_dump_json(), nx=True)
        except redis.RedisError as err:
            raise PersistenceFailureError("There was an error creating WeatherCondition") from err
        if not created:
            raise _conflict(condition)
        return saved

    def count(self, solar_system_id: int | None = None) -> int:
        pattern = (
            "weather_condition:*:*"
            if solar_system_id is None
            else f"weather_condition:{solar_system_id}:*"
        )
        try:
            return sum(1 for _ in self.client.scan_iter(match=pattern))
        except redis.RedisError as err:
            raise PersistenceFailureError("Error counting weather conditions") from err
