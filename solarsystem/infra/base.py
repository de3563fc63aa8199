"""Interfaces de base des dépôts consommés par le moteur météo.

Ce module définit les contrats que doivent respecter toutes les implémentations de stockage
(mémoire, Redis, SQL).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from solarsystem.domain.entities import SolarSystem, WeatherCondition


class SolarSystemStore(ABC):
    """Interface abstraite du dépôt de systèmes solaires."""

    @abstractmethod
    def get(self, solar_system_id: int) -> SolarSystem:
        """Retourne le système solaire; lève `NotFoundError` s'il est absent."""
        raise NotImplementedError

    @abstractmethod
    def save(self, system: SolarSystem) -> SolarSystem:
        """Enregistre (ou remplace) un système solaire et le renvoie."""
        raise NotImplementedError

    @abstractmethod
    def list_ids(self) -> list[int]:
        """Identifiants des systèmes connus, triés."""
        raise NotImplementedError


class WeatherConditionStore(ABC):
    """Interface abstraite du cache de conditions météo.

    La clé naturelle (solar_system_id, day) est unique: `create` lève
    `UniquenessConflictError` si une condition existe déjà pour cette clé, et
    `PersistenceFailureError` pour toute autre erreur du stockage.
    """

    @abstractmethod
    def find_by_key(self, solar_system_id: int, day: int) -> WeatherCondition | None:
        """Retourne la condition stockée pour la clé, ou None."""
        raise NotImplementedError

    @abstractmethod
    def create(self, condition: WeatherCondition) -> WeatherCondition:
        """Crée la condition et renvoie la valeur persistée (identifiant renseigné)."""
        raise NotImplementedError

    @abstractmethod
    def count(self, solar_system_id: int | None = None) -> int:
        """Nombre de conditions stockées (filtrable par système)."""
        raise NotImplementedError
