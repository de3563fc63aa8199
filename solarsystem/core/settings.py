"""Définition et chargement des paramètres de configuration applicative.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
- Exposer les constantes de simulation (jours par an, seuil d'alignement) comme configuration
  injectable plutôt que comme constantes globales
"""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Détermination du fichier .env à utiliser avec priorité:
# 1) ENV_FILE (chemin explicite)
# 2) .env.{APP_ENV} si présent
# 3) .env (défaut)
_cwd = Path.cwd()
_env_file_from_env = os.getenv("ENV_FILE")
if _env_file_from_env:
    _ENV_FILE_PATH = _env_file_from_env
else:
    _app_env = os.getenv("APP_ENV", "dev")
    _candidate_specific = _cwd / f".env.{_app_env}"
    _candidate_default = _cwd / ".env"
    if _candidate_specific.exists():
        _ENV_FILE_PATH = _candidate_specific
    else:
        _ENV_FILE_PATH = _candidate_default


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_PATH,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
    )
    APP_NAME: str = "solarsystem-weather"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Stockage: SQL si DATABASE_URL, sinon Redis si REDIS_URL, sinon mémoire
    DATABASE_URL: str | None = None
    REDIS_URL: str | None = None
    REQUIRE_REDIS: bool = False

    # Simulation
    DAYS_PER_YEAR: int = Field(default=365, gt=0)
    MAX_YEARS: int = Field(default=10, gt=0, le=10)
    OPTIMAL_AREA_EPSILON: float = Field(default=1e-6, ge=0.0)
    # 1 = séquentiel; >1 = récupération parallèle, réduction séquentielle
    AGGREGATION_WORKERS: int = Field(default=1, ge=1)
    SEED_DEFAULT_SYSTEM: bool = True


def get_settings() -> Settings:
    """Construit et retourne la configuration de l'application."""
    return Settings()
