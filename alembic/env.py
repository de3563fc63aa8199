"""
Environnement Alembic pour les migrations du schéma météo planétaire.

L'URL de base provient de `DATABASE_URL` (settings applicatifs), avec repli sur un fichier SQLite
local. Les modes offline et online sont supportés.
"""

from __future__ import annotations

from logging.config import fileConfig

from sqlalchemy import create_engine, pool

from alembic import context  # type: ignore[attr-defined]
from solarsystem.core.settings import get_settings
from solarsystem.infra.repo.models import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    return get_settings().DATABASE_URL or "sqlite:///./solarsystem.db"


def run_migrations_offline() -> None:
    """Génère le SQL des migrations sans connexion (bindings littéraux)."""
    context.configure(url=_database_url(), target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Applique les migrations sur une connexion SQLAlchemy active."""
    connectable = create_engine(_database_url(), poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
