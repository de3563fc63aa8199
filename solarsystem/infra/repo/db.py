"""DB utilities for SQLAlchemy sessions/engine.

Uses `DATABASE_URL` env var or falls back to `sqlite+pysqlite:///:memory:` for tests.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager, nullcontext

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from solarsystem.infra.repo.models import Base

# sqlite3 ne supporte pas plusieurs threads sur la même connexion
_SHARED_CONNECTION_LOCK = threading.RLock()


def get_engine(url: str | None = None) -> Engine:
    """Crée un moteur SQLAlchemy à partir de l'URL de base de données."""
    db_url = url or os.getenv("DATABASE_URL") or "sqlite+pysqlite:///:memory:"
    kwargs: dict = {}
    if db_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in db_url:
            # une seule connexion partagée, sinon chaque connexion voit une base vide
            kwargs["poolclass"] = StaticPool
    return create_engine(db_url, future=True, echo=False, **kwargs)


def create_schema(engine: Engine) -> None:
    """Crée les tables manquantes (dev/tests; la production passe par Alembic)."""
    Base.metadata.create_all(engine)


def get_session_factory(engine: Engine) -> sessionmaker:
    """Crée une factory de sessions SQLAlchemy."""
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    """Contexte de session SQLAlchemy avec gestion automatique des transactions.

    Commit en sortie normale, rollback puis propagation de l'exception sinon. Avec une
    connexion unique partagée (`StaticPool`), les sessions sont sérialisées entre threads.
    """
    guard = _SHARED_CONNECTION_LOCK if isinstance(engine.pool, StaticPool) else nullcontext()
    SessionLocal = get_session_factory(engine)
    with guard:
        session = SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
