"""
Application principale FastAPI.

Ce module assemble les composants de l'application: logging, middlewares, gestion des erreurs
métier, routes et métriques.

Responsabilités du module:
- Initialiser le logging structuré
- Construire l'application FastAPI avec son titre/debug
- Ajouter les middlewares (request id, timing, métriques)
- Monter les routers (santé, systèmes solaires, métriques)
"""

from __future__ import annotations

from fastapi import FastAPI

from solarsystem.api.errors import register_error_handlers
from solarsystem.api.routes_health import router as health_router
from solarsystem.api.routes_weather import router as weather_router
from solarsystem.app.metrics import PrometheusMiddleware, metrics_router
from solarsystem.core.container import container
from solarsystem.core.logging import setup_logging
from solarsystem.middlewares.request_id import RequestIDMiddleware
from solarsystem.middlewares.timing import TimingMiddleware


def create_app() -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Configure le logging structuré (structlog)
    - Lit les paramètres d'exécution
    - Ajoute les middlewares utiles au debug/traçabilité
    - Publie les routes de santé, météo et métriques
    """
    settings = container.settings
    setup_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(weather_router)
    app.include_router(metrics_router)
    return app


app = create_app()
