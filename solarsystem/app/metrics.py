"""
Métriques Prometheus pour l'application.

Ce module définit les métriques Prometheus du service météo (cache des conditions, résumés de
période) ainsi que `/metrics` et un middleware de mesure des requêtes HTTP par route.
"""

import time

from fastapi import APIRouter, Request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

metrics_router = APIRouter()

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "route", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "Latency of HTTP requests", ["route"]
)

# Cache des conditions météo
WEATHER_CONDITION_LOOKUPS = Counter(
    "weather_condition_lookups_total",
    "Weather condition cache lookups",
    ["result"],
)
WEATHER_CONDITION_CONFLICTS = Counter(
    "weather_condition_conflicts_total",
    "Concurrent weather condition creations resolved by re-reading the winner",
)
PERIOD_SUMMARIES = Counter(
    "period_summaries_total",
    "Period summaries computed",
)


@metrics_router.get("/metrics")
def metrics():
    """
    Expose les métriques Prometheus au format texte.

    Returns:
        Response: Réponse HTTP contenant les métriques au format Prometheus.
    """
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware Prometheus pour mesurer les métriques HTTP.

    Collecte les métriques de comptage des requêtes et de latence par route pour l'exposition
    Prometheus.
    """

    async def dispatch(self, request: Request, call_next):
        """Traite une requête HTTP et collecte les métriques."""
        start = time.perf_counter()
        response: Response = await call_next(request)
        route = request.scope.get("route")
        route_path = getattr(route, "path", None) or request.scope.get("path", "unknown")
        REQUEST_COUNT.labels(request.method, route_path, str(response.status_code)).inc()
        REQUEST_LATENCY.labels(route_path).observe(time.perf_counter() - start)
        return response
