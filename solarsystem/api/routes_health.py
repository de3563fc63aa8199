"""
Endpoint de santé pour vérifier la disponibilité de l'API et du backend.

Expose `/health` pour signaler l'état général de l'application et du stockage.
"""

from fastapi import APIRouter

from solarsystem.core.container import container

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Vérifie la disponibilité de l'API et le backend de stockage."""
    return {
        "status": "ok",
        "storage": getattr(container, "storage_backend", "unknown"),
        "days_per_year": container.settings.DAYS_PER_YEAR,
    }
