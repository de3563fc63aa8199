"""
Erreurs métier du domaine météo planétaire.

Taxonomie:
- `InvalidArgumentError`: paramètre d'entrée invalide (jour, identifiant, années).
- `NotFoundError`: système solaire inexistant.
- `UniquenessConflictError`: création concurrente d'une condition déjà présente (interne).
- `ComputationFailureError`: configuration impossible à classifier (moins de 3 planètes, rayon nul).
- `PersistenceFailureError`: échec du stockage, cause d'origine chaînée.
"""

from __future__ import annotations


class BusinessError(Exception):
    """Classe de base des erreurs métier."""

    code = "BUSINESS_ERROR"

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialise l'erreur avec un message et des détails optionnels."""
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidArgumentError(BusinessError, ValueError):
    """Paramètre d'entrée invalide, levé avant tout calcul ou accès au stockage."""

    code = "BAD_REQUEST"


class NotFoundError(BusinessError, LookupError):
    """Ressource référencée absente."""

    code = "NOT_FOUND"


class UniquenessConflictError(BusinessError):
    """Violation de la clé naturelle (solar_system_id, day) lors d'une création."""

    code = "CONFLICT"


class ComputationFailureError(BusinessError):
    """Règle métier violée pendant le calcul."""

    code = "COMPUTATION_FAILURE"


class PersistenceFailureError(BusinessError):
    """Erreur générique du stockage."""

    code = "PERSISTENCE_FAILURE"
