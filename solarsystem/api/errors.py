"""Gestion standardisée des erreurs API avec enveloppes d'erreur.

Ce module traduit les erreurs métier en réponses JSON `{code, message, trace_id, details?}` avec
des statuts HTTP cohérents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from solarsystem.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_FOUND,
    HTTP_UNPROCESSABLE_ENTITY,
)
from solarsystem.domain.errors import (
    BusinessError,
    ComputationFailureError,
    InvalidArgumentError,
    NotFoundError,
    PersistenceFailureError,
)

log = structlog.get_logger(__name__)

STATUS_BY_ERROR: dict[type[BusinessError], int] = {
    InvalidArgumentError: HTTP_BAD_REQUEST,
    NotFoundError: HTTP_NOT_FOUND,
    ComputationFailureError: HTTP_UNPROCESSABLE_ENTITY,
    PersistenceFailureError: HTTP_INTERNAL_SERVER_ERROR,
}


@dataclass
class ErrorEnvelope:
    """Standard error envelope for API responses."""

    code: str
    message: str
    trace_id: str | None = None
    details: dict[str, Any] | None = None


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    trace_id: str | None = None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    envelope = ErrorEnvelope(code=code, message=message, trace_id=trace_id, details=details)
    return JSONResponse(
        status_code=status_code,
        content={
            "code": envelope.code,
            "message": envelope.message,
            "trace_id": envelope.trace_id,
            **({"details": envelope.details} if envelope.details else {}),
        },
    )


def extract_trace_id(request: Request) -> str | None:
    """Extract trace ID from request headers or request state."""
    trace_id = request.headers.get("X-Request-ID")
    if trace_id:
        return trace_id
    return getattr(request.state, "request_id", None)


def status_for(exc: BusinessError) -> int:
    for error_type, status in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status
    return HTTP_INTERNAL_SERVER_ERROR


def handle_business_error(request: Request, exc: BusinessError) -> JSONResponse:
    """Handle domain errors with standard envelope."""
    status_code = status_for(exc)
    trace_id = extract_trace_id(request)
    log_method = log.error if status_code >= HTTP_INTERNAL_SERVER_ERROR else log.warning
    log_method(
        "business_error",
        code=exc.code,
        error_message=exc.message,
        status_code=status_code,
        trace_id=trace_id,
    )
    return create_error_response(
        status_code=status_code,
        code=exc.code,
        message=exc.message,
        trace_id=trace_id,
        details=exc.details,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Branche les gestionnaires d'erreurs métier sur l'application."""
    app.add_exception_handler(BusinessError, handle_business_error)
