"""Centralized error transformation for API routes.

Maps impact errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from impact.domain.shared.error import (
    ConfigurationError,
    ContentMismatchError,
    DomainError,
    ImpactError,
    InfrastructureError,
    NotFoundError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ContentMismatchError: 409,
}


def map_impact_error(error: ImpactError) -> HTTPException:
    """Map an impact error to an HTTPException.

    Args:
        error: The impact error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, ConfigurationError):
        # Server misconfiguration, not a transient outage
        return HTTPException(status_code=500, detail=detail)

    if isinstance(error, InfrastructureError):
        # Remote collaborator failures → 503 Service Unavailable
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown ImpactError subclasses
    return HTTPException(status_code=500, detail=detail)
