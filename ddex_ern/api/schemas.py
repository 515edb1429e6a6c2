"""Pydantic response schemas for the ERN generator API.

The request body of ``POST /api/ddex/generate`` is the
:class:`~ddex_ern.models.release.ReleaseBundle` model itself; the schemas
here only describe JSON responses.  A successful generation returns
``application/xml`` rather than JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ddex_ern import __version__

SERVICE_NAME = "ddex-ern-generator-service"
SERVICE_VERSION = __version__


class HealthResponse(BaseModel):
    """Liveness response for ``/health`` and ``/api/ddex/health``."""

    status: str = "ok"
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION
    timestamp: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
    message: str


class ValidationErrorResponse(ErrorResponse):
    """A release payload that is missing a business-required field.

    ``tracks`` names the offending tracks for per-track failures.
    """

    missing_field: str | None = None
    tracks: list[dict[str, Any]] = Field(default_factory=list)
