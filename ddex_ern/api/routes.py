"""FastAPI routes for the ERN generator.

# ─── API ROUTE MAP ─────────────────────────────────────────────────────
#
# Endpoint                 Method  Description
# ─────────────────────────────────────────────────────────────────────
# /api/ddex/generate       POST    ReleaseBundle JSON → ERN 3.8.2 XML
# /api/ddex/health         GET     Service name + version (no API key)
#
# The DocumentAssembler is built once in main.py and stored on
# app.state; routes resolve it through Depends().
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request, Response

from ddex_ern.api.middleware import error_response
from ddex_ern.api.schemas import HealthResponse, ValidationErrorResponse
from ddex_ern.models.release import ReleaseBundle
from ddex_ern.services.document_assembler import DocumentAssembler
from ddex_ern.services.release_validator import validate_release_bundle
from ddex_ern.utils.errors import ReleaseValidationError
from ddex_ern.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

router = APIRouter(prefix="/api/ddex", tags=["ddex"])

XML_MEDIA_TYPE = "application/xml"


def _get_assembler(request: Request) -> DocumentAssembler:
    """Return the document assembler from application state."""
    return request.app.state.assembler


AssemblerDep = Annotated[DocumentAssembler, Depends(_get_assembler)]


@router.post(
    "/generate",
    summary="Generate a DDEX ERN 3.8.2 NewReleaseMessage",
    response_class=Response,
    responses={
        200: {"content": {XML_MEDIA_TYPE: {}}, "description": "ERN XML document"},
        400: {"model": ValidationErrorResponse, "description": "Missing required field"},
        422: {"model": ValidationErrorResponse, "description": "Malformed field value"},
    },
)
def generate_ern(bundle: ReleaseBundle, assembler: AssemblerDep) -> Response:
    """Validate *bundle* and return its ERN document as XML."""
    try:
        validate_release_bundle(bundle)
    except ReleaseValidationError as exc:
        _logger.info(
            "release_rejected",
            release_id=bundle.release.id,
            missing_field=exc.field_name,
            track_count=len(exc.tracks),
        )
        return error_response(exc)

    xml = assembler.generate(bundle)
    return Response(content=xml, media_type=XML_MEDIA_TYPE)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="ERN generator health check",
)
async def ddex_health() -> HealthResponse:
    """Return service name and version."""
    return HealthResponse()
