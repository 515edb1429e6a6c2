"""API middleware: CORS, request logging, error handling and API-key auth.

# ─── MIDDLEWARE EXECUTION ORDER ────────────────────────────────────────
#
# Starlette middleware is a stack (LIFO: last added, first executed):
#
#   In main.py:
#     app.add_middleware(ApiKeyAuthMiddleware, ...)  # added 1st → innermost
#     app.add_middleware(ErrorHandlingMiddleware)
#     app.add_middleware(RequestLoggingMiddleware)
#     configure_cors(app)                            # added last → outermost
#
#   Request flow:
#     Client → CORS → RequestLogging → ErrorHandling → ApiKeyAuth → route
#
# So RequestLoggingMiddleware sees the *final* response status code,
# including 401s from the auth layer and JSON errors from ErrorHandling.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import time

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from ddex_ern.api.schemas import ErrorResponse, ValidationErrorResponse
from ddex_ern.utils.errors import (
    ErnGeneratorError,
    MalformedInputError,
    ReleaseValidationError,
)
from ddex_ern.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

API_KEY_HEADER = "x-api-key"

# Path prefixes guarded by the API-key check.
_PROTECTED_PREFIX = "/api/ddex"

# Paths exempt from auth checks.
_EXEMPT_PATHS = ("/health", "/api/ddex/health")


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------


def configure_cors(app: FastAPI, *, allowed_origins: list[str] | None = None) -> None:
    """Let browser-based release tools call the generator.

    *allowed_origins* comes from ``app.cors_origins``; an empty list
    allows any origin.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins or ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )


# ---------------------------------------------------------------------------
# Request Logging
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One ``http_request`` event per call, levelled by the final status."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response: Response | None = None

        try:
            response = await call_next(request)
            return response
        finally:
            status_code = response.status_code if response else 500
            if status_code >= 500:
                log = _logger.error
            elif status_code >= 400:
                log = _logger.warning
            else:
                log = _logger.info
            log(
                "http_request",
                method=request.method,
                path=str(request.url.path),
                status=status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                api_key_present=API_KEY_HEADER in request.headers,
                content_length=request.headers.get("content-length"),
                content_type=response.headers.get("content-type") if response else None,
            )


# ---------------------------------------------------------------------------
# Error Handling
# ---------------------------------------------------------------------------


def error_response(exc: ErnGeneratorError) -> JSONResponse:
    """Convert a project error into its JSON response.

    ReleaseValidationError → 400 with the missing field and tracks,
    MalformedInputError → 422, anything else → 500.
    """
    if isinstance(exc, ReleaseValidationError):
        body = ValidationErrorResponse(
            error="Bad Request",
            message=exc.message,
            missing_field=exc.field_name,
            tracks=exc.tracks,
        )
        return JSONResponse(status_code=400, content=body.model_dump())
    if isinstance(exc, MalformedInputError):
        body = ValidationErrorResponse(
            error="Unprocessable Entity",
            message=exc.message,
            missing_field=exc.field_name,
        )
        return JSONResponse(status_code=422, content=body.model_dump())
    body = ErrorResponse(
        error="Internal Server Error",
        message="An error occurred while generating DDEX XML",
    )
    return JSONResponse(status_code=500, content=body.model_dump())


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Catch ``ErnGeneratorError`` subclasses and return structured JSON errors.

    Internal details stay in the server log; the client only sees the
    error category and, for input problems, the message and field.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except ErnGeneratorError as exc:
            _logger.error(
                "application_error",
                error_type=type(exc).__name__,
                message=exc.message,
                field=exc.field_name,
                path=str(request.url.path),
            )
            return error_response(exc)


# ---------------------------------------------------------------------------
# API-key authentication
# ---------------------------------------------------------------------------


class ApiKeyAuthMiddleware(BaseHTTPMiddleware):
    """Require a configured key in the ``x-api-key`` header on ``/api/ddex``.

    Constructor injection: the accepted keys are passed in from main.py so
    the middleware doesn't read config globals directly.  With no keys
    configured, auth is disabled so local development needs no key.
    """

    def __init__(self, app: object, api_keys: list[str] | None = None) -> None:
        super().__init__(app)
        self._api_keys = frozenset(api_keys or ())

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._api_keys:
            return await call_next(request)

        path = request.url.path
        if not self._is_protected(path):
            return await call_next(request)

        api_key = request.headers.get(API_KEY_HEADER, "")
        if not api_key:
            return self._unauthorized(
                "API key is required. Please provide a valid API key in the "
                f"{API_KEY_HEADER} header."
            )
        if api_key not in self._api_keys:
            _logger.warning("invalid_api_key", path=path)
            return self._unauthorized("Invalid API key provided.")

        request.state.api_key = api_key
        return await call_next(request)

    @staticmethod
    def _is_protected(path: str) -> bool:
        if path.rstrip("/") in _EXEMPT_PATHS:
            return False
        return path == _PROTECTED_PREFIX or path.startswith(_PROTECTED_PREFIX + "/")

    @staticmethod
    def _unauthorized(message: str) -> JSONResponse:
        body = ErrorResponse(error="Unauthorized", message=message)
        return JSONResponse(status_code=401, content=body.model_dump())
