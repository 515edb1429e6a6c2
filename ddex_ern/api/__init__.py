"""ERN generator API layer — routes, schemas and middleware."""

from ddex_ern.api.middleware import (
    ApiKeyAuthMiddleware,
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from ddex_ern.api.routes import router
from ddex_ern.api.schemas import ErrorResponse, HealthResponse, ValidationErrorResponse

__all__ = [
    "ApiKeyAuthMiddleware",
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "configure_cors",
    "router",
    "ErrorResponse",
    "HealthResponse",
    "ValidationErrorResponse",
]
