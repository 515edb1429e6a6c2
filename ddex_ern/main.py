"""ERN generator FastAPI application entry point.

# ─── HOW THIS FILE WORKS ───────────────────────────────────────────────
#
# This is the composition root: the single place where configuration is
# resolved and the DocumentAssembler is built and attached to app.state.
#
#   1. **Settings**: pydantic-settings reads .env and the environment.
#   2. **load_config**: YAML defaults deep-merged with those settings.
#   3. **app.state**: the assembler and settings, read by route
#      handlers via FastAPI Depends().
#
# Run with ``python -m ddex_ern.main`` or the ``ddex-ern-server`` script.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog
import uvicorn
from fastapi import FastAPI

from ddex_ern.api.middleware import (
    ApiKeyAuthMiddleware,
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from ddex_ern.api.routes import router as ddex_router
from ddex_ern.api.schemas import SERVICE_NAME, SERVICE_VERSION, HealthResponse
from ddex_ern.config.loader import document_options, load_config
from ddex_ern.config.settings import Settings
from ddex_ern.services.document_assembler import DocumentAssembler
from ddex_ern.utils.logging import configure_logging, get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(
    settings: Settings | None = None,
    config_path: str = "config/config.yaml",
) -> FastAPI:
    """Build and configure the FastAPI application.

    Parameters
    ----------
    settings:
        Optional pre-built settings.  If None, settings are loaded from
        environment variables / .env file.
    config_path:
        YAML defaults file; a missing file is treated as empty.
    """
    if settings is None:
        settings = Settings()
    config = load_config(config_path, settings=settings)
    api_keys: list[str] = config["auth"]["api_keys"]

    application = FastAPI(
        title="DDEX ERN Generator",
        version=SERVICE_VERSION,
        description=(
            "Turn a normalized release snapshot into a DDEX ERN 3.8.2 "
            "NewReleaseMessage for delivery to digital service providers."
        ),
    )

    application.state.settings = settings
    application.state.config = config
    application.state.assembler = DocumentAssembler(options=document_options(config))

    # -- Middleware (order matters: last added = first executed) --
    application.add_middleware(ApiKeyAuthMiddleware, api_keys=api_keys)
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)
    configure_cors(application, allowed_origins=config["app"]["cors_origins"])

    # -- Routes --
    application.include_router(ddex_router)

    @application.get("/health", response_model=HealthResponse, tags=["system"])
    async def health() -> HealthResponse:
        return HealthResponse(timestamp=datetime.now(timezone.utc).isoformat())

    _logger.info(
        "app_created",
        service=SERVICE_NAME,
        env=config["app"]["env"],
        auth_enabled=bool(api_keys),
        deal_profile=config["ddex"]["deal_profile"],
    )
    return application


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the service on the configured host and port."""
    settings = Settings()
    config = load_config(settings=settings)
    configure_logging(
        log_level=config["logging"]["level"],
        json_output=(config["app"]["env"] == "production"),
    )
    app = create_app(settings)
    uvicorn.run(
        app,
        host=config["app"]["host"],
        port=int(config["app"]["port"]),
        log_level=str(config["logging"]["level"]).lower(),
    )


if __name__ == "__main__":
    main()
