"""
REST API Layer for the Compass Capacity Engine.

Provides:
- FastAPI application with CORS middleware
- Stateless endpoints over the capacity core (capacity, time budget,
  contextual message, sleep, daily timeline, energy schedule)
- Health check at the root and under /api/v1
- API versioning under /api/v1 prefix
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.api.schemas import error_response
from src.lib.errors import INTERNAL_ERROR, VALIDATION_ERROR, status_for
from src.lib.exceptions import CompassException, ConfigurationError

logger = logging.getLogger(__name__)

_ALLOWED_HEADERS: list[str] = [
    "Content-Type",
    "Accept",
    "Accept-Language",
    "X-Request-ID",
]


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Includes:
    - CORS middleware with configurable origins via COMPASS_CORS_ORIGINS env var
    - Exception handlers returning the response envelope
    - API v1 router with all endpoints
    - Root-level health check for Docker/load balancer probes
    - Production: /docs and /redoc disabled

    Returns:
        Configured FastAPI application instance.

    Raises:
        ConfigurationError: If a wildcard CORS origin is configured in production
    """
    environment = os.getenv("COMPASS_ENVIRONMENT", "development")
    is_production = environment == "production"

    app = FastAPI(
        title="Compass Capacity Engine",
        description="Energy-based capacity and time budgeting for ADHD day planning",
        version="0.1.0",
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    # -------------------------------------------------------------------------
    # Exception handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        logger.info(
            "Rejected request on %s %s: %d validation error(s)",
            request.method, request.url.path, len(exc.errors()),
        )
        fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
        return JSONResponse(
            status_code=status_for(VALIDATION_ERROR),
            content=error_response(VALIDATION_ERROR, details={"fields": fields}),
        )

    @app.exception_handler(CompassException)
    async def compass_exception_handler(
        request: Request, exc: CompassException,
    ) -> JSONResponse:
        logger.exception(
            "Domain error on %s %s", request.method, request.url.path,
        )
        return JSONResponse(
            status_code=status_for(INTERNAL_ERROR), content=error_response(INTERNAL_ERROR),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s", request.method, request.url.path,
        )
        return JSONResponse(
            status_code=status_for(INTERNAL_ERROR), content=error_response(INTERNAL_ERROR),
        )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    # Format: comma-separated list of origins, e.g. "http://localhost:3000,https://app.example.com"
    # Default: empty (no cross-origin requests allowed).
    cors_origins_env = os.getenv("COMPASS_CORS_ORIGINS", "")
    cors_origins: list[str] = [
        origin.strip()
        for origin in cors_origins_env.split(",")
        if origin.strip()
    ]

    if is_production and "*" in cors_origins:
        raise ConfigurationError(
            "COMPASS_CORS_ORIGINS contains wildcard '*' which is forbidden in production. "
            "Specify explicit origins instead."
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=_ALLOWED_HEADERS,
    )

    if cors_origins:
        logger.info("CORS enabled for origins: %s", cors_origins)
    else:
        logger.info("CORS: no origins configured (restrictive default)")

    app.include_router(router)

    # Root-level health check, separate from the versioned /api/v1/health
    @app.get("/health")
    async def root_health_check() -> dict[str, str]:
        """Root health check for infrastructure probes (Docker, Caddy, etc.)."""
        return {"status": "ok"}

    return app


__all__ = ["create_app", "router"]
