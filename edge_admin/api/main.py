"""
================================================================================
FILE: edge_admin/api/main.py
================================================================================

PURPOSE:
    FastAPI application factory and initialization. Creates and configures the
    FastAPI app instance, registers routes, middleware and exception handlers,
    and initializes the providers behind the DNS/worker/traffic endpoints.

WORKFLOW:
    1. Initialize FastAPI app instance
    2. Configure CORS for API responses
    3. Register startup hook: settings → logging → ServiceContainer
    4. Register error handling:
       - EdgeAdminException → {"success": false, "error": ...} with its status
       - anything else escaping a handler → same envelope, status 500
    5. Register middleware: request id, OPTIONS preflight
    6. Register routes: /api/* resources, then fallbacks (404 / dashboard)
    7. Register shutdown hook: close upstream HTTP client

REQUEST PIPELINE (outermost first):
    cors_preflight_middleware   OPTIONS on any path → 204 + CORS headers
    request_id_middleware       X-Request-ID on every response
    error_envelope_middleware   unexpected exception → 500 envelope
    CORSMiddleware              Access-Control-Allow-Origin on API responses
    exception handlers          EdgeAdminException → envelope
    routers                     api router, fallback router

KEY FACTS:
    - Handlers are stateless; the only shared object is the provider container
    - Upstream calls are single-attempt with a configurable timeout
    - Settings loaded at startup, changes require server restart
    - Error at startup = server fails to start

TESTING ENVIRONMENT:
    - Import: from edge_admin.api.main import create_app
    - Use TestClient as a context manager so startup/shutdown hooks run
    - Override get_dns_provider to swap in an httpx.MockTransport upstream
"""


from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from edge_admin.api import routes
from edge_admin.api.models import ErrorResponse
from edge_admin.config.constants import (
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    CORS_HEADERS,
    REQUEST_ID_HEADER,
)
from edge_admin.config.settings import Settings
from edge_admin.container.service_container import ServiceContainer
from edge_admin.core.exceptions import ConfigurationError, EdgeAdminException
from edge_admin.utils import configure_logging, generate_request_id

logger = logging.getLogger(__name__)

# Global instances (singleton pattern for startup/shutdown).
_settings: Optional[Settings] = None
_container: Optional[ServiceContainer] = None


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance ready for startup.
    """
    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        # Every non-/api path belongs to the dashboard
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    # =========================================================================
    # STARTUP HOOK
    # =========================================================================
    @app.on_event("startup")
    async def startup_event():
        """
        SEQUENCE:
        1. Load settings from .env / environment
        2. Configure logging (text or JSON)
        3. Initialize ServiceContainer (dns, workers, analytics providers)
        """
        global _settings, _container

        try:
            _settings = Settings()
        except ValidationError as e:
            logger.error(f"STARTUP FAILED: invalid settings: {e}")
            raise ConfigurationError(f"Invalid settings: {e}") from e

        configure_logging(
            level=_settings.log_level,
            json_logs=_settings.log_format == "json",
        )
        logger.info(
            "Settings loaded: "
            f"environment={_settings.environment} | "
            f"dns={_settings.dns_provider} ({_settings.upstream_api_base}) | "
            f"upstream_timeout={_settings.upstream_timeout}s | "
            f"workers={_settings.workers_provider} | "
            f"analytics={_settings.analytics_provider}"
        )

        try:
            _container = ServiceContainer(_settings)
            await _container.initialize()
        except Exception as e:
            logger.error(f"STARTUP FAILED: {str(e)}", exc_info=True)
            raise RuntimeError(f"Failed to initialize gateway: {str(e)}") from e

        logger.info("APPLICATION STARTUP COMPLETE")

    # =========================================================================
    # SHUTDOWN HOOK
    # =========================================================================
    @app.on_event("shutdown")
    async def shutdown_event():
        """Close provider resources (upstream connection pool)."""
        global _container

        try:
            if _container:
                await _container.shutdown()
                _container = None
            logger.info("APPLICATION SHUTDOWN COMPLETE")
        except Exception as e:
            logger.error(f"SHUTDOWN ERROR: {str(e)}", exc_info=True)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================
    @app.exception_handler(EdgeAdminException)
    async def edge_admin_exception_handler(request: Request, exc: EdgeAdminException):
        """Render gateway errors as {"success": false, "error": ...}."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.log(
            logging.WARNING if exc.status_code < 500 else logging.ERROR,
            f"{exc.error_code} [{request_id}]: {exc.message}",
            extra={
                "request_id": request_id,
                "error_code": exc.error_code,
                "status_code": exc.status_code,
                "upstream_status": getattr(exc, "upstream_status", None),
            },
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    # =========================================================================
    # MIDDLEWARE
    # =========================================================================
    @app.middleware("http")
    async def error_envelope_middleware(request: Request, call_next):
        """Convert any exception escaping a handler into a 500 envelope."""
        try:
            return await call_next(request)
        except Exception as exc:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.error(
                f"Unexpected error [{request_id}]: {str(exc)}",
                exc_info=True,
                extra={"request_id": request_id, "method": request.method, "path": request.url.path},
            )
            return JSONResponse(
                status_code=500,
                content=ErrorResponse(error=str(exc)).model_dump(),
            )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        """Add unique request ID for correlation tracking."""
        request.state.request_id = generate_request_id()
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        return response

    @app.middleware("http")
    async def cors_preflight_middleware(request: Request, call_next):
        """Answer OPTIONS on any path with the fixed CORS allow-lists."""
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        return await call_next(request)

    # =========================================================================
    # ROUTES
    # =========================================================================
    app.include_router(routes.router)
    app.include_router(routes.fallback_router)

    return app


# Create the app instance when module is imported.
app = create_app()


# =========================================================================
# DEPENDENCY INJECTION HELPERS
# =========================================================================
def get_container() -> ServiceContainer:
    """
    Get global ServiceContainer instance for dependency injection.
    """
    if _container is None:
        raise RuntimeError(
            "ServiceContainer not initialized. Check application startup logs."
        )
    return _container
