"""FastAPI server for the internal tools directory."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api.deps import get_admin_password, get_tool_store, require_admin, sanitize_error_message
from .config import Settings, get_settings, settings
from .errors import StorageFailure, ToolsDirectoryError
from .logging_config import setup_logging
from .middleware import SecurityHeadersMiddleware
from .models import (
    HealthResponse,
    MetricsCatalogResponse,
    SuccessResponse,
    Tool,
    ToolCreateRequest,
    ToolUpdateRequest,
)
from .services import metrics_catalog, tool_registry
from .services.auth import check_admin_secret
from .store import ToolStore, close_store

logger = logging.getLogger(__name__)

# ============ SENTRY INITIALIZATION ============


def _filter_sentry_event(event: dict) -> dict:
    """Remove the admin password from Sentry events."""
    if "request" in event and "headers" in event["request"]:
        headers = event["request"]["headers"]
        for key in ["x-admin-password", "X-Admin-Password"]:
            if key in headers:
                headers[key] = "[REDACTED]"
    return event


# Initialize Sentry if DSN is configured
if settings.sentry_dsn:
    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.starlette import StarletteIntegration

        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
            integrations=[
                FastApiIntegration(),
                StarletteIntegration(),
            ],
            before_send=lambda event, hint: _filter_sentry_event(event),
        )
        logger.info("Sentry error tracking initialized")
    except ImportError:
        logger.warning("Sentry DSN configured but sentry-sdk not installed")
else:
    logger.debug("Sentry DSN not configured - error tracking disabled")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    setup_logging(settings.log_level)
    logger.info(f"Starting tools directory v{__version__} ({settings.storage_backend} storage)")

    if not settings.admin_password:
        logger.warning("ADMIN_PASSWORD is not set; admin endpoints will fail until it is configured")

    if not settings.debug and settings.cors_allowed_origins == "*":
        logger.warning(
            "SECURITY WARNING: CORS is configured to allow all origins ('*'). "
            "Set CORS_ALLOWED_ORIGINS to specific domains in production."
        )

    yield
    # Shutdown
    await close_store()


app = FastAPI(
    title="Tools Directory",
    description="Internal tools directory and analytics metrics reference",
    version=__version__,
    lifespan=lifespan,
)

# Security headers middleware
app.add_middleware(SecurityHeadersMiddleware, hsts=not settings.debug)

# CORS middleware - use configured origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Admin-Password"],
)


# ============ EXCEPTION HANDLERS ============


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(ToolsDirectoryError)
async def tools_directory_exception_handler(request: Request, exc: ToolsDirectoryError):
    """Translate reported conditions into their fixed status."""
    if isinstance(exc, StorageFailure):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as a flat 400 message."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {location} {first.get('msg', '')}".strip()
    else:
        message = "Invalid request"
    return _error_response(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with sanitized error messages."""
    return _error_response(500, sanitize_error_message(exc))


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(
    config: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(UTC),
        storage_backend=config.storage_backend,
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Tools Directory",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


# ============ AUTH ENDPOINT ============


@app.post("/api/auth", response_model=SuccessResponse, tags=["Auth"])
async def check_password(
    password: Annotated[str | None, Depends(get_admin_password)],
    config: Annotated[Settings, Depends(get_settings)],
) -> SuccessResponse:
    """Check an admin password without performing any action."""
    check_admin_secret(password, config.admin_password, message="Invalid password")
    return SuccessResponse()


# ============ TOOL ENDPOINTS ============


@app.get("/api/tools", response_model=list[Tool], tags=["Tools"])
async def get_tools(
    store: Annotated[ToolStore, Depends(get_tool_store)],
) -> list[Tool]:
    """Return all tools sorted by order."""
    return await tool_registry.list_tools(store)


@app.post(
    "/api/tools",
    response_model=Tool,
    status_code=201,
    tags=["Tools"],
    dependencies=[Depends(require_admin)],
)
async def add_tool(
    request: ToolCreateRequest,
    store: Annotated[ToolStore, Depends(get_tool_store)],
) -> Tool:
    """Append a new tool at the end of the list."""
    return await tool_registry.create_tool(store, request)


@app.put("/api/tools", response_model=Tool, tags=["Tools"], dependencies=[Depends(require_admin)])
async def update_tool(
    request: ToolUpdateRequest,
    store: Annotated[ToolStore, Depends(get_tool_store)],
) -> Tool:
    """Update a tool's fields and/or move it to a new position."""
    return await tool_registry.update_tool(store, request)


@app.delete(
    "/api/tools",
    response_model=SuccessResponse,
    tags=["Tools"],
    dependencies=[Depends(require_admin)],
)
async def remove_tool(
    store: Annotated[ToolStore, Depends(get_tool_store)],
    tool_id: Annotated[str | None, Query(alias="id")] = None,
) -> SuccessResponse:
    """Delete a tool and close the gap in the ordering."""
    await tool_registry.delete_tool(store, tool_id)
    return SuccessResponse()


# ============ METRICS CATALOGUE ============


@app.get("/api/metrics", response_model=MetricsCatalogResponse, tags=["Metrics"])
async def get_metrics() -> MetricsCatalogResponse:
    """Return the analytics metrics reference catalogue."""
    return metrics_catalog.get_catalog()


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "tools_directory.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
