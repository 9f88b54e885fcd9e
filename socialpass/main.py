"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from socialpass.api import api_router
from socialpass.auth import PassError
from socialpass.config import get_settings
from socialpass.constants import VERSION_HEADER
from socialpass.utils.logging import get_logger, setup_logging
from socialpass.utils.secrets import mask_secret

settings = get_settings()
setup_logging()
logger = get_logger(__name__)


class VersionHeaderMiddleware(BaseHTTPMiddleware):
    """Add the application version header to all responses."""

    def __init__(self, app: ASGIApp, version: str) -> None:
        super().__init__(app)
        self.version = version

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers[VERSION_HEADER] = self.version
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    if settings.github_configured:
        logger.info(
            f"GitHub OAuth configured for client {mask_secret(settings.github_client_id)}"
        )
    else:
        logger.warning("GitHub OAuth credentials missing - logins will fail")

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(VersionHeaderMiddleware, version=settings.app_version)

app.include_router(api_router)


@app.exception_handler(PassError)
async def pass_error_handler(request: Request, exc: PassError) -> JSONResponse:
    """Render login failures the way FastAPI renders HTTPException."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Store app start time for uptime tracking
_app_start_time = datetime.now(UTC)


@app.get("/health", include_in_schema=True, tags=["monitoring"])
async def health_check() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        JSONResponse with status, uptime, and configuration checks.
    """
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "uptime_seconds": (datetime.now(UTC) - _app_start_time).total_seconds(),
        "version": settings.app_version,
        "checks": {},
    }

    if settings.github_configured:
        health_status["checks"]["github"] = {"status": "configured"}
    else:
        health_status["checks"]["github"] = {"status": "unconfigured"}
        health_status["status"] = "degraded"

    status_code = 200 if health_status["status"] == "healthy" else 503
    return JSONResponse(content=health_status, status_code=status_code)
