"""
FastAPI application entry point for the PC Build Advisor backend.

This module creates the FastAPI app instance, registers the routers and
exposes ``handler`` for serverless platforms (AWS Lambda, Netlify, Vercel).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from mangum import Mangum
from starlette.exceptions import HTTPException as StarletteHTTPException

from buildadvisor.config import settings
from buildadvisor.routes.builds import router as builds_router
from buildadvisor.routes.health import router as health_router
from buildadvisor.services.build_service import (
    INTERNAL_ERROR_MESSAGE,
    METHOD_NOT_ALLOWED_MESSAGE,
)
from buildadvisor.utils.logging import LOG_FORMAT

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format=LOG_FORMAT
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    Environment-based configuration:
    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS env var
    - ENVIRONMENT=testing/development: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No web origins allowed."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="PC Build Advisor API",
    description="Serverless backend that turns a free-text request into a PC build recommendation",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Render framework-level errors in the same shape as the build endpoint.

    405 is plain text; everything else is a JSON object with an ``error`` field.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return PlainTextResponse(METHOD_NOT_ALLOWED_MESSAGE, status_code=exc.status_code)

    logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Last-resort handler: log the failure, never leak it to the caller."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(builds_router)

# Serverless entry point: Mangum translates Lambda-style events to ASGI
handler = Mangum(app, lifespan="off")

logger.info("FastAPI app initialized successfully")
