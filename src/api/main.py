"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import register_error_handlers
from src.api.models import HealthResponse
from src.api.routes import router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "generate",
        "description": "Image generation proxy - forwards prompt and image to Gemini",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared upstream HTTP client on startup
    - Closes it on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    if not settings.api_key_configured:
        logger.warning("GEMINI_API_KEY is not set; generation requests will fail with 500")

    http_client = httpx.AsyncClient(timeout=settings.request_timeout_seconds)

    # Store client in app state for dependency injection
    app.state.http_client = http_client

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await http_client.aclose()
    logger.info("Upstream HTTP client closed")


app = FastAPI(
    title="gemini-image-proxy",
    description="Image generation proxy - relays prompt and image to the Gemini API "
    "using a server-held key",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_error_handlers(app)

_cors_origins = get_settings().cors_origins
if _cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins,
        allow_methods=["POST"],
        allow_headers=["Content-Type"],
    )

app.include_router(router, prefix="/api")


@app.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Health check endpoint.

    Returns 200 OK while the process is serving, and reports whether the
    upstream credential is configured without revealing it.
    """
    return HealthResponse(status="healthy", credential_configured=settings.api_key_configured)
