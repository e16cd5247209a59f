"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the domain service and upstream adapter into routes.
"""

import httpx
from fastapi import Depends, Request

from src.adapters.gemini import GeminiContentGenerator
from src.config.settings import Settings, get_settings
from src.domain.exceptions import CredentialNotConfigured
from src.domain.generation import ImageGenerationService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.http_client


def get_api_key(settings: Settings = Depends(get_settings)) -> str:
    """
    Resolve the upstream API key.

    Resolved before the request body is validated, so a server without
    a credential answers 500 whatever the caller sent.

    Raises:
        CredentialNotConfigured: If GEMINI_API_KEY is unset or empty
    """
    if not settings.api_key_configured:
        raise CredentialNotConfigured()
    return settings.gemini_api_key.get_secret_value()


def get_content_generator(
    request: Request,
    api_key: str = Depends(get_api_key),
    settings: Settings = Depends(get_settings),
) -> GeminiContentGenerator:
    """Create the Gemini adapter bound to the shared client and key."""
    return GeminiContentGenerator(
        client=get_http_client(request),
        api_key=api_key,
        base_url=settings.gemini_base_url,
    )


def get_generation_service(
    generator: GeminiContentGenerator = Depends(get_content_generator),
    settings: Settings = Depends(get_settings),
) -> ImageGenerationService:
    """
    Create generation service with injected dependencies.

    Wires the upstream adapter and default model into the domain service.
    """
    return ImageGenerationService(generator=generator, default_model=settings.default_model)
