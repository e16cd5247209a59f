"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings with and without an upstream credential
- Request bodies in the caller wire format
- Upstream responses in the Gemini wire format
"""

from typing import Any

import pytest

from src.config.settings import Settings

TEST_API_KEY = "test-gemini-key"
PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="


def make_settings(api_key: str | None = TEST_API_KEY, **overrides: Any) -> Settings:
    """Build settings isolated from the developer's .env file."""
    return Settings(gemini_api_key=api_key, _env_file=None, **overrides)


def gemini_image_response(data: str = PNG_BASE64, mime_type: str = "image/png") -> dict:
    """Upstream success body carrying a text part and an image part."""
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [
                        {"text": "Here is your edited image."},
                        {"inlineData": {"mimeType": mime_type, "data": data}},
                    ],
                },
                "finishReason": "STOP",
            }
        ]
    }


def gemini_text_only_response() -> dict:
    """Upstream success body without any image part."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": "I cannot edit this image."}]},
                "finishReason": "STOP",
            }
        ]
    }


@pytest.fixture
def settings() -> Settings:
    """Settings with a configured upstream credential."""
    return make_settings()


@pytest.fixture
def settings_without_key() -> Settings:
    """Settings with no upstream credential."""
    return make_settings(api_key=None)


@pytest.fixture
def generate_body() -> dict:
    """Valid request body for POST /api/generate."""
    return {
        "promptText": "Turn this photo into a watercolor painting",
        "image": {"data": PNG_BASE64, "mimeType": "image/png"},
        "model": "gemini-2.5-flash-image-preview",
    }


@pytest.fixture
def image_response() -> dict:
    """Upstream success body with inline image data."""
    return gemini_image_response()


@pytest.fixture
def text_only_response() -> dict:
    """Upstream success body without inline image data."""
    return gemini_text_only_response()
