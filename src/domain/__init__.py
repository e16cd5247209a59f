"""
Domain layer - Pure proxy logic with zero framework imports.

This package contains the request reshaping and response extraction for the
image generation proxy. It defines its own port interface for the upstream
API, keeping HTTP clients and web frameworks in the adapter and API layers.
"""

from .exceptions import (
    CredentialNotConfigured,
    GenerationError,
    NoImageReturned,
    UpstreamRequestFailed,
)
from .generation import ImageGenerationService, build_payload, extract_image_data
from .ports import ContentGenerator, GenerationRequest, InlineImage

__all__ = [
    "ContentGenerator",
    "CredentialNotConfigured",
    "GenerationError",
    "GenerationRequest",
    "ImageGenerationService",
    "InlineImage",
    "NoImageReturned",
    "UpstreamRequestFailed",
    "build_payload",
    "extract_image_data",
]
