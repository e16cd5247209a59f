"""
Domain exceptions - Semantic error types for image generation.

This module defines domain-specific exceptions that communicate
failures of the proxy flow without leaking HTTP framework details.
"""


class GenerationError(Exception):
    """Base class for image generation domain errors."""

    pass


class CredentialNotConfigured(GenerationError):
    """The server-side upstream API key is missing."""

    pass


class UpstreamRequestFailed(GenerationError):
    """Upstream API answered with a non-success status."""

    def __init__(self, status_code: int, reason: str, details: str) -> None:
        super().__init__(f"Upstream returned {status_code} {reason}")
        self.status_code = status_code
        self.reason = reason
        self.details = details


class NoImageReturned(GenerationError):
    """Upstream call succeeded but carried no inline image data."""

    pass
