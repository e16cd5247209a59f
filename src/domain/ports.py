"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the value types the domain works with and the
interface (port) it requires from the upstream content API.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class InlineImage:
    """Base64-encoded image bytes plus their MIME type."""

    mime_type: str
    data: str


@dataclass(frozen=True)
class GenerationRequest:
    """
    A single prompt-plus-image generation request.

    model is None when the caller did not choose one; the service
    then falls back to its configured default.
    """

    prompt_text: str
    image: InlineImage
    model: str | None = None


class ContentGenerator(Protocol):
    """Port interface for the upstream generative-content API."""

    async def generate_content(self, model: str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Submit a generateContent payload for the given model.

        Args:
            model: Upstream model identifier
            payload: Request body in the upstream wire format

        Returns:
            Decoded JSON body of a successful upstream response

        Raises:
            UpstreamRequestFailed: If upstream answers with a non-success status
        """
        ...
