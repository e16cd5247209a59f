"""
Gemini content generator adapter - Implements ContentGenerator protocol.

This module sends generateContent requests to the Google Generative
Language API over a shared httpx.AsyncClient.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from src.domain.exceptions import UpstreamRequestFailed

logger = logging.getLogger(__name__)


@dataclass
class GeminiContentGenerator:
    """
    Implements ContentGenerator protocol via the Gemini REST API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The HTTP client is owned by the application lifespan, not by this adapter.
    """

    client: httpx.AsyncClient
    api_key: str
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    def endpoint_for(self, model: str) -> str:
        """Build the generateContent URL for a model."""
        return f"{self.base_url.rstrip('/')}/models/{model}:generateContent"

    async def generate_content(self, model: str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        POST the payload to upstream and return the decoded response.

        The key travels in the x-goog-api-key header so it never appears
        in request URLs or client access logs.

        Raises:
            UpstreamRequestFailed: On any non-2xx upstream status, carrying
                the upstream status code, reason phrase and body text
        """
        response = await self.client.post(
            self.endpoint_for(model),
            headers={"Content-Type": "application/json", "x-goog-api-key": self.api_key},
            json=payload,
        )

        if not response.is_success:
            error_text = response.text
            logger.error("Gemini API error (%s): %s", response.status_code, error_text)
            raise UpstreamRequestFailed(
                status_code=response.status_code,
                reason=response.reason_phrase,
                details=error_text,
            )

        return response.json()
