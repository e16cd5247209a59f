"""
Image generation domain service - payload shaping and result extraction.

The proxy flow is linear:

    GenerationRequest -> build_payload() -> ContentGenerator -> extract_image_data()

Upstream wire format (generateContent)
======================================

Request:
    {"contents": [{"parts": [{"text": ...},
                             {"inlineData": {"mimeType": ..., "data": ...}}]}],
     "generationConfig": {"responseModalities": ["TEXT", "IMAGE"]}}

Response (relevant subset):
    {"candidates": [{"content": {"parts": [..., {"inlineData": {"data": ...}}]}}]}

Only the first candidate is inspected. Image data is relayed byte-for-byte;
it is never decoded or re-encoded here.
"""

from dataclasses import dataclass
from typing import Any

from .exceptions import NoImageReturned
from .ports import ContentGenerator, GenerationRequest

RESPONSE_MODALITIES = ("TEXT", "IMAGE")


def build_payload(request: GenerationRequest) -> dict[str, Any]:
    """Reshape a generation request into the upstream request body."""
    return {
        "contents": [
            {
                "parts": [
                    {"text": request.prompt_text},
                    {
                        "inlineData": {
                            "mimeType": request.image.mime_type,
                            "data": request.image.data,
                        }
                    },
                ]
            }
        ],
        "generationConfig": {"responseModalities": list(RESPONSE_MODALITIES)},
    }


def extract_image_data(result: Any) -> str | None:
    """
    Find the base64 image data in an upstream response.

    Looks at the first candidate's parts and returns the data of the first
    part carrying inline data. Accepts both the camelCase and snake_case
    spellings the API has used. Returns None when anything along the path
    is missing or has an unexpected shape.
    """
    if not isinstance(result, dict):
        return None
    candidates = result.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    if not isinstance(first, dict):
        return None
    content = first.get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list):
        return None

    for part in parts:
        if not isinstance(part, dict):
            continue
        inline_data = part.get("inlineData") or part.get("inline_data")
        if inline_data:
            data = inline_data.get("data") if isinstance(inline_data, dict) else None
            return data or None
    return None


@dataclass
class ImageGenerationService:
    """
    Domain service for prompt-plus-image generation.

    Orchestrates the proxy flow: model resolution, payload shaping,
    the upstream call, and image extraction.
    """

    generator: ContentGenerator
    default_model: str

    async def generate(self, request: GenerationRequest) -> str:
        """
        Generate an image for the request.

        Args:
            request: Prompt text, inline source image and optional model

        Returns:
            Base64 image data exactly as returned by upstream

        Raises:
            UpstreamRequestFailed: If upstream answers with a non-success status
            NoImageReturned: If upstream succeeded without inline image data
        """
        model = request.model or self.default_model
        result = await self.generator.generate_content(model, build_payload(request))

        base64_data = extract_image_data(result)
        if base64_data is None:
            raise NoImageReturned(model)
        return base64_data
