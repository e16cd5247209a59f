"""
API routes - Image generation proxy endpoint.

This module defines the HTTP endpoints:
- POST /api/generate - Forward prompt and image upstream, relay the image
- any other method on /api/generate - 405 once the credential check passes
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_api_key, get_generation_service
from src.api.errors import METHOD_NOT_ALLOWED_MESSAGE
from src.api.models import ErrorResponse, GenerateRequest, GenerateResponse
from src.domain.generation import ImageGenerationService

router = APIRouter(tags=["generate"])

OTHER_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing prompt or image"},
        500: {"model": ErrorResponse, "description": "Server misconfigured or no image returned"},
        502: {"model": ErrorResponse, "description": "Upstream error (status passed through)"},
    },
    summary="Generate an image from a prompt and a source image",
    description="Forwards the prompt text and inline image to the Gemini "
    "generateContent API and returns the generated image as base64.",
)
async def generate(
    request_data: GenerateRequest,
    service: ImageGenerationService = Depends(get_generation_service),
) -> GenerateResponse:
    """
    Generate an image.

    - **promptText**: Instruction for the model
    - **image**: Source image as `{data, mimeType}` with base64 data
    - **model**: Optional upstream model identifier

    Returns the upstream image data unchanged as `base64Data`.
    """
    base64_data = await service.generate(request_data.to_domain())
    return GenerateResponse(base64_data=base64_data)


@router.api_route(
    "/generate",
    methods=OTHER_METHODS,
    dependencies=[Depends(get_api_key)],
    include_in_schema=False,
)
async def generate_method_not_allowed() -> None:
    """Reject non-POST methods."""
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail=METHOD_NOT_ALLOWED_MESSAGE,
        headers={"Allow": "POST"},
    )
