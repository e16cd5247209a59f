"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Wire field names are camelCase to match the browser client; Python
attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.ports import GenerationRequest, InlineImage


class CamelModel(BaseModel):
    """Base model exchanging camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InlineImagePayload(CamelModel):
    """Base64 image embedded in the request body."""

    data: str = Field(..., min_length=1, description="Base64-encoded image bytes")
    mime_type: str = Field(..., min_length=1, description="Image MIME type, e.g. image/png")


class GenerateRequest(CamelModel):
    """Request model for image generation."""

    prompt_text: str = Field(..., min_length=1, description="Instruction for the model")
    image: InlineImagePayload
    model: str | None = Field(
        default=None,
        pattern=r"^[A-Za-z0-9._-]+$",
        description="Upstream model identifier (server default when omitted)",
    )

    def to_domain(self) -> GenerationRequest:
        """Convert to the framework-free domain request."""
        return GenerationRequest(
            prompt_text=self.prompt_text,
            image=InlineImage(mime_type=self.image.mime_type, data=self.image.data),
            model=self.model,
        )


class GenerateResponse(CamelModel):
    """Response model for successful generation."""

    base64_data: str


class HealthResponse(CamelModel):
    """Response model for the health check."""

    status: str
    credential_configured: bool


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    details: str | None = None
