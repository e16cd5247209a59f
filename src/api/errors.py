"""
Error handlers - map exceptions to `{"error": ..., "details": ...}` bodies.

Every failure a caller can see goes through one of these handlers, so all
error responses share the ErrorResponse shape regardless of origin:
domain errors, body validation, framework HTTP errors, or anything unhandled.
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.models import ErrorResponse
from src.config.settings import Settings, get_settings
from src.domain.exceptions import (
    CredentialNotConfigured,
    NoImageReturned,
    UpstreamRequestFailed,
)

logger = logging.getLogger(__name__)

MISSING_DATA_MESSAGE = "Missing required data: prompt or image."
INVALID_DATA_MESSAGE = "Invalid request data."
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed."

# Body fields whose absence means the caller sent no prompt or no image
_REQUIRED_FIELDS = {"promptText", "image"}


def error_response(
    status_code: int,
    error: str,
    details: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a JSON error response, omitting details when absent."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""

    @app.exception_handler(CredentialNotConfigured)
    async def credential_not_configured_handler(request: Request, exc: CredentialNotConfigured):
        return _credential_not_configured(request)

    @app.exception_handler(UpstreamRequestFailed)
    async def upstream_failed_handler(request: Request, exc: UpstreamRequestFailed):
        logger.warning("Upstream call failed with status %s", exc.status_code)
        return error_response(
            exc.status_code,
            f"Gemini API call failed: {exc.reason}",
            details=exc.details,
        )

    @app.exception_handler(NoImageReturned)
    async def no_image_handler(request: Request, exc: NoImageReturned):
        logger.warning("Upstream response for model %s had no image data", exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Gemini API did not return image data.",
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Body parsing runs before route dependencies; the credential still comes first
        if not _resolve_settings(request).api_key_configured:
            return _credential_not_configured(request)

        errors = exc.errors()
        details = _format_validation_errors(errors)
        logger.info("Rejected request body on %s: %s", request.url.path, details)
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            _validation_message(errors),
            details=details,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            # Router-level 405s never reach the credential dependency
            if not _resolve_settings(request).api_key_configured:
                return _credential_not_configured(request)
            return error_response(exc.status_code, METHOD_NOT_ALLOWED_MESSAGE, headers=exc.headers)
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Proxy internal error on %s", request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Internal server error: {exc}",
        )


def _resolve_settings(request: Request) -> Settings:
    """Settings as route dependencies would see them, overrides included."""
    provider = request.app.dependency_overrides.get(get_settings, get_settings)
    return provider()


def _credential_not_configured(request: Request) -> JSONResponse:
    logger.error("GEMINI_API_KEY is not configured (path=%s)", request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Server error: API Key is not configured.",
    )


def _body_loc(error: dict[str, Any]) -> tuple:
    """Location of a validation error relative to the request body."""
    if error.get("type") == "json_invalid":
        return ()
    loc = tuple(error.get("loc", ()))
    return loc[1:] if loc[:1] == ("body",) else loc


def _validation_message(errors: Sequence[dict[str, Any]]) -> str:
    """
    Pick the caller-facing message for a set of body validation errors.

    A missing or unreadable prompt/image takes precedence over problems
    with optional fields.
    """
    for error in errors:
        loc = _body_loc(error)
        if not loc or loc[0] in _REQUIRED_FIELDS:
            return MISSING_DATA_MESSAGE
    return INVALID_DATA_MESSAGE


def _format_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Flatten validation errors to 'field: message' pairs, without inputs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in _body_loc(error)) or 'body'}: {error.get('msg', '')}"
        for error in errors
    )
