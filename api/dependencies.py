"""
Shared FastAPI dependencies for the image compositor.
Centralizes common dependencies to eliminate code duplication.
"""

import logging
from typing import Any, Dict

from fastapi import Depends, Request

from config import Settings, get_settings
from core.exceptions import ValidationError
from core.image.converters import ImageConverters
from schemas.common import OutputConfig, Size
from schemas.image import ImageResponse
from services.image_service import ImageResult, ImageService

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """
    Get settings from app state, falling back to process settings.

    Args:
        request: FastAPI request object

    Returns:
        Settings instance
    """
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        logger.warning("Settings not found in app state, using defaults")
        return get_settings()
    return settings


def get_config(settings: Settings = Depends(get_app_settings)) -> Dict[str, Any]:
    """Configuration as a plain dictionary."""
    return settings.to_dict()


def get_image_service(settings: Settings = Depends(get_app_settings)) -> ImageService:
    """
    Get image service instance.

    The service is stateless, so a new one per request costs nothing and
    always reflects the current output settings.

    Args:
        settings: Settings dependency

    Returns:
        ImageService configured with the default output encoding
    """
    return ImageService(output_config=settings.output.to_output_config())


def decode_payload(base64_string: str, settings: Settings) -> bytes:
    """
    Decode a base64 image payload and enforce the upload limit.

    Args:
        base64_string: Base64 encoded image from a request body
        settings: Settings with the upload limit

    Returns:
        Encoded image bytes

    Raises:
        DecodeError: If the payload is not valid base64
        ValidationError: If the payload exceeds the upload limit
    """
    data = ImageConverters.from_base64(base64_string)
    limit = settings.image.max_upload_bytes
    if len(data) > limit:
        raise ValidationError(
            f"Image payload exceeds {settings.image.max_upload_mb} MB",
            details={"size_bytes": len(data), "limit_bytes": limit},
        )
    return data


def to_image_response(result: ImageResult) -> ImageResponse:
    """
    Build the API response for an encoded result.

    Args:
        result: ImageResult from the service

    Returns:
        ImageResponse with base64 payload
    """
    config = OutputConfig(format=result.format)
    return ImageResponse(
        image=result.to_base64(),
        format=result.format,
        mime_type=config.mime_type,
        size=Size(width=result.width, height=result.height),
        processing_time_ms=result.processing_time_ms,
    )
