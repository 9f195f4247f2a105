"""
Transform API Router - Single-image geometric and color transforms
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import decode_payload, get_app_settings, get_image_service, to_image_response
from api.exceptions import safe_endpoint
from config import Settings
from core.enums import Operation
from schemas import CropSquareRequest, ImageResponse, TransformRequest
from services.image_service import ImageService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/crop-square")
@safe_endpoint
async def crop_square(
    request: CropSquareRequest,
    image_service: ImageService = Depends(get_image_service),
    settings: Settings = Depends(get_app_settings),
) -> ImageResponse:
    """
    Crop a square region from an image.

    Fails with 400 when x + size exceeds the width (checked first) or
    y + size exceeds the height.
    """
    data = decode_payload(request.image, settings)
    result = image_service.crop_square(
        data, x=request.x, y=request.y, size=request.size, output=request.output
    )
    return to_image_response(result)


@router.post("/{operation}")
@safe_endpoint
async def apply_transform(
    operation: Operation,
    request: TransformRequest,
    image_service: ImageService = Depends(get_image_service),
    settings: Settings = Depends(get_app_settings),
) -> ImageResponse:
    """
    Apply a single-image transform.

    Operations:
    - rotate90, rotate180, rotate270, flip_horizontal, flip_vertical
    - grayscale, invert, sepia
    - brighten (requires ``value``), adjust_contrast (requires ``factor``),
      blur (requires ``sigma`` >= 0)
    """
    data = decode_payload(request.image, settings)
    result = image_service.transform(
        data,
        operation,
        output=request.output,
        value=request.value,
        factor=request.factor,
        sigma=request.sigma,
    )
    return to_image_response(result)
