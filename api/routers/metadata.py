"""
Metadata API Router - Dimension and aspect-ratio queries
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import decode_payload, get_app_settings, get_image_service
from api.exceptions import safe_endpoint
from config import Settings
from schemas import DimensionsResponse, ImageRequest, SquareIshResponse
from services.image_service import ImageService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/dimensions")
@safe_endpoint
async def get_dimensions(
    request: ImageRequest,
    image_service: ImageService = Depends(get_image_service),
    settings: Settings = Depends(get_app_settings),
) -> DimensionsResponse:
    """Get image width and height"""
    width, height = image_service.dimensions(decode_payload(request.image, settings))
    return DimensionsResponse(width=width, height=height)


@router.post("/square-ish")
@safe_endpoint
async def is_square_ish(
    request: ImageRequest,
    image_service: ImageService = Depends(get_image_service),
    settings: Settings = Depends(get_app_settings),
) -> SquareIshResponse:
    """Check whether the image is within 2% of a 1:1 aspect ratio"""
    info = image_service.describe(decode_payload(request.image, settings))
    return SquareIshResponse(**info)
