"""
Compose API Router - Two-image compositing

Both endpoints resample the overlay to the first image's dimensions, so the
result always has the size of the user/base image.
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import decode_payload, get_app_settings, get_image_service, to_image_response
from api.exceptions import safe_endpoint
from config import Settings
from schemas import BlendRequest, ImageResponse, SelectorCombineRequest
from services.image_service import ImageService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/selector")
@safe_endpoint
async def combine_selector(
    request: SelectorCombineRequest,
    image_service: ImageService = Depends(get_image_service),
    settings: Settings = Depends(get_app_settings),
) -> ImageResponse:
    """
    Combine two images with a selector mask.

    The user image supplies pixels where the selector is true, the overlay
    supplies the rest. No blending takes place.
    """
    user_data = decode_payload(request.user_image, settings)
    overlay_data = decode_payload(request.overlay_image, settings)
    result = image_service.combine(
        user_data, overlay_data, request.selector, output=request.output
    )
    return to_image_response(result)


@router.post("/blend")
@safe_endpoint
async def overlay_alpha_blend(
    request: BlendRequest,
    image_service: ImageService = Depends(get_image_service),
    settings: Settings = Depends(get_app_settings),
) -> ImageResponse:
    """
    Composite the overlay over the base image (Porter-Duff "over").

    Opacity outside [0.0, 1.0] is rejected with 400.
    """
    base_data = decode_payload(request.base_image, settings)
    overlay_data = decode_payload(request.overlay_image, settings)
    result = image_service.blend(
        base_data, overlay_data, request.opacity, output=request.output
    )
    return to_image_response(result)
