"""
Image processing API models.

This module contains request and response models for image operations:
- Single-image transforms and square crops
- Selector compositing and alpha blending
- Metadata queries
"""

from typing import Optional

from pydantic import BaseModel, Field

from core.constants import ColorConstants
from core.enums import OutputFormat, SelectorKind

from .common import OutputConfig, Size


class TransformRequest(BaseModel):
    """Request to apply a single-image transform"""

    image: str = Field(..., description="Base64 encoded input image")
    value: Optional[int] = Field(
        default=None,
        description=(
            f"Brightness shift (brighten), advisory range "
            f"{ColorConstants.BRIGHTNESS_MIN}..{ColorConstants.BRIGHTNESS_MAX}"
        ),
    )
    factor: Optional[float] = Field(
        default=None,
        description=(
            f"Contrast factor (adjust_contrast), advisory range "
            f"{ColorConstants.CONTRAST_MIN:g}..{ColorConstants.CONTRAST_MAX:g}"
        ),
    )
    sigma: Optional[float] = Field(default=None, description="Gaussian sigma (blur), >= 0")
    output: Optional[OutputConfig] = Field(default=None, description="Output encoding override")


class CropSquareRequest(BaseModel):
    """Request to crop a square region"""

    image: str = Field(..., description="Base64 encoded input image")
    x: int = Field(..., description="Left edge of the crop area")
    y: int = Field(..., description="Top edge of the crop area")
    size: int = Field(..., description="Edge length of the crop area")
    output: Optional[OutputConfig] = None


class SelectorCombineRequest(BaseModel):
    """Request to combine two images with a selector"""

    user_image: str = Field(..., description="Base64 encoded main image")
    overlay_image: str = Field(..., description="Base64 encoded overlay image")
    selector: SelectorKind = Field(..., description="Pixel selection rule")
    output: Optional[OutputConfig] = None


class BlendRequest(BaseModel):
    """Request to alpha blend an overlay onto a base image"""

    base_image: str = Field(..., description="Base64 encoded base image")
    overlay_image: str = Field(..., description="Base64 encoded overlay image")
    opacity: float = Field(..., description="Overlay opacity in [0.0, 1.0]")
    output: Optional[OutputConfig] = None


class ImageRequest(BaseModel):
    """Request carrying a single image (metadata queries)"""

    image: str = Field(..., description="Base64 encoded input image")


class ImageResponse(BaseModel):
    """Encoded result image"""

    image: str = Field(..., description="Base64 encoded output image")
    format: OutputFormat
    mime_type: str
    size: Size
    processing_time_ms: int


class DimensionsResponse(BaseModel):
    """Image dimensions"""

    width: int
    height: int


class SquareIshResponse(BaseModel):
    """Aspect ratio classification"""

    width: int
    height: int
    aspect_ratio: float
    is_square_ish: bool
