"""
Geometric transforms: quarter-turn rotations, mirroring and square crops.
"""

import logging

import numpy as np

from core.exceptions import ValidationError
from core.image.buffer import PixelBuffer
from schemas.common import CropRegion

logger = logging.getLogger(__name__)


def rotate90(buffer: PixelBuffer) -> PixelBuffer:
    """Rotate 90 degrees clockwise. Output is (H, W)."""
    return PixelBuffer(np.rot90(buffer.pixels, k=-1))


def rotate180(buffer: PixelBuffer) -> PixelBuffer:
    """Rotate 180 degrees."""
    return PixelBuffer(np.rot90(buffer.pixels, k=2))


def rotate270(buffer: PixelBuffer) -> PixelBuffer:
    """Rotate 270 degrees clockwise (90 counter-clockwise). Output is (H, W)."""
    return PixelBuffer(np.rot90(buffer.pixels, k=1))


def flip_horizontal(buffer: PixelBuffer) -> PixelBuffer:
    """Mirror left to right."""
    return PixelBuffer(buffer.pixels[:, ::-1])


def flip_vertical(buffer: PixelBuffer) -> PixelBuffer:
    """Mirror top to bottom."""
    return PixelBuffer(buffer.pixels[::-1])


def crop_square(buffer: PixelBuffer, x: int, y: int, size: int) -> PixelBuffer:
    """
    Crop a square region from the buffer.

    Width is validated before height so a region exceeding both edges
    reports the width.

    Args:
        buffer: Source pixel buffer
        x: Left edge of the crop area in pixels
        y: Top edge of the crop area in pixels
        size: Width and height of the crop area in pixels

    Returns:
        Pixel buffer of dimensions (size, size)

    Raises:
        ValidationError: If the region is degenerate or exceeds image bounds
    """
    region = CropRegion(x=x, y=y, size=size)
    width, height = buffer.size

    if region.x < 0 or region.y < 0:
        raise ValidationError(
            f"Crop origin must be non-negative, got ({region.x}, {region.y})",
            details={"x": region.x, "y": region.y},
        )
    if region.size <= 0:
        raise ValidationError(
            f"Crop size must be positive, got {region.size}", details={"size": region.size}
        )
    if region.x2 > width:
        raise ValidationError(
            f"Crop area exceeds image width: {region.x} + {region.size} > {width}",
            details={"edge": "width", "x": region.x, "size": region.size, "width": width},
        )
    if region.y2 > height:
        raise ValidationError(
            f"Crop area exceeds image height: {region.y} + {region.size} > {height}",
            details={"edge": "height", "y": region.y, "size": region.size, "height": height},
        )

    logger.debug(f"Cropping {region.size}x{region.size} at ({region.x}, {region.y})")
    return PixelBuffer(buffer.pixels[region.y : region.y2, region.x : region.x2])
