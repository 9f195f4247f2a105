"""
Geometry and metadata queries on pixel buffers.
"""

import logging
from typing import Tuple

from core.constants import GeometryConstants
from core.image.buffer import PixelBuffer

logger = logging.getLogger(__name__)


def dimensions(buffer: PixelBuffer) -> Tuple[int, int]:
    """Return (width, height)."""
    return buffer.width, buffer.height


def aspect_ratio(buffer: PixelBuffer) -> float:
    """Width divided by height. Height is never zero for a valid buffer."""
    return buffer.width / buffer.height


def is_square_ish(buffer: PixelBuffer, tolerance: float = GeometryConstants.SQUARE_TOLERANCE) -> bool:
    """
    Check whether the aspect ratio lies within ``tolerance`` of 1:1.

    Both ends of the band [1 - tolerance, 1 + tolerance] are inclusive.
    """
    ratio = aspect_ratio(buffer)
    is_square = (1.0 - tolerance) <= ratio <= (1.0 + tolerance)

    logger.info(
        f"Image dimensions: {buffer.width}x{buffer.height}, ratio: {ratio:.4f}, "
        f"is_square_ish: {is_square}"
    )
    return is_square
