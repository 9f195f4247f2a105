"""
Image processing operations.

Handles resampling tasks shared by the compositors:
- Exact resize (aspect ratio not preserved)
- Matching one buffer to another's dimensions
"""

import logging

from PIL import Image

from core.exceptions import ValidationError
from core.image.buffer import PixelBuffer
from core.image.converters import ImageConverters

logger = logging.getLogger(__name__)


class ImageProcessors:
    """Resampling helpers built on Pillow."""

    @staticmethod
    def resize_exact(buffer: PixelBuffer, width: int, height: int) -> PixelBuffer:
        """
        Resize buffer to exactly (width, height) with a Lanczos filter.

        Aspect ratio is not preserved. A buffer that already has the target
        size is returned as an identical copy without resampling.

        Args:
            buffer: Input pixel buffer
            width: Target width in pixels
            height: Target height in pixels

        Returns:
            Resized pixel buffer
        """
        if width <= 0 or height <= 0:
            raise ValidationError(f"Target size must be positive, got {width}x{height}")

        if buffer.size == (width, height):
            return buffer.copy()

        pil_image = ImageConverters.buffer_to_pil(buffer)
        resized = pil_image.resize((width, height), Image.Resampling.LANCZOS)

        logger.debug(f"Resampled {buffer.width}x{buffer.height} -> {width}x{height}")
        return ImageConverters.pil_to_buffer(resized)

    @staticmethod
    def match_size(buffer: PixelBuffer, reference: PixelBuffer) -> PixelBuffer:
        """Resize ``buffer`` to the dimensions of ``reference``."""
        return ImageProcessors.resize_exact(buffer, reference.width, reference.height)
