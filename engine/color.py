"""
Color transforms on RGBA pixel buffers.

Every transform returns a new buffer. Unless stated otherwise the alpha
channel is copied through untouched.
"""

import logging
import math

import cv2
import numpy as np

from core.constants import ColorConstants, ImageConstants
from core.exceptions import ValidationError
from core.image.buffer import PixelBuffer

logger = logging.getLogger(__name__)

_MAX = np.float32(ImageConstants.MAX_CHANNEL_VALUE)
_SEPIA = np.array(ColorConstants.SEPIA_MATRIX, dtype=np.float32)
_LUMA_WEIGHTS = np.array(ColorConstants.LUMA_WEIGHTS, dtype=np.uint32)


def _with_rgb(buffer: PixelBuffer, rgb: np.ndarray) -> PixelBuffer:
    """Combine new color channels with the buffer's original alpha."""
    out = np.empty_like(buffer.pixels)
    out[:, :, :3] = rgb
    out[:, :, 3] = buffer.alpha
    return PixelBuffer(out)


def grayscale(buffer: PixelBuffer) -> PixelBuffer:
    """
    Convert to luminance and expand back to RGBA.

    Uses the Rec. 709 (sRGB) weights in integer arithmetic,
    ``(2126 R + 7152 G + 722 B) // 10000``. The single channel intermediate
    has no alpha, so the result is fully opaque.
    """
    luma = (buffer.rgb.astype(np.uint32) @ _LUMA_WEIGHTS) // ColorConstants.LUMA_DIVISOR
    out = np.empty_like(buffer.pixels)
    out[:, :, :3] = luma[:, :, np.newaxis]
    out[:, :, 3] = ImageConstants.MAX_CHANNEL_VALUE
    return PixelBuffer(out)


def invert(buffer: PixelBuffer) -> PixelBuffer:
    """Replace each color channel v with 255 - v."""
    return _with_rgb(buffer, ImageConstants.MAX_CHANNEL_VALUE - buffer.rgb)


def brighten(buffer: PixelBuffer, value: int) -> PixelBuffer:
    """
    Add ``value`` to every color channel, clamped to [0, 255].

    The documented range is -100..100 but it is not enforced; any integer
    is applied as given. Shifts beyond +/-255 saturate, so the shift is
    capped there before the addition.
    """
    limit = ImageConstants.MAX_CHANNEL_VALUE
    shift = max(-limit, min(limit, int(value)))
    shifted = buffer.rgb.astype(np.int32) + shift
    return _with_rgb(buffer, np.clip(shifted, 0, limit))


def adjust_contrast(buffer: PixelBuffer, factor: float) -> PixelBuffer:
    """
    Scale channel distance from mid-gray.

    ``percent = ((100 + factor) / 100) ** 2``; positive factors increase
    contrast, negative factors flatten it toward gray. Values outside the
    advisory -100..100 range are applied as given. Results are clamped and
    truncated.
    """
    percent = np.float32(((100.0 + factor) / 100.0) ** 2)
    pivot = np.float32(ColorConstants.CONTRAST_PIVOT)

    normalized = buffer.rgb.astype(np.float32) / _MAX
    adjusted = ((normalized - pivot) * percent + pivot) * _MAX
    return _with_rgb(buffer, np.clip(adjusted, 0, _MAX).astype(np.uint8))


def sepia(buffer: PixelBuffer) -> PixelBuffer:
    """Apply the fixed sepia color matrix, capped at 255 and truncated."""
    rgb = buffer.rgb.astype(np.float32)
    r, g, b = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]

    toned = np.stack(
        [_SEPIA[row, 0] * r + _SEPIA[row, 1] * g + _SEPIA[row, 2] * b for row in range(3)],
        axis=2,
    )
    return _with_rgb(buffer, np.minimum(toned, _MAX).astype(np.uint8))


def blur(buffer: PixelBuffer, sigma: float) -> PixelBuffer:
    """
    Gaussian blur of all four channels with edge replication.

    Args:
        buffer: Input pixel buffer
        sigma: Standard deviation in pixels; 0.0 leaves the image unchanged

    Raises:
        ValidationError: If sigma is negative or NaN
    """
    if math.isnan(sigma) or sigma < ColorConstants.MIN_BLUR_SIGMA:
        raise ValidationError(
            f"Blur sigma must be >= {ColorConstants.MIN_BLUR_SIGMA}, got {sigma}",
            details={"sigma": sigma},
        )

    if sigma == 0.0:
        return buffer.copy()

    blurred = cv2.GaussianBlur(
        buffer.pixels, (0, 0), sigmaX=sigma, sigmaY=sigma, borderType=cv2.BORDER_REPLICATE
    )
    logger.debug(f"Gaussian blur sigma={sigma} on {buffer.width}x{buffer.height}")
    return PixelBuffer(blurred)
