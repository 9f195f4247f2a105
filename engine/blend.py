"""
Alpha blend compositing - Porter-Duff "over" with a global opacity.

The overlay's alpha is scaled by ``opacity`` and composited over the base
in normalized float32 space, then un-premultiplied by the output alpha.
Evaluation order is fixed (see ``composite_over``) because it determines
rounding of the truncated 8-bit result.
"""

import logging
import math

import numpy as np
from pydantic import BaseModel, Field

from core.constants import CompositeConstants, ImageConstants
from core.exceptions import ValidationError
from core.image.buffer import PixelBuffer
from core.image.processors import ImageProcessors

logger = logging.getLogger(__name__)

_MAX = np.float32(ImageConstants.MAX_CHANNEL_VALUE)
_ONE = np.float32(1.0)


class BlendParameters(BaseModel):
    """Alpha blend parameters"""

    opacity: float = Field(
        default=CompositeConstants.DEFAULT_OPACITY,
        description="Overlay opacity (0.0 = transparent, 1.0 = opaque)",
    )

    def validate_range(self) -> "BlendParameters":
        """
        Check opacity against [0.0, 1.0], inclusive.

        Raises:
            ValidationError: If opacity is out of range or NaN
        """
        if (
            math.isnan(self.opacity)
            or self.opacity < CompositeConstants.MIN_OPACITY
            or self.opacity > CompositeConstants.MAX_OPACITY
        ):
            raise ValidationError(
                f"Opacity must be between {CompositeConstants.MIN_OPACITY} and "
                f"{CompositeConstants.MAX_OPACITY}, got {self.opacity}",
                details={"opacity": self.opacity},
            )
        return self


def composite_over(base: np.ndarray, overlay: np.ndarray, opacity: float) -> np.ndarray:
    """
    Porter-Duff "over" on two same-shape RGBA uint8 arrays.

    Per pixel, normalized to [0, 1]:
        oa = overlay.a * opacity
        ua = base.a
        alpha_out = oa + ua * (1 - oa)
        c = (o * oa + u * ua * (1 - oa)) / alpha_out   (0 if alpha_out == 0)

    Returns:
        RGBA uint8 array, channels scaled by 255, clamped and truncated
    """
    u = base.astype(np.float32) / _MAX
    o = overlay.astype(np.float32) / _MAX

    ua = u[:, :, 3:4]
    oa = o[:, :, 3:4] * np.float32(opacity)
    inv_oa = _ONE - oa

    alpha_out = oa + ua * inv_oa
    weighted = o[:, :, :3] * oa + u[:, :, :3] * ua * inv_oa

    color = np.zeros_like(weighted)
    np.divide(
        weighted,
        alpha_out,
        out=color,
        where=np.broadcast_to(alpha_out > 0, weighted.shape),
    )

    out = np.empty(base.shape, dtype=np.uint8)
    out[:, :, :3] = np.clip(color * _MAX, 0, _MAX).astype(np.uint8)
    out[:, :, 3:4] = np.clip(alpha_out * _MAX, 0, _MAX).astype(np.uint8)
    return out


def overlay_alpha_blend(base: PixelBuffer, overlay: PixelBuffer, opacity: float) -> PixelBuffer:
    """
    Composite ``overlay`` over ``base`` with an extra global opacity.

    The overlay is resampled to the base's dimensions first.

    Args:
        base: Background image
        overlay: Foreground image
        opacity: Opacity of the overlay layer in [0.0, 1.0]

    Returns:
        Composited pixel buffer with the base's dimensions

    Raises:
        ValidationError: If opacity is outside [0.0, 1.0]
    """
    params = BlendParameters(opacity=opacity).validate_range()

    overlay = ImageProcessors.match_size(overlay, base)
    blended = composite_over(base.pixels, overlay.pixels, params.opacity)

    logger.debug(f"Alpha blended {base.width}x{base.height} at opacity {params.opacity}")
    return PixelBuffer(blended)
