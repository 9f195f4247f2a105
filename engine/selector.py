"""
Selector compositing - combine two images pixel by pixel.

A selector is a predicate over integer coordinates ``(x, y, width, height)``
that decides which input supplies each output pixel: the user image where
it is true, the overlay where it is false. Pixels are copied verbatim.

All selectors are evaluated on whole coordinate grids at once by
``selector_mask``; the formulas use integer arithmetic only, so the row or
column on an odd midline belongs to whichever side the inequality puts it.
"""

import logging
from typing import Union

import numpy as np

from core.enums import SelectorKind
from core.exceptions import ValidationError
from core.image.buffer import PixelBuffer
from core.image.processors import ImageProcessors
from core.utils.enum_converter import parse_enum

logger = logging.getLogger(__name__)


def resolve_selector(kind: Union[SelectorKind, str]) -> SelectorKind:
    """
    Parse a selector name (case-insensitive) into a SelectorKind.

    Raises:
        ValidationError: If the name is not a known selector
    """
    selector = parse_enum(kind, SelectorKind, None, normalize=True)
    if selector is None:
        raise ValidationError(
            f"Unknown selector: {kind}",
            details={"allowed": [member.value for member in SelectorKind]},
        )
    return selector


def selector_mask(kind: SelectorKind, width: int, height: int) -> np.ndarray:
    """
    Evaluate a selector over the full (width, height) grid.

    Args:
        kind: Selector to evaluate
        width: Grid width W
        height: Grid height H

    Returns:
        Boolean array of shape (height, width); True selects the user pixel
    """
    y, x = np.ogrid[0:height, 0:width]
    y = y.astype(np.int64)
    x = x.astype(np.int64)
    half_w = width // 2
    half_h = height // 2

    if kind == SelectorKind.TOP_BOTTOM:
        mask = y < half_h
    elif kind == SelectorKind.LEFT_RIGHT:
        mask = x < half_w
    elif kind == SelectorKind.DIAGONAL_TL_BR:
        mask = y * width < x * height
    elif kind == SelectorKind.DIAGONAL_TR_BL:
        mask = y * width < (width - x) * height
    elif kind == SelectorKind.FILTER_TOP:
        mask = y >= half_h
    elif kind == SelectorKind.FILTER_BOTTOM:
        mask = y < half_h
    elif kind == SelectorKind.FILTER_LEFT:
        mask = x >= half_w
    elif kind == SelectorKind.FILTER_RIGHT:
        mask = x < half_w
    else:
        raise ValidationError(f"Unknown selector: {kind}")

    return np.broadcast_to(mask, (height, width))


def combine_selector(
    user: PixelBuffer, overlay: PixelBuffer, kind: Union[SelectorKind, str]
) -> PixelBuffer:
    """
    Combine two images using a selector.

    The overlay is resampled to exactly the user's dimensions first, so
    the output always has the user's size.

    Args:
        user: Main image; supplies pixels where the selector is true
        overlay: Overlay image; supplies pixels where the selector is false
        kind: Selector kind or its name

    Returns:
        Combined pixel buffer with the user's dimensions
    """
    selector = resolve_selector(kind)
    width, height = user.size

    overlay = ImageProcessors.resize_exact(overlay, width, height)
    mask = selector_mask(selector, width, height)

    combined = np.where(mask[:, :, np.newaxis], user.pixels, overlay.pixels)
    logger.debug(f"Combined {width}x{height} with selector {selector.value}")
    return PixelBuffer(combined)
