"""
Image engine - pure pixel operations, no I/O and no HTTP dependencies.

Every function takes PixelBuffer inputs plus parameters and returns a new
PixelBuffer (or a plain value for metadata queries).
"""

from .blend import BlendParameters, composite_over, overlay_alpha_blend
from .color import adjust_contrast, blur, brighten, grayscale, invert, sepia
from .geometric import crop_square, flip_horizontal, flip_vertical, rotate90, rotate180, rotate270
from .metadata import aspect_ratio, dimensions, is_square_ish
from .selector import combine_selector, resolve_selector, selector_mask

__all__ = [
    "rotate90",
    "rotate180",
    "rotate270",
    "flip_horizontal",
    "flip_vertical",
    "crop_square",
    "grayscale",
    "invert",
    "brighten",
    "adjust_contrast",
    "sepia",
    "blur",
    "combine_selector",
    "resolve_selector",
    "selector_mask",
    "BlendParameters",
    "composite_over",
    "overlay_alpha_blend",
    "dimensions",
    "aspect_ratio",
    "is_square_ish",
]
