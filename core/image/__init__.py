"""
Image representation utilities - modular architecture.

This package provides the engine's view of an image:
- buffer: PixelBuffer, the decoded RGBA8 raster
- converters: Codec collaborator (decode, encode, base64) on Pillow
- processors: Resampling (exact Lanczos resize)
"""

from core.image.buffer import PixelBuffer
from core.image.converters import ImageConverters
from core.image.processors import ImageProcessors

__all__ = ["PixelBuffer", "ImageConverters", "ImageProcessors"]
