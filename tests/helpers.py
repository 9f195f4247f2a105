"""
Shared helpers for building and encoding test images
"""

import numpy as np

from core.image.buffer import PixelBuffer
from core.image.converters import ImageConverters
from schemas.common import OutputConfig

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
TRANSPARENT = (0, 0, 0, 0)


def solid(width, height, color):
    """Create a buffer filled with one color"""
    return PixelBuffer.filled(width, height, color)


def coordinate_buffer(width, height):
    """Create a buffer whose pixel at (x, y) is (x, y, x + y, 255)"""
    y, x = np.mgrid[0:height, 0:width]
    pixels = np.stack([x, y, x + y, np.full_like(x, 255)], axis=2).astype(np.uint8)
    return PixelBuffer(pixels)


def encode_png(buffer):
    """Encode a buffer as lossless PNG bytes"""
    return ImageConverters.encode_image(buffer, OutputConfig())


def decode(data):
    """Decode encoded bytes to a buffer"""
    return ImageConverters.decode_image(data)


def to_payload(buffer):
    """Encode a buffer as a base64 PNG request payload"""
    return ImageConverters.to_base64(encode_png(buffer))


def from_payload(payload):
    """Decode a base64 response payload to a buffer"""
    return ImageConverters.decode_image(ImageConverters.from_base64(payload))
