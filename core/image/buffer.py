"""
Pixel buffer - canonical in-memory representation of a decoded image.
"""

from typing import Tuple

import numpy as np

from core.constants import ImageConstants
from core.exceptions import ValidationError


class PixelBuffer:
    """
    Decoded RGBA8 raster image.

    Pixels are stored row-major as a NumPy ``uint8`` array of shape
    ``(height, width, 4)``. The constructor always copies, so a buffer owns
    its data and operations can hand out new buffers without aliasing their
    inputs.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: np.ndarray):
        array = np.array(pixels, dtype=np.uint8, copy=True)

        if array.ndim != 3 or array.shape[2] != ImageConstants.CHANNELS:
            raise ValidationError(
                f"Pixel buffer must have shape (height, width, 4), got {array.shape}"
            )
        if array.shape[0] == 0 or array.shape[1] == 0:
            raise ValidationError(
                f"Pixel buffer dimensions must be positive, got "
                f"{array.shape[1]}x{array.shape[0]}"
            )

        self._pixels = np.ascontiguousarray(array)

    @classmethod
    def filled(cls, width: int, height: int, color: Tuple[int, int, int, int]) -> "PixelBuffer":
        """Create a buffer with every pixel set to ``color``."""
        if width <= 0 or height <= 0:
            raise ValidationError(f"Pixel buffer dimensions must be positive, got {width}x{height}")
        pixels = np.empty((height, width, ImageConstants.CHANNELS), dtype=np.uint8)
        pixels[:, :] = color
        return cls(pixels)

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "PixelBuffer":
        """Create a buffer from raw row-major RGBA bytes."""
        expected = width * height * ImageConstants.CHANNELS
        if len(data) != expected:
            raise ValidationError(
                f"Raw buffer length {len(data)} does not match {width}x{height} RGBA "
                f"({expected} bytes)"
            )
        pixels = np.frombuffer(data, dtype=np.uint8).reshape(
            height, width, ImageConstants.CHANNELS
        )
        return cls(pixels)

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return self.width, self.height

    @property
    def rgb(self) -> np.ndarray:
        return self._pixels[:, :, :3]

    @property
    def alpha(self) -> np.ndarray:
        return self._pixels[:, :, 3]

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Return the RGBA tuple at column ``x``, row ``y``."""
        r, g, b, a = self._pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def to_bytes(self) -> bytes:
        """Raw row-major RGBA bytes; length is width * height * 4."""
        return self._pixels.tobytes()

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self._pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
