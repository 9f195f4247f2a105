"""
Image format conversion utilities.

Handles conversions between the engine's pixel buffers and the outside world:
- Encoded bytes (PNG, JPEG, WebP, ...) via Pillow
- Base64 encoded strings (API transport)
- PIL Images (resampling)
"""

import base64
import binascii
import io
import logging
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from core.enums import OutputFormat
from core.exceptions import DecodeError, EncodeError
from core.image.buffer import PixelBuffer
from schemas.common import OutputConfig

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between image representations."""

    @staticmethod
    def buffer_to_pil(buffer: PixelBuffer) -> Image.Image:
        """
        Convert pixel buffer to an RGBA PIL Image.

        Args:
            buffer: Pixel buffer

        Returns:
            PIL Image in RGBA mode
        """
        return Image.fromarray(buffer.pixels)

    @staticmethod
    def pil_to_buffer(image: Image.Image) -> PixelBuffer:
        """
        Convert any PIL Image to a pixel buffer.

        Palette, grayscale and RGB images are expanded to RGBA; images
        without an alpha channel become fully opaque.

        Args:
            image: PIL Image

        Returns:
            PixelBuffer
        """
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return PixelBuffer(np.asarray(image, dtype=np.uint8))

    @staticmethod
    def decode_image(data: bytes) -> PixelBuffer:
        """
        Decode encoded image bytes into a pixel buffer.

        Args:
            data: Encoded image (PNG, JPEG, WebP or any format Pillow reads)

        Returns:
            Decoded RGBA pixel buffer

        Raises:
            DecodeError: If the bytes are empty, malformed or unsupported
        """
        if not data:
            raise DecodeError("empty input")

        try:
            with Image.open(io.BytesIO(data)) as image:
                image.load()
                buffer = ImageConverters.pil_to_buffer(image)
                source_format = image.format
        except UnidentifiedImageError as e:
            raise DecodeError("unsupported or unrecognized image format") from e
        except (OSError, ValueError, SyntaxError) as e:
            raise DecodeError(str(e)) from e

        logger.debug(f"Decoded {source_format} image: {buffer.width}x{buffer.height}")
        return buffer

    @staticmethod
    def encode_image(buffer: PixelBuffer, config: Optional[OutputConfig] = None) -> bytes:
        """
        Encode a pixel buffer with the given output configuration.

        Args:
            buffer: Pixel buffer to encode
            config: Output format and compression preset (PNG/default if None)

        Returns:
            Encoded image bytes

        Raises:
            EncodeError: If Pillow fails to serialize the image
        """
        config = config or OutputConfig()
        image = ImageConverters.buffer_to_pil(buffer)
        output = io.BytesIO()

        try:
            if config.format == OutputFormat.JPEG:
                # JPEG has no alpha channel
                image.convert("RGB").save(
                    output, format="JPEG", quality=config.jpeg_quality, optimize=True
                )
            else:
                image.save(output, format="PNG", compress_level=config.png_compress_level)
        except (OSError, ValueError, KeyError) as e:
            raise EncodeError(str(e)) from e

        encoded = output.getvalue()
        logger.debug(
            f"Encoded {buffer.width}x{buffer.height} as {config.format.value} "
            f"({config.compression_level.value}): {len(encoded)} bytes"
        )
        return encoded

    @staticmethod
    def to_base64(data: bytes) -> str:
        """
        Convert encoded image bytes to a base64 string.

        Args:
            data: Encoded image bytes

        Returns:
            Base64 encoded string
        """
        return base64.b64encode(data).decode("utf-8")

    @staticmethod
    def from_base64(base64_string: str) -> bytes:
        """
        Convert base64 string to encoded image bytes.

        A ``data:image/...;base64,`` prefix is accepted and stripped.

        Args:
            base64_string: Base64 encoded image

        Returns:
            Encoded image bytes

        Raises:
            DecodeError: If the string is not valid base64
        """
        if base64_string.startswith("data:") and "," in base64_string:
            base64_string = base64_string.split(",", 1)[1]

        try:
            return base64.b64decode(base64_string, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"invalid base64 payload ({e})") from e
