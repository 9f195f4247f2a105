"""
Constants and configuration values for the image compositor.
Centralizes all magic numbers and encoder presets.
"""

from core.enums import CompressionLevel


# Image Constants
class ImageConstants:
    """Constants related to pixel buffers and decoding."""

    # Pixel layout
    CHANNELS = 4  # RGBA
    MAX_CHANNEL_VALUE = 255

    # Upload limits (API layer)
    DEFAULT_MAX_UPLOAD_MB = 20
    MIN_UPLOAD_MB = 1
    MAX_UPLOAD_MB = 200


# Color Transform Constants
class ColorConstants:
    """Constants for color transforms."""

    # Sepia matrix, rows produce R', G', B' from (R, G, B)
    SEPIA_MATRIX = (
        (0.393, 0.769, 0.189),
        (0.349, 0.686, 0.168),
        (0.272, 0.534, 0.131),
    )

    # Rec. 709 luma weights, scaled by LUMA_DIVISOR
    LUMA_WEIGHTS = (2126, 7152, 722)
    LUMA_DIVISOR = 10000

    # Advisory ranges, not enforced
    BRIGHTNESS_MIN = -100
    BRIGHTNESS_MAX = 100
    CONTRAST_MIN = -100.0
    CONTRAST_MAX = 100.0

    # Contrast pivot in normalized space
    CONTRAST_PIVOT = 0.5

    MIN_BLUR_SIGMA = 0.0


# Compositing Constants
class CompositeConstants:
    """Constants for two-image compositing."""

    MIN_OPACITY = 0.0
    MAX_OPACITY = 1.0
    DEFAULT_OPACITY = 0.5


# Geometry Constants
class GeometryConstants:
    """Constants for metadata utilities."""

    SQUARE_TOLERANCE = 0.02  # 2% band around 1:1, inclusive


# Output Encoding Constants
class OutputConstants:
    """Encoder presets per compression level."""

    JPEG_QUALITY = {
        CompressionLevel.FAST: 75,
        CompressionLevel.DEFAULT: 85,
        CompressionLevel.BEST: 95,
    }

    # zlib levels passed to Pillow's PNG encoder
    PNG_COMPRESS_LEVEL = {
        CompressionLevel.FAST: 1,
        CompressionLevel.DEFAULT: 6,
        CompressionLevel.BEST: 9,
    }

    MIME_TYPES = {
        "png": "image/png",
        "jpeg": "image/jpeg",
    }
