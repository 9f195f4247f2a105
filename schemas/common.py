"""
Common data models used across the application.

This module contains core data structures shared by the engine, the
service layer and the API:
- Size: image dimensions
- CropRegion: square crop rectangle
- OutputConfig: encoder selection for results
"""

from typing import Dict

from pydantic import BaseModel, Field

from core.constants import OutputConstants
from core.enums import CompressionLevel, OutputFormat


class Size(BaseModel):
    """Image dimensions in pixels"""

    width: int = Field(..., gt=0, description="Width")
    height: int = Field(..., gt=0, description="Height")

    def to_dict(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}


class CropRegion(BaseModel):
    """
    Square sub-rectangle of an image.

    Bounds against a concrete image are checked by the geometric engine,
    not here, so the error can cite which edge was exceeded.
    """

    x: int = Field(..., description="Left edge in pixels")
    y: int = Field(..., description="Top edge in pixels")
    size: int = Field(..., description="Edge length in pixels")

    @property
    def x2(self) -> int:
        return self.x + self.size

    @property
    def y2(self) -> int:
        return self.y + self.size


class OutputConfig(BaseModel):
    """
    Output encoding configuration.

    JPEG quality and PNG zlib level are derived from the compression level
    (see OutputConstants).
    """

    format: OutputFormat = Field(default=OutputFormat.PNG, description="Output image format")
    compression_level: CompressionLevel = Field(
        default=CompressionLevel.DEFAULT, description="Encoder preset (fast, default, best)"
    )

    @property
    def jpeg_quality(self) -> int:
        return OutputConstants.JPEG_QUALITY[self.compression_level]

    @property
    def png_compress_level(self) -> int:
        return OutputConstants.PNG_COMPRESS_LEVEL[self.compression_level]

    @property
    def mime_type(self) -> str:
        return OutputConstants.MIME_TYPES[self.format.value]
