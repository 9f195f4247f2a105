"""
Schemas Package

This package contains all Pydantic schemas for data validation and serialization,
organized by domain for better maintainability.

These schemas are shared across application layers:
- API (routers, dependencies)
- Services (business logic)
- Engine and core (crop regions, output configuration)
"""

# Re-export enums from centralized location for convenience
from core.enums import CompressionLevel, Operation, OutputFormat, SelectorKind

# Common models (core data structures)
from .common import CropRegion, OutputConfig, Size

# Image processing models
from .image import (
    BlendRequest,
    CropSquareRequest,
    DimensionsResponse,
    ImageRequest,
    ImageResponse,
    SelectorCombineRequest,
    SquareIshResponse,
    TransformRequest,
)

# System models
from .system import DebugSettings, SystemStatus

# Explicitly declare public API for re-export
__all__ = [
    # Common models
    "Size",
    "CropRegion",
    "OutputConfig",
    # Image models
    "TransformRequest",
    "CropSquareRequest",
    "SelectorCombineRequest",
    "BlendRequest",
    "ImageRequest",
    "ImageResponse",
    "DimensionsResponse",
    "SquareIshResponse",
    # System models
    "SystemStatus",
    "DebugSettings",
    # Enums (re-exported from core.enums)
    "CompressionLevel",
    "Operation",
    "OutputFormat",
    "SelectorKind",
]
