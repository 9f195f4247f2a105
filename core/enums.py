"""
Centralized enumerations for the image compositor.

All string-valued enums derive from ``str`` so they serialize cleanly in
Pydantic schemas and JSON responses.
"""

from enum import Enum


class SelectorKind(str, Enum):
    """Pixel selection rules for two-image compositing."""

    TOP_BOTTOM = "top_bottom"
    LEFT_RIGHT = "left_right"
    DIAGONAL_TL_BR = "diagonal_tl_br"
    DIAGONAL_TR_BL = "diagonal_tr_bl"
    FILTER_TOP = "filter_top"
    FILTER_BOTTOM = "filter_bottom"
    FILTER_LEFT = "filter_left"
    FILTER_RIGHT = "filter_right"

    @property
    def label(self) -> str:
        """Human-readable description used in progress logs."""
        return _SELECTOR_LABELS[self]


_SELECTOR_LABELS = {
    SelectorKind.TOP_BOTTOM: "top/bottom split",
    SelectorKind.LEFT_RIGHT: "left/right split",
    SelectorKind.DIAGONAL_TL_BR: "diagonal top-left to bottom-right",
    SelectorKind.DIAGONAL_TR_BL: "diagonal top-right to bottom-left",
    SelectorKind.FILTER_TOP: "filter on top",
    SelectorKind.FILTER_BOTTOM: "filter on bottom",
    SelectorKind.FILTER_LEFT: "filter on left",
    SelectorKind.FILTER_RIGHT: "filter on right",
}


class Operation(str, Enum):
    """Single-image transforms exposed by the service and the API."""

    ROTATE90 = "rotate90"
    ROTATE180 = "rotate180"
    ROTATE270 = "rotate270"
    FLIP_HORIZONTAL = "flip_horizontal"
    FLIP_VERTICAL = "flip_vertical"
    GRAYSCALE = "grayscale"
    INVERT = "invert"
    SEPIA = "sepia"
    BRIGHTEN = "brighten"
    ADJUST_CONTRAST = "adjust_contrast"
    BLUR = "blur"


class OutputFormat(str, Enum):
    """Encoded output formats."""

    PNG = "png"
    JPEG = "jpeg"


class CompressionLevel(str, Enum):
    """Encoder presets, mapped to format-specific values in core.constants."""

    FAST = "fast"
    DEFAULT = "default"
    BEST = "best"
