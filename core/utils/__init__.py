"""
Utility modules for core functionality.

Modules:
- decorators: Timing helpers (timer)
- enum_converter: Enum parsing
"""

from .decorators import timer
from .enum_converter import parse_enum

__all__ = ["timer", "parse_enum"]
