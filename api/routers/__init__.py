"""
API Routers for the image compositor
"""

from . import compose, metadata, system, transform

__all__ = ["transform", "compose", "metadata", "system"]
