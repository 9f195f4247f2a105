"""
Error hierarchy for the image engine.

Every failure inside the engine or its codec collaborators is raised as one
of these types. The API layer maps them to HTTP responses in
api/exceptions.py; nothing in the engine catches and hides them.
"""

from typing import Any, Dict, Optional


class ImageEngineError(Exception):
    """Base class for all engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for API error responses."""
        content: Dict[str, Any] = {"error": self.message, "type": type(self).__name__}
        if self.details:
            content["details"] = self.details
        return content


class DecodeError(ImageEngineError):
    """Input bytes are malformed or in an unsupported format."""

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Failed to load image: {reason}", details)


class EncodeError(ImageEngineError):
    """Output buffer could not be serialized."""

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Failed to encode image: {reason}", details)


class ValidationError(ImageEngineError):
    """A caller-supplied parameter violates a documented precondition."""
