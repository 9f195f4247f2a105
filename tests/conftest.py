"""
Pytest configuration and fixtures for image compositor tests
"""

import numpy as np
import pytest

from core.image.buffer import PixelBuffer
from services.image_service import ImageService
from tests.helpers import coordinate_buffer, encode_png


@pytest.fixture
def random_image():
    """Create a random 24x16 RGBA buffer"""
    rng = np.random.default_rng(1234)
    return PixelBuffer(rng.integers(0, 256, (16, 24, 4), dtype=np.uint8))


@pytest.fixture
def coordinate_image():
    """Create a 5x3 buffer with position-encoded pixels"""
    return coordinate_buffer(5, 3)


@pytest.fixture
def png_bytes(random_image):
    """Random image encoded as PNG"""
    return encode_png(random_image)


@pytest.fixture
def image_service():
    """Create ImageService instance for testing"""
    return ImageService()
