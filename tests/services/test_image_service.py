"""
Tests for ImageService
"""

import logging

import pytest

from core.enums import CompressionLevel, Operation, OutputFormat, SelectorKind
from core.exceptions import DecodeError, ValidationError
from schemas.common import OutputConfig
from services.image_service import ImageResult, ImageService
from tests.helpers import BLACK, BLUE, RED, WHITE, coordinate_buffer, decode, encode_png, solid


class TestTransform:
    """Test single-image transforms through the service"""

    def test_returns_encoded_result(self, image_service, png_bytes):
        result = image_service.transform(png_bytes, Operation.ROTATE90)
        assert isinstance(result, ImageResult)
        assert (result.width, result.height) == (16, 24)
        assert result.format == OutputFormat.PNG
        assert result.processing_time_ms >= 1
        assert decode(result.data).size == (16, 24)

    def test_operation_name_accepted(self, image_service):
        data = encode_png(coordinate_buffer(4, 3))
        result = image_service.transform(data, "Flip_Horizontal")
        assert decode(result.data).pixel(0, 0) == coordinate_buffer(4, 3).pixel(3, 0)

    def test_parameterized_operation(self, image_service):
        data = encode_png(solid(2, 2, (10, 20, 30, 255)))
        result = image_service.transform(data, Operation.BRIGHTEN, value=5)
        assert decode(result.data).pixel(0, 0) == (15, 25, 35, 255)

    def test_missing_parameter_rejected(self, image_service, png_bytes):
        with pytest.raises(ValidationError, match="sigma"):
            image_service.transform(png_bytes, Operation.BLUR)

    def test_unknown_operation_rejected(self, image_service, png_bytes):
        with pytest.raises(ValidationError, match="Unknown operation"):
            image_service.transform(png_bytes, "posterize")

    def test_invalid_bytes_raise_decode_error(self, image_service):
        with pytest.raises(DecodeError, match="Failed to load image"):
            image_service.transform(b"\x00\x01\x02", Operation.INVERT)

    def test_logs_progress(self, image_service, png_bytes, caplog):
        with caplog.at_level(logging.INFO, logger="services.image_service"):
            image_service.transform(png_bytes, Operation.ADJUST_CONTRAST, factor=20.0)
        assert "Processing: Adjust contrast by 20.0" in caplog.text

    def test_output_override(self, image_service, png_bytes):
        config = OutputConfig(format=OutputFormat.JPEG, compression_level=CompressionLevel.FAST)
        result = image_service.transform(png_bytes, Operation.GRAYSCALE, output=config)
        assert result.format == OutputFormat.JPEG
        assert result.data.startswith(b"\xff\xd8")

    def test_default_output_from_constructor(self, png_bytes):
        service = ImageService(OutputConfig(format=OutputFormat.JPEG))
        result = service.transform(png_bytes, Operation.SEPIA)
        assert result.data.startswith(b"\xff\xd8")


class TestCropSquare:
    def test_crop(self, image_service):
        data = encode_png(coordinate_buffer(6, 6))
        result = image_service.crop_square(data, 1, 2, 3)
        out = decode(result.data)
        assert out.size == (3, 3)
        assert out.pixel(0, 0) == (1, 2, 3, 255)

    def test_out_of_bounds(self, image_service):
        data = encode_png(coordinate_buffer(6, 6))
        with pytest.raises(ValidationError, match="exceeds image height"):
            image_service.crop_square(data, 0, 4, 3)


class TestCombine:
    def test_combine(self, image_service):
        user = encode_png(solid(4, 4, RED))
        overlay = encode_png(solid(4, 4, BLUE))
        result = image_service.combine(user, overlay, SelectorKind.TOP_BOTTOM)
        out = decode(result.data)
        assert out.pixel(0, 0) == RED
        assert out.pixel(0, 3) == BLUE

    def test_logs_selector_label(self, image_service, caplog):
        user = encode_png(solid(2, 2, RED))
        with caplog.at_level(logging.INFO, logger="services.image_service"):
            image_service.combine(user, user, "left_right")
        assert "Processing: Combine images" in caplog.text

    def test_unknown_selector(self, image_service, png_bytes):
        with pytest.raises(ValidationError):
            image_service.combine(png_bytes, png_bytes, "zigzag")


class TestBlend:
    def test_blend(self, image_service):
        base = encode_png(solid(3, 3, BLACK))
        overlay = encode_png(solid(3, 3, WHITE))
        result = image_service.blend(base, overlay, 0.5)
        assert decode(result.data).pixel(2, 2) == (127, 127, 127, 255)

    def test_opacity_checked_before_decoding(self, image_service):
        # invalid bytes would raise DecodeError if they were decoded first
        with pytest.raises(ValidationError):
            image_service.blend(b"junk", b"junk", 2.0)


class TestMetadata:
    def test_dimensions(self, image_service, png_bytes):
        assert image_service.dimensions(png_bytes) == (24, 16)

    def test_is_square_ish(self, image_service):
        assert image_service.is_square_ish(encode_png(solid(100, 99, RED))) is True
        assert image_service.is_square_ish(encode_png(solid(50, 40, RED))) is False

    def test_describe(self, image_service, png_bytes):
        info = image_service.describe(png_bytes)
        assert info["width"] == 24
        assert info["height"] == 16
        assert info["aspect_ratio"] == pytest.approx(1.5)
        assert info["is_square_ish"] is False


class TestResult:
    def test_to_base64(self, image_service, png_bytes):
        result = image_service.transform(png_bytes, Operation.INVERT)
        assert isinstance(result.to_base64(), str)
        assert result.data.startswith(b"\x89PNG\r\n\x1a\n")
