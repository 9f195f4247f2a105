"""
Tests for engine.color
"""

import numpy as np
import pytest

from core.exceptions import ValidationError
from core.image.buffer import PixelBuffer
from engine.color import adjust_contrast, blur, brighten, grayscale, invert, sepia
from tests.helpers import BLACK, WHITE, solid


class TestGrayscale:
    def test_channels_equal(self, random_image):
        out = grayscale(random_image)
        rgb = out.rgb
        np.testing.assert_array_equal(rgb[:, :, 0], rgb[:, :, 1])
        np.testing.assert_array_equal(rgb[:, :, 1], rgb[:, :, 2])

    def test_alpha_forced_opaque(self):
        out = grayscale(solid(3, 3, (10, 20, 30, 0)))
        assert (out.alpha == 255).all()

    def test_extremes_preserved(self):
        assert grayscale(solid(2, 2, WHITE)).pixel(0, 0) == WHITE
        assert grayscale(solid(2, 2, BLACK)).pixel(0, 0) == BLACK

    @pytest.mark.parametrize(
        "color,luma",
        [
            ((255, 0, 0, 255), 54),
            ((0, 255, 0, 255), 182),
            ((0, 0, 255, 255), 18),
            ((10, 20, 30, 255), 18),
        ],
    )
    def test_rec709_weights(self, color, luma):
        assert grayscale(solid(1, 1, color)).pixel(0, 0) == (luma, luma, luma, 255)


class TestInvert:
    def test_values(self):
        out = invert(solid(2, 2, (10, 20, 30, 40)))
        assert out.pixel(1, 1) == (245, 235, 225, 40)

    def test_involution(self, random_image):
        assert invert(invert(random_image)) == random_image

    def test_alpha_unchanged(self, random_image):
        np.testing.assert_array_equal(invert(random_image).alpha, random_image.alpha)


class TestBrighten:
    def test_positive_shift_clamps(self):
        out = brighten(solid(1, 1, (250, 10, 100, 7)), 10)
        assert out.pixel(0, 0) == (255, 20, 110, 7)

    def test_negative_shift_clamps(self):
        out = brighten(solid(1, 1, (250, 10, 100, 7)), -20)
        assert out.pixel(0, 0) == (230, 0, 80, 7)

    def test_out_of_range_value_passes_through(self):
        out = brighten(solid(1, 1, (1, 2, 3, 9)), 300)
        assert out.pixel(0, 0) == (255, 255, 255, 9)

    def test_zero_is_identity(self, random_image):
        assert brighten(random_image, 0) == random_image

    def test_extreme_int32_values_saturate(self):
        img = solid(1, 1, (10, 20, 30, 255))
        assert brighten(img, 2**31 - 1).pixel(0, 0) == (255, 255, 255, 255)
        assert brighten(img, -(2**31)).pixel(0, 0) == (0, 0, 0, 255)


class TestAdjustContrast:
    def test_endpoints_fixed_at_zero_factor(self):
        img = PixelBuffer(np.array([[[0, 255, 0, 50]]], dtype=np.uint8))
        assert adjust_contrast(img, 0.0).pixel(0, 0) == (0, 255, 0, 50)

    def test_positive_factor_spreads_values(self):
        img = PixelBuffer(np.array([[[0, 128, 255, 9]]], dtype=np.uint8))
        out = adjust_contrast(img, 100.0)
        # percent = 4: 128 -> ((128/255 - 0.5) * 4 + 0.5) * 255 = 129.5
        assert out.pixel(0, 0) == (0, 129, 255, 9)

    def test_minus_hundred_flattens_to_gray(self, random_image):
        out = adjust_contrast(random_image, -100.0)
        assert (out.rgb == 127).all()
        np.testing.assert_array_equal(out.alpha, random_image.alpha)

    def test_negative_factor_reduces_spread(self, random_image):
        out = adjust_contrast(random_image, -50.0)
        assert out.rgb.astype(float).std() < random_image.rgb.astype(float).std()


class TestSepia:
    def test_white(self):
        assert sepia(solid(1, 1, WHITE)).pixel(0, 0) == (255, 255, 238, 255)

    def test_black(self):
        assert sepia(solid(1, 1, BLACK)).pixel(0, 0) == BLACK

    def test_truncates(self):
        out = sepia(solid(1, 1, (100, 0, 0, 128)))
        assert out.pixel(0, 0) == (39, 34, 27, 128)

    def test_alpha_unchanged(self, random_image):
        np.testing.assert_array_equal(sepia(random_image).alpha, random_image.alpha)


class TestBlur:
    def test_negative_sigma_rejected(self, random_image):
        with pytest.raises(ValidationError):
            blur(random_image, -1.0)

    def test_nan_sigma_rejected(self, random_image):
        with pytest.raises(ValidationError):
            blur(random_image, float("nan"))

    def test_zero_sigma_identity(self, random_image):
        assert blur(random_image, 0.0) == random_image

    def test_uniform_image_unchanged(self):
        img = solid(9, 7, (120, 60, 30, 255))
        out = blur(img, 2.0)
        np.testing.assert_allclose(out.pixels, img.pixels, atol=1)

    def test_smooths_noise(self, random_image):
        out = blur(random_image, 1.5)
        assert out.size == random_image.size
        assert out.pixels.astype(float).std() < random_image.pixels.astype(float).std()
