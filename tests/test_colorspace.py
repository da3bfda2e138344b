# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (RGB ↔ HSL)."""

import numpy as np
import pytest

from hslcolor.convert.colorspace import (
    rgb_to_hsl,
    hsl_to_rgb,
    hue_to_rgb,
    rgb_to_hsl_array,
    hsl_to_rgb_array,
    rgb255_to_hsl_array,
)


class TestRGBToHSL:
    """Scalar RGB → HSL, including branch order and degenerate input."""

    def test_primary_red(self):
        h, s, l = rgb_to_hsl(1.0, 0.0, 0.0)
        assert h == pytest.approx(0.0)
        assert s == pytest.approx(1.0)
        assert l == pytest.approx(0.5)

    def test_primary_green(self):
        h, s, l = rgb_to_hsl(0.0, 1.0, 0.0)
        assert h == pytest.approx(1 / 3)

    def test_primary_blue(self):
        h, s, l = rgb_to_hsl(0.0, 0.0, 1.0)
        assert h == pytest.approx(2 / 3)

    def test_negative_hue_wraps(self):
        """Magenta: red branch gives -1/6, wrapped to 5/6."""
        h, s, l = rgb_to_hsl(1.0, 0.0, 1.0)
        assert h == pytest.approx(5 / 6)

    def test_red_green_tie_takes_red_branch(self):
        h, _, _ = rgb_to_hsl(1.0, 1.0, 0.0)
        assert h == pytest.approx(1 / 6, abs=1e-15)

    def test_green_blue_tie_takes_green_branch(self):
        h, _, _ = rgb_to_hsl(0.0, 1.0, 1.0)
        assert h == pytest.approx(0.5)

    def test_gray_has_zero_hue_and_saturation(self):
        h, s, l = rgb_to_hsl(0.5, 0.5, 0.5)
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(0.5)

    def test_dark_saturation_branch(self):
        """Lightness below 0.5 divides by max + min."""
        h, s, l = rgb_to_hsl(0.2, 0.1, 0.1)
        assert l == pytest.approx(0.15)
        assert s == pytest.approx(0.1 / 0.3)

    def test_light_saturation_branch(self):
        """Lightness at or above 0.5 divides by 2 - max - min."""
        h, s, l = rgb_to_hsl(0.9, 0.7, 0.7)
        assert l == pytest.approx(0.8)
        assert s == pytest.approx(0.2 / 0.4)


class TestHSLToRGB:

    def test_pure_red(self):
        r, g, b = hsl_to_rgb(0.0, 1.0, 0.5)
        assert (r, g, b) == pytest.approx((1.0, 0.0, 0.0))

    def test_achromatic(self):
        r, g, b = hsl_to_rgb(0.7, 0.0, 0.3)
        assert (r, g, b) == pytest.approx((0.3, 0.3, 0.3))

    def test_white_and_black(self):
        assert hsl_to_rgb(0.2, 0.5, 1.0) == pytest.approx((1.0, 1.0, 1.0))
        assert hsl_to_rgb(0.2, 0.5, 0.0) == pytest.approx((0.0, 0.0, 0.0))

    def test_hue_beyond_one_turn(self):
        """Hue is reduced to a single turn before conversion."""
        base = hsl_to_rgb(0.25, 0.6, 0.4)
        assert hsl_to_rgb(2.25, 0.6, 0.4) == pytest.approx(base)
        assert hsl_to_rgb(-0.75, 0.6, 0.4) == pytest.approx(base)

    def test_roundtrip(self):
        rng = np.random.RandomState(42)
        for r, g, b in rng.random((200, 3)):
            h, s, l = rgb_to_hsl(r, g, b)
            assert hsl_to_rgb(h, s, l) == pytest.approx((r, g, b), abs=1e-9)


class TestHueToRGB:

    def test_rising_ramp(self):
        assert hue_to_rgb(0.0, 1.0, 1 / 12) == pytest.approx(0.5)

    def test_plateau(self):
        assert hue_to_rgb(0.2, 0.8, 0.4) == 0.8

    def test_falling_ramp(self):
        assert hue_to_rgb(0.0, 1.0, 0.5) == pytest.approx(1.0)
        assert hue_to_rgb(0.0, 1.0, 7 / 12) == pytest.approx(0.5)

    def test_floor(self):
        assert hue_to_rgb(0.2, 0.8, 0.9) == 0.2

    def test_single_wrap(self):
        assert hue_to_rgb(0.0, 1.0, 1.5) == pytest.approx(hue_to_rgb(0.0, 1.0, 0.5))
        assert hue_to_rgb(0.0, 1.0, -0.25) == pytest.approx(hue_to_rgb(0.0, 1.0, 0.75))


class TestVectorized:
    """Array conversions must agree with the scalar path."""

    EDGE_ROWS = np.array([
        [1.0, 1.0, 0.0],
        [0.0, 1.0, 1.0],
        [1.0, 0.0, 1.0],
        [0.5, 0.5, 0.5],
        [0.0, 0.0, 0.0],
        [1.0, 1.0, 1.0],
        [0.2, 0.1, 0.1],
    ])

    def test_rgb_to_hsl_matches_scalar(self):
        rgb = np.vstack([self.EDGE_ROWS, np.random.RandomState(42).random((100, 3))])
        batch = rgb_to_hsl_array(rgb)
        scalar = np.array([rgb_to_hsl(*row) for row in rgb])
        np.testing.assert_allclose(batch, scalar, atol=1e-12)

    def test_hsl_to_rgb_matches_scalar(self):
        hsl = np.random.RandomState(7).random((100, 3))
        hsl[:, 0] = hsl[:, 0] * 6 - 3  # hues well outside [0, 1)
        batch = hsl_to_rgb_array(hsl)
        scalar = np.array([hsl_to_rgb(*row) for row in hsl])
        np.testing.assert_allclose(batch, scalar, atol=1e-12)

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(42).random((50, 3))
        recovered = hsl_to_rgb_array(rgb_to_hsl_array(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-9)

    def test_gray_rows(self):
        hsl = rgb_to_hsl_array(np.array([[0.5, 0.5, 0.5], [0.0, 0.0, 0.0]]))
        np.testing.assert_array_equal(hsl[:, 0], [0.0, 0.0])
        np.testing.assert_array_equal(hsl[:, 1], [0.0, 0.0])

    def test_uint8_conversion(self):
        pixels = np.array([[[255, 0, 0], [0, 255, 0]]], dtype=np.uint8)
        hsl = rgb255_to_hsl_array(pixels)
        assert hsl.shape == (1, 2, 3)
        np.testing.assert_allclose(hsl[0, 0], [0.0, 1.0, 0.5], atol=1e-12)
        np.testing.assert_allclose(hsl[0, 1], [1 / 3, 1.0, 0.5], atol=1e-12)
