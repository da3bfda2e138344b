# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
Channel adjustments.

Each operation decomposes a color to HSLA, offsets exactly one channel,
and builds a new color. The input is never modified.

Saturation, lightness and alpha are clamped to [0, 1] (saturating, not
wrapping). Hue is never clamped: the conversion math wraps it.
"""

from __future__ import annotations

import math

from hslcolor.schema.color import HSLAColor
from hslcolor.convert.constructors import hsla, to_hsla


def _clamp01(value: float) -> float:
    """Clamp to [0, 1]. NaN passes through."""
    if math.isnan(value):
        return value
    return min(1.0, max(0.0, value))


# =============================================================================
# Hue
# =============================================================================


def rotate_hue(angle: float, color: HSLAColor) -> HSLAColor:
    """
    Rotate the hue by an angle in degrees.

    The result is not wrapped into [0, 1): rotate_hue(720, c) stores
    hue + 2 and still converts to the same RGB as c.
    """
    c = to_hsla(color)
    return hsla(c.hue + angle / 360, c.saturation, c.lightness, c.alpha)


# =============================================================================
# Saturation
# =============================================================================


def saturate(offset: float, color: HSLAColor) -> HSLAColor:
    """Increase saturation by offset, clamped to [0, 1]."""
    c = to_hsla(color)
    return hsla(c.hue, _clamp01(c.saturation + offset), c.lightness, c.alpha)


def desaturate(offset: float, color: HSLAColor) -> HSLAColor:
    """Decrease saturation by offset, clamped to [0, 1]."""
    return saturate(-offset, color)


# =============================================================================
# Lightness
# =============================================================================


def lighten(offset: float, color: HSLAColor) -> HSLAColor:
    """Increase lightness by offset, clamped to [0, 1]."""
    c = to_hsla(color)
    return hsla(c.hue, c.saturation, _clamp01(c.lightness + offset), c.alpha)


def darken(offset: float, color: HSLAColor) -> HSLAColor:
    """Decrease lightness by offset, clamped to [0, 1]."""
    return lighten(-offset, color)


# =============================================================================
# Alpha
# =============================================================================


def fade_in(offset: float, color: HSLAColor) -> HSLAColor:
    """Increase alpha by offset, clamped to [0, 1]."""
    c = to_hsla(color)
    return hsla(c.hue, c.saturation, c.lightness, _clamp01(c.alpha + offset))


def fade_out(offset: float, color: HSLAColor) -> HSLAColor:
    """Decrease alpha by offset, clamped to [0, 1]."""
    return fade_in(-offset, color)
