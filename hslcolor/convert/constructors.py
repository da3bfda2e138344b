# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
Constructors and extractors for HSLAColor.

Every constructor is total: inputs are accepted verbatim (no clamping,
no validation) and NaN propagates through the arithmetic.
"""

from __future__ import annotations

from hslcolor.schema.color import HSLA, RGBA, HSLAColor
from hslcolor.convert.colorspace import hsl_to_rgb, rgb_to_hsl


# =============================================================================
# From HSL
# =============================================================================


def hsla(hue: float, saturation: float, lightness: float, alpha: float) -> HSLAColor:
    """Create a color from hue (fraction of a turn), saturation, lightness and alpha."""
    return HSLAColor(hue, saturation, lightness, alpha)


def hsl(hue: float, saturation: float, lightness: float) -> HSLAColor:
    """Opaque version of hsla."""
    return hsla(hue, saturation, lightness, 1.0)


def hsl360(hue: float, saturation: float, lightness: float) -> HSLAColor:
    """
    Create an opaque color from CSS-style units.

    Args:
        hue: Degrees [0, 360]
        saturation: Percent [0, 100]
        lightness: Percent [0, 100]
    """
    return hsla(hue / 360, saturation / 100, lightness / 100, 1.0)


def from_hsla(record: HSLA) -> HSLAColor:
    """Create a color from an HSLA record."""
    return hsla(record.hue, record.saturation, record.lightness, record.alpha)


# =============================================================================
# From RGB
# =============================================================================


def rgba(red: float, green: float, blue: float, alpha: float) -> HSLAColor:
    """
    Create a color from RGB channels [0, 1] and alpha.

    Converts with rgb_to_hsl; alpha passes through unchanged.
    """
    h, s, l = rgb_to_hsl(red, green, blue)
    return hsla(h, s, l, alpha)


def rgb(red: float, green: float, blue: float) -> HSLAColor:
    """Opaque version of rgba."""
    return rgba(red, green, blue, 1.0)


def rgb255(red: int, green: int, blue: int) -> HSLAColor:
    """Create an opaque color from 8-bit channels [0, 255]."""
    return rgba(red / 255, green / 255, blue / 255, 1.0)


def from_rgba(record: RGBA) -> HSLAColor:
    """Create a color from an RGBA record."""
    return rgba(record.red, record.green, record.blue, record.alpha)


# =============================================================================
# Extraction
# =============================================================================


def to_hsla(color: HSLAColor) -> HSLA:
    """Raw stored components, no clamping or rescaling."""
    return HSLA(
        hue=color.hue,
        saturation=color.saturation,
        lightness=color.lightness,
        alpha=color.alpha,
    )


def to_rgba(color: HSLAColor) -> RGBA:
    """
    Convert to RGB channels [0, 1].

    Hue outside [0, 1) is wrapped, so rotated colors convert correctly.
    """
    r, g, b = hsl_to_rgb(color.hue, color.saturation, color.lightness)
    return RGBA(red=r, green=g, blue=b, alpha=color.alpha)
