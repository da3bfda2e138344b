# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
HSLAColor — the immutable color value.

Design principles:
- Immutable: All types are frozen dataclasses
- Total: Construction never validates or clamps, arithmetic results are kept verbatim
- Plain: Four floats, no hidden state, safe to share between threads

HSLA Color Space:
- Hue: fraction of a full turn (0.0 = red, ≈0.333 = green, ≈0.667 = blue).
  Stored as a fraction, NOT degrees. Values outside [0, 1) are allowed
  (e.g. after rotate_hue) and are wrapped by the conversion math.
- Saturation: 0.0 = gray, 1.0 = fully saturated
- Lightness: 0.0 = black, 0.5 = pure hue, 1.0 = white
- Alpha: 0.0 = transparent, 1.0 = opaque
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def _to_byte(value: float) -> int | float:
    """Scale [0, 1] to a clamped 8-bit integer. Non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return min(255, max(0, round(value * 255)))


# =============================================================================
# Conversion Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class HSLA:
    """
    Named-field view of the four HSLA scalars.

    Used as input/output payload for from_hsla / to_hsla.
    """
    hue: float
    saturation: float
    lightness: float
    alpha: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hue": self.hue,
            "saturation": self.saturation,
            "lightness": self.lightness,
            "alpha": self.alpha,
        }

    @classmethod
    def from_dict(cls, data: dict) -> HSLA:
        """Deserialize from dictionary. Alpha defaults to 1.0."""
        return cls(
            hue=data["hue"],
            saturation=data["saturation"],
            lightness=data["lightness"],
            alpha=data.get("alpha", 1.0),
        )


@dataclass(frozen=True, slots=True)
class RGBA:
    """
    An sRGB color with alpha, every channel in [0, 1].

    This is the interop record for anything that speaks RGB: 8-bit
    pixel tuples, hex strings, other color libraries.
    """
    red: float
    green: float
    blue: float
    alpha: float

    def to_rgb255(self) -> tuple[int, int, int]:
        """
        Channels as 8-bit integers.

        Each channel is scaled by 255, rounded and clamped to [0, 255].
        Non-finite channels (NaN, inf) are returned unrounded.
        """
        return tuple(
            _to_byte(v) for v in (self.red, self.green, self.blue)
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "red": self.red,
            "green": self.green,
            "blue": self.blue,
            "alpha": self.alpha,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RGBA:
        """Deserialize from dictionary. Alpha defaults to 1.0."""
        return cls(
            red=data["red"],
            green=data["green"],
            blue=data["blue"],
            alpha=data.get("alpha", 1.0),
        )


# =============================================================================
# Color Value
# =============================================================================


@dataclass(frozen=True, slots=True)
class HSLAColor:
    """
    A single color in HSLA space.

    Build one with the constructors in hslcolor.convert (hsla, hsl,
    hsl360, rgb, rgba, rgb255) rather than calling this directly; the
    raw constructor performs no conversion.

    Attributes:
        hue: Fraction of a full turn. Not clamped.
        saturation: [0, 1]
        lightness: [0, 1]
        alpha: Opacity [0, 1]
    """
    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    @property
    def hex(self) -> str:
        """
        Get hex color string (alpha dropped).

        Returns:
            Hex string like "#3941C8"
        """
        from hslcolor.serializers.css import to_hex
        return to_hex(self)

    def to_hsla(self) -> HSLA:
        """Raw components as an HSLA record."""
        from hslcolor.convert.constructors import to_hsla
        return to_hsla(self)

    def to_rgba(self) -> RGBA:
        """Convert to an RGBA record."""
        from hslcolor.convert.constructors import to_rgba
        return to_rgba(self)

    def to_css_string(self) -> str:
        """CSS ``hsla(...)`` string, see hslcolor.serializers.to_css_string."""
        from hslcolor.serializers.css import to_css_string
        return to_css_string(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hue": self.hue,
            "saturation": self.saturation,
            "lightness": self.lightness,
            "alpha": self.alpha,
        }

    @classmethod
    def from_dict(cls, data: dict) -> HSLAColor:
        """Deserialize from dictionary. Alpha defaults to 1.0."""
        return cls(
            hue=data["hue"],
            saturation=data["saturation"],
            lightness=data["lightness"],
            alpha=data.get("alpha", 1.0),
        )
