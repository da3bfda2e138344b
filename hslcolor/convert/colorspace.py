# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion pair: RGB ↔ HSL (hue as a fraction of a full turn)

References:
- HSL: CSS Color Module Level 3, §4.2.4 (HSL color values)

Scalar functions operate on plain Python floats and are the reference
path used by HSLAColor. The *_array variants are pure NumPy over arrays
of shape (..., 3) and follow the same branch order, so both paths agree.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


_ONE_THIRD = 1.0 / 3.0
_TWO_THIRDS = 2.0 / 3.0


# =============================================================================
# RGB → HSL
# =============================================================================


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB [0,1] to HSL.

    Hue branches are tested by exact equality in red, green, blue order,
    so when channels tie for the maximum the earliest one wins:
    (1, 1, 0) takes the red branch and yields hue 1/6.

    Args:
        r, g, b: Channel values [0, 1]

    Returns:
        Tuple of (hue, saturation, lightness). Hue is a fraction [0, 1).
        Gray input (all channels equal) yields hue 0 and saturation 0.
    """
    min_c = min(r, g, b)
    max_c = max(r, g, b)
    lightness = (min_c + max_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, lightness

    delta = max_c - min_c

    if max_c == r:
        h = (g - b) / delta
    elif max_c == g:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    hue = h / 6
    if hue < 0:
        hue += 1

    if lightness < 0.5:
        saturation = delta / (max_c + min_c)
    else:
        saturation = delta / (2 - max_c - min_c)

    return hue, saturation, lightness


# =============================================================================
# HSL → RGB
# =============================================================================


def hue_to_rgb(m1: float, m2: float, hue: float) -> float:
    """
    Evaluate one RGB channel from the HSL ramp.

    The hue offset is wrapped once (not modulo); callers keep it within
    one turn of [0, 1].
    """
    if hue < 0:
        hue += 1
    elif hue > 1:
        hue -= 1

    if hue * 6 < 1:
        return m1 + (m2 - m1) * hue * 6
    if hue * 2 < 1:
        return m2
    if hue * 3 < 2:
        return m1 + (m2 - m1) * (_TWO_THIRDS - hue) * 6
    return m1


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB [0,1].

    Inverse of rgb_to_hsl for chromatic colors. Hue may be any real
    number: it is reduced to a single turn first, which leaves values
    already in [0, 1) untouched.

    Args:
        h: Hue as a fraction of a turn
        s: Saturation [0, 1]
        l: Lightness [0, 1]

    Returns:
        Tuple of (red, green, blue)
    """
    h = h % 1.0

    if l <= 0.5:
        m2 = l * (1 + s)
    else:
        m2 = l + s - l * s
    m1 = l * 2 - m2

    return (
        hue_to_rgb(m1, m2, h + _ONE_THIRD),
        hue_to_rgb(m1, m2, h),
        hue_to_rgb(m1, m2, h - _ONE_THIRD),
    )


# =============================================================================
# Vectorized: arrays of shape (..., 3)
# =============================================================================


def rgb_to_hsl_array(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert RGB [0,1] to HSL for many colors at once.

    Args:
        rgb: Array of shape (..., 3) with RGB values [0, 1]

    Returns:
        Array of shape (..., 3) with HSL values (H fraction, S, L)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    max_c = np.max(rgb, axis=-1)
    min_c = np.min(rgb, axis=-1)
    delta = max_c - min_c
    L = (max_c + min_c) / 2

    gray = delta == 0
    # Placeholder denominator for gray pixels; their result is overwritten
    safe_delta = np.where(gray, 1.0, delta)

    h = np.where(
        max_c == r,
        (g - b) / safe_delta,
        np.where(
            max_c == g,
            2 + (b - r) / safe_delta,
            4 + (r - g) / safe_delta,
        ),
    ) / 6
    h = np.where(h < 0, h + 1, h)
    H = np.where(gray, 0.0, h)

    denom = np.where(L < 0.5, max_c + min_c, 2 - max_c - min_c)
    S = np.where(gray, 0.0, delta / np.where(gray, 1.0, denom))

    return np.stack([H, S, L], axis=-1)


def _hue_to_rgb_array(
    m1: NDArray[np.float64],
    m2: NDArray[np.float64],
    hue: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Vectorized hue_to_rgb."""
    hue = np.where(hue < 0, hue + 1, np.where(hue > 1, hue - 1, hue))
    return np.where(
        hue * 6 < 1,
        m1 + (m2 - m1) * hue * 6,
        np.where(
            hue * 2 < 1,
            m2,
            np.where(hue * 3 < 2, m1 + (m2 - m1) * (_TWO_THIRDS - hue) * 6, m1),
        ),
    )


def hsl_to_rgb_array(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL to RGB [0,1] for many colors at once.

    Args:
        hsl: Array of shape (..., 3) with HSL values (H fraction, S, L)

    Returns:
        Array of shape (..., 3) with RGB values
    """
    hsl = np.asarray(hsl, dtype=np.float64)

    H = np.mod(hsl[..., 0], 1.0)
    S = hsl[..., 1]
    L = hsl[..., 2]

    m2 = np.where(L <= 0.5, L * (1 + S), L + S - L * S)
    m1 = L * 2 - m2

    return np.stack([
        _hue_to_rgb_array(m1, m2, H + _ONE_THIRD),
        _hue_to_rgb_array(m1, m2, H),
        _hue_to_rgb_array(m1, m2, H - _ONE_THIRD),
    ], axis=-1)


def rgb255_to_hsl_array(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert uint8 RGB pixels [0,255] to HSL.

    Convenience wrapper for common 8-bit data.

    Args:
        pixels: Array of shape (..., 3) with uint8 values [0, 255]

    Returns:
        Array of shape (..., 3) with HSL values
    """
    rgb_float = np.asarray(pixels).astype(np.float64) / 255.0
    return rgb_to_hsl_array(rgb_float)
