# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
CSS and hex serializers.

The default CSS output is ``hsla(H,S%,L%,A)`` with no spaces, where H is
the stored hue fraction (not degrees). CSS consumers that expect
degrees should request CssFormat.HSLA_DEGREES.
"""

from __future__ import annotations

import math
from typing import Optional

from hslcolor.schema.color import HSLAColor
from hslcolor.convert.constructors import to_hsla, to_rgba
from hslcolor.serializers.base import DEFAULT_CSS_CONFIG, CssConfig, CssFormat


def _round(value: float, digits: int, factor: int = 1) -> float:
    """
    Round value * factor to a number of decimal places.

    The scale is applied in a single multiplication (value * 10000 for
    percent with two digits) before rounding to the nearest integer.
    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return round(value * (factor * 10 ** digits)) / 10 ** digits


def _format_number(value: float) -> str:
    """Shortest round-trip form; integral values print without a decimal point."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def to_css_string(
    color: HSLAColor,
    *,
    format: CssFormat = CssFormat.HSLA,
    config: Optional[CssConfig] = None,
) -> str:
    """
    Render a color as a CSS color string.

    Args:
        color: The color to render.
        format: HSLA (raw hue fraction), HSLA_DEGREES (hue wrapped into
            [0, 360)) or RGBA (0-255 integer channels).
        config: Decimal places (default: CssConfig()).

    Returns:
        A string such as ``hsla(0,100%,50%,1)``.
    """
    if config is None:
        config = DEFAULT_CSS_CONFIG

    c = to_hsla(color)
    alpha = _format_number(_round(c.alpha, config.alpha_digits))

    if format is CssFormat.RGBA:
        r, g, b = (_format_number(v) for v in to_rgba(color).to_rgb255())
        return f"rgba({r},{g},{b},{alpha})"

    if format is CssFormat.HSLA:
        hue = _round(c.hue, config.hue_digits)
    elif format is CssFormat.HSLA_DEGREES:
        # Rounding can land on 360 for hues just below a full turn
        hue = _round(c.hue % 1.0, config.hue_digits, 360) % 360
    else:
        raise ValueError(f"Unsupported CSS format: {format!r}")

    saturation = _round(c.saturation, config.percent_digits, 100)
    lightness = _round(c.lightness, config.percent_digits, 100)

    return (
        f"hsla({_format_number(hue)},"
        f"{_format_number(saturation)}%,"
        f"{_format_number(lightness)}%,"
        f"{alpha})"
    )


def to_hex(color: HSLAColor, *, include_alpha: bool = False) -> str:
    """
    Convert a color to a hex string.

    Args:
        color: The color to convert.
        include_alpha: Append the alpha byte (``#RRGGBBAA``).

    Returns:
        Hex color string like "#3941C8"

    Raises:
        ValueError: If a channel (or alpha, when included) is NaN or infinite.
    """
    rgba = to_rgba(color)
    channels = (rgba.red, rgba.green, rgba.blue) + ((rgba.alpha,) if include_alpha else ())
    if not all(math.isfinite(v) for v in channels):
        raise ValueError(f"Cannot convert non-finite color to hex: {rgba!r}")
    r, g, b = rgba.to_rgb255()
    out = f"#{r:02X}{g:02X}{b:02X}"
    if include_alpha:
        a = min(255, max(0, round(rgba.alpha * 255)))
        out += f"{a:02X}"
    return out
