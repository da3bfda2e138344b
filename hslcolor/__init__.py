# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
Hslcolor -- Immutable HSLA colors with RGB conversion and CSS output.

Quick start::

    from hslcolor import hsl360, lighten, rotate_hue, to_css_string

    c = hsl360(210, 80, 40)
    to_css_string(lighten(0.1, c))   # 'hsla(0.583,80%,50%,1)'
    rotate_hue(180, c).to_rgba()     # RGBA(red=..., green=..., ...)
"""

from __future__ import annotations

__version__ = "1.0.0"

from hslcolor.schema import HSLA, RGBA, HSLAColor
from hslcolor.convert import (
    from_hsla,
    from_rgba,
    hsl,
    hsl360,
    hsla,
    rgb,
    rgb255,
    rgba,
    to_hsla,
    to_rgba,
)
from hslcolor.adjust import (
    darken,
    desaturate,
    fade_in,
    fade_out,
    lighten,
    rotate_hue,
    saturate,
)
from hslcolor.serializers import CssConfig, CssFormat, to_css_string, to_hex
from hslcolor.colors import NAMED_COLORS, named

__all__ = [
    # Types
    "HSLAColor",
    "HSLA",
    "RGBA",
    # Constructors
    "hsla",
    "hsl",
    "hsl360",
    "rgba",
    "rgb",
    "rgb255",
    "from_hsla",
    "from_rgba",
    # Extractors
    "to_hsla",
    "to_rgba",
    # Adjustments
    "rotate_hue",
    "saturate",
    "desaturate",
    "lighten",
    "darken",
    "fade_in",
    "fade_out",
    # Serializers
    "to_css_string",
    "to_hex",
    "CssFormat",
    "CssConfig",
    # Named colors
    "NAMED_COLORS",
    "named",
    # Version
    "__version__",
]
