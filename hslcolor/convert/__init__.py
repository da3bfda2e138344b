# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
Conversion core for Hslcolor.

RGB ↔ HSL math plus the constructors and extractors built on it.
"""

from hslcolor.convert.colorspace import (
    hsl_to_rgb,
    hsl_to_rgb_array,
    hue_to_rgb,
    rgb255_to_hsl_array,
    rgb_to_hsl,
    rgb_to_hsl_array,
)
from hslcolor.convert.constructors import (
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

__all__ = [
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
    # Raw math
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hue_to_rgb",
    "rgb_to_hsl_array",
    "hsl_to_rgb_array",
    "rgb255_to_hsl_array",
]
