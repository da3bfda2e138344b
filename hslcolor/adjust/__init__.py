# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
Adjustment operations for Hslcolor.

All operations take (amount, color) and return a new color.
"""

from hslcolor.adjust.operations import (
    darken,
    desaturate,
    fade_in,
    fade_out,
    lighten,
    rotate_hue,
    saturate,
)

__all__ = [
    "rotate_hue",
    "saturate",
    "desaturate",
    "lighten",
    "darken",
    "fade_in",
    "fade_out",
]
