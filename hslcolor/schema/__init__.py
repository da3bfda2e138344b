# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors.

All types in this module are immutable (frozen dataclasses).
Every "changed" color is a new value.
"""

from hslcolor.schema.color import HSLA, RGBA, HSLAColor

__all__ = [
    # Core type
    "HSLAColor",
    # Conversion records
    "HSLA",
    "RGBA",
]
