# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
Serializers for HSLAColor.

Each serializer renders a color as text. Serializers never modify the color.
"""

from hslcolor.serializers.base import CssConfig, CssFormat
from hslcolor.serializers.css import to_css_string, to_hex

__all__ = [
    "CssFormat",
    "CssConfig",
    "to_css_string",
    "to_hex",
]
