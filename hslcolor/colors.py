# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""
Named colors.

A Tango-style palette: three shades each of seven hues plus grays.
Values are given in CSS units (degrees, percent) via hsl360.
"""

from __future__ import annotations

import logging

from hslcolor.schema.color import HSLAColor
from hslcolor.convert.constructors import hsl360

logger = logging.getLogger(__name__)


# =============================================================================
# Chromatic
# =============================================================================

light_red = hsl360(0, 86, 55)
red = hsl360(0, 100, 40)
dark_red = hsl360(0, 100, 32)

light_orange = hsl360(36, 97, 62)
orange = hsl360(30, 100, 48)
dark_orange = hsl360(27, 100, 40)

light_yellow = hsl360(53, 97, 65)
yellow = hsl360(54, 100, 46)
dark_yellow = hsl360(49, 100, 38)

light_green = hsl360(90, 75, 55)
green = hsl360(90, 81, 46)
dark_green = hsl360(91, 92, 31)

light_blue = hsl360(211, 49, 63)
blue = hsl360(214, 52, 42)
dark_blue = hsl360(216, 62, 33)

light_purple = hsl360(307, 22, 59)
purple = hsl360(292, 21, 40)
dark_purple = hsl360(288, 32, 30)

light_brown = hsl360(37, 74, 67)
brown = hsl360(37, 84, 41)
dark_brown = hsl360(37, 97, 28)


# =============================================================================
# Achromatic (near-gray)
# =============================================================================

black = hsl360(0, 0, 0)
white = hsl360(0, 0, 100)

light_grey = hsl360(60, 6, 93)
grey = hsl360(90, 9, 83)
dark_grey = hsl360(86, 5, 73)

light_charcoal = hsl360(84, 2, 53)
charcoal = hsl360(90, 2, 33)
dark_charcoal = hsl360(195, 8, 20)

light_gray = light_grey
gray = grey
dark_gray = dark_grey


NAMED_COLORS: dict[str, HSLAColor] = {
    "lightred": light_red,
    "red": red,
    "darkred": dark_red,
    "lightorange": light_orange,
    "orange": orange,
    "darkorange": dark_orange,
    "lightyellow": light_yellow,
    "yellow": yellow,
    "darkyellow": dark_yellow,
    "lightgreen": light_green,
    "green": green,
    "darkgreen": dark_green,
    "lightblue": light_blue,
    "blue": blue,
    "darkblue": dark_blue,
    "lightpurple": light_purple,
    "purple": purple,
    "darkpurple": dark_purple,
    "lightbrown": light_brown,
    "brown": brown,
    "darkbrown": dark_brown,
    "black": black,
    "white": white,
    "lightgrey": light_grey,
    "grey": grey,
    "darkgrey": dark_grey,
    "lightgray": light_gray,
    "gray": gray,
    "darkgray": dark_gray,
    "lightcharcoal": light_charcoal,
    "charcoal": charcoal,
    "darkcharcoal": dark_charcoal,
}


def _normalize_name(name: str) -> str:
    """Lowercase and drop separators: 'Light Red', 'light_red', 'light-red' -> 'lightred'."""
    return "".join(ch for ch in name.lower() if ch not in " _-")


def named(name: str) -> HSLAColor:
    """
    Look up a named color.

    Matching ignores case, spaces, underscores and hyphens.

    Raises:
        KeyError: If no color has that name.
    """
    key = _normalize_name(name)
    try:
        return NAMED_COLORS[key]
    except KeyError:
        logger.debug("[Named] No match for %r (normalized %r)", name, key)
        raise KeyError(f"No named color '{name}'") from None
