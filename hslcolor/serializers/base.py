# Copyright (c) 2026 Hslcolor
# SPDX-License-Identifier: MIT

"""Base types and settings for serializers."""

from dataclasses import dataclass
from enum import Enum


class CssFormat(Enum):
    """Output format for CSS strings."""

    HSLA = "hsla"
    HSLA_DEGREES = "hsla_degrees"
    RGBA = "rgba"


@dataclass(frozen=True)
class CssConfig:
    """Decimal places used when rendering CSS strings."""

    # Hue as a fraction of a turn (or degrees for HSLA_DEGREES)
    hue_digits: int = 3

    # Saturation and lightness, counted after conversion to percent
    percent_digits: int = 2

    alpha_digits: int = 3


DEFAULT_CSS_CONFIG = CssConfig()
