# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Channel codec: RGB ↔ hex strings and integer channel rules.

Hex output is always canonical ("#RRGGBB", uppercase). Hex input is strict:
an optional leading "#" followed by exactly six hex digits, any case.
Shorthand ("#F00"), alpha ("#FF000080") and padded text are rejected rather
than guessed at.
"""

from __future__ import annotations

import logging
import math
import re

from pickhue.schema.color_values import RGBColor

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


class ParseError(ValueError):
    """Raised when text is not a six-digit hex color."""


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves upward (2.5 -> 3, -2.5 -> -2).

    Python's round() rounds halves to even, which would shift
    channel and percent values that land exactly on .5.
    """
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    """Round a channel value and clamp it to 0-255."""
    return max(0, min(255, round_half_up(value)))


def rgb_to_hex(color: RGBColor) -> str:
    """
    Format a color as "#RRGGBB".

    Args:
        color: RGB color with channels in 0-255

    Returns:
        Uppercase hex string with leading "#"
    """
    packed = (color.r << 16) | (color.g << 8) | color.b
    return f"#{packed:06X}"


def hex_to_rgb(text: str) -> RGBColor:
    """
    Parse a hex color string.

    Args:
        text: "#RRGGBB" or "RRGGBB", case-insensitive

    Returns:
        The parsed RGB color

    Raises:
        ParseError: If text is not exactly six hex digits with optional "#"
    """
    m = _HEX_RE.fullmatch(text)
    if not m:
        logger.debug("Rejected hex color %r", text)
        raise ParseError(f"Invalid hex color: {text!r}")
    r, g, b = (int(pair, 16) for pair in m.groups())
    return RGBColor(r, g, b)
