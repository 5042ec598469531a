# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Copy-ready color strings.

These are the texts the picker puts on the clipboard, keyed by the label
shown next to each format. The clipboard itself belongs to the host
application.
"""

from __future__ import annotations

from pickhue.schema import CMYKColor, HSLColor, RGBColor
from pickhue.science.codec import rgb_to_hex
from pickhue.science.conversions import rgb_to_cmyk, rgb_to_hsl


def format_rgb(color: RGBColor) -> str:
    """CSS form, e.g. "rgb(57, 65, 200)"."""
    return f"rgb({color.r}, {color.g}, {color.b})"


def format_hsl(color: HSLColor) -> str:
    """CSS form, e.g. "hsl(236, 56%, 50%)"."""
    return f"hsl({color.h}, {color.s}%, {color.l}%)"


def format_cmyk(color: CMYKColor) -> str:
    return f"cmyk({color.c}%, {color.m}%, {color.y}%, {color.k}%)"


def to_copy_formats(color: RGBColor) -> dict[str, str]:
    """Build every copy format for a color.

    Args:
        color: The color to format.

    Returns:
        Mapping of label to text, in display order (HEX, RGB, HSL, CMYK).

    Example::

        {
          "HEX": "#FF0000",
          "RGB": "rgb(255, 0, 0)",
          "HSL": "hsl(0, 100%, 50%)",
          "CMYK": "cmyk(0%, 100%, 100%, 0%)"
        }
    """
    return {
        "HEX": rgb_to_hex(color),
        "RGB": format_rgb(color),
        "HSL": format_hsl(rgb_to_hsl(color)),
        "CMYK": format_cmyk(rgb_to_cmyk(color)),
    }
