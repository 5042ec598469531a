# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Integer color model conversions.

Conversion targets: RGB ↔ HSL (cylindrical), RGB → CMYK (subtractive)

These work on single colors with whole-number outputs, matching what a
color picker displays and copies. Rounding is half-up throughout.
"""

from __future__ import annotations

from pickhue.schema.color_values import CMYKColor, HSLColor, RGBColor
from pickhue.science.codec import round_half_up


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(color: RGBColor) -> HSLColor:
    """
    Convert RGB to HSL.

    Achromatic colors (all channels equal) get hue 0 and saturation 0.
    Hue is rounded before wrapping, so a hue that rounds up to 360
    is reported as 0.

    Args:
        color: RGB color with channels in 0-255

    Returns:
        HSLColor with whole-degree hue and whole-percent s/l
    """
    r = color.r / 255
    g = color.g / 255
    b = color.b / 255

    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2

    if mx == mn:
        h = s = 0.0
    else:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSLColor(
        h=round_half_up(h * 360) % 360,
        s=round_half_up(s * 100),
        l=round_half_up(l * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Piecewise channel value for a hue position t (in turns)."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(color: HSLColor) -> RGBColor:
    """
    Convert HSL to RGB.

    Zero saturation yields a gray at the given lightness.

    Args:
        color: HSL color (hue in degrees, s/l in percent)

    Returns:
        RGBColor with channels rounded to 0-255
    """
    h = color.h / 360
    s = color.s / 100
    l = color.l / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGBColor(
        r=round_half_up(r * 255),
        g=round_half_up(g * 255),
        b=round_half_up(b * 255),
    )


# =============================================================================
# RGB → CMYK
# =============================================================================


def rgb_to_cmyk(color: RGBColor) -> CMYKColor:
    """
    Convert RGB to CMYK percentages.

    Pure black short-circuits to (0, 0, 0, 100); every other color has
    k < 1 so the rescale below never divides by zero.

    Args:
        color: RGB color with channels in 0-255

    Returns:
        CMYKColor with whole-percent channels
    """
    c = 1 - color.r / 255
    m = 1 - color.g / 255
    y = 1 - color.b / 255
    k = min(c, m, y)

    if k == 1:
        return CMYKColor(c=0, m=0, y=0, k=100)

    c = (c - k) / (1 - k)
    m = (m - k) / (1 - k)
    y = (y - k) / (1 - k)

    return CMYKColor(
        c=round_half_up(c * 100),
        m=round_half_up(m * 100),
        y=round_half_up(y * 100),
        k=round_half_up(k * 100),
    )
