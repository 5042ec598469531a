# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Color harmonies by hue rotation in HSL.

Every harmony keeps the source saturation and lightness and rotates the hue
by fixed offsets (wrapping modulo 360). Monochromatic is the exception: it
keeps hue and saturation and steps lightness, clamped rather than wrapped.
"""

from __future__ import annotations

from pickhue.schema.color_values import Harmonies, HSLColor, RGBColor
from pickhue.science.conversions import hsl_to_rgb, rgb_to_hsl

# Lightness step (percent) for monochromatic neighbours
MONOCHROME_STEP = 20


def _rotate(hsl: HSLColor, degrees: int) -> RGBColor:
    """Rotate hue and convert back to RGB."""
    return hsl_to_rgb(HSLColor(h=(hsl.h + degrees) % 360, s=hsl.s, l=hsl.l))


def _lighten(hsl: HSLColor, percent: int) -> RGBColor:
    """Shift lightness (clamped to 0-100) and convert back to RGB."""
    l = max(0, min(100, hsl.l + percent))
    return hsl_to_rgb(HSLColor(h=hsl.h, s=hsl.s, l=l))


def get_harmonies(color: RGBColor) -> Harmonies:
    """
    Derive harmony palettes from a color.

    Args:
        color: RGB color with channels in 0-255

    Returns:
        Harmonies with complementary, analogous, triadic, tetradic and
        monochromatic groups
    """
    hsl = rgb_to_hsl(color)

    return Harmonies(
        complementary=(_rotate(hsl, 180),),
        analogous=(_rotate(hsl, -30), _rotate(hsl, 30)),
        triadic=(_rotate(hsl, 120), _rotate(hsl, 240)),
        tetradic=(_rotate(hsl, 90), _rotate(hsl, 180), _rotate(hsl, 270)),
        monochromatic=(
            _lighten(hsl, -MONOCHROME_STEP),
            _lighten(hsl, MONOCHROME_STEP),
        ),
    )
