# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Single-color filter variants: invert, grayscale, sepia.

All three work on the raw (gamma-encoded) channels, like the equivalent
image filters do.
"""

from __future__ import annotations

import numpy as np

from pickhue.schema.color_values import RGBColor, Variants
from pickhue.science.codec import clamp_channel, round_half_up

# Luma weights applied directly to encoded channels
_GRAY_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

# Classic sepia tone matrix
_SEPIA = np.array([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
], dtype=np.float64)


def invert(color: RGBColor) -> RGBColor:
    return RGBColor(255 - color.r, 255 - color.g, 255 - color.b)


def grayscale(color: RGBColor) -> RGBColor:
    gray = round_half_up(float(np.dot(_GRAY_WEIGHTS, tuple(color))))
    return RGBColor(gray, gray, gray)


def sepia(color: RGBColor) -> RGBColor:
    r, g, b = _SEPIA @ np.array(tuple(color), dtype=np.float64)
    return RGBColor(clamp_channel(r), clamp_channel(g), clamp_channel(b))


def get_color_variants(color: RGBColor) -> Variants:
    """
    Build the invert / grayscale / sepia variants of a color.

    Args:
        color: RGB color with channels in 0-255

    Returns:
        Variants; grayscale always has r == g == b
    """
    return Variants(
        invert=invert(color),
        grayscale=grayscale(color),
        sepia=sepia(color),
    )
