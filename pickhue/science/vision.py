# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Color-vision deficiency simulation.

Approach:
- Decode sRGB → linear RGB
- Apply a 3x3 deficiency matrix (simplified Brettel-style approximation)
- Re-encode linear → sRGB, round and clamp to 0-255

Achromatopsia skips the matrix and replaces every channel with the linear
luminance, so its output is always a neutral gray.

These are approximations for accessibility checks, not clinical models.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from pickhue.schema.color_values import Deficiency, RGBColor
from pickhue.science.codec import clamp_channel
from pickhue.science.colorspace import LUMA_WEIGHTS, linear_to_srgb, rgb_to_linear


# Rows map linear (R, G, B) to the simulated linear (R, G, B)
CB_MATRICES = {
    Deficiency.PROTANOPIA: np.array([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ], dtype=np.float64),
    Deficiency.DEUTERANOPIA: np.array([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ], dtype=np.float64),
    Deficiency.TRITANOPIA: np.array([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ], dtype=np.float64),
}


def _coerce_deficiency(deficiency: Union[Deficiency, str]) -> Deficiency:
    if isinstance(deficiency, Deficiency):
        return deficiency
    try:
        return Deficiency(str(deficiency).lower())
    except ValueError:
        names = ", ".join(d.value for d in Deficiency)
        raise ValueError(
            f"Unknown deficiency {deficiency!r}; expected one of: {names}"
        ) from None


def simulate_color_blindness(
    color: RGBColor,
    deficiency: Union[Deficiency, str],
) -> RGBColor:
    """
    Simulate how a color appears with a color-vision deficiency.

    Args:
        color: RGB color with channels in 0-255
        deficiency: Deficiency member or its name ("protanopia", ...)

    Returns:
        Simulated RGBColor, channels clamped to 0-255

    Raises:
        ValueError: If deficiency is not a known type
    """
    kind = _coerce_deficiency(deficiency)
    linear = rgb_to_linear(color)

    if kind is Deficiency.ACHROMATOPSIA:
        gray = float(np.dot(linear, LUMA_WEIGHTS))
        simulated = np.array([gray, gray, gray], dtype=np.float64)
    else:
        simulated = CB_MATRICES[kind] @ linear

    r, g, b = linear_to_srgb(simulated) * 255.0
    return RGBColor(clamp_channel(r), clamp_channel(g), clamp_channel(b))


def simulate_all(color: RGBColor) -> tuple[tuple[Deficiency, RGBColor], ...]:
    """Simulate every deficiency, in Deficiency declaration order."""
    return tuple(
        (kind, simulate_color_blindness(color, kind))
        for kind in Deficiency
    )
