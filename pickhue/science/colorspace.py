# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → CIE XYZ (D65) → CIE Lab

References:
- sRGB transfer function: IEC 61966-2-1
- Relative luminance / contrast: WCAG 2.x (BT.709 primaries)
- Lab: CIE 1976 L*a*b*, D65 reference white

Array functions accept any shape (..., 3) so single colors and whole
batches go through the same code path.
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray

from pickhue.schema.color_values import LabColor, RGBColor

ArrayOrFloat = Union[float, NDArray[np.float64]]


# =============================================================================
# Constants
# =============================================================================

# Decode threshold used by WCAG relative luminance
LUMINANCE_THRESHOLD = 0.03928

# Decode threshold from the sRGB standard, used for XYZ / Lab
SRGB_THRESHOLD = 0.04045

# Encode threshold (linear → sRGB)
LINEAR_THRESHOLD = 0.0031308

# BT.709 luma weights on linear channels
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

# Linear sRGB (0-100) to XYZ, D65
_RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
], dtype=np.float64)

# D65 reference white (Xn, Yn, Zn)
D65_WHITE = np.array([95.047, 100.0, 108.883], dtype=np.float64)

# CIE nonlinearity breakpoint, (6/29)^3 rounded as in the 1976 definition
_LAB_EPSILON = 0.008856
_LAB_KAPPA_SLOPE = 7.787

# Luminance below which the picker treats a color as dark
DARK_THRESHOLD = 0.2


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(
    srgb: ArrayOrFloat,
    threshold: float = LUMINANCE_THRESHOLD,
) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= threshold: value/12.92
    - For values > threshold: ((value + 0.055) / 1.055) ^ 2.4

    The WCAG threshold (0.03928) is the default; pass SRGB_THRESHOLD for
    the value from the sRGB standard. Both give identical results for
    8-bit inputs.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= threshold,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: ArrayOrFloat) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= LINEAR_THRESHOLD,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


def rgb_to_linear(
    color: RGBColor,
    threshold: float = LUMINANCE_THRESHOLD,
) -> NDArray[np.float64]:
    """Decode an 8-bit RGB color to a (3,) linear RGB vector."""
    channels = np.array([color.r, color.g, color.b], dtype=np.float64) / 255.0
    return srgb_to_linear(channels, threshold)


# =============================================================================
# Luminance & Contrast
# =============================================================================


def get_luminance(color: RGBColor) -> float:
    """
    Relative luminance of an sRGB color.

    Returns:
        0.0 for black, 1.0 for white
    """
    return float(np.dot(rgb_to_linear(color), LUMA_WEIGHTS))


def get_contrast_ratio(color1: RGBColor, color2: RGBColor) -> float:
    """
    Luminance contrast ratio between two colors.

    The lighter color is always the numerator, so the result does not
    depend on argument order.

    Returns:
        Ratio in [1, 21]
    """
    lum1 = get_luminance(color1)
    lum2 = get_luminance(color2)
    brightest = max(lum1, lum2)
    darkest = min(lum1, lum2)
    return (brightest + 0.05) / (darkest + 0.05)


def is_dark(color: RGBColor, threshold: float = DARK_THRESHOLD) -> bool:
    """True if the color's luminance is below threshold."""
    return get_luminance(color) < threshold


# =============================================================================
# sRGB → XYZ → Lab
# =============================================================================


def srgb_uint8_to_xyz(pixels: NDArray) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB pixels [0,255] to CIE XYZ (D65, Y in 0-100).

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    linear = srgb_to_linear(srgb, SRGB_THRESHOLD) * 100.0
    return np.einsum('...j,ij->...i', linear, _RGB_TO_XYZ)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE Lab relative to D65.

    Args:
        xyz: Array of shape (..., 3) with XYZ values (Y in 0-100)

    Returns:
        Array of shape (..., 3) with Lab values (L, a, b)
    """
    t = np.asarray(xyz, dtype=np.float64) / D65_WHITE
    f = np.where(
        t > _LAB_EPSILON,
        np.cbrt(t),
        _LAB_KAPPA_SLOPE * t + 16.0 / 116.0,
    )
    fx = f[..., 0]
    fy = f[..., 1]
    fz = f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def srgb_uint8_to_lab(pixels: NDArray) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB pixels [0,255] to CIE Lab.

    Full chain: sRGB → Linear RGB → XYZ → Lab

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with Lab values
    """
    return xyz_to_lab(srgb_uint8_to_xyz(pixels))


def rgb_to_xyz(color: RGBColor) -> tuple[float, float, float]:
    """Convert a single RGB color to XYZ (Y in 0-100)."""
    x, y, z = srgb_uint8_to_xyz(np.array(tuple(color), dtype=np.float64))
    return float(x), float(y), float(z)


def rgb_to_lab(color: RGBColor) -> LabColor:
    """
    Convert a single RGB color to CIE Lab.

    Args:
        color: RGB color with channels in 0-255

    Returns:
        LabColor with L in [0, 100]
    """
    L, a, b = srgb_uint8_to_lab(np.array(tuple(color), dtype=np.float64))
    return LabColor(L=float(L), a=float(a), b=float(b))
