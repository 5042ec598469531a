# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
ΔE distance (perceptual color difference) in CIE Lab.

Two metrics:
1. CIE76: Euclidean distance in Lab. Fast, but overstates differences
   between saturated colors.
2. CIEDE2000: Lightness, chroma and hue weighted distance with a hue
   rotation term for blues. The current CIE recommendation.

Reference:
- Sharma, G., Wu, W., & Dalal, E. N. (2005). The CIEDE2000 color-difference
  formula: Implementation notes, supplementary test data, and mathematical
  observations. Color Research & Application, 30(1).

Reference thresholds (ΔE 0-100 scale):
- ΔE < 1.0: not perceptible
- ΔE ≈ 2.3: just noticeable difference
- ΔE > 10: clearly different colors
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pickhue.schema.color_values import LabColor, RGBColor
from pickhue.science.colorspace import rgb_to_lab

# Just noticeable difference on the Lab scale
JND_THRESHOLD = 2.3

_POW7_25 = 25.0 ** 7


def _as_lab_array(lab) -> NDArray[np.float64]:
    if isinstance(lab, LabColor):
        return np.array([lab.L, lab.a, lab.b], dtype=np.float64)
    return np.asarray(lab, dtype=np.float64)


# =============================================================================
# CIE76
# =============================================================================


def delta_e_cie76_batch(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Vectorized CIE76 ΔE for arrays of Lab colors.

    Args:
        lab1: Array of shape (..., 3) with Lab values
        lab2: Array of shape (..., 3) with Lab values

    Returns:
        Array of shape (...) with ΔE values
    """
    delta = _as_lab_array(lab1) - _as_lab_array(lab2)
    return np.sqrt(np.sum(delta ** 2, axis=-1))


def delta_e_cie76(lab1: LabColor, lab2: LabColor) -> float:
    """Euclidean distance between two Lab colors."""
    return float(delta_e_cie76_batch(lab1, lab2))


# =============================================================================
# CIEDE2000
# =============================================================================


def delta_e_ciede2000_batch(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
    k_L: float = 1.0,
    k_C: float = 1.0,
    k_H: float = 1.0,
) -> NDArray[np.float64]:
    """
    Vectorized CIEDE2000 ΔE for arrays of Lab colors.

    Follows Sharma et al. (2005) step by step. Degenerate cases:
    - If either C' is zero, the hue difference is 0 and the mean hue is
      the plain sum of hues (not halved).
    - Hue means across the 0°/360° seam shift the sum by ±360 before
      halving so the mean stays in [0, 360).

    Args:
        lab1: Array of shape (..., 3) with Lab values
        lab2: Array of shape (..., 3) with Lab values
        k_L, k_C, k_H: Parametric weighting factors (1.0 for reference
            conditions)

    Returns:
        Array of shape (...) with ΔE00 values
    """
    lab1 = _as_lab_array(lab1)
    lab2 = _as_lab_array(lab2)

    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    # 1. Chroma correction of the a axis
    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar_7 = ((C1 + C2) / 2.0) ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar_7 / (C_bar_7 + _POW7_25)))

    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2
    C1p = np.hypot(a1p, b1)
    C2p = np.hypot(a2p, b2)

    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    # 2. Differences
    chroma_product = C1p * C2p
    achromatic = chroma_product == 0

    dL = L2 - L1
    dC = C2p - C1p

    dh = h2p - h1p
    dh_wrapped = np.where(dh > 180.0, dh - 360.0, np.where(dh < -180.0, dh + 360.0, dh))
    dh_wrapped = np.where(achromatic, 0.0, dh_wrapped)
    dH = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(dh_wrapped / 2.0))

    # 3. Means
    L_bar = (L1 + L2) / 2.0
    Cp_bar = (C1p + C2p) / 2.0

    h_sum = h1p + h2p
    h_bar = np.where(
        np.abs(dh) <= 180.0,
        h_sum / 2.0,
        np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
    )
    h_bar = np.where(achromatic, h_sum, h_bar)

    # 4. Weighting functions
    T = (
        1.0
        - 0.17 * np.cos(np.radians(h_bar - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * h_bar))
        + 0.32 * np.cos(np.radians(3.0 * h_bar + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * h_bar - 63.0))
    )

    L_dev_sq = (L_bar - 50.0) ** 2
    S_L = 1.0 + (0.015 * L_dev_sq) / np.sqrt(20.0 + L_dev_sq)
    S_C = 1.0 + 0.045 * Cp_bar
    S_H = 1.0 + 0.015 * Cp_bar * T

    # 5. Rotation term (blue region, centered at 275°)
    d_theta = 30.0 * np.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    Cp_bar_7 = Cp_bar ** 7
    R_C = 2.0 * np.sqrt(Cp_bar_7 / (Cp_bar_7 + _POW7_25))
    R_T = -np.sin(np.radians(2.0 * d_theta)) * R_C

    # 6. Combine
    l_term = dL / (k_L * S_L)
    c_term = dC / (k_C * S_C)
    h_term = dH / (k_H * S_H)

    return np.sqrt(l_term ** 2 + c_term ** 2 + h_term ** 2 + R_T * c_term * h_term)


def delta_e_ciede2000(
    lab1: LabColor,
    lab2: LabColor,
    k_L: float = 1.0,
    k_C: float = 1.0,
    k_H: float = 1.0,
) -> float:
    """
    CIEDE2000 color difference between two Lab colors.

    Single-color form of delta_e_ciede2000_batch; both give identical
    results.
    """
    return float(delta_e_ciede2000_batch(lab1, lab2, k_L=k_L, k_C=k_C, k_H=k_H))


# =============================================================================
# RGB convenience
# =============================================================================


def delta_e(color1: RGBColor, color2: RGBColor) -> float:
    """CIE76 ΔE between two sRGB colors."""
    return delta_e_cie76(rgb_to_lab(color1), rgb_to_lab(color2))


def delta_e_2000(color1: RGBColor, color2: RGBColor) -> float:
    """CIEDE2000 ΔE between two sRGB colors."""
    return delta_e_ciede2000(rgb_to_lab(color1), rgb_to_lab(color2))
