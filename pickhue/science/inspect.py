# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Main inspection API.

Composes every conversion, simulation and palette builder into one
ColorReport: the full set of facts the picker shows for a sampled color.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from pickhue.schema import ColorComparison, ColorReport, RGBColor
from pickhue.science.codec import hex_to_rgb, rgb_to_hex
from pickhue.science.colorspace import (
    DARK_THRESHOLD,
    get_contrast_ratio,
    get_luminance,
    rgb_to_lab,
)
from pickhue.science.conversions import rgb_to_cmyk, rgb_to_hsl
from pickhue.science.difference import JND_THRESHOLD, delta_e, delta_e_2000
from pickhue.science.harmony import get_harmonies
from pickhue.science.variants import get_color_variants
from pickhue.science.vision import simulate_all

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InspectConfig:
    """Configuration for color inspection."""

    # Optional report sections
    include_simulations: bool = True
    include_harmonies: bool = True
    include_variants: bool = True

    # CIEDE2000 distance below which a sample matches its reference
    jnd_threshold: float = JND_THRESHOLD

    # Luminance below which a sample counts as dark
    dark_threshold: float = DARK_THRESHOLD


def compare_colors(
    color: RGBColor,
    reference: RGBColor,
    jnd_threshold: float = JND_THRESHOLD,
) -> ColorComparison:
    """
    Compare a color against a reference.

    Args:
        color: The sampled color
        reference: The color to compare against
        jnd_threshold: ΔE2000 below which the two count as a match

    Returns:
        ColorComparison with both ΔE metrics and the contrast ratio
    """
    de2000 = delta_e_2000(reference, color)
    return ColorComparison(
        reference=reference,
        delta_e_76=delta_e(reference, color),
        delta_e_2000=de2000,
        contrast_ratio=get_contrast_ratio(reference, color),
        is_match=de2000 < jnd_threshold,
    )


def inspect_color(
    color: RGBColor,
    reference: Optional[RGBColor] = None,
    config: Optional[InspectConfig] = None,
) -> ColorReport:
    """
    Build the complete report for one color.

    Args:
        color: The sampled color (channels 0-255; use RGBColor.from_sample
            for raw sampler output)
        reference: Optional reference color to compare against
        config: Inspection settings (uses defaults if None)

    Returns:
        ColorReport with all representations and derived colors

    Example:
        >>> from pickhue import RGBColor, inspect_color
        >>> report = inspect_color(RGBColor(255, 0, 0))
        >>> report.hex
        '#FF0000'
        >>> tuple(report.hsl)
        (0, 100, 50)
    """
    if config is None:
        config = InspectConfig()

    luminance = get_luminance(color)

    report = ColorReport(
        rgb=color,
        hex=rgb_to_hex(color),
        hsl=rgb_to_hsl(color),
        cmyk=rgb_to_cmyk(color),
        lab=rgb_to_lab(color),
        luminance=luminance,
        is_dark=luminance < config.dark_threshold,
        simulations=simulate_all(color) if config.include_simulations else None,
        harmonies=get_harmonies(color) if config.include_harmonies else None,
        variants=get_color_variants(color) if config.include_variants else None,
        comparison=(
            compare_colors(color, reference, config.jnd_threshold)
            if reference is not None else None
        ),
    )

    logger.debug(
        "Inspected %s (luminance=%.4f, reference=%s)",
        report.hex,
        luminance,
        rgb_to_hex(reference) if reference is not None else None,
    )
    return report


def inspect_hex(
    text: str,
    reference: Optional[str] = None,
    config: Optional[InspectConfig] = None,
) -> ColorReport:
    """
    Parse a hex string (and optional reference hex) and inspect it.

    Raises:
        ParseError: If either string is not a six-digit hex color
    """
    color = hex_to_rgb(text)
    ref = hex_to_rgb(reference) if reference is not None else None
    return inspect_color(color, reference=ref, config=config)
