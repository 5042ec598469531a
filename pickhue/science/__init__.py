# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Color science core for Pickhue.

This package provides deterministic conversions and derivations for single
colors. Every function is pure: no I/O, no shared state.
"""

from pickhue.science.codec import ParseError, hex_to_rgb, rgb_to_hex
from pickhue.science.colorspace import get_contrast_ratio, get_luminance, rgb_to_lab
from pickhue.science.conversions import hsl_to_rgb, rgb_to_cmyk, rgb_to_hsl
from pickhue.science.difference import (
    delta_e,
    delta_e_2000,
    delta_e_cie76,
    delta_e_ciede2000,
)
from pickhue.science.harmony import get_harmonies
from pickhue.science.inspect import InspectConfig, compare_colors, inspect_color, inspect_hex
from pickhue.science.variants import get_color_variants
from pickhue.science.vision import simulate_color_blindness

__all__ = [
    "ParseError",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_cmyk",
    "get_luminance",
    "get_contrast_ratio",
    "rgb_to_lab",
    "delta_e",
    "delta_e_2000",
    "delta_e_cie76",
    "delta_e_ciede2000",
    "simulate_color_blindness",
    "get_harmonies",
    "get_color_variants",
    "InspectConfig",
    "compare_colors",
    "inspect_color",
    "inspect_hex",
]
