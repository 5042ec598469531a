# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Pickhue -- Color science engine for a pixel color picker.

Turns a sampled pixel (or a typed hex string) into everything a picker
shows: equivalent representations, perceptual comparison against a
reference, simulated color-vision deficiencies, and derived palettes.

Quick start::

    from pickhue import RGBColor, inspect_color

    report = inspect_color(RGBColor(57, 65, 200))
    report.hex          # "#3941C8"
    report.to_summary() # Human-readable block
    report.to_json()    # JSON for the UI layer
"""

from __future__ import annotations

__version__ = "1.0.0"

from pickhue.schema import (
    CMYKColor,
    ColorComparison,
    ColorReport,
    Deficiency,
    Harmonies,
    HSLColor,
    LabColor,
    RGBColor,
    Variants,
)
from pickhue.science import (
    InspectConfig,
    ParseError,
    delta_e,
    delta_e_2000,
    get_color_variants,
    get_contrast_ratio,
    get_harmonies,
    get_luminance,
    hex_to_rgb,
    hsl_to_rgb,
    inspect_color,
    inspect_hex,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    simulate_color_blindness,
)

__all__ = [
    # Core API
    "inspect_color",
    "inspect_hex",
    "InspectConfig",
    "ColorReport",
    # Conversions
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_cmyk",
    "rgb_to_lab",
    "get_luminance",
    "get_contrast_ratio",
    # Comparison and derivation
    "delta_e",
    "delta_e_2000",
    "simulate_color_blindness",
    "get_harmonies",
    "get_color_variants",
    # Types
    "RGBColor",
    "HSLColor",
    "CMYKColor",
    "LabColor",
    "Deficiency",
    "Harmonies",
    "Variants",
    "ColorComparison",
    # Errors
    "ParseError",
    # Version
    "__version__",
]
