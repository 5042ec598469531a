# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses).
Every value is produced fresh by a conversion and owned by its caller.
"""

from pickhue.schema.color_values import (
    SCHEMA_VERSION,
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

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Color space types
    "RGBColor",
    "HSLColor",
    "CMYKColor",
    "LabColor",
    # Simulation
    "Deficiency",
    # Derived sets
    "Harmonies",
    "Variants",
    # Inspection
    "ColorComparison",
    "ColorReport",
]
