# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Presentation runtime for Pickhue.

Turns color values and reports into the strings a picker UI shows or copies:

1. Copy formats -- HEX / RGB / HSL / CMYK texts for the clipboard
2. Summary -- Human-readable or JSON report for display

The runtime layer never modifies report content.
"""

from pickhue.runtime.serializers import (
    SerializerFormat,
    to_copy_formats,
    to_summary,
)

__all__ = [
    "to_copy_formats",
    "to_summary",
    "SerializerFormat",
]
