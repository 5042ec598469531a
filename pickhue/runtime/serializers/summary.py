# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Summary serializer for a ColorReport.

Formats a report as a short human-readable block (for tooltips, logs and
notifications) or as JSON for the presentation layer.
"""

from __future__ import annotations

import json

from pickhue.runtime.serializers.base import SerializerFormat
from pickhue.runtime.serializers.clipboard import format_cmyk, format_hsl, format_rgb
from pickhue.schema import ColorReport, HSLColor


def to_summary(
    report: ColorReport,
    *,
    format: SerializerFormat = SerializerFormat.NATURAL,
    preamble: bool = True,
) -> str:
    """Serialize a ColorReport as a summary.

    Args:
        report: The ColorReport to serialize.
        format: NATURAL (human-readable), JSON or JSON_PRETTY.
        preamble: Include the heading line (NATURAL only).

    Returns:
        Formatted summary string.

    Example (NATURAL)::

        ## Pickhue Color Report

        **Color:** Red #FF0000
        - rgb(255, 0, 0)
        - hsl(0, 100%, 50%)
        - cmyk(0%, 100%, 100%, 0%)
        - Lab(53.24, 80.09, 67.20)
        - Luminance: 0.2126

        **Color Vision:**
        - Protanopia: ...
    """
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(report.to_dict(), indent=2)
    elif format == SerializerFormat.JSON:
        return json.dumps(report.to_dict(), separators=(",", ":"))
    else:
        return _to_natural(report, preamble)


def _to_natural(report: ColorReport, preamble: bool) -> str:
    """Generate natural language representation."""
    lines: list[str] = []

    if preamble:
        lines.extend([
            "## Pickhue Color Report",
            "",
        ])

    lab = report.lab
    lines.append(f"**Color:** {describe_color(report.hsl)} {report.hex}")
    lines.append(f"- {format_rgb(report.rgb)}")
    lines.append(f"- {format_hsl(report.hsl)}")
    lines.append(f"- {format_cmyk(report.cmyk)}")
    lines.append(f"- Lab({lab.L:.2f}, {lab.a:.2f}, {lab.b:.2f})")
    lines.append(f"- Luminance: {report.luminance:.4f}")
    lines.append("")

    if report.comparison is not None:
        cmp = report.comparison
        verdict = "match" if cmp.is_match else "different"
        lines.append(
            f"**Compared to {cmp.reference.hex}:** "
            f"ΔE76 {cmp.delta_e_76:.2f}, "
            f"ΔE2000 {cmp.delta_e_2000:.2f} ({verdict}), "
            f"contrast {cmp.contrast_ratio:.2f}:1"
        )
        lines.append("")

    if report.simulations is not None:
        lines.append("**Color Vision:**")
        for kind, color in report.simulations:
            lines.append(f"- {kind.label}: {color.hex}")
        lines.append("")

    if report.harmonies is not None:
        lines.append("**Harmonies:**")
        for name, colors in report.harmonies.items():
            hexes = ", ".join(c.hex for c in colors)
            lines.append(f"- {name.capitalize()}: {hexes}")
        lines.append("")

    if report.variants is not None:
        lines.append("**Variants:**")
        for name, color in report.variants.items():
            lines.append(f"- {name.capitalize()}: {color.hex}")
        lines.append("")

    return "\n".join(lines).rstrip("\n")


def describe_color(hsl: HSLColor) -> str:
    """Generate a rough color name from HSL."""
    if hsl.s < 10:
        if hsl.l > 90:
            return "White"
        elif hsl.l < 10:
            return "Black"
        elif hsl.l < 35:
            return "Dark gray"
        elif hsl.l > 75:
            return "Light gray"
        return "Gray"

    name = _hue_to_name(hsl.h)
    if hsl.l > 75:
        name = f"Light {name.lower()}"
    elif hsl.l < 25:
        name = f"Dark {name.lower()}"
    return name


def _hue_to_name(hue: int) -> str:
    """Convert HSL hue angle to an approximate color name.

    HSL hue wheel (approximate ranges used here):
      0-14, 345-359: Red
      15-44: Orange
      45-69: Yellow
      70-164: Green
      165-194: Cyan
      195-254: Blue
      255-289: Purple
      290-344: Pink
    """
    if hue < 15 or hue >= 345:
        return "Red"
    elif hue < 45:
        return "Orange"
    elif hue < 70:
        return "Yellow"
    elif hue < 165:
        return "Green"
    elif hue < 195:
        return "Cyan"
    elif hue < 255:
        return "Blue"
    elif hue < 290:
        return "Purple"
    else:
        return "Pink"
