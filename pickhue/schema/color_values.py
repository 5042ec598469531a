# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Color value types for Pickhue.

Design principles:
- Immutable: All types are frozen dataclasses
- Distinct: One type per color space, so a conversion cannot silently accept
  an HSL triple where an RGB triple is expected
- Unchecked ranges: Channel ranges are documented, not enforced. The math is
  defined for in-domain inputs only; callers holding raw samples clamp first
  (see RGBColor.from_sample)
- Serializable: JSON-ready for the presentation layer

Ranges:
- RGB: integers 0-255 per channel
- HSL: hue 0-359 degrees, saturation/lightness 0-100 percent
- CMYK: integers 0-100 percent
- Lab: L 0-100, a/b roughly -128..127 (D65 reference white)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


# =============================================================================
# Channel Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    A gamma-encoded sRGB color with 8-bit integer channels.

    This is the canonical input of every conversion: the pixel sampler
    delivers RGB triples and typed hex strings are parsed into them.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    @property
    def hex(self) -> str:
        """Canonical uppercase hex string like "#3941C8"."""
        from pickhue.science.codec import rgb_to_hex
        return rgb_to_hex(self)

    @classmethod
    def from_hex(cls, text: str) -> RGBColor:
        """
        Parse a hex string ("#3941C8" or "3941c8").

        Raises:
            ParseError: If the text is not exactly six hex digits.
        """
        from pickhue.science.codec import hex_to_rgb
        return hex_to_rgb(text)

    @classmethod
    def from_sample(cls, r: float, g: float, b: float) -> RGBColor:
        """
        Build a color from raw sampler output.

        Channels are rounded and clamped to 0-255, which the arithmetic
        functions never do on their own.
        """
        from pickhue.science.codec import clamp_channel
        return cls(clamp_channel(r), clamp_channel(g), clamp_channel(b))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    Cylindrical form of sRGB.

    Attributes:
        h: Hue in whole degrees [0, 360). 0 for achromatic colors.
        s: Saturation in whole percent [0, 100]. 0 for achromatic colors.
        l: Lightness in whole percent [0, 100]
    """
    h: int
    s: int
    l: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.h, self.s, self.l))

    @property
    def is_achromatic(self) -> bool:
        """True for grays, black and white."""
        return self.s == 0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSLColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class CMYKColor:
    """
    Naive subtractive form of sRGB (no ink profile).

    Attributes:
        c, m, y, k: Whole percent [0, 100]
    """
    c: int
    m: int
    y: int
    k: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.c, self.m, self.y, self.k))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}

    @classmethod
    def from_dict(cls, data: dict) -> CMYKColor:
        """Deserialize from dictionary."""
        return cls(c=data["c"], m=data["m"], y=data["y"], k=data["k"])


@dataclass(frozen=True, slots=True)
class LabColor:
    """
    A color in CIE L*a*b* relative to the D65 white point.

    Attributes:
        L: Lightness (0 = black, 100 = white)
        a: Green (-) to red (+) axis
        b: Blue (-) to yellow (+) axis
    """
    L: float
    a: float
    b: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.L, self.a, self.b))

    @property
    def chroma(self) -> float:
        """Distance from the neutral axis."""
        return (self.a ** 2 + self.b ** 2) ** 0.5

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> LabColor:
        """Deserialize from dictionary."""
        return cls(L=data["L"], a=data["a"], b=data["b"])


# =============================================================================
# Vision Deficiency
# =============================================================================


class Deficiency(Enum):
    """
    Color-vision deficiency types that can be simulated.

    Three dichromacies (one cone class missing) and full color blindness.
    """
    PROTANOPIA = "protanopia"        # no L cones (red-blind)
    DEUTERANOPIA = "deuteranopia"    # no M cones (green-blind)
    TRITANOPIA = "tritanopia"        # no S cones (blue-blind)
    ACHROMATOPSIA = "achromatopsia"  # no color vision

    @property
    def label(self) -> str:
        """Display label, e.g. "Protanopia"."""
        return self.value.capitalize()


# =============================================================================
# Derived Color Sets
# =============================================================================


def _colors_to_list(colors: tuple[RGBColor, ...]) -> list[dict]:
    return [c.to_dict() for c in colors]


def _colors_from_list(data: list[dict]) -> tuple[RGBColor, ...]:
    return tuple(RGBColor.from_dict(c) for c in data)


@dataclass(frozen=True, slots=True)
class Harmonies:
    """
    Palette suggestions derived from one color by fixed hue offsets.

    All members share the source saturation and lightness, except
    monochromatic which keeps hue/saturation and shifts lightness.

    Attributes:
        complementary: Hue +180
        analogous: Hue -30, +30
        triadic: Hue +120, +240
        tetradic: Hue +90, +180, +270
        monochromatic: Lightness -20, +20 (clamped to 0-100)
    """
    complementary: tuple[RGBColor]
    analogous: tuple[RGBColor, RGBColor]
    triadic: tuple[RGBColor, RGBColor]
    tetradic: tuple[RGBColor, RGBColor, RGBColor]
    monochromatic: tuple[RGBColor, RGBColor]

    def items(self) -> tuple[tuple[str, tuple[RGBColor, ...]], ...]:
        """Named groups in display order."""
        return (
            ("complementary", self.complementary),
            ("analogous", self.analogous),
            ("triadic", self.triadic),
            ("tetradic", self.tetradic),
            ("monochromatic", self.monochromatic),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {name: _colors_to_list(colors) for name, colors in self.items()}

    @classmethod
    def from_dict(cls, data: dict) -> Harmonies:
        """Deserialize from dictionary."""
        return cls(
            complementary=_colors_from_list(data["complementary"]),
            analogous=_colors_from_list(data["analogous"]),
            triadic=_colors_from_list(data["triadic"]),
            tetradic=_colors_from_list(data["tetradic"]),
            monochromatic=_colors_from_list(data["monochromatic"]),
        )


@dataclass(frozen=True, slots=True)
class Variants:
    """
    Whole-color filters applied to a single color.

    Attributes:
        invert: 255 minus each channel
        grayscale: Luma-weighted gray (r == g == b)
        sepia: Classic sepia tone matrix, clamped
    """
    invert: RGBColor
    grayscale: RGBColor
    sepia: RGBColor

    def items(self) -> tuple[tuple[str, RGBColor], ...]:
        """Named variants in display order."""
        return (
            ("invert", self.invert),
            ("grayscale", self.grayscale),
            ("sepia", self.sepia),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {name: color.to_dict() for name, color in self.items()}

    @classmethod
    def from_dict(cls, data: dict) -> Variants:
        """Deserialize from dictionary."""
        return cls(
            invert=RGBColor.from_dict(data["invert"]),
            grayscale=RGBColor.from_dict(data["grayscale"]),
            sepia=RGBColor.from_dict(data["sepia"]),
        )


# =============================================================================
# Inspection Report
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorComparison:
    """
    Perceptual comparison of a sampled color against a reference.

    Attributes:
        reference: The reference color
        delta_e_76: Euclidean Lab distance
        delta_e_2000: CIEDE2000 distance
        contrast_ratio: WCAG-style luminance contrast (1-21)
        is_match: True when delta_e_2000 is below the just-noticeable threshold
    """
    reference: RGBColor
    delta_e_76: float
    delta_e_2000: float
    contrast_ratio: float
    is_match: bool

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "reference": self.reference.to_dict(),
            "delta_e_76": self.delta_e_76,
            "delta_e_2000": self.delta_e_2000,
            "contrast_ratio": self.contrast_ratio,
            "is_match": self.is_match,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorComparison:
        """Deserialize from dictionary."""
        return cls(
            reference=RGBColor.from_dict(data["reference"]),
            delta_e_76=data["delta_e_76"],
            delta_e_2000=data["delta_e_2000"],
            contrast_ratio=data["contrast_ratio"],
            is_match=data["is_match"],
        )


@dataclass(frozen=True, slots=True)
class ColorReport:
    """
    Everything the picker shows for one sampled color.

    Produced by pickhue.science.inspect_color. Optional sections are None
    when disabled in the inspection config or, for comparison, when no
    reference color was given.

    Attributes:
        rgb: The sampled color
        hex: Canonical hex string
        hsl: HSL representation
        cmyk: CMYK representation
        lab: CIE Lab representation
        luminance: Relative luminance (0-1)
        is_dark: True when luminance is below the darkness threshold
        simulations: Appearance per deficiency, in Deficiency order
        harmonies: Derived harmony palette
        variants: Invert / grayscale / sepia
        comparison: Comparison against a reference color
    """
    rgb: RGBColor
    hex: str
    hsl: HSLColor
    cmyk: CMYKColor
    lab: LabColor
    luminance: float
    is_dark: bool
    simulations: Optional[tuple[tuple[Deficiency, RGBColor], ...]] = None
    harmonies: Optional[Harmonies] = None
    variants: Optional[Variants] = None
    comparison: Optional[ColorComparison] = None
    version: str = field(default=SCHEMA_VERSION)

    def simulated(self, deficiency: Deficiency) -> RGBColor:
        """
        Look up the simulated color for one deficiency.

        Raises:
            KeyError: If simulations were not computed.
        """
        for kind, color in self.simulations or ():
            if kind == deficiency:
                return color
        raise KeyError(f"No simulation for '{deficiency.value}'")

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON output.

        This is the payload handed to the presentation layer.
        """
        result = {
            "version": self.version,
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "cmyk": self.cmyk.to_dict(),
            "lab": self.lab.to_dict(),
            "luminance": self.luminance,
            "is_dark": self.is_dark,
        }
        if self.simulations is not None:
            result["simulations"] = {
                kind.value: color.to_dict() for kind, color in self.simulations
            }
        if self.harmonies is not None:
            result["harmonies"] = self.harmonies.to_dict()
        if self.variants is not None:
            result["variants"] = self.variants.to_dict()
        if self.comparison is not None:
            result["comparison"] = self.comparison.to_dict()
        return result

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_summary(self) -> str:
        """Human-readable summary (see pickhue.runtime.to_summary)."""
        # Import here to avoid circular imports
        from pickhue.runtime.serializers.summary import to_summary
        return to_summary(self)

    @classmethod
    def from_dict(cls, data: dict) -> ColorReport:
        """Deserialize from dictionary."""
        simulations = data.get("simulations")
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            rgb=RGBColor.from_dict(data["rgb"]),
            hex=data["hex"],
            hsl=HSLColor.from_dict(data["hsl"]),
            cmyk=CMYKColor.from_dict(data["cmyk"]),
            lab=LabColor.from_dict(data["lab"]),
            luminance=data["luminance"],
            is_dark=data["is_dark"],
            simulations=(
                tuple(
                    (Deficiency(kind), RGBColor.from_dict(color))
                    for kind, color in simulations.items()
                )
                if simulations is not None else None
            ),
            harmonies=(
                Harmonies.from_dict(data["harmonies"])
                if data.get("harmonies") else None
            ),
            variants=(
                Variants.from_dict(data["variants"])
                if data.get("variants") else None
            ),
            comparison=(
                ColorComparison.from_dict(data["comparison"])
                if data.get("comparison") else None
            ),
        )

    @classmethod
    def from_json(cls, json_str: str) -> ColorReport:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
