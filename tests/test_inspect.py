# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""End-to-end tests for the inspection API."""

import logging

import pytest

from pickhue import (
    ColorReport,
    Deficiency,
    InspectConfig,
    ParseError,
    RGBColor,
    inspect_color,
    inspect_hex,
)
from pickhue.science.inspect import compare_colors


@pytest.fixture
def red_report():
    return inspect_color(RGBColor(255, 0, 0))


class TestInspectColor:

    def test_representations(self, red_report):
        assert red_report.hex == "#FF0000"
        assert tuple(red_report.hsl) == (0, 100, 50)
        assert tuple(red_report.cmyk) == (0, 100, 100, 0)
        assert red_report.lab.L == pytest.approx(53.24, abs=0.1)
        assert red_report.luminance == pytest.approx(0.2126)

    def test_all_sections_by_default(self, red_report):
        assert red_report.simulations is not None
        assert red_report.harmonies is not None
        assert red_report.variants is not None
        assert red_report.comparison is None

    def test_simulation_lookup(self, red_report):
        gray = red_report.simulated(Deficiency.ACHROMATOPSIA)
        assert gray.r == gray.g == gray.b

    def test_darkness(self):
        assert inspect_color(RGBColor(0, 0, 0)).is_dark
        assert not inspect_color(RGBColor(255, 255, 255)).is_dark

    def test_dark_threshold_config(self):
        config = InspectConfig(dark_threshold=0.0)
        assert not inspect_color(RGBColor(0, 0, 0), config=config).is_dark

    def test_sections_can_be_disabled(self):
        config = InspectConfig(
            include_simulations=False,
            include_harmonies=False,
            include_variants=False,
        )
        report = inspect_color(RGBColor(57, 65, 200), config=config)
        assert report.simulations is None
        assert report.harmonies is None
        assert report.variants is None
        with pytest.raises(KeyError):
            report.simulated(Deficiency.PROTANOPIA)

    def test_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pickhue.science.inspect"):
            inspect_color(RGBColor(57, 65, 200))
        assert "#3941C8" in caplog.text


class TestComparison:

    def test_same_color_matches(self):
        c = RGBColor(57, 65, 200)
        report = inspect_color(c, reference=c)
        cmp = report.comparison
        assert cmp.reference == c
        assert cmp.delta_e_76 == 0.0
        assert cmp.delta_e_2000 == pytest.approx(0.0, abs=1e-12)
        assert cmp.contrast_ratio == pytest.approx(1.0)
        assert cmp.is_match

    def test_different_colors(self):
        cmp = compare_colors(RGBColor(255, 255, 255), RGBColor(0, 0, 0))
        assert not cmp.is_match
        assert cmp.delta_e_2000 == pytest.approx(100.0, abs=0.01)
        assert cmp.contrast_ratio == pytest.approx(21.0)

    def test_jnd_threshold(self):
        a = RGBColor(100, 100, 100)
        b = RGBColor(101, 100, 100)
        assert compare_colors(a, b).is_match
        assert not compare_colors(a, b, jnd_threshold=0.0).is_match


class TestInspectHex:

    def test_parses_and_inspects(self):
        report = inspect_hex("3941c8")
        assert report.rgb == RGBColor(57, 65, 200)
        assert report.hex == "#3941C8"

    def test_with_reference(self):
        report = inspect_hex("#FF0000", reference="ff0000")
        assert report.comparison.is_match

    def test_bad_color(self):
        with pytest.raises(ParseError):
            inspect_hex("#F00")

    def test_bad_reference(self):
        with pytest.raises(ParseError):
            inspect_hex("#FF0000", reference="nope")


class TestReportSerialization:

    def test_json_roundtrip(self):
        report = inspect_color(RGBColor(57, 65, 200), reference=RGBColor(60, 60, 190))
        recovered = ColorReport.from_json(report.to_json())
        assert recovered == report

    def test_json_roundtrip_without_sections(self):
        config = InspectConfig(include_simulations=False, include_variants=False)
        report = inspect_color(RGBColor(1, 2, 3), config=config)
        recovered = ColorReport.from_dict(report.to_dict())
        assert recovered == report
        assert recovered.simulations is None

    def test_dict_shape(self, red_report):
        d = red_report.to_dict()
        assert d["hex"] == "#FF0000"
        assert d["rgb"] == {"r": 255, "g": 0, "b": 0}
        assert set(d["simulations"]) == {k.value for k in Deficiency}
        assert set(d["harmonies"]) == {
            "complementary", "analogous", "triadic", "tetradic", "monochromatic",
        }
        assert "comparison" not in d
