# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (copy formats, summary)."""

import json

import pytest

from pickhue import InspectConfig, RGBColor, inspect_color
from pickhue.runtime import SerializerFormat, to_copy_formats, to_summary
from pickhue.runtime.serializers.summary import describe_color
from pickhue.schema import HSLColor


@pytest.fixture
def red_report():
    return inspect_color(RGBColor(255, 0, 0))


@pytest.fixture
def compared_report():
    return inspect_color(RGBColor(255, 0, 0), reference=RGBColor(255, 0, 0))


class TestCopyFormats:

    def test_red(self):
        assert to_copy_formats(RGBColor(255, 0, 0)) == {
            "HEX": "#FF0000",
            "RGB": "rgb(255, 0, 0)",
            "HSL": "hsl(0, 100%, 50%)",
            "CMYK": "cmyk(0%, 100%, 100%, 0%)",
        }

    def test_order(self):
        assert list(to_copy_formats(RGBColor(1, 2, 3))) == ["HEX", "RGB", "HSL", "CMYK"]

    def test_black(self):
        formats = to_copy_formats(RGBColor(0, 0, 0))
        assert formats["HSL"] == "hsl(0, 0%, 0%)"
        assert formats["CMYK"] == "cmyk(0%, 0%, 0%, 100%)"


class TestSummaryNatural:

    def test_preamble(self, red_report):
        text = to_summary(red_report)
        assert text.startswith("## Pickhue Color Report")

    def test_no_preamble(self, red_report):
        text = to_summary(red_report, preamble=False)
        assert text.startswith("**Color:** Red #FF0000")

    def test_representations(self, red_report):
        text = to_summary(red_report)
        assert "rgb(255, 0, 0)" in text
        assert "hsl(0, 100%, 50%)" in text
        assert "cmyk(0%, 100%, 100%, 0%)" in text
        assert "Lab(" in text

    def test_sections(self, red_report):
        text = to_summary(red_report)
        assert "**Color Vision:**" in text
        assert "- Achromatopsia: #" in text
        assert "- Complementary: #00FFFF" in text
        assert "- Invert: #00FFFF" in text

    def test_comparison_line(self, compared_report):
        text = to_summary(compared_report)
        assert "**Compared to #FF0000:**" in text
        assert "(match)" in text

    def test_sections_omitted(self):
        config = InspectConfig(include_simulations=False, include_harmonies=False)
        text = to_summary(inspect_color(RGBColor(1, 2, 3), config=config))
        assert "Color Vision" not in text
        assert "Harmonies" not in text
        assert "Variants" in text

    def test_report_method(self, red_report):
        assert red_report.to_summary() == to_summary(red_report)


class TestSummaryJson:

    def test_compact(self, red_report):
        text = to_summary(red_report, format=SerializerFormat.JSON)
        assert "\n" not in text
        assert json.loads(text)["hex"] == "#FF0000"

    def test_pretty(self, compared_report):
        text = to_summary(compared_report, format=SerializerFormat.JSON_PRETTY)
        data = json.loads(text)
        assert data["comparison"]["is_match"] is True


class TestDescribeColor:

    @pytest.mark.parametrize("hsl, name", [
        (HSLColor(0, 0, 100), "White"),
        (HSLColor(0, 0, 0), "Black"),
        (HSLColor(0, 0, 50), "Gray"),
        (HSLColor(0, 100, 50), "Red"),
        (HSLColor(120, 100, 50), "Green"),
        (HSLColor(240, 100, 90), "Light blue"),
        (HSLColor(30, 100, 20), "Dark orange"),
        (HSLColor(300, 80, 50), "Pink"),
    ])
    def test_names(self, hsl, name):
        assert describe_color(hsl) == name
