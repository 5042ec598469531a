# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""Tests for HSL and CMYK conversions."""

import pytest

from pickhue.schema import CMYKColor, HSLColor, RGBColor
from pickhue.science.conversions import hsl_to_rgb, rgb_to_cmyk, rgb_to_hsl


class TestRgbToHsl:

    def test_red(self):
        assert rgb_to_hsl(RGBColor(255, 0, 0)) == HSLColor(0, 100, 50)

    def test_green(self):
        assert rgb_to_hsl(RGBColor(0, 255, 0)) == HSLColor(120, 100, 50)

    def test_blue(self):
        assert rgb_to_hsl(RGBColor(0, 0, 255)) == HSLColor(240, 100, 50)

    def test_achromatic_gray(self):
        hsl = rgb_to_hsl(RGBColor(128, 128, 128))
        assert hsl == HSLColor(0, 0, 50)
        assert hsl.is_achromatic

    def test_black_and_white(self):
        assert rgb_to_hsl(RGBColor(0, 0, 0)) == HSLColor(0, 0, 0)
        assert rgb_to_hsl(RGBColor(255, 255, 255)) == HSLColor(0, 0, 100)

    def test_light_color_uses_upper_saturation_branch(self):
        # l > 0.5: s = d / (2 - max - min)
        assert rgb_to_hsl(RGBColor(255, 102, 102)) == HSLColor(0, 100, 70)

    def test_hue_near_360_wraps_to_zero(self):
        # raw hue is 359.76, which rounds to 360
        hsl = rgb_to_hsl(RGBColor(255, 0, 1))
        assert hsl.h == 0

    def test_hue_in_range(self):
        for rgb in [(255, 0, 128), (10, 20, 30), (200, 10, 250), (1, 0, 0)]:
            h = rgb_to_hsl(RGBColor(*rgb)).h
            assert 0 <= h < 360


class TestHslToRgb:

    def test_primaries(self):
        assert hsl_to_rgb(HSLColor(0, 100, 50)) == RGBColor(255, 0, 0)
        assert hsl_to_rgb(HSLColor(120, 100, 50)) == RGBColor(0, 255, 0)
        assert hsl_to_rgb(HSLColor(240, 100, 50)) == RGBColor(0, 0, 255)

    def test_cyan(self):
        assert hsl_to_rgb(HSLColor(180, 100, 50)) == RGBColor(0, 255, 255)

    def test_zero_saturation_is_gray(self):
        c = hsl_to_rgb(HSLColor(200, 0, 80))
        assert c == RGBColor(204, 204, 204)

    def test_dark_shade(self):
        assert hsl_to_rgb(HSLColor(0, 100, 30)) == RGBColor(153, 0, 0)

    def test_muted_blue(self):
        assert hsl_to_rgb(HSLColor(210, 50, 40)) == RGBColor(51, 102, 153)


class TestHslRoundtrip:
    """rgb → hsl → rgb error is bounded by integer HSL quantization."""

    @staticmethod
    def _error(rgb):
        recovered = hsl_to_rgb(rgb_to_hsl(RGBColor(*rgb)))
        return max(abs(got - want) for got, want in zip(recovered, rgb))

    @pytest.mark.parametrize("rgb", [
        (255, 0, 0),
        (0, 255, 0),
        (0, 0, 255),
        (255, 255, 0),
        (0, 255, 255),
        (255, 0, 255),
        (255, 128, 0),
        (128, 0, 255),
        (0, 128, 255),
        (51, 102, 153),
        (255, 102, 102),
        (153, 0, 0),
    ])
    def test_within_one_unit(self, rgb):
        assert self._error(rgb) <= 1

    def test_all_grays(self):
        for v in range(256):
            recovered = hsl_to_rgb(rgb_to_hsl(RGBColor(v, v, v)))
            assert recovered.r == recovered.g == recovered.b
            assert abs(recovered.r - v) <= 1

    def test_dark_blue_exceeds_one_unit(self):
        # l = 0.59% rounds to 1%
        assert rgb_to_hsl(RGBColor(0, 0, 3)) == HSLColor(240, 100, 1)
        assert hsl_to_rgb(HSLColor(240, 100, 1)) == RGBColor(0, 0, 5)

    def test_worst_case(self):
        hsl = rgb_to_hsl(RGBColor(2, 228, 230))
        assert hsl == HSLColor(181, 98, 45)
        assert hsl_to_rgb(hsl) == RGBColor(2, 223, 227)
        assert self._error((2, 228, 230)) == 5

    def test_grid_bound(self):
        levels = range(0, 256, 5)
        worst = max(
            self._error((r, g, b))
            for r in levels for g in levels for b in levels
        )
        assert worst <= 5


class TestRgbToCmyk:

    def test_red(self):
        assert rgb_to_cmyk(RGBColor(255, 0, 0)) == CMYKColor(0, 100, 100, 0)

    def test_pure_black_short_circuit(self):
        assert rgb_to_cmyk(RGBColor(0, 0, 0)) == CMYKColor(0, 0, 0, 100)

    def test_white(self):
        assert rgb_to_cmyk(RGBColor(255, 255, 255)) == CMYKColor(0, 0, 0, 0)

    def test_gray_is_key_only(self):
        cmyk = rgb_to_cmyk(RGBColor(128, 128, 128))
        assert (cmyk.c, cmyk.m, cmyk.y) == (0, 0, 0)
        assert cmyk.k == 50

    def test_near_black_does_not_divide_by_zero(self):
        cmyk = rgb_to_cmyk(RGBColor(1, 0, 0))
        assert cmyk == CMYKColor(0, 100, 100, 100)

    def test_channels_in_percent_range(self):
        for rgb in [(12, 200, 99), (255, 128, 0), (3, 3, 250)]:
            assert all(0 <= v <= 100 for v in rgb_to_cmyk(RGBColor(*rgb)))
