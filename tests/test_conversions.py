"""Tests for color space conversions and compositing."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wcaglab.core.conversions import (
    alpha_blend,
    hex_to_rgb,
    hsl_to_rgb,
    oklab_to_oklch,
    oklab_to_rgb,
    oklch_to_oklab,
    oklch_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_oklab,
    rgb_to_oklch,
)
from wcaglab.core.types import HSL, OKLAB, OKLCH, RGB

channel = st.integers(min_value=0, max_value=255)
rgb_colors = st.builds(RGB, channel, channel, channel)


def test_alpha_blend_half_red_over_blue():
    assert alpha_blend(RGB(255, 0, 0, 0.5), RGB(0, 0, 255)) == RGB(128, 0, 128, 1.0)


def test_alpha_blend_extremes():
    assert alpha_blend(RGB(10, 20, 30), RGB(200, 200, 200)) == RGB(10, 20, 30, 1.0)
    assert alpha_blend(RGB(10, 20, 30, 0.0), RGB(200, 200, 200)) == RGB(200, 200, 200, 1.0)


def test_hex_to_rgb():
    assert hex_to_rgb("#ff8800") == RGB(255, 136, 0)
    assert hex_to_rgb("ff8800") == RGB(255, 136, 0)
    assert hex_to_rgb("#abc") == RGB(0xAA, 0xBB, 0xCC)


@pytest.mark.parametrize("value", ["#zzz", "", "#12345", "not a color"])
def test_hex_to_rgb_rejects_malformed(value):
    with pytest.raises(ValueError):
        hex_to_rgb(value)


def test_rgb_to_hex():
    assert rgb_to_hex(RGB(255, 136, 0)) == "#ff8800"
    assert rgb_to_hex(RGB(255, 0, 0, 0.5)) == "#ff000080"
    assert rgb_to_hex(RGB(255, 0, 0, 1.0)) == "#ff0000"


def test_rgb_to_hsl_primaries():
    assert rgb_to_hsl(RGB(255, 0, 0)) == HSL(0.0, 100.0, 50.0)
    assert rgb_to_hsl(RGB(0, 0, 255)).h == pytest.approx(240.0)
    assert rgb_to_hsl(RGB(128, 128, 128)).s == 0.0


@given(rgb_colors)
def test_hsl_round_trip_within_one(rgb):
    back = hsl_to_rgb(rgb_to_hsl(rgb))
    assert abs(back.r - rgb.r) <= 1
    assert abs(back.g - rgb.g) <= 1
    assert abs(back.b - rgb.b) <= 1


def test_hsl_alpha_is_carried():
    assert hsl_to_rgb(HSL(0, 100, 50, 0.3)) == RGB(255, 0, 0, 0.3)


def test_ok_values_are_clamped_on_construction():
    lch = OKLCH(1.5, 0.9, -30)
    assert (lch.l, lch.c, lch.h) == (1.0, 0.4, 330.0)
    lab = OKLAB(-0.2, 0.7, -0.9)
    assert (lab.l, lab.a, lab.b) == (0.0, 0.4, -0.4)


def test_rgb_to_oklch_red():
    lch = rgb_to_oklch(RGB(255, 0, 0))
    assert lch.l == pytest.approx(0.628, abs=1e-3)
    assert lch.c == pytest.approx(0.2577, abs=1e-3)
    assert lch.h == pytest.approx(29.23, abs=0.1)


def test_oklab_oklch_interconversion():
    lab = OKLAB(0.6, 0.1, -0.1)
    back = oklch_to_oklab(oklab_to_oklch(lab))
    assert back.l == pytest.approx(lab.l)
    assert back.a == pytest.approx(lab.a)
    assert back.b == pytest.approx(lab.b)


@given(rgb_colors)
def test_oklab_round_trip_within_one(rgb):
    lab = rgb_to_oklab(rgb)
    back = oklab_to_rgb(lab.l, lab.a, lab.b)
    assert abs(back.r - rgb.r) <= 1
    assert abs(back.g - rgb.g) <= 1
    assert abs(back.b - rgb.b) <= 1


def test_out_of_gamut_oklch_is_clamped():
    rgb = oklch_to_rgb(0.9, 0.4, 140)
    assert all(0 <= ch <= 255 for ch in rgb)


def test_conversion_cache_keys_and_alpha(caches):
    first = oklch_to_rgb(0.7, 0.1, 200, caches=caches)
    assert caches.conversion.has(("oklch", 0.7, 0.1, 200))
    assert caches.conversion.size == 1

    translucent = oklch_to_rgb(0.7, 0.1, 200, alpha=0.5, caches=caches)
    assert translucent == first.with_alpha(0.5)
    assert first.a is None


def test_hsl_cache_key(caches):
    hsl_to_rgb(HSL(200, 50, 40), caches)
    assert caches.conversion.has(("hsl", 200.0, 50.0, 40.0))
