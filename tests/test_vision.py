"""Tests for the color-vision deficiency simulator."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wcaglab.core.types import RGB, ColorBlindnessType
from wcaglab.core.vision import simulate_color_blindness, simulate_palette

channel = st.integers(min_value=0, max_value=255)
alpha = st.one_of(st.none(), st.floats(min_value=0.0, max_value=1.0))
rgb_colors = st.builds(RGB, channel, channel, channel, alpha)


def test_protanopia_red():
    assert simulate_color_blindness(RGB(255, 0, 0), "protanopia") == RGB(145, 142, 0)


def test_deuteranopia_green():
    # 0.375 * 255 = 95.625, 0.30 * 255 = 76.5
    assert simulate_color_blindness(RGB(0, 255, 0), ColorBlindnessType.DEUTERANOPIA) == RGB(96, 77, 77)


@pytest.mark.parametrize("kind", list(ColorBlindnessType))
def test_neutrals_are_unchanged(kind):
    assert simulate_color_blindness(RGB(255, 255, 255), kind) == RGB(255, 255, 255)
    assert simulate_color_blindness(RGB(0, 0, 0), kind) == RGB(0, 0, 0)


def test_zero_severity_is_identity():
    color = RGB(12, 200, 99)
    assert simulate_color_blindness(color, "tritanopia", severity=0.0) == color


def test_alpha_passes_through():
    assert simulate_color_blindness(RGB(255, 0, 0, 0.4), "protanopia").a == pytest.approx(0.4)


def test_unknown_deficiency_is_rejected():
    with pytest.raises(ValueError):
        simulate_color_blindness(RGB(1, 2, 3), "achromatopsia")


@given(rgb_colors, st.sampled_from(list(ColorBlindnessType)), st.floats(min_value=0.0, max_value=1.0))
def test_simulation_is_total(color, kind, severity):
    out = simulate_color_blindness(color, kind, severity)
    assert all(0 <= ch <= 255 for ch in out)
    assert out.a == color.a


def test_simulate_palette_keeps_order():
    colors = [RGB(255, 0, 0), RGB(0, 255, 0), RGB(0, 0, 255)]
    out = simulate_palette(colors, "tritanopia")
    assert out == [simulate_color_blindness(rgb, "tritanopia") for rgb in colors]
