"""Tests for palette generation and CSS formatting."""

import pytest

from wcaglab.core.palette import generate_accessible_palette
from wcaglab.core.parser import parse_color
from wcaglab.core.types import HSL, OKLAB, OKLCH, RGB
from wcaglab.shared.formatting import format_css


def test_palette_from_gray():
    assert generate_accessible_palette("#808080", 5) == [
        "#808080",
        "#9a9a9a",
        "#b3b3b3",
        "#666666",
        "#4d4d4d",
    ]


def test_palette_keeps_base_text_and_caps_channels():
    palette = generate_accessible_palette("White", 3)
    assert palette == ["White", "#ffffff", "#cccccc"]


@pytest.mark.parametrize("count", [1, 2, 4, 5, 8])
def test_palette_length_matches_count(count):
    assert len(generate_accessible_palette("teal", count)) == count


def test_palette_for_unparseable_base():
    assert generate_accessible_palette("nope") == ["nope"]


@pytest.mark.parametrize(
    "value, expected",
    [
        (RGB(255, 0, 0), "rgb(255 0 0)"),
        (RGB(255, 0, 0, 0.5), "rgb(255 0 0 / 0.5)"),
        (RGB(255, 0, 0, 1.0), "rgb(255 0 0)"),
        (HSL(120, 100, 50), "hsl(120deg 100% 50%)"),
        (OKLCH(0.5, 0.1, 30), "oklch(0.5 0.1 30deg)"),
        (OKLAB(0.5, -0.1, 0.05, 0.25), "oklab(0.5 -0.1 0.05 / 0.25)"),
    ],
)
def test_format_css(value, expected):
    assert format_css(value) == expected


@pytest.mark.parametrize(
    "value",
    [RGB(10, 20, 30, 0.5), HSL(200, 40, 60), OKLCH(0.7, 0.12, 250), OKLAB(0.4, 0.1, -0.2)],
)
def test_formatted_values_parse_back(value):
    assert parse_color(format_css(value)) is not None


def test_format_unknown_value():
    assert format_css("red") == ""
