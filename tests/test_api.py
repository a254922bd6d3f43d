"""Tests for the top-level API bound to the shared caches."""

import pytest

import wcaglab
from wcaglab import RGB


def test_shared_caches_fill_and_clear():
    wcaglab.get_contrast_ratio("#000", "#fff")
    stats = wcaglab.get_all_cache_stats()
    assert stats["parse_cache"].size == 2
    assert stats["luminance_cache"].size == 2
    assert stats["contrast_cache"].size == 1

    wcaglab.clear_all_caches()
    assert all(s.size == 0 for s in wcaglab.get_all_cache_stats().values())


def test_shared_registry_is_a_single_instance():
    assert wcaglab.get_shared_caches() is wcaglab.get_shared_caches()


def test_top_level_exports_work_together():
    parsed = wcaglab.parse_color("oklch(0.7 0.1 200)")
    assert parsed.kind == wcaglab.ColorKind.OKLCH
    assert wcaglab.meets_wcag("#000", parsed.rgb, "AA")
    assert wcaglab.analyze_contrast("#000", "#fff").meets_aaa
    assert wcaglab.check_wcag("#000", "#fff")
    assert wcaglab.measure_contrast("#000", "nope") is None
    assert wcaglab.rgb_to_hex(wcaglab.hex_to_rgb("#abcdef")) == "#abcdef"
    assert wcaglab.oklch_string_to_rgb_values("oklch(0 0 0)") == "0 0 0"
    assert wcaglab.format_css(wcaglab.parse_hsl("hsl(0 100% 50%)")) == "rgb(255 0 0)"


def test_shared_adjust_and_batch():
    adjusted = wcaglab.adjust_color_for_contrast("#eeeeee", "#ffffff", 4.5, False)
    assert wcaglab.get_contrast_ratio(adjusted, "#ffffff") >= 4.5

    results = wcaglab.batch_validate([("#000", "#fff"), ("#fff", "#fff")])
    assert [r.level for r in results] == [wcaglab.ComplianceLevel.AAA, wcaglab.ComplianceLevel.FAIL]


def test_shared_glass_and_palette():
    assert wcaglab.is_readable_on_glass("#000", RGB(255, 255, 255), 0.8, RGB(0, 0, 0))
    assert wcaglab.generate_accessible_palette("#808080", 3)[0] == "#808080"


def test_version_is_exposed():
    assert isinstance(wcaglab.__version__, str)


def test_shared_conversions():
    assert wcaglab.oklch_to_rgb(1, 0, 0) == RGB(255, 255, 255)
    assert wcaglab.oklab_to_rgb(0, 0, 0) == RGB(0, 0, 0)
    assert wcaglab.hsl_to_rgb(wcaglab.HSL(0, 100, 50)) == RGB(255, 0, 0)
    assert wcaglab.parse_oklch_to_rgb("oklch(1 0 0)") == RGB(255, 255, 255)
    assert wcaglab.parse_oklab_to_rgb("oklab(0 0 0)") == RGB(0, 0, 0)
    assert wcaglab.get_relative_luminance(RGB(255, 255, 255)) == pytest.approx(1.0)
