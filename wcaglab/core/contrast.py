#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/contrast.py

"""
WCAG 2.x contrast ratios, level checks and contrast repair.

Colors may be given as strings in any notation the parser reads, as RGB
values, or as ParsedColor results. Nothing here raises on bad color input:
a pair that cannot be resolved has no measurable contrast, which
`get_contrast_ratio` reports as the 1.0 floor and `measure_contrast` as
None. Only misuse of the closed level enum raises (ValueError).
"""

import re
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from . import config as c
from .cache import CacheRegistry
from .conversions import alpha_blend
from .luminance import get_relative_luminance, is_light_color
from .parser import parse_color
from .types import (
    RGB,
    ComplianceLevel,
    ContrastResult,
    ContrastValidation,
    ParsedColor,
    WCAGLevel,
)
from wcaglab.shared.logger import log

ColorInput = Union[str, RGB, ParsedColor]

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

_WEIGHT_KEYWORDS = {
    "normal": c.NORMAL_WEIGHT,
    "lighter": c.NORMAL_WEIGHT,
    "bold": c.BOLD_WEIGHT,
    "bolder": c.BOLD_WEIGHT,
}


def resolve_color(color: ColorInput, caches: Optional[CacheRegistry] = None) -> Optional[RGB]:
    """Turn any accepted color input into RGB, or None if it cannot be read."""
    if isinstance(color, RGB):
        return color
    if isinstance(color, ParsedColor):
        return color.rgb
    if isinstance(color, str):
        parsed = parse_color(color, caches)
        return None if parsed is None else parsed.rgb
    return None


def _ratio_rgb(fg: RGB, bg: RGB, caches: Optional[CacheRegistry]) -> float:
    # Foreground alpha belongs in the key: it changes the blended color.
    key = ((fg.r, fg.g, fg.b, fg.alpha), (bg.r, bg.g, bg.b))
    if caches is not None:
        cached = caches.contrast.get(key)
        if cached is not None:
            return cached

    effective = fg if fg.is_opaque else alpha_blend(fg, bg)
    l1 = get_relative_luminance(effective, caches)
    l2 = get_relative_luminance(bg, caches)
    lighter, darker = (l1, l2) if l1 > l2 else (l2, l1)
    ratio = (lighter + c.WCAG_LUMINANCE_OFFSET) / (darker + c.WCAG_LUMINANCE_OFFSET)
    ratio = max(c.WCAG_MIN_RATIO, min(c.WCAG_MAX_RATIO, ratio))

    if caches is not None:
        caches.contrast.set(key, ratio)
    return ratio


def measure_contrast(
    color1: ColorInput, color2: ColorInput, caches: Optional[CacheRegistry] = None
) -> Optional[float]:
    """
    Contrast ratio between two colors, or None when either cannot be read.

    A translucent `color1` is composited onto `color2` first, so the ratio
    reflects what is rendered. Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    rgb1 = resolve_color(color1, caches)
    rgb2 = resolve_color(color2, caches)
    if rgb1 is None or rgb2 is None:
        return None
    return _ratio_rgb(rgb1, rgb2, caches)


def get_contrast_ratio(color1: ColorInput, color2: ColorInput, caches: Optional[CacheRegistry] = None) -> float:
    """Contrast ratio in [1, 21]; 1.0 when either color cannot be read."""
    ratio = measure_contrast(color1, color2, caches)
    return c.WCAG_MIN_RATIO if ratio is None else ratio


def meets_wcag(
    color1: ColorInput,
    color2: ColorInput,
    level: Union[WCAGLevel, str] = WCAGLevel.AA,
    caches: Optional[CacheRegistry] = None,
) -> bool:
    """Check a pair against 'AA', 'AAA', 'AA-large' or 'AAA-large'."""
    threshold = WCAGLevel(level).threshold
    return get_contrast_ratio(color1, color2, caches) >= threshold


def analyze_contrast(color1: ColorInput, color2: ColorInput, caches: Optional[CacheRegistry] = None) -> ContrastResult:
    measured = measure_contrast(color1, color2, caches)
    if measured is None:
        return ContrastResult(c.WCAG_MIN_RATIO, False, False, False, False, False, measured=False)
    return ContrastResult(
        ratio=measured,
        meets_aa=measured >= c.WCAG_AA_NORMAL,
        meets_aaa=measured >= c.WCAG_AAA_NORMAL,
        meets_aa_large=measured >= c.WCAG_AA_LARGE,
        meets_aaa_large=measured >= c.WCAG_AAA_LARGE,
        meets_ui_component=measured >= c.WCAG_UI_COMPONENT,
    )


def check_wcag(
    foreground: ColorInput,
    background: ColorInput,
    level: Union[WCAGLevel, str] = "AA",
    font_size: str = "normal",
    caches: Optional[CacheRegistry] = None,
) -> bool:
    """meets_wcag with the level and text size given separately."""
    level = WCAGLevel(level).value
    if level not in ("AA", "AAA"):
        raise ValueError(f"unknown WCAG level: '{level}'")
    wcag_level = f"{level}-large" if font_size == "large" else level
    return meets_wcag(foreground, background, wcag_level, caches)


def _css_number(value) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        m = _LEADING_NUMBER.match(value)
        if m:
            return float(m.group(1))
    return None


def _font_weight(value) -> float:
    if isinstance(value, str):
        keyword = _WEIGHT_KEYWORDS.get(value.strip().lower())
        if keyword is not None:
            return keyword
    weight = _css_number(value)
    return c.NORMAL_WEIGHT if weight is None else weight


def is_large_text(font_size, font_weight=c.NORMAL_WEIGHT) -> bool:
    """
    WCAG large text: at least 24px, or at least 18.66px and bold (>= 700).

    Sizes are CSS pixels, as numbers or strings like '24px'.
    """
    size = _css_number(font_size)
    if size is None:
        return False
    weight = _font_weight(font_weight)
    return size >= c.LARGE_TEXT_PX or (size >= c.LARGE_BOLD_TEXT_PX and weight >= c.BOLD_WEIGHT)


def get_contrasting_color(background: RGB) -> RGB:
    """Black text for light backgrounds, white for dark ones."""
    if is_light_color(background):
        return RGB(0, 0, 0)
    return RGB(255, 255, 255)


def _is_saturated(rgb: RGB, lighter: bool) -> bool:
    target = 255 if lighter else 0
    return rgb.r == target and rgb.g == target and rgb.b == target


def adjust_color_for_contrast(
    color: ColorInput,
    background: ColorInput,
    target_ratio: float = c.DEFAULT_TARGET_RATIO,
    prefer_lighter: bool = True,
    caches: Optional[CacheRegistry] = None,
) -> RGB:
    """
    Nudge `color` until it reaches `target_ratio` against `background`.

    Every channel moves by the same fixed step per attempt, for at most
    ADJUST_MAX_ATTEMPTS attempts or until the color hits pure white/black.
    The result is the best attainable color, not a guarantee: check it again
    if the target matters. An unreadable color yields black, an unreadable
    background returns the color unchanged.
    """
    rgb = resolve_color(color, caches)
    bg = resolve_color(background, caches)
    if rgb is None:
        return RGB(0, 0, 0)
    if bg is None:
        return rgb

    if _ratio_rgb(rgb, bg, caches) >= target_ratio:
        return rgb

    step = c.ADJUST_STEP if prefer_lighter else -c.ADJUST_STEP
    adjusted = rgb
    for _ in range(c.ADJUST_MAX_ATTEMPTS):
        adjusted = RGB(adjusted.r + step, adjusted.g + step, adjusted.b + step, adjusted.a)
        if _ratio_rgb(adjusted, bg, caches) >= target_ratio:
            return adjusted
        if _is_saturated(adjusted, prefer_lighter):
            break

    log(
        "debug",
        f"target ratio {target_ratio:.2f} unreachable from {tuple(rgb)} "
        f"on {tuple(bg)}, best effort {tuple(adjusted)}",
    )
    return adjusted


def is_readable_on_glass(
    text_color: ColorInput,
    glass_color: RGB,
    glass_opacity: float,
    backdrop: RGB,
    min_contrast: float = c.WCAG_AA_NORMAL,
    caches: Optional[CacheRegistry] = None,
) -> bool:
    """Check text over a translucent panel by compositing the panel onto what lies behind it."""
    effective_bg = alpha_blend(glass_color.with_alpha(glass_opacity), backdrop)
    return get_contrast_ratio(text_color, effective_bg, caches) >= min_contrast


def _unpack_pair(pair: Union[Mapping, Sequence]):
    if isinstance(pair, Mapping):
        return pair.get("foreground"), pair.get("background"), bool(pair.get("large_text", False))
    # Short tuples leave the missing colors unresolved
    foreground = pair[0] if len(pair) > 0 else None
    background = pair[1] if len(pair) > 1 else None
    large = bool(pair[2]) if len(pair) > 2 else False
    return foreground, background, large


def batch_validate(
    pairs: Iterable[Union[Mapping, Sequence]], caches: Optional[CacheRegistry] = None
) -> List[ContrastValidation]:
    """
    Grade each (foreground, background, large_text?) pair as AAA, AA or FAIL.

    Pairs are mappings with 'foreground', 'background' and optional
    'large_text' keys, or tuples in that order. Results keep input order.
    """
    results = []
    for pair in pairs:
        foreground, background, large_text = _unpack_pair(pair)
        measured = measure_contrast(foreground, background, caches)
        ratio = c.WCAG_MIN_RATIO if measured is None else measured

        aa_threshold = c.WCAG_AA_LARGE if large_text else c.WCAG_AA_NORMAL
        aaa_threshold = c.WCAG_AAA_LARGE if large_text else c.WCAG_AAA_NORMAL

        level = ComplianceLevel.FAIL
        if ratio >= aaa_threshold:
            level = ComplianceLevel.AAA
        elif ratio >= aa_threshold:
            level = ComplianceLevel.AA

        results.append(
            ContrastValidation(
                contrast=ratio,
                passes=ratio >= aa_threshold,
                level=level,
                measured=measured is not None,
            )
        )
    return results
