#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/api.py

"""
Public entry points bound to one process-wide CacheRegistry.

The functions in wcaglab.core take an explicit `caches` argument and run
uncached without one. The wrappers here pass the shared registry, which is
what most callers want. Build your own CacheRegistry and call the core
functions directly to isolate caches (per thread, per test).
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from wcaglab.core import contrast as _contrast
from wcaglab.core import conversions as _conversions
from wcaglab.core import luminance as _luminance
from wcaglab.core import palette as _palette
from wcaglab.core import parser as _parser
from wcaglab.core import config as c
from wcaglab.core.cache import CacheRegistry, CacheStats
from wcaglab.core.contrast import ColorInput
from wcaglab.core.types import (
    HSL,
    RGB,
    ContrastResult,
    ContrastValidation,
    ParsedColor,
    WCAGLevel,
)

_shared_caches = CacheRegistry()


def get_shared_caches() -> CacheRegistry:
    return _shared_caches


def clear_all_caches() -> None:
    _shared_caches.clear()


def get_all_cache_stats() -> Dict[str, CacheStats]:
    return _shared_caches.stats()


# ==========================================
# Parsing
# ==========================================


def parse_color(
    color: str, current_color: Optional[RGB] = None, backdrop: Optional[RGB] = None
) -> Optional[ParsedColor]:
    return _parser.parse_color(color, _shared_caches, current_color, backdrop)


def parse_hsl(color: str) -> Optional[RGB]:
    return _parser.parse_hsl(color, _shared_caches)


def parse_oklch_to_rgb(color: str) -> Optional[RGB]:
    return _parser.parse_oklch_to_rgb(color, _shared_caches)


def parse_oklab_to_rgb(color: str) -> Optional[RGB]:
    return _parser.parse_oklab_to_rgb(color, _shared_caches)


def oklch_string_to_rgb_values(color: str) -> str:
    return _parser.oklch_string_to_rgb_values(color, _shared_caches)


# ==========================================
# Conversion
# ==========================================


def hsl_to_rgb(hsl: HSL) -> RGB:
    return _conversions.hsl_to_rgb(hsl, _shared_caches)


def oklch_to_rgb(L: float, chroma: float, hue: float, alpha: Optional[float] = None) -> RGB:
    return _conversions.oklch_to_rgb(L, chroma, hue, alpha, _shared_caches)


def oklab_to_rgb(L: float, a: float, b: float, alpha: Optional[float] = None) -> RGB:
    return _conversions.oklab_to_rgb(L, a, b, alpha, _shared_caches)


# ==========================================
# Contrast
# ==========================================


def get_relative_luminance(rgb: RGB) -> float:
    return _luminance.get_relative_luminance(rgb, _shared_caches)


def get_contrast_ratio(color1: ColorInput, color2: ColorInput) -> float:
    return _contrast.get_contrast_ratio(color1, color2, _shared_caches)


def measure_contrast(color1: ColorInput, color2: ColorInput) -> Optional[float]:
    return _contrast.measure_contrast(color1, color2, _shared_caches)


def meets_wcag(color1: ColorInput, color2: ColorInput, level: Union[WCAGLevel, str] = WCAGLevel.AA) -> bool:
    return _contrast.meets_wcag(color1, color2, level, _shared_caches)


def analyze_contrast(color1: ColorInput, color2: ColorInput) -> ContrastResult:
    return _contrast.analyze_contrast(color1, color2, _shared_caches)


def check_wcag(foreground: ColorInput, background: ColorInput, level: str = "AA", font_size: str = "normal") -> bool:
    return _contrast.check_wcag(foreground, background, level, font_size, _shared_caches)


def adjust_color_for_contrast(
    color: ColorInput,
    background: ColorInput,
    target_ratio: float = c.DEFAULT_TARGET_RATIO,
    prefer_lighter: bool = True,
) -> RGB:
    return _contrast.adjust_color_for_contrast(color, background, target_ratio, prefer_lighter, _shared_caches)


def batch_validate(pairs: Iterable[Union[Mapping, Sequence]]) -> List[ContrastValidation]:
    return _contrast.batch_validate(pairs, _shared_caches)


def is_readable_on_glass(
    text_color: ColorInput,
    glass_color: RGB,
    glass_opacity: float,
    backdrop: RGB,
    min_contrast: float = c.WCAG_AA_NORMAL,
) -> bool:
    return _contrast.is_readable_on_glass(text_color, glass_color, glass_opacity, backdrop, min_contrast, _shared_caches)


def generate_accessible_palette(base_color: str, count: int = 5) -> List[str]:
    return _palette.generate_accessible_palette(base_color, count, _shared_caches)
