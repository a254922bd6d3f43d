#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/luminance.py

import math
from typing import Optional

from . import config as c
from .cache import CacheRegistry
from .types import RGB


def _wcag_linear(color_comp: int) -> float:
    """Linearize a channel with the WCAG 2.x threshold (0.03928, not 0.04045)."""
    s = color_comp / c.RGB_MAX
    if s <= c.WCAG_LINEAR_TH:
        return s / c.SRGB_SLOPE
    return ((s + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_relative_luminance(rgb: RGB, caches: Optional[CacheRegistry] = None) -> float:
    """
    Relative luminance on a 0-1 scale.

    Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    """
    key = (rgb.r, rgb.g, rgb.b)
    if caches is not None:
        cached = caches.luminance.get(key)
        if cached is not None:
            return cached

    lum = (
        c.LUMA_R * _wcag_linear(rgb.r) +
        c.LUMA_G * _wcag_linear(rgb.g) +
        c.LUMA_B * _wcag_linear(rgb.b)
    )

    if caches is not None:
        caches.luminance.set(key, lum)
    return lum


def get_perceived_brightness(rgb: RGB) -> float:
    """HSP brightness (0-255). A light/dark heuristic, never a compliance measure."""
    return math.sqrt(c.HSP_R * rgb.r ** 2 + c.HSP_G * rgb.g ** 2 + c.HSP_B * rgb.b ** 2)


def is_light_color(rgb: RGB) -> bool:
    return get_perceived_brightness(rgb) > c.LIGHT_BRIGHTNESS_TH
