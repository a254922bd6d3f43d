#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/conversions.py

import math
from typing import Optional, Tuple

from . import config as c
from .cache import CacheRegistry
from .types import HSL, OKLAB, OKLCH, RGB
from wcaglab.shared.clamping import _clamp01, _round_half_up
from wcaglab.shared.sanitizer import normalize_hex


def hex_to_rgb(hex_code: str) -> RGB:
    """Convert '#rgb', '#rgba', '#rrggbb' or '#rrggbbaa' to RGB; raises on anything else."""
    h = normalize_hex(hex_code if str(hex_code).startswith("#") else f"#{hex_code}")
    if not h:
        raise ValueError(f"invalid hex color: '{hex_code}'")
    r, g, b = (int(h[i : i + 2], 16) for i in (0, 2, 4))
    a = int(h[6:8], 16) / c.RGB_MAX if len(h) == 8 else None
    return RGB(r, g, b, a)


def rgb_to_hex(rgb: RGB) -> str:
    """Convert RGB to '#rrggbb', appending an alpha byte when alpha < 1."""
    out = f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"
    if rgb.a is not None and rgb.a < c.UNIT:
        out += f"{_round_half_up(rgb.a * c.RGB_MAX):02x}"
    return out


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB to HSL (degrees, percent, percent)."""
    r_f, g_f, b_f = rgb.r / c.RGB_MAX, rgb.g / c.RGB_MAX, rgb.b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / 2.0
    if cmax == cmin:
        return HSL(0.0, 0.0, L * c.PERCENT_MAX, rgb.a)

    delta = cmax - cmin
    s = delta / (2.0 - cmax - cmin) if L > 0.5 else delta / (cmax + cmin)
    if cmax == r_f:
        h = (g_f - b_f) / delta + (6.0 if g_f < b_f else 0.0)
    elif cmax == g_f:
        h = (b_f - r_f) / delta + 2.0
    else:
        h = (r_f - g_f) / delta + 4.0
    return HSL(h * 60.0, s * c.PERCENT_MAX, L * c.PERCENT_MAX, rgb.a)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL, caches: Optional[CacheRegistry] = None) -> RGB:
    """Convert HSL to RGB."""
    key = ("hsl", hsl.h, hsl.s, hsl.l)
    if caches is not None:
        cached = caches.conversion.get(key)
        if cached is not None:
            return cached if hsl.a is None else cached.with_alpha(hsl.a)

    h = hsl.h / c.HUE_MAX
    s = hsl.s / c.PERCENT_MAX
    L = hsl.l / c.PERCENT_MAX
    if s == 0:
        gray = L * c.RGB_MAX
        result = RGB(gray, gray, gray)
    else:
        q = L * (1 + s) if L < 0.5 else L + s - L * s
        p = 2 * L - q
        result = RGB(
            _hue_to_channel(p, q, h + 1 / 3) * c.RGB_MAX,
            _hue_to_channel(p, q, h) * c.RGB_MAX,
            _hue_to_channel(p, q, h - 1 / 3) * c.RGB_MAX,
        )

    if caches is not None:
        caches.conversion.set(key, result)
    return result if hsl.a is None else result.with_alpha(hsl.a)


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize an 8-bit sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component; result is normalized, not clamped."""
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def _mat_vec(m: Tuple[Tuple[float, float, float], ...], v: Tuple[float, float, float]) -> Tuple[float, float, float]:
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def _signed_cbrt(v: float) -> float:
    return abs(v) ** (1.0 / 3.0) if v >= 0 else -(abs(v) ** (1.0 / 3.0))


def oklab_to_rgb(
    L: float, a: float, b: float, alpha: Optional[float] = None, caches: Optional[CacheRegistry] = None
) -> RGB:
    """
    Convert OKLab to sRGB. Out-of-gamut results are clamped per channel,
    the way browsers render them.
    """
    key = ("oklab", L, a, b)
    if caches is not None:
        cached = caches.conversion.get(key)
        if cached is not None:
            return cached if alpha is None else cached.with_alpha(alpha)

    lms_ = _mat_vec(c.M2_INV_OKLAB, (L, a, b))
    lms = (lms_[0] ** 3, lms_[1] ** 3, lms_[2] ** 3)
    r_lin, g_lin, b_lin = _mat_vec(c.M1_INV_OKLAB, lms)
    result = RGB(
        _clamp01(_linear_to_srgb(r_lin)) * c.RGB_MAX,
        _clamp01(_linear_to_srgb(g_lin)) * c.RGB_MAX,
        _clamp01(_linear_to_srgb(b_lin)) * c.RGB_MAX,
    )

    if caches is not None:
        caches.conversion.set(key, result)
    return result if alpha is None else result.with_alpha(alpha)


def oklch_to_rgb(
    L: float, chroma: float, hue: float, alpha: Optional[float] = None, caches: Optional[CacheRegistry] = None
) -> RGB:
    """Convert OKLCH to sRGB through OKLab."""
    key = ("oklch", L, chroma, hue)
    if caches is not None:
        cached = caches.conversion.get(key)
        if cached is not None:
            return cached if alpha is None else cached.with_alpha(alpha)

    h_rad = math.radians(hue)
    result = oklab_to_rgb(L, chroma * math.cos(h_rad), chroma * math.sin(h_rad))

    if caches is not None:
        caches.conversion.set(key, result)
    return result if alpha is None else result.with_alpha(alpha)


def rgb_to_oklab(rgb: RGB) -> OKLAB:
    """Convert RGB to OKLab."""
    lin = (_srgb_to_linear(rgb.r), _srgb_to_linear(rgb.g), _srgb_to_linear(rgb.b))
    l_, m_, s_ = (_signed_cbrt(v) for v in _mat_vec(c.M1_OKLAB, lin))
    ok_l, ok_a, ok_b = _mat_vec(c.M2_OKLAB, (l_, m_, s_))
    return OKLAB(ok_l, ok_a, ok_b, rgb.a)


def oklab_to_oklch(lab: OKLAB) -> OKLCH:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(lab.a, lab.b)
    hue = math.degrees(math.atan2(lab.b, lab.a)) % c.HUE_MAX
    return OKLCH(lab.l, chroma, hue, lab.alpha)


def oklch_to_oklab(lch: OKLCH) -> OKLAB:
    """Convert OKLCH to OKLab."""
    h_rad = math.radians(lch.h)
    return OKLAB(lch.l, lch.c * math.cos(h_rad), lch.c * math.sin(h_rad), lch.alpha)


def rgb_to_oklch(rgb: RGB) -> OKLCH:
    """Direct RGB to OKLCH conversion."""
    return oklab_to_oklch(rgb_to_oklab(rgb))


def alpha_blend(top: RGB, bottom: RGB) -> RGB:
    """
    Composite a translucent color over an opaque one ("source-over").

    The result is the color a viewer actually sees, so it is always opaque.
    """
    alpha = top.alpha
    inv = c.UNIT - alpha
    return RGB(
        _round_half_up(top.r * alpha + bottom.r * inv),
        _round_half_up(top.g * alpha + bottom.g * inv),
        _round_half_up(top.b * alpha + bottom.b * inv),
        c.UNIT,
    )
