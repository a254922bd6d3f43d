#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/parser.py

"""
CSS color string parsing.

Supported notations: hex (#rgb, #rgba, #rrggbb, #rrggbbaa), rgb()/rgba(),
hsl()/hsla(), oklch(), oklab() in both the legacy comma syntax and the modern
space syntax with an optional '/ alpha', and the CSS named colors.

Every entry point returns None for input it cannot read; nothing here raises.
Numeric values that parse but fall outside their nominal range are clamped.
"""

import math
import re
from typing import List, Optional, Tuple

from . import config as c
from .cache import CacheRegistry
from .conversions import alpha_blend, hsl_to_rgb, oklab_to_rgb, oklch_to_rgb
from .types import HSL, OKLAB, OKLCH, RGB, ColorKind, ParsedColor
from wcaglab.constants.named_colors import CSS_NAMED_COLORS
from wcaglab.shared.logger import log
from wcaglab.shared.sanitizer import _sanitize_for_log, normalize_color_text, normalize_hex

# Regex breakdown:
# [+-]?                 -> Optional sign
# (?:\d+\.?\d*|\.\d+)   -> Integer ("12"), decimal ("12.5", "12.") or leading-dot (".5")
# (?:e[+-]?\d+)?        -> Optional scientific notation suffix
# (%|deg|grad|rad|turn)? -> Optional percent or angle unit
_TOKEN = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(%|deg|grad|rad|turn)?$", re.ASCII)
_FUNCTION = re.compile(r"^([a-z]+)\((.*)\)$")

_TRANSPARENT = "transparent"
_CURRENT_COLOR = "currentcolor"

Token = Tuple[float, Optional[str]]


def _parse_token(tok: str) -> Optional[Token]:
    m = _TOKEN.match(tok)
    if not m:
        return None
    v = float(m.group(1))
    if not math.isfinite(v):
        return None
    return v, m.group(2)


def _split_arguments(text: str, names: Tuple[str, ...]) -> Optional[Tuple[List[Token], Optional[Token], bool]]:
    """
    Break 'name(args)' into three component tokens plus an optional alpha
    token. The third element tells whether the legacy comma syntax was used.
    Expects normalized text (see normalize_color_text).
    """
    m = _FUNCTION.match(text)
    if not m or m.group(1) not in names:
        return None
    body = m.group(2)

    if "," in body:
        if "/" in body:
            return None
        parts = body.split(",")
        if len(parts) not in (3, 4) or any(not p or " " in p for p in parts):
            return None
        comps, alpha_raw, legacy = parts[:3], (parts[3] if len(parts) == 4 else None), True
    else:
        main, slash, alpha_raw = body.partition("/")
        if slash and (not alpha_raw or "/" in alpha_raw or " " in alpha_raw):
            return None
        comps = main.split(" ")
        if len(comps) != 3:
            return None
        alpha_raw = alpha_raw if slash else None
        legacy = False

    tokens = [_parse_token(p) for p in comps]
    if any(t is None for t in tokens):
        return None

    alpha = None
    if alpha_raw is not None:
        alpha = _parse_token(alpha_raw)
        if alpha is None:
            return None
    return tokens, alpha, legacy


def _alpha_value(tok: Optional[Token]) -> Optional[float]:
    """Alpha as a number (0-1) or a percentage; None when absent or invalid."""
    if tok is None:
        return None
    v, unit = tok
    if unit is None:
        return v
    if unit == "%":
        return v / c.PERCENT_MAX
    return None


def _hue_value(tok: Token) -> Optional[float]:
    v, unit = tok
    if unit is None:
        return v
    if unit in c.ANGLE_UNITS:
        return v * c.ANGLE_UNITS[unit]
    return None


def _lightness_value(tok: Token) -> Optional[float]:
    """OK lightness as a number (0-1) or a percentage."""
    v, unit = tok
    if unit is None:
        return v
    if unit == "%":
        return v / c.PERCENT_MAX
    return None


def _ok_axis_value(tok: Token, full_scale: float) -> Optional[float]:
    """Chroma or a/b axis, where 100% maps to `full_scale`."""
    v, unit = tok
    if unit is None:
        return v
    if unit == "%":
        return v / c.PERCENT_MAX * full_scale
    return None


def _has_invalid_alpha(alpha_tok: Optional[Token]) -> bool:
    return alpha_tok is not None and _alpha_value(alpha_tok) is None


# ==========================================
# Per-notation parsers
# ==========================================


def parse_hex(color: str) -> Optional[RGB]:
    """Parse '#rgb', '#rgba', '#rrggbb' or '#rrggbbaa'."""
    h = normalize_hex(color)
    if not h:
        return None
    r, g, b = (int(h[i : i + 2], 16) for i in (0, 2, 4))
    a = int(h[6:8], 16) / c.RGB_MAX if len(h) == 8 else None
    return RGB(r, g, b, a)


def parse_rgb(color: str) -> Optional[RGB]:
    """
    Parse rgb()/rgba() in either syntax:
    'rgb(255, 0, 0)', 'rgba(255, 0, 0, 0.5)', 'rgb(255 0 0)', 'rgb(100% 0% 0% / 50%)'.
    """
    args = _split_arguments(normalize_color_text(color), ("rgb", "rgba"))
    if args is None:
        return None
    tokens, alpha_tok, _ = args

    channels = []
    for v, unit in tokens:
        if unit is None:
            channels.append(v)
        elif unit == "%":
            channels.append(v / c.PERCENT_MAX * c.RGB_MAX)
        else:
            return None
    if _has_invalid_alpha(alpha_tok):
        return None
    return RGB(channels[0], channels[1], channels[2], _alpha_value(alpha_tok))


def _parse_hsl_value(color: str) -> Optional[HSL]:
    args = _split_arguments(normalize_color_text(color), ("hsl", "hsla"))
    if args is None:
        return None
    tokens, alpha_tok, legacy = args

    h = _hue_value(tokens[0])
    if h is None:
        return None
    sl = []
    for v, unit in tokens[1:]:
        # Bare numbers are only valid in the modern syntax
        if unit == "%" or (unit is None and not legacy):
            sl.append(v)
        else:
            return None
    if _has_invalid_alpha(alpha_tok):
        return None
    return HSL(h, sl[0], sl[1], _alpha_value(alpha_tok))


def parse_hsl(color: str, caches: Optional[CacheRegistry] = None) -> Optional[RGB]:
    """Parse hsl()/hsla(): 'hsl(120, 100%, 50%)', 'hsl(120deg 100% 50% / 0.5)'."""
    hsl = _parse_hsl_value(color)
    if hsl is None:
        return None
    return hsl_to_rgb(hsl, caches)


def parse_oklch_string(color: str) -> Optional[OKLCH]:
    """Parse 'oklch(0.5 0.19 27)' or 'oklch(50% 0.19 27deg / 0.5)'."""
    args = _split_arguments(normalize_color_text(color), ("oklch",))
    if args is None:
        return None
    tokens, alpha_tok, legacy = args
    if legacy:
        return None

    L = _lightness_value(tokens[0])
    chroma = _ok_axis_value(tokens[1], c.OKLCH_CHROMA_MAX)
    hue = _hue_value(tokens[2])
    if L is None or chroma is None or hue is None or _has_invalid_alpha(alpha_tok):
        return None
    return OKLCH(L, chroma, hue, _alpha_value(alpha_tok))


def parse_oklab_string(color: str) -> Optional[OKLAB]:
    """Parse 'oklab(0.5 0.1 -0.05)' or 'oklab(50% 0.1 -0.05 / 0.5)'."""
    args = _split_arguments(normalize_color_text(color), ("oklab",))
    if args is None:
        return None
    tokens, alpha_tok, legacy = args
    if legacy:
        return None

    L = _lightness_value(tokens[0])
    a = _ok_axis_value(tokens[1], c.OKLAB_AB_MAX)
    b = _ok_axis_value(tokens[2], c.OKLAB_AB_MAX)
    if L is None or a is None or b is None or _has_invalid_alpha(alpha_tok):
        return None
    return OKLAB(L, a, b, _alpha_value(alpha_tok))


def parse_oklch_to_rgb(color: str, caches: Optional[CacheRegistry] = None) -> Optional[RGB]:
    lch = parse_oklch_string(color)
    if lch is None:
        return None
    return oklch_to_rgb(lch.l, lch.c, lch.h, lch.alpha, caches)


def parse_oklab_to_rgb(color: str, caches: Optional[CacheRegistry] = None) -> Optional[RGB]:
    lab = parse_oklab_string(color)
    if lab is None:
        return None
    return oklab_to_rgb(lab.l, lab.a, lab.b, lab.alpha, caches)


def parse_named_color(name: str) -> Optional[RGB]:
    """Look up a CSS named color, case-insensitively."""
    rgb = CSS_NAMED_COLORS.get(normalize_color_text(name))
    if rgb is None:
        return None
    return RGB(*rgb)


def oklch_string_to_rgb_values(color: str, caches: Optional[CacheRegistry] = None) -> str:
    """Render an oklch() string as space-separated channels, e.g. '255 0 0'."""
    rgb = parse_oklch_to_rgb(color, caches)
    if rgb is None:
        return "0 0 0"
    return f"{rgb.r} {rgb.g} {rgb.b}"


# ==========================================
# Unified entry point
# ==========================================


def _parse_normalized(text: str, caches: Optional[CacheRegistry]) -> Optional[ParsedColor]:
    if text.startswith("#"):
        rgb = parse_hex(text)
        return None if rgb is None else ParsedColor(ColorKind.HEX, text, rgb, rgb)

    m = _FUNCTION.match(text)
    if m is None:
        rgb = parse_named_color(text)
        return None if rgb is None else ParsedColor(ColorKind.NAMED, text, rgb, rgb)

    name = m.group(1)
    if name in ("rgb", "rgba"):
        rgb = parse_rgb(text)
        return None if rgb is None else ParsedColor(ColorKind.RGB, text, rgb, rgb)
    if name in ("hsl", "hsla"):
        hsl = _parse_hsl_value(text)
        if hsl is None:
            return None
        return ParsedColor(ColorKind.HSL, text, hsl_to_rgb(hsl, caches), hsl)
    if name == "oklch":
        lch = parse_oklch_string(text)
        if lch is None:
            return None
        return ParsedColor(ColorKind.OKLCH, text, oklch_to_rgb(lch.l, lch.c, lch.h, lch.alpha, caches), lch)
    if name == "oklab":
        lab = parse_oklab_string(text)
        if lab is None:
            return None
        return ParsedColor(ColorKind.OKLAB, text, oklab_to_rgb(lab.l, lab.a, lab.b, lab.alpha, caches), lab)
    return None


def _resolve_keyword(text: str, current_color: Optional[RGB], backdrop: Optional[RGB]) -> Optional[ParsedColor]:
    if text == _CURRENT_COLOR:
        if current_color is None:
            return None
        return ParsedColor(ColorKind.KEYWORD, text, current_color, current_color)
    if backdrop is None:
        return None
    clear = RGB(0, 0, 0, 0.0)
    return ParsedColor(ColorKind.KEYWORD, text, alpha_blend(clear, backdrop), clear)


def parse_color(
    color: str,
    caches: Optional[CacheRegistry] = None,
    current_color: Optional[RGB] = None,
    backdrop: Optional[RGB] = None,
) -> Optional[ParsedColor]:
    """
    Parse any supported color string.

    The input is normalized (case, whitespace) before lookup, and the
    normalized text is both the parse-cache key and the `text` of the
    result. 'transparent' and 'currentColor' need ambient context
    (`backdrop`, `current_color`); without it they yield None. Resolved
    keywords are never cached since their value depends on that context.
    """
    text = normalize_color_text(color)
    if not text:
        return None

    if text in (_TRANSPARENT, _CURRENT_COLOR):
        return _resolve_keyword(text, current_color, backdrop)

    if caches is not None:
        cached = caches.parse.get(text)
        if cached is not None:
            return cached

    result = _parse_normalized(text, caches)
    if result is None:
        log("debug", f"unparseable color '{_sanitize_for_log(color)}'")
        return None

    if caches is not None:
        caches.parse.set(text, result)
    return result
