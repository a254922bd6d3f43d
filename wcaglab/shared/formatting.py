#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/shared/formatting.py

from typing import Optional

from wcaglab.core.types import HSL, OKLAB, OKLCH, RGB, ColorValue


def _num(v: float, places: int = 4) -> str:
    out = f"{v:.{places}f}".rstrip("0").rstrip(".")
    return "0" if out in ("", "-0") else out


def _alpha_suffix(a: Optional[float]) -> str:
    if a is None or a >= 1.0:
        return ""
    return f" / {_num(a)}"


def format_css(value: ColorValue) -> str:
    """Render a color value in CSS modern space syntax, e.g. 'rgb(255 0 0 / 0.5)'."""
    if isinstance(value, RGB):
        return f"rgb({value.r} {value.g} {value.b}{_alpha_suffix(value.a)})"
    elif isinstance(value, HSL):
        return f"hsl({_num(value.h, 2)}deg {_num(value.s, 2)}% {_num(value.l, 2)}%{_alpha_suffix(value.a)})"
    elif isinstance(value, OKLCH):
        return f"oklch({_num(value.l)} {_num(value.c)} {_num(value.h, 2)}deg{_alpha_suffix(value.alpha)})"
    elif isinstance(value, OKLAB):
        return f"oklab({_num(value.l)} {_num(value.a)} {_num(value.b)}{_alpha_suffix(value.alpha)})"

    return ""
