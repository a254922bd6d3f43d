#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/shared/clamping.py

import math


def _clamp(v: float, lo: float, hi: float) -> float:
    if v != v:
        return lo
    return max(lo, min(hi, v))


def _clamp01(v: float) -> float:
    return _clamp(v, 0.0, 1.0)


def _round_half_up(v: float) -> int:
    """Round halves toward positive infinity, the way browsers round channels."""
    return int(math.floor(v + 0.5))


def _to_channel(v: float) -> int:
    """Round and clamp a float into an 8-bit channel."""
    if v != v:
        return 0
    if math.isinf(v):
        return 255 if v > 0 else 0
    return max(0, min(255, _round_half_up(v)))


def _wrap_hue(h: float) -> float:
    if h != h or math.isinf(h):
        return 0.0
    h = h % 360.0
    # -1e-17 % 360 lands on 360.0
    return 0.0 if h >= 360.0 else h
