#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/palette.py

import math
from typing import List, Optional

from . import config as c
from .cache import CacheRegistry
from .conversions import rgb_to_hex
from .parser import parse_color
from .types import RGB


def _scaled(rgb: RGB, factor: float) -> RGB:
    return RGB(rgb.r * factor, rgb.g * factor, rgb.b * factor)


def generate_accessible_palette(
    base_color: str, count: int = 5, caches: Optional[CacheRegistry] = None
) -> List[str]:
    """
    Build lighter and darker variants of `base_color`.

    The list starts with `base_color` as given, followed by the lighter
    variants (brightest last) and then the darker ones (darkest last), each
    as '#rrggbb'. An unparseable base yields just `[base_color]`.
    """
    palette = [base_color]
    parsed = parse_color(base_color, caches)
    if parsed is None:
        return palette

    rgb = parsed.rgb
    for i in range(1, math.ceil(count / 2)):
        palette.append(rgb_to_hex(_scaled(rgb, 1 + i * c.PALETTE_STEP)))
    for i in range(1, count // 2 + 1):
        palette.append(rgb_to_hex(_scaled(rgb, 1 - i * c.PALETTE_STEP)))
    return palette
