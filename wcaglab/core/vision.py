#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/vision.py

from typing import Iterable, List, Union

from . import config as c
from .types import RGB, ColorBlindnessType
from wcaglab.shared.clamping import _clamp01


def simulate_color_blindness(
    rgb: RGB, deficiency: Union[ColorBlindnessType, str], severity: float = 1.0
) -> RGB:
    """
    Approximate how `rgb` looks to a viewer with a dichromatic deficiency.

    The matrix works on gamma-encoded sRGB, so this is a quick preview rather
    than a physiological model. `severity` mixes the input color (0.0) and the
    full simulation (1.0). Alpha passes through untouched.
    """
    kind = ColorBlindnessType(deficiency)
    matrix = c.CB_MATRICES[kind.value]
    f = _clamp01(float(severity))

    r, g, b = rgb.r / c.RGB_MAX, rgb.g / c.RGB_MAX, rgb.b / c.RGB_MAX

    rr_sim = r * matrix[0][0] + g * matrix[0][1] + b * matrix[0][2]
    gg_sim = r * matrix[1][0] + g * matrix[1][1] + b * matrix[1][2]
    bb_sim = r * matrix[2][0] + g * matrix[2][1] + b * matrix[2][2]

    rr = (1 - f) * r + f * rr_sim
    gg = (1 - f) * g + f * gg_sim
    bb = (1 - f) * b + f * bb_sim

    return RGB(rr * c.RGB_MAX, gg * c.RGB_MAX, bb * c.RGB_MAX, rgb.a)


def simulate_palette(
    colors: Iterable[RGB], deficiency: Union[ColorBlindnessType, str], severity: float = 1.0
) -> List[RGB]:
    kind = ColorBlindnessType(deficiency)
    return [simulate_color_blindness(rgb, kind, severity) for rgb in colors]
