#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/types.py

"""
Value types for the color model.

Every numeric channel is clamped when the value is built, so an instance
never holds an out-of-range component. An alpha of None means fully opaque.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Optional, Union

from . import config as c
from wcaglab.shared.clamping import _clamp, _clamp01, _to_channel, _wrap_hue


def _opt_alpha(a: Optional[float]) -> Optional[float]:
    return None if a is None else _clamp01(float(a))


@dataclass(frozen=True)
class RGB:
    """sRGB color with 8-bit integer channels."""

    r: int
    g: int
    b: int
    a: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _to_channel(float(self.r)))
        object.__setattr__(self, "g", _to_channel(float(self.g)))
        object.__setattr__(self, "b", _to_channel(float(self.b)))
        object.__setattr__(self, "a", _opt_alpha(self.a))

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b

    @property
    def alpha(self) -> float:
        return c.UNIT if self.a is None else self.a

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= c.UNIT

    def with_alpha(self, a: Optional[float]) -> "RGB":
        return replace(self, a=a)


@dataclass(frozen=True)
class HSL:
    """Hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float
    a: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", _wrap_hue(float(self.h)))
        object.__setattr__(self, "s", _clamp(float(self.s), 0.0, c.PERCENT_MAX))
        object.__setattr__(self, "l", _clamp(float(self.l), 0.0, c.PERCENT_MAX))
        object.__setattr__(self, "a", _opt_alpha(self.a))


@dataclass(frozen=True)
class OKLCH:
    l: float
    c: float
    h: float
    alpha: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "l", _clamp(float(self.l), 0.0, c.OKLAB_L_MAX))
        object.__setattr__(self, "c", _clamp(float(self.c), 0.0, c.OKLCH_CHROMA_MAX))
        object.__setattr__(self, "h", _wrap_hue(float(self.h)))
        object.__setattr__(self, "alpha", _opt_alpha(self.alpha))


@dataclass(frozen=True)
class OKLAB:
    l: float
    a: float
    b: float
    alpha: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "l", _clamp(float(self.l), 0.0, c.OKLAB_L_MAX))
        object.__setattr__(self, "a", _clamp(float(self.a), -c.OKLAB_AB_MAX, c.OKLAB_AB_MAX))
        object.__setattr__(self, "b", _clamp(float(self.b), -c.OKLAB_AB_MAX, c.OKLAB_AB_MAX))
        object.__setattr__(self, "alpha", _opt_alpha(self.alpha))


ColorValue = Union[RGB, HSL, OKLCH, OKLAB]


class ColorKind(str, Enum):
    """Notation a color was written in."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"
    OKLAB = "oklab"
    NAMED = "named"
    KEYWORD = "keyword"


@dataclass(frozen=True)
class ParsedColor:
    """
    A parsed color string. `rgb` is always populated, whatever the notation,
    since all contrast math runs on sRGB; `value` keeps the color in the
    space it was written in.
    """

    kind: ColorKind
    text: str
    rgb: RGB
    value: ColorValue


class WCAGLevel(str, Enum):
    AA = "AA"
    AAA = "AAA"
    AA_LARGE = "AA-large"
    AAA_LARGE = "AAA-large"

    @property
    def threshold(self) -> float:
        return _LEVEL_THRESHOLDS[self]


_LEVEL_THRESHOLDS = {
    WCAGLevel.AA: c.WCAG_AA_NORMAL,
    WCAGLevel.AAA: c.WCAG_AAA_NORMAL,
    WCAGLevel.AA_LARGE: c.WCAG_AA_LARGE,
    WCAGLevel.AAA_LARGE: c.WCAG_AAA_LARGE,
}


class ComplianceLevel(str, Enum):
    AAA = "AAA"
    AA = "AA"
    FAIL = "FAIL"


class ColorBlindnessType(str, Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"


@dataclass(frozen=True)
class ContrastResult:
    """
    Full contrast analysis of a color pair.

    When `measured` is False one of the colors could not be resolved: `ratio`
    holds the 1.0 floor and every `meets_*` flag is False. That is "no
    verdict", not a measured failure.
    """

    ratio: float
    meets_aa: bool
    meets_aaa: bool
    meets_aa_large: bool
    meets_aaa_large: bool
    meets_ui_component: bool
    measured: bool = True


@dataclass(frozen=True)
class ContrastValidation:
    contrast: float
    passes: bool
    level: ComplianceLevel
    measured: bool = True
