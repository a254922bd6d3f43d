#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/config.py

import math
import os

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Standard Scaling Constants
UNIT = 1.0                         # Normalized maximum
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
PERCENT_MAX = 100.0                # Upper bound for HSL saturation/lightness

# CSS angle units, expressed in degrees per unit
ANGLE_UNITS = {
    "deg": 1.0,
    "grad": 0.9,                   # 400 gradians = 360 degrees
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}

# OK color space nominal ranges (Source: CSS Color Module Level 4)
OKLAB_L_MAX = 1.0                  # Lightness upper bound
OKLCH_CHROMA_MAX = 0.4             # Chroma treated as 100% in percentage syntax
OKLAB_AB_MAX = 0.4                 # a/b axis bound, 100% in percentage syntax

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for color space conversions
WCAG_LINEAR_TH = 0.03928           # Threshold used by the WCAG 2.x luminance definition
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# OKLab Matrices (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)
M2_INV_OKLAB = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)
M1_INV_OKLAB = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# ==========================================
# WCAG Compliance
# ==========================================

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_LUMINANCE_OFFSET = 0.05       # Flare term added to both luminances
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_UI_COMPONENT = 3.0            # Non-text contrast (Source: WCAG 2.1 SC 1.4.11)
WCAG_MIN_RATIO = 1.0               # Lower bound, also the "no guarantee" sentinel
WCAG_MAX_RATIO = 21.0              # Upper bound (Black on White)

# Large text boundaries in CSS pixels: 18pt, or 14pt bold
LARGE_TEXT_PX = 24.0
LARGE_BOLD_TEXT_PX = 18.66
BOLD_WEIGHT = 700
NORMAL_WEIGHT = 400

# Contrast adjustment search
ADJUST_STEP = 5                    # Per-channel increment per attempt
ADJUST_MAX_ATTEMPTS = 51           # 255 / 5 covers the full channel range
DEFAULT_TARGET_RATIO = WCAG_AA_NORMAL

# Perceived brightness (Source: HSP color model)
HSP_R = 0.299
HSP_G = 0.587
HSP_B = 0.114
LIGHT_BRIGHTNESS_TH = 127.5        # Colors above this are treated as light

# Palette variation factor per step
PALETTE_STEP = 0.2

# Color Blindness Simulation Matrices, applied to normalized sRGB
CB_MATRICES = {
    "protanopia": (
        (0.567, 0.433, 0.0),        # Red-blindness (L-cone deficiency)
        (0.558, 0.442, 0.0),
        (0.0, 0.242, 0.758),
    ),
    "deuteranopia": (
        (0.625, 0.375, 0.0),        # Green-blindness (M-cone deficiency)
        (0.70, 0.30, 0.0),
        (0.0, 0.30, 0.70),
    ),
    "tritanopia": (
        (0.95, 0.05, 0.0),          # Blue-blindness (S-cone deficiency)
        (0.0, 0.433, 0.567),
        (0.0, 0.475, 0.525),
    ),
}

# ==========================================
# Caching
# ==========================================

# Default capacities per cache; raw strings repeat most across a stylesheet
PARSE_CACHE_SIZE = 1000
CONVERSION_CACHE_SIZE = 500
LUMINANCE_CACHE_SIZE = 500
CONTRAST_CACHE_SIZE = 500

# ==========================================
# Logging
# ==========================================

LOG_LEVELS = {
    "debug": 10,
    "info": 20,
    "success": 20,
    "warning": 30,
    "error": 40,
}
LOG_LEVEL_ENV = "WCAGLAB_LOG_LEVEL"
LOG_LEVEL = os.environ.get(LOG_LEVEL_ENV, "warning").strip().lower()

# Standard ANSI Escape Codes for log tags
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "debug": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
    "debug": "\033[0;2;37m",
}

RESET = "\033[0m"
