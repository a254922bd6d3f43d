#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/__init__.py

"""WCAG color contrast toolkit: CSS color parsing, conversion and contrast checks."""

__version__ = "0.1.0"

from wcaglab.api import (
    adjust_color_for_contrast,
    analyze_contrast,
    batch_validate,
    check_wcag,
    clear_all_caches,
    generate_accessible_palette,
    get_all_cache_stats,
    get_contrast_ratio,
    get_relative_luminance,
    get_shared_caches,
    hsl_to_rgb,
    is_readable_on_glass,
    measure_contrast,
    meets_wcag,
    oklab_to_rgb,
    oklch_string_to_rgb_values,
    oklch_to_rgb,
    parse_color,
    parse_hsl,
    parse_oklab_to_rgb,
    parse_oklch_to_rgb,
)
from wcaglab.core.cache import CacheRegistry, CacheStats, ColorCache
from wcaglab.core.contrast import get_contrasting_color, is_large_text
from wcaglab.core.conversions import (
    alpha_blend,
    hex_to_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_oklab,
    rgb_to_oklch,
)
from wcaglab.core.luminance import get_perceived_brightness, is_light_color
from wcaglab.core.parser import (
    parse_hex,
    parse_named_color,
    parse_oklab_string,
    parse_oklch_string,
    parse_rgb,
)
from wcaglab.core.types import (
    HSL,
    OKLAB,
    OKLCH,
    RGB,
    ColorBlindnessType,
    ColorKind,
    ComplianceLevel,
    ContrastResult,
    ContrastValidation,
    ParsedColor,
    WCAGLevel,
)
from wcaglab.core.vision import simulate_color_blindness, simulate_palette
from wcaglab.shared.formatting import format_css
from wcaglab.shared.logger import get_log_level, set_log_level
