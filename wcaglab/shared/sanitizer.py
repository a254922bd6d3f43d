#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/shared/sanitizer.py

import re

_SPACE_RUN = re.compile(r"\s+")
_SPACE_AROUND_PUNCT = re.compile(r"\s*([(),/])\s*")
_HEX_BODY = re.compile(r"^[0-9a-f]+$")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_color_text(value) -> str:
    """
    Normalizes a raw color string so that spellings differing only in case
    or insignificant whitespace share one cache key.

    'RGB( 255 , 0,0 )' -> 'rgb(255,0,0)'
    """
    if not isinstance(value, str):
        return ""
    s = value.strip().lower()
    if not s:
        return ""
    s = _SPACE_RUN.sub(" ", s)
    s = _SPACE_AROUND_PUNCT.sub(r"\1", s)
    return s


def normalize_hex(value: str) -> str:
    """
    Validates a '#'-prefixed hex color and returns its lowercase digits
    expanded to 6 or 8 characters. Returns '' for anything malformed.

    Accepts the CSS lengths 3 (#rgb), 4 (#rgba), 6 (#rrggbb) and 8 (#rrggbbaa).
    """
    if not isinstance(value, str):
        return ""
    s = value.strip().lower()
    if not s.startswith("#"):
        return ""
    s = s[1:]
    if not _HEX_BODY.match(s):
        return ""

    L = len(s)
    if L in (6, 8):
        return s
    if L in (3, 4):
        # e.g., 'abc' becomes 'aabbcc'
        return "".join([ch * 2 for ch in s])
    return ""
