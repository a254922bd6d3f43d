#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/shared/logger.py

import sys

from wcaglab.core import config as c

_threshold = c.LOG_LEVELS.get(c.LOG_LEVEL, c.LOG_LEVELS["warning"])


def set_log_level(level: str) -> None:
    """Change the minimum level that gets printed."""
    global _threshold
    level = str(level).lower()
    if level not in c.LOG_LEVELS:
        raise ValueError(f"unknown log level: '{level}'")
    _threshold = c.LOG_LEVELS[level]


def get_log_level() -> int:
    return _threshold


def log(level: str, message: str) -> None:
    level = str(level).lower()
    if c.LOG_LEVELS.get(level, c.LOG_LEVELS["error"]) < _threshold:
        return
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[wcaglab][{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)
