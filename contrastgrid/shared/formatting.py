#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/shared/formatting.py

import re

from contrastgrid.core import config as c

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def pad_visible(s: str, width: int) -> str:
    """Left-align s in width columns, ignoring ANSI escape sequences."""
    return s + " " * max(0, width - get_visible_len(s))


def truncate(s: str, width: int) -> str:
    if len(s) <= width:
        return s
    return s[:max(0, width - 1)] + "…"


def get_badge_label(level: str) -> str:
    return c.WCAG_BADGE_LABELS[level]


def get_badge_title(level: str) -> str:
    return c.WCAG_BADGE_TITLES[level]


def format_level_badge(level: str) -> str:
    r, g, b = c.LEVEL_BADGE_RGB[level]
    return f"\033[48;2;{r};{g};{b}m\033[1;38;2;255;255;255m {get_badge_label(level)} {c.RESET}"


def format_pass_fail(passed: bool) -> str:
    if passed:
        return f"{c.MSG_BOLD_COLORS['success']}Pass{c.RESET}"
    return f"{c.MSG_BOLD_COLORS['error']}Fail{c.RESET}"
