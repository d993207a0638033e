#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/core/parser.py

"""
Color text parsing.

Supports #RRGGBB, #RGB (the '#' is optional), rgb(R, G, B) and
hsl(H, S%, L%), with commas or whitespace between components.
Nothing here raises on bad input: failures come back as None, or as
the "invalid" format from detect_color_format().
"""

from typing import Optional

from . import config as c
from .types import HSL, RGB, ColorFormat
from contrastgrid.shared.clamping import round_half_up


def detect_color_format(value: str) -> ColorFormat:
    """Classify color text. Numeric ranges are not checked here."""
    if not isinstance(value, str):
        return c.INVALID_FORMAT
    trimmed = value.strip()

    for fmt in c.FORMAT_PRIORITY:
        if c.PATTERNS[fmt].match(trimmed):
            return fmt

    return c.INVALID_FORMAT


def parse_hex(value: str) -> Optional[RGB]:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()

    match = c.PATTERNS["hex"].match(trimmed)
    if match:
        return RGB(*(int(group, 16) for group in match.groups()))

    # 'F50' becomes 'FF5500'
    match = c.PATTERNS["hex-short"].match(trimmed)
    if match:
        return RGB(*(int(group * 2, 16) for group in match.groups()))

    return None


def parse_rgb_string(value: str) -> Optional[RGB]:
    if not isinstance(value, str):
        return None
    match = c.PATTERNS["rgb"].match(value.strip())
    if not match:
        return None

    r, g, b = (int(group, 10) for group in match.groups())
    if not all(0 <= ch <= c.RGB_MAX for ch in (r, g, b)):
        return None

    return RGB(r, g, b)


def parse_hsl_string(value: str) -> Optional[HSL]:
    if not isinstance(value, str):
        return None
    match = c.PATTERNS["hsl"].match(value.strip())
    if not match:
        return None

    h, s, l = (float(group) for group in match.groups())

    # Hue wraps around the circle, s/l are hard limits
    if not (0 <= s <= c.PERCENT_MAX and 0 <= l <= c.PERCENT_MAX):
        return None

    return HSL(((h % c.HUE_MAX) + c.HUE_MAX) % c.HUE_MAX, s, l)


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL to RGB."""
    h = hsl.h / c.HUE_MAX
    s = hsl.s / c.PERCENT_MAX
    l = hsl.l / c.PERCENT_MAX

    if s == 0:
        # Achromatic (grey)
        val = round_half_up(l * c.RGB_MAX)
        return RGB(val, val, val)

    q = l * (c.UNIT + s) if l < 0.5 else l + s - l * s
    p = c.DIV_2 * l - q

    def hue_to_rgb(t: float) -> float:
        if t < 0:
            t += 1
        if t > 1:
            t -= 1
        if t < 1 / 6:
            return p + (q - p) * c.HSL_HUE_MOD * t
        if t < 1 / 2:
            return q
        if t < 2 / 3:
            return p + (q - p) * (2 / 3 - t) * c.HSL_HUE_MOD
        return p

    return RGB(
        round_half_up(hue_to_rgb(h + 1 / 3) * c.RGB_MAX),
        round_half_up(hue_to_rgb(h) * c.RGB_MAX),
        round_half_up(hue_to_rgb(h - 1 / 3) * c.RGB_MAX),
    )


def parse_color_to_rgb(value: str) -> Optional[RGB]:
    """Single entry point for turning any supported color text into RGB."""
    fmt = detect_color_format(value)

    if fmt in ("hex", "hex-short"):
        return parse_hex(value)
    if fmt == "rgb":
        return parse_rgb_string(value)
    if fmt == "hsl":
        hsl = parse_hsl_string(value)
        return hsl_to_rgb(hsl) if hsl is not None else None

    return None


def is_valid_color(value: str) -> bool:
    """True when the text is a supported format and its values are in range."""
    return parse_color_to_rgb(value) is not None
