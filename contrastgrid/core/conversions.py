#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/core/conversions.py

from typing import Optional, Sequence

from . import config as c
from .parser import detect_color_format, hsl_to_rgb, parse_color_to_rgb, parse_hsl_string
from .types import HSL, RGB, Color
from contrastgrid.shared.clamping import _clamp255, round_half_up


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """Convert RGB components to an uppercase '#RRGGBB' string."""
    r, g, b = (_clamp255(ch) for ch in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsl(rgb: Sequence[float]) -> HSL:
    """Convert RGB to HSL, rounded to whole degrees and percents."""
    r_f, g_f, b_f = (ch / c.RGB_MAX for ch in rgb)
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / c.DIV_2

    if cmax == cmin:
        return HSL(0, 0, round_half_up(L * c.PERCENT_MAX))

    delta = cmax - cmin
    if L > 0.5:
        s = delta / (c.DIV_2 - cmax - cmin)
    else:
        s = delta / (cmax + cmin)

    if cmax == r_f:
        h = ((g_f - b_f) / delta + (c.HSL_HUE_MOD if g_f < b_f else 0)) / c.HSL_HUE_MOD
    elif cmax == g_f:
        h = ((b_f - r_f) / delta + 2) / c.HSL_HUE_MOD
    else:
        h = ((r_f - g_f) / delta + 4) / c.HSL_HUE_MOD

    return HSL(
        round_half_up(h * c.HUE_MAX) % c.HUE_MAX,
        round_half_up(s * c.PERCENT_MAX),
        round_half_up(L * c.PERCENT_MAX),
    )


def hex_to_rgb(hex_code: str) -> Optional[RGB]:
    return parse_color_to_rgb(hex_code)


def hex_to_hsl(hex_code: str) -> Optional[HSL]:
    rgb = parse_color_to_rgb(hex_code)
    if rgb is None:
        return None
    return rgb_to_hsl(rgb)


def hsl_to_hex(hsl: HSL) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


def create_color(value: str, label: Optional[str] = None) -> Optional[Color]:
    """
    Build a Color from hex, rgb() or hsl() text.

    hsl() input keeps the parsed HSL as given and derives RGB from it;
    everything else derives HSL from the parsed RGB. Returns None when
    the text does not parse or is out of range.
    """
    fmt = detect_color_format(value)

    if fmt in ("hex", "hex-short", "rgb"):
        rgb = parse_color_to_rgb(value)
        if rgb is None:
            return None
        hsl = rgb_to_hsl(rgb)
    elif fmt == "hsl":
        hsl = parse_hsl_string(value)
        if hsl is None:
            return None
        rgb = hsl_to_rgb(hsl)
    else:
        return None

    return Color(hex=rgb_to_hex(rgb), rgb=rgb, hsl=hsl, label=label)


def color_from_rgb(rgb: Sequence[float], label: Optional[str] = None) -> Color:
    """Build a Color from raw channel values, clamping anything out of range."""
    clean = RGB(*(_clamp255(ch) for ch in rgb))
    return Color(hex=rgb_to_hex(clean), rgb=clean, hsl=rgb_to_hsl(clean), label=label)


def _fmt_number(v: float) -> str:
    if float(v).is_integer():
        return str(int(v))
    return f"{v:g}"


def format_rgb(rgb: RGB) -> str:
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"


def format_hsl(hsl: HSL) -> str:
    h, s, l = (_fmt_number(v) for v in hsl)
    return f"hsl({h}, {s}%, {l}%)"
