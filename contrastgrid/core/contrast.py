#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/core/contrast.py

"""
WCAG 2.1 contrast calculations.

Source: https://www.w3.org/WAI/WCAG21/Understanding/contrast-minimum.html
"""

from typing import Collection, Dict, List, Optional, Sequence

from . import config as c
from .types import Color, ContrastResult, TextSize, WCAGLevel
from contrastgrid.shared.clamping import round_half_up


def _srgb_to_linear(channel: float) -> float:
    """Linearize an 8-bit sRGB component using the WCAG threshold."""
    normalized = channel / c.RGB_MAX
    if normalized <= c.WCAG_SRGB_TO_LINEAR_TH:
        return normalized / c.SRGB_SLOPE
    return ((normalized + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_relative_luminance(rgb: Sequence[float]) -> float:
    """Relative luminance in [0, 1]: L = 0.2126 R + 0.7152 G + 0.0722 B on linear channels."""
    r, g, b = rgb
    return (
        c.LUMA_R * _srgb_to_linear(r) +
        c.LUMA_G * _srgb_to_linear(g) +
        c.LUMA_B * _srgb_to_linear(b)
    )


def _ratio_from_luminance(lum1: float, lum2: float) -> float:
    lighter, darker = (lum1, lum2) if lum1 > lum2 else (lum2, lum1)
    return (lighter + c.WCAG_LUMINANCE_OFFSET) / (darker + c.WCAG_LUMINANCE_OFFSET)


def get_contrast_ratio(rgb1: Sequence[float], rgb2: Sequence[float]) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two RGB colors.

    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter luminance.
    The result lies in [1, 21] and does not depend on argument order.
    """
    return _ratio_from_luminance(get_relative_luminance(rgb1), get_relative_luminance(rgb2))


def format_contrast_ratio(ratio: float) -> str:
    """'21:1', '4.5:1' or '4.55:1', depending on how many decimals survive rounding to 2 places."""
    # Work in integer hundredths so 1.1 does not come out as '1.10'
    hundredths = round_half_up(ratio * 100)

    if hundredths % 100 == 0:
        return f"{hundredths // 100}:1"
    if hundredths % 10 == 0:
        return f"{hundredths / 100:.1f}:1"
    return f"{hundredths / 100:.2f}:1"


def get_wcag_level(ratio: float, text_size: TextSize = c.DEFAULT_TEXT_SIZE) -> WCAGLevel:
    """
    Classify a ratio for the given text size.

    AA18 ("passes for large text only") exists for normal text alone;
    in large-text mode anything under the large AA threshold is DNP.
    """
    thresholds = c.WCAG_THRESHOLDS[text_size]

    if ratio >= thresholds["AAA"]:
        return "AAA"
    if ratio >= thresholds["AA"]:
        return "AA"
    if text_size == "normal" and ratio >= c.WCAG_THRESHOLDS["large"]["AA"]:
        return "AA18"

    return "DNP"


def meets_wcag_level(ratio: float, level: str, text_size: TextSize = c.DEFAULT_TEXT_SIZE) -> bool:
    return ratio >= c.WCAG_THRESHOLDS[text_size][level]


def _build_result(ratio: float, text_size: TextSize) -> ContrastResult:
    return ContrastResult(
        ratio=ratio,
        ratio_string=format_contrast_ratio(ratio),
        level=get_wcag_level(ratio, text_size),
        meets_aa=meets_wcag_level(ratio, "AA", text_size),
        meets_aaa=meets_wcag_level(ratio, "AAA", text_size),
    )


def get_contrast_result(
    foreground: Sequence[float],
    background: Sequence[float],
    text_size: TextSize = c.DEFAULT_TEXT_SIZE,
) -> ContrastResult:
    """Evaluate one foreground/background pair of RGB values."""
    return _build_result(get_contrast_ratio(foreground, background), text_size)


def get_color_contrast_result(
    foreground: Color,
    background: Color,
    text_size: TextSize = c.DEFAULT_TEXT_SIZE,
) -> ContrastResult:
    return get_contrast_result(foreground.rgb, background.rgb, text_size)


def generate_contrast_matrix(
    colors: Sequence[Color],
    text_size: TextSize = c.DEFAULT_TEXT_SIZE,
) -> List[List[ContrastResult]]:
    """
    Build the N x N grid where result[i][j] is colors[i] (foreground)
    on colors[j] (background). The diagonal is included.
    """
    # One luminance per color, shared by its row and its column
    lums = [get_relative_luminance(color.rgb) for color in colors]

    return [
        [_build_result(_ratio_from_luminance(fg_lum, bg_lum), text_size) for bg_lum in lums]
        for fg_lum in lums
    ]


def get_wcag_level_description(level: WCAGLevel) -> str:
    return c.WCAG_LEVEL_DESCRIPTIONS[level]


def summarize_contrast_matrix(matrix: Sequence[Sequence[Optional[ContrastResult]]]) -> Dict[str, int]:
    """Count cells per level; 'passing' is AAA + AA. Empty (filtered) cells are skipped."""
    counts = {level: 0 for level in c.WCAG_LEVELS}
    for row in matrix:
        for result in row:
            if result is not None:
                counts[result.level] += 1

    counts["total"] = sum(counts[level] for level in c.WCAG_LEVELS)
    counts["passing"] = counts["AAA"] + counts["AA"]
    return counts


def describe_contrast_matrix(matrix: Sequence[Sequence[Optional[ContrastResult]]]) -> str:
    summary = summarize_contrast_matrix(matrix)
    return (
        f"{summary['total']} color combinations: "
        f"{summary['passing']} pass AA or better, "
        f"{summary['AA18']} pass for large text only, "
        f"{summary['DNP']} fail."
    )


def level_matches_filters(level: WCAGLevel, filters: Collection[str]) -> bool:
    return any(c.GRID_FILTER_LEVELS.get(f) == level for f in filters)


def filter_contrast_matrix(
    matrix: Sequence[Sequence[ContrastResult]],
    filters: Collection[str] = c.DEFAULT_GRID_FILTERS,
) -> List[List[Optional[ContrastResult]]]:
    """Blank out (None) every cell whose level is not selected by the grid filters."""
    return [
        [result if level_matches_filters(result.level, filters) else None for result in row]
        for row in matrix
    ]
