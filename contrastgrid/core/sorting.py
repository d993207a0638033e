#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/core/sorting.py

"""
Palette sorting.

Every sort returns a new list and leaves the input untouched. Python's
sort is stable, so colors that tie keep their relative input order in
both directions.
"""

import functools
from typing import List, Sequence

from . import config as c
from .contrast import get_contrast_ratio, get_relative_luminance
from .types import Color, SortCriteria, SortDirection


def _ascending(direction: SortDirection) -> bool:
    return direction == "ascending"


def _other_ratios(index: int, palette: Sequence[Color]) -> List[float]:
    color = palette[index]
    return [
        get_contrast_ratio(color.rgb, other.rgb)
        for i, other in enumerate(palette)
        if i != index
    ]


def calculate_average_contrast(index: int, palette: Sequence[Color]) -> float:
    """Mean contrast of palette[index] against every other position; 0 for palettes of one."""
    ratios = _other_ratios(index, palette)
    if not ratios:
        return 0.0
    return sum(ratios) / len(ratios)


def calculate_pass_rate(index: int, palette: Sequence[Color]) -> float:
    """Percentage (0-100) of other positions reaching normal-text AA against palette[index]."""
    ratios = _other_ratios(index, palette)
    if not ratios:
        return 0.0
    passed = sum(1 for ratio in ratios if ratio >= c.PASS_RATE_THRESHOLD)
    return passed / len(ratios) * 100


def sort_by_luminance(colors: Sequence[Color], direction: SortDirection = c.DEFAULT_SORT_DIRECTION) -> List[Color]:
    """Ascending means lightest first, descending darkest first."""
    return sorted(
        colors,
        key=lambda color: get_relative_luminance(color.rgb),
        reverse=_ascending(direction),
    )


def _sort_by_scores(colors: Sequence[Color], scores: List[float], direction: SortDirection) -> List[Color]:
    order = sorted(range(len(colors)), key=lambda i: scores[i], reverse=not _ascending(direction))
    return [colors[i] for i in order]


def sort_by_contrast_score(colors: Sequence[Color], direction: SortDirection = c.DEFAULT_SORT_DIRECTION) -> List[Color]:
    """Ascending puts the colors with the lowest average contrast first."""
    scores = [calculate_average_contrast(i, colors) for i in range(len(colors))]
    return _sort_by_scores(colors, scores, direction)


def sort_by_pass_rate(colors: Sequence[Color], direction: SortDirection = c.DEFAULT_SORT_DIRECTION) -> List[Color]:
    scores = [calculate_pass_rate(i, colors) for i in range(len(colors))]
    return _sort_by_scores(colors, scores, direction)


def sort_by_hue(colors: Sequence[Color], direction: SortDirection = c.DEFAULT_SORT_DIRECTION) -> List[Color]:
    """
    Color wheel order: red (0) -> yellow (60) -> green (120) -> blue (240) -> purple (300).

    Greys (saturation 0) have no meaningful hue. They go after the chromatic
    colors when ascending and before them when descending, ordered by
    lightness among themselves.
    """
    asc = _ascending(direction)

    def compare(a: Color, b: Color) -> float:
        a_grey = a.hsl.s == 0
        b_grey = b.hsl.s == 0
        if a_grey and b_grey:
            return a.hsl.l - b.hsl.l if asc else b.hsl.l - a.hsl.l
        if a_grey:
            return 1 if asc else -1
        if b_grey:
            return -1 if asc else 1
        return a.hsl.h - b.hsl.h if asc else b.hsl.h - a.hsl.h

    return sorted(colors, key=functools.cmp_to_key(compare))


def sort_alphabetically(colors: Sequence[Color], direction: SortDirection = c.DEFAULT_SORT_DIRECTION) -> List[Color]:
    """
    Case-insensitive by label, falling back to the hex value.

    Labelled colors always come before unlabelled ones; the direction only
    reverses the order inside each group.
    """
    asc = _ascending(direction)

    def compare(a: Color, b: Color) -> int:
        if a.label and not b.label:
            return -1
        if not a.label and b.label:
            return 1

        key_a = (a.label or a.hex).casefold()
        key_b = (b.label or b.hex).casefold()
        if key_a == key_b:
            return 0
        if asc:
            return -1 if key_a < key_b else 1
        return -1 if key_b < key_a else 1

    return sorted(colors, key=functools.cmp_to_key(compare))


SORTERS = {
    "luminance": sort_by_luminance,
    "contrast": sort_by_contrast_score,
    "pass-rate": sort_by_pass_rate,
    "hue": sort_by_hue,
    "alphabetical": sort_alphabetically,
}


def sort_colors(
    colors: Sequence[Color],
    criteria: SortCriteria,
    direction: SortDirection = c.DEFAULT_SORT_DIRECTION,
) -> List[Color]:
    """Dispatch to a sorter. 'manual' (and anything unknown) keeps the input order."""
    if len(colors) <= 1:
        return list(colors)

    sorter = SORTERS.get(criteria)
    if sorter is None:
        return list(colors)

    return sorter(colors, direction)


def get_sort_criteria_label(criteria: SortCriteria, direction: SortDirection) -> str:
    """Human readable sort state, also used for screen-reader announcements."""
    asc = _ascending(direction)
    arrow = "↑" if asc else "↓"

    if criteria == "luminance":
        return f"{arrow} Luminance ({'lightest first' if asc else 'darkest first'})"
    if criteria == "contrast":
        return f"{arrow} Contrast Score ({'low to high' if asc else 'high to low'})"
    if criteria == "pass-rate":
        return f"{arrow} Pass Rate ({'low to high' if asc else 'high to low'})"
    if criteria == "hue":
        return f"{arrow} Hue ({'ROYGBIV' if asc else 'reverse'})"
    if criteria == "alphabetical":
        return f"{arrow} Alphabetical ({'A-Z' if asc else 'Z-A'})"
    if criteria == "manual":
        return "Manual Order"

    return "Unknown"
