#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/logic/sort/engine.py

import argparse
import json
from typing import Dict, List, Optional

from contrastgrid.core.contrast import get_relative_luminance
from contrastgrid.core.sorting import (
    calculate_average_contrast,
    calculate_pass_rate,
    get_sort_criteria_label,
    sort_colors,
)
from contrastgrid.core.types import Color
from contrastgrid.logic.matrix.engine import resolve_palette
from contrastgrid.shared.logger import log
from .renderer import render_sorted_palette


def get_sort_scores(palette: List[Color], criteria: str) -> Optional[List[str]]:
    """Per-color value the criteria sorts on, formatted for display."""
    if criteria == "luminance":
        return [f"{get_relative_luminance(color.rgb):.4f}" for color in palette]
    if criteria == "contrast":
        return [f"{calculate_average_contrast(i, palette):.2f}:1" for i in range(len(palette))]
    if criteria == "pass-rate":
        return [f"{calculate_pass_rate(i, palette):.0f}%" for i in range(len(palette))]
    if criteria == "hue":
        return ["grey" if color.hsl.s == 0 else f"{color.hsl.h:g}deg" for color in palette]
    return None


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for palette sorting"""
    palette = resolve_palette(args.color)

    if not palette:
        log("warning", "no colors given, use -c COLOR[=LABEL]")
        return

    ordered = sort_colors(palette, args.by, args.direction)
    title = get_sort_criteria_label(args.by, args.direction)

    # Scores do not depend on palette order, so they can be read off the result
    scores = get_sort_scores(ordered, args.by) if args.scores else None

    if args.json:
        entries: List[Dict] = [{"hex": color.hex, "label": color.label} for color in ordered]
        if scores is not None:
            for entry, score in zip(entries, scores):
                entry["score"] = score
        print(json.dumps({"criteria": args.by, "direction": args.direction,
                          "title": title, "colors": entries}, indent=2, ensure_ascii=False))
        return

    render_sorted_palette(ordered, title, scores)
