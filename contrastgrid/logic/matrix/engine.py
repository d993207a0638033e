#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/logic/matrix/engine.py

import argparse
import dataclasses
import json
from typing import List, Optional

from contrastgrid.core import config as c
from contrastgrid.core.contrast import (
    describe_contrast_matrix,
    filter_contrast_matrix,
    generate_contrast_matrix,
    summarize_contrast_matrix,
)
from contrastgrid.core.types import Color, ContrastResult
from contrastgrid.shared.logger import log
from .renderer import render_contrast_matrix


def resolve_palette(colors: Optional[List[Color]]) -> List[Color]:
    """Apply the CLI palette size limit."""
    palette = list(colors or [])
    if len(palette) > c.MAX_COLORS:
        log("warning", f"palette has {len(palette)} colors, only the first {c.MAX_COLORS} are used")
        palette = palette[:c.MAX_COLORS]
    return palette


def _matrix_to_json(
    palette: List[Color],
    matrix: List[List[Optional[ContrastResult]]],
    visible: List[List[Optional[ContrastResult]]],
    text_size: str,
) -> str:
    payload = {
        "text_size": text_size,
        "colors": [{"hex": color.hex, "label": color.label} for color in palette],
        "matrix": [
            [dataclasses.asdict(result) if result is not None else None for result in row]
            for row in visible
        ],
        "summary": summarize_contrast_matrix(matrix),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the contrast matrix"""
    palette = resolve_palette(args.color)

    if len(palette) < 2:
        log("warning", "add at least 2 colors to generate contrast comparisons")
        return

    matrix = generate_contrast_matrix(palette, args.text_size)
    filters = args.filters if args.filters else c.DEFAULT_GRID_FILTERS
    visible = filter_contrast_matrix(matrix, filters)

    if args.json:
        print(_matrix_to_json(palette, matrix, visible, args.text_size))
        return

    render_contrast_matrix(palette, visible, args.text_size, describe_contrast_matrix(matrix))
