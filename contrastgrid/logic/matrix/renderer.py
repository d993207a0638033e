#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/logic/matrix/renderer.py

from typing import List, Optional

from contrastgrid.core import config as c
from contrastgrid.core.types import Color, ContrastResult
from contrastgrid.shared.formatting import format_level_badge, pad_visible, truncate
from contrastgrid.shared.preview import color_swatch, text_sample


def _render_cell(fg: Color, bg: Color, result: Optional[ContrastResult], same: bool) -> str:
    if result is None:
        return f"{c.MSG_BOLD_COLORS['dim']}-{c.RESET}"
    if same:
        return f"{text_sample(fg, bg)} {c.MSG_BOLD_COLORS['dim']}{result.ratio_string}{c.RESET}"
    return f"{text_sample(fg, bg)} {result.ratio_string} {format_level_badge(result.level)}"


def render_contrast_matrix(
    palette: List[Color],
    matrix: List[List[Optional[ContrastResult]]],
    text_size: str,
    summary: str,
) -> None:
    """Strictly prints the grid. Rows are foregrounds, columns are backgrounds."""
    label_width = max(len(color.display_name) for color in palette) + 6
    cell_width = c.CELL_WIDTH + 8

    print()
    print(f"{c.MSG_BOLD_COLORS['info']}text size{c.RESET} {c.BOLD_WHITE}: {text_size}{c.RESET}")
    print(f"{c.MSG_BOLD_COLORS['dim']}rows: foreground (text), columns: background{c.RESET}\n")

    header = pad_visible(f"{c.BOLD_WHITE}FG \\ BG{c.RESET}", label_width)
    for color in palette:
        header += pad_visible(f"{color_swatch(color, 2)} {truncate(color.display_name, c.CELL_WIDTH)}", cell_width)
    print(header)

    for i, fg in enumerate(palette):
        line = pad_visible(f"{color_swatch(fg, 2)} {c.BOLD_WHITE}{fg.display_name}{c.RESET}", label_width)
        for j, bg in enumerate(palette):
            line += pad_visible(_render_cell(fg, bg, matrix[i][j], i == j), cell_width)
        print(line)

    print(f"\n{c.MSG_BOLD_COLORS['info']}{summary}{c.RESET}")
