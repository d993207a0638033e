#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/logic/sort/renderer.py

from typing import List, Optional

from contrastgrid.core import config as c
from contrastgrid.core.conversions import format_hsl, format_rgb
from contrastgrid.core.types import Color
from contrastgrid.shared.preview import color_swatch


def render_sorted_palette(palette: List[Color], title: str, scores: Optional[List[str]] = None) -> None:
    print()
    print(f"{c.MSG_BOLD_COLORS['info']}{title}{c.RESET}\n")

    for i, color in enumerate(palette):
        label = color.label or ""
        line = (
            f"{c.BOLD_WHITE}{i + 1:>3}.{c.RESET} {color_swatch(color, 6)}  "
            f"{c.BOLD_WHITE}{color.hex}{c.RESET}  {label:<16} "
            f"{c.MSG_BOLD_COLORS['dim']}{format_rgb(color.rgb)}  {format_hsl(color.hsl)}{c.RESET}"
        )
        if scores is not None:
            line += f"  {c.MSG_BOLD_COLORS['info']}{scores[i]}{c.RESET}"
        print(line)
