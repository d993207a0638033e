#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/shared/preview.py

from contrastgrid.core import config as c
from contrastgrid.core.types import Color
from .formatting import pad_visible


def color_swatch(color: Color, width: int = 4) -> str:
    r, g, b = color.rgb
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{c.RESET}"


def text_sample(foreground: Color, background: Color, text: str = " Aa ") -> str:
    """Render text in the foreground color on the background color."""
    fr, fg, fb = foreground.rgb
    br, bg, bb = background.rgb
    return f"\033[48;2;{br};{bg};{bb}m\033[38;2;{fr};{fg};{fb}m{text}{c.RESET}"


def print_color_block(color: Color, title: str = "color", end: str = "\n") -> None:
    padded = pad_visible(title, 18)
    print(
        f"{padded}{c.BOLD_WHITE}:{c.RESET}   {color_swatch(color, 16)}  "
        f"{c.BOLD_WHITE}{color.hex}{c.RESET}",
        end=end,
    )
