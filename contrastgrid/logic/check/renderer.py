#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/logic/check/renderer.py

from contrastgrid.core import config as c
from contrastgrid.core.contrast import get_wcag_level_description
from contrastgrid.core.types import Color, ContrastResult
from contrastgrid.shared.formatting import format_level_badge, format_pass_fail, get_badge_title
from contrastgrid.shared.preview import print_color_block, text_sample


def _info(title: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{title:<18}{c.RESET}{c.BOLD_WHITE}:{c.RESET} "


def render_check_info(foreground: Color, background: Color, result: ContrastResult, text_size: str) -> None:
    """Strictly prints the pair evaluation. Data must be pre-calculated by the engine."""
    print()
    print_color_block(foreground, f"{c.BOLD_WHITE}{foreground.label or 'foreground'}{c.RESET}")
    print_color_block(background, f"{c.BOLD_WHITE}{background.label or 'background'}{c.RESET}")

    print()
    print(f"{_info('sample')}  {text_sample(foreground, background, ' The quick brown fox ')}")
    print(f"{_info('ratio')}  {c.BOLD_WHITE}{result.ratio_string}{c.RESET}")
    print(f"{_info('level')}  {format_level_badge(result.level)} {get_wcag_level_description(result.level)}")
    print(f"{_info('text size')}  {text_size}")
    print(f"{_info('AA')}  {format_pass_fail(result.meets_aa)}")
    print(f"{_info('AAA')}  {format_pass_fail(result.meets_aaa)}")
    print(f"\n{c.MSG_BOLD_COLORS['dim']}{get_badge_title(result.level)}{c.RESET}")
