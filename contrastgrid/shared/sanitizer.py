#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/shared/sanitizer.py

import argparse
import re
from typing import List

from contrastgrid.core import config as c
from contrastgrid.core.conversions import create_color
from contrastgrid.core.types import Color


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _strip_quotes(value: str) -> str:
    s = str(value).strip()
    # Remove matching surrounding quotes or backticks
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()
    return s


def _extract_keyword(value: str) -> str:
    """Lowercase and keep only letters and dashes, e.g. ' Pass-Rate ' -> 'pass-rate'."""
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z\-]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color(v: str) -> Color:
    """
    Validator for palette entries: 'COLOR' or 'COLOR=LABEL', where COLOR
    is hex, rgb() or hsl() text.
    """
    s = _strip_quotes(v)
    value, sep, label = s.partition(c.LABEL_SEPARATOR)
    label = label.strip() if sep else None

    color = create_color(value, label or None)
    if color is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid color value: '{raw}'")
    return color


def handle_keyword(v: str) -> str:
    """Validator for keyword options; argparse 'choices' does the membership check."""
    cleaned = _extract_keyword(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_grid_filters(v: str) -> List[str]:
    """Validator for a comma separated list of grid filters (aaa, aa, aa-large, failed)."""
    filters = [_extract_keyword(part) for part in str(v).split(",")]
    filters = [f for f in filters if f]

    unknown = [f for f in filters if f not in c.GRID_FILTER_LEVELS]
    if unknown or not filters:
        raw = _sanitize_for_log(v)
        allowed = ", ".join(c.GRID_FILTER_LEVELS)
        raise argparse.ArgumentTypeError(f"invalid grid filter: '{raw}' (choose from {allowed})")
    return filters


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "color": handle_color,
    "text_size": handle_keyword,
    "sort_criteria": handle_keyword,
    "sort_direction": handle_keyword,
    "grid_filters": handle_grid_filters,
}
