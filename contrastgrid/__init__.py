#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/__init__.py

__version__ = "0.1.0"

from .core.types import (
    RGB,
    HSL,
    Color,
    ContrastResult,
    ColorFormat,
    WCAGLevel,
    TextSize,
    SortCriteria,
    SortDirection,
    GridFilterLevel,
)
from .core.config import WCAG_THRESHOLDS
from .core.parser import (
    detect_color_format,
    parse_hex,
    parse_rgb_string,
    parse_hsl_string,
    parse_color_to_rgb,
    hsl_to_rgb,
    is_valid_color,
)
from .core.conversions import (
    rgb_to_hex,
    rgb_to_hsl,
    hex_to_rgb,
    hex_to_hsl,
    hsl_to_hex,
    create_color,
    color_from_rgb,
    format_rgb,
    format_hsl,
)
from .core.contrast import (
    get_relative_luminance,
    get_contrast_ratio,
    format_contrast_ratio,
    get_wcag_level,
    meets_wcag_level,
    get_contrast_result,
    get_color_contrast_result,
    generate_contrast_matrix,
    get_wcag_level_description,
    summarize_contrast_matrix,
    describe_contrast_matrix,
    filter_contrast_matrix,
)
from .core.sorting import (
    sort_by_luminance,
    sort_by_contrast_score,
    sort_by_pass_rate,
    sort_by_hue,
    sort_alphabetically,
    sort_colors,
    get_sort_criteria_label,
)
