#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/core/config.py

import re

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# sRGB Transfer Function Constants (Source: WCAG 2.1 relative luminance definition)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
WCAG_SRGB_TO_LINEAR_TH = 0.03928   # WCAG threshold (IEC 61966-2-1 uses 0.04045)

WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255                      # 8-bit color depth limit
HUE_MAX = 360                      # Full circle degrees
PERCENT_MAX = 100                  # Upper bound for saturation / lightness
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL

# ==========================================
# WCAG Contrast Thresholds
# ==========================================

# Source: https://www.w3.org/TR/WCAG21/#contrast-minimum (1.4.3, 1.4.6, 1.4.11)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AA_UI = 3.0                   # Non-text UI components and graphical objects

WCAG_THRESHOLDS = {
    "normal": {"AA": WCAG_AA_NORMAL, "AAA": WCAG_AAA_NORMAL},
    "large": {"AA": WCAG_AA_LARGE, "AAA": WCAG_AAA_LARGE},
    "ui": {"AA": WCAG_AA_UI},
}

# Pass-rate sorting is an absolute metric: always normal-text AA
PASS_RATE_THRESHOLD = WCAG_THRESHOLDS["normal"]["AA"]

# ==========================================
# Input Formats
# ==========================================

PATTERNS = {
    # #RRGGBB or RRGGBB
    "hex": re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE),
    # #RGB or RGB
    "hex-short": re.compile(r"^#?([a-f\d])([a-f\d])([a-f\d])$", re.IGNORECASE),
    # rgb(R, G, B) or rgb(R G B)
    "rgb": re.compile(
        r"^rgb\s*\(\s*(\d{1,3})\s*[,\s]\s*(\d{1,3})\s*[,\s]\s*(\d{1,3})\s*\)$",
        re.IGNORECASE,
    ),
    # hsl(H, S%, L%) or hsl(H S% L%); hue may be negative or > 360
    "hsl": re.compile(
        r"^hsl\s*\(\s*(-?\d+(?:\.\d+)?)\s*[,\s]\s*(\d{1,3}(?:\.\d+)?)%?"
        r"\s*[,\s]\s*(\d{1,3}(?:\.\d+)?)%?\s*\)$",
        re.IGNORECASE,
    ),
}

# Detection order, first match wins
FORMAT_PRIORITY = ["hex", "hex-short", "rgb", "hsl"]

INVALID_FORMAT = "invalid"

# ==========================================
# Vocabularies
# ==========================================

TEXT_SIZES = ["normal", "large"]
DEFAULT_TEXT_SIZE = "normal"

WCAG_LEVELS = ["AAA", "AA", "AA18", "DNP"]

SORT_CRITERIA = ["luminance", "contrast", "pass-rate", "hue", "alphabetical", "manual"]
SORT_DIRECTIONS = ["ascending", "descending"]
DEFAULT_SORT_DIRECTION = "ascending"

# Grid filter ids and the level each one shows
GRID_FILTER_LEVELS = {
    "aaa": "AAA",
    "aa": "AA",
    "aa-large": "AA18",
    "failed": "DNP",
}
DEFAULT_GRID_FILTERS = frozenset(["aaa", "aa", "aa-large"])

WCAG_LEVEL_DESCRIPTIONS = {
    "AAA": "Enhanced contrast (AAA)",
    "AA": "Minimum contrast (AA)",
    "AA18": "Large text only (AA)",
    "DNP": "Does not pass",
}

WCAG_BADGE_LABELS = {
    "AAA": "AAA",
    "AA": "AA",
    "AA18": "AA 18+",
    "DNP": "Fail",
}

WCAG_BADGE_TITLES = {
    "AAA": "Passes AAA (7:1 for normal text, 4.5:1 for large text)",
    "AA": "Passes AA (4.5:1 for normal text)",
    "AA18": "Passes AA for large text only (18pt+ or 14pt+ bold). Requires 3:1 ratio.",
    "DNP": "Does not pass WCAG contrast requirements",
}

# ==========================================
# CLI UI & Limits
# ==========================================

MAX_COLORS = 64                    # Palette size accepted by the CLI
LABEL_SEPARATOR = "="              # COLOR=LABEL on the command line
CELL_WIDTH = 14                    # Visible width of one matrix cell

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

# Badge styling per level (24-bit background, white text)
LEVEL_BADGE_RGB = {
    "AAA": (20, 83, 45),
    "AA": (21, 128, 61),
    "AA18": (113, 63, 18),
    "DNP": (153, 27, 27),
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
