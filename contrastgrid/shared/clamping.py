#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/shared/clamping.py

import math


def round_half_up(v: float) -> int:
    """Round to the nearest integer, .5 towards +inf (built-in round() is banker's rounding)."""
    return int(math.floor(v + 0.5))


def _clamp255(v: float) -> int:
    if v != v:
        return 0
    return round_half_up(max(0.0, min(255.0, v)))
