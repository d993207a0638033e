#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/core/types.py

import dataclasses
from typing import Literal, NamedTuple, Optional


ColorFormat = Literal["hex", "hex-short", "rgb", "hsl", "invalid"]
WCAGLevel = Literal["AAA", "AA", "AA18", "DNP"]
TextSize = Literal["normal", "large"]
SortCriteria = Literal["luminance", "contrast", "pass-rate", "hue", "alphabetical", "manual"]
SortDirection = Literal["ascending", "descending"]
GridFilterLevel = Literal["aaa", "aa", "aa-large", "failed"]


class RGB(NamedTuple):
    """8-bit sRGB channels, each in 0..255."""
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""
    h: float
    s: float
    l: float


@dataclasses.dataclass(frozen=True)
class Color:
    """
    A palette entry. `hex` is the canonical key; `rgb` and `hsl` are always
    derived from the same source value, so build instances with
    `create_color` or `color_from_rgb` rather than by hand.

    Two colors compare equal when their hex values match, whatever their labels.
    """
    hex: str
    rgb: RGB = dataclasses.field(compare=False)
    hsl: HSL = dataclasses.field(compare=False)
    label: Optional[str] = dataclasses.field(default=None, compare=False)

    def with_label(self, label: Optional[str]) -> "Color":
        return dataclasses.replace(self, label=label)

    @property
    def display_name(self) -> str:
        return self.label or self.hex


@dataclasses.dataclass(frozen=True)
class ContrastResult:
    ratio: float
    ratio_string: str
    level: WCAGLevel
    meets_aa: bool
    meets_aaa: bool
