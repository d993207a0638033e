#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/subcommands/sort.py

import argparse
import sys
from contrastgrid.core import config as c
from contrastgrid.shared.logger import ContrastGridArgumentParser
from contrastgrid.shared.sanitizer import INPUT_HANDLERS
from contrastgrid.shared.truecolor import ensure_truecolor
from contrastgrid.logic.sort import engine


def get_sort_parser() -> argparse.ArgumentParser:
    """Create argument parser for sort command."""
    parser = ContrastGridArgumentParser(
        prog="contrastgrid sort",
        description="contrastgrid sort: reorder a palette by luminance, contrast, pass rate, hue or label",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--color",
        action="append",
        type=INPUT_HANDLERS["color"],
        help=f"use -c COLOR[=LABEL] multiple times (max: {c.MAX_COLORS})"
    )
    parser.add_argument(
        "-b",
        "--by",
        default="manual",
        type=INPUT_HANDLERS["sort_criteria"],
        choices=c.SORT_CRITERIA,
        help="sort criteria (default: manual, keeps input order)"
    )
    parser.add_argument(
        "-d",
        "--direction",
        default=c.DEFAULT_SORT_DIRECTION,
        type=INPUT_HANDLERS["sort_direction"],
        choices=c.SORT_DIRECTIONS,
        help="sort direction (default: ascending)"
    )
    parser.add_argument(
        "--scores",
        action="store_true",
        help="show the value each color was sorted on"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the sorted palette as JSON"
    )
    return parser


def main(argv=None) -> None:
    """Main entry point for sort command."""
    parser = get_sort_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    ensure_truecolor()
    engine.run(args, parser)


if __name__ == "__main__":
    main()
