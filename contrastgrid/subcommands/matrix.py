#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/subcommands/matrix.py

import argparse
import sys
from contrastgrid.core import config as c
from contrastgrid.shared.logger import ContrastGridArgumentParser
from contrastgrid.shared.sanitizer import INPUT_HANDLERS
from contrastgrid.shared.truecolor import ensure_truecolor
from contrastgrid.logic.matrix import engine


def get_matrix_parser() -> argparse.ArgumentParser:
    """Create argument parser for matrix command."""
    parser = ContrastGridArgumentParser(
        prog="contrastgrid matrix",
        description="contrastgrid matrix: contrast of every palette color against every other",
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
        "-t",
        "--text-size",
        default=c.DEFAULT_TEXT_SIZE,
        type=INPUT_HANDLERS["text_size"],
        choices=c.TEXT_SIZES,
        help="text size thresholds to apply (default: normal)"
    )
    parser.add_argument(
        "-f",
        "--filters",
        type=INPUT_HANDLERS["grid_filters"],
        default=None,
        help="comma separated levels to show: aaa,aa,aa-large,failed\n(default: aaa,aa,aa-large)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the matrix as JSON"
    )
    return parser


def main(argv=None) -> None:
    """Main entry point for matrix command."""
    parser = get_matrix_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    ensure_truecolor()
    engine.run(args, parser)


if __name__ == "__main__":
    main()
