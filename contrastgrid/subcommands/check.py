#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/subcommands/check.py

import argparse
import sys
from contrastgrid.core import config as c
from contrastgrid.shared.logger import ContrastGridArgumentParser
from contrastgrid.shared.sanitizer import INPUT_HANDLERS
from contrastgrid.shared.truecolor import ensure_truecolor
from contrastgrid.logic.check import engine


def get_check_parser() -> argparse.ArgumentParser:
    """Create argument parser for check command."""
    parser = ContrastGridArgumentParser(
        prog="contrastgrid check",
        description="contrastgrid check: evaluate one foreground/background pair against WCAG 2.1",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-fg",
        "--foreground",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="text color: hex, rgb() or hsl(), optionally COLOR=LABEL"
    )
    parser.add_argument(
        "-bg",
        "--background",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="background color: hex, rgb() or hsl(), optionally COLOR=LABEL"
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
        "--json",
        action="store_true",
        help="print the result as JSON"
    )
    return parser


def main(argv=None) -> None:
    """Main entry point for check command."""
    parser = get_check_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    ensure_truecolor()
    engine.run(args, parser)


if __name__ == "__main__":
    main()
