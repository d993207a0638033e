#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/main.py

import argparse
import sys

from contrastgrid import __version__
from contrastgrid.subcommands.command_registry import SUBCOMMANDS
from contrastgrid.shared.logger import log, ContrastGridArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the top-level command."""
    parser = ContrastGridArgumentParser(
        prog="contrastgrid",
        description=(
            "contrastgrid: WCAG 2.1 contrast checks for brand color palettes\n\n"
            "commands:\n"
            "  check     evaluate one foreground/background pair\n"
            "  matrix    contrast grid for a whole palette\n"
            "  sort      reorder a palette"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"contrastgrid {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_main_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command: '{args.command}'")
    else:
        log("error", "a command is required: " + ", ".join(SUBCOMMANDS))
    log("info", "use 'contrastgrid --help' for more information")
    sys.exit(2)


def main(argv=None) -> None:
    """Main entry point for contrastgrid CLI"""
    argv = sys.argv[1:] if argv is None else list(argv)

    # Subcommand Routing
    if argv:
        cmd = argv[0].lower()
        if cmd in SUBCOMMANDS:
            SUBCOMMANDS[cmd].main(argv[1:])
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args(argv)
    handle_main_command(args, parser)


if __name__ == "__main__":
    main()
