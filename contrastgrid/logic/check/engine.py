#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/logic/check/engine.py

import argparse
import dataclasses
import json

from contrastgrid.core.contrast import get_color_contrast_result
from .renderer import render_check_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for a single foreground/background check"""
    result = get_color_contrast_result(args.foreground, args.background, args.text_size)

    if args.json:
        payload = {
            "foreground": args.foreground.hex,
            "background": args.background.hex,
            "text_size": args.text_size,
            **dataclasses.asdict(result),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    render_check_info(args.foreground, args.background, result, args.text_size)
