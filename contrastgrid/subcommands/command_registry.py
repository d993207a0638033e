#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/subcommands/command_registry.py

from . import (
    check,
    matrix,
    sort
)

SUBCOMMANDS = {
    'check': check,
    'matrix': matrix,
    'sort': sort
}
