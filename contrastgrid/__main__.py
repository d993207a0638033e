#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastgrid/__main__.py

from contrastgrid.main import main

if __name__ == "__main__":
    main()
