#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tile copies of a single-page PDF onto one printable sheet.
"""

import check_tiler.cli


if __name__ == "__main__":
	check_tiler.cli.main()
