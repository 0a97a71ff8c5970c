#!/usr/bin/python3

"""
Entry point script for hexcore.
"""

import sys

from src.hexcore.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
