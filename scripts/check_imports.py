#!/usr/bin/env python3
from __future__ import annotations

"""
Repository entry point for the import style checker.

This file's location also marks the repository root: the checker searches
upwards from the working directory for 'scripts/check_imports.py'.
"""

import os
import sys

_SRC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

from importstyle.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
