#!/usr/bin/env python3
"""
md-compose - Selection-aware Markdown formatting

Simple usage:
    python compose.py apply bold notes.md --start 4 --end 9
    python compose.py apply h2 notes.md -s 120 --in-place
    python compose.py apply table notes.md --columns 3 --rows 1 --json
    python compose.py actions
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from mdcompose.cli import app

if __name__ == "__main__":
    app()
