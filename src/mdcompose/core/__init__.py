"""Core formatting engine for md-compose."""

from mdcompose.core.engine import FormatEngine, apply_format
from mdcompose.core.edits import append_block, append_section, replace_selection

__all__ = [
    "FormatEngine",
    "apply_format",
    "append_block",
    "append_section",
    "replace_selection",
]
