"""Formatting values and the edit strategies that produce them."""

from mdcompose.formatting.ir import (
    AuxiliaryField,
    FormatAction,
    Outcome,
    Range,
    Strategy,
    TransformResult,
    UnknownActionError,
)
from mdcompose.formatting.strategies import (
    build_image,
    build_link,
    build_table,
    insert_block,
    parse_count,
    prefix_line,
    toggle_line_prefix,
    toggle_numbering,
    wrap,
)

__all__ = [
    "AuxiliaryField",
    "FormatAction",
    "Outcome",
    "Range",
    "Strategy",
    "TransformResult",
    "UnknownActionError",
    "build_image",
    "build_link",
    "build_table",
    "insert_block",
    "parse_count",
    "prefix_line",
    "toggle_line_prefix",
    "toggle_numbering",
    "wrap",
]
