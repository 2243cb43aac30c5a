"""Conversion between UTF-16 code unit offsets and string indices.

Browser text areas report caret positions in UTF-16 code units, while
Python strings are indexed by code point. Characters outside the Basic
Multilingual Plane (most emoji) take two code units but one index.
"""

from mdcompose.formatting.ir import Range


class OffsetError(ValueError):
    """Offset lies outside the text it refers to."""

    pass


def _units(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    """Get the length of text in UTF-16 code units."""
    return sum(_units(char) for char in text)


def utf16_to_index(text: str, offset: int) -> int:
    """Convert a UTF-16 offset to a string index.

    An offset that falls between the two halves of a surrogate pair maps to
    the character containing it.

    Raises:
        OffsetError: If offset is negative or past the end of text
    """
    if offset < 0:
        raise OffsetError(f"Negative offset: {offset}")

    units = 0
    for index, char in enumerate(text):
        if units >= offset:
            return index
        units += _units(char)
        if units > offset:
            return index

    if offset > units:
        raise OffsetError(f"Offset {offset} is past the end of the text ({units} units)")
    return len(text)


def index_to_utf16(text: str, index: int) -> int:
    """Convert a string index to a UTF-16 offset.

    Raises:
        OffsetError: If index is negative or past the end of text
    """
    if index < 0 or index > len(text):
        raise OffsetError(f"Index {index} is outside the text (length {len(text)})")
    return utf16_length(text[:index])


def range_from_utf16(text: str, start: int, end: int) -> Range:
    """Build a Range from a pair of UTF-16 offsets."""
    return Range(utf16_to_index(text, start), utf16_to_index(text, end))


def range_to_utf16(text: str, selection: Range) -> Range:
    """Express a Range in UTF-16 offsets."""
    return Range(index_to_utf16(text, selection.start), index_to_utf16(text, selection.end))
