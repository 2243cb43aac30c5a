"""Tests for UTF-16 offset conversion."""

import pytest

from mdcompose.formatting.ir import Range
from mdcompose.offsets import (
    OffsetError,
    index_to_utf16,
    range_from_utf16,
    range_to_utf16,
    utf16_length,
    utf16_to_index,
)

EMOJI_TEXT = "a\U0001F600b"  # a, grinning face (two code units), b


class TestUtf16Conversion:
    """Tests for converting between code units and indices."""

    def test_ascii_offsets_match(self):
        """Test that ASCII text maps one to one."""
        for offset in range(4):
            assert utf16_to_index("abc", offset) == offset
            assert index_to_utf16("abc", offset) == offset

    def test_length(self):
        """Test astral characters count twice."""
        assert utf16_length(EMOJI_TEXT) == 4
        assert utf16_length("") == 0

    @pytest.mark.parametrize("offset,index", [(0, 0), (1, 1), (3, 2), (4, 3)])
    def test_offsets_around_emoji(self, offset, index):
        """Test offsets before and after a surrogate pair."""
        assert utf16_to_index(EMOJI_TEXT, offset) == index

    def test_offset_inside_surrogate_pair(self):
        """Test an offset between surrogates maps to that character."""
        assert utf16_to_index(EMOJI_TEXT, 2) == 1

    def test_index_to_utf16(self):
        """Test converting indices after an emoji."""
        assert index_to_utf16(EMOJI_TEXT, 2) == 3
        assert index_to_utf16(EMOJI_TEXT, 3) == 4

    def test_out_of_range(self):
        """Test that offsets outside the text are rejected."""
        with pytest.raises(OffsetError):
            utf16_to_index(EMOJI_TEXT, 5)
        with pytest.raises(OffsetError):
            utf16_to_index(EMOJI_TEXT, -1)
        with pytest.raises(OffsetError):
            index_to_utf16(EMOJI_TEXT, 4)

    def test_ranges(self):
        """Test whole range conversion both ways."""
        selection = range_from_utf16(EMOJI_TEXT, 1, 4)

        assert selection == Range(1, 3)
        assert range_to_utf16(EMOJI_TEXT, selection) == Range(1, 4)
