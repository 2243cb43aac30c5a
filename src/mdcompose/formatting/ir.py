"""Intermediate Representation for formatting requests and results.

This module defines the values that cross the boundary between the host
(the editor that owns the live buffer and caret) and the formatting engine.
Documents are plain strings; everything else is an immutable value so a
result can never be partially applied.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UnknownActionError(ValueError):
    """Requested format action is not one of the supported actions."""

    pass


# =============================================================================
# Format Actions
# =============================================================================

class Strategy(str, Enum):
    """The four edit strategies shared by every format action.

    WRAP: surround the selection with the same token on both sides
    LINE_PREFIX: toggle a prefix on the single line holding the caret
    LINE_TOGGLE: toggle a prefix (or numbering) on every selected line
    BLOCK_INSERT: replace the selection with a generated block
    """

    WRAP = "wrap"
    LINE_PREFIX = "line_prefix"
    LINE_TOGGLE = "line_toggle"
    BLOCK_INSERT = "block_insert"


class FormatAction(str, Enum):
    """Closed set of formatting transforms the engine understands."""

    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    UL = "ul"
    OL = "ol"
    LINK = "link"
    IMAGE = "image"
    TABLE = "table"

    @property
    def label(self) -> str:
        """Toolbar label for this action."""
        return _LABELS[self]

    @property
    def strategy(self) -> Strategy:
        """Edit strategy this action delegates to."""
        return _STRATEGIES[self]

    @property
    def token(self) -> str:
        """Delimiter or line prefix used by this action (may be empty)."""
        return _TOKENS.get(self, "")

    @property
    def is_heading(self) -> bool:
        return self.strategy is Strategy.LINE_PREFIX

    @classmethod
    def parse(cls, name: str) -> "FormatAction":
        """Parse an action name, ignoring case and surrounding whitespace.

        Raises:
            UnknownActionError: If the name is not a supported action
        """
        key = (name or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            raise UnknownActionError(
                f"Unknown format action: {name!r}. "
                f"Supported actions: {', '.join(a.value for a in cls)}"
            ) from None


_TOKENS: dict[FormatAction, str] = {
    FormatAction.BOLD: "**",
    FormatAction.ITALIC: "*",
    FormatAction.STRIKETHROUGH: "~~",
    FormatAction.CODE: "`",
    FormatAction.H1: "# ",
    FormatAction.H2: "## ",
    FormatAction.H3: "### ",
    FormatAction.H4: "#### ",
    FormatAction.H5: "##### ",
    FormatAction.H6: "###### ",
    FormatAction.UL: "- ",
}

_STRATEGIES: dict[FormatAction, Strategy] = {
    FormatAction.BOLD: Strategy.WRAP,
    FormatAction.ITALIC: Strategy.WRAP,
    FormatAction.STRIKETHROUGH: Strategy.WRAP,
    FormatAction.CODE: Strategy.WRAP,
    FormatAction.H1: Strategy.LINE_PREFIX,
    FormatAction.H2: Strategy.LINE_PREFIX,
    FormatAction.H3: Strategy.LINE_PREFIX,
    FormatAction.H4: Strategy.LINE_PREFIX,
    FormatAction.H5: Strategy.LINE_PREFIX,
    FormatAction.H6: Strategy.LINE_PREFIX,
    FormatAction.UL: Strategy.LINE_TOGGLE,
    FormatAction.OL: Strategy.LINE_TOGGLE,
    FormatAction.LINK: Strategy.BLOCK_INSERT,
    FormatAction.IMAGE: Strategy.BLOCK_INSERT,
    FormatAction.TABLE: Strategy.BLOCK_INSERT,
}

_LABELS: dict[FormatAction, str] = {
    FormatAction.BOLD: "Bold",
    FormatAction.ITALIC: "Italic",
    FormatAction.STRIKETHROUGH: "Strikethrough",
    FormatAction.CODE: "Code",
    FormatAction.H1: "Heading 1",
    FormatAction.H2: "Heading 2",
    FormatAction.H3: "Heading 3",
    FormatAction.H4: "Heading 4",
    FormatAction.H5: "Heading 5",
    FormatAction.H6: "Heading 6",
    FormatAction.UL: "Bullet List",
    FormatAction.OL: "Number List",
    FormatAction.LINK: "Insert Link",
    FormatAction.IMAGE: "Insert Image",
    FormatAction.TABLE: "Insert Table",
}


# =============================================================================
# Auxiliary Input Fields
# =============================================================================

class AuxiliaryField(str, Enum):
    """Extra values the block-insert actions request from the host."""

    LINK_URL = "link_url"
    IMAGE_URL = "image_url"
    IMAGE_ALT = "image_alt"
    IMAGE_WIDTH = "image_width"
    TABLE_COLUMNS = "table_columns"
    TABLE_ROWS = "table_rows"

    @property
    def prompt(self) -> str:
        """Question shown to the user when asking for this value."""
        return _PROMPTS[self]


_PROMPTS: dict[AuxiliaryField, str] = {
    AuxiliaryField.LINK_URL: "Enter the URL:",
    AuxiliaryField.IMAGE_URL: "Enter image URL:",
    AuxiliaryField.IMAGE_ALT: "Enter alt text:",
    AuxiliaryField.IMAGE_WIDTH: "Enter optional width (e.g., 300px or 50%):",
    AuxiliaryField.TABLE_COLUMNS: "Enter number of columns:",
    AuxiliaryField.TABLE_ROWS: "Enter number of rows:",
}


# =============================================================================
# Ranges and Results
# =============================================================================

@dataclass(frozen=True)
class Range:
    """A caret (start == end) or selection within a document.

    Attributes:
        start: Zero-based offset of the first selected character
        end: Offset one past the last selected character
    """

    start: int
    end: int

    @property
    def is_caret(self) -> bool:
        """Check if this range is a collapsed caret."""
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def clamp(self, length: int) -> "Range":
        """Order the offsets and clip them into [0, length]."""
        low, high = sorted((self.start, self.end))
        low = max(0, min(low, length))
        high = max(0, min(high, length))
        return Range(low, high)

    def collapse_to_end(self) -> "Range":
        """Get a caret positioned at the end of this range."""
        return Range(self.end, self.end)

    def slice(self, document: str) -> str:
        """Get the text this range covers in a document."""
        return document[self.start : self.end]

    @classmethod
    def caret(cls, offset: int) -> "Range":
        return cls(offset, offset)


class Outcome(str, Enum):
    """Whether an action edited the document or degraded to a no-op."""

    APPLIED = "applied"
    NOOP = "noop"


@dataclass(frozen=True)
class TransformResult:
    """The engine's only output: a new document and the selection to restore.

    Attributes:
        document: The full document text after the edit
        selection: Range the host should select after re-rendering
        outcome: APPLIED, or NOOP when required auxiliary input was missing
    """

    document: str
    selection: Range
    outcome: Outcome = Outcome.APPLIED

    @property
    def applied(self) -> bool:
        """Check if the action edited the document."""
        return self.outcome is Outcome.APPLIED

    @property
    def selected_text(self) -> str:
        """Get the text covered by the new selection."""
        return self.selection.slice(self.document)

    def as_dict(self, selection: Optional[Range] = None) -> dict:
        """Convert to the host-facing mapping shape.

        Args:
            selection: Optional replacement range (e.g. already converted
                to the host's offset units)
        """
        sel = selection or self.selection
        return {
            "newDocument": self.document,
            "newSelection": {"start": sel.start, "end": sel.end},
            "outcome": self.outcome.value,
        }
