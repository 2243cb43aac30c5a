"""Pure edit strategies shared by the format actions.

Every function takes the whole document and an in-bounds Range and returns
a TransformResult. Nothing here mutates its input or keeps state between
calls, so the same document snapshot can be formatted repeatedly.
"""

import re
from typing import Optional

from mdcompose.formatting.ir import Outcome, Range, TransformResult


# Ordered list marker at the start of a line, e.g. "12. "
NUMBERED_LINE_PATTERN = re.compile(r"^[0-9]+\.\s")

# Leading integer accepted for table dimensions ("3", " 4", "3px")
COUNT_PATTERN = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def _splice(document: str, selection: Range, text: str) -> str:
    """Replace the text covered by selection with text."""
    return document[: selection.start] + text + document[selection.end :]


# =============================================================================
# Inline Wrap
# =============================================================================

def wrap(document: str, selection: Range, token: str) -> TransformResult:
    """Surround the selection with token on both sides.

    The new selection covers exactly the original (possibly empty) inner
    text. Wrapping is not a toggle: applying it twice nests the tokens.
    """
    selected = selection.slice(document)
    new_start = selection.start + len(token)
    return TransformResult(
        document=_splice(document, selection, token + selected + token),
        selection=Range(new_start, new_start + len(selected)),
    )


# =============================================================================
# Line Prefix (headings)
# =============================================================================

def line_bounds(document: str, offset: int) -> tuple[int, int]:
    """Get (line_start, line_end) of the line containing offset."""
    line_start = document.rfind("\n", 0, offset) + 1
    line_end = document.find("\n", offset)
    if line_end == -1:
        line_end = len(document)
    return line_start, line_end


def prefix_line(document: str, selection: Range, prefix: str) -> TransformResult:
    """Toggle prefix on the line containing selection.start.

    The end of the selection does not widen the edit: only one line is
    touched. If the trimmed line already starts with prefix, its first
    occurrence is removed; otherwise prefix is prepended.
    """
    line_start, line_end = line_bounds(document, selection.start)
    line = document[line_start:line_end]
    line_range = Range(line_start, line_end)

    if line.strip().startswith(prefix):
        new_document = _splice(document, line_range, line.replace(prefix, "", 1))
        new_start = max(line_start, selection.start - len(prefix))
        new_end = max(new_start, selection.end - len(prefix))
    else:
        new_document = _splice(document, line_range, prefix + line)
        new_start = selection.start + len(prefix)
        new_end = selection.end + len(prefix)

    return TransformResult(
        document=new_document,
        selection=Range(new_start, new_end).clamp(len(new_document)),
    )


# =============================================================================
# Line Toggle (lists)
# =============================================================================

def _replace_block(document: str, selection: Range, block: str) -> TransformResult:
    """Swap the selected block and select the whole edited block."""
    return TransformResult(
        document=_splice(document, selection, block),
        selection=Range(selection.start, selection.start + len(block)),
    )


def toggle_line_prefix(
    document: str, selection: Range, prefix: str
) -> TransformResult:
    """Toggle prefix on every line of the selection.

    If every line (trimmed) already starts with prefix, it is removed from
    each line. Otherwise it is added to the lines missing it and the lines
    that already have it are left alone.
    """
    lines = selection.slice(document).split("\n")

    if all(line.strip().startswith(prefix) for line in lines):
        block = "\n".join(line.replace(prefix, "", 1) for line in lines)
    else:
        block = "\n".join(
            line if line.strip().startswith(prefix) else prefix + line
            for line in lines
        )

    return _replace_block(document, selection, block)


def toggle_numbering(document: str, selection: Range) -> TransformResult:
    """Toggle ordered-list numbering on every line of the selection.

    Lines that all carry a "N. " marker are stripped of it. Otherwise every
    line is numbered from 1, whatever numbering it had before.
    """
    lines = selection.slice(document).split("\n")

    if all(NUMBERED_LINE_PATTERN.match(line.strip()) for line in lines):
        block = "\n".join(NUMBERED_LINE_PATTERN.sub("", line, count=1) for line in lines)
    else:
        block = "\n".join(f"{index}. {line}" for index, line in enumerate(lines, 1))

    return _replace_block(document, selection, block)


# =============================================================================
# Block Insert (link, image, table)
# =============================================================================

def insert_block(
    document: str, selection: Range, block: Optional[str]
) -> TransformResult:
    """Replace the selection with block and collapse the caret after it.

    A missing block means the auxiliary input was declined or invalid: the
    selected text is put back unchanged and the outcome is NOOP.
    """
    outcome = Outcome.APPLIED
    if block is None:
        block = selection.slice(document)
        outcome = Outcome.NOOP

    caret = selection.start + len(block)
    return TransformResult(
        document=_splice(document, selection, block),
        selection=Range.caret(caret),
        outcome=outcome,
    )


def build_link(selected: str, url: Optional[str], placeholder: str = "link text") -> Optional[str]:
    """Build a Markdown link, or None without a URL."""
    if not url:
        return None
    return f"[{selected or placeholder}]({url})"


def build_image(
    url: Optional[str],
    alt: Optional[str] = None,
    width: Optional[str] = None,
    default_alt: str = "alt text",
) -> Optional[str]:
    """Build an image reference, or None without a URL.

    A width forces an HTML <img> tag since Markdown image syntax has no
    size attribute.
    """
    if not url:
        return None
    alt = alt or default_alt
    if width:
        return f'<img src="{url}" alt="{alt}" width="{width}">'
    return f"![{alt}]({url})"


def parse_count(value: Optional[str], default: str = "2") -> Optional[int]:
    """Parse a table dimension the way a lenient integer parse does.

    Missing or empty answers fall back to default. Leading digits are used
    and anything after them is ignored; no digits gives None.
    """
    match = COUNT_PATTERN.match(value or default)
    if match is None:
        return None
    return int(match.group(1))


def build_table(columns: Optional[int], rows: Optional[int]) -> Optional[str]:
    """Build a Markdown table skeleton, or None for invalid dimensions."""
    if columns is None or rows is None or columns <= 0 or rows <= 0:
        return None

    def row(cell: str) -> str:
        return "| " + " | ".join([cell] * columns) + " |"

    lines = [row("Header"), row("---")]
    lines.extend(row("Cell") for _ in range(rows))
    return "\n" + "\n".join(lines) + "\n"
