"""Document edits that splice in externally produced text.

Generated text (a rewritten paragraph, a media tag, a search answer) is
merged into the document with one of these shapes. They follow the same
contract as the format engine: the input is never modified and the result
carries the selection the host should restore.
"""

from mdcompose.formatting.ir import Range, TransformResult
from mdcompose.formatting.strategies import insert_block


def replace_selection(document: str, start: int, end: int, replacement: str) -> TransformResult:
    """Replace the selected text, leaving the caret after the replacement."""
    selection = Range(start, end).clamp(len(document))
    return insert_block(document, selection, replacement)


def append_block(document: str, block: str) -> TransformResult:
    """Add block on a new line at the end of the document."""
    new_document = document + "\n" + block
    return TransformResult(
        document=new_document,
        selection=Range.caret(len(new_document)),
    )


def append_section(document: str, section: str) -> TransformResult:
    """Add section after a blank line, trimming the document first."""
    new_document = document.strip() + "\n\n" + section
    return TransformResult(
        document=new_document,
        selection=Range.caret(len(new_document)),
    )
