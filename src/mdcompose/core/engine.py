"""Selection-aware Markdown formatting engine."""

from dataclasses import replace
from typing import Callable, Optional, Union

from mdcompose.config import get_settings
from mdcompose.formatting.ir import (
    AuxiliaryField,
    FormatAction,
    Range,
    Strategy,
    TransformResult,
)
from mdcompose.formatting import strategies
from mdcompose.inputs.base import AuxiliaryInput
from mdcompose.inputs.scripted import DecliningInput
from mdcompose.offsets import range_from_utf16, range_to_utf16, utf16_length


class FormatEngine:
    """Applies format actions to a document snapshot.

    The engine is stateless between calls: the host passes the whole
    document and its current selection, and gets back the new document and
    the selection to restore. Actions that need extra values (link, image,
    table) ask an AuxiliaryInput for them; a declined or invalid answer
    yields a NOOP result instead of an error.
    """

    def __init__(
        self,
        link_text: Optional[str] = None,
        alt_text: Optional[str] = None,
        table_columns: Optional[str] = None,
        table_rows: Optional[str] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            link_text: Placeholder link text used when nothing is selected
            alt_text: Default alt text offered for images
            table_columns: Default column count offered for tables
            table_rows: Default row count offered for tables
        """
        settings = get_settings()
        self.link_text = link_text or settings.link_text
        self.alt_text = alt_text or settings.alt_text
        self.table_columns = table_columns or settings.table_columns
        self.table_rows = table_rows or settings.table_rows

        self._inserters: dict[
            FormatAction, Callable[[str, AuxiliaryInput], Optional[str]]
        ] = {
            FormatAction.LINK: self._link,
            FormatAction.IMAGE: self._image,
            FormatAction.TABLE: self._table,
        }

    def apply(
        self,
        action: Union[FormatAction, str],
        document: str,
        start: int,
        end: int,
        inputs: Optional[AuxiliaryInput] = None,
        utf16: bool = False,
    ) -> TransformResult:
        """Apply a format action to the given selection.

        Offsets are string indices (code points) unless utf16 is set, in
        which case start and end are UTF-16 code units, as reported by
        browser text areas, and the returned selection uses the same units.

        Args:
            action: The action to apply (a name is parsed first)
            document: Full document text
            start: Selection start offset
            end: Selection end offset (equal to start for a caret)
            inputs: Provider for auxiliary values; declines everything
                when omitted
            utf16: Whether offsets in and out are UTF-16 code units

        Returns:
            TransformResult with the new document and selection

        Raises:
            UnknownActionError: If action is a name outside the supported set
        """
        if not isinstance(action, FormatAction):
            action = FormatAction.parse(action)
        inputs = inputs or DecliningInput()

        if not utf16:
            selection = Range(start, end).clamp(len(document))
            return self._dispatch(action, document, selection, inputs)

        bounded = Range(start, end).clamp(utf16_length(document))
        selection = range_from_utf16(document, bounded.start, bounded.end)
        result = self._dispatch(action, document, selection, inputs)
        return replace(result, selection=range_to_utf16(result.document, result.selection))

    def apply_range(
        self,
        action: Union[FormatAction, str],
        document: str,
        selection: Range,
        inputs: Optional[AuxiliaryInput] = None,
        utf16: bool = False,
    ) -> TransformResult:
        """Apply a format action to a Range instead of separate offsets."""
        return self.apply(
            action, document, selection.start, selection.end, inputs, utf16=utf16
        )

    def _dispatch(
        self,
        action: FormatAction,
        document: str,
        selection: Range,
        inputs: AuxiliaryInput,
    ) -> TransformResult:
        strategy = action.strategy
        if strategy is Strategy.WRAP:
            return strategies.wrap(document, selection, action.token)
        if strategy is Strategy.LINE_PREFIX:
            return strategies.prefix_line(document, selection, action.token)
        if strategy is Strategy.LINE_TOGGLE:
            if action is FormatAction.OL:
                return strategies.toggle_numbering(document, selection)
            return strategies.toggle_line_prefix(document, selection, action.token)

        block = self._inserters[action](selection.slice(document), inputs)
        return strategies.insert_block(document, selection, block)

    def _link(self, selected: str, inputs: AuxiliaryInput) -> Optional[str]:
        url = inputs.ask(AuxiliaryField.LINK_URL)
        return strategies.build_link(selected, url, placeholder=self.link_text)

    def _image(self, selected: str, inputs: AuxiliaryInput) -> Optional[str]:
        # All three prompts are shown even when the URL is declined
        url = inputs.ask(AuxiliaryField.IMAGE_URL)
        alt = inputs.ask(AuxiliaryField.IMAGE_ALT, default=self.alt_text)
        width = inputs.ask(AuxiliaryField.IMAGE_WIDTH)
        return strategies.build_image(url, alt, width, default_alt=self.alt_text)

    def _table(self, selected: str, inputs: AuxiliaryInput) -> Optional[str]:
        columns = strategies.parse_count(
            inputs.ask(AuxiliaryField.TABLE_COLUMNS, default=self.table_columns),
            default=self.table_columns,
        )
        rows = strategies.parse_count(
            inputs.ask(AuxiliaryField.TABLE_ROWS, default=self.table_rows),
            default=self.table_rows,
        )
        return strategies.build_table(columns, rows)


def apply_format(
    action: Union[FormatAction, str],
    document: str,
    start: int,
    end: int,
    inputs: Optional[AuxiliaryInput] = None,
    utf16: bool = False,
) -> TransformResult:
    """Apply a format action with an engine built from the current settings."""
    return FormatEngine().apply(action, document, start, end, inputs, utf16=utf16)
