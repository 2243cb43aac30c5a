"""Tests for auxiliary input providers."""

import pytest
from unittest.mock import patch

from mdcompose.formatting.ir import AuxiliaryField
from mdcompose.inputs import (
    ConsoleInput,
    DecliningInput,
    ScriptedInput,
    get_provider,
)


class TestScriptedInput:
    """Tests for the ScriptedInput provider."""

    def test_returns_answer(self):
        """Test answering a scripted field."""
        inputs = ScriptedInput({AuxiliaryField.LINK_URL: "https://x.io"})

        assert inputs.ask(AuxiliaryField.LINK_URL) == "https://x.io"

    def test_accepts_field_names(self):
        """Test that string keys are converted to fields."""
        inputs = ScriptedInput({"table_rows": "4"})

        assert inputs.ask(AuxiliaryField.TABLE_ROWS) == "4"

    def test_unanswered_field_returns_default(self):
        """Test the default is used for fields without an answer."""
        inputs = ScriptedInput()

        assert inputs.ask(AuxiliaryField.IMAGE_ALT, default="alt text") == "alt text"
        assert inputs.ask(AuxiliaryField.IMAGE_URL) is None

    def test_explicit_none_stays_cancelled(self):
        """Test that a None answer is not replaced by the default."""
        inputs = ScriptedInput({AuxiliaryField.TABLE_COLUMNS: None})

        assert inputs.ask(AuxiliaryField.TABLE_COLUMNS, default="2") is None

    def test_records_order(self):
        """Test that asked fields are recorded in order."""
        inputs = ScriptedInput()
        inputs.ask(AuxiliaryField.TABLE_COLUMNS)
        inputs.ask(AuxiliaryField.TABLE_ROWS)

        assert inputs.asked == [AuxiliaryField.TABLE_COLUMNS, AuxiliaryField.TABLE_ROWS]

    def test_unknown_field_name(self):
        """Test that unknown field names are rejected up front."""
        with pytest.raises(ValueError):
            ScriptedInput({"colour": "red"})


class TestDecliningInput:
    """Tests for the DecliningInput provider."""

    def test_declines_everything(self):
        """Test every field is cancelled, defaults included."""
        inputs = DecliningInput()

        for field in AuxiliaryField:
            assert inputs.ask(field, default="x") is None


class TestConsoleInput:
    """Tests for the rich-backed ConsoleInput provider."""

    @patch("mdcompose.inputs.console.Prompt.ask")
    def test_returns_typed_answer(self, mock_ask):
        """Test passing the prompt text and returning the answer."""
        mock_ask.return_value = "https://x.io"
        inputs = ConsoleInput()

        assert inputs.ask(AuxiliaryField.LINK_URL) == "https://x.io"
        assert mock_ask.call_args[0][0] == "Enter the URL:"

    @patch("mdcompose.inputs.console.Prompt.ask")
    def test_blank_answer_cancels(self, mock_ask):
        """Test that an empty answer means cancelled."""
        mock_ask.return_value = ""

        assert ConsoleInput().ask(AuxiliaryField.IMAGE_URL) is None

    @patch("mdcompose.inputs.console.Prompt.ask")
    def test_default_is_offered(self, mock_ask):
        """Test that the default is passed through to the prompt."""
        mock_ask.return_value = "2"

        assert ConsoleInput().ask(AuxiliaryField.TABLE_ROWS, default="2") == "2"
        assert mock_ask.call_args[1]["default"] == "2"

    @patch("mdcompose.inputs.console.Prompt.ask")
    def test_end_of_input_cancels(self, mock_ask):
        """Test that EOF on the terminal cancels the prompt."""
        mock_ask.side_effect = EOFError

        assert ConsoleInput().ask(AuxiliaryField.LINK_URL) is None


class TestGetProvider:
    """Tests for the provider registry."""

    def test_known_providers(self):
        """Test looking up registered providers."""
        assert get_provider("none") is DecliningInput
        assert get_provider("CONSOLE") is ConsoleInput

    def test_unknown_provider(self):
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError, match="Unsupported input provider"):
            get_provider("dialog")
