"""Pytest fixtures for md-compose tests."""

import pytest
from pathlib import Path

from mdcompose.config import reset_settings
from mdcompose.core.engine import FormatEngine


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from cached settings and a local .env file."""
    for name in (
        "MDCOMPOSE_LINK_TEXT",
        "MDCOMPOSE_ALT_TEXT",
        "MDCOMPOSE_TABLE_COLUMNS",
        "MDCOMPOSE_TABLE_ROWS",
        "MDCOMPOSE_INPUT_PROVIDER",
        "MDCOMPOSE_ENCODING",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_document() -> str:
    """Sample Markdown document for formatting tests."""
    return (
        "# Notes\n"
        "\n"
        "Some plain text here.\n"
        "apples\n"
        "pears\n"
        "plums"
    )


@pytest.fixture
def engine() -> FormatEngine:
    """Create an engine with default settings."""
    return FormatEngine()


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_document: str) -> Path:
    """Create a temporary Markdown file for testing."""
    file_path = tmp_path / "notes.md"
    file_path.write_text(sample_document, encoding="utf-8")
    return file_path
