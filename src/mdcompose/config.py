"""Configuration management for md-compose."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Defaults offered by the block-insert actions
    link_text: str = Field(
        default="link text",
        alias="MDCOMPOSE_LINK_TEXT",
    )
    alt_text: str = Field(
        default="alt text",
        alias="MDCOMPOSE_ALT_TEXT",
    )
    table_columns: str = Field(
        default="2",
        alias="MDCOMPOSE_TABLE_COLUMNS",
    )
    table_rows: str = Field(
        default="2",
        alias="MDCOMPOSE_TABLE_ROWS",
    )

    # Host settings (CLI)
    input_provider: str = Field(
        default="none",
        alias="MDCOMPOSE_INPUT_PROVIDER",
    )
    encoding: str = Field(
        default="utf-8",
        alias="MDCOMPOSE_ENCODING",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads them."""
    global _settings
    _settings = None
