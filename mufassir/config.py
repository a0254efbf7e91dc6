"""
Configuration for Mufassir library.

Settings are read from keyword arguments or from environment variables
prefixed with ``MUFASSIR_``:

    export MUFASSIR_CORPUS_URL="https://example.org/data/tafsir-fr.txt"
    export MUFASSIR_MAX_INVALID_RATIO=0.25
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mufassir.exceptions import ConfigurationError


class MufassirSettings(BaseSettings):
    """
    Settings for corpus loading and the sanitizer heuristics.

    The sanitizer thresholds were tuned against one scanned French source;
    they are settings rather than constants so other sources can be tuned
    without code changes.
    """

    model_config = SettingsConfigDict(
        env_prefix="MUFASSIR_",
        extra="ignore",
    )

    # Corpus source
    corpus_url: Optional[str] = Field(
        default=None,
        description="URL of the commentary text document",
    )
    corpus_path: Optional[Path] = Field(
        default=None,
        description="Local path of the commentary text document (takes precedence over corpus_url)",
    )
    corpus_encoding: str = Field(
        default="utf-8",
        description="Encoding of the commentary document",
    )
    request_timeout: float = Field(
        default=60.0,
        description="HTTP read timeout in seconds",
        gt=0.0,
    )
    connect_timeout: float = Field(
        default=10.0,
        description="HTTP connect timeout in seconds",
        gt=0.0,
    )

    # Heuristics
    language: str = Field(
        default="fr",
        description="Language profile code of the commentary document",
    )
    max_invalid_ratio: float = Field(
        default=0.3,
        description="Maximum share of invalid tokens before a sentence is dropped",
        ge=0.0,
        le=1.0,
    )
    min_sentence_length: int = Field(
        default=20,
        description="Sentences shorter than this (characters) are dropped",
        ge=0,
    )
    min_paragraph_length: int = Field(
        default=50,
        description="Paragraphs shorter than this (characters) are dropped",
        ge=0,
    )
    chapter_end_min_distance: int = Field(
        default=500,
        description="Minimum distance past a chapter heading before the next heading is accepted",
        ge=0,
    )
    validate_verse_bounds: bool = Field(
        default=True,
        description="Reject verse keys outside the known surah/ayah ranges",
    )

    @field_validator("language")
    @classmethod
    def _normalize_language(cls, value: str) -> str:
        return value.strip().lower()


_settings: MufassirSettings | None = None


def get_settings() -> MufassirSettings:
    """
    Get the process-wide settings instance.

    Returns:
        MufassirSettings, created from the environment on first call
    """
    global _settings
    if _settings is None:
        _settings = MufassirSettings()
    return _settings


def configure(**overrides: Any) -> MufassirSettings:
    """
    Replace the process-wide settings.

    Args:
        **overrides: Setting values (unset values fall back to env/defaults)

    Returns:
        The new settings instance

    Raises:
        ConfigurationError: If a value is invalid
    """
    global _settings
    try:
        _settings = MufassirSettings(**overrides)
    except ValidationError as e:
        errors = e.errors()
        setting = str(errors[0]["loc"][0]) if errors and errors[0].get("loc") else None
        raise ConfigurationError(f"Invalid configuration: {e}", setting_name=setting) from e
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
