"""
Configuration for Mutqin library.

Settings are read from environment variables prefixed with ``MUTQIN_``
(and an optional ``.env`` file), e.g. ``MUTQIN_DATA_PATH=/data/ayahs.json``.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mutqin.exceptions import ConfigurationError


class MutqinSettings(BaseSettings):
    """
    Runtime settings for Mutqin.

    Attributes:
        data_path: Path to the verse dataset JSON file
        validate_data: Whether to check dataset invariants on load
        log_level: Logging level name for the mutqin logger
        weak_accuracy_threshold: Accuracy below which a page counts as weak
        recent_attempts: Number of recent attempts kept in progress summaries
    """

    model_config = SettingsConfigDict(
        env_prefix="MUTQIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_path: Path = Field(
        default=Path("ayah_full_13line.json"),
        description="Path to the verse dataset JSON file",
    )
    validate_data: bool = Field(
        default=True,
        description="Check dataset invariants when loading",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name (DEBUG, INFO, WARNING, ERROR)",
    )
    weak_accuracy_threshold: float = Field(
        default=0.7,
        description="Accuracy (0.0-1.0) below which a page counts as weak",
        ge=0.0,
        le=1.0,
    )
    recent_attempts: int = Field(
        default=5,
        description="Number of recent attempts shown in progress summaries",
        ge=0,
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


_settings: Optional[MutqinSettings] = None


def get_settings() -> MutqinSettings:
    """
    Get the active settings, creating them from the environment on first use.

    Returns:
        The shared MutqinSettings instance
    """
    global _settings
    if _settings is None:
        try:
            _settings = MutqinSettings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Mutqin settings: {e}")
    return _settings


def configure(**overrides: Any) -> MutqinSettings:
    """
    Replace the active settings with the given overrides.

    Args:
        **overrides: Setting values, e.g. ``data_path="quran.json"``

    Returns:
        The new MutqinSettings instance

    Raises:
        ConfigurationError: If an override is unknown or invalid
    """
    global _settings
    for name in overrides:
        if name not in MutqinSettings.model_fields:
            raise ConfigurationError("Unknown setting", setting_name=name)

    try:
        _settings = MutqinSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        setting = str(first["loc"][0]) if first.get("loc") else None
        raise ConfigurationError(first["msg"], setting_name=setting)
    return _settings


def reset_settings() -> None:
    """Forget the active settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
