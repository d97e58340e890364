"""Configuration management for minish."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS: frozenset[str] = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"},
)


class ShellSettings(BaseSettings):
    """Shell settings, read from ``MINISH_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="MINISH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default="$ ", description="Prompt written before each line")
    log_level: str = Field(default="WARNING", description="Log level")
    report_status: bool = Field(
        default=True,
        description="Report non-zero exit statuses of external commands",
    )
    history_file: Optional[Path] = Field(
        default=None,
        description="Readline history file; history is not persisted when unset",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def get_settings(**overrides: Any) -> ShellSettings:
    """Get shell settings.

    Args:
        **overrides: Values that take precedence over the environment
            (e.g. from command-line flags).  ``None`` values are ignored.

    Returns:
        ShellSettings instance
    """
    explicit = {key: value for key, value in overrides.items() if value is not None}
    return ShellSettings(**explicit)
