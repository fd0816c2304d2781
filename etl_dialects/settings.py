"""Environment-based settings for dialect resolution.

Settings are read from environment variables with the ``ETL_DIALECTS_``
prefix (or a ``.env`` file in the working directory).

Example:
    >>> # ETL_DIALECTS_PATTERN_IGNORE_CASE=false
    >>> # ETL_DIALECTS_LOG_LEVEL=DEBUG
    >>> settings = get_settings()
    >>> settings.pattern_ignore_case
    False
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["DialectSettings", "get_settings", "reset_settings"]


class DialectSettings(BaseSettings):
    """Settings that shape how dialect-based content is parsed."""

    pattern_ignore_case: bool = Field(
        default=True,
        description="Compile dialect name/version patterns case-insensitively",
    )
    skip_blank_text: bool = Field(
        default=True,
        description="Ignore whitespace-only text between elements",
    )
    include_encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Default encoding for <include> targets",
    )
    include_base_dir: Optional[str] = Field(
        default=None,
        description="Directory relative include hrefs resolve against",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format: 'json' or 'console'")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_prefix="ETL_DIALECTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level is a known value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate format is a known value."""
        valid_formats = ["json", "console"]
        if v.lower() not in valid_formats:
            raise ValueError(f"log_format must be one of: {valid_formats}")
        return v.lower()

    @property
    def pattern_flags(self) -> int:
        """Flags passed to ``re.compile`` for dialect patterns."""
        return re.IGNORECASE if self.pattern_ignore_case else 0


@lru_cache(maxsize=1)
def get_settings() -> DialectSettings:
    """Return the process-wide settings, loaded on first use."""
    return DialectSettings()


def reset_settings() -> None:
    """Forget cached settings so the environment is read again."""
    get_settings.cache_clear()
