"""
Configuration management using pydantic-settings.

Loads configuration from CACHEFILE_* environment variables and .env files.
The document root used for the default cache directory lives here so callers
inject it instead of reading a process-wide global.
"""

from __future__ import annotations

import codecs
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cachefile.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Cache settings loaded from environment variables.

    Optional:
        CACHEFILE_DOCUMENT_ROOT: Base directory for the default cache location
        CACHEFILE_CACHE_SUBDIR: Path under the document root (default tmp/api)
        CACHEFILE_DEFAULT_PREFIX: Filename prefix for new caches
        CACHEFILE_DIR_MODE: Permission bits for created directories
        CACHEFILE_ENCODING: Text encoding for entry files
        CACHEFILE_LOG_LEVEL: Logging level
    """

    model_config = SettingsConfigDict(
        env_prefix="CACHEFILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DOCUMENT_ROOT: Path = Field(
        default=Path("."), description="Base directory for the default cache location"
    )
    CACHE_SUBDIR: Path = Field(
        default=Path("tmp/api"), description="Cache path relative to DOCUMENT_ROOT"
    )
    DEFAULT_PREFIX: str = Field(
        default="cachefile", description="Filename prefix for new caches"
    )
    DIR_MODE: int = Field(
        default=0o755, ge=0, le=0o7777, description="Mode for created cache directories"
    )
    ENCODING: str = Field(default="utf-8", description="Text encoding for entry files")

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    @field_validator("DIR_MODE", mode="before")
    @classmethod
    def parse_octal_mode(cls, v: object) -> object:
        """Accept modes written as octal strings such as "755" or "0o755"."""
        if isinstance(v, str):
            text = v.strip().lower().removeprefix("0o")
            try:
                return int(text, 8)
            except ValueError:
                raise ValueError(f"DIR_MODE must be an octal number, got {v!r}")
        return v

    @field_validator("ENCODING")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings Python does not know about."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")
        return v

    @property
    def default_cache_dir(self) -> Path:
        """Absolute cache directory used when none is given explicitly."""
        return (self.DOCUMENT_ROOT / self.CACHE_SUBDIR).resolve()

    def ensure_directories(self) -> None:
        """Create the default cache directory if it doesn't exist."""
        self.default_cache_dir.mkdir(mode=self.DIR_MODE, parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings instance loaded from environment.

    Raises:
        ConfigurationError: If settings are invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid cachefile configuration",
            context={"errors": [err["msg"] for err in e.errors()]},
        ) from e


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
