"""
Exception hierarchy for the file cache.

All exceptions inherit from CacheFileError, which carries optional context
for structured error handling and logging.
"""

from __future__ import annotations

from typing import Any


class CacheFileError(Exception):
    """Base exception for all file cache errors.

    Attributes:
        message: Human-readable error message.
        context: Optional structured context for logging/debugging.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ConfigurationError(CacheFileError):
    """Raised when settings are invalid or missing."""

    pass


class CacheDirectoryError(CacheFileError):
    """Raised when the cache directory cannot be created.

    Context should include:
        - cache_dir: The directory that could not be created
    """

    pass


class InvalidHashError(CacheFileError):
    """Raised when an entry path is requested without a valid identifier.

    Call FileCache.set_hash() before any file operation.

    Context should include:
        - hash: The current identifier (None when never set)
    """

    pass


class CacheStatError(CacheFileError):
    """Raised when an entry's modification time cannot be read.

    Context should include:
        - path: The entry file
    """

    pass
