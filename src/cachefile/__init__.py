"""File-backed cache with content-derived identifiers and age-based expiry."""

from cachefile.cache.file_cache import FileCache
from cachefile.config import Settings, get_settings
from cachefile.exceptions import (
    CacheDirectoryError,
    CacheFileError,
    CacheStatError,
    ConfigurationError,
    InvalidHashError,
)

__version__ = "0.1.0"

__all__ = [
    "CacheDirectoryError",
    "CacheFileError",
    "CacheStatError",
    "ConfigurationError",
    "FileCache",
    "InvalidHashError",
    "Settings",
    "get_settings",
    "__version__",
]
