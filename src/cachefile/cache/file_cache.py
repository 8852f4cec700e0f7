"""
File-backed cache keyed by a fingerprint of arbitrary input data.

Each entry is one file, {cache_dir}/{prefix}-{hash}.cache, holding opaque
text. The file's modification time is the entry's write time and drives
expiry.

Usage:
    cache = FileCache("/var/cache/api")
    cache.set_hash(["Any", "Mixed", "input"])
    cache.check_expire_age(60 * 60 * 24)  # drop it if older than a day
    if cache.is_cached():
        return cache.content()
    content = build_response()
    cache.save(content)
    return content
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Callable

from cachefile.cache.hashing import fingerprint, is_valid_hash, normalize_prefix
from cachefile.config import Settings, get_settings
from cachefile.exceptions import CacheDirectoryError, CacheStatError, InvalidHashError
from cachefile.logging import get_logger

logger = get_logger(__name__)

ENTRY_EXTENSION = ".cache"


class FileCache:
    """Stateful file cache holding one current entry identifier.

    Call set_hash() (or is_cached(data)) once, then content(), save() and
    check_expire_age() all act on that entry. Nothing is kept in memory
    between calls; every operation goes to the filesystem.
    """

    def __init__(
        self,
        directory: str | Path | None = None,
        *,
        settings: Settings | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Create a cache rooted at directory.

        Args:
            directory: Cache directory. Defaults to
                settings.DOCUMENT_ROOT / settings.CACHE_SUBDIR.
            settings: Settings to use instead of get_settings().
            clock: Source of the current time for expiry checks.

        Raises:
            CacheDirectoryError: If the directory is missing and cannot be created.
        """
        self._settings = settings or get_settings()
        self._clock = clock
        self._hash: str | None = None
        self._prefix = normalize_prefix(self._settings.DEFAULT_PREFIX)

        if directory:
            self._cache_dir = Path(directory).resolve()
        else:
            self._cache_dir = self._settings.default_cache_dir

        if not self._cache_dir.exists():
            try:
                self._cache_dir.mkdir(mode=self._settings.DIR_MODE, parents=True)
            except OSError as e:
                raise CacheDirectoryError(
                    "Unable to create cache directory",
                    context={"cache_dir": str(self._cache_dir), "error": str(e)},
                ) from e
            logger.info("Created cache directory", cache_dir=str(self._cache_dir))

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def file_path(self) -> Path:
        """Path of the current entry.

        Raises:
            InvalidHashError: If no valid 32-character identifier is set.
        """
        if not self._hash or not is_valid_hash(self._hash):
            raise InvalidHashError(
                "Invalid hash id for cache file: use set_hash() to generate one",
                context={"hash": self._hash},
            )
        return self._cache_dir / f"{self._prefix}-{self._hash}{ENTRY_EXTENSION}"

    def set_hash(self, data: Any) -> str | None:
        """Derive the entry identifier from data and make it current.

        Returns:
            The 32-character identifier, or None if data cannot be serialized.
            On failure the current identifier is cleared, so file operations
            raise InvalidHashError until set_hash() succeeds.
        """
        digest = fingerprint(data)
        if digest is None:
            self._hash = None
            logger.warning(
                "Cannot derive cache hash from input", type=type(data).__name__
            )
            return None

        self._hash = digest
        logger.debug("Set cache hash", hash=digest)
        return digest

    def get_hash(self) -> str | None:
        return self._hash

    def set_prefix(self, text: str) -> str:
        """Normalize and store the filename prefix."""
        self._prefix = normalize_prefix(text)
        return self._prefix

    def is_cached(self, data: Any = None) -> bool:
        """Check whether the current entry exists on disk.

        Args:
            data: If given, set_hash(data) is called first.
        """
        if data is not None:
            self.set_hash(data)
        return self.file_path.exists()

    def content(self) -> str | None:
        """Return the current entry's content, or None if it is not cached.

        An entry that exists but cannot be read returns an empty string.
        """
        if not self.is_cached():
            return None

        path = self.file_path
        try:
            with path.open("r", encoding=self._settings.ENCODING, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Unable to read cache entry", path=str(path), error=str(e))
            return ""

    def save(self, content: str) -> bool:
        """Replace the current entry's content.

        Returns:
            True if written, False if the write failed.
        """
        path = self.file_path
        try:
            with path.open("w", encoding=self._settings.ENCODING, newline="") as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            logger.warning("Unable to write cache entry", path=str(path), error=str(e))
            return False

        logger.debug("Saved cache entry", path=str(path), size=len(content))
        return True

    def check_expire_age(self, max_age_seconds: int) -> bool:
        """Delete the current entry if it is older than max_age_seconds.

        A max age of 0 always expires an existing entry. Otherwise the entry
        expires when mtime + max_age_seconds < now, in whole seconds.

        Returns:
            True if the entry was expired (and deleted), False otherwise,
            including when there is no entry.

        Raises:
            CacheStatError: If the modification time cannot be read.
        """
        path = self.file_path
        if not path.exists():
            return False

        if max_age_seconds == 0:
            expired = True
        else:
            try:
                mtime = int(path.stat().st_mtime)
            except OSError as e:
                raise CacheStatError(
                    "Unable to get the modified time for this file",
                    context={"path": str(path)},
                ) from e
            expired = mtime + max_age_seconds < int(self._clock())

        if expired:
            try:
                path.unlink()
            except OSError as e:
                logger.warning(
                    "Unable to delete expired cache entry", path=str(path), error=str(e)
                )
            else:
                logger.debug(
                    "Expired cache entry", path=str(path), max_age=max_age_seconds
                )

        return expired

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(cache_dir={str(self._cache_dir)!r}, "
            f"prefix={self._prefix!r}, hash={self._hash!r})"
        )
