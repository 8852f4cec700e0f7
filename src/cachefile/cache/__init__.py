"""
Cache package.

- hashing.py: canonical serialization, MD5 identifiers, prefix normalization
- file_cache.py: FileCache, one file per entry with age-based expiry
"""

from cachefile.cache.file_cache import ENTRY_EXTENSION, FileCache
from cachefile.cache.hashing import fingerprint, normalize_prefix, serialize

__all__ = [
    "ENTRY_EXTENSION",
    "FileCache",
    "fingerprint",
    "normalize_prefix",
    "serialize",
]
