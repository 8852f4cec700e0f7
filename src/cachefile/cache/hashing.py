"""
Identifier derivation for cache entries.

Inputs are serialized to canonical JSON (sorted keys) with orjson and
fingerprinted with MD5. The digest is a filename key only; it is not an
integrity or authentication check.
"""

from __future__ import annotations

import hashlib
import re
from typing import Any

import orjson

HASH_LENGTH = 32

_PREFIX_INVALID = re.compile(r"[^0-9a-z]+")

_SERIALIZE_OPTIONS = orjson.OPT_SORT_KEYS | orjson.OPT_NON_STR_KEYS


def serialize(data: Any) -> bytes | None:
    """Serialize a value to a canonical byte string.

    Equal structures (including nested dicts, lists and tuples) always give
    identical bytes because mapping keys are sorted.

    Returns:
        The encoded bytes, or None if the value has no JSON representation.
        That includes sets, bytes and ints outside the 64-bit range.
    """
    try:
        return orjson.dumps(data, option=_SERIALIZE_OPTIONS)
    except (orjson.JSONEncodeError, TypeError):
        return None


def fingerprint(data: Any) -> str | None:
    """Return the 32-character MD5 hex digest of serialize(data)."""
    encoded = serialize(data)
    if encoded is None:
        return None
    return hashlib.md5(encoded, usedforsecurity=False).hexdigest()


def is_valid_hash(value: object) -> bool:
    """Check that value is usable as an entry identifier."""
    return isinstance(value, str) and len(value) == HASH_LENGTH


def normalize_prefix(text: str) -> str:
    """Normalize a filename prefix.

    Lowercases, collapses every run outside [0-9a-z] to one underscore and
    trims surrounding whitespace and underscores.
    """
    return _PREFIX_INVALID.sub("_", text.lower()).strip().strip("_")
