"""
Tests for the exception hierarchy.
"""

from __future__ import annotations

import pytest

from cachefile.exceptions import (
    CacheDirectoryError,
    CacheFileError,
    CacheStatError,
    ConfigurationError,
    InvalidHashError,
)


class TestCacheFileError:
    """Tests for the base error."""

    def test_str_without_context(self) -> None:
        assert str(CacheFileError("boom")) == "boom"

    def test_str_with_context(self) -> None:
        err = CacheFileError("boom", context={"path": "/tmp/x", "size": 3})
        assert str(err) == "boom (path='/tmp/x', size=3)"

    def test_repr(self) -> None:
        err = InvalidHashError("bad", context={"hash": None})
        assert repr(err) == "InvalidHashError('bad', context={'hash': None})"

    @pytest.mark.parametrize(
        "cls",
        [CacheDirectoryError, CacheStatError, ConfigurationError, InvalidHashError],
    )
    def test_subclasses_share_base(self, cls: type[CacheFileError]) -> None:
        """Test that callers can catch every cache failure with one clause."""
        with pytest.raises(CacheFileError):
            raise cls("failure")
