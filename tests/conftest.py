"""
Pytest configuration and fixtures for cachefile tests.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest

from cachefile.config import Settings, clear_settings_cache


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test outputs."""
    return tmp_path


@pytest.fixture
def mock_env_vars(temp_dir: Path) -> Generator[dict[str, str], None, None]:
    """Provide mock CACHEFILE_* environment variables for testing."""
    env_vars = {
        "CACHEFILE_DOCUMENT_ROOT": str(temp_dir / "docroot"),
        "CACHEFILE_CACHE_SUBDIR": "tmp/api",
        "CACHEFILE_DEFAULT_PREFIX": "cachefile",
        "CACHEFILE_DIR_MODE": "755",
        "CACHEFILE_ENCODING": "utf-8",
        "CACHEFILE_LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        clear_settings_cache()
        yield env_vars


@pytest.fixture
def mock_settings(temp_dir: Path) -> Settings:
    """Provide a Settings instance rooted in temp_dir, ignoring any .env file."""
    return Settings(_env_file=None, DOCUMENT_ROOT=temp_dir / "docroot")


@pytest.fixture
def cache_dir(temp_dir: Path) -> Path:
    """Directory for FileCache instances under test."""
    return temp_dir / "cache"


@pytest.fixture
def frozen_now() -> int:
    """Fixed wall-clock reference for expiry tests."""
    return 1_700_000_000


@pytest.fixture
def age_entry(frozen_now: int):
    """Set an entry file's mtime to a number of seconds before frozen_now."""

    def _age(path: Path, seconds: int) -> None:
        mtime = frozen_now - seconds
        os.utime(path, (mtime, mtime))

    return _age


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Automatically reset settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
