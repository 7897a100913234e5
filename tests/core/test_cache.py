"""
Unit tests for the version-keyed cache.
"""

from unittest.mock import patch

import pytest

from graalcache.core.cache import (
    artifact_path,
    cache_subdirectory,
    ensure_cache_subdirectory,
    is_cached,
)
from graalcache.core.exceptions import CacheDirectoryError, FilesystemError


class TestPaths:
    """Test cache path computation."""

    def test_cache_subdirectory(self, tmp_path):
        assert cache_subdirectory(tmp_path, "19.3.1") == tmp_path / "19.3.1"

    def test_artifact_path(self, tmp_path):
        path = artifact_path(tmp_path, "19.3.1", "graalvm-ce-amd64-19.3.1.tar.gz")
        assert path == tmp_path / "19.3.1" / "graalvm-ce-amd64-19.3.1.tar.gz"

    def test_empty_version_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            cache_subdirectory(tmp_path, "")

    def test_empty_filename_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            artifact_path(tmp_path, "19.3.1", "")


class TestIsCached:
    """Test the cache presence check."""

    def test_missing_file(self, tmp_path):
        assert is_cached(tmp_path / "archive.tar.gz") is False

    def test_existing_file(self, tmp_path):
        archive = tmp_path / "archive.tar.gz"
        archive.write_bytes(b"data")
        assert is_cached(archive) is True

    def test_directory_is_not_a_cached_archive(self, tmp_path):
        (tmp_path / "archive.tar.gz").mkdir()
        assert is_cached(tmp_path / "archive.tar.gz") is False


class TestEnsureCacheSubdirectory:
    """Test cache directory creation."""

    def test_creates_missing_parents(self, tmp_path):
        target = tmp_path / "a" / "b" / "19.3.1"

        result = ensure_cache_subdirectory(target)

        assert result == target
        assert target.is_dir()

    def test_idempotent(self, tmp_path):
        target = tmp_path / "19.3.1"
        ensure_cache_subdirectory(target)
        ensure_cache_subdirectory(target)
        assert target.is_dir()

    def test_failure_raises_cache_directory_error(self, tmp_path):
        with patch("pathlib.Path.mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(CacheDirectoryError, match="denied"):
                ensure_cache_subdirectory(tmp_path / "19.3.1")

    def test_error_is_filesystem_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with pytest.raises(FilesystemError):
            ensure_cache_subdirectory(blocker / "19.3.1")
