"""
Tests for cache directory resolution.
"""

from pathlib import Path

from graalcache.core.directory import get_default_cache_dir, get_home_dir


def test_default_home(isolated_home):
    assert get_home_dir() == Path.home() / ".graalcache"
    assert get_default_cache_dir() == Path.home() / ".graalcache" / "caches"


def test_home_override(tmp_path, monkeypatch):
    monkeypatch.setenv("GRAALCACHE_HOME", str(tmp_path / "custom"))

    assert get_home_dir() == tmp_path / "custom"
    assert get_default_cache_dir() == tmp_path / "custom" / "caches"
