"""
Pytest configuration and shared fixtures for graalcache tests.
"""

from pathlib import Path

import pytest

from graalcache.config.parser import GraalConfig
from graalcache.core.platform import PlatformTokens, clear_platform_cache

BASE_URL = "https://example.org/graal"
VERSION = "19.3.1"
ARCHIVE_URL = f"{BASE_URL}/vm-{VERSION}/graalvm-ce-linux-amd64-{VERSION}.tar.gz"
ARCHIVE_NAME = f"graalvm-ce-amd64-{VERSION}.tar.gz"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_platform_cache():
    """Platform detection is cached per process; reset it around each test."""
    clear_platform_cache()
    yield
    clear_platform_cache()


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Cache root that does not exist yet."""
    return tmp_path / "caches"


@pytest.fixture
def graal_config(cache_dir: Path) -> GraalConfig:
    """Configuration pointing at a fake download server."""
    return GraalConfig(version=VERSION, download_base_url=BASE_URL, cache_dir=cache_dir)


@pytest.fixture
def linux_tokens() -> PlatformTokens:
    """Tokens for a Linux x86-64 host."""
    return PlatformTokens(os="linux", arch="amd64")


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Create isolated home directory for tests."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))
    monkeypatch.delenv("GRAALCACHE_HOME", raising=False)

    return fake_home


@pytest.fixture
def no_network(monkeypatch):
    """Disable network access for tests."""
    import socket

    def guard(*args, **kwargs):
        raise RuntimeError("Network access not allowed in this test")

    monkeypatch.setattr(socket, "socket", guard)
