"""
Tests for CLI command implementations.
"""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import responses

from graalcache.cli.commands import download, path, platform
from graalcache.cli.utils import config_from_args
from graalcache.core.exceptions import UnsupportedPlatformError
from graalcache.core.platform import PlatformInfo

ARCHIVE_URL = (
    "https://example.org/graal/vm-19.3.1/graalvm-ce-linux-amd64-19.3.1.tar.gz"
)


@pytest.fixture
def linux_host():
    with patch(
        "graalcache.core.platform.detect_platform",
        return_value=PlatformInfo("Linux", "x86_64"),
    ):
        yield


def _args(cache_dir: Path, **kwargs) -> Mock:
    values = dict(
        config=None,
        graal_version="19.3.1",
        base_url="https://example.org/graal",
        cache_dir=cache_dir,
        force=False,
        timeout=None,
        check=False,
    )
    values.update(kwargs)
    return Mock(**values)


class TestConfigFromArgs:
    """Test config_from_args()."""

    def test_flags_override_file(self, tmp_path):
        config_file = tmp_path / "graalcache.yaml"
        config_file.write_text("version: 20.0.0\n")

        config = config_from_args(
            _args(tmp_path / "cache", config=config_file, graal_version="19.3.1")
        )

        assert config.version == "19.3.1"
        assert config.cache_dir == tmp_path / "cache"

    def test_file_used_without_flags(self, tmp_path):
        config_file = tmp_path / "graalcache.yaml"
        config_file.write_text("version: 20.0.0\n")

        config = config_from_args(
            _args(None, config=config_file, graal_version=None, base_url=None)
        )

        assert config.version == "20.0.0"


class TestDownloadCommand:
    """Test the download command."""

    @responses.activate
    def test_downloads(self, tmp_path, linux_host, capsys):
        responses.add(responses.GET, ARCHIVE_URL, body=b"archive", status=200)

        assert download.run(_args(tmp_path)) == 0

        target = tmp_path / "19.3.1" / "graalvm-ce-amd64-19.3.1.tar.gz"
        assert target.read_bytes() == b"archive"
        assert "Downloaded GraalVM 19.3.1" in capsys.readouterr().out

    def test_up_to_date(self, tmp_path, linux_host, capsys):
        target = tmp_path / "19.3.1" / "graalvm-ce-amd64-19.3.1.tar.gz"
        target.parent.mkdir(parents=True)
        target.write_bytes(b"cached")

        assert download.run(_args(tmp_path)) == 0

        assert "up to date" in capsys.readouterr().out
        assert target.read_bytes() == b"cached"


class TestPathCommand:
    """Test the path command."""

    def test_prints_path(self, tmp_path, linux_host, capsys):
        assert path.run(_args(tmp_path)) == 0

        out = capsys.readouterr().out.strip()
        assert out == str(tmp_path / "19.3.1" / "graalvm-ce-amd64-19.3.1.tar.gz")

    def test_check_missing(self, tmp_path, linux_host):
        assert path.run(_args(tmp_path, check=True)) == 1

    def test_check_present(self, tmp_path, linux_host):
        target = tmp_path / "19.3.1" / "graalvm-ce-amd64-19.3.1.tar.gz"
        target.parent.mkdir(parents=True)
        target.write_bytes(b"cached")

        assert path.run(_args(tmp_path, check=True)) == 0


class TestPlatformCommand:
    """Test the platform command."""

    def test_prints_tokens(self, capsys):
        with patch(
            "graalcache.cli.commands.platform.detect_platform",
            return_value=PlatformInfo("Linux", "x86_64"),
        ):
            assert platform.run(Mock()) == 0

        out = capsys.readouterr().out
        assert "os: linux" in out
        assert "arch: amd64" in out

    def test_unsupported_host(self):
        with patch(
            "graalcache.cli.commands.platform.detect_platform",
            return_value=PlatformInfo("Windows", "AMD64"),
        ):
            with pytest.raises(UnsupportedPlatformError):
                platform.run(Mock())
