"""YAML configuration parser for graalcache.

This module provides parsing and validation for graalcache.yaml configuration
files. Values are merged in order of precedence: explicit overrides (CLI flags),
then the configuration file, then built-in defaults.

Example graalcache.yaml:

    version: "19.3.1"
    download_base_url: https://github.com/graalvm/graalvm-ce-builds/releases/download
    cache_dir: ~/.graalcache/caches
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml

from graalcache.core.directory import get_default_cache_dir
from graalcache.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "graalcache.yaml"
DEFAULT_GRAAL_VERSION = "19.3.1"
DEFAULT_DOWNLOAD_BASE_URL = "https://github.com/graalvm/graalvm-ce-builds/releases/download"

KNOWN_KEYS = ("version", "download_base_url", "cache_dir")


@dataclass(frozen=True)
class GraalConfig:
    """Inputs of a single download operation."""

    version: str
    download_base_url: str
    cache_dir: Path

    def validate(self) -> "GraalConfig":
        """
        Check that every input is usable before resolution.

        Returns:
            self, for chaining

        Raises:
            ConfigError: If any input is empty or malformed
        """
        if not self.version or not self.version.strip():
            raise ConfigError("GraalVM version cannot be empty")
        if "/" in self.version or "\\" in self.version or self.version in (".", ".."):
            raise ConfigError(f"Invalid GraalVM version: {self.version!r}")

        if not self.download_base_url:
            raise ConfigError("Download base URL cannot be empty")
        parsed = urlparse(self.download_base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"Invalid download base URL: {self.download_base_url}")

        if not str(self.cache_dir):
            raise ConfigError("Cache directory cannot be empty")

        return self


def default_config() -> GraalConfig:
    """Get the configuration used when nothing is configured."""
    return GraalConfig(
        version=DEFAULT_GRAAL_VERSION,
        download_base_url=DEFAULT_DOWNLOAD_BASE_URL,
        cache_dir=get_default_cache_dir(),
    )


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigError: If the file is required and missing, or is not valid YAML
    """
    if not config_file.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping: {config_file}")

    unknown = set(data) - set(KNOWN_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown configuration keys: {sorted(unknown)}")

    return data


def _resolve_cache_dir(value: Any, base_dir: Optional[Path]) -> Path:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ConfigError("Cache directory cannot be empty")
    path = Path(str(value)).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return path


def load_config(
    config_file: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> GraalConfig:
    """
    Build a validated configuration.

    Args:
        config_file: Optional YAML file; a missing explicit file is an error,
            a missing ./graalcache.yaml is not
        overrides: Values that take precedence over the file (None values ignored)

    Returns:
        Validated GraalConfig

    Raises:
        ConfigError: If the configuration is invalid
    """
    required = config_file is not None
    if config_file is None:
        config_file = Path.cwd() / DEFAULT_CONFIG_FILENAME

    data = load_yaml_config(Path(config_file), required=required)
    defaults = default_config()

    version = data.get("version", defaults.version)
    base_url = data.get("download_base_url", defaults.download_base_url)
    cache_dir = defaults.cache_dir
    if "cache_dir" in data:
        cache_dir = _resolve_cache_dir(data["cache_dir"], Path(config_file).parent)

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key == "version":
            version = value
        elif key == "download_base_url":
            base_url = value
        elif key == "cache_dir":
            cache_dir = _resolve_cache_dir(value, None)
        else:
            raise ConfigError(f"Unknown configuration key: {key}")

    if not isinstance(version, str):
        # YAML reads 20.10 as the float 20.1
        raise ConfigError(
            f"GraalVM version must be a string, got {version!r}; "
            f"quote it in {config_file} (e.g. version: \"20.10\")"
        )

    config = GraalConfig(
        version=version,
        download_base_url=str(base_url) if base_url is not None else "",
        cache_dir=cache_dir,
    )
    return config.validate()
