"""
Configuration loading for graalcache.
"""

from .parser import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_DOWNLOAD_BASE_URL,
    DEFAULT_GRAAL_VERSION,
    GraalConfig,
    default_config,
    load_config,
    load_yaml_config,
)

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_DOWNLOAD_BASE_URL",
    "DEFAULT_GRAAL_VERSION",
    "GraalConfig",
    "default_config",
    "load_config",
    "load_yaml_config",
]
