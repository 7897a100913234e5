"""
Cache directory resolution for graalcache.

Directory Structure:
    Cache root (~/.graalcache/caches/ or $GRAALCACHE_HOME/caches/):
        - <version>/                                : One directory per GraalVM version
          - graalvm-ce-<arch>-<version>.tar.gz      : Cached archive
          - .graalvm-ce-<arch>-<version>.tar.gz.lock: Download lock
"""

import os
from pathlib import Path

HOME_ENV_VAR = "GRAALCACHE_HOME"


def get_home_dir() -> Path:
    """
    Get the graalcache home directory.

    Returns:
        Path: $GRAALCACHE_HOME if set, otherwise ~/.graalcache
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".graalcache"


def get_default_cache_dir() -> Path:
    """
    Get the default cache root for downloaded archives.

    Example:
        >>> cache_dir = get_default_cache_dir()
        >>> print(cache_dir)
        /home/user/.graalcache/caches  # on Linux
    """
    return get_home_dir() / "caches"
