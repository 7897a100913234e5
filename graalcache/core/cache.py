"""
Version-keyed artifact cache.

Archives are cached as ``<cache_dir>/<version>/<filename>``. A cached file is
either present (nothing to do) or absent (the version directory is created and
the archive fetched). Presence is an existence check only; the fetcher never
leaves a partially written file under the final name.
"""

import logging
from pathlib import Path
from typing import Union

from graalcache.core.exceptions import CacheDirectoryError

logger = logging.getLogger(__name__)


def cache_subdirectory(cache_dir: Union[str, Path], version: str) -> Path:
    """
    Get the cache directory for a GraalVM version.

    Example:
        >>> cache_subdirectory(Path('/cache'), '19.3.1')
        PosixPath('/cache/19.3.1')
    """
    if not version:
        raise ValueError("Version cannot be empty")
    return Path(cache_dir) / version


def artifact_path(cache_dir: Union[str, Path], version: str, filename: str) -> Path:
    """Get the cached archive path for a version and filename."""
    if not filename:
        raise ValueError("Filename cannot be empty")
    return cache_subdirectory(cache_dir, version) / filename


def is_cached(path: Path) -> bool:
    """
    Check whether an artifact is already in the cache.

    Args:
        path: Target archive path

    Returns:
        True if a file exists at the path
    """
    cached = Path(path).is_file()
    logger.debug(f"Cache {'hit' if cached else 'miss'}: {path}")
    return cached


def ensure_cache_subdirectory(path: Path) -> Path:
    """
    Create a version cache directory including missing parents.

    Succeeds if the directory already exists.

    Raises:
        CacheDirectoryError: If the directory cannot be created
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CacheDirectoryError(
            f"Failed to create cache directory {path}: {e}"
        ) from e
    return path


__all__ = [
    "cache_subdirectory",
    "artifact_path",
    "is_cached",
    "ensure_cache_subdirectory",
]
