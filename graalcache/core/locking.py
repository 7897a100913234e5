"""
Concurrent access control for the artifact cache.

Two invocations targeting the same version directory would otherwise race on
the fetch. A lock file next to the archive serialises them; the second holder
re-checks the cache after acquiring the lock and finds the archive present.

Usage:
    from graalcache.core.locking import artifact_lock

    with artifact_lock(location.path, timeout=300):
        if not is_cached(location.path):
            download_file(location.url, location.path)
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from graalcache.core.exceptions import CacheLockTimeout

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 300


def lock_path_for(artifact: Path) -> Path:
    """Get the lock file path guarding an artifact."""
    artifact = Path(artifact)
    return artifact.with_name(f".{artifact.name}.lock")


@contextmanager
def artifact_lock(artifact: Path, timeout: float = DEFAULT_LOCK_TIMEOUT):
    """
    Acquire the lock for a cached artifact.

    The artifact's parent directory must exist.

    Args:
        artifact: Path of the archive being fetched
        timeout: Maximum wait time in seconds (default: 300 for long downloads)

    Yields:
        None

    Raises:
        CacheLockTimeout: If lock can't be acquired within timeout
    """
    lock_path = lock_path_for(artifact)
    lock = FileLock(lock_path, timeout=timeout)

    try:
        with lock:
            logger.debug(f"Acquired artifact lock: {lock_path}")
            yield
            logger.debug(f"Released artifact lock: {lock_path}")
    except Timeout as e:
        logger.error(
            f"Could not acquire lock for {artifact} after {timeout}s. "
            "Another process may be downloading this archive."
        )
        raise CacheLockTimeout(
            f"Could not acquire lock for {artifact} after {timeout}s. "
            "Another process may be downloading this archive."
        ) from e
