"""
GraalVM archive download and caching.

This module orchestrates the single graalcache operation, coordinating the
platform resolver, artifact locator, cache and download manager:
1. Resolve platform tokens (fails before any network access)
2. Render the download URL and cache path
3. Skip if the archive is already cached
4. Create the version cache directory
5. Fetch the archive under a per-artifact lock
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from graalcache.config.parser import GraalConfig
from graalcache.core.artifact import ArtifactLocation, locate_artifact
from graalcache.core.cache import ensure_cache_subdirectory, is_cached
from graalcache.core.download import DownloadProgress, download_file
from graalcache.core.locking import DEFAULT_LOCK_TIMEOUT, artifact_lock
from graalcache.core.platform import PlatformTokens, resolve_platform

logger = logging.getLogger(__name__)


@dataclass
class DownloadResult:
    """Result of a GraalVM download operation."""

    path: Path
    """Path to the cached archive"""

    url: str
    """URL the archive is published at"""

    was_cached: bool
    """Whether the archive was already cached (no download needed)"""

    bytes_downloaded: int = 0
    """Bytes fetched by this invocation"""

    download_time: float = 0.0
    """Time spent downloading in seconds"""


class GraalDownloader:
    """
    Downloads and caches GraalVM Community Edition archives.

    Example:
        >>> config = load_config()
        >>> downloader = GraalDownloader(config)
        >>> result = downloader.download()
        >>> print(f"Archive at: {result.path}")
    """

    def __init__(
        self,
        config: GraalConfig,
        platform_tokens: Optional[PlatformTokens] = None,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT,
        timeout: Optional[float] = None,
    ):
        """
        Initialize downloader.

        Args:
            config: Validated configuration
            platform_tokens: Platform to download for (default: resolve the host)
            lock_timeout: Seconds to wait for a concurrent download of the same archive
            timeout: Network timeout in seconds (None blocks until the transfer ends)
        """
        self.config = config
        self.platform_tokens = platform_tokens
        self.lock_timeout = lock_timeout
        self.timeout = timeout

    def location(self) -> ArtifactLocation:
        """
        Resolve where the archive comes from and where it is cached.

        Recomputed on every call.

        Raises:
            UnsupportedPlatformError: If the host platform has no GraalVM build
        """
        tokens = self.platform_tokens or resolve_platform()
        return locate_artifact(self.config, tokens)

    def is_up_to_date(self) -> bool:
        """Check whether the archive is already cached and nothing needs doing."""
        return is_cached(self.location().path)

    def download(
        self,
        force: bool = False,
        progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
    ) -> DownloadResult:
        """
        Download the archive unless it is already cached.

        Args:
            force: Re-download even if cached
            progress_callback: Optional callback for progress updates

        Returns:
            DownloadResult describing the cached archive

        Raises:
            UnsupportedPlatformError: If the host platform has no GraalVM build
            DownloadError: If the fetch fails
            FilesystemError: If the cache cannot be written
            CacheLockTimeout: If another process holds the archive lock too long
        """
        location = self.location()

        if not force and is_cached(location.path):
            logger.info(f"GraalVM {self.config.version} already cached: {location.path}")
            return DownloadResult(path=location.path, url=location.url, was_cached=True)

        ensure_cache_subdirectory(location.cache_subdirectory)

        with artifact_lock(location.path, timeout=self.lock_timeout):
            # Another process may have finished the download while we waited
            if not force and is_cached(location.path):
                logger.info(f"GraalVM {self.config.version} cached by another process")
                return DownloadResult(
                    path=location.path, url=location.url, was_cached=True
                )

            logger.info(f"Downloading GraalVM {self.config.version} to {location.path}")
            start = time.time()
            size = download_file(
                location.url,
                location.path,
                progress_callback=progress_callback,
                timeout=self.timeout,
            )
            elapsed = time.time() - start

        return DownloadResult(
            path=location.path,
            url=location.url,
            was_cached=False,
            bytes_downloaded=size,
            download_time=elapsed,
        )


def download_graal(
    config: GraalConfig,
    force: bool = False,
    progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
) -> DownloadResult:
    """Download and cache the GraalVM archive for the host platform."""
    return GraalDownloader(config).download(
        force=force, progress_callback=progress_callback
    )
