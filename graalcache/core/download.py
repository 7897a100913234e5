"""
Network download with progress tracking and atomic replacement.

This module provides the fetch step of the cache:
- HTTP/HTTPS streaming downloads with TLS verification
- Progress reporting (bytes, percentage, speed, ETA)
- Writes to a temporary sibling file that replaces the destination only
  after the whole body has been received
- Truncated transfer detection against Content-Length
- Bodies are stored as sent; Content-Encoding is never decoded

Failures are not retried; the caller decides whether to invoke again.
"""

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import requests
from requests.exceptions import RequestException
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from graalcache.core.exceptions import DownloadError, FilesystemError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192
PARTIAL_SUFFIX = ".part"


@dataclass
class DownloadProgress:
    """Progress information for a download."""

    bytes_downloaded: int
    total_bytes: int
    percentage: float
    speed_bps: float  # bytes per second
    eta_seconds: float  # estimated time remaining

    def __str__(self) -> str:
        """Format progress for display."""
        return format_progress(self)


def partial_path(destination: Path) -> Path:
    """Get the temporary path a download is written to before replacement."""
    return destination.with_name(destination.name + PARTIAL_SUFFIX)


def download_file(
    url: str,
    destination: Path,
    progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
    timeout: Optional[float] = None,
) -> int:
    """
    Download file from URL to destination, replacing any existing file.

    Args:
        url: URL to download from
        destination: Local path to save file (parent directory must exist)
        progress_callback: Optional callback for progress updates
        timeout: Connect/read timeout in seconds (None blocks indefinitely)

    Returns:
        Number of bytes written

    Raises:
        DownloadError: If the request fails, returns a non-success status,
            or the body is shorter than announced
        FilesystemError: If the destination cannot be written
        ValueError: If URL or destination is invalid

    Example:
        >>> from graalcache.core.download import download_file
        >>> url = "https://example.com/graalvm-ce-linux-amd64-19.3.1.tar.gz"
        >>> dest = Path("cache/19.3.1/graalvm-ce-amd64-19.3.1.tar.gz")
        >>> download_file(url, dest)
    """
    if not url:
        raise ValueError("URL cannot be empty")

    if not destination:
        raise ValueError("Destination path cannot be empty")

    destination = Path(destination)
    temp_path = partial_path(destination)

    logger.info(f"Downloading from {url}")

    try:
        response = requests.get(url, stream=True, timeout=timeout, allow_redirects=True)
    except RequestException as e:
        raise DownloadError(f"Failed to download {url}: {e}") from e

    try:
        try:
            response.raise_for_status()
        except RequestException as e:
            raise DownloadError(f"Failed to download {url}: {e}") from e

        try:
            downloaded = _write_stream(response, temp_path, progress_callback)
            try:
                os.replace(temp_path, destination)
            except OSError as e:
                raise FilesystemError(
                    f"Cannot move {temp_path} to {destination}: {e}"
                ) from e
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise
    finally:
        response.close()

    logger.info(f"Download complete: {destination} ({downloaded} bytes)")
    return downloaded


def _write_stream(
    response: requests.Response,
    temp_path: Path,
    progress_callback: Optional[Callable[[DownloadProgress], None]],
) -> int:
    """
    Stream a response body into a file.

    This is an internal function called by download_file().

    Returns:
        Number of bytes written
    """
    content_length = response.headers.get("content-length")
    total_size = int(content_length) if content_length else 0

    downloaded = 0
    start_time = time.time()
    last_progress_time = start_time

    try:
        f = open(temp_path, "wb")
    except OSError as e:
        raise FilesystemError(f"Cannot write {temp_path}: {e}") from e

    with f:
        try:
            # Content-Encoding is part of the archive bytes, not a transfer layer
            chunks = response.raw.stream(CHUNK_SIZE, decode_content=False)
            for chunk in chunks:
                if not chunk:
                    continue
                try:
                    f.write(chunk)
                except OSError as e:
                    raise FilesystemError(f"Cannot write {temp_path}: {e}") from e
                downloaded += len(chunk)

                # Report progress (max once per 0.5 seconds to avoid spam)
                current_time = time.time()
                if progress_callback and (
                    current_time - last_progress_time >= 0.5
                    or downloaded == total_size
                ):
                    progress_callback(
                        _progress(downloaded, total_size, current_time - start_time)
                    )
                    last_progress_time = current_time
        except (RequestException, Urllib3HTTPError) as e:
            logger.error(f"Error during download: {e}")
            raise DownloadError(f"Transfer interrupted: {e}") from e

    if total_size and downloaded < total_size:
        raise DownloadError(
            f"Truncated transfer: received {downloaded} of {total_size} bytes"
        )

    return downloaded


def _progress(downloaded: int, total_size: int, elapsed: float) -> DownloadProgress:
    speed = downloaded / elapsed if elapsed > 0 else 0
    remaining = total_size - downloaded if total_size > 0 else 0
    eta = remaining / speed if speed > 0 else 0

    return DownloadProgress(
        bytes_downloaded=downloaded,
        total_bytes=total_size if total_size > 0 else downloaded,
        percentage=(downloaded / total_size * 100) if total_size > 0 else 0,
        speed_bps=speed,
        eta_seconds=eta,
    )


def format_progress(progress: DownloadProgress) -> str:
    """
    Format progress for display.

    Example:
        >>> progress = DownloadProgress(52428800, 104857600, 50.0, 1048576, 50)
        >>> print(format_progress(progress))
        50.0/100.0 MB (50.0%) at 1.0 MB/s ETA: 50s
    """
    mb_downloaded = progress.bytes_downloaded / 1024 / 1024
    mb_total = progress.total_bytes / 1024 / 1024
    speed_mbps = progress.speed_bps / 1024 / 1024

    if progress.total_bytes > 0 and progress.percentage > 0:
        return (
            f"{mb_downloaded:.1f}/{mb_total:.1f} MB "
            f"({progress.percentage:.1f}%) "
            f"at {speed_mbps:.1f} MB/s "
            f"ETA: {progress.eta_seconds:.0f}s"
        )
    else:
        # Unknown total size
        return f"{mb_downloaded:.1f} MB at {speed_mbps:.1f} MB/s"
