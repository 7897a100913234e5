"""
Download command implementation.

Downloads the GraalVM archive for this platform into the cache, or reports
that it is already up to date.
"""

import logging

from graalcache.cli.utils import config_from_args
from graalcache.core.download import DownloadProgress
from graalcache.graal.downloader import GraalDownloader

logger = logging.getLogger(__name__)


def _log_progress(progress: DownloadProgress):
    logger.debug(str(progress))


def run(args) -> int:
    """
    Run the download command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = config_from_args(args)
    downloader = GraalDownloader(config, timeout=args.timeout)

    result = downloader.download(force=args.force, progress_callback=_log_progress)

    if result.was_cached:
        print(f"GraalVM {config.version} is up to date: {result.path}")
    else:
        print(
            f"Downloaded GraalVM {config.version} "
            f"({result.bytes_downloaded} bytes in {result.download_time:.1f}s): "
            f"{result.path}"
        )
    return 0
