"""
Path command implementation.

Prints where the GraalVM archive is cached, so other tools can use the
archive or treat its presence as a dependency check.
"""

import logging

from graalcache.cli.utils import config_from_args
from graalcache.graal.downloader import GraalDownloader

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the path command.

    Returns:
        Exit code (1 with --check when the archive is not cached)
    """
    config = config_from_args(args)
    downloader = GraalDownloader(config)

    print(downloader.location().path)

    if args.check and not downloader.is_up_to_date():
        logger.info("Archive is not cached")
        return 1
    return 0
