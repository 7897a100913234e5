"""
graalcache CLI argument parser.

This module implements the command-line interface for graalcache using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from graalcache import __version__
from graalcache.core.exceptions import GraalCacheError

logger = logging.getLogger(__name__)


class CLI:
    """graalcache command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="graalcache",
            description="graalcache - download and cache GraalVM CE archives",
            epilog='Use "graalcache COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"graalcache {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./graalcache.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_download_command(subparsers)
        self._add_path_command(subparsers)
        self._add_platform_command(subparsers)

        return parser

    def _add_artifact_arguments(self, parser):
        """Add options selecting the archive to operate on."""
        parser.add_argument(
            "--graal-version",
            metavar="VERSION",
            help="GraalVM version (e.g., 19.3.1)",
        )
        parser.add_argument(
            "--base-url",
            metavar="URL",
            help="Base URL archives are published under",
        )
        parser.add_argument(
            "--cache-dir",
            metavar="PATH",
            help="Cache root directory (default: ~/.graalcache/caches)",
        )

    def _add_download_command(self, subparsers):
        """Add 'download' subcommand."""
        parser = subparsers.add_parser(
            "download",
            help="Download and cache GraalVM",
            description="Download the GraalVM archive for this platform unless cached",
        )
        self._add_artifact_arguments(parser)
        parser.add_argument(
            "--force",
            action="store_true",
            help="Re-download even if the archive is cached",
        )
        parser.add_argument(
            "--timeout",
            type=float,
            metavar="SECONDS",
            help="Network timeout in seconds (default: none)",
        )

    def _add_path_command(self, subparsers):
        """Add 'path' subcommand."""
        parser = subparsers.add_parser(
            "path",
            help="Print cached archive path",
            description="Print where the GraalVM archive is cached",
        )
        self._add_artifact_arguments(parser)
        parser.add_argument(
            "--check",
            action="store_true",
            help="Exit with status 1 if the archive is not cached",
        )

    def _add_platform_command(self, subparsers):
        """Add 'platform' subcommand."""
        subparsers.add_parser(
            "platform",
            help="Show platform tokens",
            description="Show the GraalVM OS and architecture tokens for this host",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """Parse command-line arguments."""
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except GraalCacheError as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "download": "graalcache.cli.commands.download",
            "path": "graalcache.cli.commands.path",
            "platform": "graalcache.cli.commands.platform",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
