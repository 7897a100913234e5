"""
Shared utilities for CLI commands.
"""

import logging

from graalcache.config.parser import GraalConfig, load_config

logger = logging.getLogger(__name__)


def config_from_args(args) -> GraalConfig:
    """
    Build the configuration for a command.

    Command-line flags take precedence over the configuration file.

    Args:
        args: Parsed arguments (config, graal_version, base_url, cache_dir)

    Returns:
        Validated GraalConfig

    Raises:
        ConfigError: If the resulting configuration is invalid
    """
    overrides = {
        "version": getattr(args, "graal_version", None),
        "download_base_url": getattr(args, "base_url", None),
        "cache_dir": getattr(args, "cache_dir", None),
    }
    config = load_config(getattr(args, "config", None), overrides=overrides)
    logger.debug(f"Using configuration: {config}")
    return config
