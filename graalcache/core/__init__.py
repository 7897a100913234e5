"""
Core functionality for graalcache.

This package contains the foundational modules that the downloader depends on.
"""

from .platform import (
    PlatformInfo,
    PlatformTokens,
    detect_platform,
    resolve_platform,
    is_supported_platform,
    get_supported_platforms,
    clear_platform_cache,
)

from .artifact import (
    ARTIFACT_PATTERN,
    FILENAME_PATTERN,
    ArtifactLocation,
    render,
    locate_artifact,
)

from .cache import (
    cache_subdirectory,
    artifact_path,
    is_cached,
    ensure_cache_subdirectory,
)

from .download import (
    DownloadProgress,
    download_file,
    format_progress,
)

from .directory import get_default_cache_dir

from .exceptions import (
    GraalCacheError,
    ConfigError,
    UnsupportedPlatformError,
    DownloadError,
    FilesystemError,
    CacheDirectoryError,
    CacheLockTimeout,
)

__all__ = [
    "PlatformInfo",
    "PlatformTokens",
    "detect_platform",
    "resolve_platform",
    "is_supported_platform",
    "get_supported_platforms",
    "clear_platform_cache",
    "ARTIFACT_PATTERN",
    "FILENAME_PATTERN",
    "ArtifactLocation",
    "render",
    "locate_artifact",
    "cache_subdirectory",
    "artifact_path",
    "is_cached",
    "ensure_cache_subdirectory",
    "DownloadProgress",
    "download_file",
    "format_progress",
    "get_default_cache_dir",
    "GraalCacheError",
    "ConfigError",
    "UnsupportedPlatformError",
    "DownloadError",
    "FilesystemError",
    "CacheDirectoryError",
    "CacheLockTimeout",
]
