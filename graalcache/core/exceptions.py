"""
Centralized exception hierarchy for graalcache.

This module defines all custom exceptions used across the codebase
so callers can catch a single base class at the top of an operation.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class GraalCacheError(Exception):
    """Base exception for all graalcache errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(GraalCacheError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Platform Exceptions
# ============================================================================


class UnsupportedPlatformError(GraalCacheError):
    """Raised when the host OS or architecture has no GraalVM vendor token."""

    def __init__(self, kind: str, value: str):
        self.kind = kind
        self.value = value
        super().__init__(f"No GraalVM support for {kind}: {value!r}")


# ============================================================================
# Download Exceptions
# ============================================================================


class DownloadError(GraalCacheError):
    """Raised when fetching the artifact fails."""

    pass


# ============================================================================
# Filesystem Exceptions
# ============================================================================


class FilesystemError(GraalCacheError):
    """Raised when writing to the cache fails."""

    pass


class CacheDirectoryError(FilesystemError):
    """Raised when the version cache directory cannot be created."""

    pass


class CacheLockTimeout(GraalCacheError):
    """Raised when the cache lock cannot be acquired within timeout."""

    pass
