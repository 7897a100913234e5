"""
Platform detection for graalcache.

This module detects the current platform (OS and CPU architecture) and maps it
to the vendor tokens used in GraalVM Community Edition archive names.

Supported platforms:
- Operating systems: macOS ('macos'), Linux ('linux')
- Architectures: x86-64 ('amd64')

Any other operating system or architecture is rejected with
UnsupportedPlatformError. There is no fallback.

Usage:
    from graalcache.core.platform import resolve_platform

    tokens = resolve_platform()
    print(f"OS: {tokens.os}, arch: {tokens.arch}")
"""

import functools
import platform
from dataclasses import dataclass
from typing import Optional

from graalcache.core.exceptions import UnsupportedPlatformError

# Host identifiers (lowercased) mapped to GraalVM vendor tokens
OS_TOKENS = {
    "darwin": "macos",
    "linux": "linux",
}

ARCH_TOKENS = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
}


@dataclass(frozen=True)
class PlatformInfo:
    """
    Raw host platform identifiers.

    Attributes:
        system: Operating system name as reported by platform.system()
        machine: CPU architecture as reported by platform.machine()
    """

    system: str
    machine: str

    def __str__(self) -> str:
        return f"{self.system}-{self.machine}"


@dataclass(frozen=True)
class PlatformTokens:
    """Vendor tokens for the OS and architecture of an artifact."""

    os: str
    arch: str

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-amd64').

        Example:
            >>> PlatformTokens('linux', 'amd64').platform_string()
            'linux-amd64'
        """
        return f"{self.os}-{self.arch}"


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.
    """
    return PlatformInfo(system=platform.system(), machine=platform.machine())


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


def operating_system_token(system: str) -> str:
    """
    Map an operating system identifier to its GraalVM vendor token.

    Args:
        system: OS identifier (e.g., 'Linux', 'Darwin')

    Returns:
        'macos' or 'linux'

    Raises:
        UnsupportedPlatformError: If there is no GraalVM build for the OS
    """
    token = OS_TOKENS.get((system or "").lower())
    if token is None:
        raise UnsupportedPlatformError("operating system", system)
    return token


def architecture_token(machine: str) -> str:
    """
    Map a CPU architecture identifier to its GraalVM vendor token.

    Args:
        machine: Architecture identifier (e.g., 'x86_64', 'AMD64')

    Returns:
        'amd64'

    Raises:
        UnsupportedPlatformError: If there is no GraalVM build for the architecture
    """
    token = ARCH_TOKENS.get((machine or "").lower())
    if token is None:
        raise UnsupportedPlatformError("architecture", machine)
    return token


def resolve_platform(info: Optional[PlatformInfo] = None) -> PlatformTokens:
    """
    Resolve vendor tokens for a platform.

    Args:
        info: Platform to resolve (default: the detected host platform)

    Returns:
        PlatformTokens for the platform

    Raises:
        UnsupportedPlatformError: If the OS or architecture is not supported
    """
    if info is None:
        info = detect_platform()

    return PlatformTokens(
        os=operating_system_token(info.system),
        arch=architecture_token(info.machine),
    )


def is_supported_platform(info: Optional[PlatformInfo] = None) -> bool:
    """Check whether GraalVM archives are published for a platform."""
    try:
        resolve_platform(info)
    except UnsupportedPlatformError:
        return False
    return True


def get_supported_platforms() -> list:
    """
    Get list of supported platform strings.

    Returns:
        List of platform strings: macos-amd64, linux-amd64
    """
    arches = sorted(set(ARCH_TOKENS.values()))
    return [f"{os_token}-{arch}" for os_token in OS_TOKENS.values() for arch in arches]


__all__ = [
    "PlatformInfo",
    "PlatformTokens",
    "detect_platform",
    "clear_platform_cache",
    "operating_system_token",
    "architecture_token",
    "resolve_platform",
    "is_supported_platform",
    "get_supported_platforms",
]
