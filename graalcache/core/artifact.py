"""
Artifact location for GraalVM archives.

Renders the download URL and the cache filename of a GraalVM Community
Edition archive from placeholder patterns. Placeholders are bracketed names
(``[url]``, ``[version]``, ``[os]``, ``[arch]``) replaced literally; every
occurrence is substituted and no escaping is defined.

Example:
    >>> from graalcache.core.platform import PlatformTokens
    >>> render_url("https://example.org/graal", "19.3.1", PlatformTokens("linux", "amd64"))
    'https://example.org/graal/vm-19.3.1/graalvm-ce-linux-amd64-19.3.1.tar.gz'
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from graalcache.core.cache import artifact_path, cache_subdirectory
from graalcache.core.platform import PlatformTokens

ARTIFACT_PATTERN = "[url]/vm-[version]/graalvm-ce-[os]-[arch]-[version].tar.gz"
FILENAME_PATTERN = "graalvm-ce-[arch]-[version].tar.gz"


@dataclass(frozen=True)
class ArtifactLocation:
    """Where an artifact is downloaded from and where it is cached."""

    url: str
    filename: str
    cache_subdirectory: Path
    path: Path


def render(pattern: str, values: Mapping[str, str]) -> str:
    """
    Substitute ``[name]`` placeholders in a pattern.

    Args:
        pattern: Pattern containing bracketed placeholders
        values: Mapping from placeholder name to replacement value

    Returns:
        Rendered string

    Raises:
        ValueError: If a replacement value is empty
    """
    rendered = pattern
    for name, value in values.items():
        if not value:
            raise ValueError(f"Placeholder [{name}] has no value")
        rendered = rendered.replace(f"[{name}]", value)
    return rendered


def _placeholder_values(base_url: str, version: str, tokens: PlatformTokens) -> dict:
    return {
        "url": base_url,
        "version": version,
        "os": tokens.os,
        "arch": tokens.arch,
    }


def render_url(base_url: str, version: str, tokens: PlatformTokens) -> str:
    """Render the archive download URL."""
    return render(ARTIFACT_PATTERN, _placeholder_values(base_url, version, tokens))


def render_filename(base_url: str, version: str, tokens: PlatformTokens) -> str:
    """Render the archive filename inside the version cache directory."""
    return render(FILENAME_PATTERN, _placeholder_values(base_url, version, tokens))


def locate_artifact(config, tokens: PlatformTokens) -> ArtifactLocation:
    """
    Resolve the full location of an artifact.

    The result is derived from the configuration each time it is called and
    is not stored anywhere.

    Args:
        config: GraalConfig with version, download_base_url and cache_dir
        tokens: Resolved platform tokens

    Returns:
        ArtifactLocation for the configuration and platform
    """
    url = render_url(config.download_base_url, config.version, tokens)
    filename = render_filename(config.download_base_url, config.version, tokens)

    return ArtifactLocation(
        url=url,
        filename=filename,
        cache_subdirectory=cache_subdirectory(config.cache_dir, config.version),
        path=artifact_path(config.cache_dir, config.version, filename),
    )


__all__ = [
    "ARTIFACT_PATTERN",
    "FILENAME_PATTERN",
    "ArtifactLocation",
    "render",
    "render_url",
    "render_filename",
    "locate_artifact",
]
