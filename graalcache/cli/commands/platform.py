"""
Platform command implementation.
"""

from graalcache.core.platform import detect_platform, resolve_platform


def run(args) -> int:
    """Print the detected host and its GraalVM vendor tokens."""
    info = detect_platform()
    tokens = resolve_platform(info)

    print(f"Host: {info}")
    print(f"  os: {tokens.os}")
    print(f"  arch: {tokens.arch}")
    return 0
