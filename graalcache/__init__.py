"""
graalcache - download and cache GraalVM Community Edition archives.
"""

__version__ = "0.1.0"
