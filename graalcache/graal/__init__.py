"""
GraalVM archive downloading.
"""

from .downloader import DownloadResult, GraalDownloader, download_graal

__all__ = ["DownloadResult", "GraalDownloader", "download_graal"]
