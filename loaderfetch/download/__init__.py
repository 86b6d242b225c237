"""
LoaderFetch 下载层
"""

from loaderfetch.download.manager import ArtifactDownloader

__all__ = [
    "ArtifactDownloader",
]
