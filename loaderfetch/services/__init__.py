"""
LoaderFetch 服务层

包含 HTTP 客户端与版本解析策略。
"""

from loaderfetch.services.api_client import HttpClient
from loaderfetch.services.version_resolver import (
    VersionResolver,
    ManifestVersionResolver,
    LoaderVersionResolver,
    ScrapeVersionResolver,
)

__all__ = [
    "HttpClient",
    "VersionResolver",
    "ManifestVersionResolver",
    "LoaderVersionResolver",
    "ScrapeVersionResolver",
]
