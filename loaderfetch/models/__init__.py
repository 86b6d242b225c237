"""
LoaderFetch 数据模型包

包含配置模型和 API 模型定义。
"""

from loaderfetch.models.config import (
    LoaderId,
    LaunchConfig,
    LoaderFetchConfig,
)
from loaderfetch.models.api import (
    VersionInfo,
    LatestVersions,
    ManifestVersion,
    VersionManifest,
    LaunchVersion,
    MCLCLaunchConfig,
)

__all__ = [
    # 配置模型
    "LoaderId",
    "LaunchConfig",
    "LoaderFetchConfig",
    # API 模型
    "VersionInfo",
    "LatestVersions",
    "ManifestVersion",
    "VersionManifest",
    "LaunchVersion",
    "MCLCLaunchConfig",
]
