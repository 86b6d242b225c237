"""
LoaderFetch - Minecraft 加载器版本解析与安装

为 vanilla/fabric/forge/neoforge/optifine 解析可用版本、下载加载器产物，
并生成交给外部启动器的部分启动配置。
"""

from loguru import logger as _loguru_logger

from loaderfetch.models import (
    LoaderId,
    LaunchConfig,
    LoaderFetchConfig,
    VersionInfo,
    VersionManifest,
    LaunchVersion,
    MCLCLaunchConfig,
)
from loaderfetch.exceptions import (
    LoaderFetchError,
    UnknownLoaderError,
    InvalidVersionError,
)
from loaderfetch.registry import LoaderRegistry
from loaderfetch.logger import setup_logger, shutdown_logger
from loaderfetch.utils import load_config

__version__ = "0.1.0"

# 作为库使用时不输出日志，见 setup_logger
_loguru_logger.disable(__name__)

__all__ = [
    "LoaderId",
    "LaunchConfig",
    "LoaderFetchConfig",
    "VersionInfo",
    "VersionManifest",
    "LaunchVersion",
    "MCLCLaunchConfig",
    "LoaderFetchError",
    "UnknownLoaderError",
    "InvalidVersionError",
    "LoaderRegistry",
    "load_config",
    "setup_logger",
    "shutdown_logger",
]
