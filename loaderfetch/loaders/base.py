"""
加载器能力接口

每个非 vanilla 加载器都实现相同的能力：身份信息、版本发现、启动配置构建。
vanilla 只实现身份信息和启动配置构建，没有加载器版本的概念。
"""

import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

from loaderfetch.models import LaunchConfig, LoaderId, MCLCLaunchConfig, VersionInfo
from loaderfetch.services.api_client import HttpClient
from loaderfetch.download.manager import ArtifactDownloader
from loaderfetch.orchestrator import LaunchConfigBuilder


class ModLoaderBase(ABC):
    """非 vanilla 加载器基类"""

    loader_id: LoaderId
    url: str

    # 交给外部模组子系统的元数据
    modrinth_categories: Tuple[str, ...] = ()
    curseforge_category: str = ""

    # 下载到版本目录中的文件名
    artifact_file_name: str

    def __init__(self, client: HttpClient, downloader: ArtifactDownloader):
        self.client = client
        self.downloader = downloader
        self.override_mods: Dict[str, str] = {}

    @property
    def id(self) -> str:
        return self.loader_id.value

    @abstractmethod
    async def list_supported_game_versions(self) -> List[VersionInfo]:
        """返回该加载器有发布的所有游戏版本"""
        pass

    @abstractmethod
    async def list_loader_versions(self, game_version: str) -> List[str]:
        """返回适用于指定游戏版本的加载器版本"""
        pass

    @abstractmethod
    def artifact_url(self, game_version: str, loader_version: str) -> str:
        """产物下载地址"""
        pass

    def extra_launch_fields(self, artifact_path: str) -> Dict[str, Any]:
        """追加到启动配置中的加载器专属字段"""
        return {}

    def custom_version_name(self, game_version: str, loader_version: str) -> str:
        return f"{self.id}-{game_version}-{loader_version}"

    def artifact_dir(
        self, root_path: str, game_version: str, loader_version: str
    ) -> str:
        return os.path.join(
            root_path,
            "versions",
            self.custom_version_name(game_version, loader_version),
        )

    def artifact_name(self, game_version: str, loader_version: str) -> str:
        return self.artifact_file_name

    def artifact_path(
        self, root_path: str, game_version: str, loader_version: str
    ) -> str:
        return os.path.join(
            self.artifact_dir(root_path, game_version, loader_version),
            self.artifact_name(game_version, loader_version),
        )

    async def download_artifact(
        self, file_path: str, game_version: str, loader_version: str
    ) -> str:
        """根据加载器版本构造下载地址并下载到 file_path"""
        return await self.downloader.download(
            file_path, self.artifact_url(game_version, loader_version)
        )

    async def get_mclc_launch_config(self, config: LaunchConfig) -> MCLCLaunchConfig:
        """解析加载器版本、下载产物并返回部分启动配置"""
        return await LaunchConfigBuilder(self).build(config)

    def mod_loader_info(self) -> Dict[str, Any]:
        """外部模组子系统使用的加载器元数据"""
        return {
            "overrideMods": dict(self.override_mods),
            "modrinthCategories": list(self.modrinth_categories),
            "curseforgeCategory": self.curseforge_category,
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id!r}>"
