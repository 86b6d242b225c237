"""
版本解析服务

两种获取策略共用同一接口：
- 清单（vanilla）：一次请求结构化 JSON 版本清单；
- 抓取（optifine 一类没有结构化 API 的加载器）：一次请求下载列表页，
  用正则从原始页面中提取版本标识。

抓取依赖上游未文档化的页面格式，页面变化只会影响 ScrapeVersionResolver。
"""

import re
from abc import ABC, abstractmethod
from typing import List, Union

from loguru import logger

from loaderfetch.models import VersionInfo, VersionManifest
from loaderfetch.services.api_client import HttpClient


class VersionResolver(ABC):
    """版本解析器基类"""

    def __init__(self, client: HttpClient):
        self.client = client

    @abstractmethod
    async def list_supported_game_versions(self) -> List[VersionInfo]:
        """列出支持的游戏版本，每次调用都会重新请求"""
        pass


class ManifestVersionResolver(VersionResolver):
    """基于官方版本清单的解析器"""

    def __init__(self, client: HttpClient, url: str):
        super().__init__(client)
        self.url = url

    async def get_version_manifest(self) -> VersionManifest:
        data = await self.client.get_json(self.url)
        manifest = VersionManifest.from_dict(data)
        logger.debug(f"[清单] 获取到 {len(manifest.versions)} 个版本")
        return manifest

    async def list_supported_game_versions(self) -> List[VersionInfo]:
        manifest = await self.get_version_manifest()
        return [
            VersionInfo(version=version.id, stable=version.type == "release")
            for version in manifest.versions
        ]


class LoaderVersionResolver(VersionResolver):
    """带有加载器版本概念的解析器"""

    @abstractmethod
    async def list_all_loader_versions(self) -> List[str]:
        """
        返回所有已知的加载器版本标识

        注意这些版本不一定适用于所有游戏版本。
        """
        pass

    async def list_loader_versions(self, game_version: str) -> List[str]:
        """
        返回包含 game_version 子串的加载器版本

        这是子串匹配而不是语义化版本匹配："1.2" 也会匹配 "1.20.1"。
        保持原始顺序，不去重。
        """
        versions = await self.list_all_loader_versions()
        return [version for version in versions if game_version in version]


class ScrapeVersionResolver(LoaderVersionResolver):
    """从上游 HTML 列表页抓取版本标识"""

    def __init__(
        self,
        client: HttpClient,
        url: str,
        pattern: Union[str, "re.Pattern[str]"],
        separator: str,
        game_version_index: int = 1,
    ):
        super().__init__(client)
        self.url = url
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.separator = separator
        self.game_version_index = game_version_index

    def parse(self, page: str) -> List[str]:
        """按页面顺序提取所有完整匹配，重复项原样保留"""
        return [match.group(0) for match in self.pattern.finditer(page)]

    async def list_all_loader_versions(self) -> List[str]:
        page = await self.client.get_text(self.url)
        versions = self.parse(page)
        if not versions:
            logger.warning(f"[抓取] 未能从 {self.url} 提取到任何版本，页面格式可能已变化")
        else:
            logger.debug(f"[抓取] 从 {self.url} 提取到 {len(versions)} 个版本标识")
        return versions

    def game_version_of(self, token: str) -> str:
        return token.split(self.separator)[self.game_version_index]

    async def list_supported_game_versions(self) -> List[VersionInfo]:
        """
        从版本标识中拆出游戏版本

        结果来自集合，顺序不保证与页面一致；上游不区分发布渠道，
        因此全部标记为 stable。
        """
        versions = await self.list_all_loader_versions()
        supported = set()
        for token in versions:
            supported.add(self.game_version_of(token))
        return [VersionInfo(version=version, stable=True) for version in supported]
