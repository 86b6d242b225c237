"""
加载器注册表

调用方获取加载器能力的唯一入口。ID 之外的值一律抛出 UnknownLoaderError，
不会回退到任何默认加载器。
"""

from typing import Dict, List, Optional, Union

from loguru import logger

from loaderfetch.models import LoaderFetchConfig, LoaderId
from loaderfetch.exceptions import UnknownLoaderError
from loaderfetch.services.api_client import HttpClient
from loaderfetch.download.manager import ArtifactDownloader
from loaderfetch.loaders import (
    ModLoaderBase,
    VanillaLoader,
    FabricLoader,
    ForgeLoader,
    NeoForgeLoader,
    OptiFineLoader,
)

Loader = Union[ModLoaderBase, VanillaLoader]


class LoaderRegistry:
    """
    加载器注册表

    除共享的 HTTP 客户端（复用连接）外不持有可变状态，可在进程内共享。
    """

    def __init__(
        self,
        config: Optional[LoaderFetchConfig] = None,
        client: Optional[HttpClient] = None,
        downloader: Optional[ArtifactDownloader] = None,
    ):
        self.config = config or LoaderFetchConfig()
        self.client = client or HttpClient(self.config)
        self._owned_client = client is None
        self.downloader = downloader or ArtifactDownloader(self.client)
        # 遍历所有成员，缺少分支会在构造时立即失败
        self._loaders: Dict[LoaderId, Loader] = {
            loader_id: self._create(loader_id) for loader_id in LoaderId
        }

    def _create(self, loader_id: LoaderId) -> Loader:
        if loader_id is LoaderId.VANILLA:
            return VanillaLoader(self.client)
        elif loader_id is LoaderId.FABRIC:
            return FabricLoader(self.client, self.downloader)
        elif loader_id is LoaderId.FORGE:
            return ForgeLoader(self.client, self.downloader)
        elif loader_id is LoaderId.NEOFORGE:
            return NeoForgeLoader(self.client, self.downloader)
        elif loader_id is LoaderId.OPTIFINE:
            return OptiFineLoader(self.client, self.downloader)
        raise UnknownLoaderError(loader_id)

    @staticmethod
    def parse_id(loader_id: Union[str, LoaderId]) -> LoaderId:
        if isinstance(loader_id, LoaderId):
            return loader_id
        try:
            return LoaderId(loader_id)
        except (ValueError, TypeError):
            raise UnknownLoaderError(loader_id) from None

    def resolve(self, loader_id: Union[str, LoaderId]) -> Loader:
        """根据 ID 获取加载器"""
        loader = self._loaders[self.parse_id(loader_id)]
        logger.debug(f"[注册表] {loader_id} -> {loader!r}")
        return loader

    def ids(self) -> List[str]:
        return [loader_id.value for loader_id in self._loaders]

    async def close(self):
        if self._owned_client:
            await self.client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
