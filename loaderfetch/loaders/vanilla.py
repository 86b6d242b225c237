from typing import List

from loaderfetch.models import (
    LaunchConfig,
    LaunchVersion,
    LoaderId,
    MCLCLaunchConfig,
    VersionInfo,
    VersionManifest,
)
from loaderfetch.services.api_client import HttpClient
from loaderfetch.services.version_resolver import ManifestVersionResolver


VERSION_MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"


class VanillaLoader:
    """原版，没有加载器版本，也不需要下载任何产物"""

    loader_id = LoaderId.VANILLA
    url = "https://www.minecraft.net/"

    def __init__(self, client: HttpClient, manifest_url: str = VERSION_MANIFEST_URL):
        self.resolver = ManifestVersionResolver(client, manifest_url)

    @property
    def id(self) -> str:
        return self.loader_id.value

    async def get_mclc_launch_config(self, config: LaunchConfig) -> MCLCLaunchConfig:
        return MCLCLaunchConfig(
            root=config.root_path,
            version=LaunchVersion(number=config.game_version, type="release"),
        )

    async def get_version_manifest(self) -> VersionManifest:
        return await self.resolver.get_version_manifest()

    async def list_supported_versions(self) -> List[VersionInfo]:
        """清单中的每条记录对应一个 VersionInfo，仅 release 为 stable"""
        return await self.resolver.list_supported_game_versions()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id!r}>"
