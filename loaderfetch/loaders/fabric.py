from typing import List

from loaderfetch.models import LoaderId, VersionInfo
from loaderfetch.loaders.base import ModLoaderBase
from loaderfetch.services.api_client import HttpClient
from loaderfetch.download.manager import ArtifactDownloader


FABRIC_META_URL = "https://meta.fabricmc.net/v2"


class FabricLoader(ModLoaderBase):
    """Fabric，版本信息来自 Fabric Meta，产物是启动器使用的版本 JSON"""

    loader_id = LoaderId.FABRIC
    url = "https://fabricmc.net/"

    modrinth_categories = ("fabric",)
    curseforge_category = "4"

    def __init__(
        self,
        client: HttpClient,
        downloader: ArtifactDownloader,
        meta_url: str = FABRIC_META_URL,
    ):
        super().__init__(client, downloader)
        self.meta_url = meta_url.rstrip("/")

    def artifact_name(self, game_version: str, loader_version: str) -> str:
        # 启动器按 versions/<name>/<name>.json 查找自定义版本
        return f"{self.custom_version_name(game_version, loader_version)}.json"

    async def list_supported_game_versions(self) -> List[VersionInfo]:
        data = await self.client.get_json(f"{self.meta_url}/versions/game")
        return [
            VersionInfo(version=item["version"], stable=bool(item.get("stable")))
            for item in data
        ]

    async def list_loader_versions(self, game_version: str) -> List[str]:
        data = await self.client.get_json(
            f"{self.meta_url}/versions/loader/{game_version}"
        )
        return [item["loader"]["version"] for item in data]

    def artifact_url(self, game_version: str, loader_version: str) -> str:
        return (
            f"{self.meta_url}/versions/loader/{game_version}/{loader_version}"
            "/profile/json"
        )
