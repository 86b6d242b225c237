from typing import Any, Dict, List

from loaderfetch.models import LoaderId, VersionInfo
from loaderfetch.loaders.base import ModLoaderBase
from loaderfetch.services.api_client import HttpClient
from loaderfetch.download.manager import ArtifactDownloader


FORGE_METADATA_URL = (
    "https://files.minecraftforge.net/net/minecraftforge/forge/maven-metadata.json"
)
FORGE_MAVEN_URL = "https://maven.minecraftforge.net/net/minecraftforge/forge"


class ForgeLoader(ModLoaderBase):
    """
    Forge

    maven-metadata.json 的格式为 {游戏版本: ["游戏版本-加载器版本", ...]}，
    列表从旧到新排列；这里反转为从新到旧。
    """

    loader_id = LoaderId.FORGE
    url = "https://files.minecraftforge.net/"

    modrinth_categories = ("forge",)
    curseforge_category = "1"

    artifact_file_name = "forge-installer.jar"

    def __init__(
        self,
        client: HttpClient,
        downloader: ArtifactDownloader,
        metadata_url: str = FORGE_METADATA_URL,
        maven_url: str = FORGE_MAVEN_URL,
    ):
        super().__init__(client, downloader)
        self.metadata_url = metadata_url
        self.maven_url = maven_url.rstrip("/")

    async def get_metadata(self) -> Dict[str, List[str]]:
        return await self.client.get_json(self.metadata_url)

    async def list_supported_game_versions(self) -> List[VersionInfo]:
        metadata = await self.get_metadata()
        return [
            VersionInfo(version=game_version, stable="pre" not in game_version)
            for game_version in metadata
        ]

    async def list_loader_versions(self, game_version: str) -> List[str]:
        metadata = await self.get_metadata()
        prefix = f"{game_version}-"
        return [
            full_version[len(prefix):]
            for full_version in reversed(metadata.get(game_version, []))
            if full_version.startswith(prefix)
        ]

    def artifact_url(self, game_version: str, loader_version: str) -> str:
        full_version = f"{game_version}-{loader_version}"
        return f"{self.maven_url}/{full_version}/forge-{full_version}-installer.jar"

    def extra_launch_fields(self, artifact_path: str) -> Dict[str, Any]:
        return {"forge": artifact_path}
