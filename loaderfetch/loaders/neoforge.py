from typing import Any, Dict, List, Optional

from loaderfetch.models import LoaderId, VersionInfo
from loaderfetch.loaders.base import ModLoaderBase
from loaderfetch.services.api_client import HttpClient
from loaderfetch.download.manager import ArtifactDownloader


NEOFORGE_VERSIONS_URL = (
    "https://maven.neoforged.net/api/maven/versions/releases/net/neoforged/neoforge"
)
NEOFORGE_MAVEN_URL = "https://maven.neoforged.net/releases/net/neoforged/neoforge"


def game_version_of(loader_version: str) -> Optional[str]:
    """
    NeoForge 版本号的前两段对应游戏版本

    21.1.77 -> 1.21.1，21.0.167 -> 1.21；无法识别时返回 None。
    """
    parts = loader_version.split("-")[0].split(".")
    if len(parts) < 2 or not parts[0].isdigit() or not parts[1].isdigit():
        return None
    if parts[0] == "0":
        return None
    if parts[1] == "0":
        return f"1.{parts[0]}"
    return f"1.{parts[0]}.{parts[1]}"


class NeoForgeLoader(ModLoaderBase):
    """NeoForge，版本列表来自 NeoForged Maven，从新到旧排列"""

    loader_id = LoaderId.NEOFORGE
    url = "https://neoforged.net/"

    modrinth_categories = ("neoforge",)
    curseforge_category = "6"

    artifact_file_name = "neoforge-installer.jar"

    def __init__(
        self,
        client: HttpClient,
        downloader: ArtifactDownloader,
        versions_url: str = NEOFORGE_VERSIONS_URL,
        maven_url: str = NEOFORGE_MAVEN_URL,
    ):
        super().__init__(client, downloader)
        self.versions_url = versions_url
        self.maven_url = maven_url.rstrip("/")

    async def list_all_loader_versions(self) -> List[str]:
        data = await self.client.get_json(self.versions_url)
        return list(reversed(data.get("versions", [])))

    async def list_supported_game_versions(self) -> List[VersionInfo]:
        versions = await self.list_all_loader_versions()
        supported: Dict[str, bool] = {}
        for loader_version in reversed(versions):
            game_version = game_version_of(loader_version)
            if game_version is None:
                continue
            stable = not loader_version.endswith("-beta")
            supported[game_version] = supported.get(game_version, False) or stable
        return [
            VersionInfo(version=version, stable=stable)
            for version, stable in supported.items()
        ]

    async def list_loader_versions(self, game_version: str) -> List[str]:
        versions = await self.list_all_loader_versions()
        return [
            version for version in versions if game_version_of(version) == game_version
        ]

    def artifact_url(self, game_version: str, loader_version: str) -> str:
        return (
            f"{self.maven_url}/{loader_version}/neoforge-{loader_version}-installer.jar"
        )

    def extra_launch_fields(self, artifact_path: str) -> Dict[str, Any]:
        return {"forge": artifact_path}
