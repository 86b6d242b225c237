"""
OptiFine

OptiFine 没有结构化的 API，版本列表来自下载页面的抓取结果。
版本标识形如 OptiFine_1.20.1_HD_U_I6。
"""

from typing import Any, Dict, List

from loaderfetch.models import LoaderId, VersionInfo
from loaderfetch.loaders.base import ModLoaderBase
from loaderfetch.services.api_client import HttpClient
from loaderfetch.services.version_resolver import ScrapeVersionResolver
from loaderfetch.download.manager import ArtifactDownloader


DOWNLOADS_PAGE_URL = "https://optifine.net/downloads"
DOWNLOAD_URL = "https://optifine.net/download?f={loader_version}"
VERSION_PATTERN = r"OptiFine_(\d+\.\d+\.\d+)_HD_U_\w+"


class OptiFineLoader(ModLoaderBase):

    loader_id = LoaderId.OPTIFINE
    url = "https://optifine.net/"

    modrinth_categories = ("optifine",)
    curseforge_category = "7"

    artifact_file_name = "optifine.jar"

    def __init__(
        self,
        client: HttpClient,
        downloader: ArtifactDownloader,
        downloads_page_url: str = DOWNLOADS_PAGE_URL,
        download_url: str = DOWNLOAD_URL,
    ):
        super().__init__(client, downloader)
        self.download_url = download_url
        self.resolver = ScrapeVersionResolver(
            client, downloads_page_url, VERSION_PATTERN, separator="_"
        )

    async def list_all_loader_versions(self) -> List[str]:
        """返回所有加载器版本，注意这些版本不一定适用于所有游戏版本"""
        return await self.resolver.list_all_loader_versions()

    async def list_loader_versions(self, game_version: str) -> List[str]:
        return await self.resolver.list_loader_versions(game_version)

    async def list_supported_game_versions(self) -> List[VersionInfo]:
        return await self.resolver.list_supported_game_versions()

    def artifact_url(self, game_version: str, loader_version: str) -> str:
        return self.download_url.format(loader_version=loader_version)

    def extra_launch_fields(self, artifact_path: str) -> Dict[str, Any]:
        return {"optifine": artifact_path}
