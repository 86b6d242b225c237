"""
启动配置构建器

编排加载器版本解析与产物下载，组装交给外部启动器的启动配置。
"""

from typing import TYPE_CHECKING

from loguru import logger

from loaderfetch.models import LaunchConfig, LaunchVersion, MCLCLaunchConfig
from loaderfetch.exceptions import InvalidVersionError

if TYPE_CHECKING:
    from loaderfetch.loaders.base import ModLoaderBase


class LaunchConfigBuilder:
    """单次构建不保留任何状态，每次调用都会重新解析和下载"""

    def __init__(self, loader: "ModLoaderBase"):
        self.loader = loader

    async def resolve_loader_version(self, config: LaunchConfig) -> str:
        """
        确定本次构建使用的加载器版本

        未指定时取 list_loader_versions 的第一个元素，
        该顺序由版本解析器决定，不保证是最新版本。
        """
        loader_version = config.loader_version
        if not loader_version:
            versions = await self.loader.list_loader_versions(config.game_version)
            loader_version = versions[0] if versions else None

        if not loader_version:
            raise InvalidVersionError(config.game_version)
        return loader_version

    async def build(self, config: LaunchConfig) -> MCLCLaunchConfig:
        loader_version = await self.resolve_loader_version(config)
        logger.info(
            f"[解析] {self.loader.id} {config.game_version} -> {loader_version}"
        )

        artifact_path = self.loader.artifact_path(
            config.root_path, config.game_version, loader_version
        )
        await self.loader.download_artifact(
            artifact_path, config.game_version, loader_version
        )

        return MCLCLaunchConfig(
            root=config.root_path,
            version=LaunchVersion(
                number=config.game_version,
                type="release",
                custom=self.loader.custom_version_name(
                    config.game_version, loader_version
                ),
            ),
            extra=self.loader.extra_launch_fields(artifact_path),
        )
