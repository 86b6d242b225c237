"""
配置数据模型

定义加载器 ID、启动配置输入以及库的运行设置。
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional

from loaderfetch.exceptions import ConfigValidationError


DEFAULT_USER_AGENT = "loaderfetch/0.1.0"


class LoaderId(Enum):
    """支持的加载器（封闭集合）"""

    VANILLA = "vanilla"
    FABRIC = "fabric"
    FORGE = "forge"
    NEOFORGE = "neoforge"
    OPTIFINE = "optifine"


@dataclass(frozen=True)
class LaunchConfig:
    """
    启动配置输入。

    game_version 在构建过程中不会被修改；解析出的加载器版本只存在于单次调用中。
    """

    root_path: str
    game_version: str
    loader_version: Optional[str] = None

    def __post_init__(self):
        if not self.game_version:
            raise ConfigValidationError(
                "game_version 不能为空", context={"root_path": self.root_path}
            )
        if not self.root_path:
            raise ConfigValidationError("root_path 不能为空")

    @classmethod
    def from_dict(cls, data: dict) -> "LaunchConfig":
        """从字典创建，兼容 rootPath/gameVersion/loaderVersion 写法"""
        return cls(
            root_path=data.get("root_path", data.get("rootPath", "")),
            game_version=data.get("game_version", data.get("gameVersion", "")),
            loader_version=data.get(
                "loader_version", data.get("loaderVersion")
            ),
        )


@dataclass
class LoaderFetchConfig:
    """运行设置"""

    timeout: float = 30.0
    connect_timeout: float = 10.0
    read_timeout: float = 60.0
    user_agent: str = DEFAULT_USER_AGENT
    chunk_size: int = 8192
    cleanup_partial: bool = True

    def __post_init__(self):
        for name in ("timeout", "connect_timeout", "read_timeout"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigValidationError(
                    f"{name} 必须为数字", context={name: value}
                )
            if value <= 0:
                raise ConfigValidationError(
                    f"{name} 必须大于 0", context={name: value}
                )
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int):
            raise ConfigValidationError(
                "chunk_size 必须为整数", context={"chunk_size": self.chunk_size}
            )
        if self.chunk_size <= 0:
            raise ConfigValidationError(
                "chunk_size 必须大于 0", context={"chunk_size": self.chunk_size}
            )
        if not isinstance(self.cleanup_partial, bool):
            raise ConfigValidationError(
                "cleanup_partial 必须为布尔值",
                context={"cleanup_partial": self.cleanup_partial},
            )
        if not isinstance(self.user_agent, str) or not self.user_agent:
            raise ConfigValidationError("user_agent 不能为空")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "LoaderFetchConfig":
        """从字典创建，未知字段会被拒绝"""
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(
                f"未知配置项: {', '.join(sorted(unknown))}",
                context={"unknown": sorted(unknown)},
            )
        return cls(**data)
