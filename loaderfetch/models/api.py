"""
API 数据模型

定义版本清单、版本信息以及交给启动器的启动配置。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class VersionInfo:
    """游戏版本信息"""

    version: str
    stable: bool


@dataclass
class LatestVersions:
    """最新版本指针"""

    release: str
    snapshot: str


@dataclass
class ManifestVersion:
    """版本清单中的单条记录"""

    id: str
    type: str  # release, snapshot, old_beta, old_alpha
    url: str
    time: str
    release_time: str
    sha1: str
    compliance_level: int

    @classmethod
    def from_dict(cls, data: dict) -> "ManifestVersion":
        return cls(
            id=data["id"],
            type=data["type"],
            url=data.get("url", ""),
            time=data.get("time", ""),
            release_time=data.get("releaseTime", ""),
            sha1=data.get("sha1", ""),
            compliance_level=data.get("complianceLevel", 0),
        )


@dataclass
class VersionManifest:
    """
    官方版本清单。

    versions 保持上游返回的顺序。
    """

    latest: LatestVersions
    versions: List[ManifestVersion]

    @classmethod
    def from_dict(cls, data: dict) -> "VersionManifest":
        latest = data.get("latest", {})
        return cls(
            latest=LatestVersions(
                release=latest.get("release", ""),
                snapshot=latest.get("snapshot", ""),
            ),
            versions=[
                ManifestVersion.from_dict(version)
                for version in data.get("versions", [])
            ],
        )


@dataclass
class LaunchVersion:
    """启动配置中的版本部分"""

    number: str
    type: str = "release"
    custom: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"number": self.number, "type": self.type}
        if self.custom is not None:
            data["custom"] = self.custom
        return data


@dataclass
class MCLCLaunchConfig:
    """
    交给外部启动器的部分启动配置。

    extra 中的字段由具体加载器决定（例如 optifine 的 jar 路径），
    对本库而言是不透明的。
    """

    root: str
    version: LaunchVersion
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "root": self.root,
            "version": self.version.to_dict(),
        }
        data.update(self.extra)
        return data
