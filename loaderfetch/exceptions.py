"""
LoaderFetch 统一异常体系

提供分层的异常结构，支持错误代码、上下文信息和字典序列化。
所有网络与文件系统错误都会被包装为这里的类型并直接抛给调用方。
"""

from typing import Any, Dict, Optional
import aiohttp


class LoaderFetchError(Exception):
    """LoaderFetch 基础异常类"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._get_default_code()
        self.context = context or {}

    def _get_default_code(self) -> str:
        """获取默认错误代码"""
        return "E000"

    def to_dict(self) -> Dict[str, Any]:
        """将异常转换为字典格式"""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigError(LoaderFetchError):
    """配置相关错误"""

    def _get_default_code(self) -> str:
        return "E100"


class ConfigParseError(ConfigError):
    """配置解析错误"""

    def _get_default_code(self) -> str:
        return "E101"


class ConfigValidationError(ConfigError):
    """配置验证错误"""

    def _get_default_code(self) -> str:
        return "E102"


class APIError(LoaderFetchError):
    """上游接口（元数据、下载列表页）相关错误"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        response: Optional[aiohttp.ClientResponse] = None,
    ):
        super().__init__(message, code, context)
        self.response = response
        if response is not None:
            self.context["status_code"] = response.status
            self.context["url"] = str(response.url)

    def _get_default_code(self) -> str:
        return "E200"


class APINotFoundError(APIError):
    """API 资源不存在"""

    def _get_default_code(self) -> str:
        return "E404"


class APIServerError(APIError):
    """API 服务器错误"""

    def _get_default_code(self) -> str:
        return "E500"


class DownloadError(LoaderFetchError):
    """下载相关错误"""

    def _get_default_code(self) -> str:
        return "E300"


class DownloadNetworkError(DownloadError):
    """下载网络错误"""

    def _get_default_code(self) -> str:
        return "E301"


class DownloadFileError(DownloadError):
    """下载文件操作错误"""

    def _get_default_code(self) -> str:
        return "E303"


class LoaderError(LoaderFetchError):
    """加载器相关错误"""

    def _get_default_code(self) -> str:
        return "E600"


class UnknownLoaderError(LoaderError):
    """请求的加载器 ID 不在支持范围内"""

    def __init__(self, loader_id: Any):
        super().__init__(
            f'Loader "{loader_id}" could not be found',
            context={"loader_id": str(loader_id)},
        )
        self.loader_id = loader_id

    def _get_default_code(self) -> str:
        return "E601"


class InvalidVersionError(LoaderError):
    """无法为指定游戏版本解析出加载器版本"""

    def __init__(self, game_version: str):
        super().__init__(
            f"Invalid version: {game_version}",
            context={"game_version": game_version},
        )
        self.game_version = game_version

    def _get_default_code(self) -> str:
        return "E602"


__all__ = [
    # 基础异常
    "LoaderFetchError",
    # 配置异常
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    # API 异常
    "APIError",
    "APINotFoundError",
    "APIServerError",
    # 下载异常
    "DownloadError",
    "DownloadNetworkError",
    "DownloadFileError",
    # 加载器异常
    "LoaderError",
    "UnknownLoaderError",
    "InvalidVersionError",
]
