"""
HTTP 客户端

封装 aiohttp session，统一超时、User-Agent 与错误转换。
所有加载器共享同一个客户端以复用连接。
"""

import asyncio
from typing import Any, Optional

import aiohttp
from loguru import logger

from loaderfetch.models import LoaderFetchConfig
from loaderfetch.exceptions import APIError, APINotFoundError, APIServerError


class HttpClient:
    """上游元数据与下载请求的客户端"""

    def __init__(
        self,
        config: Optional[LoaderFetchConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.config = config or LoaderFetchConfig()
        self._session = session
        self._owned_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """获取或创建 aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={"User-Agent": self.config.user_agent}
            )
            self._owned_session = True
        return self._session

    @property
    def request_timeout(self) -> aiohttp.ClientTimeout:
        """元数据请求的整体超时"""
        return aiohttp.ClientTimeout(
            total=self.config.timeout, connect=self.config.connect_timeout
        )

    @property
    def stream_timeout(self) -> aiohttp.ClientTimeout:
        """流式下载不限制总时长，只限制连接与单次读取"""
        return aiohttp.ClientTimeout(
            total=None,
            connect=self.config.connect_timeout,
            sock_read=self.config.read_timeout,
        )

    @staticmethod
    def raise_for_status(response: aiohttp.ClientResponse) -> None:
        """将非 200 状态码转换为 APIError"""
        if response.status == 200:
            return
        if response.status == 404:
            raise APINotFoundError(
                f"资源不存在: {response.url}", response=response
            )
        if response.status >= 500:
            raise APIServerError(
                f"服务器错误 (状态码: {response.status})", response=response
            )
        raise APIError(f"请求失败 (状态码: {response.status})", response=response)

    async def _request(self, url: str, params: Optional[dict], as_json: bool) -> Any:
        logger.debug(f"[请求] GET {url}")
        try:
            async with self.session.get(
                url, params=params, timeout=self.request_timeout
            ) as response:
                self.raise_for_status(response)
                if as_json:
                    return await response.json(content_type=None)
                return await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise APIError(
                f"网络请求失败: {e or type(e).__name__}", context={"url": url}
            ) from e
        except ValueError as e:
            raise APIError(f"响应不是有效的 JSON: {e}", context={"url": url}) from e

    async def get_json(self, url: str, params: Optional[dict] = None) -> Any:
        """GET 并解析 JSON"""
        return await self._request(url, params, as_json=True)

    async def get_text(self, url: str, params: Optional[dict] = None) -> str:
        """GET 并返回原始文本"""
        return await self._request(url, params, as_json=False)

    def stream(self, url: str):
        """打开流式 GET，返回可用于 async with 的响应上下文"""
        return self.session.get(url, timeout=self.stream_timeout)

    async def close(self):
        """关闭客户端"""
        if self._owned_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器出口"""
        await self.close()
