"""
产物下载器

将远程二进制文件以流式方式写入本地路径，按需创建父目录。
不重试、不校验；同一目标路径的并发写入会被串行化。
"""

import asyncio
import os
from contextlib import asynccontextmanager
from typing import Dict, Optional, Tuple

import aiohttp
import aiofiles
from loguru import logger

from loaderfetch.services.api_client import HttpClient
from loaderfetch.exceptions import (
    APIError,
    DownloadNetworkError,
    DownloadFileError,
)


class ArtifactDownloader:
    """产物下载器"""

    def __init__(
        self,
        client: HttpClient,
        chunk_size: Optional[int] = None,
        cleanup_partial: Optional[bool] = None,
    ):
        self.client = client
        self.chunk_size = chunk_size or client.config.chunk_size
        self.cleanup_partial = (
            client.config.cleanup_partial if cleanup_partial is None else cleanup_partial
        )
        # 目标路径 -> (锁, 持有或等待该锁的调用数)
        self._locks: Dict[str, Tuple[asyncio.Lock, int]] = {}

    @asynccontextmanager
    async def _path_lock(self, file_path: str):
        """串行化同一路径的写入，最后一个使用者离开时释放条目"""
        key = os.path.abspath(file_path)
        lock, users = self._locks.get(key, (None, 0))
        if lock is None:
            lock = asyncio.Lock()
        self._locks[key] = (lock, users + 1)
        try:
            async with lock:
                yield
        finally:
            lock, users = self._locks[key]
            if users == 1:
                del self._locks[key]
            else:
                self._locks[key] = (lock, users - 1)

    @staticmethod
    def ensure_parent(file_path: str) -> None:
        """递归创建父目录，目录已存在时不报错"""
        parent = os.path.dirname(os.path.abspath(file_path))
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as e:
            raise DownloadFileError(
                f"创建目录失败: {parent}", context={"path": parent, "error": str(e)}
            ) from e

    def _discard(self, file_path: str) -> None:
        if not self.cleanup_partial or not os.path.exists(file_path):
            return
        try:
            os.remove(file_path)
            logger.debug(f"[清理] 已删除不完整的文件: {file_path}")
        except OSError as e:
            logger.warning(f"[清理] 删除不完整的文件失败 {file_path}: {e}")

    async def download(self, file_path: str, url: str) -> str:
        """
        下载单个文件

        文件写入完成（sink 关闭）后才返回；任一端出错都会抛出 DownloadError。

        Returns:
            写入的文件路径
        """
        filename = os.path.basename(file_path)

        async with self._path_lock(file_path):
            self.ensure_parent(file_path)
            logger.info(f"[开始] 下载: {filename} <- {url}")

            try:
                await self._stream_to_file(url, file_path)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise DownloadNetworkError(
                    f"下载失败: {filename}",
                    context={"url": url, "error": str(e) or type(e).__name__},
                ) from e

            logger.success(f"[完成] '{filename}' 下载完成")
            return file_path

    async def _stream_to_file(self, url: str, file_path: str) -> None:
        async with self.client.stream(url) as response:
            try:
                HttpClient.raise_for_status(response)
            except APIError as e:
                raise DownloadNetworkError(
                    f"HTTP {response.status}",
                    context={"url": url, "status": response.status},
                ) from e

            total_size = int(response.headers.get("Content-Length", 0))
            if total_size:
                logger.info(f"[信息] 文件大小: {total_size / (1024 * 1024):.2f} MB")

            try:
                async with aiofiles.open(file_path, "wb") as f:
                    async for chunk in response.content.iter_chunked(self.chunk_size):
                        await f.write(chunk)
            except (aiohttp.ClientError, asyncio.TimeoutError):
                # ClientOSError 与超时同时也是 OSError，属于网络端
                self._discard(file_path)
                raise
            except OSError as e:
                # 写入端失败时主动关闭网络流
                response.close()
                self._discard(file_path)
                raise DownloadFileError(
                    f"写入文件失败: {file_path}",
                    context={"path": file_path, "error": str(e)},
                ) from e
