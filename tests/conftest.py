import os
from typing import Any, Dict, List, Optional, Tuple

import pytest

from loaderfetch.download.manager import ArtifactDownloader
from loaderfetch.exceptions import APINotFoundError
from loaderfetch.registry import LoaderRegistry
from loaderfetch.services.api_client import HttpClient


OPTIFINE_PAGE = """
<table class="downloadTable mainTable">
<tr class="downloadLine downloadLineMain">
<td class="colFile">OptiFine HD U I6</td>
<td class="colMirror"><a href="http://optifine.net/adloadx?f=OptiFine_1.20.1_HD_U_I6.jar">(Mirror)</a></td>
<td class="colChangelog"><a href="changelog?f=OptiFine_1.20.1_HD_U_I6.jar">Changelog</a></td>
</tr>
<tr class="downloadLine">
<td class="colMirror"><a href="http://optifine.net/adloadx?f=OptiFine_1.19.4_HD_U_I4.jar">(Mirror)</a></td>
</tr>
<tr class="downloadLine">
<td class="colMirror"><a href="http://optifine.net/adloadx?f=OptiFine_1.20.1_HD_U_I5.jar">(Mirror)</a></td>
</tr>
</table>
"""


class FakeClient(HttpClient):
    """按 URL 返回预设内容的客户端，不访问网络"""

    def __init__(self, responses: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.responses = dict(responses or {})
        self.calls: List[str] = []

    def _lookup(self, url: str) -> Any:
        self.calls.append(url)
        if url not in self.responses:
            raise APINotFoundError(f"资源不存在: {url}", context={"url": url})
        return self.responses[url]

    async def get_json(self, url: str, params: Optional[dict] = None) -> Any:
        return self._lookup(url)

    async def get_text(self, url: str, params: Optional[dict] = None) -> str:
        return self._lookup(url)


class FakeDownloader(ArtifactDownloader):
    """记录下载请求并写入占位内容"""

    def __init__(self, client: HttpClient):
        super().__init__(client)
        self.calls: List[Tuple[str, str]] = []

    async def download(self, file_path: str, url: str) -> str:
        self.calls.append((file_path, url))
        self.ensure_parent(file_path)
        with open(file_path, "wb") as f:
            f.write(b"artifact")
        return file_path


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def downloader(client):
    return FakeDownloader(client)


@pytest.fixture
def registry(client, downloader):
    return LoaderRegistry(client=client, downloader=downloader)


@pytest.fixture
def optifine_page():
    return OPTIFINE_PAGE


@pytest.fixture
def root_path(tmp_path):
    return os.path.join(str(tmp_path), "minecraft")
