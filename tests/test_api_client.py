import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from loaderfetch.exceptions import APIError, APINotFoundError, APIServerError
from loaderfetch.models import LoaderFetchConfig
from loaderfetch.services import HttpClient


async def manifest(request):
    return web.json_response(
        {"agent": request.headers.get("User-Agent"), "versions": []}
    )


async def page(request):
    return web.Response(text="OptiFine_1.20.1_HD_U_I6", content_type="text/html")


async def not_json(request):
    return web.Response(text="<html>", content_type="text/html")


async def broken(request):
    raise web.HTTPInternalServerError()


async def forbidden(request):
    raise web.HTTPForbidden()


def make_app():
    app = web.Application()
    app.router.add_get("/manifest.json", manifest)
    app.router.add_get("/downloads", page)
    app.router.add_get("/not-json", not_json)
    app.router.add_get("/broken", broken)
    app.router.add_get("/forbidden", forbidden)
    return app


@pytest.mark.asyncio
async def test_get_json_sends_user_agent():
    async with TestServer(make_app()) as server:
        async with HttpClient(LoaderFetchConfig(user_agent="tests/1.0")) as client:
            data = await client.get_json(str(server.make_url("/manifest.json")))
    assert data == {"agent": "tests/1.0", "versions": []}


@pytest.mark.asyncio
async def test_get_text():
    async with TestServer(make_app()) as server:
        async with HttpClient() as client:
            text = await client.get_text(str(server.make_url("/downloads")))
    assert text == "OptiFine_1.20.1_HD_U_I6"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, error, code",
    [
        ("/nowhere", APINotFoundError, "E404"),
        ("/broken", APIServerError, "E500"),
        ("/forbidden", APIError, "E200"),
        ("/not-json", APIError, "E200"),
    ],
)
async def test_errors_are_typed(path, error, code):
    async with TestServer(make_app()) as server:
        async with HttpClient() as client:
            with pytest.raises(error) as exc_info:
                await client.get_json(str(server.make_url(path)))
    assert exc_info.value.code == code


@pytest.mark.asyncio
async def test_close_keeps_external_session():
    import aiohttp

    async with aiohttp.ClientSession() as session:
        client = HttpClient(session=session)
        await client.close()
        assert not session.closed
