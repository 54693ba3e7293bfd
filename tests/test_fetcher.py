# File: tests/test_fetcher.py
# Fetch layer tests against a local aiohttp application
from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import ClientSession, web

from robots_scout.config import FetchConfig
from robots_scout.fetcher import RobotsFetchError, RobotsFetcher, fetch_robots
from robots_scout.rules import Disallow

ROBOTS_BODY = "User-agent: *\nDisallow: /private\n\nSitemap: /sitemap.xml\n"

FAST_RETRY = FetchConfig(user_agent="TestAgent/1.0", timeout=5.0, retry_times=3, backoff_cap=0.01)


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest_asyncio.fixture
async def robots_server(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()

    async def handle_robots(request):
        if request.headers.get("User-Agent") != FAST_RETRY.user_agent:
            return web.Response(status=403)
        return web.Response(text=ROBOTS_BODY, content_type="text/plain")

    app.router.add_get("/robots.txt", handle_robots)

    async for url in _serve_app(app, unused_tcp_port):
        yield url


@pytest.mark.asyncio()
async def test_fetch_and_parse(robots_server: str):
    async with ClientSession() as session:
        doc = await RobotsFetcher(session, FAST_RETRY).fetch(robots_server + "/some/page")

    assert str(doc.host) == f"{robots_server}/"
    assert doc.agents[0].rules == (Disallow("/private"),)
    assert [str(s) for s in doc.get_sitemaps()] == [f"{robots_server}/sitemap.xml"]
    assert not doc.is_allowed(f"{robots_server}/private/x", "TestAgent/1.0")


@pytest.mark.asyncio()
async def test_fetch_robots_convenience(robots_server: str):
    doc = await fetch_robots(robots_server, FAST_RETRY)
    assert doc.is_allowed("/public", "TestAgent/1.0")


@pytest.mark.asyncio()
async def test_redirect_resets_host_path(unused_tcp_port: int):
    app = web.Application()

    async def handle_robots(_):
        raise web.HTTPFound("/moved/robots.txt")

    async def handle_moved(_):
        return web.Response(text=ROBOTS_BODY, content_type="text/plain")

    app.router.add_get("/robots.txt", handle_robots)
    app.router.add_get("/moved/robots.txt", handle_moved)

    async for base in _serve_app(app, unused_tcp_port):
        doc = await fetch_robots(base, FAST_RETRY)

    assert doc.host.path == "/"
    assert str(doc.robots_url()) == f"{base}/robots.txt"


@pytest.mark.asyncio()
async def test_not_found_is_surfaced(unused_tcp_port: int):
    app = web.Application()

    async for base in _serve_app(app, unused_tcp_port):
        with pytest.raises(RobotsFetchError) as excinfo:
            await fetch_robots(base, FAST_RETRY)

    assert "HTTP 404" in str(excinfo.value)
    assert excinfo.value.url == f"{base}/robots.txt"


@pytest.mark.asyncio()
async def test_retry_on_server_error(unused_tcp_port: int):
    app = web.Application()
    call_count = {"n": 0}

    async def flaky(_):
        call_count["n"] += 1
        if call_count["n"] <= 2:
            return web.Response(status=503)
        return web.Response(text=ROBOTS_BODY, content_type="text/plain")

    app.router.add_get("/robots.txt", flaky)

    async for base in _serve_app(app, unused_tcp_port):
        doc = await fetch_robots(base, FAST_RETRY)

    assert call_count["n"] == 3
    assert len(doc.agents) == 1


@pytest.mark.asyncio()
async def test_retries_exhausted(unused_tcp_port: int):
    app = web.Application()
    call_count = {"n": 0}

    async def broken(_):
        call_count["n"] += 1
        return web.Response(status=500)

    app.router.add_get("/robots.txt", broken)
    config = FAST_RETRY.model_copy(update={"retry_times": 1})

    async for base in _serve_app(app, unused_tcp_port):
        with pytest.raises(RobotsFetchError):
            await fetch_robots(base, config)

    assert call_count["n"] == 2
