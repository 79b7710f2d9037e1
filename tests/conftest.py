# File: tests/conftest.py
from collections.abc import AsyncIterator
from typing import Callable, List

import pytest
import pytest_asyncio
from aiohttp import web

from tennis_results.config import ResultsConfig

NEXT_DATA_HTML = (
    "<html><head><title>Division 3A Result</title></head><body>"
    '<script id="__NEXT_DATA__" type="application/json">'
    '{"props": {"pageProps": {"result": {"home": "Club A"}}}, "page": "/result/[id]",'
    ' "query": {"id": "693ffbaa"}, "buildId": "abc123", "isFallback": false, "scriptLoader": []}'
    "</script></body></html>"
)
NOT_FOUND_HTML = "<html><head><title>404: Not Found</title></head><body>Missing</body></html>"
NUXT_HTML = "<html><head><title>Nuxt page</title></head><body><script>window.__NUXT__={}</script></body></html>"
BROKEN_HTML = '<html><script id="__NEXT_DATA__" type="application/json">{not json</script></html>'


@pytest.fixture()
def make_config(tmp_path) -> Callable[..., ResultsConfig]:
    """
    Factory for ResultsConfig writing into tmp_path.
    """

    def _make(sources: List[str], **overrides) -> ResultsConfig:
        params = dict(
            sources=sources,
            output_path=tmp_path / "data" / "results.json",
            user_agent="TestAgent/1.0",
        )
        params.update(overrides)
        return ResultsConfig(**params)

    return _make


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
async def results_server(unused_tcp_port: int) -> AsyncIterator[str]:
    """Test server imitating result pages of several shapes."""
    app = web.Application()

    async def handle_next(_):
        return web.Response(text=NEXT_DATA_HTML, content_type="text/html")

    async def handle_missing(_):
        return web.Response(status=404, text=NOT_FOUND_HTML, content_type="text/html")

    async def handle_nuxt(_):
        return web.Response(text=NUXT_HTML, content_type="text/html")

    async def handle_broken(_):
        return web.Response(text=BROKEN_HTML, content_type="text/html")

    async def handle_echo(request):
        # отдаёт полученные заголовки в <title>
        ua = request.headers.get("User-Agent", "")
        accept = request.headers.get("Accept", "")
        return web.Response(text=f"<title>{ua}|{accept}</title>", content_type="text/html")

    app.router.add_get("/next", handle_next)
    app.router.add_get("/missing", handle_missing)
    app.router.add_get("/nuxt", handle_nuxt)
    app.router.add_get("/broken", handle_broken)
    app.router.add_get("/echo", handle_echo)

    async for url in _serve_app(app, unused_tcp_port):
        yield url


@pytest.fixture()
def dead_url(unused_tcp_port_factory) -> str:
    """URL on a port nothing listens on."""
    return f"http://localhost:{unused_tcp_port_factory()}/gone"
