# File: tests/conftest.py
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Dict

import pytest
import pytest_asyncio
from aiohttp import web

from wiki_watch.config import WatcherConfig

PROMO_WIKITEXT = """\
Codes can be redeemed in game or on the website.

== Available ==
{| class="wikitable sortable"
! Code !! Server !! Reward !! Discovered !! Expires
|-
| GENSHINGIFT || All || [[Primogem]]s x50<br>[[Mora]] x10000 || March 1, 2021 || Indefinite
|-
| ABC123 || [[Server#Asia|Asia]] || [[Primogem|Primogems]] x5 || April 2, 2024 || Unknown
|}

== Expired ==
{| class="wikitable"
! Code !! Server !! Reward
|-
| OLDCODE || All || Mora x10000
|}
"""


def api_payload(content: str) -> dict:
    """MediaWiki ``formatversion=2`` response carrying *content* as page wikitext."""
    return {
        "batchcomplete": True,
        "query": {
            "pages": [
                {
                    "pageid": 1,
                    "ns": 0,
                    "title": "Promotional Codes",
                    "revisions": [{"slots": {"main": {"contentmodel": "wikitext", "content": content}}}],
                }
            ]
        },
    }


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield its base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def pages() -> Dict[str, str]:
    """Wikitext served per page title by :func:`wiki_server`; tests may mutate it."""
    return {"Promotional_Codes": PROMO_WIKITEXT}


@pytest.fixture()
def requests_seen() -> list:
    return []


@pytest_asyncio.fixture
async def wiki_server(unused_tcp_port: int, pages, requests_seen) -> AsyncIterator[str]:
    """A fake ``api.php`` answering revision queries from :func:`pages`."""
    app = web.Application()

    async def handle_api(request: web.Request):
        requests_seen.append(dict(request.query))
        title = request.query.get("titles", "")
        if title not in pages:
            return web.json_response({"query": {"pages": [{"title": title, "missing": True}]}})
        return web.json_response(api_payload(pages[title]))

    app.router.add_get("/api.php", handle_api)

    async for url in serve_app(app, unused_tcp_port):
        yield url


@pytest.fixture()
def make_config(tmp_path: Path):
    """Build a WatcherConfig pointed at *base_url* with a temporary store."""

    def _make(base_url: str = "http://localhost:1", **overrides) -> WatcherConfig:
        values = dict(
            api_url=f"{base_url}/api.php",
            timeout=2.0,
            user_agent="TestAgent/1.0",
            retry_times=0,
            retry_backoff=0.0,
            store_dir=tmp_path / "store",
        )
        values.update(overrides)
        return WatcherConfig(**values)

    return _make


@pytest.fixture()
def serve():
    """The :func:`serve_app` helper, for tests building their own server."""
    return serve_app


@pytest.fixture()
def payload():
    """The :func:`api_payload` helper."""
    return api_payload
