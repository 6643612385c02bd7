# wiki_watch/fetcher.py
"""
Fetcher module: downloads the current wikitext of a page through the MediaWiki
API, with retry/backoff on transient failures.
"""
from __future__ import annotations

import asyncio
import random
from typing import Any, Dict, Sequence

from aiohttp import ClientError, ClientSession

from wiki_watch.config import WatcherConfig
from wiki_watch.errors import WikiError
from wiki_watch.logger import logger


def _query_params(title: str) -> Dict[str, str]:
    return {
        "action": "query",
        "prop": "revisions",
        "titles": title,
        "rvslots": "*",
        "rvprop": "content",
        "formatversion": "2",
        "format": "json",
    }


def extract_wikitext(payload: Any) -> str:
    """Pull the main-slot content of the first page out of an API response."""
    try:
        content = payload["query"]["pages"][0]["revisions"][0]["slots"]["main"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise WikiError(f"No page content in API response ({exc!r})") from exc
    if not isinstance(content, str):
        raise WikiError(f"Page content is {type(content).__name__}, expected a string")
    return content


class WikiFetcher:
    """Fetches page wikitext with retries/backoff; raises WikiError on failure."""

    _RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)

    def __init__(self, session: ClientSession, config: WatcherConfig) -> None:
        self.session = session
        self.config = config

    async def fetch_wikitext(self, title: str) -> str:
        """Return the raw wikitext of page *title*."""
        url = str(self.config.api_url)
        params = _query_params(title)
        attempts = 0
        while True:
            try:
                async with self.session.get(url, params=params) as resp:
                    if resp.status in self._RETRY_STATUS:
                        raise ClientError(f"retryable status {resp.status}")
                    if resp.status != 200:
                        raise WikiError(f"{title}: HTTP {resp.status} from {url}")
                    try:
                        payload = await resp.json(content_type=None)
                    except ValueError as exc:
                        raise WikiError(f"{title}: malformed JSON from {url}") from exc
                    logger.debug("Fetched %s from %s", title, url)
                    return extract_wikitext(payload)
            except (ClientError, asyncio.TimeoutError) as exc:
                attempts += 1
                if attempts > self.config.retry_times:
                    logger.warning("Failed to fetch %s: %s", title, exc)
                    raise WikiError(f"{title}: fetch failed after {attempts} attempt(s): {exc}") from exc
                backoff = min(60.0, self.config.retry_backoff * (2**attempts + random.random()))
                logger.debug(
                    "Retry %d/%d for %s after %.2f s", attempts, self.config.retry_times, title, backoff
                )
                await asyncio.sleep(backoff)


__all__ = ["WikiFetcher", "extract_wikitext"]
