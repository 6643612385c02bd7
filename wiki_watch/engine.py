# File: wiki_watch/engine.py
"""wiki_watch.engine: orchestration of a refresh pass (fetch → extract → diff → persist → notify)."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Generic, Iterable, Optional, Type, TypeVar

from aiohttp import ClientSession, ClientTimeout

from wiki_watch.config import WatcherConfig
from wiki_watch.differ import Sink, log_difference, report_changes
from wiki_watch.fetcher import WikiFetcher
from wiki_watch.logger import logger
from wiki_watch.parser import parse_wikitext
from wiki_watch.resources import get_resource
from wiki_watch.resources.base import WikiResource
from wiki_watch.store import SnapshotStore

__all__ = ["Engine", "RefreshResult", "refresh_resources"]

W = TypeVar("W", bound=WikiResource)


@dataclass(frozen=True, slots=True)
class RefreshResult(Generic[W]):
    """Outcome of one refresh: the new snapshot and what it added."""

    current: W
    added: W


class Engine:
    """Facade for the CLI and tests: one HTTP session, one store, one sink."""

    def __init__(
        self,
        config: WatcherConfig,
        store: Optional[SnapshotStore] = None,
        sink: Sink = log_difference,
    ) -> None:
        self.config = config
        self.store = store if store is not None else SnapshotStore(config.store_dir)
        self.sink = sink
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[WikiFetcher] = None
        self._locks: Dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def __aenter__(self) -> Engine:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
        )
        self.fetcher = WikiFetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def refresh(self, resource_type: Type[W]) -> RefreshResult[W]:
        """Run one pass for *resource_type*.

        Reading the previous snapshot, writing the new one and notifying all
        happen under a per-title lock. Raises WikiError on any collaborator failure.
        """
        if self.fetcher is None:
            raise RuntimeError("Engine session not initialized")
        title = resource_type.title
        async with self._locks[title]:
            previous = self.store.get(resource_type)
            wikitext = await self.fetcher.fetch_wikitext(title)
            current = resource_type.parse(parse_wikitext(wikitext))
            logger.info("Extracted %s", title)
            self.store.set(current)
            added = report_changes(previous, current, self.sink)
        return RefreshResult(current=current, added=added)

    async def refresh_all(self, resource_types: Iterable[Type[WikiResource]]) -> Dict[str, RefreshResult]:
        """Refresh several resource types concurrently; the first failure propagates."""
        types = list(resource_types)
        results = await asyncio.gather(*(self.refresh(t) for t in types))
        return {t.title: r for t, r in zip(types, results)}


async def refresh_resources(
    config: WatcherConfig,
    titles: Optional[Iterable[str]] = None,
    sink: Sink = log_difference,
) -> Dict[str, RefreshResult]:
    """Refresh *titles* (default: ``config.resources``) and return the results per title."""
    resource_types = [get_resource(t) for t in (titles or config.resources)]
    logger.info("Refreshing %s", ", ".join(t.title for t in resource_types))
    async with Engine(config, sink=sink) as engine:
        return await engine.refresh_all(resource_types)
