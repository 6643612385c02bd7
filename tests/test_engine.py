# File: tests/test_engine.py
"""Full refresh passes against a fake MediaWiki API."""
from __future__ import annotations

import asyncio

import pytest

from wiki_watch.engine import Engine, refresh_resources
from wiki_watch.errors import WikiError
from wiki_watch.resources import PromotionalCode, PromotionalCodes
from wiki_watch.store import SnapshotStore

NEW_ROW = "|-\n| NEWCODE || EU || Mora x500 || May 5, 2025 || Unknown\n|}\n\n== Expired =="


@pytest.mark.asyncio()
async def test_first_refresh_reports_everything_second_reports_nothing(wiki_server, make_config):
    config = make_config(wiki_server)
    seen = []

    async with Engine(config, sink=seen.append) as engine:
        first = await engine.refresh(PromotionalCodes)
        second = await engine.refresh(PromotionalCodes)

    assert len(first.current.records) == 2
    assert first.added.records == first.current.records
    assert second.added.is_empty()
    assert second.current.records == first.current.records
    assert len(seen) == 1
    assert seen[0].records == first.current.records


@pytest.mark.asyncio()
async def test_only_new_rows_are_reported(wiki_server, make_config, pages):
    config = make_config(wiki_server)
    seen = []

    async with Engine(config, sink=seen.append) as engine:
        await engine.refresh(PromotionalCodes)
        pages["Promotional_Codes"] = pages["Promotional_Codes"].replace(
            "|}\n\n== Expired ==", NEW_ROW, 1
        )
        result = await engine.refresh(PromotionalCodes)

    assert result.added.records == (
        PromotionalCode(
            code="NEWCODE", server="EU", reward="Mora x500", discovered="May 5, 2025", expires="Unknown"
        ),
    )
    assert len(result.current.records) == 3
    assert len(seen) == 2


@pytest.mark.asyncio()
async def test_snapshot_is_persisted_across_engines(wiki_server, make_config):
    config = make_config(wiki_server)
    seen = []

    async with Engine(config, sink=seen.append) as engine:
        await engine.refresh(PromotionalCodes)
    async with Engine(config, sink=seen.append) as engine:
        result = await engine.refresh(PromotionalCodes)

    assert result.added.is_empty()
    assert len(seen) == 1
    assert SnapshotStore(config.store_dir).get(PromotionalCodes).records == result.current.records


@pytest.mark.asyncio()
async def test_fetch_failure_leaves_store_untouched(wiki_server, make_config, pages):
    config = make_config(wiki_server)
    seen = []
    del pages["Promotional_Codes"]

    async with Engine(config, sink=seen.append) as engine:
        with pytest.raises(WikiError):
            await engine.refresh(PromotionalCodes)

    assert seen == []
    assert SnapshotStore(config.store_dir).get(PromotionalCodes) is None


@pytest.mark.asyncio()
async def test_concurrent_refreshes_of_one_resource_notify_once(wiki_server, make_config):
    config = make_config(wiki_server)
    seen = []

    async with Engine(config, sink=seen.append) as engine:
        results = await asyncio.gather(*(engine.refresh(PromotionalCodes) for _ in range(3)))

    assert len(seen) == 1
    assert sum(not r.added.is_empty() for r in results) == 1


@pytest.mark.asyncio()
async def test_refresh_requires_open_session(make_config):
    engine = Engine(make_config())
    with pytest.raises(RuntimeError):
        await engine.refresh(PromotionalCodes)


@pytest.mark.asyncio()
async def test_refresh_resources_defaults_to_configured_titles(wiki_server, make_config):
    seen = []
    results = await refresh_resources(make_config(wiki_server), sink=seen.append)

    assert list(results) == ["Promotional_Codes"]
    assert results["Promotional_Codes"].added.records == results["Promotional_Codes"].current.records
    assert len(seen) == 1
