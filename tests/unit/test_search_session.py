import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from campaign_console.search.aggregator import GlobalSearchService
from campaign_console.search.models import EntityType, SearchResult, SearchResults
from campaign_console.search.session import SearchSession


def hit(entity_type: EntityType, id: str) -> SearchResult:
    return SearchResult(entity_type=entity_type, id=id, title=id, subtitle="", url=f"/{id}")


def make_service(search_all) -> GlobalSearchService:
    service = MagicMock(spec=GlobalSearchService)
    service.search_all = search_all
    return service


@pytest.mark.asyncio
async def test_submit_returns_flattened_groups_in_order():
    results = SearchResults(
        members=[hit(EntityType.MEMBER, "m1")],
        campaigns=[hit(EntityType.CAMPAIGN, "c1"), hit(EntityType.CAMPAIGN, "c2")],
        segments=[hit(EntityType.SEGMENT, "s1")],
    )
    session = SearchSession(make_service(AsyncMock(return_value=results)), debounce_seconds=0)

    flattened = await session.submit("acme")

    assert [r.id for r in flattened] == ["m1", "c1", "c2", "s1"]
    assert session.latest == flattened


@pytest.mark.asyncio
async def test_blank_query_clears_without_searching():
    search_all = AsyncMock(return_value=SearchResults())
    session = SearchSession(make_service(search_all), debounce_seconds=0)
    session.latest = [hit(EntityType.MEMBER, "stale")]

    assert await session.submit("   ") == []
    assert session.latest == []
    search_all.assert_not_called()


@pytest.mark.asyncio
async def test_newer_query_supersedes_pending_one():
    calls: list[str] = []

    async def search_all(query: str) -> SearchResults:
        calls.append(query)
        return SearchResults(members=[hit(EntityType.MEMBER, query)])

    session = SearchSession(make_service(search_all), debounce_seconds=0.05)

    first = asyncio.create_task(session.submit("ac"))
    await asyncio.sleep(0)
    second = await session.submit("acme")

    assert await first is None
    assert [r.id for r in second] == ["acme"]
    # The first query was still inside its debounce window, so it never ran.
    assert calls == ["acme"]
    assert [r.id for r in session.latest] == ["acme"]


@pytest.mark.asyncio
async def test_stale_in_flight_search_is_cancelled():
    release = asyncio.Event()
    cancelled: list[str] = []

    async def search_all(query: str) -> SearchResults:
        if query == "slow":
            try:
                await release.wait()
            except asyncio.CancelledError:
                cancelled.append(query)
                raise
        return SearchResults(segments=[hit(EntityType.SEGMENT, query)])

    session = SearchSession(make_service(search_all), debounce_seconds=0)

    first = asyncio.create_task(session.submit("slow"))
    await asyncio.sleep(0.01)
    second = await session.submit("fast")

    assert await first is None
    assert cancelled == ["slow"]
    assert [r.id for r in second] == ["fast"]


@pytest.mark.asyncio
async def test_close_discards_pending_search():
    session = SearchSession(make_service(AsyncMock(return_value=SearchResults())), debounce_seconds=0.05)

    pending = asyncio.create_task(session.submit("acme"))
    await asyncio.sleep(0)
    session.close()

    assert await pending is None
    assert session.latest == []
