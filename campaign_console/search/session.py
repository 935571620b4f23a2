"""Debounced, latest-query-wins wrapper around GlobalSearchService for interactive callers.

GlobalSearchService.search_all never cancels anything on its own. A command
palette issues a query per keystroke, so this layer waits out a debounce window,
cancels the superseded search, and drops results that arrive for a stale query.
"""

import asyncio

from campaign_console.core.config import config
from campaign_console.search.aggregator import GlobalSearchService, normalize_query
from campaign_console.search.models import SearchResult


class SearchSession:
    def __init__(self, service: GlobalSearchService, *, debounce_seconds: float | None = None):
        self._service = service
        self._debounce = max(
            0.0,
            debounce_seconds if debounce_seconds is not None else config.search_debounce_seconds,
        )
        self._generation = 0
        self._pending: asyncio.Task[list[SearchResult]] | None = None
        self.latest: list[SearchResult] = []

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    async def _run(self, query: str) -> list[SearchResult]:
        await asyncio.sleep(self._debounce)
        results = await self._service.search_all(query)
        return results.flatten()

    async def submit(self, query: str) -> list[SearchResult] | None:
        """Search for `query`; None if a newer submit superseded this one."""
        self._generation += 1
        generation = self._generation
        self._cancel_pending()

        if not normalize_query(query):
            self.latest = []
            return []

        task = asyncio.ensure_future(self._run(query))
        self._pending = task
        try:
            results = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                return None
            raise
        if generation != self._generation:
            return None
        self.latest = results
        return results

    def close(self) -> None:
        self._generation += 1
        self._cancel_pending()
