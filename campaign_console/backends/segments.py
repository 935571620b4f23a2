"""Segment catalog backed by the `audience_segments` table. No server-side text search."""

from campaign_console.backends.rest import RestClient
from campaign_console.contracts.records import SegmentRecord
from campaign_console.search.interface import SegmentCatalog


class RestSegmentCatalog(SegmentCatalog):
    def __init__(self, client: RestClient):
        self._client = client

    async def get_segments(self) -> list[SegmentRecord]:
        rows, _ = await self._client.select(
            "audience_segments",
            {"select": "*", "order": "updated_at.desc"},
        )
        return [SegmentRecord.model_validate(row) for row in rows]
