"""Collaborator interfaces consumed by global search.

Implementations own all transport and storage detail. On internal failure they
either raise (the aggregator absorbs it) or return an empty page.
"""

from abc import ABC, abstractmethod

from campaign_console.contracts.records import CampaignPage, MemberPage, SegmentRecord


class MemberDirectory(ABC):
    @abstractmethod
    async def search_members(self, search_term: str, limit: int) -> MemberPage:
        """Server-side member search, at most `limit` members."""


class CampaignCatalog(ABC):
    @abstractmethod
    async def get_campaigns(self, search_term: str, limit: int) -> CampaignPage:
        """Server-side campaign lookup by name, at most `limit` campaigns."""


class SegmentCatalog(ABC):
    @abstractmethod
    async def get_segments(self) -> list[SegmentRecord]:
        """Every segment, unfiltered, in display order."""
