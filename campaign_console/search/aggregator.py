"""Global search: one query, three record stores, one grouped result set.

Pipeline:
  1. Normalize the query (trim, lower-case); blank queries return immediately
  2. Fan out to members, campaigns and segments concurrently
  3. Absorb any branch failure as an empty category
  4. Filter and cap each category, reshape records into SearchResult envelopes
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

from campaign_console.contracts.records import (
    CampaignPage,
    CampaignRecord,
    MemberPage,
    MemberRecord,
    SegmentRecord,
)
from campaign_console.core.config import config
from campaign_console.core.errors import handle_error
from campaign_console.core.logger import logger
from campaign_console.observability import traceable
from campaign_console.search.interface import CampaignCatalog, MemberDirectory, SegmentCatalog
from campaign_console.search.models import EntityType, SearchResult, SearchResults

T = TypeVar("T")

SEGMENTS_URL = "/segments"


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def member_result(member: MemberRecord) -> SearchResult:
    full_name = " ".join(part for part in (member.first_name, member.last_name) if part)
    return SearchResult(
        entity_type=EntityType.MEMBER,
        id=member.id,
        title=full_name or member.email or "Unknown",
        subtitle=member.email or member.phone or member.site_name or "",
        url=f"/members/{member.id}",
    )


def campaign_result(campaign: CampaignRecord) -> SearchResult:
    return SearchResult(
        entity_type=EntityType.CAMPAIGN,
        id=campaign.id,
        title=campaign.name,
        subtitle=f"{campaign.campaign_type.upper()} - {campaign.status}",
        url=f"/campaigns/{campaign.id}",
    )


def segment_result(segment: SegmentRecord) -> SearchResult:
    # Segments have no per-item page; every hit opens the list.
    return SearchResult(
        entity_type=EntityType.SEGMENT,
        id=segment.id,
        title=segment.name,
        subtitle=segment.description or f"{segment.estimated_size} members",
        url=SEGMENTS_URL,
    )


def campaign_matches(campaign: CampaignRecord, term: str) -> bool:
    return term in campaign.name.lower()


def segment_matches(segment: SegmentRecord, term: str) -> bool:
    if term in segment.name.lower():
        return True
    return bool(segment.description) and term in segment.description.lower()


class GlobalSearchService:
    """Best-effort search across members, campaigns and segments.

    Never raises for collaborator failures: a failing or empty store both
    surface as an empty category. Holds no state between calls.
    """

    def __init__(
        self,
        members: MemberDirectory,
        campaigns: CampaignCatalog,
        segments: SegmentCatalog,
        *,
        limit: int | None = None,
    ):
        self._members = members
        self._campaigns = campaigns
        self._segments = segments
        self._limit = max(1, limit if limit is not None else config.search_category_limit)

    @property
    def limit(self) -> int:
        return self._limit

    async def _absorb(self, category: str, call: Callable[[], Awaitable[T]], default: T) -> T:
        try:
            return await call()
        except Exception as e:
            logger.search_branch_failed(category, handle_error(e))
            return default

    @traceable(name="global_search", run_type="chain")
    async def search_all(self, query: str) -> SearchResults:
        term = normalize_query(query)
        if not term:
            return SearchResults()

        logger.search_started(term)
        t0 = time.monotonic()
        member_page, campaign_page, segments = await asyncio.gather(
            self._absorb(
                "members",
                lambda: self._members.search_members(term, limit=self._limit),
                MemberPage(),
            ),
            self._absorb(
                "campaigns",
                lambda: self._campaigns.get_campaigns(term, limit=self._limit),
                CampaignPage(),
            ),
            self._absorb("segments", self._segments.get_segments, []),
        )

        # Member relevance is the directory's call; keep its order and cap.
        members = [member_result(m) for m in member_page.members[: self._limit]]
        campaigns = [
            campaign_result(c)
            for c in [c for c in campaign_page.campaigns if campaign_matches(c, term)][: self._limit]
        ]
        segment_hits = [s for s in segments if segment_matches(s, term)][: self._limit]

        results = SearchResults(
            members=members,
            campaigns=campaigns,
            segments=[segment_result(s) for s in segment_hits],
        )
        logger.search_finished(term, results.counts(), time.monotonic() - t0)
        return results


def create_default_service() -> GlobalSearchService:
    """Service wired to the hosted backend from config."""
    from campaign_console.backends import create_backend_collaborators

    members, campaigns, segments = create_backend_collaborators()
    return GlobalSearchService(members, campaigns, segments)


async def search_all(query: str) -> SearchResults:
    if not normalize_query(query):
        return SearchResults()
    return await create_default_service().search_all(query)
