"""Global search across members, campaigns and segments."""

from campaign_console.search.aggregator import GlobalSearchService, search_all
from campaign_console.search.interface import CampaignCatalog, MemberDirectory, SegmentCatalog
from campaign_console.search.models import EntityType, SearchResult, SearchResults
from campaign_console.search.session import SearchSession

__all__ = [
    "CampaignCatalog",
    "EntityType",
    "GlobalSearchService",
    "MemberDirectory",
    "SearchResult",
    "SearchResults",
    "SearchSession",
    "SegmentCatalog",
    "search_all",
]
