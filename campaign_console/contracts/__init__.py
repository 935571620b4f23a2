"""Record contracts shared between the data-access collaborators and global search."""

from campaign_console.contracts.records import (
    CampaignPage,
    CampaignRecord,
    CampaignStatus,
    CampaignType,
    MemberPage,
    MemberRecord,
    SegmentRecord,
)

__all__ = [
    "CampaignPage",
    "CampaignRecord",
    "CampaignStatus",
    "CampaignType",
    "MemberPage",
    "MemberRecord",
    "SegmentRecord",
]
