from campaign_console.backends.campaigns import RestCampaignCatalog
from campaign_console.backends.members import RestMemberDirectory
from campaign_console.backends.rest import RestClient
from campaign_console.backends.segments import RestSegmentCatalog


def create_backend_collaborators(
    client: RestClient | None = None,
) -> tuple[RestMemberDirectory, RestCampaignCatalog, RestSegmentCatalog]:
    """Member, campaign and segment collaborators sharing one REST client."""
    rest = client or RestClient()
    return RestMemberDirectory(rest), RestCampaignCatalog(rest), RestSegmentCatalog(rest)


__all__ = [
    "RestCampaignCatalog",
    "RestClient",
    "RestMemberDirectory",
    "RestSegmentCatalog",
    "create_backend_collaborators",
]
