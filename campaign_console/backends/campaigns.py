"""Campaign catalog backed by the `campaigns` table."""

from campaign_console.backends.rest import RestClient, ilike_pattern
from campaign_console.contracts.records import CampaignPage, CampaignRecord
from campaign_console.search.interface import CampaignCatalog


class RestCampaignCatalog(CampaignCatalog):
    def __init__(self, client: RestClient):
        self._client = client

    async def get_campaigns(self, search_term: str, limit: int = 50) -> CampaignPage:
        params = {
            "select": "*",
            "order": "created_at.desc",
            "limit": str(limit),
        }
        term = (search_term or "").strip()
        if term:
            params["name"] = f"ilike.{ilike_pattern(term)}"

        rows, total = await self._client.select("campaigns", params, count=True)
        campaigns = [CampaignRecord.model_validate(row) for row in rows]
        return CampaignPage(campaigns=campaigns, total_count=total if total is not None else len(campaigns))
