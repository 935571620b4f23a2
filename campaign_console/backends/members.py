"""Member directory backed by the `members` table."""

from campaign_console.backends.rest import RestClient, ilike_pattern
from campaign_console.contracts.records import MemberPage, MemberRecord
from campaign_console.search.interface import MemberDirectory

SEARCH_COLUMNS = ("first_name", "last_name", "email", "phone")


class RestMemberDirectory(MemberDirectory):
    def __init__(self, client: RestClient):
        self._client = client

    async def search_members(self, search_term: str, limit: int = 50) -> MemberPage:
        params = {
            "select": "*,sites(name)",
            "order": "last_name.asc",
            "limit": str(limit),
        }
        term = (search_term or "").strip()
        if term:
            pattern = ilike_pattern(term, quoted=True)
            params["or"] = "(" + ",".join(f"{col}.ilike.{pattern}" for col in SEARCH_COLUMNS) + ")"

        rows, total = await self._client.select("members", params, count=True)
        members = [MemberRecord.from_row(row) for row in rows]
        return MemberPage(members=members, total_count=total if total is not None else len(members))
