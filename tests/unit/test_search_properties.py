from __future__ import annotations

import asyncio

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from campaign_console.contracts.records import (
    CampaignPage,
    CampaignRecord,
    CampaignStatus,
    CampaignType,
    MemberPage,
    MemberRecord,
    SegmentRecord,
)
from campaign_console.core.errors import handle_error
from campaign_console.search.aggregator import GlobalSearchService
from campaign_console.search.interface import CampaignCatalog, MemberDirectory, SegmentCatalog


class FakeMembers(MemberDirectory):
    def __init__(self, page: MemberPage | None = None, fail: bool = False):
        self.page = page or MemberPage()
        self.fail = fail
        self.calls = 0

    async def search_members(self, search_term: str, limit: int) -> MemberPage:
        self.calls += 1
        if self.fail:
            raise ConnectionError("members unavailable")
        return self.page


class FakeCampaigns(CampaignCatalog):
    def __init__(self, campaigns: list[CampaignRecord] | None = None, fail: bool = False):
        self.campaigns = campaigns or []
        self.fail = fail
        self.calls = 0

    async def get_campaigns(self, search_term: str, limit: int) -> CampaignPage:
        self.calls += 1
        if self.fail:
            raise ConnectionError("campaigns unavailable")
        return CampaignPage(campaigns=self.campaigns, total_count=len(self.campaigns))


class FakeSegments(SegmentCatalog):
    def __init__(self, segments: list[SegmentRecord] | None = None, fail: bool = False):
        self.segments = segments or []
        self.fail = fail
        self.calls = 0

    async def get_segments(self) -> list[SegmentRecord]:
        self.calls += 1
        if self.fail:
            raise ConnectionError("segments unavailable")
        return self.segments


WHITESPACE = st.text(alphabet=st.sampled_from([" ", "\t", "\n", "\r", "\x0b", "\x0c", " "]), max_size=12)
NAMES = st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=20)


@st.composite
def campaigns_strategy(draw: st.DrawFn) -> list[CampaignRecord]:
    names = draw(st.lists(NAMES, max_size=15))
    return [
        CampaignRecord(
            id=f"c{i}",
            name=name,
            campaign_type=draw(st.sampled_from(list(CampaignType))),
            status=draw(st.sampled_from(list(CampaignStatus))),
        )
        for i, name in enumerate(names)
    ]


@st.composite
def segments_strategy(draw: st.DrawFn) -> list[SegmentRecord]:
    entries = draw(st.lists(st.tuples(NAMES, st.none() | NAMES), max_size=15))
    return [
        SegmentRecord(id=f"s{i}", name=name, description=description, estimated_size=i)
        for i, (name, description) in enumerate(entries)
    ]


@given(query=WHITESPACE)
@pytest.mark.property
def test_blank_queries_never_reach_collaborators(query: str) -> None:
    members, campaigns, segments = FakeMembers(), FakeCampaigns(), FakeSegments()
    service = GlobalSearchService(members, campaigns, segments, limit=5)

    results = asyncio.run(service.search_all(query))

    assert results.members == [] and results.campaigns == [] and results.segments == []
    assert members.calls == campaigns.calls == segments.calls == 0


@settings(max_examples=50)
@given(
    query=st.text(alphabet="acmeACME xyz", min_size=1, max_size=4).filter(lambda q: q.strip()),
    campaigns=campaigns_strategy(),
    segments=segments_strategy(),
    member_count=st.integers(min_value=0, max_value=10),
)
@pytest.mark.property
def test_categories_never_exceed_cap_and_match_by_containment(
    query: str,
    campaigns: list[CampaignRecord],
    segments: list[SegmentRecord],
    member_count: int,
) -> None:
    page = MemberPage(members=[MemberRecord(id=f"m{i}") for i in range(member_count)])
    service = GlobalSearchService(
        FakeMembers(page), FakeCampaigns(campaigns), FakeSegments(segments), limit=5
    )
    term = query.strip().lower()

    results = asyncio.run(service.search_all(query))

    assert len(results.members) <= 5
    assert len(results.campaigns) <= 5
    assert len(results.segments) <= 5

    expected_campaigns = [c.id for c in campaigns if term in c.name.lower()][:5]
    assert [r.id for r in results.campaigns] == expected_campaigns

    expected_segments = [
        s.id
        for s in segments
        if term in s.name.lower() or (s.description and term in s.description.lower())
    ][:5]
    assert [r.id for r in results.segments] == expected_segments


@given(failures=st.tuples(st.booleans(), st.booleans(), st.booleans()))
@pytest.mark.property
def test_any_subset_of_failures_degrades_only_that_category(
    failures: tuple[bool, bool, bool],
) -> None:
    fail_members, fail_campaigns, fail_segments = failures
    service = GlobalSearchService(
        FakeMembers(MemberPage(members=[MemberRecord(id="m1", first_name="Acme")]), fail=fail_members),
        FakeCampaigns([CampaignRecord(id="c1", name="Acme", campaign_type="sms", status="sent")], fail=fail_campaigns),
        FakeSegments([SegmentRecord(id="s1", name="Acme fans")], fail=fail_segments),
    )

    results = asyncio.run(service.search_all("acme"))

    assert (results.members == []) is fail_members
    assert (results.campaigns == []) is fail_campaigns
    assert (results.segments == []) is fail_segments


@given(value=st.none() | st.integers() | st.floats(allow_nan=True) | st.text() | st.binary()
       | st.dictionaries(st.text(max_size=5), st.text(max_size=5) | st.integers(), max_size=3))
@pytest.mark.property
def test_handle_error_is_total_and_deterministic(value: object) -> None:
    first = handle_error(value)
    assert isinstance(first, str) and first
    assert handle_error(value) == first
