"""Uniform result envelope and grouped response for global search."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EntityType(StrEnum):
    MEMBER = "member"
    CAMPAIGN = "campaign"
    SEGMENT = "segment"


class SearchResult(BaseModel):
    """One UI-ready hit, identical in shape whatever entity it came from."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    entity_type: EntityType = Field(description="member, campaign or segment")
    id: str = Field(description="Unique within its entity type only")
    title: str = Field(description="Primary display label")
    subtitle: str = Field(default="", description="Secondary display label")
    url: str = Field(description="Navigation target")


class SearchResults(BaseModel):
    """Three independent groups; never interleaved, never missing."""

    members: list[SearchResult] = Field(default_factory=list)
    campaigns: list[SearchResult] = Field(default_factory=list)
    segments: list[SearchResult] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.members or self.campaigns or self.segments)

    def counts(self) -> dict[str, int]:
        return {
            "members": len(self.members),
            "campaigns": len(self.campaigns),
            "segments": len(self.segments),
        }

    def flatten(self) -> list[SearchResult]:
        """Members, then campaigns, then segments, each group kept contiguous."""
        return [*self.members, *self.campaigns, *self.segments]
