"""Record shapes returned by the data-access collaborators.

Rows from the hosted backend arrive in snake_case; the console's own callers
use camelCase. Both are accepted on input.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class CampaignType(StrEnum):
    SMS = "sms"
    EMAIL = "email"


class CampaignStatus(StrEnum):
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    SENDING = "sending"
    SENT = "sent"
    FAILED = "failed"
    CANCELLED = "cancelled"


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @field_validator("id", mode="before", check_fields=False)
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class MemberRecord(_Record):
    """One member as returned by member search."""

    id: str
    first_name: str | None = Field(default=None, validation_alias=AliasChoices("first_name", "firstName"))
    last_name: str | None = Field(default=None, validation_alias=AliasChoices("last_name", "lastName"))
    email: str | None = None
    phone: str | None = None
    site_name: str | None = Field(default=None, validation_alias=AliasChoices("site_name", "siteName"))

    @field_validator("site_name", mode="before")
    @classmethod
    def _flatten_site(cls, value: Any) -> Any:
        # Embedded relation: {"name": "..."}
        if isinstance(value, dict):
            return value.get("name")
        return value

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> MemberRecord:
        data = dict(row)
        if "site_name" not in data and "sites" in data:
            data["site_name"] = data.pop("sites")
        return cls.model_validate(data)


class CampaignRecord(_Record):
    id: str
    name: str
    campaign_type: CampaignType = Field(validation_alias=AliasChoices("campaign_type", "campaignType"))
    status: CampaignStatus


class SegmentRecord(_Record):
    id: str
    name: str
    description: str | None = None
    estimated_size: int = Field(default=0, validation_alias=AliasChoices("estimated_size", "estimatedSize"))

    @field_validator("estimated_size", mode="before")
    @classmethod
    def _null_size_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class MemberPage(BaseModel):
    members: list[MemberRecord] = Field(default_factory=list)
    total_count: int = 0


class CampaignPage(BaseModel):
    campaigns: list[CampaignRecord] = Field(default_factory=list)
    total_count: int = 0
